""" OpenAI Client Configuration... """

# Python Packages
from openai import OpenAI

# Constants
from ...base import constants





class OpenAIClient:
    """ Singleton OpenAI client for the application... """

    _instance = None
    _client = None

    def __new__(cls):
        if cls._instance is None:
            if not constants.OPENAI_API_KEY:
                raise RuntimeError(
                    "OpenAI client not initialized. Set OPENAI_API_KEY in your .env file."
                )
            cls._instance = super(OpenAIClient, cls).__new__(cls)
            cls._client = OpenAI(api_key = constants.OPENAI_API_KEY)
        return cls._instance


    def get_client(self) -> OpenAI:
        """ Get the OpenAI client instance... """

        return self._client
