""" OpenAI Chat/Completion Service... """

# Python Packages
import logging
from typing import List, Dict

# Client
from .openai_client import OpenAIClient

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class ChatService:
    """ Service for chat completions using OpenAI... """

    def __init__(self):
        self.client = OpenAIClient().get_client()
        self.default_model = constants.OPENAI_DEFAULT_MODEL


    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.2,
        max_tokens: int = 1024
    ) -> str:
        """
        Generate a chat completion response

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use
            temperature: Sampling temperature (0-2)
            max_tokens: Maximum tokens in response

        Returns:
            Generated response text
        """

        try:
            response = self.client.chat.completions.create(
                model = model or self.default_model,
                messages = messages,
                temperature = temperature,
                max_tokens = max_tokens
            )
            return response.choices[0].message.content

        except Exception as e:
            logger.error("❌ OpenAI error generating response: %s", e)
            raise
