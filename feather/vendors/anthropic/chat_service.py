"""
vendors/anthropic/chat_service.py
===================================
ChatService implementation using Anthropic Claude models.

Implements the same interface as vendors/openai/chat_service.py so the
factory can swap providers transparently.

Anthropic takes the system prompt as a top-level parameter and messages
must only contain "user" and "assistant" roles. Callers always pass the
OpenAI-style list (system role inside messages); this service splits it.
"""

# Python Packages
import logging
from typing import List, Dict

# Client
from .anthropic_client import AnthropicClient

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class ChatService:
    """
    Anthropic Claude implementation of ChatService.
    """

    def __init__(self):
        self.client        = AnthropicClient().get_client()
        self.default_model = constants.ANTHROPIC_DEFAULT_MODEL


    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.2,
        max_tokens: int = 1024
    ) -> str:
        """
        Generate a response using the Anthropic Claude API.

        Args:
            messages:    List of message dicts with 'role' and 'content'.
            model:       Claude model string. Defaults to ANTHROPIC_DEFAULT_MODEL.
            temperature: Sampling temperature (0.0 – 1.0).
            max_tokens:  Maximum tokens in response.

        Returns:
            Generated response text as a string.
        """

        try:
            system_prompt, conversation = split_messages(messages)

            kwargs = dict(
                model       = model or self.default_model,
                max_tokens  = max_tokens,
                temperature = temperature,
                messages    = conversation,
            )

            # Only pass system when present
            if system_prompt:
                kwargs["system"] = system_prompt

            response = self.client.messages.create(**kwargs)
            return response.content[0].text

        except Exception as e:
            logger.error("❌ Anthropic error generating response: %s", e)
            raise





def split_messages(messages: List[Dict[str, str]]):
    """
    Split OpenAI-style messages into Anthropic format.

    Returns:
        (system_prompt: str, conversation: List[Dict])

    Rules:
      - System messages before any user/assistant turn form the top-level prompt.
      - Later system messages are prepended to the next user message.
    """
    system_parts   = []
    conversation   = []
    pending_system = []

    for msg in messages:
        role    = msg.get("role", "user")
        content = msg.get("content", "")

        if role == "system":
            if not conversation:
                system_parts.append(content)
            else:
                pending_system.append(content)

        elif role in ("user", "assistant"):
            if pending_system and role == "user":
                content = "\n\n".join(pending_system) + "\n\n" + content
                pending_system = []
            conversation.append({"role": role, "content": content})

    return "\n\n".join(system_parts), conversation
