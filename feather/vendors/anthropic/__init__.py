""" Anthropic Vendor Package (logic script authoring)... """

# Services
from .anthropic_client import AnthropicClient
from .chat_service import ChatService, split_messages

__all__ = ['AnthropicClient', 'ChatService', 'split_messages']
