"""
vendors/__init__.py
====================
Public surface of the vendors package.

    from ...vendors import ChatService   ← switches via AI_PROVIDER in .env
    service = ChatService()

ChatService is the factory function, not a class — calling it returns the
provider-specific instance.
"""

from .factory import get_chat_service

ChatService = get_chat_service
