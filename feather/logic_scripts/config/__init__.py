"""
logic_scripts/config/__init__.py
================================
Public surface of the logic script configuration package.

Config files:
  keywords    — keyword lists for chat intent detection
  prompts     — system prompt and templates for script generation
  llm_config  — LLM temperature & max_tokens for script generation
"""

from . import keywords
from . import prompts
from . import llm_config
