"""
llm_config.py — LLM Settings for Script Generation
==================================================
Script generation must be deterministic: the output is code.
"""

# ── Script Generation ──────────────────────────────────────────────────────────
LLM_SCRIPT_TEMPERATURE = 0.1
LLM_SCRIPT_MAX_TOKENS  = 1200
