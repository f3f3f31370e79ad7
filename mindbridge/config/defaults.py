"""mindbridge.config.defaults
==========================

Central place for small, stable default values used by the config loader,
the adapters, and the MCP server. No I/O happens here.
"""

from __future__ import annotations

# ---- Server identity ----
SERVER_NAME = "mindbridge"
SERVER_VERSION = "1.2.0"

# ---- Request defaults ----
MAX_TOKENS_DEFAULT = 1024

# ---- Provider base URLs ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"
GOOGLE_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OLLAMA_DEFAULT_HOST = "http://localhost:11434"

# ---- OpenRouter attribution headers ----
OPENROUTER_REFERER = "https://pinkpixel.dev"
OPENROUTER_TITLE = "SecondOpinion MCP"

# ---- Google sampling defaults (used when the request leaves them unset) ----
GOOGLE_DEFAULT_TOP_K = 40
GOOGLE_DEFAULT_TOP_P = 0.95

# ---- Anthropic extended-thinking budgets ----
ANTHROPIC_THINKING_BUDGETS = {
    "low": 4000,
    "medium": 16000,
    "high": 32000,
}

__all__ = [
    "SERVER_NAME",
    "SERVER_VERSION",
    "MAX_TOKENS_DEFAULT",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "GOOGLE_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_HOST",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "GOOGLE_DEFAULT_TOP_K",
    "GOOGLE_DEFAULT_TOP_P",
    "ANTHROPIC_THINKING_BUDGETS",
]
