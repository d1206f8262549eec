"""Base shared constants for llmclient.

Central location for endpoint URLs, header values and protocol sentinels so
strategies and collaborators do not scatter literals.
"""
from __future__ import annotations

# ---- Chat endpoints ----
OLLAMA_DEFAULT_URL = "http://localhost:11434/v1/chat/completions"
POLLINATIONS_CHAT_URL = "https://gen.pollinations.ai/v1/chat/completions"
# Keyless streaming goes to the public OpenAI-compatible text endpoint.
POLLINATIONS_FREE_CHAT_URL = "https://text.pollinations.ai/openai"
OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"

# ---- Pollinations media & account endpoints ----
POLLINATIONS_BASE_URL = "https://gen.pollinations.ai"
POLLINATIONS_IMAGE_URL = f"{POLLINATIONS_BASE_URL}/image/"
POLLINATIONS_AUDIO_URL = f"{POLLINATIONS_BASE_URL}/audio/"
POLLINATIONS_TRANSCRIPTION_URL = f"{POLLINATIONS_BASE_URL}/v1/audio/transcriptions"
POLLINATIONS_TEXT_MODELS_URL = f"{POLLINATIONS_BASE_URL}/text/models"
POLLINATIONS_BALANCE_URL = f"{POLLINATIONS_BASE_URL}/account/balance"
POLLINATIONS_PROFILE_URL = f"{POLLINATIONS_BASE_URL}/account/profile"
POLLINATIONS_USAGE_URL = f"{POLLINATIONS_BASE_URL}/account/usage"

# ---- Provider-specific headers ----
# Attached to every request whose URL contains this hostname substring.
OPENROUTER_HOST_MARKER = "openrouter"
OPENROUTER_REFERER = "https://github.com/llmclient"
OPENROUTER_TITLE = "LLMClient"

# ---- Server-sent events ----
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"
SSE_ACCEPT = "text/event-stream"

__all__ = [
    "OLLAMA_DEFAULT_URL",
    "POLLINATIONS_CHAT_URL",
    "POLLINATIONS_FREE_CHAT_URL",
    "OPENROUTER_CHAT_URL",
    "POLLINATIONS_BASE_URL",
    "POLLINATIONS_IMAGE_URL",
    "POLLINATIONS_AUDIO_URL",
    "POLLINATIONS_TRANSCRIPTION_URL",
    "POLLINATIONS_TEXT_MODELS_URL",
    "POLLINATIONS_BALANCE_URL",
    "POLLINATIONS_PROFILE_URL",
    "POLLINATIONS_USAGE_URL",
    "OPENROUTER_HOST_MARKER",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "SSE_ACCEPT",
]
