"""llmclient.config.defaults
========================

Small, stable default values for the configuration layer. Only plain
constants live here so the module can be imported from anywhere without
creating cycles.
"""

from __future__ import annotations

# Environment variable pointing at an optional JSON or YAML config file.
CONFIG_FILE_ENV = "LLMCLIENT_CONFIG_FILE"

# Provider used by the command line when none is given.
CLI_DEFAULT_PROVIDER = "pollinations"

# Default model per built-in provider; requests without a model use these.
OLLAMA_DEFAULT_MODEL = "llama3.2"
POLLINATIONS_DEFAULT_MODEL = "openai"
OPENROUTER_DEFAULT_MODEL = "openrouter/auto"


__all__ = [
    "CONFIG_FILE_ENV",
    "CLI_DEFAULT_PROVIDER",
    "OLLAMA_DEFAULT_MODEL",
    "POLLINATIONS_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_MODEL",
]
