"""Test suite for llmclient."""
