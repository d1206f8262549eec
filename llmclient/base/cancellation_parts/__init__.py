"""Cancellation implementation parts; import from ``llmclient.base.cancellation``."""
