"""Dexter console.

In-memory state for a research console: the chat log, LLM provider
settings and A2A agent cards.
"""

__version__ = "0.1.0"
