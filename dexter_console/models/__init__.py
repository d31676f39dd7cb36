"""Data models package.

This module defines all data models used by the Dexter console.
"""

from .agent_card import NEW_CARD_DEFAULTS, AgentCard, AgentCardPatch
from .message import Message, MessageRole
from .patch import EntityPatch
from .provider import ProviderConfig, ProviderPatch
from .session import SessionSnapshot, ViewMode

__all__ = [
    # Message models
    "Message",
    "MessageRole",
    # Provider models
    "ProviderConfig",
    "ProviderPatch",
    # Agent card models
    "AgentCard",
    "AgentCardPatch",
    "NEW_CARD_DEFAULTS",
    # Patch base
    "EntityPatch",
    # Session models
    "SessionSnapshot",
    "ViewMode",
]
