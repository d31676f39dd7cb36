"""Core components package.

This package contains the state stores and the session coordinator of the
Dexter console.
"""

from .agent_cards import AgentCardRegistry
from .conversation import AgentResponder, ConversationStore, PlaceholderResponder
from .ids import (
    CounterIdGenerator,
    IdGenerator,
    UuidIdGenerator,
    create_id_generator,
)
from .providers import ProviderRegistry
from .registry import EntityRegistry
from .seeds import SeedData, default_seed, load_seed_file, welcome_message
from .session import SessionView

__all__ = [
    # Ids
    "IdGenerator",
    "UuidIdGenerator",
    "CounterIdGenerator",
    "create_id_generator",
    # Stores
    "ConversationStore",
    "AgentResponder",
    "PlaceholderResponder",
    "EntityRegistry",
    "ProviderRegistry",
    "AgentCardRegistry",
    # Seeds
    "SeedData",
    "default_seed",
    "load_seed_file",
    "welcome_message",
    # Coordinator
    "SessionView",
]
