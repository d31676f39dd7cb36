"""Shared test configuration and fixtures."""

import pytest

from dexter_console.core import (
    AgentCardRegistry,
    ConversationStore,
    CounterIdGenerator,
    ProviderRegistry,
    SeedData,
    SessionView,
    default_seed,
)


@pytest.fixture
def id_generator() -> CounterIdGenerator:
    """Deterministic id generator fixture."""
    return CounterIdGenerator("id")


@pytest.fixture
def seed() -> SeedData:
    """Built-in seed data fixture."""
    return default_seed()


@pytest.fixture
def conversation(id_generator: CounterIdGenerator, seed: SeedData) -> ConversationStore:
    """ConversationStore seeded with the welcome message."""
    return ConversationStore(id_generator, messages=seed.messages)


@pytest.fixture
def providers(seed: SeedData) -> ProviderRegistry:
    """ProviderRegistry seeded with the stock providers."""
    return ProviderRegistry(seed.providers)


@pytest.fixture
def agent_cards(id_generator: CounterIdGenerator, seed: SeedData) -> AgentCardRegistry:
    """AgentCardRegistry seeded with the stock cards."""
    return AgentCardRegistry(id_generator, seed.agent_cards)


@pytest.fixture
def session(
    conversation: ConversationStore,
    providers: ProviderRegistry,
    agent_cards: AgentCardRegistry,
) -> SessionView:
    """SessionView wired to the seeded stores."""
    return SessionView(conversation, providers, agent_cards, session_id="test-session")
