"""Seed data - the initial contents of a fresh console session.

Built-in seeds reproduce the stock console; a YAML file can replace any of
the three collections.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from dexter_console.models import AgentCard, Message, MessageRole, ProviderConfig
from dexter_console.utils.config import DEFAULT_WELCOME_MESSAGE
from dexter_console.utils.exceptions import SeedLoadError
from dexter_console.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PROVIDERS: list[dict[str, Any]] = [
    {
        "id": "openai",
        "name": "OpenAI",
        "base_url": "https://api.openai.com",
        "enabled": True,
    },
    {
        "id": "anthropic",
        "name": "Anthropic",
        "base_url": "https://api.anthropic.com",
    },
    {
        "id": "google",
        "name": "Google Gemini",
        "base_url": "https://generativelanguage.googleapis.com",
    },
    {
        "id": "openrouter",
        "name": "OpenRouter",
        "base_url": "https://openrouter.ai/api",
    },
    {
        "id": "ollama",
        "name": "Ollama (Local)",
        "base_url": "http://127.0.0.1:11434",
    },
]

DEFAULT_AGENT_CARDS: list[dict[str, Any]] = [
    {
        "id": "a2a-1",
        "name": "Dexter Research Lead",
        "description": "Coordinates deep financial research and tool orchestration.",
        "primary_model": "gpt-5.2",
        "skills": "Financial search, SEC filings, valuation summaries",
        "contact": "agent://dexter/lead",
        "enabled": True,
    },
    {
        "id": "a2a-2",
        "name": "Market Pulse Scout",
        "description": "Tracks catalysts, earnings moves, and market sentiment.",
        "primary_model": "claude-3.5-sonnet",
        "skills": "Web search, sentiment tagging, event briefs",
        "contact": "agent://dexter/market",
        "enabled": False,
    },
]


class SeedData(BaseModel):
    """Initial messages, providers and agent cards for a session."""

    messages: list[Message] = Field(default_factory=list)
    providers: list[ProviderConfig] = Field(default_factory=list)
    agent_cards: list[AgentCard] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_unique_ids(self) -> SeedData:
        for label, items in (
            ("message", self.messages),
            ("provider", self.providers),
            ("agent card", self.agent_cards),
        ):
            seen: set[str] = set()
            for item in items:
                if item.id in seen:
                    raise ValueError(f"Duplicate {label} id: {item.id}")
                seen.add(item.id)
        return self


def welcome_message(content: str = DEFAULT_WELCOME_MESSAGE) -> Message:
    """The greeting every fresh conversation starts with."""
    return Message(id="m1", role=MessageRole.AGENT, content=content)


def default_seed(welcome: str = DEFAULT_WELCOME_MESSAGE) -> SeedData:
    """Built-in seed data."""
    return SeedData(
        messages=[welcome_message(welcome)],
        providers=[ProviderConfig(**data) for data in DEFAULT_PROVIDERS],
        agent_cards=[AgentCard(**data) for data in DEFAULT_AGENT_CARDS],
    )


def load_seed_file(
    path: str | Path, welcome: str = DEFAULT_WELCOME_MESSAGE
) -> SeedData:
    """Load seed data from a YAML file.

    Top-level keys ``messages``, ``providers`` and ``agent_cards`` each
    replace the matching built-in collection; missing keys keep the default.

    Args:
        path: Path to the YAML file.
        welcome: Greeting used when the file has no ``messages`` key.

    Returns:
        The merged seed data.

    Raises:
        SeedLoadError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)

    if not path.exists():
        raise SeedLoadError("Seed file not found", str(path))

    if not path.is_file():
        raise SeedLoadError("Path is not a file", str(path))

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SeedLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SeedLoadError(f"Cannot read file: {e}", str(path)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SeedLoadError("Seed content must be a mapping", str(path))

    unknown = set(raw) - set(SeedData.model_fields)
    if unknown:
        raise SeedLoadError(f"Unknown seed keys: {sorted(unknown)}", str(path))

    data = default_seed(welcome).model_dump()
    data.update(raw)

    try:
        seed = SeedData.model_validate(data)
    except PydanticValidationError as e:
        raise SeedLoadError(f"Invalid seed data: {e}", str(path)) from e

    logger.info(
        "Seed file loaded",
        path=str(path),
        messages=len(seed.messages),
        providers=len(seed.providers),
        agent_cards=len(seed.agent_cards),
    )
    return seed
