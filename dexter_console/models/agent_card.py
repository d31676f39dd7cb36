"""A2A agent card models."""

from typing import Any

from pydantic import BaseModel, Field

from .patch import EntityPatch

NEW_CARD_DEFAULTS: dict[str, Any] = {
    "name": "New Agent",
    "description": "Describe this agent card.",
    "primary_model": "gpt-5.2",
    "skills": "",
    "contact": "agent://dexter/new",
    "enabled": False,
}


class AgentCard(BaseModel):
    """Descriptor advertising an agent for agent-to-agent coordination."""

    id: str = Field(..., min_length=1, description="Agent card identifier")
    name: str = Field(..., description="Agent display name")
    description: str = Field(default="", description="What the agent does")
    primary_model: str = Field(default="", description="Model the agent runs on")
    skills: str = Field(default="", description="Comma-separated skill list")
    contact: str = Field(default="", description="Contact URI")
    enabled: bool = Field(default=False, description="Whether the card is live")

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def new(cls, card_id: str) -> "AgentCard":
        """Create a card with the placeholder values used by "add card"."""
        return cls(id=card_id, **NEW_CARD_DEFAULTS)

    def skill_list(self) -> list[str]:
        """Split the free-form skills field into individual skills."""
        return [skill.strip() for skill in self.skills.split(",") if skill.strip()]


class AgentCardPatch(EntityPatch):
    """Partial update for an ``AgentCard``."""

    name: str | None = None
    description: str | None = None
    primary_model: str | None = None
    skills: str | None = None
    contact: str | None = None
    enabled: bool | None = None
