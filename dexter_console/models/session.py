"""View-state models for the console session."""

from enum import Enum

from pydantic import BaseModel, Field

from .agent_card import AgentCard
from .message import Message
from .provider import ProviderConfig


class ViewMode(str, Enum):
    """Which panel of the console is showing."""

    CONVERSATION = "conversation"
    ADMIN = "admin"


class SessionSnapshot(BaseModel):
    """Everything the presentation layer needs to render one frame.

    Provider api keys are already masked unless key visibility is on.
    """

    active_view: ViewMode = Field(..., description="Visible panel")
    show_keys: bool = Field(..., description="Whether api keys are in cleartext")
    message_count: int = Field(..., ge=0, description="Number of messages")
    draft: str = Field(default="", description="Pending input")
    messages: list[Message] = Field(default_factory=list)
    providers: list[ProviderConfig] = Field(default_factory=list)
    agent_cards: list[AgentCard] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
