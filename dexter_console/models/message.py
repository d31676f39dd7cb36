"""Chat message model.

Messages are immutable once created and only ever appended to the
conversation log.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"  # typed by the person at the console
    AGENT = "agent"  # produced on behalf of the research agent


class Message(BaseModel):
    """A single entry in the research conversation."""

    id: str = Field(..., description="Message unique identifier")
    role: MessageRole = Field(..., description="Message author")
    content: str = Field(..., description="Message text")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Creation time"
    )

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def display_name(self) -> str:
        """Label shown next to the message in the transcript."""
        return "You" if self.role == MessageRole.USER else "Dexter"

    def is_from_user(self) -> bool:
        return self.role == MessageRole.USER
