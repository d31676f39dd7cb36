"""Conversation Store - the append-only research chat log.

Every accepted draft produces exactly two messages: the user's trimmed text
followed by the agent's reply, which for now comes from a placeholder
responder.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from dexter_console.models import Message, MessageRole
from dexter_console.utils.config import DEFAULT_ACKNOWLEDGMENT
from dexter_console.utils.logging import get_store_logger

from .ids import IdGenerator


@runtime_checkable
class AgentResponder(Protocol):
    """Produces the agent message that follows a user message.

    A real agent runtime would plug in here and replace the placeholder text
    with its eventual answer.
    """

    def respond(self, message: Message) -> str:
        """Return the agent reply for ``message``."""
        ...


class PlaceholderResponder:
    """Answers every message with the same acknowledgment."""

    def __init__(self, text: str = DEFAULT_ACKNOWLEDGMENT) -> None:
        self.text = text

    def respond(self, message: Message) -> str:
        return self.text


class ConversationStore:
    """Ordered log of chat messages. Messages are only ever appended."""

    def __init__(
        self,
        id_generator: IdGenerator,
        responder: AgentResponder | None = None,
        messages: Iterable[Message] = (),
    ) -> None:
        self._id_generator = id_generator
        self._responder = responder or PlaceholderResponder()
        self._messages: list[Message] = []
        self._ids: set[str] = set()
        self._logger = get_store_logger("conversation")

        for message in messages:
            if message.id in self._ids:
                raise ValueError(f"Duplicate message id: {message.id}")
            self._messages.append(message)
            self._ids.add(message.id)

    def _new_id(self) -> str:
        # Seeded messages may already hold ids the generator will produce
        message_id = self._id_generator.new_id()
        while message_id in self._ids:
            message_id = self._id_generator.new_id()
        self._ids.add(message_id)
        return message_id

    def send_message(self, draft: str) -> tuple[Message, Message] | None:
        """Append a user message and the agent reply to it.

        Args:
            draft: Raw user input. Leading and trailing whitespace is removed.

        Returns:
            The ``(user, agent)`` message pair, or None if the trimmed draft
            is empty, in which case nothing changes.
        """
        content = draft.strip()
        if not content:
            return None

        user_message = Message(
            id=self._new_id(),
            role=MessageRole.USER,
            content=content,
        )
        agent_message = Message(
            id=self._new_id(),
            role=MessageRole.AGENT,
            content=self._responder.respond(user_message),
        )
        # Both land together; nothing can be appended between them
        self._messages.extend((user_message, agent_message))

        self._logger.debug(
            "Message pair appended",
            user_message_id=user_message.id,
            agent_message_id=agent_message.id,
            total=len(self._messages),
        )
        return user_message, agent_message

    @property
    def messages(self) -> list[Message]:
        """All messages in conversation order."""
        return list(self._messages)

    def get(self, message_id: str) -> Message | None:
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        """Return the number of messages."""
        return len(self._messages)
