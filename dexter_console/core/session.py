"""Session View - coordinator for one console session.

Owns only view state (active panel, key visibility, pending draft) and
routes user actions to the three stores. Derived values such as the message
count are read from the stores every time.
"""

from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from dexter_console.models import (
    AgentCard,
    AgentCardPatch,
    Message,
    ProviderConfig,
    ProviderPatch,
    SessionSnapshot,
    ViewMode,
)
from dexter_console.utils.logging import get_session_logger

from .agent_cards import AgentCardRegistry
from .conversation import ConversationStore
from .providers import ProviderRegistry

MASK_CHAR = "•"


class SessionView:
    """Coordinates the conversation, provider and agent card stores.

    The stores are passed in and stay independently owned; the session never
    copies their data into counters or caches of its own.
    """

    def __init__(
        self,
        conversation: ConversationStore,
        providers: ProviderRegistry,
        agent_cards: AgentCardRegistry,
        *,
        key_mask_length: int = 8,
        session_id: str | None = None,
    ) -> None:
        self.conversation = conversation
        self.providers = providers
        self.agent_cards = agent_cards
        self.session_id = session_id or str(uuid4())
        self._key_mask_length = key_mask_length
        self._active_view = ViewMode.CONVERSATION
        self._show_keys = False
        self._draft = ""
        self._logger = get_session_logger(self.session_id)

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    @property
    def active_view(self) -> ViewMode:
        return self._active_view

    def set_active_view(self, mode: ViewMode | str) -> ViewMode:
        """Switch panels. Either direction is always allowed.

        Raises:
            ValueError: If ``mode`` is not a known view name.
        """
        self._active_view = ViewMode(mode)
        self._logger.debug("View changed", view=self._active_view.value)
        return self._active_view

    @property
    def show_keys(self) -> bool:
        return self._show_keys

    def toggle_key_visibility(self) -> bool:
        """Flip cleartext display of every provider api key."""
        self._show_keys = not self._show_keys
        self._logger.debug("Key visibility toggled", show_keys=self._show_keys)
        return self._show_keys

    def display_api_key(self, provider: ProviderConfig) -> str:
        """Api key as it should be rendered under the current visibility."""
        if self._show_keys or not provider.api_key:
            return provider.api_key
        return MASK_CHAR * self._key_mask_length

    @property
    def draft(self) -> str:
        return self._draft

    def set_draft(self, text: str) -> None:
        self._draft = text

    @property
    def message_count(self) -> int:
        """Number of messages in the conversation, read from the store."""
        return len(self.conversation)

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------

    def send_message(self, draft: str | None = None) -> tuple[Message, Message] | None:
        """Submit ``draft`` (or the pending draft) to the conversation.

        The pending draft is cleared only when a message pair was appended.
        """
        text = self._draft if draft is None else draft
        result = self.conversation.send_message(text)
        if result is None:
            self._logger.debug("Empty draft ignored")
            return None

        self._draft = ""
        self._logger.info("Message sent", message_count=self.message_count)
        return result

    def update_provider(
        self, provider_id: str, patch: ProviderPatch | Mapping[str, Any]
    ) -> list[ProviderConfig]:
        return self.providers.update_provider(provider_id, patch)

    def update_agent_card(
        self, card_id: str, patch: AgentCardPatch | Mapping[str, Any]
    ) -> list[AgentCard]:
        return self.agent_cards.update_agent_card(card_id, patch)

    def add_agent_card(self) -> AgentCard:
        card = self.agent_cards.add_agent_card()
        self._logger.info("Agent card added", card_id=card.id)
        return card

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def messages(self) -> list[Message]:
        return self.conversation.messages

    @property
    def provider_list(self) -> list[ProviderConfig]:
        return self.providers.list_all()

    @property
    def agent_card_list(self) -> list[AgentCard]:
        return self.agent_cards.list_all()

    def snapshot(self) -> SessionSnapshot:
        """Render-ready copy of the whole session state."""
        providers = [
            provider.model_copy(update={"api_key": self.display_api_key(provider)})
            for provider in self.providers
        ]
        return SessionSnapshot(
            active_view=self._active_view,
            show_keys=self._show_keys,
            message_count=self.message_count,
            draft=self._draft,
            messages=self.conversation.messages,
            providers=providers,
            agent_cards=self.agent_cards.list_all(),
        )
