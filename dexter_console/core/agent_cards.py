"""Agent Card Registry - editable A2A agent cards."""

from collections.abc import Iterable, Mapping
from typing import Any

from dexter_console.models import AgentCard, AgentCardPatch

from .ids import IdGenerator
from .registry import ANY_URI, EntityRegistry


class AgentCardRegistry(EntityRegistry[AgentCard, AgentCardPatch]):
    """Ordered set of agent cards.

    Cards can be edited field by field and new placeholder cards appended.
    There is no deletion.
    """

    entity_type = "AgentCard"
    patch_model = AgentCardPatch
    url_fields = {"contact": ANY_URI}

    def __init__(
        self,
        id_generator: IdGenerator,
        cards: Iterable[AgentCard] = (),
        *,
        strict_ids: bool = False,
        validate_urls: bool = False,
    ) -> None:
        super().__init__(
            cards,
            store_name="agent_cards",
            strict_ids=strict_ids,
            validate_urls=validate_urls,
        )
        self._id_generator = id_generator

    def update_agent_card(
        self, card_id: str, patch: AgentCardPatch | Mapping[str, Any]
    ) -> list[AgentCard]:
        """Apply a partial update to one card.

        Same merge rules as ``ProviderRegistry.update_provider``.
        """
        return self._update(card_id, patch)

    def add_agent_card(self) -> AgentCard:
        """Append a new, disabled placeholder card and return it."""
        card_id = self._id_generator.new_id()
        while card_id in self:
            # seeded ids share the namespace with generated ones
            card_id = self._id_generator.new_id()
        return self._append(AgentCard.new(card_id))

    def live(self) -> list[AgentCard]:
        """Cards with ``enabled`` set."""
        return [card for card in self if card.enabled]
