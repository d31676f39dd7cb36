"""Provider Registry - LLM provider credentials for the admin panel."""

from collections.abc import Iterable, Mapping
from typing import Any

from dexter_console.models import ProviderConfig, ProviderPatch

from .registry import HTTP_URL, EntityRegistry


class ProviderRegistry(EntityRegistry[ProviderConfig, ProviderPatch]):
    """Fixed set of provider configurations.

    Providers come only from seeding; the registry supports field updates
    but no creation or deletion.
    """

    entity_type = "Provider"
    patch_model = ProviderPatch
    url_fields = {"base_url": HTTP_URL}

    def __init__(
        self,
        providers: Iterable[ProviderConfig] = (),
        *,
        strict_ids: bool = False,
        validate_urls: bool = False,
    ) -> None:
        super().__init__(
            providers,
            store_name="providers",
            strict_ids=strict_ids,
            validate_urls=validate_urls,
        )

    def update_provider(
        self, provider_id: str, patch: ProviderPatch | Mapping[str, Any]
    ) -> list[ProviderConfig]:
        """Apply a partial update to one provider.

        Args:
            provider_id: Id of the provider to update.
            patch: Fields to overwrite. An ``id`` entry is ignored.

        Returns:
            All providers after the update. An unknown id leaves them unchanged.
        """
        return self._update(provider_id, patch)

    def enabled(self) -> list[ProviderConfig]:
        """Providers currently switched on."""
        return [provider for provider in self if provider.enabled]
