"""LLM provider configuration models."""

from pydantic import BaseModel, Field

from .patch import EntityPatch


class ProviderConfig(BaseModel):
    """Connection settings for one LLM backend.

    The ``id`` is fixed at seeding time; every other field can be replaced
    through a ``ProviderPatch``.
    """

    id: str = Field(..., min_length=1, description="Stable provider identifier")
    name: str = Field(..., description="Display name")
    base_url: str = Field(..., description="API endpoint")
    api_key: str = Field(default="", description="Secret credential, may be empty")
    enabled: bool = Field(default=False, description="Whether the provider is in use")

    model_config = {"extra": "forbid", "frozen": True}

    def has_api_key(self) -> bool:
        return bool(self.api_key)


class ProviderPatch(EntityPatch):
    """Partial update for a ``ProviderConfig``."""

    name: str | None = None
    base_url: str | None = None
    api_key: str | None = None
    enabled: bool | None = None
