"""Provider Registry unit tests."""

import pytest

from dexter_console.core.providers import ProviderRegistry
from dexter_console.models import ProviderConfig, ProviderPatch
from dexter_console.utils.exceptions import EntityNotFoundError, ValidationError


def snapshot(registry: ProviderRegistry) -> list[dict]:
    return [provider.model_dump() for provider in registry.list_all()]


class TestProviderRegistry:
    """Test ProviderRegistry class."""

    def test_seeded_order(self, providers):
        ids = [provider.id for provider in providers.list_all()]
        assert ids == ["openai", "anthropic", "google", "openrouter", "ollama"]

    def test_duplicate_seed_ids(self):
        provider = ProviderConfig(id="dup", name="A", base_url="https://a.example")
        with pytest.raises(ValueError):
            ProviderRegistry([provider, provider])

    def test_disable_openai(self, providers):
        """Only the enabled flag of the target provider changes."""
        before = {p.id: p for p in providers.list_all()}

        providers.update_provider("openai", {"enabled": False})

        openai = providers.get("openai")
        assert openai.enabled is False
        assert openai.model_dump(exclude={"enabled"}) == before["openai"].model_dump(
            exclude={"enabled"}
        )
        for provider in providers.list_all():
            if provider.id != "openai":
                assert provider == before[provider.id]

    def test_update_returns_full_collection(self, providers):
        result = providers.update_provider("google", {"api_key": "g-123"})

        assert [p.id for p in result] == [p.id for p in providers.list_all()]
        assert providers.get("google").api_key == "g-123"

    def test_update_with_patch_model(self, providers):
        providers.update_provider(
            "ollama", ProviderPatch(base_url="http://localhost:11434", enabled=True)
        )

        ollama = providers.get("ollama")
        assert ollama.base_url == "http://localhost:11434"
        assert ollama.enabled is True
        assert ollama.name == "Ollama (Local)"

    def test_update_keeps_position(self, providers):
        providers.update_provider("anthropic", {"name": "Claude"})
        assert [p.id for p in providers.list_all()][1] == "anthropic"

    def test_id_in_patch_is_ignored(self, providers):
        """A patch can never rename a provider."""
        providers.update_provider("openai", {"id": "hijacked", "name": "Open AI"})

        assert "hijacked" not in providers
        assert providers.get("openai").name == "Open AI"

    def test_unknown_id_is_noop(self, providers):
        before = snapshot(providers)

        result = providers.update_provider("nonexistent", {"enabled": True})

        assert snapshot(providers) == before
        assert [p.model_dump() for p in result] == before

    def test_unknown_id_strict(self, seed):
        registry = ProviderRegistry(seed.providers, strict_ids=True)

        with pytest.raises(EntityNotFoundError) as exc_info:
            registry.update_provider("nonexistent", {"enabled": True})

        assert exc_info.value.entity_id == "nonexistent"
        assert exc_info.value.entity_type == "Provider"

    def test_unknown_field_rejected(self, providers):
        before = snapshot(providers)

        with pytest.raises(ValidationError) as exc_info:
            providers.update_provider("openai", {"region": "eu"})

        assert exc_info.value.field == "region"
        assert snapshot(providers) == before

    def test_wrong_type_rejected(self, providers):
        with pytest.raises(ValidationError) as exc_info:
            providers.update_provider("openai", {"enabled": "maybe"})

        assert exc_info.value.field == "enabled"
        assert providers.get("openai").enabled is True

    def test_null_value_rejected(self, providers):
        with pytest.raises(ValidationError) as exc_info:
            providers.update_provider("openai", {"name": None})

        assert exc_info.value.field == "name"
        assert providers.get("openai").name == "OpenAI"

    def test_string_booleans_accepted(self, providers):
        providers.update_provider("anthropic", {"enabled": "true"})
        assert providers.get("anthropic").enabled is True

    def test_non_mapping_patch(self, providers):
        with pytest.raises(TypeError):
            providers.update_provider("openai", ["enabled"])

    def test_empty_patch(self, providers):
        before = snapshot(providers)
        providers.update_provider("openai", {})
        assert snapshot(providers) == before

    def test_url_not_validated_by_default(self, providers):
        providers.update_provider("openai", {"base_url": "not a url"})
        assert providers.get("openai").base_url == "not a url"

    def test_url_validation(self, seed):
        """With validation on, a bad base_url leaves the provider untouched."""
        registry = ProviderRegistry(seed.providers, validate_urls=True)

        with pytest.raises(ValidationError) as exc_info:
            registry.update_provider("openai", {"base_url": "ftp://files.example"})

        assert exc_info.value.field == "base_url"
        assert registry.get("openai").base_url == "https://api.openai.com"

        registry.update_provider("openai", {"base_url": "https://proxy.example/v1"})
        assert registry.get("openai").base_url == "https://proxy.example/v1"

    def test_enabled(self, providers):
        assert [p.id for p in providers.enabled()] == ["openai"]

        providers.update_provider("ollama", {"enabled": True})
        assert [p.id for p in providers.enabled()] == ["openai", "ollama"]

    def test_contains_and_len(self, providers):
        assert "openai" in providers
        assert "nonexistent" not in providers
        assert len(providers) == 5
