"""Entity Registry - keyed, ordered collections with partial updates.

This module holds the behaviour shared by the provider and agent card
registries: insertion-ordered storage, shallow-merge patching and the
unknown-id policy.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import AnyUrl, BaseModel, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from dexter_console.models import EntityPatch
from dexter_console.utils.exceptions import EntityNotFoundError, ValidationError
from dexter_console.utils.logging import get_store_logger

HTTP_URL: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)
ANY_URI: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

EntityT = TypeVar("EntityT", bound=BaseModel)
PatchT = TypeVar("PatchT", bound=EntityPatch)


class EntityRegistry(Generic[EntityT, PatchT]):
    """Ordered registry of frozen entities keyed by their ``id`` field.

    Subclasses set ``entity_type``, ``patch_model`` and, optionally,
    ``url_fields`` naming the fields checked when URL validation is on.
    """

    entity_type: ClassVar[str] = "Entity"
    patch_model: ClassVar[type[EntityPatch]]
    url_fields: ClassVar[dict[str, TypeAdapter[Any]]] = {}

    def __init__(
        self,
        entities: Iterable[EntityT] = (),
        *,
        store_name: str,
        strict_ids: bool = False,
        validate_urls: bool = False,
    ) -> None:
        # dict keeps insertion order, which is also display order
        self._entities: dict[str, EntityT] = {}
        self._strict_ids = strict_ids
        self._validate_urls = validate_urls
        self._logger = get_store_logger(store_name)

        for entity in entities:
            entity_id = self._id_of(entity)
            if entity_id in self._entities:
                raise ValueError(f"Duplicate {self.entity_type} id: {entity_id}")
            self._entities[entity_id] = entity

    @staticmethod
    def _id_of(entity: BaseModel) -> str:
        entity_id: str = getattr(entity, "id")
        return entity_id

    def list_all(self) -> list[EntityT]:
        """Return all entities in insertion order."""
        return list(self._entities.values())

    def get(self, entity_id: str) -> EntityT | None:
        """Get an entity by id, or None if absent."""
        return self._entities.get(entity_id)

    def coerce_patch(self, patch: EntityPatch | Mapping[str, Any]) -> dict[str, Any]:
        """Turn a patch model or raw mapping into the fields to overwrite.

        An ``id`` key in a raw mapping is discarded; ids never change.

        Raises:
            ValidationError: If the mapping names an unknown field or a value
                has the wrong type.
        """
        if isinstance(patch, self.patch_model):
            return patch.changes()

        if not isinstance(patch, Mapping):
            raise TypeError(
                f"Patch must be a {self.patch_model.__name__} or a mapping, "
                f"got {type(patch).__name__}"
            )

        data = {key: value for key, value in patch.items() if key != "id"}
        try:
            model = self.patch_model.model_validate(data)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "patch"
            raise ValidationError(field, error["msg"]) from e

        return model.changes()

    def _check_urls(self, changes: dict[str, Any]) -> None:
        for field, adapter in self.url_fields.items():
            if field not in changes:
                continue
            try:
                adapter.validate_python(changes[field])
            except PydanticValidationError as e:
                raise ValidationError(field, e.errors()[0]["msg"]) from e

    def _update(
        self, entity_id: str, patch: EntityPatch | Mapping[str, Any]
    ) -> list[EntityT]:
        """Shallow-merge ``patch`` into the entity with ``entity_id``.

        Returns:
            The full, updated collection in insertion order.

        Raises:
            ValidationError: If the patch is rejected. Nothing is mutated.
            EntityNotFoundError: In strict mode, if ``entity_id`` is unknown.
        """
        changes = self.coerce_patch(patch)

        current = self._entities.get(entity_id)
        if current is None:
            if self._strict_ids:
                raise EntityNotFoundError(self.entity_type, entity_id)
            self._logger.warning(
                "Update ignored for unknown id", entity_id=entity_id
            )
            return self.list_all()

        if self._validate_urls:
            self._check_urls(changes)

        if changes:
            self._entities[entity_id] = current.model_copy(update=changes)
        self._logger.debug(
            "Entity updated", entity_id=entity_id, fields=sorted(changes)
        )
        return self.list_all()

    def _append(self, entity: EntityT) -> EntityT:
        entity_id = self._id_of(entity)
        if entity_id in self._entities:
            raise ValueError(f"Duplicate {self.entity_type} id: {entity_id}")
        self._entities[entity_id] = entity
        self._logger.debug("Entity added", entity_id=entity_id)
        return entity

    def __iter__(self) -> Iterator[EntityT]:
        return iter(self.list_all())

    def __len__(self) -> int:
        """Return the number of entities."""
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        """Check if an entity id is registered."""
        return entity_id in self._entities
