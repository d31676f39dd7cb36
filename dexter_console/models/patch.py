"""Base model for partial entity updates."""

from typing import Any

from pydantic import BaseModel, field_validator


class EntityPatch(BaseModel):
    """Optional-field update applied by shallow merge.

    Subclasses declare the patchable fields, all defaulting to None. A field
    left out of the patch is unchanged; a field given as None is rejected,
    since no entity field is nullable.
    """

    model_config = {"extra": "forbid"}

    @field_validator("*")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Input should not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set in this patch."""
        return self.model_dump(exclude_unset=True)
