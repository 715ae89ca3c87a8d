"""Shared base for Devnovate entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity. Use `revise` to derive a changed copy."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def revise(self, **changes: Any) -> Self:
        """Copy with `changes` applied, re-running field validation.

        Unlike `model_copy(update=...)` a bad value (empty title, negative
        counter) is rejected here.

        Raises:
            pydantic.ValidationError: If the result is not a valid entity
        """
        return type(self).model_validate({**self.model_dump(), **changes})
