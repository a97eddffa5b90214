"""Pydantic base model."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

# Script Filter output: JSON key names, unset fields left out
DUMP_OPTIONS: dict[str, Any] = {"by_alias": True, "exclude_none": True}


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)

    def _replace(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)

    def dump(self) -> dict[str, Any]:
        """Dump to the Script Filter JSON shape, leaving out unset fields."""
        return self.model_dump(mode="json", **DUMP_OPTIONS)


class OutputConfig(BaseModel):
    """Output settings for serialized items."""

    indent: int | None = Field(default=None, ge=0)
