"""Item text."""

from typing import Any, Self

from pydantic import Field

from .common.pydantic import FrozenBaseModel


class ItemText(FrozenBaseModel):
    """Text for copying (cmd+C) and large type (cmd+L).

    When unset, Alfred copies the item's ``arg`` and shows it as large type.
    """

    # "copy" would shadow BaseModel.copy
    copy_text: str | None = Field(default=None, serialization_alias="copy")
    largetype: str | None = None

    def with_copy(self, copy: Any) -> Self:
        """Set the text copied with cmd+C."""
        return self._replace(copy_text=str(copy))

    def with_largetype(self, largetype: Any) -> Self:
        """Set the text shown with cmd+L."""
        return self._replace(largetype=str(largetype))
