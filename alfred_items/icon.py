"""Item icon."""

from typing import Any, Self

from pydantic import Field

from .common.pydantic import FrozenBaseModel
from .enums import IconType


class ItemIcon(FrozenBaseModel):
    """The icon displayed in a result row.

    Workflows run from their workflow folder, so ``path`` may be relative to it.
    """

    icon_type: IconType | None = Field(default=None, serialization_alias="type")
    path: str

    @classmethod
    def create(cls, path: Any) -> Self:
        """Create an icon pointing to ``path``."""
        return cls(path=str(path))

    def with_type(self, icon_type: IconType) -> Self:
        """Set how Alfred interprets ``path``."""
        return self._replace(icon_type=icon_type)

    def with_path(self, path: Any) -> Self:
        """Set the icon path, absolute or relative to the workflow folder."""
        return self._replace(path=str(path))
