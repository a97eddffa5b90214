"""The top-level Script Filter document."""

import logging
from collections.abc import Iterable, Iterator
from typing import Self

from .common.pydantic import DUMP_OPTIONS, FrozenBaseModel
from .errors import SerializationError
from .item import AlfredItem

logger = logging.getLogger(__name__)


class AlfredItems(FrozenBaseModel):
    """The parent of all items, printed to stdout for Alfred to display.

    Items keep the order they were appended in. Alfred itself may reorder
    items that carry a ``uid``.
    """

    items: tuple[AlfredItem, ...] = ()

    def __len__(self) -> int:
        """Number of items."""
        return len(self.items)

    def __iter__(self) -> Iterator[AlfredItem]:  # type: ignore[override]
        """Iterate over items in order."""
        return iter(self.items)

    def append(self, item: AlfredItem) -> Self:
        """Return a copy with ``item`` added at the end."""
        return self._replace(items=(*self.items, item))

    def extend(self, items: Iterable[AlfredItem]) -> Self:
        """Return a copy with ``items`` added at the end, in order."""
        return self._replace(items=(*self.items, *items))

    def serialize(self, indent: int | None = None) -> str:
        """Encode as Script Filter JSON, ready to hand to Alfred.

        Args:
            indent: Pretty-print with this indentation. Compact by default.

        Returns:
            The complete ``{"items": [...]}`` document.

        Raises:
            SerializationError: If the JSON encoder fails. Nothing is returned
                in that case.
        """
        logger.debug("Serializing %d items", len(self.items))
        try:
            return self.model_dump_json(indent=indent, **DUMP_OPTIONS)
        except (ValueError, OverflowError) as e:
            logger.debug("Could not serialize items: %s", e)
            raise SerializationError("could not serialize AlfredItems") from e
