"""A single Script Filter result."""

from typing import Any, Self

from pydantic import Field

from .common.pydantic import FrozenBaseModel
from .enums import ItemType
from .icon import ItemIcon
from .mods import ItemMods
from .text import ItemText


class AlfredItem(FrozenBaseModel):
    """An item displayed in Alfred. Only ``title`` is required.

    Fields are serialized in declaration order and unset fields are left out
    of the output entirely, since Alfred treats ``null`` differently from a
    missing key.
    """

    uid: str | None = None
    title: str
    subtitle: str | None = None
    arg: str | None = None
    icon: ItemIcon | None = None
    valid: bool | None = None
    autocomplete: str | None = None
    item_type: ItemType | None = Field(default=None, serialization_alias="type")
    item_mods: ItemMods | None = Field(default=None, serialization_alias="mods")
    text: ItemText | None = None
    quicklookurl: str | None = None

    @classmethod
    def create(cls, title: Any) -> Self:
        """Create an item with a title and nothing else."""
        return cls(title=str(title))

    def with_uid(self, uid: Any) -> Self:
        """Set a unique identifier Alfred uses to learn the user's ordering.

        Keep it stable across runs. Leave it unset to have Alfred show items
        in the order they are returned.
        """
        return self._replace(uid=str(uid))

    def with_title(self, title: Any) -> Self:
        """Replace the title shown in the result row."""
        return self._replace(title=str(title))

    def with_subtitle(self, subtitle: Any) -> Self:
        """Set the subtitle shown in the result row."""
        return self._replace(subtitle=str(subtitle))

    def with_arg(self, arg: Any) -> Self:
        """Set the argument passed to the workflow's connected output action.

        Without it the output action cannot tell which item was selected.
        """
        return self._replace(arg=str(arg))

    def with_icon(self, icon: ItemIcon) -> Self:
        """Set the icon shown in the result row."""
        return self._replace(icon=icon)

    def with_valid(self, valid: bool) -> Self:
        """Set whether pressing return actions the item.

        Alfred treats an item without this field as valid.
        """
        return self._replace(valid=valid)

    def with_autocomplete(self, autocomplete: Any) -> Self:
        """Set the text put into Alfred's search field on autocomplete (tab).

        For invalid items the text is also used when the item is actioned.
        """
        return self._replace(autocomplete=str(autocomplete))

    def with_type(self, item_type: ItemType) -> Self:
        """Set how Alfred treats the item, serialized as ``type``."""
        return self._replace(item_type=item_type)

    def with_mods(self, item_mods: ItemMods) -> Self:
        """Set the modifier key overrides, serialized as ``mods``."""
        return self._replace(item_mods=item_mods)

    def with_text(self, text: ItemText) -> Self:
        """Set the copy and large type text."""
        return self._replace(text=text)

    def with_quicklookurl(self, quicklookurl: Any) -> Self:
        """Set the URL previewed with Quick Look (shift or cmd+Y)."""
        return self._replace(quicklookurl=str(quicklookurl))
