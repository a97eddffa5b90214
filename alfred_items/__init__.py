"""Build Alfred Script Filter results and encode them as JSON.

Example:
    items = (
        AlfredItems()
        .append(AlfredItem.create("First item").with_subtitle("The first item's subtitle"))
        .append(AlfredItem.create("Second item").with_subtitle("Another subtitle!"))
    )
    print(items.serialize())
"""

from .enums import IconType, ItemType
from .errors import SerializationError
from .icon import ItemIcon
from .item import AlfredItem
from .items import AlfredItems
from .mods import ItemMod, ItemMods
from .text import ItemText

__all__ = [
    "AlfredItem",
    "AlfredItems",
    "IconType",
    "ItemIcon",
    "ItemMod",
    "ItemMods",
    "ItemText",
    "ItemType",
    "SerializationError",
]
