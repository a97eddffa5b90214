"""Fixed tokens understood by Alfred's Script Filter JSON format."""

from enum import StrEnum


class ItemType(StrEnum):
    """Value of an item's ``type`` field."""

    # Treat the item as a normal action. Alfred's behavior when the field is omitted.
    DEFAULT = "default"
    # Treat the item as a file on disk, enabling Alfred's file actions.
    FILE = "file"
    # Same as FILE, but Alfred does not check that the file exists first.
    FILE_SKIPCHECK = "file:skipcheck"


class IconType(StrEnum):
    """Value of an icon's ``type`` field.

    Without a type Alfred loads the file at ``path`` itself, for example a png.
    """

    # Use the icon of the file at ``path``.
    FILEICON = "fileicon"
    # Use the icon of a file type, for example ``path="public.png"``.
    FILETYPE = "filetype"
