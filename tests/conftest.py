"""Pytest configuration and fixtures for the test suite."""

import pytest

from alfred_items import AlfredItem, ItemIcon, ItemMod, ItemMods, ItemText, ItemType


@pytest.fixture
def full_item() -> AlfredItem:
    """Provide an item with every optional field set."""
    return (
        AlfredItem.create("Title 1")
        .with_uid("one")
        .with_subtitle("This is a subtitle for item 1.")
        .with_arg("title1")
        .with_icon(ItemIcon.create("one.png"))
        .with_valid(True)
        .with_autocomplete("first")
        .with_type(ItemType.DEFAULT)
        .with_mods(ItemMods().with_alt(ItemMod().with_subtitle("Secret option subtitle.")))
        .with_text(ItemText().with_copy("You copied option one.").with_largetype("Hello, large type!"))
        .with_quicklookurl("https://google.com")
    )
