"""Tests for icons, modifiers, text and their enums."""

import pytest
from pydantic import ValidationError

from alfred_items import AlfredItem, AlfredItems, IconType, ItemIcon, ItemMod, ItemMods, ItemText, ItemType


class TestEnums:
    """Test the fixed enum tokens."""

    @pytest.mark.parametrize(
        ("member", "token"),
        [
            (ItemType.DEFAULT, "default"),
            (ItemType.FILE, "file"),
            (ItemType.FILE_SKIPCHECK, "file:skipcheck"),
            (IconType.FILEICON, "fileicon"),
            (IconType.FILETYPE, "filetype"),
        ],
    )
    def test_tokens(self, member: ItemType | IconType, token: str):
        """Test that each member is written as its documented token."""
        assert member.value == token
        item = AlfredItem.create("T")
        if isinstance(member, ItemType):
            item = item.with_type(member)
            expected = f'{{"items":[{{"title":"T","type":"{token}"}}]}}'
        else:
            item = item.with_icon(ItemIcon.create("p").with_type(member))
            expected = f'{{"items":[{{"title":"T","icon":{{"type":"{token}","path":"p"}}}}]}}'
        assert AlfredItems().append(item).serialize() == expected

    def test_members_are_closed(self):
        """Test that the enums have no extra members."""
        assert len(ItemType) == 3
        assert len(IconType) == 2


class TestItemIcon:
    """Test item icons."""

    def test_path_only(self):
        """Test that an icon without a type omits the type key."""
        assert ItemIcon.create("one.png").dump() == {"path": "one.png"}

    @pytest.mark.parametrize("icon_type", list(IconType))
    def test_type_renamed(self, icon_type: IconType):
        """Test that the icon type is written under the type key, before the path."""
        dumped = ItemIcon.create("/Applications/Safari.app").with_type(icon_type).dump()
        assert dumped == {"type": icon_type.value, "path": "/Applications/Safari.app"}
        assert list(dumped) == ["type", "path"]

    def test_with_path(self):
        """Test that the path can be replaced and the type is kept."""
        icon = ItemIcon.create("a.png").with_type(IconType.FILETYPE).with_path("public.png")
        assert icon.dump() == {"type": "filetype", "path": "public.png"}

    def test_path_required(self):
        """Test that an icon needs a path."""
        with pytest.raises(ValidationError):
            ItemIcon()  # type: ignore[call-arg]


class TestItemMods:
    """Test modifier overrides."""

    def test_empty_mod(self):
        """Test that a modifier with nothing set dumps to an empty object."""
        assert ItemMods().with_ctrl(ItemMod()).dump() == {"ctrl": {}}

    def test_mod_fields(self):
        """Test that modifier fields are written in order."""
        mod = ItemMod().with_subtitle("sub").with_arg("arg").with_valid(False)
        assert list(mod.dump().items()) == [("valid", False), ("arg", "arg"), ("subtitle", "sub")]

    def test_all_keys(self):
        """Test that every modifier key is independent and ordered."""
        mods = (
            ItemMods()
            .with_shift(ItemMod().with_arg("s"))
            .with_cmd(ItemMod().with_arg("c"))
            .with_alt(ItemMod().with_arg("a"))
            .with_ctrl(ItemMod().with_arg("t"))
        )
        assert list(mods.dump()) == ["alt", "cmd", "ctrl", "shift"]

    def test_only_set_keys(self):
        """Test that unset modifier keys are omitted."""
        assert ItemMods().with_cmd(ItemMod().with_valid(True)).dump() == {"cmd": {"valid": True}}


class TestItemText:
    """Test copy and large type text."""

    def test_empty(self):
        """Test that unset text fields are omitted."""
        assert ItemText().dump() == {}

    def test_copy_key(self):
        """Test that the copy text is written under the copy key."""
        assert ItemText().with_copy("c").dump() == {"copy": "c"}

    def test_both(self):
        """Test that both fields are written in order."""
        text = ItemText().with_largetype("L").with_copy("C")
        assert list(text.dump().items()) == [("copy", "C"), ("largetype", "L")]
