"""Modifier key overrides."""

from typing import Any, Self

from .common.pydantic import FrozenBaseModel


class ItemMod(FrozenBaseModel):
    """What an item does while one modifier key is held."""

    valid: bool | None = None
    arg: str | None = None
    subtitle: str | None = None

    def with_valid(self, valid: bool) -> Self:
        """Set whether the item can be actioned with this modifier."""
        return self._replace(valid=valid)

    def with_arg(self, arg: Any) -> Self:
        """Set the arg passed out when actioned with this modifier."""
        return self._replace(arg=str(arg))

    def with_subtitle(self, subtitle: Any) -> Self:
        """Set the subtitle shown while this modifier is held."""
        return self._replace(subtitle=str(subtitle))


class ItemMods(FrozenBaseModel):
    """Per-modifier overrides, serialized under the item's ``mods`` key."""

    alt: ItemMod | None = None
    cmd: ItemMod | None = None
    ctrl: ItemMod | None = None
    shift: ItemMod | None = None

    def with_alt(self, alt: ItemMod) -> Self:
        """Set the override for Alt/Option."""
        return self._replace(alt=alt)

    def with_cmd(self, cmd: ItemMod) -> Self:
        """Set the override for Command."""
        return self._replace(cmd=cmd)

    def with_ctrl(self, ctrl: ItemMod) -> Self:
        """Set the override for Control."""
        return self._replace(ctrl=ctrl)

    def with_shift(self, shift: ItemMod) -> Self:
        """Set the override for Shift."""
        return self._replace(shift=shift)
