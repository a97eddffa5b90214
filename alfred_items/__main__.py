"""Command line entry point printing example Script Filter output."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .common.pydantic import OutputConfig
from .enums import ItemType
from .icon import ItemIcon
from .item import AlfredItem
from .items import AlfredItems
from .mods import ItemMod, ItemMods
from .text import ItemText


def quick_items() -> AlfredItems:
    """Two items with subtitles."""
    return (
        AlfredItems()
        .append(AlfredItem.create("First item").with_subtitle("The first item's subtitle"))
        .append(AlfredItem.create("Second item").with_subtitle("Another subtitle!"))
    )


def demo_items() -> AlfredItems:
    """One item using every field, followed by a plain one."""
    return (
        AlfredItems()
        .append(
            AlfredItem.create("Title 1")
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
        .append(AlfredItem.create("Title 2").with_subtitle("This is a subtitle for item 2.").with_arg("title2"))
    )


EXAMPLES = {"quick": quick_items, "demo": demo_items}


def load_config(args: argparse.Namespace) -> OutputConfig:
    """Load the output config file, then apply command line overrides."""
    if args.config is None:
        config = OutputConfig()
    else:
        config = OutputConfig.model_validate_json(args.config.read_text())
    if args.indent is not None:
        config = OutputConfig.model_validate({**config.model_dump(), "indent": args.indent})
    return config


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print example Alfred Script Filter JSON")
    parser.add_argument("example", choices=sorted(EXAMPLES), help="Example to print")
    parser.add_argument("--config", type=Path, help="Path to a JSON output config")
    parser.add_argument("--indent", type=int, help="Pretty-print with this indentation")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")

    args = parser.parse_args(argv)

    # stdout carries the JSON document, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = load_config(args)
    except ValidationError as e:
        parser.error(f"invalid output config: {e}")
    items = EXAMPLES[args.example]()
    print(items.serialize(indent=config.indent))


if __name__ == "__main__":
    main()
