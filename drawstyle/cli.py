"""
Command-line interface for drawstyle.

Usage:
    drawstyle name Helvetica --size 18 --bold
    drawstyle attributes Helvetica --size 14 --color "#336699" --align center --json
    drawstyle version
"""

import argparse
import json
import sys
from typing import List, Optional

from . import __version__
from .exceptions import DrawStyleError
from .models.attribute_set import FontDescription, TextColor
from .styles.converter import to_attribute_set
from .styles.style_record import style_name_for_font, text_style_with_font
from .utils.enums import FontTrait, TextAlignment
from .utils.logger import configure_logging
from .utils.rich_logger import RichLogger


def _add_font_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("family", help="Font family name")
    parser.add_argument("-s", "--size", type=float, default=12.0, help="Point size (default: 12)")
    for trait in FontTrait:
        parser.add_argument(
            f"--{trait.value.replace('_', '-')}",
            dest="traits",
            action="append_const",
            const=trait,
            help=f"Add the {trait.value.replace('_', ' ')} trait",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="drawstyle",
        description="drawstyle - Text attributes for drawing styles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  drawstyle name Helvetica --size 18 --bold
  drawstyle attributes Arial --size 12.5 --align justified --json
  drawstyle version
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--rich", action="store_true", help="Use rich console logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    name_parser = subparsers.add_parser("name", help="Print the style name for a font")
    _add_font_arguments(name_parser)

    attributes_parser = subparsers.add_parser("attributes", help="Print the text attributes of a font style")
    _add_font_arguments(attributes_parser)
    attributes_parser.add_argument("-c", "--color", help="Text color (hex or color name)")
    attributes_parser.add_argument(
        "-a", "--align",
        choices=[alignment.value for alignment in TextAlignment],
        help="Paragraph alignment",
    )
    attributes_parser.add_argument("-u", "--underline", type=int, help="Underline level")
    attributes_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _font_from_args(args) -> FontDescription:
    return FontDescription(args.family, frozenset(args.traits or ()), args.size)


def cmd_name(args):
    """Print the style name for a font."""
    print(style_name_for_font(_font_from_args(args)))
    return 0


def cmd_attributes(args, rich_logger: Optional[RichLogger] = None):
    """Print the attributes of a style built from a font."""
    record = text_style_with_font(_font_from_args(args))
    if args.color:
        record.text.set_text_color(TextColor.from_value(args.color))
    if args.align:
        record.text.set_alignment(TextAlignment(args.align))
    if args.underline is not None:
        record.text.set_underline_level(args.underline)

    mapping = to_attribute_set(record.text).to_mapping()
    mapping["color"] = record.text.get_text_color().to_hex(include_alpha=True)
    if args.json:
        print(json.dumps({"name": record.name, "attributes": mapping}, indent=2))
    elif rich_logger is not None:
        rich_logger.table(record.name, mapping)
    else:
        print(record.name)
        for key, value in mapping.items():
            print(f"   {key}: {value}")
    return 0


def cmd_version(args=None):
    """Show version information."""
    print(f"drawstyle v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else "WARNING"
    rich_logger = None
    if args.rich:
        rich_logger = RichLogger("drawstyle", level)
    else:
        configure_logging(level)

    try:
        if args.command == "name":
            return cmd_name(args)
        elif args.command == "attributes":
            return cmd_attributes(args, rich_logger)
        elif args.command == "version":
            return cmd_version(args)
    except DrawStyleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
