"""Command-line entry point: convert, export and resolve area text."""

import argparse
import logging
import sys

from map_areas.config import settings
from map_areas.converters import (
    Converter,
    ExportFormat,
    MalformedInputError,
    NamedAreaResolver,
    OutputStyle,
    UnknownDialectError,
    UnsupportedFormatError,
    available_dialects,
    encode_canonical,
    export_all,
    import_text,
    parse_area_definitions,
)
from map_areas.model import AreaCollection, Path, PolyArea

logger = logging.getLogger(__name__)

_TARGETS = {
    "areas": AreaCollection,
    "path": Path,
    "polygon": PolyArea,
}


def setup_logging() -> None:
    """Configure logging for the CLI."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="map-areas",
        description="Convert map areas, polygons and paths between text formats.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="Convert between bot-framework dialects")
    convert.add_argument("--from", dest="source", default=settings.default_dialect,
                         help="Dialect of the input text")
    convert.add_argument("--to", dest="target", default=settings.default_dialect,
                         help="Dialect of the output text")
    convert.add_argument("--style", default=settings.default_style,
                         help=f"Output style ({', '.join(s.value for s in OutputStyle)})")
    convert.add_argument("--kind", choices=sorted(_TARGETS), default="areas",
                         help="Shape kind held by the input")

    export = commands.add_parser("export", help="Re-export any importable text")
    export.add_argument("--format", default=ExportFormat.JSON.value,
                        help=f"Export format ({', '.join(f.value for f in ExportFormat)})")
    export.add_argument("--dialect", default="hd117",
                        help=f"Dialect for java output ({', '.join(available_dialects())})")

    commands.add_parser("resolve", help='Flatten named area definitions into an "aabbs" fragment')
    return parser


def convert(args: argparse.Namespace, text: str) -> str:
    target = _TARGETS[args.kind]()
    count = Converter(args.source).decode(text, target)
    logger.info("Decoded %d %s from %s", count, args.kind, args.source)
    return Converter(args.target).encode(target, OutputStyle.parse(args.style))


def export(args: argparse.Namespace, text: str) -> str:
    areas = AreaCollection()
    polygon = PolyArea()
    import_text(text, areas, polygon)
    return export_all(areas, polygon, args.format, args.dialect)


def resolve(args: argparse.Namespace, text: str) -> str:
    resolver = NamedAreaResolver(parse_area_definitions(text))
    return encode_canonical(resolver.collect())


_COMMANDS = {
    "convert": convert,
    "export": export,
    "resolve": resolve,
}


def main(argv: list[str] | None = None) -> int:
    """Run one subcommand over stdin and write the result to stdout."""
    args = build_parser().parse_args(argv)
    setup_logging()

    text = sys.stdin.read()
    try:
        output = _COMMANDS[args.command](args, text)
    except (MalformedInputError, UnknownDialectError, UnsupportedFormatError) as e:
        message = e.args[0] if isinstance(e, KeyError) else str(e)
        print(f"error: {message}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


def run() -> None:
    """Entry point for the map-areas console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
