from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from shapedoc import Circle, Document, Rectangle, export_document, load_document
from shapedoc.exporters import EXPORT_FORMATS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="shapedoc")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Root logging level.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a scene manifest (TOML) to HTML/SVG/PNG.")
    render.add_argument("scene", type=Path)
    _add_export_arguments(render)

    demo = sub.add_parser("demo", help="Render the default circle and rectangle.")
    _add_export_arguments(demo)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        document = load_document(args.scene)
    elif args.command == "demo":
        document = Document([Circle(), Rectangle()])
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    bundle = export_document(
        document,
        out_dir=args.out_dir,
        prefix=args.prefix,
        formats=args.format or EXPORT_FORMATS,
    )
    print(json.dumps(bundle.as_dict(), indent=2, sort_keys=True))


def _add_export_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--out-dir", type=Path, required=True)
    parser.add_argument("--prefix", default="shapedoc")
    parser.add_argument(
        "--format",
        action="append",
        choices=list(EXPORT_FORMATS),
        default=None,
        help="Output format; repeat for several. Default: all formats.",
    )


if __name__ == "__main__":
    main()
