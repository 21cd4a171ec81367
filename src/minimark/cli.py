"""
Convert minimal markup files into embeddable HTML fragments.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import options_from_mapping, split_option
from .conversion import read_text, render
from .plugins import available_callbacks, build_callbacks


logger = logging.getLogger(__name__)


def _split_option(token: str) -> Tuple[str, str]:
    try:
        return split_option(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def read_input(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    return read_text(path)


def write_output(path: Optional[Path], html: str) -> None:
    if path is None:
        sys.stdout.write(html + "\n")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html + "\n", encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert minimal markup into HTML fragments.")
    parser.add_argument("input_path", type=Path, help="Path to the markup file, or '-' for stdin.")
    parser.add_argument("-o", "--output", type=Path, help="Optional path to write the resulting HTML.")
    parser.add_argument(
        "--callbacks",
        choices=available_callbacks() or ["default"],
        help="Name of the callback preset used for images, links and argument tuples.",
    )
    parser.add_argument("--root", help="Base URL that relative link targets are resolved against.")
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        type=_split_option,
        metavar="KEY=VALUE",
        help="Additional render option in KEY=VALUE form (may repeat).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        text = read_input(args.input_path)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    values = dict(args.option or [])
    if args.callbacks:
        values["callbacks"] = args.callbacks
    if args.root:
        values["root"] = args.root
    try:
        options = options_from_mapping(values)
        callbacks = build_callbacks(options)
    except (KeyError, TypeError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    logger.debug("Rendering %s with callback preset '%s'.", args.input_path, options.callbacks)
    write_output(args.output, render(text, callbacks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
