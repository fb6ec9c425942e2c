"""Command-line exporter.

Example::

    kekule caffeine.sdf -f x3d -o caffeine.x3d --hide-hydrogens
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from kekule.export import ExportFormat, ExportRequest, run_export
from kekule.logging_config import setup_logging
from kekule.styles import load_style

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kekule",
        description="Export a MOL/SDF structure as XYZ, OBJ, or X3D.",
    )
    p.add_argument("input", type=Path, help="MOL or SDF file to export")
    p.add_argument(
        "-f", "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.OBJ.value,
        help="Output format (default: obj)",
    )
    p.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file; standard output when omitted",
    )
    p.add_argument(
        "--hide-hydrogens", action="store_true",
        help="Leave hydrogen atoms and their bonds out of the export",
    )
    p.add_argument(
        "--style", type=Path, default=None,
        help="JSON export style file (see kekule.styles)",
    )
    p.add_argument(
        "--comment", default=None,
        help="Comment line for XYZ output",
    )
    p.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase log detail (-v info, -vv debug)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Run the exporter and return a process exit code."""
    args = build_parser().parse_args(argv)
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)]
    setup_logging(level)

    try:
        source_text = args.input.read_text()
        style = load_style(args.style) if args.style is not None else None
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    extra = {} if args.comment is None else {"comment": args.comment}
    result = run_export(ExportRequest(
        format=ExportFormat(args.format),
        source_text=source_text,
        show_hydrogens=not args.hide_hydrogens,
        style=style,
        **extra,
    ))

    if args.output is None:
        sys.stdout.write(result.text)
        return 0
    try:
        args.output.write_text(result.text)
    except OSError as exc:
        logger.error("cannot write %s: %s", args.output, exc)
        return 1
    logger.info("wrote %s (%s)", args.output, result.mime_type)
    return 0
