"""Export style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from kekule.model import ExportStyle


def save_style(path: str | Path, style: ExportStyle) -> None:
    """Save an export style to a JSON file.

    Only fields that differ from the defaults are written.  The file
    is human-readable with two-space indentation.

    Args:
        path: Destination file path.
        style: The style to save.
    """
    data = {"export_style": style.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_style(path: str | Path) -> ExportStyle:
    """Load an export style from a JSON file.

    The ``"export_style"`` section is optional; a file without it
    yields the default style.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`ExportStyle`.

    Raises:
        ValueError: If the file contains unknown top-level or style
            keys, or invalid style values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("style file must contain a JSON object")

    unknown = set(data) - {"export_style"}
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )
    return ExportStyle.from_dict(data.get("export_style", {}))
