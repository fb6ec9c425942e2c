"""XYZ coordinate-list export straight from molfile text."""

from __future__ import annotations

import logging

from kekule.parser import find_counts_line, read_atom_block

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = "Molecule exported by kekule"


def write_xyz(text: str, comment: str = DEFAULT_COMMENT) -> str:
    """Convert the atom block of a MOL/SDF text to XYZ.

    The output is the atom count, a comment line, and one
    ``ELEMENT X Y Z`` line per atom with Python's default float
    formatting.  Input without a counts line, or with a truncated or
    malformed atom block, produces a zero-atom file instead of an
    error.

    Args:
        text: Molfile or SDF content.  Only the first record is read;
            the text is never interpreted as a file name.
        comment: Text for the comment line.  Line breaks are replaced
            by spaces so the file stays well formed.

    Returns:
        The XYZ text, ending in a newline.
    """
    comment = " ".join(comment.splitlines())
    lines = text.split("$$$$", 1)[0].splitlines()

    records: list[tuple[str, float, float, float]] = []
    found = find_counts_line(lines)
    if found is None:
        logger.warning("no counts line in structure text; writing empty XYZ")
    else:
        counts_line, n_atoms, _ = found
        block = read_atom_block(lines, counts_line, n_atoms)
        if block is None:
            logger.warning(
                "atom block truncated or malformed; writing empty XYZ",
            )
        else:
            records = block

    out = [str(len(records)), comment]
    out.extend(f"{el} {x} {y} {z}" for el, x, y, z in records)
    return "\n".join(out) + "\n"
