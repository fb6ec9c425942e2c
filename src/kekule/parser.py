"""MDL MOL / SDF (V2000) atom and bond block reader.

Only the connection table is read: the counts line, the atom block,
and the bond block.  Properties, charges, and data items are ignored.
Malformed input never raises; it produces an empty result and a
logged warning.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from kekule.model import Atom, Molecule

logger = logging.getLogger(__name__)

_COUNTS_RE = re.compile(r"^\s*(\d+)\s+(\d+)")
_END_MARKER = "M  END"
_RECORD_SEPARATOR = "$$$$"

# A standard molfile has three header lines before the counts line.
_HEADER_LINES = 3


def _read_source(source: str | Path) -> str:
    """Read a :class:`~pathlib.Path`; any string is already the content."""
    if isinstance(source, Path):
        return source.read_text()
    return source


def _parse_counts(line: str) -> tuple[int, int] | None:
    """Atom and bond counts from a counts line, or ``None``.

    V2000 counts are fixed-width three-character fields, which run
    together for structures with 100 or more atoms; lines tagged
    ``V2000`` are read by column, anything else by whitespace.
    """
    if "V3000" in line:
        return None
    if "V2000" in line:
        try:
            return int(line[0:3]), int(line[3:6])
        except ValueError:
            pass
    m = _COUNTS_RE.match(line)
    if m is None:
        return None
    return int(m.group(1)), int(m.group(2))


def find_counts_line(lines: list[str]) -> tuple[int, int, int] | None:
    """Locate the counts line of a molfile.

    The first line carrying a version tag is the counts line.  Without
    a tag, the first line starting with two integers is taken, which
    also accepts untagged and headerless fragments.

    Returns:
        ``(line_number, n_atoms, n_bonds)`` or ``None`` if no counts
        line exists or the block is in the unsupported V3000 format.
    """
    for i, line in enumerate(lines):
        if "V2000" in line or "V3000" in line:
            counts = _parse_counts(line)
            return None if counts is None else (i, *counts)
    for i, line in enumerate(lines):
        counts = _parse_counts(line)
        if counts is not None:
            return (i, *counts)
    return None


def read_atom_block(
    lines: list[str],
    counts_line: int,
    n_atoms: int,
) -> list[tuple[str, float, float, float]] | None:
    """Read ``(element, x, y, z)`` for each atom after the counts line.

    Reading stops after *n_atoms* lines.  Reaching the end of the text
    or an ``M  END`` marker first, or meeting a line without three
    coordinates and a symbol, means the block is truncated or
    malformed.

    Returns:
        The atom records, or ``None`` if the block is incomplete.
    """
    records: list[tuple[str, float, float, float]] = []
    for line in lines[counts_line + 1:]:
        if len(records) == n_atoms:
            break
        if line.startswith(_END_MARKER):
            break
        parts = line.split()
        if len(parts) < 4:
            return None
        try:
            x, y, z = float(parts[0]), float(parts[1]), float(parts[2])
        except ValueError:
            return None
        records.append((parts[3], x, y, z))

    if len(records) != n_atoms:
        return None
    return records


def _parse_bond_line(line: str) -> tuple[int, int, int] | None:
    """``(first, second, type)`` from a bond line, 1-based atom numbers."""
    try:
        return int(line[0:3]), int(line[3:6]), int(line[6:9])
    except ValueError:
        pass
    parts = line.split()
    if len(parts) < 3:
        return None
    try:
        return int(parts[0]), int(parts[1]), int(parts[2])
    except ValueError:
        return None


def parse_molfile(source: str | Path) -> Molecule:
    """Parse the first record of a MOL or SDF file into a molecule.

    Atoms receive stable indices equal to their 0-based position in
    the atom block.  Every bond is recorded on both endpoints, with the
    bond type from the file as the order on both sides.

    Args:
        source: A :class:`~pathlib.Path` to a ``.mol``/``.sdf`` file,
            or the file content as a string.  Strings are never
            treated as file names.

    Returns:
        The parsed :class:`Molecule`.  An empty molecule is returned
        (and a warning logged) when no counts line is found or the atom
        block is truncated.
    """
    text = _read_source(source)
    record = text.split(_RECORD_SEPARATOR, 1)[0]
    lines = record.splitlines()

    found = find_counts_line(lines)
    if found is None:
        logger.warning("no V2000 counts line found; returning empty molecule")
        return Molecule(atoms=[])
    counts_line, n_atoms, n_bonds = found
    title = lines[0].strip() if counts_line == _HEADER_LINES else ""

    records = read_atom_block(lines, counts_line, n_atoms)
    if records is None:
        logger.warning(
            "atom block truncated or malformed (expected %d atoms); "
            "returning empty molecule", n_atoms,
        )
        return Molecule(atoms=[], title=title)

    atoms = [
        Atom(element=el, position=(x, y, z), index=i)
        for i, (el, x, y, z) in enumerate(records)
    ]

    bond_start = counts_line + 1 + n_atoms
    for line in lines[bond_start:bond_start + n_bonds]:
        if line.startswith(_END_MARKER):
            logger.warning("bond block ended early at %r", line)
            break
        parsed = _parse_bond_line(line)
        if parsed is None:
            logger.warning("skipping unreadable bond line %r", line)
            continue
        first, second, order = parsed
        if not (1 <= first <= n_atoms and 1 <= second <= n_atoms):
            logger.warning(
                "skipping bond %d-%d: atom number out of range", first, second,
            )
            continue
        a, b = first - 1, second - 1
        atoms[a].bonds.append(b)
        atoms[a].bond_orders.append(order)
        atoms[b].bonds.append(a)
        atoms[b].bond_orders.append(order)

    return Molecule(atoms=atoms, title=title)


def parse_sdf(source: str | Path) -> list[Molecule]:
    """Parse every record of an SDF file.

    Records whose connection table cannot be read yield empty
    molecules, so the result stays aligned with the record count.
    """
    text = _read_source(source)
    chunks = text.split(_RECORD_SEPARATOR)
    # Text after the final separator is only trailing whitespace.
    if len(chunks) > 1 and not chunks[-1].strip():
        chunks = chunks[:-1]
    molecules = []
    for i, chunk in enumerate(chunks):
        if i > 0:
            # Drop the line break that ends the "$$$$" line itself.
            chunk = chunk.removeprefix("\r").removeprefix("\n")
        molecules.append(parse_molfile(chunk))
    return molecules
