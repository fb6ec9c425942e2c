from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from kekule.model.colour import Colour


@dataclass
class Atom:
    """One atom of a structure, with its bonded neighbours.

    Attributes:
        element: Element symbol, e.g. ``"C"`` or ``"Cl"``.
        position: Cartesian position in angstroms, shape ``(3,)``.
        bonds: References to bonded neighbours.  Each reference is a
            stable atom index when the molecule carries them, otherwise
            a position in :attr:`Molecule.atoms`.
        bond_orders: Bond order per neighbour, aligned with *bonds*.
            May be shorter than *bonds*; missing entries count as
            single bonds.
        index: Explicit stable identity assigned at parse time, or
            ``None`` to identify the atom by its list position.
        colour: Optional colour override for the scene-graph export.
            Accepts any format understood by :func:`normalise_colour`.

    Raises:
        ValueError: If *position* is not three coordinates or
            *bond_orders* is longer than *bonds*.
    """

    element: str
    position: np.ndarray
    bonds: list[int] = field(default_factory=list)
    bond_orders: list[int] = field(default_factory=list)
    index: int | None = None
    colour: Colour | None = None

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)
        if self.position.shape != (3,):
            raise ValueError(
                f"position must have shape (3,), got {self.position.shape}"
            )
        if len(self.bond_orders) > len(self.bonds):
            raise ValueError(
                f"bond_orders has {len(self.bond_orders)} entries but "
                f"only {len(self.bonds)} bonds are listed"
            )

    @property
    def is_hydrogen(self) -> bool:
        """``True`` for hydrogen atoms (symbol ``H``, any case)."""
        return self.element.strip().upper() == "H"

    def bond_order(self, i: int) -> int:
        """Order of the *i*-th listed bond, defaulting to 1 when unset."""
        if i < len(self.bond_orders) and self.bond_orders[i]:
            return int(self.bond_orders[i])
        return 1
