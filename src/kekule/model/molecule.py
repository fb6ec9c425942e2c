from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from kekule.model.atom import Atom

logger = logging.getLogger(__name__)


@dataclass
class Molecule:
    """An immutable-by-convention snapshot of a 3D structure.

    Atom identity is the atom's explicit :attr:`Atom.index` when set,
    otherwise its position in :attr:`atoms`.  Neighbour references in
    :attr:`Atom.bonds` are resolved with a single strategy (see
    :meth:`resolve`): stable identity first, list position only when no
    atom carries the referenced identity.

    Export functions borrow the molecule for the duration of one call
    and never mutate it.  Callers embedding kekule in a concurrent host
    must not mutate the molecule while an export is running.

    Attributes:
        atoms: Atoms in file order.
        title: Free-text title, used in export comments.

    Raises:
        ValueError: If two atoms share an explicit stable index, or an
            unindexed atom's position equals another atom's stable index.
    """

    atoms: list[Atom]
    title: str = ""
    _by_identity: dict[int, int] = field(
        init=False, repr=False, compare=False, default_factory=dict,
    )

    def __post_init__(self) -> None:
        self.atoms = list(self.atoms)
        for pos, atom in enumerate(self.atoms):
            if atom.index is None:
                continue
            if atom.index in self._by_identity:
                raise ValueError(
                    f"duplicate stable atom index {atom.index} at "
                    f"positions {self._by_identity[atom.index]} and {pos}"
                )
            self._by_identity[atom.index] = pos
        for pos, atom in enumerate(self.atoms):
            if atom.index is None and pos in self._by_identity:
                raise ValueError(
                    f"atom at position {pos} has no stable index and its "
                    f"position clashes with the stable index of the atom "
                    f"at position {self._by_identity[pos]}"
                )

    @classmethod
    def from_arrays(
        cls,
        elements: Sequence[str],
        positions: np.ndarray,
        bonds: Sequence[tuple[int, int, int]] = (),
        title: str = "",
    ) -> Molecule:
        """Build a molecule from element and position arrays.

        Every ``(i, j, order)`` entry in *bonds* is recorded on both
        endpoints, giving the doubly-linked neighbour lists a parsed
        structure normally carries.  Atoms receive stable indices equal
        to their positions.

        Args:
            elements: One element symbol per atom.
            positions: Coordinates of shape ``(n_atoms, 3)``.
            bonds: Bonds as ``(i, j, order)`` with 0-based positions.
            title: Molecule title.

        Raises:
            ValueError: If *positions* does not match *elements*.
        """
        positions = np.asarray(positions, dtype=float).reshape(-1, 3)
        if len(positions) != len(elements):
            raise ValueError(
                f"{len(elements)} elements but {len(positions)} positions"
            )
        atoms = [
            Atom(element=el, position=pos, index=i)
            for i, (el, pos) in enumerate(zip(elements, positions))
        ]
        for i, j, order in bonds:
            atoms[i].bonds.append(j)
            atoms[i].bond_orders.append(order)
            atoms[j].bonds.append(i)
            atoms[j].bond_orders.append(order)
        return cls(atoms=atoms, title=title)

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    @property
    def has_stable_indices(self) -> bool:
        """``True`` when at least one atom carries an explicit index."""
        return bool(self._by_identity)

    def identity(self, position: int) -> int:
        """Stable identity of the atom at list *position*."""
        atom = self.atoms[position]
        return position if atom.index is None else atom.index

    def resolve(self, reference: int) -> int | None:
        """Resolve a neighbour reference to a list position.

        Stable identity takes precedence.  Positional lookup is used
        only when no atom carries *reference* as its stable index; when
        the molecule does have stable indices this fallback is logged
        as a warning, since it usually means the neighbour lists and
        the indices disagree.

        Returns:
            The list position of the referenced atom, or ``None`` if
            the reference is dangling.
        """
        pos = self._by_identity.get(reference)
        if pos is not None:
            return pos
        if 0 <= reference < len(self.atoms):
            if self.has_stable_indices:
                logger.warning(
                    "neighbour reference %d has no stable index match; "
                    "falling back to list position", reference,
                )
            return reference
        logger.debug("dangling neighbour reference %d ignored", reference)
        return None

    def atom(self, identity: int) -> Atom:
        """Atom whose stable identity (see :meth:`identity`) is *identity*.

        Raises:
            KeyError: If no atom has that identity.
        """
        pos = self._by_identity.get(identity)
        if pos is None:
            if not 0 <= identity < len(self.atoms) or (
                self.atoms[identity].index is not None
            ):
                raise KeyError(identity)
            pos = identity
        return self.atoms[pos]

    @property
    def positions(self) -> np.ndarray:
        """All atom positions as an ``(n_atoms, 3)`` array."""
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([atom.position for atom in self.atoms])

    def visible_atoms(self, show_hydrogens: bool = True) -> list[Atom]:
        """Atoms drawn under the given hydrogen-visibility policy."""
        if show_hydrogens:
            return list(self.atoms)
        return [atom for atom in self.atoms if not atom.is_hydrogen]
