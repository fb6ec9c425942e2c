from __future__ import annotations

from dataclasses import dataclass

from kekule._constants import VALID_BOND_ORDERS


@dataclass(frozen=True)
class Bond:
    """A canonical undirected bond between two atoms.

    Instances are normally produced by :func:`kekule.canonical_bonds`
    rather than constructed by hand.

    Attributes:
        index_a: Stable identity of the lower-indexed atom.
        index_b: Stable identity of the higher-indexed atom.
        order: Bond multiplicity: 1, 2, or 3.

    Raises:
        ValueError: If the pair is not in canonical order or the order
            is not 1, 2, or 3.
    """

    index_a: int
    index_b: int
    order: int = 1

    def __post_init__(self) -> None:
        if self.index_a >= self.index_b:
            raise ValueError(
                f"bond endpoints must satisfy index_a < index_b, "
                f"got ({self.index_a}, {self.index_b})"
            )
        if self.order not in VALID_BOND_ORDERS:
            raise ValueError(
                f"bond order must be one of {sorted(VALID_BOND_ORDERS)}, "
                f"got {self.order}"
            )

    @property
    def pair(self) -> tuple[int, int]:
        """The canonical ``(index_a, index_b)`` key."""
        return (self.index_a, self.index_b)
