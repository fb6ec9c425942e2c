"""Canonical bond set from a molecule's doubly-linked neighbour lists."""

from __future__ import annotations

import logging

from kekule._constants import VALID_BOND_ORDERS
from kekule.model import Bond, Molecule

logger = logging.getLogger(__name__)


def canonical_bonds(
    molecule: Molecule,
    show_hydrogens: bool = True,
) -> list[Bond]:
    """Deduplicate a molecule's neighbour lists into undirected bonds.

    Atoms are visited in order and each atom's neighbours in their
    listed order.  Every neighbour reference is resolved with
    :meth:`Molecule.resolve`; dangling references and self references
    are dropped.  A pair is keyed by its stable identities as
    ``(min, max)``, so the expected second listing from the other
    endpoint is absorbed.  The bond order comes from whichever endpoint
    lists the pair first; orders outside ``{1, 2, 3}`` are drawn as
    single bonds.

    The result is deterministic for a fixed input, but its order is an
    implementation detail: treat it as a set.

    Args:
        molecule: The structure to canonicalise.
        show_hydrogens: If ``False``, bonds with a hydrogen at either
            end are omitted.

    Returns:
        List of :class:`Bond` objects, each unordered pair at most once.
    """
    seen: dict[tuple[int, int], int] = {}
    bonds: list[Bond] = []

    for pos, atom in enumerate(molecule.atoms):
        for i, reference in enumerate(atom.bonds):
            other_pos = molecule.resolve(reference)
            if other_pos is None:
                continue
            other = molecule.atoms[other_pos]
            if not show_hydrogens and (atom.is_hydrogen or other.is_hydrogen):
                continue

            id_a = molecule.identity(pos)
            id_b = molecule.identity(other_pos)
            if id_a == id_b:
                logger.debug("self-referential bond on atom %d ignored", id_a)
                continue

            order = atom.bond_order(i)
            if order not in VALID_BOND_ORDERS:
                order = 1

            pair = (min(id_a, id_b), max(id_a, id_b))
            if pair in seen:
                if seen[pair] != order:
                    logger.debug(
                        "bond %d-%d listed with orders %d and %d; keeping %d",
                        pair[0], pair[1], seen[pair], order, seen[pair],
                    )
                continue
            seen[pair] = order
            bonds.append(Bond(pair[0], pair[1], order))

    return bonds
