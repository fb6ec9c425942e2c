"""Core data model for kekule: atoms, molecules, bonds, meshes, and styles.

Everything is re-exported here so that ``from kekule.model import
Molecule`` works without knowing the submodule layout.
"""

from kekule.model.atom import Atom
from kekule.model.bond import Bond
from kekule.model.colour import Colour, format_colour, normalise_colour
from kekule.model.export_style import ExportStyle
from kekule.model.mesh import Mesh
from kekule.model.molecule import Molecule

__all__ = [
    "Atom",
    "Bond",
    "Colour",
    "ExportStyle",
    "Mesh",
    "Molecule",
    "format_colour",
    "normalise_colour",
]
