"""Kekule: ball-and-stick geometry export for 3D molecular structures.

Kekule turns an in-memory structure (atoms, positions, bonded
neighbours with bond orders) into explicit sphere-and-cylinder triangle
meshes and writes them as Wavefront OBJ, as an X3D scene graph, or as a
plain XYZ coordinate list.

Example usage::

    from pathlib import Path

    from kekule import export_obj, parse_molfile

    molecule = parse_molfile(Path("caffeine.mol"))
    text = export_obj(molecule, show_hydrogens=False)
"""

from kekule.bonds import canonical_bonds
from kekule.defaults import (
    DISPLAY_RADII,
    ELEMENT_COLOURS,
    element_colour,
    element_radius,
)
from kekule.export import (
    ExportFormat,
    ExportRequest,
    ExportResult,
    export_obj,
    export_x3d,
    run_export,
    scene_nodes,
    write_obj,
    write_x3d,
    write_xyz,
)
from kekule.mesh import add_cylinder, add_sphere, bond_segments, build_mesh
from kekule.model import (
    Atom,
    Bond,
    Colour,
    ExportStyle,
    Mesh,
    Molecule,
    normalise_colour,
)
from kekule.parser import parse_molfile, parse_sdf
from kekule.styles import load_style, save_style

__all__ = [
    "Atom",
    "Bond",
    "Colour",
    "DISPLAY_RADII",
    "ELEMENT_COLOURS",
    "ExportFormat",
    "ExportRequest",
    "ExportResult",
    "ExportStyle",
    "Mesh",
    "Molecule",
    "add_cylinder",
    "add_sphere",
    "bond_segments",
    "build_mesh",
    "canonical_bonds",
    "element_colour",
    "element_radius",
    "export_obj",
    "export_x3d",
    "load_style",
    "normalise_colour",
    "parse_molfile",
    "parse_sdf",
    "run_export",
    "save_style",
    "scene_nodes",
    "write_obj",
    "write_x3d",
    "write_xyz",
]
