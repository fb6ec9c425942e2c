"""Wavefront OBJ export of the ball-and-stick triangle mesh."""

from __future__ import annotations

from kekule.mesh import build_mesh
from kekule.model import ExportStyle, Mesh, Molecule

GROUP_NAME = "MoleculeMesh"


def write_obj(mesh: Mesh, title: str = "kekule OBJ export") -> str:
    """Serialise a mesh as OBJ text.

    Layout: comment header (title, vertex and face counts), one
    ``v x y z`` line per vertex at four decimals, a blank line, the
    ``g`` group line, then one ``f i j k`` line per triangle with
    1-based indices and no normal or texture references.
    """
    vertices = mesh.vertices
    faces = mesh.faces
    lines = [
        "# " + " ".join(title.splitlines()),
        f"# Vertices: {len(vertices)}",
        f"# Faces: {len(faces)}",
        "",
    ]
    lines.extend(f"v {x:.4f} {y:.4f} {z:.4f}" for x, y, z in vertices)
    lines.append("")
    lines.append(f"g {GROUP_NAME}")
    lines.extend(f"f {i} {j} {k}" for i, j, k in faces)
    return "\n".join(lines) + "\n"


def export_obj(
    molecule: Molecule,
    show_hydrogens: bool = True,
    style: ExportStyle | None = None,
) -> str:
    """Build the molecule's mesh and serialise it as OBJ."""
    mesh = build_mesh(molecule, show_hydrogens, style)
    title = f"{molecule.title} OBJ export" if molecule.title else "kekule OBJ export"
    return write_obj(mesh, title=title)
