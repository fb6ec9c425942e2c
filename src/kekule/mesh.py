"""Triangle mesh generation: atom spheres, bond cylinders, whole molecules."""

from __future__ import annotations

import numpy as np

from kekule._constants import (
    CYLINDER_SEGMENTS,
    SPHERE_LAT_BANDS,
    SPHERE_LONG_BANDS,
)
from kekule.bonds import canonical_bonds
from kekule.defaults import element_radius
from kekule.model import ExportStyle, Mesh, Molecule
from kekule.vector import alignment_rotation, perpendicular, rotate


def _make_unit_sphere(
    lat_bands: int,
    long_bands: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Unit UV-sphere directions and 0-based faces.

    Vertices are laid out ring by ring from the +Y pole to the -Y pole,
    ``long_bands + 1`` per ring (the seam vertex is repeated).

    Returns:
        ``(directions, faces)`` with shapes
        ``((lat_bands + 1) * (long_bands + 1), 3)`` and
        ``(2 * lat_bands * long_bands, 3)``.
    """
    theta = np.linspace(0.0, np.pi, lat_bands + 1)
    phi = np.linspace(0.0, 2.0 * np.pi, long_bands + 1)
    th, ph = np.meshgrid(theta, phi, indexing="ij")
    directions = np.column_stack([
        (np.cos(ph) * np.sin(th)).ravel(),
        np.cos(th).ravel(),
        (np.sin(ph) * np.sin(th)).ravel(),
    ])

    lat, lon = np.meshgrid(
        np.arange(lat_bands), np.arange(long_bands), indexing="ij",
    )
    first = (lat * (long_bands + 1) + lon).ravel()
    second = first + long_bands + 1
    faces = np.empty((2 * len(first), 3), dtype=int)
    faces[0::2] = np.column_stack([first, second, first + 1])
    faces[1::2] = np.column_stack([second, second + 1, first + 1])
    return directions, faces


_UNIT_SPHERE = _make_unit_sphere(SPHERE_LAT_BANDS, SPHERE_LONG_BANDS)


def _unit_sphere(lat_bands: int, long_bands: int) -> tuple[np.ndarray, np.ndarray]:
    if (lat_bands, long_bands) == (SPHERE_LAT_BANDS, SPHERE_LONG_BANDS):
        return _UNIT_SPHERE
    return _make_unit_sphere(lat_bands, long_bands)


def _make_unit_tube(segments: int) -> tuple[np.ndarray, np.ndarray]:
    """Unit ring directions in the XZ plane and 0-based side-wall faces.

    Ring vertices interleave top and bottom: ``top_0, bottom_0, top_1,
    bottom_1, ...`` for ``segments + 1`` ring positions (the seam is
    repeated), so each radial cell is the quad ``2i .. 2i + 3``.
    """
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    ring = np.column_stack([
        np.cos(angles), np.zeros_like(angles), np.sin(angles),
    ])
    base = 2 * np.arange(segments)
    faces = np.empty((2 * segments, 3), dtype=int)
    faces[0::2] = np.column_stack([base, base + 1, base + 2])
    faces[1::2] = np.column_stack([base + 1, base + 3, base + 2])
    return ring, faces


_UNIT_TUBE = _make_unit_tube(CYLINDER_SEGMENTS)


def _unit_tube(segments: int) -> tuple[np.ndarray, np.ndarray]:
    if segments == CYLINDER_SEGMENTS:
        return _UNIT_TUBE
    return _make_unit_tube(segments)


def sphere_vertex_count(style: ExportStyle | None = None) -> int:
    """Vertices in one atom sphere: ``(lat + 1) * (long + 1)``."""
    style = style or ExportStyle()
    return (style.sphere_lat_bands + 1) * (style.sphere_long_bands + 1)


def sphere_face_count(style: ExportStyle | None = None) -> int:
    """Triangles in one atom sphere: ``2 * lat * long``."""
    style = style or ExportStyle()
    return 2 * style.sphere_lat_bands * style.sphere_long_bands


def cylinder_vertex_count(style: ExportStyle | None = None) -> int:
    """Vertices in one bond cylinder: ``2 * (segments + 1)``."""
    style = style or ExportStyle()
    return 2 * (style.cylinder_segments + 1)


def cylinder_face_count(style: ExportStyle | None = None) -> int:
    """Triangles in one bond cylinder: ``2 * segments``."""
    style = style or ExportStyle()
    return 2 * style.cylinder_segments


def add_sphere(
    mesh: Mesh,
    centre: np.ndarray,
    radius: float,
    lat_bands: int = SPHERE_LAT_BANDS,
    long_bands: int = SPHERE_LONG_BANDS,
) -> int:
    """Append a UV-sphere to *mesh*.

    Normals are the unit directions from the centre.

    Returns:
        The 1-based index of the sphere's first vertex.
    """
    directions, faces = _unit_sphere(lat_bands, long_bands)
    centre = np.asarray(centre, dtype=float)
    first = mesh.append(centre + radius * directions, directions, faces)
    mesh.sphere_count += 1
    return first


def add_cylinder(
    mesh: Mesh,
    start: np.ndarray,
    end: np.ndarray,
    radius: float,
    segments: int = CYLINDER_SEGMENTS,
) -> int:
    """Append an open cylinder (side wall only) between two points.

    The tube is built around the Y axis with rings at ``+height / 2``
    and ``-height / 2``, rotated so Y points from *start* to *end*, and
    moved to the segment midpoint.  Caps are omitted because bond ends
    sit inside the atom spheres.  A zero-length segment produces a
    flat, finite ring rather than NaN.

    Returns:
        The 1-based index of the cylinder's first vertex.
    """
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)
    bond_vec = end - start
    height = float(np.linalg.norm(bond_vec))
    axis, angle = alignment_rotation(bond_vec)

    ring, faces = _unit_tube(segments)
    half = np.array([0.0, height / 2.0, 0.0])
    local = np.empty((2 * len(ring), 3))
    local[0::2] = radius * ring + half
    local[1::2] = radius * ring - half
    normals = np.repeat(ring, 2, axis=0)

    midpoint = (start + end) / 2.0
    vertices = rotate(local, axis, angle) + midpoint
    first = mesh.append(vertices, rotate(normals, axis, angle), faces)
    mesh.cylinder_count += 1
    return first


def bond_segments(
    start: np.ndarray,
    end: np.ndarray,
    order: int,
    style: ExportStyle | None = None,
) -> list[tuple[np.ndarray, np.ndarray, float]]:
    """Cylinders representing one bond, as ``(start, end, radius)``.

    * Order 1: one cylinder of ``single_bond_radius`` on the axis.
    * Order 2: two cylinders of ``multi_bond_radius``, shifted by
      ``+/- double_bond_offset`` along a perpendicular.
    * Order 3: three cylinders of ``multi_bond_radius``, one on the
      axis and two shifted by ``+/- triple_bond_offset``.

    Any other order is drawn as a single bond.
    """
    style = style or ExportStyle()
    start = np.asarray(start, dtype=float)
    end = np.asarray(end, dtype=float)

    if order == 2:
        shift = perpendicular(end - start) * style.double_bond_offset
        return [
            (start + shift, end + shift, style.multi_bond_radius),
            (start - shift, end - shift, style.multi_bond_radius),
        ]
    if order == 3:
        shift = perpendicular(end - start) * style.triple_bond_offset
        return [
            (start, end, style.multi_bond_radius),
            (start + shift, end + shift, style.multi_bond_radius),
            (start - shift, end - shift, style.multi_bond_radius),
        ]
    return [(start, end, style.single_bond_radius)]


def build_mesh(
    molecule: Molecule,
    show_hydrogens: bool = True,
    style: ExportStyle | None = None,
) -> Mesh:
    """Build the ball-and-stick mesh of a whole molecule.

    One sphere per visible atom in atom order, then the cylinders of
    each canonical bond in canonical order.

    Args:
        molecule: The structure to mesh.  It is not modified.
        show_hydrogens: If ``False``, hydrogen atoms and every bond to
            a hydrogen are left out.
        style: Visual conventions; defaults to :class:`ExportStyle`.

    Returns:
        A new :class:`Mesh`.
    """
    style = style or ExportStyle()
    mesh = Mesh()

    for atom in molecule.visible_atoms(show_hydrogens):
        add_sphere(
            mesh,
            atom.position,
            element_radius(atom.element) * style.atom_scale,
            style.sphere_lat_bands,
            style.sphere_long_bands,
        )

    for bond in canonical_bonds(molecule, show_hydrogens):
        a = molecule.atom(bond.index_a)
        b = molecule.atom(bond.index_b)
        for start, end, radius in bond_segments(
            a.position, b.position, bond.order, style,
        ):
            add_cylinder(mesh, start, end, radius, style.cylinder_segments)

    return mesh
