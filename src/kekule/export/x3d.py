"""X3D scene-graph export.

Atoms and bonds are first turned into a small tree of declarative scene
nodes (:class:`SphereNode` and :class:`BondGroup` holding
:class:`CylinderNode` children) and then written by one generic
serialiser.  Unlike the OBJ export no triangles are generated: the
viewer tessellates the primitives itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from xml.dom import minidom

import numpy as np
from numpy.typing import ArrayLike

from kekule.bonds import canonical_bonds
from kekule.defaults import element_colour, element_radius
from kekule.model import (
    Atom, Colour, ExportStyle, Molecule, format_colour, normalise_colour,
)
from kekule.vector import alignment_rotation

logger = logging.getLogger(__name__)

X3D_PUBLIC_ID = "ISO//Web3D//DTD X3D 3.0//EN"
X3D_SYSTEM_ID = "http://www.web3d.org/specifications/x3d-3.0.dtd"

_BOND_LABELS = {1: "Bond", 2: "Double Bond", 3: "Triple Bond"}


@dataclass(frozen=True)
class Appearance:
    """Material of one shape.

    Attributes:
        diffuse: Diffuse RGB colour.
        specular: Specular RGB colour, or ``None`` to omit.
        shininess: Material shininess in ``[0, 1]``, or ``None``.
        ambient_intensity: Ambient intensity in ``[0, 1]``, or ``None``.
    """

    diffuse: tuple[float, float, float]
    specular: tuple[float, float, float] | None = None
    shininess: float | None = None
    ambient_intensity: float | None = None


@dataclass
class SphereNode:
    """An atom: a sphere translated to the atom position."""

    translation: np.ndarray
    radius: float
    appearance: Appearance
    comment: str = ""


@dataclass
class CylinderNode:
    """One bond stick in the local frame of its :class:`BondGroup`.

    The local Y axis runs along the bond, so a stick is placed by its
    sideways shift along local X.
    """

    offset: float
    radius: float
    height: float
    appearance: Appearance


@dataclass
class BondGroup:
    """A bond: a transform to the bond midpoint and axis, with sticks."""

    translation: np.ndarray
    axis: np.ndarray
    angle: float
    cylinders: list[CylinderNode] = field(default_factory=list)
    comment: str = ""


SceneNode = SphereNode | BondGroup


def _fmt(values: ArrayLike, decimals: int = 4) -> str:
    return " ".join(f"{float(v):.{decimals}f}" for v in np.atleast_1d(values))


def _atom_colour(atom: Atom) -> tuple[float, float, float]:
    """Explicit colour override if usable, else the element colour."""
    if atom.colour is not None:
        try:
            return normalise_colour(atom.colour)
        except ValueError:
            logger.warning(
                "ignoring unusable colour %r on %s atom",
                atom.colour, atom.element,
            )
    return element_colour(atom.element)


def _stick_offsets(order: int, style: ExportStyle) -> list[float]:
    """Sideways offsets of the sticks drawn for one bond order."""
    if order == 2:
        return [style.double_bond_offset, -style.double_bond_offset]
    if order == 3:
        return [0.0, style.triple_bond_offset, -style.triple_bond_offset]
    return [0.0]


def scene_nodes(
    molecule: Molecule,
    show_hydrogens: bool = True,
    style: ExportStyle | None = None,
) -> list[SceneNode]:
    """Build the declarative scene for a molecule.

    One :class:`SphereNode` per visible atom (numbered from 1 in the
    comments), followed by one :class:`BondGroup` per canonical bond
    with one, two, or three cylinders following the same offset rule
    as the mesh export.
    """
    style = style or ExportStyle()
    nodes: list[SceneNode] = []

    atom_material = dict(
        specular=(0.5, 0.5, 0.5), shininess=0.3, ambient_intensity=0.3,
    )
    for n, atom in enumerate(molecule.visible_atoms(show_hydrogens), start=1):
        x, y, z = atom.position
        nodes.append(SphereNode(
            translation=atom.position,
            radius=element_radius(atom.element) * style.atom_scale,
            appearance=Appearance(diffuse=_atom_colour(atom), **atom_material),
            comment=f"Atom {n}: {atom.element} at ({x:.3f}, {y:.3f}, {z:.3f})",
        ))

    bond_look = Appearance(
        diffuse=normalise_colour(style.bond_colour),
        specular=(0.3, 0.3, 0.3),
        shininess=0.2,
    )
    for bond in canonical_bonds(molecule, show_hydrogens):
        p_a = molecule.atom(bond.index_a).position
        p_b = molecule.atom(bond.index_b).position
        bond_vec = p_b - p_a
        length = float(np.linalg.norm(bond_vec))
        axis, angle = alignment_rotation(bond_vec)
        radius = (
            style.single_bond_radius if bond.order == 1
            else style.multi_bond_radius
        )
        nodes.append(BondGroup(
            translation=(p_a + p_b) / 2.0,
            axis=axis,
            angle=angle,
            cylinders=[
                CylinderNode(offset, radius, length, bond_look)
                for offset in _stick_offsets(bond.order, style)
            ],
            comment=f"{_BOND_LABELS[bond.order]} {bond.index_a}-{bond.index_b}",
        ))

    return nodes


def _comment(doc: minidom.Document, text: str) -> minidom.Comment:
    # XML comments may not contain "--".
    text = " ".join(text.splitlines()).replace("--", "- -")
    return doc.createComment(f" {text} ")


def _material(doc: minidom.Document, look: Appearance) -> minidom.Element:
    appearance = doc.createElement("Appearance")
    material = doc.createElement("Material")
    material.setAttribute("diffuseColor", format_colour(look.diffuse))
    if look.specular is not None:
        material.setAttribute("specularColor", format_colour(look.specular))
    if look.shininess is not None:
        material.setAttribute("shininess", f"{look.shininess:.3f}")
    if look.ambient_intensity is not None:
        material.setAttribute(
            "ambientIntensity", f"{look.ambient_intensity:.3f}",
        )
    appearance.appendChild(material)
    return appearance


def _shape(
    doc: minidom.Document,
    geometry: minidom.Element,
    look: Appearance,
) -> minidom.Element:
    shape = doc.createElement("Shape")
    shape.appendChild(geometry)
    shape.appendChild(_material(doc, look))
    return shape


def _node_element(doc: minidom.Document, node: SceneNode) -> minidom.Element:
    """Serialise one scene node to its ``Transform`` element."""
    transform = doc.createElement("Transform")
    transform.setAttribute("translation", _fmt(node.translation))

    if isinstance(node, SphereNode):
        sphere = doc.createElement("Sphere")
        sphere.setAttribute("radius", _fmt(node.radius))
        transform.appendChild(_shape(doc, sphere, node.appearance))
        return transform

    transform.setAttribute(
        "rotation", f"{_fmt(node.axis)} {node.angle:.4f}",
    )
    for stick in node.cylinders:
        cylinder = doc.createElement("Cylinder")
        cylinder.setAttribute("radius", _fmt(stick.radius))
        cylinder.setAttribute("height", _fmt(stick.height))
        shape = _shape(doc, cylinder, stick.appearance)
        if stick.offset == 0.0:
            transform.appendChild(shape)
        else:
            shifted = doc.createElement("Transform")
            shifted.setAttribute("translation", _fmt([stick.offset, 0.0, 0.0]))
            shifted.appendChild(shape)
            transform.appendChild(shifted)
    return transform


def write_x3d(
    nodes: list[SceneNode],
    background: Colour = (1.0, 1.0, 1.0),
    title: str = "",
) -> str:
    """Serialise scene nodes as an X3D 3.0 document.

    Args:
        nodes: Scene nodes from :func:`scene_nodes`.
        background: Sky colour; any format understood by
            :func:`normalise_colour`.
        title: Optional molecule title, added to the header comment.

    Returns:
        The XML text, starting with the XML declaration and the X3D
        DOCTYPE.  Identical input always gives identical output.
    """
    impl = minidom.getDOMImplementation()
    doctype = impl.createDocumentType("X3D", X3D_PUBLIC_ID, X3D_SYSTEM_ID)
    doc = impl.createDocument(None, "X3D", doctype)
    root = doc.documentElement
    root.setAttribute("profile", "Immersive")
    root.setAttribute("version", "3.0")

    scene = doc.createElement("Scene")
    root.appendChild(scene)

    n_atoms = sum(isinstance(node, SphereNode) for node in nodes)
    heading = f"{title or 'Molecular Structure'}: {n_atoms} atoms"
    scene.appendChild(_comment(doc, heading))

    sky = doc.createElement("Background")
    sky.setAttribute("skyColor", format_colour(normalise_colour(background)))
    scene.appendChild(sky)

    for node in nodes:
        if node.comment:
            scene.appendChild(_comment(doc, node.comment))
        scene.appendChild(_node_element(doc, node))

    return doc.toprettyxml(indent="  ", encoding="UTF-8").decode("utf-8")


def export_x3d(
    molecule: Molecule,
    show_hydrogens: bool = True,
    style: ExportStyle | None = None,
) -> str:
    """Build the scene for a molecule and serialise it as X3D."""
    style = style or ExportStyle()
    nodes = scene_nodes(molecule, show_hydrogens, style)
    return write_x3d(nodes, background=style.background, title=molecule.title)
