"""Tests for the X3D scene-graph export."""

import logging

import numpy as np
import pytest
from defusedxml.ElementTree import fromstring

from kekule.export.x3d import (
    X3D_PUBLIC_ID,
    BondGroup,
    SphereNode,
    export_x3d,
    scene_nodes,
    write_x3d,
)
from kekule.model import Atom, ExportStyle, Molecule


def _parse(text):
    """Parse the document body, skipping the declaration and DOCTYPE."""
    return fromstring(text[text.index("<X3D"):])


def _bond_transforms(root):
    return [
        t for t in root.find("Scene").findall("Transform")
        if t.get("rotation") is not None
    ]


class TestSceneNodes:
    def test_one_sphere_per_atom_then_bonds(self, formaldehyde):
        nodes = scene_nodes(formaldehyde)
        assert [type(n) for n in nodes] == [SphereNode] * 4 + [BondGroup] * 3

    def test_hidden_hydrogens(self, formaldehyde):
        nodes = scene_nodes(formaldehyde, show_hydrogens=False)
        assert sum(isinstance(n, SphereNode) for n in nodes) == 2
        assert sum(isinstance(n, BondGroup) for n in nodes) == 1

    def test_sphere_radius_and_colour(self, co_molecule):
        carbon, oxygen = scene_nodes(co_molecule)[:2]
        assert carbon.radius == pytest.approx(0.28)
        assert oxygen.appearance.diffuse == (1.0, 0.05, 0.05)

    def test_atom_comment(self, co_molecule):
        oxygen = scene_nodes(co_molecule)[1]
        assert oxygen.comment == "Atom 2: O at (1.200, 0.000, 0.000)"

    def test_colour_override(self):
        molecule = Molecule([Atom("C", [0, 0, 0], colour="blue")])
        sphere = scene_nodes(molecule)[0]
        assert sphere.appearance.diffuse == (0.0, 0.0, 1.0)

    def test_bad_colour_override_falls_back(self, caplog):
        molecule = Molecule([Atom("O", [0, 0, 0], colour="notacolour")])
        with caplog.at_level(logging.WARNING, logger="kekule.export.x3d"):
            sphere = scene_nodes(molecule)[0]
        assert sphere.appearance.diffuse == (1.0, 0.05, 0.05)
        assert "unusable colour" in caplog.text

    def test_bond_group_geometry(self, co_molecule):
        group = scene_nodes(co_molecule)[2]
        np.testing.assert_allclose(group.translation, [0.6, 0.0, 0.0])
        assert group.angle == pytest.approx(np.pi / 2)
        assert len(group.cylinders) == 1
        stick = group.cylinders[0]
        assert stick.height == pytest.approx(1.2)
        assert stick.radius == pytest.approx(0.08)
        assert stick.offset == 0.0
        assert group.comment == "Bond 0-1"

    @pytest.mark.parametrize("order, offsets, label", [
        (2, [0.1, -0.1], "Double Bond 0-1"),
        (3, [0.0, 0.12, -0.12], "Triple Bond 0-1"),
    ])
    def test_multiple_bond_sticks(self, order, offsets, label):
        molecule = Molecule.from_arrays(
            ["C", "C"], [[0, 0, 0], [0, 0, 1.3]], bonds=[(0, 1, order)],
        )
        group = scene_nodes(molecule)[2]
        assert [c.offset for c in group.cylinders] == pytest.approx(offsets)
        assert all(c.radius == pytest.approx(0.04) for c in group.cylinders)
        assert group.comment == label

    def test_bond_along_y_has_zero_angle(self):
        molecule = Molecule.from_arrays(
            ["C", "C"], [[0, 0, 0], [0, 1.5, 0]], bonds=[(0, 1, 1)],
        )
        group = scene_nodes(molecule)[2]
        assert group.angle == 0.0
        assert np.all(np.isfinite(group.axis))

    def test_antiparallel_bond_is_finite(self):
        molecule = Molecule.from_arrays(
            ["C", "C"], [[0, 1.5, 0], [0, 0, 0]], bonds=[(0, 1, 1)],
        )
        group = scene_nodes(molecule)[2]
        assert group.angle == pytest.approx(np.pi)
        assert np.all(np.isfinite(group.axis))


class TestWriteX3d:
    def test_prolog(self, co_molecule):
        text = export_x3d(co_molecule)
        assert text.startswith("<?xml")
        assert "<!DOCTYPE X3D" in text
        assert X3D_PUBLIC_ID in text

    def test_root_attributes(self, co_molecule):
        root = _parse(export_x3d(co_molecule))
        assert root.tag == "X3D"
        assert root.get("profile") == "Immersive"
        assert root.get("version") == "3.0"

    def test_background(self, co_molecule):
        root = _parse(export_x3d(co_molecule))
        sky = root.find("Scene/Background")
        assert sky.get("skyColor") == "1.000 1.000 1.000"

    def test_custom_background(self, co_molecule):
        style = ExportStyle(background="black")
        root = _parse(export_x3d(co_molecule, style=style))
        assert root.find("Scene/Background").get("skyColor") == "0.000 0.000 0.000"

    def test_spheres(self, co_molecule):
        root = _parse(export_x3d(co_molecule))
        spheres = root.findall("Scene/Transform/Shape/Sphere")
        assert [s.get("radius") for s in spheres] == ["0.2800", "0.2600"]
        translations = [
            t.get("translation") for t in root.findall("Scene/Transform")
        ]
        assert translations[:2] == ["0.0000 0.0000 0.0000", "1.2000 0.0000 0.0000"]

    def test_atom_material(self, co_molecule):
        root = _parse(export_x3d(co_molecule))
        material = root.find("Scene/Transform/Shape/Appearance/Material")
        assert material.get("diffuseColor") == "0.600 0.600 0.600"
        assert material.get("specularColor") == "0.500 0.500 0.500"
        assert material.get("shininess") == "0.300"
        assert material.get("ambientIntensity") == "0.300"

    def test_single_bond_cylinder(self, co_molecule):
        root = _parse(export_x3d(co_molecule))
        (bond,) = _bond_transforms(root)
        assert bond.get("translation") == "0.6000 0.0000 0.0000"
        cylinder = bond.find("Shape/Cylinder")
        assert cylinder.get("radius") == "0.0800"
        assert cylinder.get("height") == "1.2000"
        material = bond.find("Shape/Appearance/Material")
        assert material.get("diffuseColor") == "0.700 0.700 0.700"
        assert material.get("ambientIntensity") is None

    def test_rotation_maps_y_onto_bond(self, co_molecule):
        from kekule.vector import Y_AXIS, rotate

        root = _parse(export_x3d(co_molecule))
        (bond,) = _bond_transforms(root)
        ax, ay, az, angle = (float(v) for v in bond.get("rotation").split())
        out = rotate(Y_AXIS, np.array([ax, ay, az]), angle)
        np.testing.assert_allclose(out, [1.0, 0.0, 0.0], atol=1e-3)

    def test_double_bond_sticks_nested(self, formaldehyde):
        root = _parse(export_x3d(formaldehyde, show_hydrogens=False))
        (bond,) = _bond_transforms(root)
        shifted = bond.findall("Transform")
        assert [t.get("translation") for t in shifted] == [
            "0.1000 0.0000 0.0000", "-0.1000 0.0000 0.0000",
        ]
        radii = [c.get("radius") for c in bond.iter("Cylinder")]
        assert radii == ["0.0400", "0.0400"]

    def test_triple_bond_has_centre_stick(self, two_records_path):
        from kekule.parser import parse_sdf

        acetylene = parse_sdf(two_records_path)[1]
        root = _parse(export_x3d(acetylene, show_hydrogens=False))
        (bond,) = _bond_transforms(root)
        assert bond.find("Shape/Cylinder") is not None
        assert len(bond.findall("Transform")) == 2
        assert len(list(bond.iter("Cylinder"))) == 3

    def test_comments(self, formaldehyde):
        text = export_x3d(formaldehyde)
        assert "<!-- formaldehyde: 4 atoms -->" in text
        assert "<!-- Atom 1: C at (0.000, 0.000, 0.000) -->" in text
        assert "<!-- Double Bond 0-1 -->" in text

    def test_default_heading(self, co_molecule):
        assert "<!-- Molecular Structure: 2 atoms -->" in export_x3d(co_molecule)

    def test_comment_double_dash_escaped(self, co_molecule):
        co_molecule.title = "a--b"
        text = export_x3d(co_molecule)
        assert "a- -b" in text
        _parse(text)

    def test_empty_scene(self):
        root = _parse(write_x3d([]))
        scene = root.find("Scene")
        assert scene.find("Background") is not None
        assert scene.findall("Transform") == []

    def test_deterministic(self, formaldehyde):
        assert export_x3d(formaldehyde) == export_x3d(formaldehyde)
