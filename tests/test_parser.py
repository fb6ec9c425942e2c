"""Tests for kekule.parser — MOL/SDF connection-table reading."""

import logging

import numpy as np
import pytest

from kekule.parser import (
    find_counts_line,
    parse_molfile,
    parse_sdf,
    read_atom_block,
)

HEADERLESS = """\
  2  1  0  0  0  0  0  0  0  0999 V2000
    0.0000    0.0000    0.0000 C   0  0
    1.2000    0.0000    0.0000 O   0  0
  1  2  2  0
"""


class TestFindCountsLine:
    def test_fourth_line(self, formaldehyde_path):
        lines = formaldehyde_path.read_text().splitlines()
        assert find_counts_line(lines) == (3, 4, 3)

    def test_headerless_scan(self):
        assert find_counts_line(HEADERLESS.splitlines()) == (0, 2, 1)

    def test_fixed_width_large_counts(self):
        lines = ["t", "", "", "123456  0  0  0  0  0  0  0999 V2000"]
        assert find_counts_line(lines) == (3, 123, 456)

    def test_v3000_rejected(self):
        lines = ["t", "", "", "  0  0  0     0  0            999 V3000"]
        assert find_counts_line(lines) is None

    def test_no_counts_line(self):
        assert find_counts_line(["hello", "world"]) is None

    def test_empty(self):
        assert find_counts_line([]) is None


class TestReadAtomBlock:
    def test_reads_records(self, formaldehyde_path):
        lines = formaldehyde_path.read_text().splitlines()
        records = read_atom_block(lines, 3, 4)
        assert records[0] == ("C", 0.0, 0.0, 0.0)
        assert records[2] == ("H", -0.55, 0.95, 0.0)
        assert len(records) == 4

    def test_truncated_returns_none(self):
        lines = ["  3  0", "    0.0 0.0 0.0 C"]
        assert read_atom_block(lines, 0, 3) is None

    def test_early_end_marker_returns_none(self):
        lines = ["  2  0", "    0.0 0.0 0.0 C", "M  END"]
        assert read_atom_block(lines, 0, 2) is None

    def test_malformed_coordinate_returns_none(self):
        lines = ["  1  0", "    0.0 abc 0.0 C"]
        assert read_atom_block(lines, 0, 1) is None

    def test_zero_atoms(self):
        assert read_atom_block(["  0  0"], 0, 0) == []


class TestParseMolfile:
    def test_from_path(self, formaldehyde_path):
        molecule = parse_molfile(formaldehyde_path)
        assert len(molecule) == 4
        assert molecule.title == "formaldehyde"
        assert [a.element for a in molecule] == ["C", "O", "H", "H"]

    def test_path_string_is_content_not_file_name(self, formaldehyde_path):
        assert len(parse_molfile(str(formaldehyde_path))) == 0

    def test_long_single_line_gives_empty(self):
        assert len(parse_molfile("x" * 5000)) == 0

    def test_from_text(self, formaldehyde_path):
        molecule = parse_molfile(formaldehyde_path.read_text())
        np.testing.assert_allclose(molecule.atoms[3].position, [-0.55, -0.95, 0.0])

    def test_bonds_on_both_ends(self, formaldehyde_path):
        molecule = parse_molfile(formaldehyde_path)
        carbon, oxygen, h1, h2 = molecule.atoms
        assert carbon.bonds == [1, 2, 3]
        assert carbon.bond_orders == [2, 1, 1]
        assert oxygen.bonds == [0]
        assert oxygen.bond_orders == [2]
        assert h2.bonds == [0]

    def test_stable_indices(self, formaldehyde_path):
        molecule = parse_molfile(formaldehyde_path)
        assert [a.index for a in molecule] == [0, 1, 2, 3]

    def test_headerless_has_no_title(self):
        molecule = parse_molfile(HEADERLESS)
        assert molecule.title == ""
        assert len(molecule) == 2
        assert molecule.atoms[0].bond_orders == [2]

    def test_first_record_only(self, two_records_path):
        molecule = parse_molfile(two_records_path)
        assert molecule.title == "formaldehyde"

    def test_no_counts_line_gives_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger="kekule.parser"):
            molecule = parse_molfile("not a molfile\nat all")
        assert len(molecule) == 0
        assert "no V2000 counts line" in caplog.text

    def test_truncated_atom_block_gives_empty(self, caplog):
        text = "t\n\n\n  3  0  0  0  0  0  0  0  0  0999 V2000\n    0.0 0.0 0.0 C\n"
        with caplog.at_level(logging.WARNING, logger="kekule.parser"):
            molecule = parse_molfile(text)
        assert len(molecule) == 0
        assert molecule.title == "t"
        assert "truncated" in caplog.text

    def test_out_of_range_bond_skipped(self, caplog):
        text = (
            "t\n\n\n"
            "  2  2  0  0  0  0  0  0  0  0999 V2000\n"
            "    0.0000    0.0000    0.0000 C   0  0\n"
            "    1.5000    0.0000    0.0000 C   0  0\n"
            "  1  2  1  0\n"
            "  1  9  1  0\n"
            "M  END\n"
        )
        with caplog.at_level(logging.WARNING, logger="kekule.parser"):
            molecule = parse_molfile(text)
        assert molecule.atoms[0].bonds == [1]
        assert "out of range" in caplog.text

    def test_unreadable_bond_line_skipped(self, caplog):
        text = (
            "t\n\n\n"
            "  2  2  0  0  0  0  0  0  0  0999 V2000\n"
            "    0.0000    0.0000    0.0000 C   0  0\n"
            "    1.5000    0.0000    0.0000 C   0  0\n"
            "garbage\n"
            "  1  2  1  0\n"
        )
        with caplog.at_level(logging.WARNING, logger="kekule.parser"):
            molecule = parse_molfile(text)
        assert molecule.atoms[1].bonds == [0]
        assert "unreadable bond line" in caplog.text

    def test_short_bond_block(self, caplog):
        text = (
            "t\n\n\n"
            "  2  3  0  0  0  0  0  0  0  0999 V2000\n"
            "    0.0000    0.0000    0.0000 C   0  0\n"
            "    1.5000    0.0000    0.0000 C   0  0\n"
            "  1  2  1  0\n"
            "M  END\n"
        )
        with caplog.at_level(logging.WARNING, logger="kekule.parser"):
            molecule = parse_molfile(text)
        assert molecule.atoms[0].bonds == [1]
        assert "ended early" in caplog.text


class TestParseSdf:
    def test_two_records(self, two_records_path):
        molecules = parse_sdf(two_records_path)
        assert [m.title for m in molecules] == ["formaldehyde", "acetylene"]

    def test_second_record_bonds(self, two_records_path):
        acetylene = parse_sdf(two_records_path)[1]
        assert acetylene.atoms[0].bonds == [1, 2]
        assert acetylene.atoms[0].bond_orders == [3, 1]
        assert acetylene.atoms[3].bonds == [1]

    def test_single_record_without_separator(self, formaldehyde_path):
        molecules = parse_sdf(formaldehyde_path)
        assert len(molecules) == 1
        assert len(molecules[0]) == 4

    @pytest.mark.parametrize("newline", ["\n", "\r\n"])
    def test_line_endings(self, two_records_path, newline):
        text = two_records_path.read_text().replace("\n", newline)
        molecules = parse_sdf(text)
        assert [m.title for m in molecules] == ["formaldehyde", "acetylene"]
        assert len(molecules[1]) == 4
