"""Shared test fixtures for kekule."""

from pathlib import Path

import numpy as np
import pytest

from kekule.model import Molecule

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def formaldehyde_path():
    """Return the path to the formaldehyde .mol fixture file."""
    return FIXTURES_DIR / "formaldehyde.mol"


@pytest.fixture
def two_records_path():
    """Return the path to the two-record (formaldehyde, acetylene) .sdf file."""
    return FIXTURES_DIR / "two_records.sdf"


@pytest.fixture
def co_molecule():
    """C at the origin single-bonded to O at (1.2, 0, 0)."""
    return Molecule.from_arrays(
        ["C", "O"],
        [[0.0, 0.0, 0.0], [1.2, 0.0, 0.0]],
        bonds=[(0, 1, 1)],
    )


@pytest.fixture
def formaldehyde():
    """H2C=O with both hydrogens bonded to carbon."""
    return Molecule.from_arrays(
        ["C", "O", "H", "H"],
        np.array([
            [0.0, 0.0, 0.0],
            [1.2, 0.0, 0.0],
            [-0.55, 0.95, 0.0],
            [-0.55, -0.95, 0.0],
        ]),
        bonds=[(0, 1, 2), (0, 2, 1), (0, 3, 1)],
        title="formaldehyde",
    )
