from __future__ import annotations

from dataclasses import dataclass

from kekule._constants import (
    BOND_COLOUR,
    CYLINDER_SEGMENTS,
    DOUBLE_BOND_OFFSET,
    MULTI_BOND_RADIUS,
    SINGLE_BOND_RADIUS,
    SPHERE_LAT_BANDS,
    SPHERE_LONG_BANDS,
    TRIPLE_BOND_OFFSET,
)
from kekule.model._util import _field_defaults
from kekule.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"bond_colour", "background"})
_INT_FIELDS = frozenset({
    "sphere_lat_bands", "sphere_long_bands", "cylinder_segments",
})


@dataclass(frozen=True)
class ExportStyle:
    """Visual conventions shared by the mesh and scene-graph exports.

    The defaults reproduce the package constants in
    :mod:`kekule._constants`.  Offsets and radii are a visual
    convention rather than physical quantities.

    Attributes:
        sphere_lat_bands: Latitude bands per atom sphere.
        sphere_long_bands: Longitude bands per atom sphere.
        cylinder_segments: Radial segments per bond cylinder.
        single_bond_radius: Cylinder radius for single bonds.
        multi_bond_radius: Cylinder radius for each stick of a double
            or triple bond.
        double_bond_offset: Distance of each double-bond stick from the
            bond axis.
        triple_bond_offset: Distance of the outer triple-bond sticks
            from the bond axis.
        atom_scale: Multiplier applied to every element display radius.
        bond_colour: Bond colour in the scene-graph export.
        background: Scene background colour in the scene-graph export.
    """

    sphere_lat_bands: int = SPHERE_LAT_BANDS
    sphere_long_bands: int = SPHERE_LONG_BANDS
    cylinder_segments: int = CYLINDER_SEGMENTS
    single_bond_radius: float = SINGLE_BOND_RADIUS
    multi_bond_radius: float = MULTI_BOND_RADIUS
    double_bond_offset: float = DOUBLE_BOND_OFFSET
    triple_bond_offset: float = TRIPLE_BOND_OFFSET
    atom_scale: float = 1.0
    bond_colour: Colour = BOND_COLOUR
    background: Colour = (1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        if self.sphere_lat_bands < 2:
            raise ValueError(
                f"sphere_lat_bands must be at least 2, got {self.sphere_lat_bands}"
            )
        if self.sphere_long_bands < 3:
            raise ValueError(
                f"sphere_long_bands must be at least 3, got {self.sphere_long_bands}"
            )
        if self.cylinder_segments < 3:
            raise ValueError(
                f"cylinder_segments must be at least 3, got {self.cylinder_segments}"
            )
        for name in ("single_bond_radius", "multi_bond_radius", "atom_scale"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        for name in ("double_bond_offset", "triple_bond_offset"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        normalise_colour(self.bond_colour)
        normalise_colour(self.background)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for key, default in defaults.items():
            val = getattr(self, key)
            if key in _COLOUR_FIELDS:
                if normalise_colour(val) != normalise_colour(default):
                    d[key] = list(normalise_colour(val))
            elif val != default:
                d[key] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ExportStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains keys that are not style fields.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ValueError(
                f"unknown export style keys: {sorted(unknown)}"
            )
        kwargs: dict = {}
        for key, val in d.items():
            if key in _COLOUR_FIELDS and isinstance(val, list):
                val = tuple(val)
            elif key in _INT_FIELDS:
                val = int(val)
            kwargs[key] = val
        return cls(**kwargs)
