"""Shared constants used across the model, mesh, and export layers."""

SPHERE_LAT_BANDS: int = 8
"""Latitude bands of an atom UV-sphere."""

SPHERE_LONG_BANDS: int = 8
"""Longitude bands of an atom UV-sphere."""

CYLINDER_SEGMENTS: int = 6
"""Radial segments around a bond cylinder."""

SINGLE_BOND_RADIUS: float = 0.08
"""Radius of the single cylinder drawn for a bond of order 1."""

MULTI_BOND_RADIUS: float = 0.04
"""Radius of each cylinder drawn for a bond of order 2 or 3."""

DOUBLE_BOND_OFFSET: float = 0.1
"""Distance of each double-bond cylinder from the bond centreline."""

TRIPLE_BOND_OFFSET: float = 0.12
"""Distance of the two outer triple-bond cylinders from the centreline."""

BOND_COLOUR: float = 0.7
"""Grey level used for bond cylinders in the scene-graph export."""

GEOMETRY_EPSILON: float = 1e-4
"""Cross-product length below which two directions count as collinear."""

VALID_BOND_ORDERS: frozenset[int] = frozenset({1, 2, 3})
"""Bond orders with a dedicated rendering; anything else is drawn as 1."""
