"""Element display radii and colours used by the exporters.

Radii are display radii in angstroms for ball-and-stick output, not
physical van der Waals radii.  Colours follow the conventional Jmol
scheme, with slightly softened tones for carbon, nitrogen, fluorine,
and the halogens.

Both tables are read-only module constants.  Unknown symbols resolve to
:data:`DEFAULT_RADIUS` and :data:`DEFAULT_COLOUR` rather than raising.
"""

from __future__ import annotations

DEFAULT_RADIUS: float = 0.25
"""Display radius for elements missing from :data:`DISPLAY_RADII`."""

DEFAULT_COLOUR: tuple[float, float, float] = (0.5, 0.5, 0.5)
"""Neutral grey for elements missing from :data:`ELEMENT_COLOURS`."""

DISPLAY_RADII: dict[str, float] = {
    "H":  0.20,
    "C":  0.28,
    "N":  0.27,
    "O":  0.26,
    "F":  0.25,
    "P":  0.32,
    "S":  0.32,
    "Cl": 0.30,
}

# Element colours as normalised RGB tuples.
ELEMENT_COLOURS: dict[str, tuple[float, float, float]] = {
    "H":  (1.000, 1.000, 1.000),  # white
    "He": (0.851, 1.000, 1.000),  # pale cyan
    "Li": (0.800, 0.502, 1.000),  # violet
    "B":  (1.000, 0.710, 0.710),  # salmon
    "C":  (0.600, 0.600, 0.600),  # grey
    "N":  (0.200, 0.200, 1.000),  # blue
    "O":  (1.000, 0.050, 0.050),  # red
    "F":  (0.700, 1.000, 1.000),  # pale cyan
    "Na": (0.671, 0.361, 0.949),  # purple
    "Mg": (0.541, 1.000, 0.000),  # lime
    "Al": (0.749, 0.651, 0.651),  # pinkish grey
    "Si": (0.941, 0.784, 0.627),  # beige
    "P":  (1.000, 0.500, 0.000),  # orange
    "S":  (1.000, 1.000, 0.200),  # yellow
    "Cl": (0.100, 1.000, 0.100),  # green
    "K":  (0.561, 0.251, 0.831),  # purple
    "Ca": (0.239, 1.000, 0.000),  # green
    "Fe": (0.878, 0.400, 0.200),  # rust
    "Cu": (0.784, 0.502, 0.200),  # copper
    "Zn": (0.490, 0.502, 0.690),  # slate
    "Br": (0.600, 0.200, 0.200),  # dark red
    "I":  (0.580, 0.000, 0.580),  # violet
}


def _canonical_symbol(symbol: str) -> str:
    """Normalise symbol case: ``"CL"`` and ``"cl"`` become ``"Cl"``."""
    symbol = symbol.strip()
    return symbol[:1].upper() + symbol[1:].lower()


def element_radius(symbol: str) -> float:
    """Display radius for *symbol*, or :data:`DEFAULT_RADIUS` if unknown."""
    return DISPLAY_RADII.get(_canonical_symbol(symbol), DEFAULT_RADIUS)


def element_colour(symbol: str) -> tuple[float, float, float]:
    """RGB colour for *symbol*, or :data:`DEFAULT_COLOUR` if unknown."""
    return ELEMENT_COLOURS.get(_canonical_symbol(symbol), DEFAULT_COLOUR)
