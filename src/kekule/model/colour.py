from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from matplotlib.colors import to_rgb

#: A colour specification accepted by atom overrides and export styles.
#:
#: One of:
#:
#: - a CSS colour name or hex string (``"navy"``, ``"#ff0000"``);
#: - a grey level as a single number (``0.0`` black, ``1.0`` white);
#: - an RGB sequence with components in ``[0, 1]``.
Colour = str | float | tuple[float, float, float] | list[float]

RGB = tuple[float, float, float]


def _grey(level: float) -> RGB:
    if not 0.0 <= level <= 1.0:
        raise ValueError(f"Grey value must be in [0, 1], got {level}")
    return (level, level, level)


def _rgb(components: Sequence[float]) -> RGB:
    if len(components) != 3:
        raise ValueError(
            f"RGB sequence must have 3 elements, got {len(components)}"
        )
    rgb = tuple(float(c) for c in components)
    for name, value in zip("rgb", rgb):
        if not 0.0 <= value <= 1.0:
            raise ValueError(
                f"RGB component {name} must be in [0, 1], got {value}"
            )
    return rgb  # type: ignore[return-value]


def normalise_colour(colour: Colour) -> RGB:
    """Resolve any :data:`Colour` to an ``(r, g, b)`` float tuple.

    Names and hex strings are looked up with
    :func:`matplotlib.colors.to_rgb`.

    Raises:
        ValueError: If the colour is out of range or not understood.
    """
    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    if isinstance(colour, (int, float)):
        return _grey(float(colour))
    if isinstance(colour, (tuple, list, np.ndarray)):
        return _rgb(colour)
    if isinstance(colour, str):
        try:
            return tuple(float(c) for c in to_rgb(colour))  # type: ignore[return-value]
        except ValueError as exc:
            raise ValueError(f"Unrecognised colour name: {colour!r}") from exc
    raise ValueError(f"Cannot interpret colour: {colour!r}")


def format_colour(rgb: Sequence[float], decimals: int = 3) -> str:
    """Render an RGB triple as space-separated fixed-precision text.

    >>> format_colour((1.0, 0.05, 0.05))
    '1.000 0.050 0.050'
    """
    return " ".join(f"{c:.{decimals}f}" for c in rgb)
