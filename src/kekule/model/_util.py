"""Helpers shared by the serialisable model dataclasses."""

from __future__ import annotations

import dataclasses
from functools import cache


@cache
def _field_defaults(cls: type) -> dict:
    """``{name: default}`` for every field of *cls* with a plain default.

    Style ``to_dict()`` methods compare against these to leave
    unchanged fields out of style files; ``from_dict()`` methods use
    the keys as the set of accepted entries.  The returned dict is
    shared between calls and must not be modified.
    """
    return {
        f.name: f.default
        for f in dataclasses.fields(cls)
        if f.default is not dataclasses.MISSING
    }
