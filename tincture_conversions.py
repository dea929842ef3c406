# -*- coding: utf-8 -*-
"""
Tincture: Munsell notation and colour-order conversions
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Space Conversion Graph
=============================
A closed set of colour spaces connected by primitive converters.  Any pair
of spaces is converted along the shortest chain of primitives:

    XYY <-> XYZ <-> MUNSELL <-> PCCS

XYZ and xyY are D65 relative colorimetry (Y = 1 for the white).  The
saturation flags of all steps on the chain are OR-ed into the result.
"""

import collections
import enum
import functools
from typing import Callable, Dict, Final, Sequence, Tuple, Union

import numpy as np

import tincture_munsell as munsell
import tincture_pccs as pccs
from tincture_colorengine import ArrayFloat, ColorSpaceEngine
from tincture_munsell import ConversionResult

__all__ = [
    "ColorSpace",
    "conversion_path",
    "convert",
]

Converter = Callable[[ArrayFloat], Tuple[ArrayFloat, bool]]


class ColorSpace(enum.Enum):
    XYZ = "xyz"
    XYY = "xyy"
    MUNSELL = "munsell"
    PCCS = "pccs"


def _xyz_to_xyy(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    return ColorSpaceEngine.xyz_to_xyY(c), False

def _xyy_to_xyz(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    return ColorSpaceEngine.xyY_to_xyz(c), False

def _xyz_to_munsell(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    res = munsell.from_xyz(c)
    return res.color, res.saturated

def _munsell_to_xyz(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    res = munsell.to_xyz(c)
    return res.color, res.saturated

def _munsell_to_pccs(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    return pccs.from_munsell(c), False

def _pccs_to_munsell(c: ArrayFloat) -> Tuple[ArrayFloat, bool]:
    return pccs.to_munsell(c), False


_EDGES: Final[Dict[ColorSpace, Dict[ColorSpace, Converter]]] = {
    ColorSpace.XYZ: {
        ColorSpace.XYY: _xyz_to_xyy,
        ColorSpace.MUNSELL: _xyz_to_munsell,
    },
    ColorSpace.XYY: {
        ColorSpace.XYZ: _xyy_to_xyz,
    },
    ColorSpace.MUNSELL: {
        ColorSpace.XYZ: _munsell_to_xyz,
        ColorSpace.PCCS: _munsell_to_pccs,
    },
    ColorSpace.PCCS: {
        ColorSpace.MUNSELL: _pccs_to_munsell,
    },
}


@functools.lru_cache(maxsize=None)
def conversion_path(src: ColorSpace, dst: ColorSpace) -> Tuple[ColorSpace, ...]:
    """
    Shortest chain of spaces from ``src`` to ``dst`` (both included).

    Raises:
        ValueError: If ``dst`` cannot be reached from ``src``.
    """
    src = ColorSpace(src)
    dst = ColorSpace(dst)
    prev: Dict[ColorSpace, ColorSpace] = {}
    queue = collections.deque([src])
    seen = {src}
    while queue:
        node = queue.popleft()
        if node is dst:
            path = [dst]
            while path[-1] is not src:
                path.append(prev[path[-1]])
            return tuple(reversed(path))
        for nxt in _EDGES[node]:
            if nxt not in seen:
                seen.add(nxt)
                prev[nxt] = node
                queue.append(nxt)
    raise ValueError(f"No conversion from {src.name} to {dst.name}")


def convert(color: Union[ArrayFloat, Sequence[float]],
            src: Union[ColorSpace, str], dst: Union[ColorSpace, str]) -> ConversionResult:
    """
    Converts one colour between any two spaces.

    >>> convert([5.0, 5.0, 4.0], "munsell", ColorSpace.PCCS).color  # doctest: +SKIP

    Args:
        color: Shape (3,) triplet in ``src``.
        src, dst: ``ColorSpace`` members or their string values.

    Returns:
        ``ConversionResult`` whose flag is set if any step saturated.
    """
    arr = np.array(color, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected shape (3,), got {arr.shape}")

    path = conversion_path(ColorSpace(src), ColorSpace(dst))
    saturated = False
    for a, b in zip(path, path[1:]):
        arr, sat = _EDGES[a][b](arr)
        saturated = saturated or bool(sat)
    return ConversionResult(np.asarray(arr, dtype=np.float64), saturated)
