# -*- coding: utf-8 -*-
"""
Tincture: Munsell notation and colour-order conversions
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Munsell Conversion Engine
=========================
Bidirectional XYZ (D65) <-> Munsell HVC conversion by interpolation inside
the Munsell renotation chromaticity tables.

Pipeline:
    from_xyz: XYZ (D65) -> XYZ (C) -> xyY -> (H, V, C)
    to_xyz:   (H, V, C) -> xyY -> XYZ (C) -> XYZ (D65)

Conventions:
    - Hue is a number in [0, 100): 5R = 5, 5YR = 15, ..., 10RP = 0.
    - Hue -1 denotes the achromatic axis (N).
    - Chroma below ``MONO_LIMIT_C`` is treated as achromatic.
    - Results are approximate: the tables are interpolated bilinearly in
      (hue, chroma) and linearly in Value.

Every conversion reports whether it had to extrapolate past the tabulated
gamut through ``ConversionResult.saturated``; nothing is stored globally, so
an engine can be shared between threads.

References:
    - Newhall, Nickerson, Judd (1943). "Final report of the O.S.A.
      subcommittee on the spacing of the Munsell colors".
    - JIS Z 8721 (Value <-> luminance polynomial).
"""

import functools
import math
import re
import warnings
from dataclasses import dataclass
from typing import Final, Iterator, Optional, Sequence, Tuple, Union

import numpy as np
from numba import njit

from tincture_colorengine import (
    ILLUMINANT_C_XY,
    AdaptationMethod,
    ArrayFloat,
    ChromaticAdaptation,
    ColorSpaceEngine,
    handle_shapes,
)
from tincture_munsell_table import (
    HT_CIRCLE,
    HT_STEP,
    HUE_STEPS,
    MunsellTable,
    MunsellTableError,
    default_table,
)

__all__ = [
    # --- Constants ---
    "EP",
    "MIN_HUE",
    "MAX_HUE",
    "MONO_LIMIT_C",
    "HUE_NAMES",
    "Y2V_MAX_ITER",
    "Y2V_TOLERANCE",

    # --- Results & Errors ---
    "ConversionResult",
    "MunsellParseError",

    # --- Scalar Helpers ---
    "v2y",
    "y2v",

    # --- Engine ---
    "MunsellEngine",
    "default_engine",
    "from_xyz",
    "to_xyz",
    "from_xyz_batch",
    "to_xyz_batch",

    # --- Notation ---
    "hue_name_to_hue_value",
    "hue_value_to_hue_name",
    "to_string",
    "parse_munsell",
]

Pair = Tuple[float, float]
Triplet = Union[ArrayFloat, Sequence[float]]

# --- Constants ---
EP: Final[float] = 1e-13
MIN_HUE: Final[float] = 0.0
MAX_HUE: Final[float] = 100.0   # same point on the circle as MIN_HUE
MONO_LIMIT_C: Final[float] = 0.05

# 1R = 1, 9RP = 99, 10RP = 0
HUE_NAMES: Final[Tuple[str, ...]] = ("R", "YR", "Y", "GY", "G", "BG", "B", "PB", "P", "RP")

Y2V_MAX_ITER: Final[int] = 1000
Y2V_TOLERANCE: Final[float] = 1e-4

# Half width of the hue window searched around the nearest sample (hue tenths).
_SCAN_WINDOW: Final[int] = 125
_SCAN_MAX_C: Final[int] = 50


# =============================================================================
# 1. RESULTS & ERRORS
# =============================================================================

@dataclass(slots=True, frozen=True)
class ConversionResult:
    """
    Outcome of a single conversion.

    Attributes:
        color: The converted triplet, shape (3,).
        saturated: True when the input lies outside the tabulated gamut and
            the colour is an extrapolated (clamped) approximation.
    """
    color: ArrayFloat
    saturated: bool

    def __iter__(self) -> Iterator:
        yield self.color
        yield self.saturated


class MunsellParseError(ValueError):
    """Raised for malformed Munsell hue names or notations."""


# =============================================================================
# 2. LOW-LEVEL KERNELS (Numba Optimized)
# =============================================================================
# fastmath is left off: the geometry relies on exact comparisons and on
# near-zero denominators being detected rather than reassociated away.

@njit(cache=True)
def v2y(v: float) -> float:
    """
    Munsell Value -> relative luminance Y (Illuminant C, Y_white ~ 1).

    Linear below V = 1, JIS cubic above.
    """
    if v <= 1.0:
        return v * 0.0121
    v2 = v * v
    return (0.0467 * v2 * v + 0.5602 * v2 - 0.1753 * v + 0.8007) / 100.0


@njit(cache=True)
def _y2v_kernel(y: float, max_iter: int, tol: float) -> Tuple[float, bool]:
    """Newton-Raphson inverse of ``v2y``.  Returns (v, converged)."""
    if y <= 0.0121:
        return y / 0.0121, True
    v = 10.0
    for _ in range(max_iter):
        f = v2y(v) - y
        if abs(f) < tol:
            return v, True
        if v <= 1.0:
            fp = 0.0121
        else:
            fp = (3.0 * 0.0467 * v * v + 2.0 * 0.5602 * v - 0.1753) / 100.0
        v = v - f / fp
    return v, False


def y2v(y: float) -> float:
    """
    Relative luminance Y -> Munsell Value.

    Newton iteration starting at V = 10, stopping at ``|v2y(v) - y| < 1e-4``.
    If the iteration cap is hit the last estimate is returned and a
    ``RuntimeWarning`` is issued.
    """
    v, converged = _y2v_kernel(float(y), Y2V_MAX_ITER, Y2V_TOLERANCE)
    if not converged:
        warnings.warn(
            f"y2v: no convergence for Y={y!r} after {Y2V_MAX_ITER} iterations, "
            f"returning V={v:.6f}",
            RuntimeWarning,
            stacklevel=2,
        )
    return float(v)


@njit(cache=True)
def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


@njit(cache=True)
def _inside(px: float, py: float,
            ax: float, ay: float,
            bx: float, by: float,
            cx: float, cy: float) -> bool:
    """
    Point-in-triangle test for the clockwise triangle abc (y axis up).
    Points on an edge count as inside.
    """
    # right of ab, bc or ca means outside
    if _cross(px - ax, py - ay, bx - ax, by - ay) < 0.0:
        return False
    if _cross(px - bx, py - by, cx - bx, cy - by) < 0.0:
        return False
    if _cross(px - cx, py - cy, ax - cx, ay - cy) < 0.0:
        return False
    return True


@njit(cache=True)
def _interpolation_r(px: float, py: float,
                     ax: float, ay: float,
                     dx: float, dy: float,
                     bx: float, by: float,
                     cx: float, cy: float) -> Tuple[float, float]:
    """
    Inverse bilinear interpolation inside the quad

        y ^  B C     B/C: next hue, A/D: this hue
          |  A D     A/B: inner chroma, C/D: outer chroma
          +----> x

    Returns the (hue, chroma) ratios ``(h, v)`` in [0, 1], or (-1, -1) when
    the point has no valid preimage.
    """
    # radial ratio: ea * v^2 + eb * v + ec = 0
    ea = (ax - dx) * (ay + cy - by - dy) - (ax + cx - bx - dx) * (ay - dy)
    eb = ((px - ax) * (ay + cy - by - dy) + (ax - dx) * (by - ay)
          - (ax + cx - bx - dx) * (py - ay) - (bx - ax) * (ay - dy))
    ec = (px - ax) * (by - ay) - (py - ay) * (bx - ax)

    v = -1.0
    if abs(ea) < EP:
        if abs(eb) >= EP:
            v = -ec / eb
    else:
        disc = eb * eb - 4.0 * ea * ec
        if disc >= 0.0:
            rt = math.sqrt(disc)
            v1 = (-eb + rt) / (2.0 * ea)
            v2 = (-eb - rt) / (2.0 * ea)
            if ax == bx and ay == by:
                # degenerate A == B (neutral corner): v1 is the spurious root 0
                if 0.0 <= v2 <= 1.0:
                    v = v2
            elif 0.0 <= v1 <= 1.0:
                v = v1
            elif 0.0 <= v2 <= 1.0:
                v = v2
    if v < 0.0 or v > 1.0:
        return -1.0, -1.0

    # angular ratio
    de_x = (ax - dx - bx + cx) * v - ax + bx
    de_y = (ay - dy - by + cy) * v - ay + by
    h1 = -1.0
    h2 = -1.0
    if abs(de_x) >= EP:
        h1 = ((ax - dx) * v + px - ax) / de_x
    if abs(de_y) >= EP:
        h2 = ((ay - dy) * v + py - ay) / de_y

    if 0.0 <= h1 <= 1.0:
        return h1, v
    if 0.0 <= h2 <= 1.0:
        return h2, v
    return -1.0, -1.0


def _div(a: Pair, b: Pair, r: float) -> Pair:
    """Linear blend ``a + (b - a) * r``."""
    return ((b[0] - a[0]) * r + a[0], (b[1] - a[1]) * r + a[1])


def _calc_idp_hc(hc0: Pair, hc1: Pair, r: float) -> Pair:
    """Blends two (hue, chroma) pairs, going the short way around the hue circle."""
    h0, c0 = hc0
    h1, c1 = hc1
    if abs(h1 - h0) > MAX_HUE * 0.5:
        if h0 < h1:
            h0 += MAX_HUE
        elif h0 > h1:
            h1 += MAX_HUE

    h = ((h1 - h0) * r + h0) % MAX_HUE
    c = (c1 - c0) * r + c0
    if c < MONO_LIMIT_C:
        c = 0.0
    return h, c


# =============================================================================
# 3. MUNSELL ENGINE
# =============================================================================

class MunsellEngine:
    """
    Munsell <-> xyY interpolation over a ``MunsellTable``.

    The engine is stateless apart from its (read-only) table; every method
    returns its own saturation flag.

    Args:
        table: Renotation tables; defaults to the bundled data set.
    """

    __slots__ = ("table",)

    def __init__(self, table: Optional[MunsellTable] = None):
        self.table = default_table() if table is None else table

    # --- chromaticity -> (hue, chroma) ---

    def scan_hc(self, x: float, y: float, vi: int) -> Tuple[float, float, bool]:
        """
        Hue and chroma of chromaticity (x, y) on the Value level ``vi``.

        Searches the table cells around the nearest sample first, then the
        rest of the hue circle.  A point in no cell is approximated from its
        two nearest samples and flagged as saturated.

        Returns:
            (hue, chroma, saturated)
        """
        p = (float(x), float(y))
        nearest = self.table.neighbors(vi, p, 1)
        if nearest:
            (q_ht, _), _ = nearest[0]
            ht0 = int(q_ht) - _SCAN_WINDOW
            ht1 = int(q_ht) + _SCAN_WINDOW
            if ht0 < 0:
                ht0 += HT_CIRCLE
                ht1 += HT_CIRCLE
            window = range(ht0, ht1 + 1, HT_STEP)

            hc = self._scan_bands(p, vi, window)
            if hc is None:
                seen = {ht % HT_CIRCLE for ht in window}
                rest = [ht for ht in range(0, HT_CIRCLE, HT_STEP) if ht not in seen]
                hc = self._scan_bands(p, vi, rest)
            if hc is not None:
                return hc[0], hc[1], False

        ps = self.table.neighbors(vi, p, 2)
        if len(ps) == 2:
            ((ht0_, c0), d0), ((ht1_, c1), d1) = ps
            total = d0 + d1
            r = d0 / total if total > 0.0 else 0.0
            h, c = _calc_idp_hc((ht0_ / 10.0, c0), (ht1_ / 10.0, c1), r)
            return h, c, True
        return 0.0, 0.0, True

    def _scan_bands(self, p: Pair, vi: int, hts: Sequence[int]) -> Optional[Pair]:
        for ht_l in hts:
            for c_l in range(0, _SCAN_MAX_C + 1, 2):
                hc_r, exhausted = self._scan_one_hc(p, vi, ht_l, c_l)
                if exhausted:
                    break
                if hc_r is not None:
                    h_r, c_r = hc_r
                    return ((HT_STEP * h_r + ht_l) / 10.0) % MAX_HUE, 2.0 * c_r + c_l
        return None

    def _scan_one_hc(self, p: Pair, vi: int, ht_l: int, c_l: int) -> Tuple[Optional[Pair], bool]:
        """
        Tests the cell spanning hue ``[ht_l, ht_l + 25]`` and chroma
        ``[c_l, c_l + 2]``.

        Returns:
            (ratios or None, exhausted) where ``exhausted`` means the band
            has no more samples at this or higher chroma.
        """
        get_xy = self.table.get_xy
        wa = get_xy(vi, ht_l, c_l)
        wb = get_xy(vi, ht_l + HT_STEP, c_l)
        wc = get_xy(vi, ht_l + HT_STEP, c_l + 2)
        wd = get_xy(vi, ht_l, c_l + 2)

        if wa is None and wb is None:
            return None, True

        # One missing outer corner is completed as a parallelogram.
        if c_l != 0 and wa is not None and wb is not None:
            if wc is not None and wd is None:
                wd = (wa[0] + (wc[0] - wb[0]), wa[1] + (wc[1] - wb[1]))
            elif wc is None and wd is not None:
                wc = (wb[0] + (wd[0] - wa[0]), wb[1] + (wd[1] - wa[1]))
        if wa is None or wb is None or wc is None or wd is None:
            return None, False

        px, py = p
        hit = _inside(px, py, wa[0], wa[1], wc[0], wc[1], wd[0], wd[1])
        if not hit and c_l != 0:
            hit = _inside(px, py, wa[0], wa[1], wb[0], wb[1], wc[0], wc[1])
        if not hit:
            return None, False

        h, v = _interpolation_r(px, py, wa[0], wa[1], wd[0], wd[1], wb[0], wb[1], wc[0], wc[1])
        if h < 0.0:
            return None, False
        return (h, v), False

    # --- (hue, chroma) -> chromaticity ---

    def _walk_to_data(self, vi: int, ht: int, step: int) -> Tuple[int, int]:
        """Moves from ``ht`` in ``step`` increments until a hue step with data."""
        for _ in range(HUE_STEPS + 1):
            max_c = self.table.get_max_c(vi, ht)
            if max_c != 0:
                return ht, max_c
            ht += step
        raise MunsellTableError(f"Level {vi}: no hue step holds any sample.")

    def scan_xy(self, h: float, c: float, vi: int) -> Tuple[float, float, bool]:
        """
        Chromaticity of hue ``h`` and chroma ``c`` on the Value level ``vi``.

        Returns:
            (x, y, inside) where ``inside`` is False when the chroma exceeds
            the tabulated boundary on both neighbouring hues and the result
            is clamped to that boundary.
        """
        ht = float(h) * 10.0
        c = float(c)
        c_l = int(math.floor(c / 2.0)) * 2
        c_u = c_l + 2

        base = int(math.floor(ht / HT_STEP)) * HT_STEP
        ht_l, max_l = self._walk_to_data(vi, base, -HT_STEP)
        ht_u, max_u = self._walk_to_data(vi, base + HT_STEP, HT_STEP)

        # lower hue reaches further: fan from the upper boundary point
        if c < max_l and max_u <= c:
            a = (float(ht_u), float(max_u))
            for c_c in range(max_u, max_l - 1, 2):
                b = (float(ht_l), float(c_c))
                d = (float(ht_l), float(c_c + 2))
                if _inside(ht, c, a[0], a[1], b[0], b[1], d[0], d[1]):
                    return (*self._interpolate3(vi, (ht, c), a, b, d), True)

        # upper hue reaches further
        if max_l <= c < max_u:
            a = (float(ht_l), float(max_l))
            for c_c in range(max_l, max_u - 1, 2):
                b = (float(ht_u), float(c_c + 2))
                d = (float(ht_u), float(c_c))
                if _inside(ht, c, a[0], a[1], b[0], b[1], d[0], d[1]):
                    return (*self._interpolate3(vi, (ht, c), a, b, d), True)

        if max_l <= c or max_u <= c:
            x, y = self._interpolate2(vi, ht, (ht_l, max_l), (ht_u, max_u))
            return x, y, False

        x, y = self._interpolate4(vi, ht, c, ht_l, ht_u, c_l, c_u)
        return x, y, True

    def _xy_at(self, vi: int, ht: float, c: float) -> Pair:
        xy = self.table.get_xy(vi, ht, c)
        if xy is None:
            raise MunsellTableError(f"Level {vi}: missing sample at hue tenths {ht}, chroma {c}.")
        return xy

    def _interpolate2(self, vi: int, ht: float, a: Tuple[int, int], b: Tuple[int, int]) -> Pair:
        rx = (ht - a[0]) / (b[0] - a[0])
        return _div(self._xy_at(vi, *a), self._xy_at(vi, *b), rx)

    def _interpolate3(self, vi: int, p: Pair, a: Pair, b: Pair, c: Pair) -> Pair:
        # barycentric weights in (hue tenths, chroma) space
        f = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
        w1 = ((b[1] - c[1]) * (p[0] - c[0]) + (c[0] - b[0]) * (p[1] - c[1])) / f
        w2 = ((c[1] - a[1]) * (p[0] - c[0]) + (a[0] - c[0]) * (p[1] - c[1])) / f
        w3 = 1.0 - w1 - w2

        wa = self._xy_at(vi, *a)
        wb = self._xy_at(vi, *b)
        wc = self._xy_at(vi, *c)
        return (
            wa[0] * w1 + wb[0] * w2 + wc[0] * w3,
            wa[1] * w1 + wb[1] * w2 + wc[1] * w3,
        )

    def _interpolate4(self, vi: int, ht: float, c: float,
                      ht_l: int, ht_u: int, c_l: int, c_u: int) -> Pair:
        #  d c
        #  a b
        rx = (ht - ht_l) / (ht_u - ht_l)
        ry = (c - c_l) / (c_u - c_l)

        wa = self._xy_at(vi, ht_l, c_l)
        wb = self._xy_at(vi, ht_u, c_l)
        wc = self._xy_at(vi, ht_u, c_u)
        wd = self._xy_at(vi, ht_l, c_u)

        wab = wa if c_l == 0 else _div(wa, wb, rx)
        wdc = _div(wd, wc, rx)
        return _div(wab, wdc, ry)

    # --- Munsell <-> xyY bridge ---

    def xyy_to_munsell(self, x: float, y: float, Y: float) -> Tuple[float, float, float, bool]:
        """
        xyY (Illuminant C) -> Munsell.

        Returns:
            (hue, value, chroma, saturated)
        """
        table = self.table
        v = y2v(Y)

        if v <= EP:
            # black, or a negative luminance clamped onto it
            return 0.0, max(v, 0.0), 0.0, Y < 0.0

        v_max = table.v_max
        too_bright = Y > v2y(v_max) + Y2V_TOLERANCE

        if abs(x - ILLUMINANT_C_XY[0]) < EP and abs(y - ILLUMINANT_C_XY[1]) < EP:
            return 0.0, min(v, v_max), 0.0, too_bright

        if v >= v_max - EP:
            h, c, saturated = self.scan_hc(x, y, table.size - 1)
            if c < MONO_LIMIT_C:
                c = 0.0
            return h, min(v, v_max), c, saturated or too_bright

        vi_l = table.lower_index(v)
        vi_u = vi_l + 1
        h_u, c_u, sat_u = self.scan_hc(x, y, vi_u)

        if vi_l == -1:
            # below the first level the colour fades into black: same hue, no chroma
            hc_l = (h_u, 0.0)
            sat_l = False
            v_l = 0.0
        else:
            h_l, c_l, sat_l = self.scan_hc(x, y, vi_l)
            hc_l = (h_l, c_l)
            v_l = float(table.values[vi_l])

        r = (v - v_l) / (float(table.values[vi_u]) - v_l)
        h, c = _calc_idp_hc(hc_l, (h_u, c_u), r)
        return h, v, c, sat_l or sat_u

    def munsell_to_xyy(self, h: float, v: float, c: float) -> Tuple[float, float, float, bool]:
        """
        Munsell -> xyY (Illuminant C).

        Returns:
            (x, y, Y, saturated)
        """
        table = self.table
        h, v, c = float(h), float(v), float(c)
        saturated = False
        if v < 0.0:
            v = 0.0
            saturated = True
        if h >= 0.0:
            h %= MAX_HUE
        Y = float(v2y(v))

        if abs(v) < EP or h < 0.0 or c < MONO_LIMIT_C:
            saturated = saturated or (abs(v) < EP and c > 0.0)
            return ILLUMINANT_C_XY[0], ILLUMINANT_C_XY[1], Y, saturated

        v_max = table.v_max
        if v >= v_max:
            x, y, inside = self.scan_xy(h, c, table.size - 1)
            return x, y, Y, saturated or v > v_max or not inside

        vi_l = table.lower_index(v)
        vi_u = vi_l + 1

        if vi_l != -1:
            x_l, y_l, in_l = self.scan_xy(h, c, vi_l)
            v_l = float(table.values[vi_l])
        else:
            # below the first level, blend towards the neutral point
            x_l, y_l = ILLUMINANT_C_XY
            in_l = False
            v_l = 0.0
            saturated = True
        x_u, y_u, in_u = self.scan_xy(h, c, vi_u)

        r = (v - v_l) / (float(table.values[vi_u]) - v_l)

        if not in_l and not in_u:
            saturated = True
        elif not in_l or not in_u:
            # the nearer level decides
            if r < 0.5:
                saturated = saturated or not in_l
            else:
                saturated = saturated or not in_u

        x, y = _div((x_l, y_l), (x_u, y_u), r)
        return x, y, Y, saturated

    # --- XYZ API ---

    @staticmethod
    def _as_triplet(values: Triplet, name: str) -> ArrayFloat:
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Expected {name} of shape (3,), got {arr.shape}")
        return arr

    @staticmethod
    def _store(values: Sequence[float], out: Optional[ArrayFloat]) -> ArrayFloat:
        if out is None:
            return np.array(values, dtype=np.float64)
        if out.shape != (3,):
            raise ValueError(f"Expected out buffer of shape (3,), got {out.shape}")
        out[:] = values
        return out

    def from_xyz(self, xyz: Triplet, out: Optional[ArrayFloat] = None,
                 adaptation: Optional[AdaptationMethod] = None) -> ConversionResult:
        """
        Converts CIE 1931 XYZ (D65) to Munsell HVC.

        Args:
            xyz: XYZ colour, Y normalised to 1 for the white.
            out: Optional (3,) buffer that receives the HVC triplet.
            adaptation: D65 -> C adaptation override.

        Returns:
            ``ConversionResult`` with the (hue, value, chroma) triplet.
        """
        xyz = self._as_triplet(xyz, "xyz")
        xyz_c = ChromaticAdaptation.to_illuminant_c(xyz, method=adaptation)
        x, y, Y = ColorSpaceEngine.xyz_to_xyY(xyz_c)
        h, v, c, saturated = self.xyy_to_munsell(float(x), float(y), float(Y))
        return ConversionResult(self._store((h, v, c), out), saturated)

    def to_xyz(self, hvc: Triplet, out: Optional[ArrayFloat] = None,
               adaptation: Optional[AdaptationMethod] = None) -> ConversionResult:
        """
        Converts Munsell HVC to CIE 1931 XYZ (D65).

        Args:
            hvc: (hue, value, chroma); hue -1 is the neutral axis.
            out: Optional (3,) buffer that receives the XYZ triplet.
            adaptation: C -> D65 adaptation override.
        """
        h, v, c = self._as_triplet(hvc, "hvc")
        x, y, Y, saturated = self.munsell_to_xyy(h, v, c)
        xyz_c = ColorSpaceEngine.xyY_to_xyz(np.array([x, y, Y], dtype=np.float64))
        xyz = ChromaticAdaptation.from_illuminant_c(xyz_c, method=adaptation)
        return ConversionResult(self._store(xyz, out), saturated)


@functools.lru_cache(maxsize=1)
def default_engine() -> MunsellEngine:
    """Shared engine over the bundled renotation table."""
    return MunsellEngine()


def from_xyz(xyz: Triplet, out: Optional[ArrayFloat] = None,
             adaptation: Optional[AdaptationMethod] = None) -> ConversionResult:
    """XYZ (D65) -> Munsell with the default engine.  See ``MunsellEngine.from_xyz``."""
    return default_engine().from_xyz(xyz, out=out, adaptation=adaptation)


def to_xyz(hvc: Triplet, out: Optional[ArrayFloat] = None,
           adaptation: Optional[AdaptationMethod] = None) -> ConversionResult:
    """Munsell -> XYZ (D65) with the default engine.  See ``MunsellEngine.to_xyz``."""
    return default_engine().to_xyz(hvc, out=out, adaptation=adaptation)


# =============================================================================
# 4. BATCH API
# =============================================================================

@handle_shapes
def from_xyz_batch(xyz: ArrayFloat, adaptation: Optional[AdaptationMethod] = None,
                   engine: Optional[MunsellEngine] = None) -> Tuple[ArrayFloat, np.ndarray]:
    """
    Converts XYZ (D65) colours to Munsell.

    Args:
        xyz: Shape (N, 3) or (3,).
        adaptation: D65 -> C adaptation override.
        engine: Engine to use; defaults to ``default_engine()``.

    Returns:
        ``(hvc, saturated)`` with shapes (N, 3) and (N,), or (3,) and a
        scalar for a single colour.
    """
    engine = default_engine() if engine is None else engine
    xyY = ColorSpaceEngine.xyz_to_xyY(ChromaticAdaptation.to_illuminant_c(xyz, method=adaptation))

    hvc = np.empty_like(xyY)
    saturated = np.zeros(xyY.shape[0], dtype=bool)
    for i, (x, y, Y) in enumerate(xyY):
        h, v, c, sat = engine.xyy_to_munsell(float(x), float(y), float(Y))
        hvc[i] = (h, v, c)
        saturated[i] = sat
    return hvc, saturated


@handle_shapes
def to_xyz_batch(hvc: ArrayFloat, adaptation: Optional[AdaptationMethod] = None,
                 engine: Optional[MunsellEngine] = None) -> Tuple[ArrayFloat, np.ndarray]:
    """
    Converts Munsell colours to XYZ (D65).

    Returns:
        ``(xyz, saturated)``, shaped like ``from_xyz_batch``.
    """
    engine = default_engine() if engine is None else engine

    xyY = np.empty_like(hvc)
    saturated = np.zeros(hvc.shape[0], dtype=bool)
    for i, (h, v, c) in enumerate(hvc):
        x, y, Y, sat = engine.munsell_to_xyy(h, v, c)
        xyY[i] = (x, y, Y)
        saturated[i] = sat

    xyz = ChromaticAdaptation.from_illuminant_c(ColorSpaceEngine.xyY_to_xyz(xyY), method=adaptation)
    return xyz, saturated


# =============================================================================
# 5. NOTATION
# =============================================================================

_NUM: Final[str] = r"(?:\d+(?:\.\d*)?|\.\d+)"
_HUE_RE: Final[re.Pattern] = re.compile(
    rf"^(?P<num>{_NUM})\s*(?P<name>RP|YR|GY|BG|PB|R|Y|G|B|P)$"
)
_NEUTRAL_RE: Final[re.Pattern] = re.compile(
    rf"^N\s*(?P<value>{_NUM})(?:\s*/\s*(?:0*(?:\.0*)?))?$"
)
_NOTATION_RE: Final[re.Pattern] = re.compile(
    rf"^(?P<hue>{_NUM}\s*[A-Z]{{1,2}})\s+(?P<value>{_NUM})\s*/\s*(?P<chroma>{_NUM})$"
)


def hue_name_to_hue_value(hue_name: str) -> float:
    """
    Converts a hue name to a hue value.

    >>> hue_name_to_hue_value("5R"), hue_name_to_hue_value("10RP")
    (5.0, 0.0)

    "N" (achromatic) yields -1.

    Raises:
        MunsellParseError: If the name is not ``<0..10><R|YR|...|RP>`` or "N".
    """
    text = hue_name.strip()
    if text == "N":
        return -1.0
    m = _HUE_RE.match(text)
    if m is None:
        raise MunsellParseError(f"Invalid Munsell hue name: {hue_name!r}")
    num = float(m.group("num"))
    if num > 10.0:
        raise MunsellParseError(f"Hue number out of range (0-10): {hue_name!r}")
    return (num + HUE_NAMES.index(m.group("name")) * 10.0) % MAX_HUE


def hue_value_to_hue_name(hue: float, chroma: float) -> str:
    """
    Converts a hue value to a hue name, e.g. 5 -> "5R", 0 -> "10RP".

    Returns "N" for hue -1 or zero chroma.
    """
    if hue == -1 or abs(chroma) < EP:
        return "N"
    hue = hue % MAX_HUE
    if hue <= 0.0:
        hue += MAX_HUE
    h10 = int(hue * 10) % 100
    index = int(hue / 10)
    if h10 == 0:
        h10 = 100
        index -= 1
    return f"{h10 / 10:g}{HUE_NAMES[index]}"


def to_string(hvc: Triplet) -> str:
    """
    Munsell notation of an HVC triplet: "5R 4.0/14.0", or "N 5.0" when
    achromatic.
    """
    h, v, c = (float(t) for t in hvc)
    if c < MONO_LIMIT_C or h == -1:
        return f"N {v:.1f}"
    return f"{hue_value_to_hue_name(h, c)} {v:.1f}/{c:.1f}"


def parse_munsell(text: str) -> Tuple[float, float, float]:
    """
    Parses a Munsell notation into (hue, value, chroma).

    Accepts "5R 4/14", "2.5YR 6.0/8.5", "N 5" and "N 5/0".  Neutrals come
    back with hue -1 and chroma 0.

    Raises:
        MunsellParseError: If the text is not a Munsell notation.
    """
    s = text.strip().upper()
    m = _NEUTRAL_RE.match(s)
    if m is not None:
        return -1.0, float(m.group("value")), 0.0

    m = _NOTATION_RE.match(s)
    if m is None:
        raise MunsellParseError(f"Invalid Munsell notation: {text!r}")
    hue = hue_name_to_hue_value(m.group("hue"))
    return hue, float(m.group("value")), float(m.group("chroma"))


if __name__ == "__main__":
    print("--- Munsell Engine Validation ---")

    print("1. Round trip 5R 5/4...")
    fwd = to_xyz([5.0, 5.0, 4.0])
    back = from_xyz(fwd.color)
    err = np.max(np.abs(back.color - np.array([5.0, 5.0, 4.0])))
    print(f"   XYZ: {fwd.color}  ->  {to_string(back.color)}  "
          f"max err {err:.3e} {'[PASS]' if err < 0.1 and not back.saturated else '[FAIL]'}")

    print("2. D65 white...")
    white = from_xyz([0.95047, 1.0, 1.08883])
    print(f"   {to_string(white.color)} {'[PASS]' if to_string(white.color).startswith('N ') else '[FAIL]'}")

    print("3. Out of gamut...")
    vivid = to_xyz([5.0, 5.0, 60.0])
    print(f"   saturated={vivid.saturated} {'[PASS]' if vivid.saturated else '[FAIL]'}")
