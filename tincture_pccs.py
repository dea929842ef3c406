# -*- coding: utf-8 -*-
"""
Tincture: Munsell notation and colour-order conversions
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

PCCS <-> Munsell
================
Practical Color Co-ordinate System (hue h in [0, 24), lightness l on the
Munsell Value scale, saturation s) converted to and from Munsell HVC.

Two conversion methods are provided:

- ``ConversionMethod.ACCURATE`` (default): piecewise-linear hue table and a
  cubic saturation polynomial with hue-interpolated coefficients, inverted
  by Newton iteration.
- ``ConversionMethod.CONCISE``: closed-form trigonometric series.

A hue of -1 marks an achromatic colour in both systems.

Reference:
    Kobayashi, M. & Yoshiki, K. (2001). "Mathematical Relation among PCCS
    Tones, PCCS Color Attributes and Munsell Color Attributes".
    Journal of the Color Science Association of Japan 25(4), 249-261.
"""

import enum
import math
import warnings
from typing import Callable, Dict, Final, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from numba import njit

import tincture_munsell as munsell
from tincture_colorengine import ArrayFloat

__all__ = [
    # --- Constants ---
    "MIN_HUE",
    "MAX_HUE",
    "MONO_LIMIT_S",
    "HUE_NAMES",
    "TONE_NAMES",

    # --- Configuration ---
    "ConversionMethod",
    "set_conversion_method",
    "get_conversion_method",

    # --- Conversions ---
    "Tone",
    "from_munsell",
    "to_munsell",
    "tone",
    "relative_lightness",
    "absolute_lightness",
    "to_tone_coordinate",
    "to_normal_coordinate",

    # --- Notation ---
    "to_string",
    "to_hue_string",
    "to_tone_string",
]

Triplet = Union[ArrayFloat, Sequence[float]]

# --- Constants ---
MIN_HUE: Final[float] = 0.0
MAX_HUE: Final[float] = 24.0    # 24 is accepted and equals 0
MONO_LIMIT_S: Final[float] = 0.01

HUE_NAMES: Final[Tuple[str, ...]] = (
    "", "pR", "R", "yR", "rO", "O", "yO", "rY", "Y", "gY", "YG", "yG", "G",
    "bG", "GB", "GB", "gB", "B", "B", "pB", "V", "bP", "P", "rP", "RP",
)
TONE_NAMES: Final[Tuple[str, ...]] = (
    "p", "p+", "ltg", "g", "dkg", "lt", "lt+", "sf", "d", "dk", "b", "s", "dp", "v", "none",
)

# Munsell hue of each integer PCCS hue; index 0 is 24 seen from below.
_MUNSELL_H: Final[Tuple[float, ...]] = (
    96.0,
    0.0, 4.0, 7.0, 10.0, 14.0, 18.0, 22.0, 25.0, 28.0, 33.0, 38.0, 43.0,
    49.0, 55.0, 60.0, 65.0, 70.0, 73.0, 76.0, 79.0, 83.0, 87.0, 91.0, 96.0, 100.0,
)

# Saturation polynomial (a1, a2, a3) at even PCCS hues 0, 2, ..., 24.
_COEFFICIENTS: Final[np.ndarray] = np.array([
    [0.853642,  0.084379, -0.002798],  # 0 == 24
    [1.042805,  0.046437,  0.001607],  # 2
    [1.079160,  0.025470,  0.003052],  # 4
    [1.039472,  0.054749, -0.000511],  # 6
    [0.925185,  0.050245,  0.000953],  # 8
    [0.968557,  0.012537,  0.003375],  # 10
    [1.070433, -0.047359,  0.007385],  # 12
    [1.087030, -0.051075,  0.006526],  # 14
    [1.089652, -0.050206,  0.006056],  # 16
    [0.880861,  0.060300, -0.001280],  # 18
    [0.897326,  0.053912, -0.000860],  # 20
    [0.887834,  0.055086, -0.000847],  # 22
    [0.853642,  0.084379, -0.002798],  # 24
], dtype=np.float64)

_NEWTON_MAX_ITER: Final[int] = 100
_NEWTON_TOLERANCE: Final[float] = 1e-3


class Tone(enum.IntEnum):
    p = 0
    p_p = 1
    ltg = 2
    g = 3
    dkg = 4
    lt = 5
    lt_p = 6
    sf = 7
    d = 8
    dk = 9
    b = 10
    s = 11
    dp = 12
    v = 13
    none = 14

    @property
    def label(self) -> str:
        return TONE_NAMES[self.value]


# =============================================================================
# 1. KERNELS (Numba Optimized)
# =============================================================================

@njit(cache=True)
def _solve_cubic(x0: float, a3: float, a2: float, a1: float, a0: float,
                 max_iter: int, tol: float) -> Tuple[float, bool]:
    """Newton root of ``a3 x^3 + a2 x^2 + a1 x + a0`` near ``x0``.  Returns (x, converged)."""
    x = x0
    for _ in range(max_iter):
        y = a3 * x * x * x + a2 * x * x + a1 * x + a0
        yp = 3.0 * a3 * x * x + 2.0 * a2 * x + a1
        if yp == 0.0:
            return x, False
        x1 = x - y / yp
        if abs(x1 - x) < tol:
            return x1, True
        x = x1
    return x, False


@njit(cache=True)
def _tone_g(h: float) -> float:
    return 0.81 - 0.24 * math.sin((h - 2.6) * math.pi / 12.0)


@njit(cache=True)
def _tone_c(h: float) -> float:
    return 12.0 + 1.7 * math.sin((h + 2.2) * math.pi / 12.0)


# =============================================================================
# 2. ACCURATE METHOD
# =============================================================================

def _interpolated_coefficients(h: float) -> Tuple[float, float, float]:
    """Saturation polynomial coefficients (a1, a2, a3) at PCCS hue ``h``."""
    if h > MAX_HUE:
        h -= MAX_HUE
    hf = int(math.floor(h))
    if hf % 2 != 0:
        hf -= 1
    hc = hf + 2
    if hc > MAX_HUE:
        hc -= int(MAX_HUE)

    af = _COEFFICIENTS[hf // 2]
    ac = _COEFFICIENTS[hc // 2]
    a = (h - hf) / (hc - hf) * (ac - af) + af
    return float(a[0]), float(a[1]), float(a[2])


def _accurate_pccs_h(H: float) -> float:
    h1 = -1
    h2 = -1
    for i in range(1, len(_MUNSELL_H)):
        if _MUNSELL_H[i] <= H:
            h1 = i
        if H < _MUNSELL_H[i]:
            h2 = i
            break
    if h1 == -1 or h2 == -1:
        raise ValueError(f"Munsell hue out of range [0, 100): {H!r}")
    return h1 + (h2 - h1) * (H - _MUNSELL_H[h1]) / (_MUNSELL_H[h2] - _MUNSELL_H[h1])


def _accurate_pccs_s(V: float, C: float, h: float) -> float:
    a1, a2, a3 = _interpolated_coefficients(h)
    a0 = -C / (1.0 - math.exp(-_tone_g(h) * V))
    s, converged = _solve_cubic(_concise_pccs_s(V, C, h), a3, a2, a1, a0,
                                _NEWTON_MAX_ITER, _NEWTON_TOLERANCE)
    if not converged:
        warnings.warn(
            f"PCCS saturation: no convergence for V={V!r}, C={C!r}, h={h!r}",
            RuntimeWarning,
            stacklevel=3,
        )
    return float(s)


def _accurate_munsell_h(h: float) -> float:
    h1 = int(math.floor(h))
    H1 = _MUNSELL_H[h1]
    H2 = _MUNSELL_H[h1 + 1]
    if H1 > H2:
        H2 = 100.0
    return H1 + (H2 - H1) * (h - h1)


def _accurate_munsell_c(h: float, l: float, s: float) -> float:
    a1, a2, a3 = _interpolated_coefficients(h)
    return (a3 * s * s * s + a2 * s * s + a1 * s) * (1.0 - math.exp(-_tone_g(h) * l))


# =============================================================================
# 3. CONCISE METHOD
# =============================================================================

def _concise_pccs_h(H: float) -> float:
    y = H * math.pi / 50.0
    return (24.0 * y / (2.0 * math.pi) + 1.24
            + 0.02 * math.cos(y) - 0.1 * math.cos(2 * y) - 0.11 * math.cos(3 * y)
            + 0.68 * math.sin(y) - 0.3 * math.sin(2 * y) + 0.013 * math.sin(3 * y))


def _concise_pccs_s(V: float, C: float, h: float) -> float:
    e2 = 0.004
    e1 = 0.077
    e0 = -C / (_tone_c(h) * (1.0 - math.exp(-_tone_g(h) * V)))
    return (-e1 + math.sqrt(e1 * e1 - 4.0 * e2 * e0)) / (2.0 * e2)


def _concise_munsell_h(h: float) -> float:
    x = (h - 1.0) * math.pi / 12.0
    return (100.0 * x / (2.0 * math.pi) - 1.0
            + 0.12 * math.cos(x) + 0.34 * math.cos(2 * x) + 0.4 * math.cos(3 * x)
            - 2.7 * math.sin(x) + 1.5 * math.sin(2 * x) - 0.4 * math.sin(3 * x))


def _concise_munsell_c(h: float, l: float, s: float) -> float:
    return _tone_c(h) * (0.077 * s + 0.0040 * s * s) * (1.0 - math.exp(-_tone_g(h) * l))


# =============================================================================
# 4. CONFIGURATION
# =============================================================================

class _Method(NamedTuple):
    munsell_h: Callable[[float], float]
    munsell_c: Callable[[float, float, float], float]
    pccs_h: Callable[[float], float]
    pccs_s: Callable[[float, float, float], float]


class ConversionMethod(enum.Enum):
    CONCISE = "concise"
    ACCURATE = "accurate"


_METHODS: Final[Dict[ConversionMethod, _Method]] = {
    ConversionMethod.CONCISE: _Method(_concise_munsell_h, _concise_munsell_c,
                                      _concise_pccs_h, _concise_pccs_s),
    ConversionMethod.ACCURATE: _Method(_accurate_munsell_h, _accurate_munsell_c,
                                       _accurate_pccs_h, _accurate_pccs_s),
}

# --- Runtime Configuration ---
# Toggle at runtime via:
#     import tincture_pccs as pccs
#     pccs.set_conversion_method(pccs.ConversionMethod.CONCISE)
_CONVERSION_METHOD: ConversionMethod = ConversionMethod.ACCURATE

def set_conversion_method(method: ConversionMethod = ConversionMethod.ACCURATE) -> None:
    """
    Selects the default PCCS <-> Munsell conversion method.

    Raises:
        ValueError: If ``method`` is not a ``ConversionMethod``.
    """
    global _CONVERSION_METHOD
    _CONVERSION_METHOD = ConversionMethod(method)

def get_conversion_method() -> ConversionMethod:
    return _CONVERSION_METHOD


def _resolve(method: Optional[ConversionMethod]) -> _Method:
    return _METHODS[_CONVERSION_METHOD if method is None else ConversionMethod(method)]


# =============================================================================
# 5. CONVERSIONS
# =============================================================================

def _store(values: Sequence[float], out: Optional[ArrayFloat]) -> ArrayFloat:
    if out is None:
        return np.array(values, dtype=np.float64)
    out[:] = values
    return out


def from_munsell(hvc: Triplet, out: Optional[ArrayFloat] = None,
                 method: Optional[ConversionMethod] = None) -> ArrayFloat:
    """
    Converts Munsell HVC to PCCS hls.

    Args:
        hvc: (hue, value, chroma); hue -1 is achromatic.
        out: Optional (3,) buffer for the result.
        method: Conversion method override.

    Returns:
        (h, l, s) with h in [0, 24), or -1 for an achromatic input.
    """
    H, V, C = (float(t) for t in hvc)
    if H < 0.0:
        return _store((-1.0, V, 0.0), out)

    m = _resolve(method)
    H %= munsell.MAX_HUE
    h = m.pccs_h(H)
    s = 0.0
    if C >= munsell.MONO_LIMIT_C and V > 0.0:
        s = m.pccs_s(V, C, h)
    h %= MAX_HUE
    return _store((h, V, s), out)


def to_munsell(hls: Triplet, out: Optional[ArrayFloat] = None,
               method: Optional[ConversionMethod] = None) -> ArrayFloat:
    """
    Converts PCCS hls to Munsell HVC.

    Args:
        hls: (hue, lightness, saturation); hue -1 is achromatic.
        out: Optional (3,) buffer for the result.
        method: Conversion method override.
    """
    h, l, s = (float(t) for t in hls)
    if h < 0.0:
        return _store((-1.0, l, 0.0), out)

    m = _resolve(method)
    h %= MAX_HUE
    H = m.munsell_h(h)
    C = 0.0
    if s >= MONO_LIMIT_S:
        C = m.munsell_c(h, l, s)
    H %= munsell.MAX_HUE
    return _store((H, l, C), out)


def relative_lightness(hls: Triplet) -> float:
    """Lightness in the tone coordinate system."""
    h, l, s = (float(t) for t in hls)
    return l - (0.25 - 0.34 * math.sqrt(1.0 - math.sin((h - 2.0) * math.pi / 12.0))) * s


def absolute_lightness(hLs: Triplet) -> float:
    """Inverse of ``relative_lightness``: PCCS lightness from a tone coordinate."""
    h, L, s = (float(t) for t in hLs)
    return L + (0.25 - 0.34 * math.sqrt(1.0 - math.sin((h - 2.0) * math.pi / 12.0))) * s


def to_tone_coordinate(hls: Triplet, out: Optional[ArrayFloat] = None) -> ArrayFloat:
    return _store((float(hls[0]), relative_lightness(hls), float(hls[2])), out)


def to_normal_coordinate(hLs: Triplet, out: Optional[ArrayFloat] = None) -> ArrayFloat:
    return _store((float(hLs[0]), absolute_lightness(hLs), float(hLs[2])), out)


def tone(hls: Triplet) -> Tone:
    """
    Classifies a PCCS colour into one of the 14 chromatic tones, or
    ``Tone.none`` below saturation 1.
    """
    s = float(hls[2])
    t = relative_lightness(hls)
    tu = s * -3.0 / 10.0 + 8.5
    td = s * 3.0 / 10.0 + 2.5

    if s < 1.0:
        return Tone.none
    if s < 4.0:
        if t < td:
            return Tone.dkg
        if t < 5.5:
            return Tone.g
        if t < tu:
            return Tone.ltg
        return Tone.p if s < 2.5 else Tone.p_p
    if s < 7.0:
        if t < td:
            return Tone.dk
        if t < 5.5:
            return Tone.d
        if t < tu:
            return Tone.sf
        return Tone.lt if s < 5.5 else Tone.lt_p
    if s < 8.5:
        if t < td:
            return Tone.dp
        if t < tu:
            return Tone.s
        return Tone.b
    return Tone.v


# =============================================================================
# 6. NOTATION
# =============================================================================

def _hue_index(h: float) -> int:
    tn = int(math.floor(h + 0.5))
    if tn <= 0:
        tn = int(MAX_HUE)
    if tn > MAX_HUE:
        tn -= int(MAX_HUE)
    return tn


def _neutral_name(l: float) -> str:
    if l >= 9.5:
        return "W"
    if l <= 1.5:
        return "Bk"
    return "Gy"


def to_string(hls: Triplet) -> str:
    """
    PCCS notation, e.g. "v2.0 2.0:R-4.5-9.0s", or "W N-9.5" / "Gy-5.0 N-5.0"
    / "Bk N-1.0" for achromatic colours.
    """
    h, l, s = (float(t) for t in hls)
    str_l = f"{l:.1f}"
    if s < MONO_LIMIT_S or h < 0.0:
        name = _neutral_name(l)
        if name == "Gy":
            return f"Gy-{str_l} N-{str_l}"
        return f"{name} N-{str_l}"

    str_h = f"{h:.1f}"
    str_s = f"{s:.1f}"
    hue = HUE_NAMES[_hue_index(h)]
    t = tone((h, l, s))
    if t is Tone.none:
        return f"{str_h}:{hue}-{str_l}-{str_s}s"
    return f"{t.label}{str_h} {str_h}:{hue}-{str_l}-{str_s}s"


def to_hue_string(hls: Triplet) -> str:
    """Hue name ("R", "yO", ...), or "N" when achromatic."""
    h, _, s = (float(t) for t in hls)
    if s < MONO_LIMIT_S or h < 0.0:
        return "N"
    return HUE_NAMES[_hue_index(h)]


def to_tone_string(hls: Triplet) -> str:
    """Tone name ("v", "ltg", ...), or "W" / "Gy" / "Bk" when achromatic."""
    h, l, s = (float(t) for t in hls)
    if s < MONO_LIMIT_S or h < 0.0:
        return _neutral_name(l)
    return TONE_NAMES[tone((h, l, s))]
