# -*- coding: utf-8 -*-
"""
Tincture: Munsell notation and colour-order conversions
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tristimulus Collaborators
=========================
Closed-form transforms consumed by the Munsell and PCCS engines:

1. XYZ <-> xyY (chromaticity + luminance).
2. Illuminant D65 <-> Illuminant C adaptation.  The Munsell renotation data
   is defined under Illuminant C while the public API speaks D65 XYZ.

Two adaptation methods are available:

- ``"von_kries"`` (default): the fixed Von Kries matrices published by
  Bruce Lindbloom for his Munsell calculator.  The renotation tables were
  tuned against this pair, so round trips are the most faithful with it.
- ``"bradford"``: a Bradford CAT computed from the two white points and
  cached per white-point pair.

References:
    - CIE 15:2004 "Colorimetry"
    - Lindbloom, B. "Munsell Calculator", http://www.brucelindbloom.com
"""

import functools
from typing import Any, Callable, Final, Literal, Optional, Sequence, Tuple, TypeAlias, Union

import numpy as np
import numpy.typing as npt

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "AdaptationMethod",

    # --- Constants ---
    "REF_WHITE_D65",
    "REF_WHITE_C",
    "D65_XY",
    "ILLUMINANT_C_XY",

    # --- Configuration ---
    "set_adaptation_method",
    "get_adaptation_method",

    # --- Matrices ---
    "M_D65_TO_C_T",
    "M_C_TO_D65_T",
    "M_BRADFORD_T",
    "M_BRADFORD_INV_T",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "ColorSpaceEngine",
    "ChromaticAdaptation",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = npt.NDArray[np.floating]
AdaptationMethod = Literal["von_kries", "bradford"]

# --- Constants & Pre-Transposed Matrices ---

# Standard Illuminants (Y=1.0)
REF_WHITE_D65: Final[ArrayFloat] = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)
# Illuminant C: average daylight as simulated by a filtered tungsten source
REF_WHITE_C: Final[ArrayFloat] = np.array([0.98074, 1.00000, 1.18232], dtype=np.float64)

D65_XY: Final[Tuple[float, float]] = (0.3127, 0.3290)
ILLUMINANT_C_XY: Final[Tuple[float, float]] = (0.3101, 0.3162)

# Von Kries D65 <-> C (Lindbloom).  Stored transposed for row-vector products.
_M_D65_TO_C = np.array([
    [1.0027359, 0.0093941,  0.0167846],
    [0.0010319, 0.9992466, -0.0002089],
    [0.0,       0.0,        1.0858628]
], dtype=np.float64)
M_D65_TO_C_T: Final[ArrayFloat] = _M_D65_TO_C.T.copy()

_M_C_TO_D65 = np.array([
    [ 0.9972812, -0.0093756, -0.0154171],
    [-0.0010298,  1.0007636,  0.0002084],
    [ 0.0,        0.0,        0.9209267]
], dtype=np.float64)
M_C_TO_D65_T: Final[ArrayFloat] = _M_C_TO_D65.T.copy()

# Bradford Adaptation
# Transforms XYZ to "sharpened" cone responses for gain application.
_M_BRADFORD = np.array([
    [ 0.8951000,  0.2664000, -0.1614000],
    [-0.7502000,  1.7135000,  0.0367000],
    [ 0.0389000, -0.0685000,  1.0296000]
], dtype=np.float64)
M_BRADFORD_T: Final[ArrayFloat] = _M_BRADFORD.T.copy()
M_BRADFORD_INV_T: Final[ArrayFloat] = np.linalg.inv(_M_BRADFORD).T.copy()


# --- Runtime Configuration ---
# Selects the D65 <-> C transform used by the Munsell engine when a call does
# not pass ``adaptation=`` explicitly.
#
# Toggle at runtime via:
#     import tincture_colorengine as ce
#     ce.set_adaptation_method("bradford")
#     ce.set_adaptation_method("von_kries")  # back to default
_ADAPTATION_METHOD: AdaptationMethod = "von_kries"

def set_adaptation_method(method: AdaptationMethod = "von_kries") -> None:
    """
    Selects the default Illuminant D65 <-> C adaptation.

    Args:
        method: ``"von_kries"`` (Lindbloom matrices) or ``"bradford"``.

    Raises:
        ValueError: If the method name is unknown.
    """
    global _ADAPTATION_METHOD
    if method not in ("von_kries", "bradford"):
        raise ValueError(f"Unknown adaptation method: {method!r}")
    _ADAPTATION_METHOD = method

def get_adaptation_method() -> AdaptationMethod:
    """Returns the currently selected default adaptation method."""
    return _ADAPTATION_METHOD


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to normalize inputs to (N, 3) and safeguard shape.

    This ensures that 1D inputs (single colours) are treated as 2D batches
    internally, simplifying the kernels.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns (3,)
        - If input is (N, 3), returns (N, 3)
        - Tuple results are unwrapped element-wise, so a ``(colors, mask)``
          pair for a (3,) input comes back as ``((3,), scalar)``.
    """
    @functools.wraps(func)
    def wrapper(arr: Union[ArrayFloat, Sequence[float]], *args: Any, **kwargs: Any) -> Any:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            if isinstance(res, tuple):
                return tuple(r[0] for r in res)
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for the XYZ <-> xyY transforms.

    Core transforms provide both a public ``@handle_shapes`` decorated API
    and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
    float64 input.
    """

    @staticmethod
    def _xyz_to_xyY_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        """Raw XYZ → xyY.  *xyz_array* must be (N, 3) float64."""
        sum_xyz = np.sum(xyz_array, axis=-1)
        mask = np.abs(sum_xyz) > 1e-12
        xyY = np.zeros_like(xyz_array)

        if np.any(mask):
            inv_sum = 1.0 / sum_xyz[mask]
            xyY[mask, 0] = xyz_array[mask, 0] * inv_sum
            xyY[mask, 1] = xyz_array[mask, 1] * inv_sum
            xyY[mask, 2] = xyz_array[mask, 1]

        # Black pixels take the D65 chromaticity (Lindbloom convention) so
        # the output stays NaN-free.
        xyY[~mask, 0] = D65_XY[0]
        xyY[~mask, 1] = D65_XY[1]
        xyY[~mask, 2] = 0.0
        return xyY

    @staticmethod
    def _xyY_to_xyz_raw(xyY_array: ArrayFloat) -> ArrayFloat:
        """Raw xyY → XYZ.  *xyY_array* must be (N, 3) float64."""
        x, y, Y = xyY_array[..., 0], xyY_array[..., 1], xyY_array[..., 2]
        xyz = np.zeros_like(xyY_array)
        mask = np.abs(y) > 1e-12
        if np.any(mask):
            factor = Y[mask] / y[mask]
            xyz[mask, 0] = x[mask] * factor
            xyz[mask, 1] = Y[mask]
            xyz[mask, 2] = (1.0 - x[mask] - y[mask]) * factor
        return xyz

    @staticmethod
    @handle_shapes
    def xyz_to_xyY(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ to xyY (Chromaticity + Luminance).

        Standard formula:
            x = X / (X+Y+Z)
            y = Y / (X+Y+Z)
            Y = Y

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).

        Returns:
            xyY coordinates ordered (x, y, Y).
        """
        return ColorSpaceEngine._xyz_to_xyY_raw(xyz_array)

    @staticmethod
    @handle_shapes
    def xyY_to_xyz(xyY_array: ArrayFloat) -> ArrayFloat:
        """
        Converts xyY to XYZ.  A zero ``y`` chromaticity maps to black.

        Args:
            xyY_array: Input xyY data, shape (N, 3) or (3,).

        Returns:
            XYZ coordinates.
        """
        return ColorSpaceEngine._xyY_to_xyz_raw(xyY_array)


# =============================================================================
# 3. CHROMATIC ADAPTATION
# =============================================================================

def _to_hashable(obj: Union[ArrayFloat, Sequence[float]]) -> Tuple[float, ...]:
    """Helper to ensure inputs are hashable tuples for caching."""
    if isinstance(obj, np.ndarray):
        return tuple(float(v) for v in obj.ravel())
    return tuple(float(v) for v in obj)

@functools.lru_cache(maxsize=16)
def _get_cached_bradford_matrix(src_white_tuple: Tuple[float, ...], dst_white_tuple: Tuple[float, ...]) -> ArrayFloat:
    """
    Cached worker for calculating Bradford matrix.

    Derivation:
    M_composite = M_inv * Gain * M
    Since we operate on row vectors: M_comp = M.T @ Gain @ M_inv.T
    """
    src = np.array(src_white_tuple, dtype=np.float64)
    dst = np.array(dst_white_tuple, dtype=np.float64)

    src_lms = np.dot(src, M_BRADFORD_T)
    dst_lms = np.dot(dst, M_BRADFORD_T)

    # Prevent divide-by-zero for extremely dark white points
    src_lms = np.where(np.abs(src_lms) < 1e-12, 1e-12, src_lms)
    gains = dst_lms / src_lms

    return M_BRADFORD_T @ np.diag(gains) @ M_BRADFORD_INV_T


class ChromaticAdaptation:
    """Handles White Point Adaptation (Von Kries / Bradford)."""

    @staticmethod
    def calc_transform_matrix(src_white: ArrayFloat, dst_white: ArrayFloat) -> ArrayFloat:
        """
        Computes the Bradford adaptation matrix between two white points.

        Returns:
            3x3 Adaptation Matrix (for row-vector multiplication).
        """
        return _get_cached_bradford_matrix(_to_hashable(src_white), _to_hashable(dst_white))

    @staticmethod
    @handle_shapes
    def adapt(xyz: ArrayFloat, src_white: ArrayFloat, dst_white: ArrayFloat) -> ArrayFloat:
        """
        Adapts XYZ colour(s) from source to dest white point using Bradford.

        Args:
            xyz: Input XYZ colours, shape (N, 3) or (3,).
            src_white: Source white point.
            dst_white: Destination white point.
        """
        if np.allclose(src_white, dst_white):
            return xyz.copy()
        return np.dot(xyz, ChromaticAdaptation.calc_transform_matrix(src_white, dst_white))

    @staticmethod
    def _convert(xyz: ArrayFloat, direction: Literal["to_c", "from_c"],
                 method: Optional[AdaptationMethod]) -> ArrayFloat:
        method = _ADAPTATION_METHOD if method is None else method
        if method == "von_kries":
            return np.dot(xyz, M_D65_TO_C_T if direction == "to_c" else M_C_TO_D65_T)
        if method == "bradford":
            if direction == "to_c":
                return ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_C)
            return ChromaticAdaptation.adapt(xyz, REF_WHITE_C, REF_WHITE_D65)
        raise ValueError(f"Unknown adaptation method: {method!r}")

    @staticmethod
    @handle_shapes
    def to_illuminant_c(xyz: ArrayFloat, method: Optional[AdaptationMethod] = None) -> ArrayFloat:
        """
        Converts XYZ under Illuminant D65 to XYZ under Illuminant C.

        Args:
            xyz: D65 XYZ data, shape (N, 3) or (3,).
            method: Adaptation override; defaults to the module setting.
        """
        return ChromaticAdaptation._convert(xyz, "to_c", method)

    @staticmethod
    @handle_shapes
    def from_illuminant_c(xyz: ArrayFloat, method: Optional[AdaptationMethod] = None) -> ArrayFloat:
        """
        Converts XYZ under Illuminant C to XYZ under Illuminant D65.

        Args:
            xyz: Illuminant C XYZ data, shape (N, 3) or (3,).
            method: Adaptation override; defaults to the module setting.
        """
        return ChromaticAdaptation._convert(xyz, "from_c", method)
