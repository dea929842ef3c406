# -*- coding: utf-8 -*-
"""
Tincture: Munsell notation and colour-order conversions
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Munsell Sample Table & Spatial Index
====================================
Decodes the compact renotation source (see ``tincture_munsell_data``) into a
dense, read-only lookup grid and builds one k-d tree per Value level.

Grid layout:
    ``xy[vi, hue_step, chroma_step] -> (x, y)`` with
    ``hue_step = 10 * hue / 25`` in [0, 40) and ``chroma_step = chroma / 2``
    in [0, 27).  Slot 0 (chroma 0) is never populated: the neutral axis is the
    Illuminant C white point.  Absent samples are NaN in ``xy`` and False in
    ``present``.

Hue coordinates on this grid are expressed in "hue tenths" (``ht``): the
Munsell hue multiplied by 10, so a hue step spans 25 tenths and the full
circle spans 1000.
"""

from __future__ import annotations

import bisect
import functools
from dataclasses import dataclass
from typing import Final, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from tincture_colorengine import ILLUMINANT_C_XY

__all__ = [
    "HUE_STEPS",
    "CHROMA_STEPS",
    "HT_STEP",
    "HT_CIRCLE",
    "MunsellTableError",
    "MunsellTable",
    "build_table",
    "default_table",
]

Pair = Tuple[float, float]

HUE_STEPS: Final[int] = 40           # 1000 / 25
CHROMA_STEPS: Final[int] = 27        # chroma 0..52 in steps of 2
HT_STEP: Final[int] = 25
HT_CIRCLE: Final[int] = 1000


class MunsellTableError(ValueError):
    """Raised when the renotation source data is malformed."""


def _integrate(pairs: np.ndarray) -> np.ndarray:
    """Cumulative sum over an (n, 2) array of x/y pairs."""
    return np.cumsum(pairs, axis=0)


@dataclass(slots=True, frozen=True)
class MunsellTable:
    """Immutable renotation lookup tables for every Value level.

    Use ``build_table()`` or ``default_table()`` to construct instances.

    Attributes
    ----------
    values : np.ndarray
        Value levels ``TBL_V``, shape (n_v,), strictly increasing.
    xy : np.ndarray
        Chromaticities, shape (n_v, 40, 27, 2), NaN where absent.
    present : np.ndarray
        Presence mask, shape (n_v, 40, 27).
    max_c : np.ndarray
        Largest tabulated chroma per (level, hue step), shape (n_v, 40);
        0 when a hue step has no data.
    trees : tuple of cKDTree
        One spatial index per level over the present (x, y) samples.
    keys : tuple of np.ndarray
        Per level, the ``(ht, chroma)`` key of every tree point, shape (m, 2).
    """

    values: np.ndarray
    xy: np.ndarray
    present: np.ndarray
    max_c: np.ndarray
    trees: Tuple[cKDTree, ...]
    keys: Tuple[np.ndarray, ...]

    @property
    def size(self) -> int:
        """Number of Value levels."""
        return int(self.values.shape[0])

    @property
    def v_max(self) -> float:
        return float(self.values[-1])

    def lower_index(self, v: float) -> int:
        """Index of the largest level ``<= v``, or -1 below the first level."""
        return bisect.bisect_right(self.values.tolist(), v) - 1

    def get_xy(self, vi: int, ht: float, c: float) -> Optional[Pair]:
        """
        Returns the sample at hue tenths ``ht`` and chroma ``c`` on level ``vi``.

        Chroma 0 is the neutral point.  ``ht`` is wrapped onto [0, 1000);
        ``None`` means the sample is outside the tabulated gamut.
        """
        if c == 0:
            return ILLUMINANT_C_XY
        hi = int(ht) % HT_CIRCLE // HT_STEP
        ci = int(c) // 2
        if not 0 < ci < CHROMA_STEPS or not self.present[vi, hi, ci]:
            return None
        x, y = self.xy[vi, hi, ci]
        return (float(x), float(y))

    def get_max_c(self, vi: int, ht: float) -> int:
        """Tabulated gamut boundary (max chroma) at hue tenths ``ht``."""
        hi = int(ht) % HT_CIRCLE // HT_STEP
        return int(self.max_c[vi, hi])

    def neighbors(self, vi: int, p: Pair, k: int) -> List[Tuple[Pair, float]]:
        """
        k nearest samples to chromaticity ``p`` on level ``vi``.

        Returns:
            ``[((ht, chroma), distance), ...]`` sorted by distance.  Fewer than
            ``k`` entries come back when the level holds fewer samples.
        """
        tree = self.trees[vi]
        dist, idx = tree.query(p, k=k)
        dist = np.atleast_1d(dist)
        idx = np.atleast_1d(idx)
        keys = self.keys[vi]

        out = []
        for d, i in zip(dist, idx):
            if not np.isfinite(d) or i >= keys.shape[0]:
                continue
            ht, c = keys[i]
            out.append(((float(ht), float(c)), float(d)))
        return out


def build_table(tbl_v: Sequence[float], tbl_src_min: Sequence[Sequence[Sequence[int]]]) -> MunsellTable:
    """
    Decodes the double delta-encoded renotation source into a ``MunsellTable``.

    Args:
        tbl_v: Value levels, strictly increasing.
        tbl_src_min: Per level, rows ``(hue_step, d2x1, d2y1, d2x2, d2y2, ...)``
            in thousandths.

    Returns:
        A read-only ``MunsellTable``.  The same input always produces the
        same tables.

    Raises:
        MunsellTableError: On any structural inconsistency in the source.
    """
    values = np.asarray(tbl_v, dtype=np.float64)
    if values.ndim != 1 or values.size == 0:
        raise MunsellTableError("Value levels must be a non-empty 1D sequence.")
    if np.any(np.diff(values) <= 0.0):
        raise MunsellTableError(f"Value levels must be strictly increasing, got {list(tbl_v)}")
    if len(tbl_src_min) != values.size:
        raise MunsellTableError(
            f"Source has {len(tbl_src_min)} levels but {values.size} Value levels were given."
        )

    n_v = values.size
    xy = np.full((n_v, HUE_STEPS, CHROMA_STEPS, 2), np.nan, dtype=np.float64)
    present = np.zeros((n_v, HUE_STEPS, CHROMA_STEPS), dtype=bool)
    max_c = np.zeros((n_v, HUE_STEPS), dtype=np.int64)
    trees: List[cKDTree] = []
    keys: List[np.ndarray] = []

    for vi, rows in enumerate(tbl_src_min):
        points: List[Pair] = []
        point_keys: List[Tuple[int, int]] = []

        for row in rows:
            if len(row) < 3 or (len(row) - 1) % 2 != 0:
                raise MunsellTableError(
                    f"Level {vi}: row {tuple(row)[:3]}... has an odd x/y payload."
                )
            hi = int(row[0])
            if not 0 <= hi < HUE_STEPS:
                raise MunsellTableError(f"Level {vi}: hue step {hi} out of range.")
            if max_c[vi, hi] != 0:
                raise MunsellTableError(f"Level {vi}: duplicate row for hue step {hi}.")

            deltas = np.asarray(row[1:], dtype=np.float64).reshape(-1, 2)
            n = deltas.shape[0]
            if n >= CHROMA_STEPS:
                raise MunsellTableError(f"Level {vi}: hue step {hi} has {n} chroma steps.")

            coords = _integrate(_integrate(deltas)) / 1000.0
            xy[vi, hi, 1:n + 1] = coords
            present[vi, hi, 1:n + 1] = True
            max_c[vi, hi] = 2 * n

            for ci in range(1, n + 1):
                points.append((coords[ci - 1, 0], coords[ci - 1, 1]))
                point_keys.append((hi * HT_STEP, ci * 2))

        if not points:
            raise MunsellTableError(f"Level {vi}: no samples.")
        trees.append(cKDTree(np.asarray(points, dtype=np.float64)))
        level_keys = np.asarray(point_keys, dtype=np.float64)
        level_keys.flags.writeable = False
        keys.append(level_keys)

    for arr in (values, xy, present, max_c):
        arr.flags.writeable = False

    return MunsellTable(
        values=values,
        xy=xy,
        present=present,
        max_c=max_c,
        trees=tuple(trees),
        keys=tuple(keys),
    )


@functools.lru_cache(maxsize=1)
def default_table() -> MunsellTable:
    """The renotation table built from the bundled *all* data set (cached)."""
    from tincture_munsell_data import TBL_SRC_MIN, TBL_V
    return build_table(TBL_V, TBL_SRC_MIN)
