# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Munsell Engine
==============
Conversion between CIE XYZ (D65) and Munsell HVC using the renotation
chromaticity table, plus Munsell notation formatting and parsing.

Since the conversion interpolates between tabulated samples, results are
approximate.  Hue runs over [0, 100) with 0 = 10RP, 10 = 10R, 15 = 5YR.

Pipeline (XYZ -> HVC):
    1. XYZ (D65) -> XYZ (C) -> Yxy.
    2. Value V from Y by inverting the JIS cubic with Newton's method.
    3. On the two value levels bracketing V, locate the (hue, chroma)
       quadrilateral containing (x, y) with point-in-triangle tests and
       solve for the fractional position inside it.
    4. Blend hue and chroma linearly across value.

References:
    - Newhall, Nickerson, Judd (1943). "Final Report of the O.S.A.
      Subcommittee on the Spacing of the Munsell Colors".
    - JIS Z 8721 "Colour specification - Specification according to their
      three attributes".
    - http://www.cis.rit.edu/mcsl/online/munsell.php
"""

import functools
import math
import re
from dataclasses import dataclass
from typing import Final, Optional, Union

import numpy as np

from tint_colorspace import ArrayFloat, Converted, XYZ, Yxy, handle_shapes
from tint_config import InvalidNotation, SOLVER_LIMITS, SolverLimits, logger, newton_root
from tint_munsell_data import MUNSELL_SOURCE, MUNSELL_VALUES

__all__ = [
    "MONO_LIMIT_C",
    "MAX_HUE",
    "HUE_NAMES",
    "ILLUMINANT_C",
    "MunsellTable",
    "build_munsell_table",
    "value_to_y",
    "y_to_value",
    "wrap_hue",
    "hue_name_to_value",
    "hue_value_to_name",
    "Chromatic",
    "Achromatic",
    "MunsellColor",
    "Munsell",
]

# --- Constants ---
MONO_LIMIT_C: Final[float] = 0.05
MAX_HUE: Final[float] = 100.0
HUE_NAMES: Final[tuple[str, ...]] = ("R", "YR", "Y", "GY", "G", "BG", "B", "PB", "P", "RP")

# White point of standard illuminant C (x, y)
ILLUMINANT_C: Final[tuple[float, float]] = (0.3101, 0.3162)

_EP: Final[float] = 1e-13

# Hue is tabulated in steps of 2.5 (25 in tenths), chroma in steps of 2.
_HUE_STEP10: Final[int] = 25
_HUE_BUCKETS: Final[int] = 1000 // _HUE_STEP10
_CHROMA_STEP: Final[int] = 2
_CHROMA_SLOTS: Final[int] = 50 // _CHROMA_STEP + 2

XYPoint = tuple[float, float]


def _eq(a: float, b: float) -> bool:
    return abs(a - b) < _EP

def _eq0(a: float) -> bool:
    return abs(a) < _EP

def wrap_hue(hue: float, period: float = MAX_HUE) -> float:
    """Hue taken modulo ``period`` into [0, period)."""
    hue %= period
    # A tiny negative hue rounds up to the period itself
    return 0.0 if hue >= period else hue


# =============================================================================
# 1. RENOTATION TABLE
# =============================================================================

@dataclass(slots=True, frozen=True)
class MunsellTable:
    """
    Decoded renotation table.

    Attributes:
        values: Tabulated Munsell values, shape (V,).
        xy: Chromaticity under illuminant C, shape (V, 40, 27, 2), indexed by
            ``[value_index, hue10 // 25, chroma // 2]``.  Missing samples are NaN.
        max_chroma: Largest tabulated chroma per (value_index, hue bucket).
    """

    values: ArrayFloat
    xy: ArrayFloat
    max_chroma: np.ndarray

    @property
    def top(self) -> int:
        """Index of the highest tabulated value level."""
        return len(self.values) - 1

    def get_xy(self, vi: int, h10: int, c: int) -> Optional[XYPoint]:
        """
        Chromaticity of a tabulated sample or None when not tabulated.

        Args:
            vi: Value level index.
            h10: Hue in tenths, multiple of 25 in [0, 1000).
            c: Chroma, even integer. Chroma 0 is the illuminant C white.
        """
        if c == 0:
            return ILLUMINANT_C
        ci = c // _CHROMA_STEP
        if ci >= _CHROMA_SLOTS:
            return None
        x, y = self.xy[vi, h10 // _HUE_STEP10, ci]
        if math.isnan(x):
            return None
        return (float(x), float(y))


@functools.lru_cache(maxsize=None)
def build_munsell_table() -> MunsellTable:
    """
    Decodes the second-order difference source tables once.

    Returns:
        The shared, read-only ``MunsellTable``.
    """
    n_values = len(MUNSELL_VALUES)
    xy = np.full((n_values, _HUE_BUCKETS, _CHROMA_SLOTS, 2), np.nan, dtype=np.float64)
    max_chroma = np.zeros((n_values, _HUE_BUCKETS), dtype=np.int64)

    for vi, rows in enumerate(MUNSELL_SOURCE):
        for row in rows:
            bucket = row[0]
            deltas = np.asarray(row[1:], dtype=np.float64).reshape(-1, 2)
            points = np.cumsum(np.cumsum(deltas, axis=0), axis=0) / 1000.0
            n = points.shape[0]
            xy[vi, bucket, 1:n + 1] = points
            max_chroma[vi, bucket] = max(max_chroma[vi, bucket], n * _CHROMA_STEP)

    values = np.asarray(MUNSELL_VALUES, dtype=np.float64)
    for arr in (values, xy, max_chroma):
        arr.setflags(write=False)

    logger.debug(
        "Munsell table decoded: %d value levels, %d samples",
        n_values, int(np.count_nonzero(~np.isnan(xy[..., 0]))),
    )
    return MunsellTable(values=values, xy=xy, max_chroma=max_chroma)


# =============================================================================
# 2. VALUE <-> LUMINANCE (JIS)
# =============================================================================

def value_to_y(v: float) -> float:
    """Munsell value V -> luminance Y of XYZ (C), Y in [0, 1]."""
    if v <= 1.0:
        return v * 0.0121
    v2 = v * v
    v3 = v2 * v
    return (0.0467 * v3 + 0.5602 * v2 - 0.1753 * v + 0.8007) / 100.0

def y_to_value(y: float, limits: SolverLimits = SOLVER_LIMITS) -> float:
    """
    Luminance Y of XYZ (C) -> Munsell value V.

    Linear below V = 1, otherwise Newton's method started at V = 10.  The
    Newton result is accurate to ``limits.value_tolerance``.
    """
    if y <= 0.0121:
        return y / 0.0121
    target = y * 100.0
    return newton_root(
        lambda v: value_to_y(v) * 100.0 - target,
        10.0,
        lambda v: 3.0 * 0.0467 * v * v + 2.0 * 0.5602 * v - 0.1753,
        tol=limits.value_tolerance,
        limits=limits,
        label="Munsell value inversion",
    )


# =============================================================================
# 3. GEOMETRY (xy -> hue/chroma on one value level)
# =============================================================================

def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx

def _is_inside(a: XYPoint, b: XYPoint, c: XYPoint, x: float, y: float) -> bool:
    """
    Whether (x, y) lies inside or on the clockwise triangle abc.
    A point to the right of any edge is outside.
    """
    if _cross(x - a[0], y - a[1], b[0] - a[0], b[1] - a[1]) < 0:
        return False
    if _cross(x - b[0], y - b[1], c[0] - b[0], c[1] - b[1]) < 0:
        return False
    if _cross(x - c[0], y - c[1], a[0] - c[0], a[1] - c[1]) < 0:
        return False
    return True

def _interpolation_ratio(
    x: float, y: float, a: XYPoint, d: XYPoint, b: XYPoint, c: XYPoint
) -> Optional[tuple[float, float]]:
    """
    Fractional (hue, chroma) position of (x, y) inside the quadrilateral::

         ^
        y| B C      hue turns A->B, chroma grows A->D
         | A D
         ------> x

    Returns:
        ``(h, v)`` in [0, 1]^2, or None when there is no valid solution.
    """
    v = -1.0

    # Solve ea v^2 + eb v + ec = 0 for the chroma ratio
    ea = (a[0] - d[0]) * (a[1] + c[1] - b[1] - d[1]) - (a[0] + c[0] - b[0] - d[0]) * (a[1] - d[1])
    eb = ((x - a[0]) * (a[1] + c[1] - b[1] - d[1]) + (a[0] - d[0]) * (b[1] - a[1])
          - (a[0] + c[0] - b[0] - d[0]) * (y - a[1]) - (b[0] - a[0]) * (a[1] - d[1]))
    ec = (x - a[0]) * (b[1] - a[1]) - (y - a[1]) * (b[0] - a[0])

    if _eq0(ea):
        if not _eq0(eb):
            v = -ec / eb
    else:
        disc = eb * eb - 4.0 * ea * ec
        if disc < 0.0:
            return None
        rt = math.sqrt(disc)
        v1 = (-eb + rt) / (2.0 * ea)
        v2 = (-eb - rt) / (2.0 * ea)

        if a == b:
            # Degenerate triangle at the achromatic corner: v1 is always 0
            if 0.0 <= v2 <= 1.0:
                v = v2
        elif 0.0 <= v1 <= 1.0:
            v = v1
        elif 0.0 <= v2 <= 1.0:
            v = v2
    if v < 0.0:
        return None

    # Hue ratio from whichever axis is well conditioned
    h = h1 = h2 = -1.0
    de_x = (a[0] - d[0] - b[0] + c[0]) * v - a[0] + b[0]
    de_y = (a[1] - d[1] - b[1] + c[1]) * v - a[1] + b[1]

    if not _eq0(de_x):
        h1 = ((a[0] - d[0]) * v + x - a[0]) / de_x
    if not _eq0(de_y):
        h2 = ((a[1] - d[1]) * v + y - a[1]) / de_y

    if 0.0 <= h1 <= 1.0:
        h = h1
    elif 0.0 <= h2 <= 1.0:
        h = h2

    if h < 0.0:
        return None
    return (h, v)

def _interpolate_hc(table: MunsellTable, x: float, y: float, vi: int) -> tuple[float, float, bool]:
    """
    Hue and chroma of chromaticity (x, y) on value level ``vi``.

    Returns:
        ``(hue, chroma, in_table)``.  ``(0, 0)`` is returned when no cell
        yields a solution; ``in_table`` is False when no tabulated cell even
        contains the point.
    """
    contained = False
    for h10_l in range(0, 1000, _HUE_STEP10):
        h10_u = (h10_l + _HUE_STEP10) % 1000

        for c_l in range(0, 51, _CHROMA_STEP):
            c_u = c_l + _CHROMA_STEP

            a = table.get_xy(vi, h10_l, c_l)
            d = table.get_xy(vi, h10_l, c_u)
            b = table.get_xy(vi, h10_u, c_l)
            c = table.get_xy(vi, h10_u, c_u)
            if a is None and b is None:
                break
            if a is None or b is None or c is None or d is None:
                continue

            if a == b:
                inside = _is_inside(a, c, d, x, y)
            else:
                inside = _is_inside(a, c, d, x, y) or _is_inside(a, b, c, x, y)
            if not inside:
                continue
            contained = True

            hv = _interpolation_ratio(x, y, a, d, b, c)
            if hv is not None:
                h10_end = 1000 if h10_u == 0 else h10_u
                return (
                    ((h10_end - h10_l) * hv[0] + h10_l) / 10.0,
                    (c_u - c_l) * hv[1] + c_l,
                    True,
                )
    return (0.0, 0.0, contained)

def _interpolate_xy(table: MunsellTable, h: float, c: float, vi: int) -> tuple[float, float, bool]:
    """
    Chromaticity of (hue, chroma) on value level ``vi``.

    Returns:
        ``(x, y, in_table)``.  ``in_table`` is False when the chroma exceeds
        the tabulated maximum of either neighbouring hue and the result was
        extrapolated along the available edge.
    """
    h10 = h * 10.0
    h10_l = int(math.floor(h10 / _HUE_STEP10)) * _HUE_STEP10
    h10_u = h10_l + _HUE_STEP10
    c_l = int(math.floor(c / _CHROMA_STEP)) * _CHROMA_STEP
    c_u = c_l + _CHROMA_STEP

    rh = (h10 - h10_l) / (h10_u - h10_l)
    rc = (c - c_l) / (c_u - c_l)

    if h10_u == 1000:
        h10_u = 0
    max_c_hl = int(table.max_chroma[vi, h10_l // _HUE_STEP10])
    max_c_hu = int(table.max_chroma[vi, h10_u // _HUE_STEP10])

    if max_c_hl <= c_l or max_c_hu <= c_l:
        def _edge(h10_e: int, max_c: int) -> XYPoint:
            if c_l < max_c:
                lo = table.get_xy(vi, h10_e, c_l)
                hi = table.get_xy(vi, h10_e, c_u)
                return ((hi[0] - lo[0]) * rc + lo[0], (hi[1] - lo[1]) * rc + lo[1])
            return table.get_xy(vi, h10_e, max_c)

        xy_hl = _edge(h10_l, max_c_hl)
        xy_hu = _edge(h10_u, max_c_hu)
        return (
            (xy_hu[0] - xy_hl[0]) * rh + xy_hl[0],
            (xy_hu[1] - xy_hl[1]) * rh + xy_hl[1],
            False,
        )

    d = table.get_xy(vi, h10_l, c_u)
    cc = table.get_xy(vi, h10_u, c_u)
    cd_x = (cc[0] - d[0]) * rh + d[0]
    cd_y = (cc[1] - d[1]) * rh + d[1]

    if c_l == 0:
        o = ILLUMINANT_C
        return ((cd_x - o[0]) * rc + o[0], (cd_y - o[1]) * rc + o[1], True)

    a = table.get_xy(vi, h10_l, c_l)
    b = table.get_xy(vi, h10_u, c_l)
    ab_x = (b[0] - a[0]) * rh + a[0]
    ab_y = (b[1] - a[1]) * rh + a[1]
    return ((cd_x - ab_x) * rc + ab_x, (cd_y - ab_y) * rc + ab_y, True)


# =============================================================================
# 4. SINGLE-COLOUR CONVERSIONS
# =============================================================================

def _lower_level(table: MunsellTable, v: float) -> int:
    """Index of the highest tabulated level <= v, or -1 below the first level."""
    vi_l = -1
    while vi_l + 1 < len(table.values) and table.values[vi_l + 1] <= v:
        vi_l += 1
    return vi_l

def _yxy_to_munsell(
    big_y: float, x: float, y: float, table: MunsellTable, limits: SolverLimits
) -> tuple[tuple[float, float, float], bool]:
    """
    Yxy under illuminant C -> ((H, V, C), saturated).

    Saturated when the chromaticity lies outside the tabulated gamut of the
    bracketing levels, or when a chromatic colour is brighter than the top
    level.  The neutral axis is valid at any value.
    """
    v = y_to_value(big_y, limits)
    top = table.top
    v_top = float(table.values[top])

    if _eq(v, v_top):
        h, c, in_table = _interpolate_hc(table, x, y, top)
        return (h, v, c), not in_table
    if _eq0(v) or (_eq(x, ILLUMINANT_C[0]) and _eq(y, ILLUMINANT_C[1])):
        return (0.0, v, 0.0), False
    if v_top < v:
        _, c, in_table = _interpolate_hc(table, x, y, top)
        return (0.0, v, 0.0), not (in_table and c < MONO_LIMIT_C)

    vi_l = _lower_level(table, v)
    vi_u = vi_l + 1
    h_u, c_u, in_table = _interpolate_hc(table, x, y, vi_u)
    saturated = not in_table
    if vi_l == -1:
        # Below the first level the lower side is black: same hue, no chroma
        h_l, c_l = h_u, 0.0
        v_l = 0.0
    else:
        h_l, c_l, in_table = _interpolate_hc(table, x, y, vi_l)
        saturated = saturated or not in_table
        v_l = float(table.values[vi_l])
    v_h = float(table.values[vi_u])

    r = (v - v_l) / (v_h - v_l)
    h = (h_u - h_l) * r + h_l
    if MAX_HUE <= h:
        h -= MAX_HUE
    c = (c_u - c_l) * r + c_l
    if c < MONO_LIMIT_C:
        c = 0.0
    return (h, v, c), saturated

def _munsell_to_yxy(h: float, v: float, c: float, table: MunsellTable) -> tuple[tuple[float, float, float], bool]:
    """(H, V, C) -> (Yxy under illuminant C, saturated)."""
    if MAX_HUE <= h:
        h = wrap_hue(h)
    big_y = value_to_y(v)

    if _eq0(v) or h < 0.0 or c < MONO_LIMIT_C:
        return (big_y, ILLUMINANT_C[0], ILLUMINANT_C[1]), (_eq0(v) and 0.0 < c)

    top = table.top
    v_top = float(table.values[top])
    if v_top <= v:
        x, y, _ = _interpolate_xy(table, h, c, top)
        return (big_y, x, y), (v_top < v)

    saturated = False
    vi_l = _lower_level(table, v)
    vi_u = vi_l + 1
    if vi_l == -1:
        # Below the first level, blend from the achromatic point at V = 0
        xy_l = ILLUMINANT_C
        v_l = 0.0
        saturated = True
    else:
        x_l, y_l, in_table = _interpolate_xy(table, h, c, vi_l)
        xy_l = (x_l, y_l)
        v_l = float(table.values[vi_l])
        saturated = saturated or not in_table

    x_u, y_u, in_table = _interpolate_xy(table, h, c, vi_u)
    saturated = saturated or not in_table
    v_h = float(table.values[vi_u])

    r = (v - v_l) / (v_h - v_l)
    x = (x_u - xy_l[0]) * r + xy_l[0]
    y = (y_u - xy_l[1]) * r + xy_l[1]
    return (big_y, x, y), saturated


# =============================================================================
# 5. NOTATION
# =============================================================================

def hue_name_to_value(hue_name: str) -> Optional[float]:
    """
    Converts a hue name such as ``"5YR"`` to a hue value (15.0).

    Returns:
        The hue in [0, 100), or None for the achromatic ``"N"``.

    Raises:
        InvalidNotation: If the hue family or its number cannot be parsed.
    """
    name = hue_name.strip()
    if name == "N":
        return None
    if len(name) < 2:
        raise InvalidNotation(f"Invalid Munsell hue: {hue_name!r}")

    family_len = 1 if name[-2].isdigit() else 2
    family = name[-family_len:]
    if family not in HUE_NAMES:
        raise InvalidNotation(f"Unknown Munsell hue family {family!r} in {hue_name!r}")
    try:
        hv = float(name[:-family_len])
    except ValueError as e:
        raise InvalidNotation(f"Invalid Munsell hue number in {hue_name!r}") from e

    hv += HUE_NAMES.index(family) * 10.0
    if MAX_HUE <= hv:
        hv = wrap_hue(hv)
    return hv

def hue_value_to_name(hue: Optional[float], chroma: float) -> str:
    """
    Converts a hue value to its name, e.g. 15.0 -> ``"5YR"``, 0 -> ``"10RP"``.

    Returns ``"N"`` when hue is None or -1, or when the chroma is zero.
    """
    if hue is None or hue == -1 or _eq0(chroma):
        return "N"
    if hue <= 0.0:
        hue += MAX_HUE
    h10 = int(hue * 10.0) % 100
    family = int(hue / 10.0)
    if h10 == 0:
        h10 = 100
        family -= 1
    return f"{round(h10 * 10) / 100:g}{HUE_NAMES[family % len(HUE_NAMES)]}"


@dataclass(slots=True, frozen=True)
class Chromatic:
    """A Munsell colour with a defined hue."""

    hue: float
    value: float
    chroma: float

    def to_hvc(self) -> ArrayFloat:
        return np.array([self.hue, self.value, self.chroma], dtype=np.float64)


@dataclass(slots=True, frozen=True)
class Achromatic:
    """A neutral Munsell colour (N); only the value is meaningful."""

    value: float

    def to_hvc(self) -> ArrayFloat:
        return np.array([0.0, self.value, 0.0], dtype=np.float64)


MunsellColor = Union[Chromatic, Achromatic]

_NOTATION_RE: Final = re.compile(
    r"^\s*(?:N\s*(?P<nv>[0-9.]+)|(?P<hue>[0-9.]+[A-Z]{1,2})\s+(?P<v>[0-9.]+)\s*/\s*(?P<c>[0-9.]+))\s*$"
)


# =============================================================================
# 6. PUBLIC API
# =============================================================================

class Munsell:
    """
    Munsell HVC under D65 tristimulus values.

    Hue -1 or chroma below ``MONO_LIMIT_C`` is treated as achromatic (N).
    """

    @staticmethod
    @handle_shapes
    def from_xyz(xyz: ArrayFloat, limits: SolverLimits = SOLVER_LIMITS) -> Converted:
        """
        Converts XYZ (D65) to Munsell (H, V, C).

        Args:
            xyz: Input XYZ data, shape (N, 3) or (3,).
            limits: Newton iteration limits for the value inversion.

        Returns:
            ``Converted``; saturated where the chromaticity falls outside the
            renotation table or a chromatic colour exceeds the top value.
            Such colours are reported as ``(0, V, 0)``.
        """
        table = build_munsell_table()
        yxy = Yxy.from_xyz(XYZ.to_illuminant_c(xyz))
        out = np.empty_like(yxy)
        saturated = np.zeros(yxy.shape[0], dtype=bool)
        for i, (big_y, x, y) in enumerate(yxy):
            out[i], saturated[i] = _yxy_to_munsell(float(big_y), float(x), float(y), table, limits)
        return Converted(out, saturated)

    @staticmethod
    @handle_shapes
    def to_xyz(hvc: ArrayFloat) -> Converted:
        """
        Converts Munsell (H, V, C) to XYZ (D65).

        Returns:
            ``Converted``; saturated where the colour lies beyond the
            tabulated chroma or value range.
        """
        table = build_munsell_table()
        yxy = np.empty_like(hvc)
        saturated = np.zeros(hvc.shape[0], dtype=bool)
        for i, (h, v, c) in enumerate(hvc):
            yxy[i], saturated[i] = _munsell_to_yxy(float(h), float(v), float(c), table)
        xyz = XYZ.from_illuminant_c(Yxy.to_xyz(yxy).value)
        return Converted(xyz, saturated)

    @staticmethod
    def classify(hvc: ArrayFloat) -> MunsellColor:
        """Wraps a single (H, V, C) triple in ``Chromatic`` or ``Achromatic``."""
        h, v, c = (float(t) for t in np.asarray(hvc, dtype=np.float64).ravel()[:3])
        if h < 0.0 or c < MONO_LIMIT_C:
            return Achromatic(v)
        if MAX_HUE <= h:
            h = wrap_hue(h)
        return Chromatic(h, v, c)

    @staticmethod
    def to_string(hvc: Union[ArrayFloat, MunsellColor]) -> str:
        """
        Formats Munsell notation, e.g. ``"5Y 6.0/8.0"`` or ``"N 5.0"``.
        """
        color = hvc if isinstance(hvc, (Chromatic, Achromatic)) else Munsell.classify(hvc)
        if isinstance(color, Achromatic):
            return f"N {color.value:.1f}"
        hue = hue_value_to_name(color.hue, color.chroma)
        return f"{hue} {color.value:.1f}/{color.chroma:.1f}"

    @staticmethod
    def parse(text: str) -> MunsellColor:
        """
        Parses Munsell notation (``"5YR 6/8"``, ``"N 5.0"``).

        Raises:
            InvalidNotation: If the text is not valid notation.
        """
        m = _NOTATION_RE.match(text)
        if m is None:
            raise InvalidNotation(f"Invalid Munsell notation: {text!r}")
        try:
            if m.group("nv") is not None:
                return Achromatic(float(m.group("nv")))
            hue = hue_name_to_value(m.group("hue"))
            value = float(m.group("v"))
            chroma = float(m.group("c"))
        except ValueError as e:
            raise InvalidNotation(f"Invalid Munsell notation: {text!r}") from e
        if chroma < MONO_LIMIT_C:
            return Achromatic(value)
        return Chromatic(hue, value, chroma)
