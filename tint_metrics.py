# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Difference & Categorical Evaluation
==========================================
CIE76 and CIEDE2000 colour differences, NBS ratings, the conspicuity degree
of a hue, and classification into the 11 basic categorical colours.

References:
    - Sharma, Wu, Dalal (2005). "The CIEDE2000 Color-Difference Formula:
      Implementation Notes, Supplementary Test Data, and Mathematical
      Observations", Color Research & Application 30(1).
    - Uchikawa, Boynton (1987). "Categorical color perception of Japanese
      observers", Vision Research 27(10).
    - Effective use of color conspicuity for Re-Coloring system,
      Correspondences on Human Interface 12(1), SIG-DE-01, 2010.
    - Dental Materials Journal 27(1), 139-144 (2008) for the NBS factor.
"""

from enum import Enum
from typing import Final, Tuple, Union

import numpy as np
from numba import float64, njit

from tint_colorspace import DEG2RAD, RAD2DEG, ArrayFloat, handle_shapes
from tint_config import ShapeError

__all__ = [
    "NBS_TRACE",
    "NBS_SLIGHT",
    "NBS_NOTICEABLE",
    "NBS_APPRECIABLE",
    "NBS_MUCH",
    "NBS_VERY_MUCH",
    "DE_TO_NBS",
    "CATEGORICAL_COLORS",
    "DifferenceMethod",
    "distance",
    "cie76",
    "ciede2000",
    "difference_between",
    "nbs_rating",
    "conspicuity_of",
    "category_of",
]

# --- NBS units ---
# Sensory expressions of colour difference; each value is the lower limit of its range.
NBS_TRACE: Final[float] = 0.0
NBS_SLIGHT: Final[float] = 0.5
NBS_NOTICEABLE: Final[float] = 1.5
NBS_APPRECIABLE: Final[float] = 3.0
NBS_MUCH: Final[float] = 6.0
NBS_VERY_MUCH: Final[float] = 12.0

# Delta E -> NBS units
DE_TO_NBS: Final[float] = 0.92

_NBS_LEVELS: Final[tuple[tuple[float, str], ...]] = (
    (NBS_VERY_MUCH, "very much"),
    (NBS_MUCH, "much"),
    (NBS_APPRECIABLE, "appreciable"),
    (NBS_NOTICEABLE, "noticeable"),
    (NBS_SLIGHT, "slight"),
    (NBS_TRACE, "trace"),
)

CATEGORICAL_COLORS: Final[tuple[str, ...]] = (
    "white", "black", "red", "green",
    "yellow", "blue", "brown", "purple",
    "pink", "orange", "gray",
)

C25_7: Final[float] = 25.0 ** 7

# Luminance compression of Y before picking a grid
_Y_TO_LUM: Final[float] = 60.0
_LUM_TABLE: Final[ArrayFloat] = np.array([2.0, 5.0, 10.0, 20.0, 30.0, 40.0], dtype=np.float64)

# Category occupancy grids per luminance level: 21 rows x 18 columns, cell
# (row, col) sits at chromaticity (150 + 25 col, 75 + 25 row) / 1000.
# '.' is empty, '0'-'9' and 'a' index CATEGORICAL_COLORS.
_GRID_ROWS: Final[int] = 21
_GRID_COLS: Final[int] = 18
_CATEGORY_GRID_SOURCE: Final[dict[int, str]] = {
    2: (
        ".................."
        ".5................"
        ".557.............."
        "..557............."
        "..55777..........."
        "..55.777.........."
        "..55577777........"
        "...55577777......."
        "...5557777777....."
        "...55511..6767...."
        "...333.116666666.."
        "....3331.666666..."
        "....3333116666...."
        "....33331116......"
        ".....33333........"
        ".....3333........."
        ".....33..........."
        ".................."
        ".................."
        ".................."
        ".................."
    ),
    5: (
        "5................."
        ".55..............."
        ".557.............."
        ".55777............"
        "..55777..........."
        "..5577777........."
        "..555777777......."
        "..5557777777......"
        "...55a77777777...."
        "...555aa77777727.."
        "...555aaa66666666."
        "...3353aa666666666"
        "...33333a6666666.."
        "....33333366666..."
        "....333333366....."
        "....33333333......"
        "....333333........"
        ".....3333........."
        ".....33..........."
        ".....3............"
        ".................."
    ),
    10: (
        "5................."
        ".57..............."
        ".557.............."
        ".55777............"
        "..557777.........."
        "..5577777........."
        "..555777777......."
        "..55577777788....."
        "..555aa777..88...."
        "...555aa77...222.."
        "...555aa.68668.222"
        "...5333aa666666999"
        "...33333a66666699."
        "...3333333666666.."
        "....3333333666...."
        "....333333336....."
        "....3333333......."
        "....333333........"
        ".....333.........."
        ".....33..........."
        ".....3............"
    ),
    20: (
        ".................."
        ".................."
        "...77............."
        ".55777............"
        "..557777.........."
        "..557777.........."
        "..557777788......."
        "..55577778888....."
        "..555577.88888...."
        "...555.78888888..."
        "...555aa.8888882.."
        "...5533.a888999999"
        "...33333366999999."
        "...3333333669999.."
        "....33333334.99..."
        "....333333344....."
        "....33333333......"
        "....333333........"
        "....33333........."
        ".....33..........."
        ".....3............"
    ),
    30: (
        ".................."
        ".................."
        ".................."
        ".................."
        "..5.77............"
        "..55777..........."
        "..55777..........."
        "..55577.8........."
        "..55557788........"
        "...55557888......."
        "...555508888......"
        "...3535348888....."
        "...33333449999...."
        "...333333449999..."
        "....33333344449..."
        "....333333444....."
        "....33333334......"
        "....333333........"
        "....33333........."
        ".....333.........."
        ".....3............"
    ),
    40: (
        ".................."
        ".................."
        ".................."
        ".................."
        ".................."
        "....77............"
        "..55577..........."
        "..55577..........."
        "..555578.........."
        "...5550.8........."
        "...5555088........"
        "...5333008........"
        "...35333449......."
        "...333333444......"
        "....333334444....."
        "....333333444....."
        "....33333344......"
        "....3333333......."
        "....33333........."
        ".....333.........."
        ".....3............"
    ),
}


def _decode_category_grids() -> ArrayFloat:
    grids = np.full((len(_LUM_TABLE), _GRID_ROWS, _GRID_COLS), -1, dtype=np.int64)
    for k, lum in enumerate(_LUM_TABLE):
        cells = _CATEGORY_GRID_SOURCE[int(lum)]
        if len(cells) != _GRID_ROWS * _GRID_COLS:
            raise ValueError(f"Category grid for luminance {lum} has {len(cells)} cells")
        for i, ch in enumerate(cells):
            if ch != ".":
                grids[k, i // _GRID_COLS, i % _GRID_COLS] = 10 if ch == "a" else int(ch)
    grids.setflags(write=False)
    return grids

_CATEGORY_GRIDS: Final[np.ndarray] = _decode_category_grids()


# =============================================================================
# 1. KERNELS (Numba Optimized)
# =============================================================================

@njit(float64(float64, float64, float64, float64, float64, float64, float64, float64, float64), cache=True, fastmath=True)
def _delta_e_2000_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float, k_L: float, k_C: float, k_H: float) -> float:
    """Single-pair CIEDE2000 with parametric factors (Sharma et al. 2005)."""
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar = (C1 + C2) * 0.5
    C_bar_7 = C_bar**7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + C25_7)))
    scale = 1.0 + G
    a1_p = scale * a1
    a2_p = scale * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)

    # Hue is 0 for a zero vector
    h1_p = 0.0
    if b1 != 0.0 or a1_p != 0.0:
        h1_p = np.arctan2(b1, a1_p) * RAD2DEG
        if h1_p < 0.0:
            h1_p += 360.0
    h2_p = 0.0
    if b2 != 0.0 or a2_p != 0.0:
        h2_p = np.arctan2(b2, a2_p) * RAD2DEG
        if h2_p < 0.0:
            h2_p += 360.0

    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    C_prod = C1_p * C2_p
    diff = h2_p - h1_p

    dh_p = 0.0
    if C_prod < 1e-10:
        dh_p = 0.0
    elif abs(diff) <= 180.0:
        dh_p = diff
    elif diff > 180.0:
        dh_p = diff - 360.0
    else:
        dh_p = diff + 360.0
    dH_p = 2.0 * np.sqrt(C_prod) * np.sin((dh_p * DEG2RAD) * 0.5)

    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_sum = h1_p + h2_p
    if C_prod < 1e-10:
        h_bar_p = h_sum
    elif abs(diff) <= 180.0:
        h_bar_p = h_sum * 0.5
    elif h_sum < 360.0:
        h_bar_p = (h_sum + 360.0) * 0.5
    else:
        h_bar_p = (h_sum - 360.0) * 0.5

    T = 1.0 - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD) + \
        0.24 * np.cos((2.0 * h_bar_p) * DEG2RAD) + \
        0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD) - \
        0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD)
    d_theta = 30.0 * np.exp(-((h_bar_p - 275.0) / 25.0)**2)
    C_bar_p_7 = C_bar_p**7
    RC = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))
    RT = -np.sin((2.0 * d_theta) * DEG2RAD) * RC
    L_term = (L_bar_p - 50.0)**2
    SL = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T
    return np.sqrt((dL_p / (k_L * SL))**2 + (dC_p / (k_C * SC))**2 + (dH_p / (k_H * SH))**2 + RT * (dC_p / (k_C * SC)) * (dH_p / (k_H * SH)))

@njit(cache=True, fastmath=True)
def _batch_delta_e_2000(lab1: ArrayFloat, lab2: ArrayFloat, k_L: float, k_C: float, k_H: float) -> ArrayFloat:
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in range(n):
        res[i] = _delta_e_2000_single(lab1[i, 0], lab1[i, 1], lab1[i, 2], lab2[i, 0], lab2[i, 1], lab2[i, 2], k_L, k_C, k_H)
    return res

@njit(cache=True, fastmath=True)
def _batch_distance(v1: ArrayFloat, v2: ArrayFloat) -> ArrayFloat:
    """Euclidean distance per row."""
    n = len(v1)
    res = np.empty(n, dtype=np.float64)
    for i in range(n):
        d0 = v1[i, 0] - v2[i, 0]
        d1 = v1[i, 1] - v2[i, 1]
        d2 = v1[i, 2] - v2[i, 2]
        res[i] = np.sqrt(d0*d0 + d1*d1 + d2*d2)
    return res

@njit(cache=True)
def _nearest_category(grid: np.ndarray, sx: float, sy: float) -> int:
    """
    Category code of the occupied cell nearest to (sx, sy) in thousandths.
    Cells are scanned row by row; the first of equally distant cells wins.
    """
    best = np.inf
    code = 1
    for r in range(grid.shape[0]):
        y = r * 25.0 + 75.0
        for c in range(grid.shape[1]):
            v = grid[r, c]
            if v < 0:
                continue
            x = c * 25.0 + 150.0
            d = np.sqrt((sx - x) * (sx - x) + (sy - y) * (sy - y))
            if d < best:
                best = d
                code = v
    return code


# =============================================================================
# 2. COLOUR DIFFERENCE
# =============================================================================

class DifferenceMethod(Enum):
    """Colour difference formulas accepted by ``difference_between``."""

    CIE76 = "cie76"
    CIEDE2000 = "ciede2000"


def _prepare_inputs(v1: ArrayFloat, v2: ArrayFloat) -> Tuple[ArrayFloat, ArrayFloat]:
    """
    Broadcasting helper.

    Brings both inputs to contiguous (N, 3) arrays; a single colour is
    broadcast against a batch.
    """
    l1 = np.ascontiguousarray(np.atleast_2d(np.asarray(v1, dtype=np.float64)))
    l2 = np.ascontiguousarray(np.atleast_2d(np.asarray(v2, dtype=np.float64)))

    if l1.ndim != 2 or l2.ndim != 2 or l1.shape[-1] != 3 or l2.shape[-1] != 3:
        raise ShapeError(f"Inputs must have shape (N, 3), got {l1.shape} and {l2.shape}")

    if l1.shape[0] != l2.shape[0]:
        if l1.shape[0] == 1:
            l1 = np.ascontiguousarray(np.broadcast_to(l1, l2.shape))
        elif l2.shape[0] == 1:
            l2 = np.ascontiguousarray(np.broadcast_to(l2, l1.shape))
        else:
            raise ShapeError(f"Shapes {l1.shape} and {l2.shape} are not broadcastable.")
    return l1, l2

def _unwrap(res: ArrayFloat, v1: ArrayFloat, v2: ArrayFloat) -> Union[float, ArrayFloat]:
    if np.ndim(v1) == 1 and np.ndim(v2) == 1:
        return float(res[0])
    return res

def distance(v1: ArrayFloat, v2: ArrayFloat) -> Union[float, ArrayFloat]:
    """
    Euclidean distance between two triples (or batches of triples).

    Args:
        v1: First vector(s), shape (3,) or (N, 3).
        v2: Second vector(s), shape (3,) or (N, 3).

    Returns:
        A float for two single triples, otherwise shape (N,).
    """
    l1, l2 = _prepare_inputs(v1, v2)
    return _unwrap(_batch_distance(l1, l2), v1, v2)

def cie76(lab1: ArrayFloat, lab2: ArrayFloat) -> Union[float, ArrayFloat]:
    """CIE 1976 colour difference (Euclidean distance in CIELAB)."""
    return distance(lab1, lab2)

def ciede2000(lab1: ArrayFloat, lab2: ArrayFloat,
              k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0) -> Union[float, ArrayFloat]:
    """
    Calculates CIEDE2000 Color Difference.

    Args:
        lab1: Reference colours, shape (N, 3) or (3,).
        lab2: Sample colours, shape (N, 3) or (3,).
        k_L: Parametric lightness weight (default 1.0).
        k_C: Parametric chroma weight (default 1.0).
        k_H: Parametric hue weight (default 1.0).

    Returns:
        DeltaE 2000 values. Supports broadcasting (e.g., 1 vs N).
    """
    l1, l2 = _prepare_inputs(lab1, lab2)
    return _unwrap(_batch_delta_e_2000(l1, l2, k_L, k_C, k_H), lab1, lab2)

def difference_between(lab1: ArrayFloat, lab2: ArrayFloat,
                       method: Union[DifferenceMethod, str] = DifferenceMethod.CIE76) -> Union[float, ArrayFloat]:
    """
    Colour difference between two CIELAB colours.

    Args:
        lab1: CIELAB colour(s).
        lab2: CIELAB colour(s).
        method: ``DifferenceMethod`` or its name (``"cie76"``, ``"ciede2000"``).

    Raises:
        ValueError: For an unknown method name.
    """
    method = DifferenceMethod(method.lower() if isinstance(method, str) else method)
    if method is DifferenceMethod.CIE76:
        return cie76(lab1, lab2)
    return ciede2000(lab1, lab2)

def nbs_rating(delta_e: float) -> str:
    """
    Sensory expression of a colour difference in NBS units.

    Args:
        delta_e: Colour difference; converted with ``DE_TO_NBS``.

    Returns:
        One of ``"trace"``, ``"slight"``, ``"noticeable"``, ``"appreciable"``,
        ``"much"`` or ``"very much"``.
    """
    nbs = delta_e * DE_TO_NBS
    for lower, name in _NBS_LEVELS:
        if lower <= nbs:
            return name
    return "trace"


# =============================================================================
# 3. CONSPICUITY & CATEGORY
# =============================================================================

@handle_shapes
def conspicuity_of(lab: ArrayFloat) -> ArrayFloat:
    """
    Conspicuity degree of a CIELAB colour in [0, 180].

    Depends on hue only; the most conspicuous hue lies 35 degrees past
    the opposite of the a* axis.
    """
    a, b = lab[:, 1], lab[:, 2]
    rad = np.where(b > 0, np.arctan2(b, a), np.arctan2(-b, -a) + np.pi)
    hue = rad * RAD2DEG
    offset = 35.0
    return np.where(hue < offset, np.abs(180.0 - (360.0 + hue - offset)), np.abs(180.0 - (hue - offset)))

@handle_shapes
def category_of(yxy: ArrayFloat) -> list[str]:
    """
    Basic categorical colour of a Yxy colour.

    Args:
        yxy: (Y, x, y) colour(s), shape (3,) or (N, 3).

    Returns:
        A name from ``CATEGORICAL_COLORS`` (a list of names for a batch).
    """
    lum = np.power(yxy[:, 0] * _Y_TO_LUM, 0.9)
    grid_index = np.argmin(np.abs(lum[:, None] - _LUM_TABLE[None, :]), axis=1)
    names = []
    for k, (_, sx, sy) in zip(grid_index, yxy):
        code = _nearest_category(_CATEGORY_GRIDS[k], sx * 1000.0, sy * 1000.0)
        names.append(CATEGORICAL_COLORS[code])
    return names
