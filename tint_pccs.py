# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

PCCS Engine
===========
Practical Color Coordinate System (hue, lightness, saturation) derived from
Munsell HVC by analytic approximation, and PCCS tone classification.

PCCS hue runs over [0, 24) (24 is also accepted), lightness follows the
Munsell value and saturation is 0 for neutrals.

Two conversion strategies are available (``set_conversion_method``):
    - ACCURATE (default): piecewise-linear hue between 25 Munsell hue
      breakpoints and a Newton solve of the per-hue saturation cubic.
    - CONCISE: closed-form trigonometric polynomials for hue and the
      quadratic formula for saturation.

Reference:
    Kobayashi, Yosiki (2001). "Mathematical relation among PCCS tones, PCCS
    color attributes and Munsell color attributes", Journal of the Color
    Science Association of Japan 25(4), 249-261.
"""

import math
import threading
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Final, Optional, Union

import numpy as np

from tint_colorspace import ArrayFloat, handle_shapes
from tint_config import SOLVER_LIMITS, SolverLimits, logger, newton_root
from tint_munsell import MAX_HUE as MUNSELL_MAX_HUE
from tint_munsell import MONO_LIMIT_C, wrap_hue

__all__ = [
    "MAX_HUE",
    "MONO_LIMIT_S",
    "HUE_NAMES",
    "TONE_NAMES",
    "Tone",
    "PCCSMethod",
    "set_conversion_method",
    "get_conversion_method",
    "PCCS",
]

# --- Constants ---
MAX_HUE: Final[float] = 24.0
MONO_LIMIT_S: Final[float] = 0.01

HUE_NAMES: Final[tuple[str, ...]] = (
    "", "pR", "R", "yR", "rO", "O", "yO", "rY", "Y", "gY", "YG", "yG",
    "G", "bG", "GB", "GB", "gB", "B", "B", "pB", "V", "bP", "P", "rP", "RP",
)
TONE_NAMES: Final[tuple[str, ...]] = (
    "p", "p+", "ltg", "g", "dkg", "lt", "lt+", "sf", "d", "dk", "b", "s", "dp", "v", "none",
)

# Munsell hue of PCCS hues 1..24 (index 0 is a wrap-around dummy, 25 closes the circle)
_MUNSELL_H: Final[tuple[float, ...]] = (
    96,
    0, 4, 7, 10, 14, 18, 22, 25, 28, 33, 38, 43,
    49, 55, 60, 65, 70, 73, 76, 79, 83, 87, 91, 96, 100,
)

# Saturation cubic coefficients (a1, a2, a3) for even PCCS hues 0, 2, ..., 24
_COEFFICIENTS: Final[ArrayFloat] = np.array([
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
_COEFFICIENTS.setflags(write=False)


class Tone(IntEnum):
    """PCCS tones; ``NONE`` marks saturations too low to carry a tone."""

    P = 0
    P_PLUS = 1
    LTG = 2
    G = 3
    DKG = 4
    LT = 5
    LT_PLUS = 6
    SF = 7
    D = 8
    DK = 9
    B = 10
    S = 11
    DP = 12
    V = 13
    NONE = 14

    @property
    def label(self) -> str:
        """Conventional abbreviation, e.g. ``"lt+"``."""
        return TONE_NAMES[self.value]


# =============================================================================
# 1. ACCURATE METHOD
# =============================================================================

def _hue_wave(h: float) -> float:
    """Lightness dependence g(h) of the saturation/chroma relation."""
    return 0.81 - 0.24 * math.sin((h - 2.6) / 12.0 * math.pi)

def _interpolated_coefficients(h: float) -> tuple[float, float, float]:
    """Linearly interpolated (a1, a2, a3) between the neighbouring even hues."""
    if MAX_HUE < h:
        h = wrap_hue(h, MAX_HUE)
    hf = int(math.floor(h))
    if hf % 2 != 0:
        hf -= 1
    hc = hf + 2
    if MAX_HUE < hc:
        hc -= int(MAX_HUE)

    af = _COEFFICIENTS[hf // 2]
    ac = _COEFFICIENTS[hc // 2]
    r = (h - hf) / (hc - hf)
    a1, a2, a3 = (float(v) for v in r * (ac - af) + af)
    return a1, a2, a3

def _calc_pccs_h(munsell_h: float) -> float:
    h1 = h2 = -1
    for i in range(1, len(_MUNSELL_H)):
        if _MUNSELL_H[i] <= munsell_h:
            h1 = i
        if munsell_h < _MUNSELL_H[i]:
            h2 = i
            break
    if h1 == -1 or h2 == -1:
        raise ValueError(f"Munsell hue out of range: {munsell_h}")
    return h1 + (h2 - h1) * (munsell_h - _MUNSELL_H[h1]) / (_MUNSELL_H[h2] - _MUNSELL_H[h1])

def _calc_pccs_s(v: float, c: float, h: float, limits: SolverLimits) -> float:
    a1, a2, a3 = _interpolated_coefficients(h)
    a0 = -c / (1.0 - math.exp(-_hue_wave(h) * v))
    x0 = _simply_calc_pccs_s(v, c, h, limits)
    return newton_root(
        lambda s: ((a3 * s + a2) * s + a1) * s + a0,
        x0,
        lambda s: (3.0 * a3 * s + 2.0 * a2) * s + a1,
        tol=limits.saturation_tolerance,
        limits=limits,
        label="PCCS saturation solve",
    )

def _calc_munsell_h(h: float) -> float:
    h1 = int(math.floor(h))
    h2 = h1 + 1
    big_h1 = _MUNSELL_H[h1]
    big_h2 = _MUNSELL_H[h2]
    if big_h1 > big_h2:
        big_h2 = 100
    return big_h1 + (big_h2 - big_h1) * (h - h1) / (h2 - h1)

def _calc_munsell_c(h: float, l: float, s: float) -> float:
    a1, a2, a3 = _interpolated_coefficients(h)
    return ((a3 * s + a2) * s + a1) * s * (1.0 - math.exp(-_hue_wave(h) * l))


# =============================================================================
# 2. CONCISE METHOD
# =============================================================================

def _simply_calc_pccs_h(munsell_h: float) -> float:
    y = munsell_h * math.pi / 50.0
    return (24.0 * y / (2.0 * math.pi) + 1.24
            + 0.02 * math.cos(y) - 0.1 * math.cos(2.0 * y) - 0.11 * math.cos(3.0 * y)
            + 0.68 * math.sin(y) - 0.3 * math.sin(2.0 * y) + 0.013 * math.sin(3.0 * y))

def _simply_calc_pccs_s(v: float, c: float, h: float, limits: SolverLimits = SOLVER_LIMITS) -> float:
    ct = 12.0 + 1.7 * math.sin((h + 2.2) * math.pi / 12.0)
    gt = _hue_wave(h)
    e2 = 0.004
    e1 = 0.077
    e0 = -c / (ct * (1.0 - math.exp(-gt * v)))
    return (-e1 + math.sqrt(e1 * e1 - 4.0 * e2 * e0)) / (2.0 * e2)

def _simply_calc_munsell_h(h: float) -> float:
    x = (h - 1.0) * math.pi / 12.0
    return (100.0 * x / (2.0 * math.pi) - 1.0
            + 0.12 * math.cos(x) + 0.34 * math.cos(2.0 * x) + 0.4 * math.cos(3.0 * x)
            - 2.7 * math.sin(x) + 1.5 * math.sin(2.0 * x) - 0.4 * math.sin(3.0 * x))

def _simply_calc_munsell_c(h: float, l: float, s: float) -> float:
    ct = 12.0 + 1.7 * math.sin((h + 2.2) * math.pi / 12.0)
    gt = _hue_wave(h)
    return ct * (0.077 * s + 0.004 * s * s) * (1.0 - math.exp(-gt * l))


# =============================================================================
# 3. METHOD SELECTION
# =============================================================================

class PCCSMethod(Enum):
    """Munsell <-> PCCS conversion strategy."""

    CONCISE = "concise"
    ACCURATE = "accurate"


@dataclass(slots=True, frozen=True)
class _Strategy:
    pccs_h: Callable[[float], float]
    pccs_s: Callable[[float, float, float, SolverLimits], float]
    munsell_h: Callable[[float], float]
    munsell_c: Callable[[float, float, float], float]


_STRATEGIES: Final[dict[PCCSMethod, _Strategy]] = {
    PCCSMethod.CONCISE: _Strategy(
        _simply_calc_pccs_h, _simply_calc_pccs_s, _simply_calc_munsell_h, _simply_calc_munsell_c
    ),
    PCCSMethod.ACCURATE: _Strategy(
        _calc_pccs_h, _calc_pccs_s, _calc_munsell_h, _calc_munsell_c
    ),
}

_METHOD: PCCSMethod = PCCSMethod.ACCURATE
_METHOD_LOCK = threading.RLock()

def set_conversion_method(method: Union[PCCSMethod, str]) -> None:
    """
    Select the process-wide Munsell <-> PCCS strategy.

    Args:
        method: ``PCCSMethod`` member or its value (``"concise"``, ``"accurate"``).
    """
    global _METHOD
    method = PCCSMethod(method)
    with _METHOD_LOCK:
        _METHOD = method
    logger.debug("PCCS conversion method set to %s", method.value)

def get_conversion_method() -> PCCSMethod:
    """Returns the currently selected strategy."""
    return _METHOD


# =============================================================================
# 4. HELPERS
# =============================================================================

def _round1(x: float) -> float:
    """Round half up to one decimal."""
    return math.floor(x * 10.0 + 0.5) / 10.0

def _fmt(x: float) -> str:
    return f"{_round1(x):g}"

def _hue_index(h: float) -> int:
    tn = int(math.floor(h + 0.5)) % int(MAX_HUE)
    return tn or int(MAX_HUE)

def _lightness_offset(h: ArrayFloat, s: ArrayFloat) -> ArrayFloat:
    return (0.25 - 0.34 * np.sqrt(1.0 - np.sin((h - 2.0) * np.pi / 12.0))) * s

def _unpack(hls: ArrayFloat) -> tuple[float, float, float]:
    h, l, s = (float(v) for v in np.asarray(hls, dtype=np.float64).ravel()[:3])
    return h, l, s


# =============================================================================
# 5. PUBLIC API
# =============================================================================

class PCCS:
    """PCCS (h, l, s) conversions and tone classification."""

    @staticmethod
    @handle_shapes
    def from_munsell(
        hvc: ArrayFloat,
        method: Optional[PCCSMethod] = None,
        limits: SolverLimits = SOLVER_LIMITS,
    ) -> ArrayFloat:
        """
        Converts Munsell (H, V, C) to PCCS (h, l, s).

        Args:
            hvc: Munsell colour(s), shape (3,) or (N, 3).
            method: Strategy override; the process-wide selection by default.
            limits: Newton iteration limits for the accurate saturation solve.
        """
        strategy = _STRATEGIES[method or _METHOD]
        out = np.empty_like(hvc)
        for i, (big_h, big_v, big_c) in enumerate(hvc):
            big_h, big_v, big_c = float(big_h), float(big_v), float(big_c)
            if big_h < 0.0 or MUNSELL_MAX_HUE <= big_h:
                big_h = wrap_hue(big_h, MUNSELL_MAX_HUE)
            h = strategy.pccs_h(big_h)
            s = 0.0
            if MONO_LIMIT_C <= big_c and big_v > 0.0:
                s = strategy.pccs_s(big_v, big_c, h, limits)
            if MAX_HUE <= h:
                h -= MAX_HUE
            out[i] = (h, big_v, s)
        return out

    @staticmethod
    @handle_shapes
    def to_munsell(hls: ArrayFloat, method: Optional[PCCSMethod] = None) -> ArrayFloat:
        """Converts PCCS (h, l, s) to Munsell (H, V, C)."""
        strategy = _STRATEGIES[method or _METHOD]
        out = np.empty_like(hls)
        for i, (h, l, s) in enumerate(hls):
            h, l, s = float(h), float(l), float(s)
            if h < 0.0 or MAX_HUE < h:
                h = wrap_hue(h, MAX_HUE)
            big_h = strategy.munsell_h(h)
            big_c = 0.0
            if MONO_LIMIT_S <= s:
                big_c = strategy.munsell_c(h, l, s)
            if big_h < 0.0 or MUNSELL_MAX_HUE <= big_h:
                big_h = wrap_hue(big_h, MUNSELL_MAX_HUE)
            out[i] = (big_h, l, big_c)
        return out

    @staticmethod
    @handle_shapes
    def relative_lightness(hls: ArrayFloat) -> ArrayFloat:
        """Lightness in the tone coordinate system; shape (N,) or a scalar."""
        return hls[:, 1] - _lightness_offset(hls[:, 0], hls[:, 2])

    @staticmethod
    @handle_shapes
    def absolute_lightness(hls_tone: ArrayFloat) -> ArrayFloat:
        """Inverse of ``relative_lightness``; shape (N,) or a scalar."""
        return hls_tone[:, 1] + _lightness_offset(hls_tone[:, 0], hls_tone[:, 2])

    @staticmethod
    @handle_shapes
    def to_tone_coordinate(hls: ArrayFloat) -> ArrayFloat:
        """(h, l, s) -> (h, relative lightness, s)."""
        out = hls.copy()
        out[:, 1] = hls[:, 1] - _lightness_offset(hls[:, 0], hls[:, 2])
        return out

    @staticmethod
    @handle_shapes
    def to_normal_coordinate(hls_tone: ArrayFloat) -> ArrayFloat:
        """(h, relative lightness, s) -> (h, l, s)."""
        out = hls_tone.copy()
        out[:, 1] = hls_tone[:, 1] + _lightness_offset(hls_tone[:, 0], hls_tone[:, 2])
        return out

    @staticmethod
    def tone(hls: ArrayFloat) -> Tone:
        """Classifies a single PCCS colour into one of the 14 tones (or NONE)."""
        s = _unpack(hls)[2]
        t = float(PCCS.relative_lightness(hls))
        tu = s * -0.3 + 8.5
        td = s * 0.3 + 2.5

        if s < 1.0:
            return Tone.NONE
        if s < 4.0:
            if t < td:
                return Tone.DKG
            if t < 5.5:
                return Tone.G
            if t < tu:
                return Tone.LTG
            return Tone.P if s < 2.5 else Tone.P_PLUS
        if s < 7.0:
            if t < td:
                return Tone.DK
            if t < 5.5:
                return Tone.D
            if t < tu:
                return Tone.SF
            return Tone.LT if s < 5.5 else Tone.LT_PLUS
        if s < 8.5:
            if t < td:
                return Tone.DP
            if t < tu:
                return Tone.S
            return Tone.B
        return Tone.V

    @staticmethod
    def to_string(hls: ArrayFloat) -> str:
        """
        Formats PCCS notation, e.g. ``"v2 2:R-4.5-9s"`` or ``"Gy-5 N-5"``.
        """
        h, l, s = _unpack(hls)
        lstr = _fmt(l)
        if s < MONO_LIMIT_S:
            if 9.5 <= l:
                return f"W N-{lstr}"
            if l <= 1.5:
                return f"Bk N-{lstr}"
            return f"Gy-{lstr} N-{lstr}"

        hstr = _fmt(h)
        sstr = _fmt(s)
        hue = HUE_NAMES[_hue_index(h)]
        tone = PCCS.tone(hls)
        if tone is Tone.NONE:
            return f"{hstr}:{hue}-{lstr}-{sstr}s"
        return f"{tone.label}{hstr} {hstr}:{hue}-{lstr}-{sstr}s"

    @staticmethod
    def to_hue_string(hls: ArrayFloat) -> str:
        """Hue abbreviation, or ``"N"`` for neutrals."""
        h, _, s = _unpack(hls)
        if s < MONO_LIMIT_S:
            return "N"
        return HUE_NAMES[_hue_index(h)]

    @staticmethod
    def to_tone_string(hls: ArrayFloat) -> str:
        """Tone abbreviation; neutrals give ``"W"``, ``"Bk"`` or ``"Gy"``."""
        _, l, s = _unpack(hls)
        if s < MONO_LIMIT_S:
            if 9.5 <= l:
                return "W"
            if l <= 1.5:
                return "Bk"
            return "Gy"
        return PCCS.tone(hls).label
