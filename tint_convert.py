# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Space Dispatcher
=======================
``convert(value, from_space, to_space)`` routes a colour through the
shortest chain of pairwise converters between any two supported spaces.

The converters form a small graph around the XYZ and linear RGB hubs::

    rgb - lrgb - yiq
           |
    yxy - xyz - lab
           |  \\
         lms   munsell - pccs

Each step reports whether it clamped or left its tabulated range; the
``saturated`` flag of the result is the OR over the chain.
"""

import functools
from collections import deque
from enum import Enum
from typing import Any, Callable, Final, Union

import numpy as np

from tint_colorspace import LMS, LRGB, RGB, YIQ, ArrayBool, ArrayFloat, Converted, Lab, Yxy, handle_shapes
from tint_config import UnsupportedConversion, logger
from tint_munsell import Munsell
from tint_pccs import PCCS

__all__ = [
    "Space",
    "convert",
    "conversion_path",
]


class Space(Enum):
    """Supported colour representations."""

    RGB = "rgb"
    LRGB = "lrgb"
    XYZ = "xyz"
    YXY = "yxy"
    LAB = "lab"
    LMS = "lms"
    MUNSELL = "munsell"
    PCCS = "pccs"
    YIQ = "yiq"

    @classmethod
    def parse(cls, name: Union["Space", str]) -> "Space":
        """
        Case-insensitive lookup.

        Raises:
            UnsupportedConversion: For an unknown space name.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            raise UnsupportedConversion(f"Unknown colour space: {name!r}") from e


Step = Callable[[ArrayFloat], tuple[ArrayFloat, ArrayBool]]

def _lossless(func: Callable[[ArrayFloat], ArrayFloat]) -> Step:
    def step(v: ArrayFloat) -> tuple[ArrayFloat, ArrayBool]:
        return func(v), np.zeros(v.shape[0], dtype=bool)
    return step

def _lossy(func: Callable[[ArrayFloat], Converted]) -> Step:
    def step(v: ArrayFloat) -> tuple[ArrayFloat, ArrayBool]:
        res = func(v)
        return res.value, np.asarray(res.saturated, dtype=bool)
    return step


# Directed edges; insertion order fixes which of two equally short paths wins.
_EDGES: Final[dict[tuple[Space, Space], Step]] = {
    (Space.RGB, Space.LRGB): _lossless(RGB.to_lrgb),
    (Space.LRGB, Space.RGB): _lossy(RGB.from_lrgb),
    (Space.LRGB, Space.XYZ): _lossless(LRGB.to_xyz),
    (Space.XYZ, Space.LRGB): _lossless(LRGB.from_xyz),
    (Space.LRGB, Space.YIQ): _lossless(YIQ.from_lrgb),
    (Space.YIQ, Space.LRGB): _lossless(YIQ.to_lrgb),
    (Space.XYZ, Space.YXY): _lossless(Yxy.from_xyz),
    (Space.YXY, Space.XYZ): _lossy(Yxy.to_xyz),
    (Space.XYZ, Space.LAB): _lossless(Lab.from_xyz),
    (Space.LAB, Space.XYZ): _lossless(Lab.to_xyz),
    (Space.XYZ, Space.LMS): _lossless(LMS.from_xyz),
    (Space.LMS, Space.XYZ): _lossless(LMS.to_xyz),
    (Space.XYZ, Space.MUNSELL): _lossy(Munsell.from_xyz),
    (Space.MUNSELL, Space.XYZ): _lossy(Munsell.to_xyz),
    (Space.MUNSELL, Space.PCCS): _lossless(PCCS.from_munsell),
    (Space.PCCS, Space.MUNSELL): _lossless(PCCS.to_munsell),
}

_NEIGHBOURS: Final[dict[Space, tuple[Space, ...]]] = {
    space: tuple(dst for (src, dst) in _EDGES if src is space) for space in Space
}


@functools.lru_cache(maxsize=None)
def _shortest_path(src: Space, dst: Space) -> tuple[Space, ...]:
    """Breadth-first search over the converter graph."""
    previous: dict[Space, Space] = {}
    queue = deque([src])
    seen = {src}
    while queue:
        node = queue.popleft()
        if node is dst:
            break
        for nxt in _NEIGHBOURS[node]:
            if nxt not in seen:
                seen.add(nxt)
                previous[nxt] = node
                queue.append(nxt)
    if dst not in seen:
        raise UnsupportedConversion(f"No conversion path from {src.value} to {dst.value}")

    path = [dst]
    while path[-1] is not src:
        path.append(previous[path[-1]])
    path.reverse()
    logger.debug("Conversion path %s", " -> ".join(s.value for s in path))
    return tuple(path)

def conversion_path(from_space: Union[Space, str], to_space: Union[Space, str]) -> tuple[Space, ...]:
    """
    The chain of spaces ``convert`` passes through, both ends included.

    Raises:
        UnsupportedConversion: For an unknown space name.
    """
    return _shortest_path(Space.parse(from_space), Space.parse(to_space))


@handle_shapes
def _run(values: ArrayFloat, path: tuple[Space, ...]) -> Converted:
    saturated = np.zeros(values.shape[0], dtype=bool)
    current = values
    for src, dst in zip(path, path[1:]):
        current, step_saturated = _EDGES[(src, dst)](current)
        saturated |= step_saturated
    return Converted(np.array(current, dtype=np.float64), saturated)

def convert(value: Any, from_space: Union[Space, str], to_space: Union[Space, str] = Space.RGB) -> Converted:
    """
    Converts a colour between any two supported spaces.

    Args:
        value: Colour(s) in ``from_space``, shape (3,) or (N, 3).
        from_space: Source space (``Space`` or case-insensitive name).
        to_space: Destination space, sRGB by default.

    Returns:
        ``Converted`` with the value in ``to_space``.  Converting a space to
        itself returns a copy of the input, never saturated.

    Raises:
        UnsupportedConversion: For an unknown space name.
        ShapeError: If the value is not a triple or a batch of triples.
    """
    return _run(value, conversion_path(from_space, to_space))
