"""
rotation.py — quarter-turn engine
=================================

A quarter-turn of one face is two permutations applied together:

1. the 9 cells of the turning face rotate about the center cell, and
2. the four 3-cell strips of the neighbouring faces that border the turning
   face move one slot along a 4-cycle.

Both tables below are fixed constants built at import time.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from app_types import InvalidFace
from face_store import FaceStore

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# mapping: _ROT_MAP[clockwise][i] = source index (0..8) of the cell that lands on position i
_ROT_MAP: Mapping[bool, Tuple[int, ...]] = MappingProxyType({
    True: (6, 3, 0, 7, 4, 1, 8, 5, 2),   # 90° CW
    False: (2, 5, 8, 1, 4, 7, 0, 3, 6),  # 90° CCW
})

Strip = Tuple[str, Tuple[int, int, int]]

# For each face, the 4 neighbour strips in cycle order. A clockwise turn moves
# the contents of strip i into strip i+1; counter-clockwise into strip i-1.
ADJACENT_STRIPS: Mapping[str, Tuple[Strip, ...]] = MappingProxyType({
    'U': (('B', (0, 1, 2)), ('R', (0, 1, 2)), ('F', (0, 1, 2)), ('L', (0, 1, 2))),
    'D': (('F', (6, 7, 8)), ('R', (6, 7, 8)), ('B', (6, 7, 8)), ('L', (6, 7, 8))),
    'F': (('U', (6, 7, 8)), ('R', (0, 3, 6)), ('D', (2, 1, 0)), ('L', (8, 5, 2))),
    'B': (('U', (2, 1, 0)), ('L', (0, 3, 6)), ('D', (6, 7, 8)), ('R', (8, 5, 2))),
    'L': (('U', (0, 3, 6)), ('F', (0, 3, 6)), ('D', (0, 3, 6)), ('B', (8, 5, 2))),
    'R': (('U', (8, 5, 2)), ('B', (0, 3, 6)), ('D', (8, 5, 2)), ('F', (8, 5, 2))),
})


def rotate_face_cells(cells: Sequence[str], clockwise: bool = True) -> List[str]:
    """Return a new 9-cell list rotated 90° about the center cell."""
    return [cells[i] for i in _ROT_MAP[bool(clockwise)]]


def rotate_face(store: FaceStore, face: str, clockwise: bool = True) -> None:
    """
    Apply one quarter-turn of `face` to `store`.

    All neighbour strips are read before any of them is written, and each
    face is replaced with a freshly built list, so the store never holds a
    half-applied turn once this returns.
    """
    try:
        strips = ADJACENT_STRIPS[face]
    except (KeyError, TypeError):
        raise InvalidFace(face) from None
    clockwise = bool(clockwise)

    # snapshot every face touched by this turn
    touched = {face: store.get_face(face)}
    for neighbour, _ in strips:
        touched[neighbour] = store.get_face(neighbour)
    saved = [[touched[nb][i] for i in idx] for nb, idx in strips]

    touched[face] = rotate_face_cells(touched[face], clockwise)

    shift = 3 if clockwise else 1
    for i, (neighbour, idx) in enumerate(strips):
        source = saved[(i + shift) % 4]
        for pos, value in zip(idx, source):
            touched[neighbour][pos] = value

    for name, cells in touched.items():
        store.set_face(name, cells)
    logger.debug("Rotated %s %s", face, "CW" if clockwise else "CCW")
