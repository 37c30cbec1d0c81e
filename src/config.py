"""config.py — project configuration
------------------------------------

This file centralizes the fixed constants of the cube simulator: face and
color bindings, the serialization order shared with the renderer, the fixed
replay sequences and the defaults used by the preview server and the SVG net.

Notes / warnings
- FACE_ORDER is a public contract: the renderer maps positions 0..53 of the
  serialized state to screen positions using this order.
- Runtime overrides (port, window flags) come from the CLI in `main.py`.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from pathlib import Path
from typing import Dict, List, Tuple

# ---------------- Rubik cube configurations ----------------

# Serialization order (U,R,F,D,L,B). Each face contributes 9 cells, row-major.
FACE_ORDER: List[str] = ['U', 'R', 'F', 'D', 'L', 'B']

# Pool used when picking random faces for a scramble.
FACES: List[str] = ['U', 'D', 'F', 'B', 'L', 'R']

# Each face is bound to exactly one color token at reset.
FACE_TO_COLOR: Dict[str, str] = {'U': 'w', 'D': 'y', 'F': 'g', 'B': 'b', 'L': 'o', 'R': 'r'}

# Display color per token (consumed by the SVG renderer).
COLOR_NAMES: Dict[str, str] = {
    'w': 'white',
    'y': 'yellow',
    'g': 'green',
    'b': 'blue',
    'o': 'orange',
    'r': 'red',
}

# Fill for cells holding a token outside COLOR_NAMES (set_face accepts any token).
FALLBACK_FILL: str = 'gray'

FACE_SIZE: int = 9

# 54-character flattened solved state in FACE_ORDER.
COLOR_INIT_STATE: str = ''.join(FACE_TO_COLOR[f] * FACE_SIZE for f in FACE_ORDER)

# ---------------- Moves ----------------

# A move token is a face letter optionally followed by this suffix.
INVERSE_SUFFIX: str = "'"

DEFAULT_SCRAMBLE_MOVES: int = 10

# Fixed replay performed by "solve". It does not look at the cube state.
SOLVE_SEQUENCES: Tuple[str, ...] = (
    "F R U R' U' F'",
    "U R U' R' U' F' U F",
    "U R U' R' U' F' U F",
    "F R U R' U' F'",
)

# ---------------- SVG net ----------------

STICKER_SIZE: int = 20
SVG_WIDTH: int = 300
SVG_HEIGHT: int = 200

# Top-left corner of each face in sticker units (unfolded cross:
# L F R B on the middle band, U above F, D below F).
FACE_GRID_POSITIONS: Dict[str, Tuple[int, int]] = {
    'U': (3, 0),
    'R': (6, 3),
    'F': (3, 3),
    'D': (3, 6),
    'L': (0, 3),
    'B': (9, 3),
}

# ---------------- Preview server ----------------

PREVIEW_HOST = "127.0.0.1"
PREVIEW_PORT = 5001

# ---------------- Filesystem paths ----------------

ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = ROOT / "templates"
DEFAULT_HTML = TEMPLATES_DIR / "index.html"
