from typing import Dict, List, Sequence, Tuple

from app_types import InvalidLength
from config import (
    COLOR_NAMES,
    FACE_GRID_POSITIONS,
    FACE_ORDER,
    FACE_SIZE,
    FALLBACK_FILL,
    STICKER_SIZE,
    SVG_HEIGHT,
    SVG_WIDTH,
)

STATE_LENGTH = FACE_SIZE * len(FACE_ORDER)


def _check_state(color_str: Sequence[str]) -> None:
    if len(color_str) != STATE_LENGTH:
        raise InvalidLength(len(color_str), STATE_LENGTH)


def sticker_positions() -> List[Tuple[int, int]]:
    """Grid (x, y) of every serialized index, in sticker units."""
    out = []
    for face in FACE_ORDER:
        x0, y0 = FACE_GRID_POSITIONS[face]
        for i in range(FACE_SIZE):
            out.append((x0 + i % 3, y0 + i // 3))
    return out


def get_cube_svg(color_str: Sequence[str], colors: Dict[str, str] = COLOR_NAMES) -> str:
    """
    Render the 54-token state as an unfolded cross of 20px squares.
    Tokens missing from `colors` are drawn with FALLBACK_FILL.
    """
    _check_state(color_str)
    parts = [f'<svg width="{SVG_WIDTH}" height="{SVG_HEIGHT}">']
    for token, (x, y) in zip(color_str, sticker_positions()):
        parts.append(
            f'<rect x="{x * STICKER_SIZE}" y="{y * STICKER_SIZE}" '
            f'width="{STICKER_SIZE}" height="{STICKER_SIZE}" '
            f'fill="{colors.get(token, FALLBACK_FILL)}" stroke="black"/>'
        )
    parts.append('</svg>')
    return ''.join(parts)


def build_color_net_text(color_str: Sequence[str]) -> str:
    _check_state(color_str)
    out = []
    for fi, face in enumerate(FACE_ORDER):
        out.append(f"\n{face}:")
        block = color_str[fi * 9:(fi + 1) * 9]
        for r in range(3):
            out.append(' '.join(block[r * 3:(r + 1) * 3]))
    return '\n'.join(out)
