from collections import Counter
from typing import Dict, Iterable, List

from app_types import InvalidFace, InvalidLength
from config import FACE_ORDER, FACE_SIZE, FACE_TO_COLOR


class FaceStore:
    """Six 3x3 color grids, one list of 9 tokens per face (row-major)."""

    def __init__(self):
        self._faces: Dict[str, List[str]] = {}
        self.reset()

    def reset(self) -> None:
        self._faces = {face: [color] * FACE_SIZE for face, color in FACE_TO_COLOR.items()}

    def _check_face(self, face: str) -> None:
        try:
            known = face in self._faces
        except TypeError:
            known = False
        if not known:
            raise InvalidFace(face)

    def get_face(self, face: str) -> List[str]:
        self._check_face(face)
        return list(self._faces[face])

    def set_face(self, face: str, cells: Iterable[str]) -> None:
        self._check_face(face)
        cells = list(cells)
        if len(cells) != FACE_SIZE:
            raise InvalidLength(len(cells), FACE_SIZE)
        self._faces[face] = cells

    def serialize(self) -> List[str]:
        """Return the 54 cells in U,R,F,D,L,B order."""
        out: List[str] = []
        for face in FACE_ORDER:
            out.extend(self._faces[face])
        return out

    def color_counts(self) -> Counter:
        return Counter(self.serialize())

    def __eq__(self, other) -> bool:
        if not isinstance(other, FaceStore):
            return NotImplemented
        return self._faces == other._faces

    def __repr__(self) -> str:
        return f"FaceStore({''.join(self.serialize())!r})"
