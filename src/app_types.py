from dataclasses import dataclass

from config import FACE_TO_COLOR, INVERSE_SUFFIX


class CubeError(ValueError):
    """Base class for invalid input given to the cube engine."""


class InvalidFace(CubeError):
    def __init__(self, face):
        super().__init__(f"Unknown face: {face!r} (expected one of {', '.join(FACE_TO_COLOR)})")
        self.face = face


class InvalidLength(CubeError):
    def __init__(self, length: int, expected: int = 9):
        super().__init__(f"Expected {expected} cells, got {length}")
        self.length = length
        self.expected = expected


class InvalidMove(CubeError):
    def __init__(self, token):
        super().__init__(f"Unknown move token: {token!r}")
        self.token = token


@dataclass(frozen=True)
class Move:
    face: str
    clockwise: bool = True

    @classmethod
    def parse(cls, token: str) -> "Move":
        """
        Parse a single notation token: a face letter, optionally followed by
        an apostrophe for a counter-clockwise turn ("R", "U'").
        """
        if not isinstance(token, str) or not token:
            raise InvalidMove(token)
        face, suffix = token[0], token[1:]
        if face not in FACE_TO_COLOR or suffix not in ("", INVERSE_SUFFIX):
            raise InvalidMove(token)
        return cls(face, clockwise=not suffix)

    def __str__(self) -> str:
        return self.face if self.clockwise else self.face + INVERSE_SUFFIX
