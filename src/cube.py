"""
cube.py — 3x3x3 cube aggregate
===============================

`RubiksCube` owns one `FaceStore` and one move log and is the only object the
UI layers talk to. There is no module-level instance: every caller builds and
holds its own cube.

### Operations

* **rotate_face**: one quarter-turn (see `rotation.py`), not logged.
* **perform_move / perform_moves**: parse notation ("R", "U'") and apply it,
  appending each token to `move_log`. A sequence is not atomic: if a token is
  rejected, the moves before it stay applied.
* **scramble**: random faces and directions, no cancellation avoidance.
* **solve_step_by_step**: clears the log and replays the fixed sequences in
  `config.SOLVE_SEQUENCES`. It never inspects the state and is not a solver.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from app_types import Move
from config import DEFAULT_SCRAMBLE_MOVES, FACES, SOLVE_SEQUENCES
from face_store import FaceStore
from rotation import rotate_face

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class RubiksCube:
    def __init__(self):
        self.faces = FaceStore()
        self.move_log: List[str] = []

    # ----- Face store access -----

    def reset(self) -> None:
        """Back to the solved state; the move log is cleared as well."""
        self.faces.reset()
        self.move_log = []

    def get_face(self, face: str) -> List[str]:
        return self.faces.get_face(face)

    def set_face(self, face: str, cells: Iterable[str]) -> None:
        self.faces.set_face(face, cells)

    def serialize(self) -> List[str]:
        return self.faces.serialize()

    def to_color_string(self) -> str:
        return ''.join(self.faces.serialize())

    def is_solved(self) -> bool:
        for face in FACES:
            cells = self.faces.get_face(face)
            if cells.count(cells[0]) != len(cells):
                return False
        return True

    # ----- Moves -----

    def rotate_face(self, face: str, clockwise: bool = True) -> None:
        rotate_face(self.faces, face, clockwise)

    def perform_move(self, token: str) -> None:
        move = Move.parse(token)
        self.rotate_face(move.face, move.clockwise)
        self.move_log.append(token)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Move %s -> %s", token, self.to_color_string())

    def perform_moves(self, sequence: str) -> List[str]:
        """Apply a whitespace separated sequence; returns the tokens applied."""
        tokens = sequence.split()
        for tok in tokens:
            self.perform_move(tok)
        return tokens

    def scramble(self, moves: int = DEFAULT_SCRAMBLE_MOVES, rng: Optional[random.Random] = None) -> List[str]:
        """
        Apply `moves` random quarter-turns. Faces and directions are drawn
        independently and uniformly; repeats and cancellations are allowed.
        The turns are not added to the move log; they are returned instead.
        """
        if moves < 0:
            raise ValueError(f"Scramble length must be >= 0, got {moves}")
        rng = rng or random
        applied: List[str] = []
        for _ in range(moves):
            move = Move(rng.choice(FACES), rng.random() > 0.5)
            self.rotate_face(move.face, move.clockwise)
            applied.append(str(move))
        logger.info("Scramble: %s", " ".join(applied))
        return applied

    def solve_step_by_step(self) -> List[str]:
        self.move_log = []
        for seq in SOLVE_SEQUENCES:
            self.perform_moves(seq)
        logger.info("Replayed %d moves, solved=%s", len(self.move_log), self.is_solved())
        return list(self.move_log)

    def __repr__(self) -> str:
        return f"RubiksCube({self.to_color_string()!r})"
