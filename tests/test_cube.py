import logging
import random
from collections import Counter

import pytest

from app_types import InvalidFace, InvalidLength, InvalidMove, Move
from config import COLOR_INIT_STATE, FACE_ORDER, SOLVE_SEQUENCES
from cube import RubiksCube

FACES = ['U', 'D', 'F', 'B', 'L', 'R']


def random_tokens(rng, n):
    return [rng.choice(FACES) + rng.choice(["", "'"]) for _ in range(n)]


def test_new_cube_is_solved(cube):
    assert cube.to_color_string() == COLOR_INIT_STATE
    assert cube.is_solved()
    assert cube.move_log == []


def test_color_count_invariant(cube, rng):
    for tok in random_tokens(rng, 200):
        cube.perform_move(tok)
        assert Counter(cube.serialize()) == {c: 9 for c in 'wrgyob'}


@pytest.mark.parametrize("face", FACES)
def test_move_then_inverse_is_identity(cube, rng, face):
    cube.perform_moves(" ".join(random_tokens(rng, 15)))
    before = cube.serialize()
    cube.rotate_face(face, True)
    cube.rotate_face(face, False)
    assert cube.serialize() == before
    cube.rotate_face(face, False)
    cube.rotate_face(face, True)
    assert cube.serialize() == before


@pytest.mark.parametrize("face", FACES)
@pytest.mark.parametrize("clockwise", [True, False])
def test_four_turns_is_identity(cube, rng, face, clockwise):
    cube.perform_moves(" ".join(random_tokens(rng, 15)))
    before = cube.serialize()
    for _ in range(4):
        cube.rotate_face(face, clockwise)
    assert cube.serialize() == before


def test_centers_never_move(cube, rng):
    centers = {face: cube.get_face(face)[4] for face in FACES}
    for tok in random_tokens(rng, 300):
        cube.perform_move(tok)
        for face in FACES:
            assert cube.get_face(face)[4] == centers[face]


def test_sexy_move_has_order_six(cube):
    """(R U R' U') applied 6 times returns to the start."""
    for i in range(6):
        cube.perform_moves("R U R' U'")
        if i < 5:
            assert not cube.is_solved()
    assert cube.is_solved()


def test_move_log_fidelity(cube):
    cube.perform_moves("F R U R' U' F'")
    assert cube.move_log == ["F", "R", "U", "R'", "U'", "F'"]


def test_perform_moves_splits_on_any_whitespace(cube):
    tokens = cube.perform_moves("  R\tU'\n F  ")
    assert tokens == ["R", "U'", "F"]
    assert cube.move_log == ["R", "U'", "F"]


def test_perform_moves_empty(cube):
    assert cube.perform_moves("") == []
    assert cube.is_solved()


def test_u_move_golden_serialization(cube):
    cube.perform_move("U")
    assert cube.to_color_string() == (
        'w' * 9
        + 'bbb' + 'r' * 6
        + 'rrr' + 'g' * 6
        + 'y' * 9
        + 'ggg' + 'o' * 6
        + 'ooo' + 'b' * 6
    )


def test_prime_matches_rotate_face(cube):
    other = RubiksCube()
    cube.perform_move("L'")
    other.rotate_face('L', clockwise=False)
    assert cube.serialize() == other.serialize()


@pytest.mark.parametrize("token", ["X", "u", "", "F2", "R''", "x", "M", "'R"])
def test_invalid_move(cube, token):
    with pytest.raises(InvalidMove):
        cube.perform_move(token)
    assert cube.is_solved()
    assert cube.move_log == []


def test_sequence_is_not_atomic(cube):
    with pytest.raises(InvalidMove):
        cube.perform_moves("R U Q F")
    expected = RubiksCube()
    expected.rotate_face('R')
    expected.rotate_face('U')
    assert cube.serialize() == expected.serialize()
    assert cube.move_log == ["R", "U"]


def test_rotate_face_invalid(cube):
    with pytest.raises(InvalidFace):
        cube.rotate_face('Z')


def test_face_ids_must_be_hashable(cube):
    for call in (lambda: cube.get_face(['U']),
                 lambda: cube.set_face(['U'], ['w'] * 9),
                 lambda: cube.rotate_face(['U'])):
        with pytest.raises(InvalidFace):
            call()
    assert cube.is_solved()


def test_set_face_validation(cube):
    with pytest.raises(InvalidLength):
        cube.set_face('U', ['w'] * 8)
    with pytest.raises(InvalidFace):
        cube.set_face('Z', ['w'] * 9)


def test_set_face_state_is_not_checked(cube):
    """Any 9 tokens are accepted; the engine only enforces the turn algorithm."""
    cube.set_face('U', list('wwwwgwwww'))
    assert cube.get_face('U')[4] == 'g'
    assert not cube.is_solved()


def test_reset_clears_state_and_log(cube, rng):
    cube.perform_moves("R U F")
    cube.scramble(20, rng=rng)
    cube.reset()
    assert cube.to_color_string() == COLOR_INIT_STATE
    assert cube.move_log == []


def test_scramble_preserves_counts_and_does_not_log(cube, rng):
    applied = cube.scramble(50, rng=rng)
    assert len(applied) == 50
    assert all(Move.parse(tok).face in FACES for tok in applied)
    assert cube.move_log == []
    assert Counter(cube.serialize()) == {c: 9 for c in 'wrgyob'}


def test_scramble_default_count(cube):
    assert len(cube.scramble()) == 10


def test_scramble_zero(cube):
    assert cube.scramble(0) == []
    assert cube.is_solved()


def test_scramble_negative_count_rejected(cube):
    with pytest.raises(ValueError, match="-1"):
        cube.scramble(-1)
    assert cube.is_solved()


def test_scramble_reproducible_with_seed():
    a, b = RubiksCube(), RubiksCube()
    moves_a = a.scramble(25, rng=random.Random(7))
    moves_b = b.scramble(25, rng=random.Random(7))
    assert moves_a == moves_b
    assert a.serialize() == b.serialize()


def test_scramble_replays_through_notation(cube, rng):
    applied = cube.scramble(30, rng=rng)
    replay = RubiksCube()
    replay.perform_moves(" ".join(applied))
    assert replay.serialize() == cube.serialize()


def test_solve_step_by_step_replays_fixed_sequences(cube, rng):
    cube.perform_moves("R U")
    cube.scramble(5, rng=rng)
    log = cube.solve_step_by_step()
    expected = " ".join(SOLVE_SEQUENCES).split()
    assert log == expected
    assert cube.move_log == expected
    assert len(expected) == 28


def test_solve_step_by_step_ignores_state():
    """Same replay from two different states: the replay is not a solver."""
    a, b = RubiksCube(), RubiksCube()
    b.perform_move("D")
    a.solve_step_by_step()
    b.solve_step_by_step()
    assert a.move_log == b.move_log
    assert not a.is_solved()
    assert a.serialize() != b.serialize()


def test_instances_are_independent():
    a, b = RubiksCube(), RubiksCube()
    a.perform_move("F")
    assert b.is_solved()
    assert b.move_log == []


def test_serialize_has_54_cells_in_face_order(cube):
    cube.perform_moves("R U R'")
    cells = cube.serialize()
    assert len(cells) == 54
    for i, face in enumerate(FACE_ORDER):
        assert cells[i * 9:(i + 1) * 9] == cube.get_face(face)


def test_move_parse():
    assert Move.parse("R") == Move('R', True)
    assert Move.parse("B'") == Move('B', False)
    assert str(Move('U', False)) == "U'"


def test_solve_step_by_step_golden(cube):
    cube.solve_step_by_step()
    assert cube.to_color_string() == (
        "rgbrwgobb" "rwowrrrrr" "wwwggoggg" "yyyyyyyyy" "gwgoooooo" "wrwbbbbbb"
    )


def test_move_debug_log_includes_state(cube, caplog):
    with caplog.at_level(logging.DEBUG, logger="cube"):
        cube.perform_move("U")
    assert any(r.getMessage() == f"Move U -> {cube.to_color_string()}" for r in caplog.records)


def test_move_skips_state_dump_above_debug(cube, caplog, monkeypatch):
    calls = []
    original = RubiksCube.to_color_string
    monkeypatch.setattr(RubiksCube, "to_color_string", lambda self: calls.append(1) or original(self))
    with caplog.at_level(logging.INFO, logger="cube"):
        cube.perform_moves("R U R'")
    assert calls == []
    assert not [r for r in caplog.records if r.getMessage().startswith("Move ")]
