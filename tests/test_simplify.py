import pytest

from cubiesearch.cube import CubeState, scramble
from cubiesearch.simplify import simplify_moves, split_moves

SCRAMBLE = [
    "R2", "D'", "B'", "R", "B'", "U2", "B'", "U'", "L'",
    "U'", "F'", "L2", "B2", "F'", "L2", "B'", "U", "B",
    "F2", "L2", "B2", "F'", "L2", "R'", "U'",
]


def test_two_quarter_turns_merge_to_half_turn():
    assert simplify_moves(["R", "R"]) == ["R2"]


def test_cancelling_turns_vanish():
    assert simplify_moves(["R", "R'"]) == []
    assert simplify_moves(["F2", "F2"]) == []


def test_three_quarter_turns_become_prime():
    assert simplify_moves(["U", "U2"]) == ["U'"]


def test_cancelled_run_does_not_join_neighbours():
    assert simplify_moves(["R", "L", "L'", "R"]) == ["R", "R"]


def test_distinct_faces_are_kept():
    moves = ["R", "U", "F'", "D2"]
    assert simplify_moves(moves) == moves


def test_empty_input():
    assert simplify_moves([]) == []


def test_empty_token_raises():
    with pytest.raises(ValueError):
        simplify_moves(["R", ""])


@pytest.mark.parametrize(
    "moves",
    [
        SCRAMBLE,
        ["R", "R", "R", "U", "U'", "U", "L2", "L2", "F", "F'"],
        ["B", "B", "B", "B", "D", "D2", "D'"],
    ],
)
def test_simplified_sequence_has_same_effect(moves):
    simplified = simplify_moves(moves)
    start = CubeState.solved()
    assert start.apply_sequence(simplified) == start.apply_sequence(moves)
    assert len(simplified) <= len(moves)


def test_simplify_is_idempotent():
    once = simplify_moves(SCRAMBLE + ["U", "U"])
    assert simplify_moves(once) == once


def test_split_moves_on_any_whitespace():
    assert split_moves("  R U\tF' \n D2 ") == ["R", "U", "F'", "D2"]
    assert split_moves("   ") == []


def test_split_then_scramble_matches_list():
    text = " ".join(SCRAMBLE)
    assert split_moves(text) == SCRAMBLE
    assert scramble(split_moves(text)) == scramble(SCRAMBLE)