import pytest

from cubiesearch.cube import CubeState
from cubiesearch.moves import inverse_move, parse_move
from cubiesearch.search import BruteForceSearch, DepthReport, apply_turn, main

SOLVED = CubeState.solved()


def _scrambled(tokens, compose=False):
    corners, edges = SOLVED.corners, SOLVED.edges
    for token in tokens:
        corners, edges = apply_turn(corners, edges, parse_move(token), compose)
    return corners, edges


@pytest.mark.parametrize("move", range(18))
def test_composed_quarter_turns_match_table(move):
    corners, edges = _scrambled(["U", "R2", "F'", "B2", "L"])
    assert apply_turn(corners, edges, move, True) == apply_turn(corners, edges, move, False)


@pytest.mark.parametrize("move", range(18))
@pytest.mark.parametrize("compose", [False, True])
def test_inverse_restores_state(move, compose):
    start = _scrambled(["F", "D'", "B"], compose)
    after = apply_turn(*start, move, compose)
    assert apply_turn(*after, inverse_move(move), compose) == start


@pytest.mark.parametrize("face", range(6))
def test_four_quarter_turns_are_identity(face):
    state = (SOLVED.corners, SOLVED.edges)
    for _ in range(4):
        state = apply_turn(*state, face * 3)
    assert state == (SOLVED.corners, SOLVED.edges)


def test_apply_turn_rejects_bad_index():
    with pytest.raises(ValueError):
        apply_turn(SOLVED.corners, SOLVED.edges, 18)


def test_single_move_scramble_found_at_depth_one():
    searcher = BruteForceSearch(["R"])
    reports = list(searcher.search(1))
    assert reports[0].depth == 1
    assert reports[0].solution == ("R'",)
    assert searcher.solution == ("R'",)


@pytest.mark.parametrize("prune", [False, True])
@pytest.mark.parametrize("compose", [False, True])
def test_solution_solves_scramble(prune, compose):
    scramble = ["U", "R2"]
    searcher = BruteForceSearch(scramble, prune_same_face=prune, compose_quarter_turns=compose)
    list(searcher.search(2))
    assert searcher.solution is not None
    state = searcher.start
    for token in searcher.solution:
        state = apply_turn(*state, parse_move(token), compose)
    assert state == (SOLVED.corners, SOLVED.edges)
    assert len(searcher.solution) == 2


def test_solution_reported_only_once():
    searcher = BruteForceSearch(["L"])
    reports = list(searcher.search(3))
    assert [r.depth for r in reports] == [1, 2, 3]
    assert all(isinstance(r, DepthReport) for r in reports)
    assert reports[0].solution == searcher.solution
    assert reports[1].solution is None and reports[2].solution is None


def test_solved_cube_needs_two_moves_without_pruning():
    searcher = BruteForceSearch([])
    reports = list(searcher.search(2))
    assert reports[0].solution is None
    assert reports[1].solution == ("U", "U'")


def test_pruning_skips_same_face_cancellation():
    searcher = BruteForceSearch([], prune_same_face=True)
    list(searcher.search(2))
    assert searcher.solution is None


def test_elapsed_is_non_decreasing():
    reports = list(BruteForceSearch(["F"]).search(2))
    assert reports[0].elapsed_ms <= reports[1].elapsed_ms


def test_invalid_scramble_token_rejected():
    with pytest.raises(ValueError):
        BruteForceSearch(["R3"])


def test_invalid_depth_rejected():
    with pytest.raises(ValueError):
        list(BruteForceSearch(["R"]).search(0))


def test_main_prints_scramble_and_solution(capsys):
    assert main(["R", "--max-depth", "1"]) == 0
    out = capsys.readouterr().out
    assert "Scrambling with: R\n\n" in out
    assert "Solution found (1 moves): R'" in out
    assert "Depth 1 completed in" in out


def test_main_reports_invalid_token(capsys):
    assert main(["R", "X2", "--max-depth", "1"]) == 1
    err = capsys.readouterr().err
    assert "invalid scramble token 'X2'" in err