"""Merging of consecutive turns of the same face."""

from __future__ import annotations

from collections.abc import Iterable


def _quarter_turns(move: str) -> int:
    if not move:
        raise ValueError("empty move token")
    if len(move) == 2:
        return 2 if move[1] == "2" else 3
    return 1


def _emit(face: str, turns: int) -> list[str]:
    return {1: [face], 2: [face + "2"], 3: [face + "'"]}.get(turns % 4, [])


def simplify_moves(moves: Iterable[str]) -> list[str]:
    """Combine runs of turns of one face into a single move, dropping no-ops.

    Only directly adjacent turns of the same face are combined; a run that
    cancels out is dropped without joining its neighbours.
    """
    result: list[str] = []
    last_face: str | None = None
    accumulated = 0
    for move in moves:
        turns = _quarter_turns(move)
        face = move[0]
        if face != last_face:
            if last_face is not None:
                result.extend(_emit(last_face, accumulated))
            last_face = face
            accumulated = turns
        else:
            accumulated = (accumulated + turns) % 4
    if last_face is not None:
        result.extend(_emit(last_face, accumulated))
    return result


def split_moves(text: str) -> list[str]:
    """Split a move sequence on whitespace."""
    return text.split()