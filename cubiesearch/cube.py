"""Packed cubie-level cube state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .moves import MOVE_COUNT, RAW_MOVES, parse_move

_CORNER_COUNT = 8
_EDGE_COUNT = 12
_FIELD_BITS = 5
_FIELD_MASK = 0x1F


def _solved_field(count: int) -> int:
    return sum(slot << (_FIELD_BITS * slot) for slot in range(count))


def _resolve(move: int | str) -> int:
    if isinstance(move, str):
        return parse_move(move)
    if not 0 <= move < MOVE_COUNT:
        raise ValueError(f"move index out of range: {move}")
    return move


@dataclass(frozen=True)
class CubeState:
    """A cube as two packed integers.

    Each slot occupies five bits. For corners the low three bits hold the
    piece and the next two its twist; for edges the low four bits hold the
    piece and the fifth bit its flip.
    """

    corners: int
    edges: int

    @classmethod
    def solved(cls) -> CubeState:
        """Return the solved cube."""
        return cls(_solved_field(_CORNER_COUNT), _solved_field(_EDGE_COUNT))

    def apply(self, move: int | str) -> CubeState:
        """Return the state after one move, given as an index or a token."""
        raw = RAW_MOVES[_resolve(move)]

        corners = 0
        for slot, (source, twist) in enumerate(
            zip(raw.corner_permutation, raw.corner_orientation)
        ):
            packed = (self.corners >> (_FIELD_BITS * source)) & _FIELD_MASK
            piece = packed & 0x7
            orientation = ((packed >> 3) & 0x3) + twist
            corners |= (piece | (orientation % 3) << 3) << (_FIELD_BITS * slot)

        edges = 0
        for slot, source in enumerate(raw.edge_permutation):
            packed = (self.edges >> (_FIELD_BITS * source)) & _FIELD_MASK
            piece = packed & 0xF
            orientation = ((packed >> 4) & 0x1) ^ ((raw.edge_orientation >> slot) & 1)
            edges |= (piece | orientation << 4) << (_FIELD_BITS * slot)

        return CubeState(corners, edges)

    def apply_sequence(self, moves: Iterable[int | str]) -> CubeState:
        """Return the state after applying every move in order."""
        state = self
        for move in moves:
            state = state.apply(move)
        return state

    def is_solved(self) -> bool:
        """Tell whether every piece is home and correctly oriented."""
        return self == CubeState.solved()


def scramble(tokens: Iterable[str]) -> CubeState:
    """Return the solved cube scrambled by the given move tokens."""
    return CubeState.solved().apply_sequence(parse_move(token) for token in tokens)