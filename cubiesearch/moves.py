"""Face-turn move table and move-token helpers.

Corner slots: 0=URF, 1=UFL, 2=ULB, 3=UBR, 4=DFR, 5=DLF, 6=DBL, 7=DRB.
Edge slots: 0=UR, 1=UF, 2=UL, 3=UB, 4=DR, 5=DF, 6=DL, 7=DB,
8=FR, 9=FL, 10=BL, 11=BR.

Moves are numbered ``face * 3 + turn`` where faces are ordered ``URFDLB``
and turn 0 is clockwise, 1 is a half turn and 2 is counter-clockwise.
"""

from __future__ import annotations

from dataclasses import dataclass

FACES = "URFDLB"
MOVE_COUNT = 18


@dataclass(frozen=True)
class RawMove:
    """A face turn described at the cubie level.

    ``corner_permutation[i]`` is the slot whose piece ends up in slot ``i``;
    ``corner_orientation[i]`` is the twist added to that piece;
    ``edge_permutation[i]`` is the same for edges and bit ``i`` of
    ``edge_orientation`` says whether the edge arriving in slot ``i`` flips.
    """

    corner_permutation: tuple[int, ...]
    corner_orientation: tuple[int, ...]
    edge_permutation: tuple[int, ...]
    edge_orientation: int


RAW_MOVES: tuple[RawMove, ...] = (
    # U, U2, U'
    RawMove((3, 0, 1, 2, 4, 5, 6, 7), (0,) * 8,
            (3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11), 0b0000_0000_0000),
    RawMove((2, 3, 0, 1, 4, 5, 6, 7), (0,) * 8,
            (2, 3, 0, 1, 4, 5, 6, 7, 8, 9, 10, 11), 0b0000_0000_0000),
    RawMove((1, 2, 3, 0, 4, 5, 6, 7), (0,) * 8,
            (1, 2, 3, 0, 4, 5, 6, 7, 8, 9, 10, 11), 0b0000_0000_0000),
    # R, R2, R'
    RawMove((4, 1, 2, 0, 7, 5, 6, 3), (2, 0, 0, 1, 1, 0, 0, 2),
            (8, 1, 2, 3, 11, 5, 6, 7, 4, 9, 10, 0), 0b0000_0000_0000),
    RawMove((7, 1, 2, 4, 3, 5, 6, 0), (0,) * 8,
            (4, 1, 2, 3, 0, 5, 6, 7, 11, 9, 10, 8), 0b0000_0000_0000),
    RawMove((3, 1, 2, 7, 0, 5, 6, 4), (2, 0, 0, 1, 1, 0, 0, 2),
            (11, 1, 2, 3, 8, 5, 6, 7, 0, 9, 10, 4), 0b0000_0000_0000),
    # F, F2, F'
    RawMove((1, 5, 2, 3, 0, 4, 6, 7), (1, 2, 0, 0, 2, 1, 0, 0),
            (0, 9, 2, 3, 4, 8, 6, 7, 1, 5, 10, 11), 0b0011_0010_0010),
    RawMove((5, 4, 2, 3, 1, 0, 6, 7), (0,) * 8,
            (0, 5, 2, 3, 4, 1, 6, 7, 9, 8, 10, 11), 0b0000_0000_0000),
    RawMove((4, 0, 2, 3, 5, 1, 6, 7), (1, 2, 0, 0, 2, 1, 0, 0),
            (0, 8, 2, 3, 4, 9, 6, 7, 5, 1, 10, 11), 0b0011_0010_0010),
    # D, D2, D'
    RawMove((0, 1, 2, 3, 5, 6, 7, 4), (0,) * 8,
            (0, 1, 2, 3, 5, 6, 7, 4, 8, 9, 10, 11), 0b0000_0000_0000),
    RawMove((0, 1, 2, 3, 6, 7, 4, 5), (0,) * 8,
            (0, 1, 2, 3, 6, 7, 4, 5, 8, 9, 10, 11), 0b0000_0000_0000),
    RawMove((0, 1, 2, 3, 7, 4, 5, 6), (0,) * 8,
            (0, 1, 2, 3, 7, 4, 5, 6, 8, 9, 10, 11), 0b0000_0000_0000),
    # L, L2, L'
    RawMove((0, 2, 6, 3, 4, 1, 5, 7), (0, 1, 2, 0, 0, 2, 1, 0),
            (0, 1, 10, 3, 4, 5, 9, 7, 8, 2, 6, 11), 0b0000_0000_0000),
    RawMove((0, 6, 5, 3, 4, 2, 1, 7), (0,) * 8,
            (0, 1, 6, 3, 4, 5, 2, 7, 8, 10, 9, 11), 0b0000_0000_0000),
    RawMove((0, 5, 1, 3, 4, 6, 2, 7), (0, 1, 2, 0, 0, 2, 1, 0),
            (0, 1, 9, 3, 4, 5, 10, 7, 8, 6, 2, 11), 0b0000_0000_0000),
    # B, B2, B'
    RawMove((0, 1, 3, 7, 4, 5, 2, 6), (0, 0, 1, 2, 0, 0, 2, 1),
            (0, 1, 2, 11, 4, 5, 6, 10, 8, 9, 3, 7), 0b1100_1000_1000),
    RawMove((0, 1, 7, 6, 4, 5, 3, 2), (0,) * 8,
            (0, 1, 2, 7, 4, 5, 6, 3, 8, 9, 11, 10), 0b0000_0000_0000),
    RawMove((0, 1, 6, 2, 4, 5, 7, 3), (0, 0, 1, 2, 0, 0, 2, 1),
            (0, 1, 2, 10, 4, 5, 6, 11, 8, 9, 7, 3), 0b1100_1000_1000),
)

MOVE_NAMES: tuple[str, ...] = tuple(
    face + suffix for face in FACES for suffix in ("", "2", "'")
)


def _check_index(index: int) -> None:
    if not 0 <= index < MOVE_COUNT:
        raise ValueError(f"move index out of range: {index}")


def parse_move(token: str, strict: bool = False) -> int:
    """Return the move index for a token such as ``R``, ``R2`` or ``R'``.

    In lenient mode any second character other than ``2`` means a
    counter-clockwise turn; in strict mode it must be ``2`` or ``'``.
    Tokens longer than two characters count as a plain clockwise turn.
    """
    if not token:
        raise ValueError("empty move token")
    face_index = FACES.find(token[0])
    if face_index < 0:
        raise ValueError(f"invalid move {token!r}")
    turn = 0
    if len(token) == 2:
        suffix = token[1]
        if suffix == "2":
            turn = 1
        elif suffix == "'" or not strict:
            turn = 2
        else:
            raise ValueError(f"invalid move {token!r}")
    return face_index * 3 + turn


def move_name(index: int) -> str:
    """Return the notation for a move index."""
    _check_index(index)
    return MOVE_NAMES[index]


def inverse_move(index: int) -> int:
    """Return the index of the move that undoes ``index``."""
    _check_index(index)
    face, turn = divmod(index, 3)
    return face * 3 + (2 - turn)


def face_of(index: int) -> int:
    """Return the face number (position in ``URFDLB``) of a move index."""
    _check_index(index)
    return index // 3