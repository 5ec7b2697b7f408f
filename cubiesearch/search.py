"""Iterative-deepening brute-force search for a move sequence that solves a scramble."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .cube import CubeState
from .moves import MOVE_COUNT, RAW_MOVES, RawMove, face_of, move_name, parse_move

DEFAULT_MAX_DEPTH = 7
DEFAULT_SCRAMBLE = ("U", "R2", "F'", "B2", "L")

_FIELD_BITS = 5
_FIELD_MASK = 0x1F


def _push(corners: int, edges: int, raw: RawMove) -> tuple[int, int]:
    """Send the piece in slot ``i`` to slot ``permutation[i]``, twisting by slot ``i``."""
    new_corners = 0
    for slot, (dest, twist) in enumerate(
        zip(raw.corner_permutation, raw.corner_orientation)
    ):
        packed = (corners >> (_FIELD_BITS * slot)) & _FIELD_MASK
        piece = packed & 0x7
        orientation = (((packed >> 3) & 0x3) + twist) % 3
        new_corners |= (piece | orientation << 3) << (_FIELD_BITS * dest)

    new_edges = 0
    for slot, dest in enumerate(raw.edge_permutation):
        packed = (edges >> (_FIELD_BITS * slot)) & _FIELD_MASK
        piece = packed & 0xF
        orientation = ((packed >> 4) & 0x1) ^ ((raw.edge_orientation >> slot) & 1)
        new_edges |= (piece | orientation << 4) << (_FIELD_BITS * dest)

    return new_corners, new_edges


def apply_turn(
    corners: int, edges: int, move: int, compose_quarter_turns: bool = False
) -> tuple[int, int]:
    """Return the packed state after ``move``.

    With ``compose_quarter_turns`` the move is built from repeated clockwise
    quarter turns of its face; otherwise the move's own table entry is used.
    """
    face = face_of(move)
    if compose_quarter_turns:
        quarter = RAW_MOVES[face * 3]
        for _ in range(move % 3 + 1):
            corners, edges = _push(corners, edges, quarter)
        return corners, edges
    return _push(corners, edges, RAW_MOVES[move])


@dataclass(frozen=True)
class DepthReport:
    """Outcome of one iteration of the deepening search.

    ``solution`` holds the first solution ever found if it was found during
    this iteration, and is ``None`` otherwise.
    """

    depth: int
    elapsed_ms: int
    solution: tuple[str, ...] | None


class BruteForceSearch:
    """Exhaustive depth-limited search over all 18 face turns."""

    def __init__(
        self,
        scramble_moves: Iterable[str],
        prune_same_face: bool = False,
        compose_quarter_turns: bool = False,
    ) -> None:
        self.scramble = tuple(parse_move(token, strict=True) for token in scramble_moves)
        self.prune_same_face = prune_same_face
        self.compose_quarter_turns = compose_quarter_turns
        solved = CubeState.solved()
        self._solved = (solved.corners, solved.edges)
        corners, edges = self._solved
        for move in self.scramble:
            corners, edges = apply_turn(corners, edges, move, compose_quarter_turns)
        self.start = (corners, edges)
        self.solution: tuple[str, ...] | None = None

    def search(self, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[DepthReport]:
        """Search every depth from 1 to ``max_depth``, yielding one report each.

        Each depth is explored completely, even after a solution is found;
        only the first solution is recorded.
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1: {max_depth}")
        self.solution = None
        start_time = time.monotonic()
        for depth in range(1, max_depth + 1):
            had_solution = self.solution is not None
            self._explore(*self.start, [], depth)
            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            found_now = self.solution if not had_solution else None
            yield DepthReport(depth, elapsed_ms, found_now)

    def _explore(self, corners: int, edges: int, path: list[int], max_depth: int) -> None:
        if self.solution is None and path and (corners, edges) == self._solved:
            self.solution = tuple(move_name(move) for move in path)
        if len(path) == max_depth:
            return
        previous_face = face_of(path[-1]) if path else None
        for move in range(MOVE_COUNT):
            if self.prune_same_face and face_of(move) == previous_face:
                continue
            next_corners, next_edges = apply_turn(
                corners, edges, move, self.compose_quarter_turns
            )
            path.append(move)
            self._explore(next_corners, next_edges, path, max_depth)
            path.pop()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubiesearch",
        description="Brute-force search for a sequence that undoes a scramble.",
    )
    parser.add_argument(
        "scramble",
        nargs="*",
        default=list(DEFAULT_SCRAMBLE),
        help="scramble moves (default: %(default)s)",
    )
    parser.add_argument(
        "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help="deepest search depth (default: %(default)s)",
    )
    parser.add_argument(
        "--prune-same-face", action="store_true",
        help="skip consecutive turns of the same face",
    )
    parser.add_argument(
        "--quarter-turns", action="store_true",
        help="build every move from clockwise quarter turns",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search from the command line and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.scramble:
        print("Scrambling with:", end="")
        for token in args.scramble:
            try:
                move = parse_move(token, strict=True)
            except ValueError:
                print(f"\nError: invalid scramble token '{token}'", file=sys.stderr)
                return 1
            print(f" {move_name(move)}", end="")
        print("\n")

    searcher = BruteForceSearch(
        args.scramble,
        prune_same_face=args.prune_same_face,
        compose_quarter_turns=args.quarter_turns,
    )
    try:
        for report in searcher.search(args.max_depth):
            if report.solution is not None:
                print(
                    f"Solution found ({len(report.solution)} moves): "
                    + " ".join(report.solution)
                )
            print(f"Depth {report.depth} completed in {report.elapsed_ms} ms")
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())