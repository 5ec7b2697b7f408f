# cubiesearch

A small cubie-level model of the 3x3x3 Rubik's cube. It works with the 18
face turns in standard notation (`U`, `U2`, `U'`, `R`, … `B'`). It has no
dependencies beyond the standard library.

## Modules

- `cubiesearch.moves` holds the move table. `RAW_MOVES` is a tuple of 18
  `RawMove` entries, numbered `face * 3 + turn` with faces in the order
  `URFDLB`. It also provides these helpers:
  - `parse_move(token, strict=False)` turns a token into a move index and
    raises `ValueError` for a bad token. In lenient mode any second
    character other than `2` means a counter-clockwise turn. In strict mode
    the second character must be `2` or `'`.
  - `move_name(index)` gives the notation for an index.
  - `inverse_move(index)` gives the index of the move that undoes it.
  - `face_of(index)` gives the face number.
- `cubiesearch.cube` provides `CubeState`, an immutable pair of packed
  integers (`corners`, `edges`). Each slot of a state takes five bits.
  - `CubeState.solved()` returns the solved cube.
  - `apply(move)` takes an index or a token.
  - `apply_sequence(moves)` applies the moves in order.
  - `is_solved()` tells whether the cube is solved.
  - `apply` and `apply_sequence` return new states.
  - `scramble(tokens)` returns the solved cube after the given moves.
- `cubiesearch.simplify` works on move lists:
  - `split_moves(text)` splits a string on whitespace.
  - `simplify_moves(moves)` merges directly adjacent turns of the same face
    and drops runs that cancel out.
- `cubiesearch.search` provides `BruteForceSearch` and the `apply_turn`
  helper:
  - `BruteForceSearch` is an iterative-deepening, exhaustive search over
    all 18 moves.
  - `search(max_depth)` yields one `DepthReport` per depth, with `depth`,
    `elapsed_ms` and `solution`. `solution` is set only in the report for
    the depth where the first solution was found.
  - Each depth is explored completely.
  - With `prune_same_face=True`, two turns of the same face are never
    played in a row.
  - With `compose_quarter_turns=True`, every move is built from clockwise
    quarter turns.
  - The search applies the move table in the opposite sense from
    `CubeState.apply`: the piece in slot `i` goes to slot
    `permutation[i]`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from cubiesearch.cube import CubeState, scramble
from cubiesearch.simplify import simplify_moves, split_moves

state = scramble(split_moves("U R2 F' B2 L"))
print(state.is_solved())             # False
print(state.apply_sequence(["L'", "B2", "F", "R2", "U'"]).is_solved())  # True

print(simplify_moves(["R", "R", "U", "U'", "F2", "F2", "L"]))
# ['R2', 'L']
```

## Command line

```
cubiesearch [SCRAMBLE ...] [--max-depth N] [--prune-same-face] [--quarter-turns]
```

The command scrambles the cube and searches every depth from 1 to
`--max-depth`. With no arguments it uses the scramble `U R2 F' B2 L` and a
maximum depth of 7.

- After each depth it prints the time elapsed.
- It prints the first solution it finds.
- An invalid scramble token ends the run with exit status 1.

Because every depth is searched in full, depths beyond 5 or 6 take a very
long time; a smaller `--max-depth` together with `--prune-same-face` keeps
runs short, for example:

```
cubiesearch U R2 --max-depth 3 --prune-same-face
```

## What it does not do

The package has no solver for arbitrary scrambles. The only way it finds a
solution is the exhaustive search, which is practical only for scrambles of
a few moves.