# aoc24

Solvers for a set of daily programming puzzles. Each day is a module
(`aoc24.day01`, `aoc24.day10` to `aoc24.day17`) with functions you can call
directly, plus a command that reads a puzzle input file and prints the answers
for both parts of that day, one per line.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes exactly one argument, the path of a puzzle input file.
With a wrong number of arguments it prints `Expected filename to be given`,
and if the file cannot be opened it prints `Failed to open file`; both exit
with status 1.

```
aoc24-day01 input.txt   # total distance and similarity score of two lists
aoc24-day10 input.txt   # sum of trailhead scores and of trailhead ratings
aoc24-day11 input.txt   # stone counts after 25 and after 75 blinks
aoc24-day12 input.txt   # fencing price by perimeter and by number of sides
aoc24-day13 input.txt   # fewest tokens to win the claw machine prizes
aoc24-day14 input.txt   # robot safety factor and picture candidates
aoc24-day15 input.txt   # warehouse GPS sums, normal and widened
aoc24-day16 input.txt   # lowest maze score and tiles on best paths
aoc24-day17 input.txt   # program output and self-replicating values of A
```

Some details of what the commands print:

- `aoc24-day13` prints the tokens found by searching up to 100 presses per
  button, then the tokens found by solving the equations with every prize
  moved by `PART_TWO_OFFSET` (10000000000000).
- `aoc24-day14` works in a 101 by 103 room. It prints the safety factor after
  100 seconds, then, for every second below 10000 at which at least ten
  robots stand side by side in a row, that second and a drawing of the room.
- `aoc24-day17` prints the program's output joined by commas, then every
  value of register A, in ascending order, for which the program outputs
  itself.

## Library use

```python
from aoc24.day01 import parse_lists, total_distance, similarity_score

left, right = parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(total_distance(left, right))    # 11
print(similarity_score(left, right))  # 31
```

What each module offers:

- `aoc24.day01`: `parse_lists`, `total_distance`, `similarity_score`.
- `aoc24.day10`: `parse_map`, `trailhead_score`, `trailhead_rating`,
  `total_score`, `total_rating`.
- `aoc24.day11`: `parse_stones`, `transform`, `blink` (on a `Counter` of stone
  numbers), `count_stones(stones, blinks)`.
- `aoc24.day12`: `parse_garden`, `find_regions`, `perimeter`, `side_count`,
  `fencing_price`, `discounted_price`.
- `aoc24.day13`: `Machine`, `parse_machines(text, offset=0)`,
  `cheapest_by_search`, `cheapest_by_solving`, `total_tokens_search`,
  `total_tokens_solving`. The `cheapest_*` functions return `None` for a
  prize that cannot be won.
- `aoc24.day14`: `Robot` with `position_after`, `parse_robots`,
  `safety_factor`, `render`, `has_long_run`, and the generator
  `tree_candidates`.
- `aoc24.day15`: `Tile`, `Direction`, `Warehouse` (`can_move`, `step`, `run`,
  `gps_sum`; `str()` draws the map) and `parse_warehouse(text, wide=False)`,
  which returns the warehouse and its list of moves.
- `aoc24.day16`: `Direction`, `Maze`, `parse_maze`, `cost_table`,
  `lowest_score`, `best_path_tiles`. The start is the bottom-left open tile
  and the end the top-right one.
- `aoc24.day17`: `Opcode`, `Computer` (`combo`, `execute` yields output
  values), `parse_program`, `run_program`, `format_output`,
  `reproduces_program`, `find_self_replicating`.

Every module's `main(argv=None)` is the function behind its command and
returns the exit status.

Malformed input raises `ValueError`.

## Limitations

- There is no single command that runs every day; each day has its own.
- The picture search of day 14 only reports candidate seconds; deciding which
  drawing shows a picture is left to the reader.
- `find_self_replicating` assumes a program that outputs one value per loop
  and shifts register A right by three bits each time; for other programs it
  may find nothing.