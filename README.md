# drillbook

A collection of solved programming drills written as plain Python functions,
with a small `drillbook` command that runs some of them on standard input.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

### `drillbook.text`: string puzzles

- `rot13(text)`: rotates ASCII letters by 13 places and leaves every other
  character unchanged.
- `team_initials(surnames)`: the initials, in alphabetical order, shared by
  at least five surnames; `"PREDAJA"` when there are none.
- `is_palindrome(word)`: whether the word reads the same backwards.
- `build_palindrome(name)`: rearranges the letters into the alphabetically
  smallest palindrome. Raises `NoPalindromeError` (a `ValueError` whose message
  is `"I'm Sorry Hansoo"`) when more than one letter occurs an odd number of
  times.
- `match_pattern(pattern, filenames)`: checks each name against a pattern
  containing one `*` and returns a list of booleans. Raises `ValueError` if
  the pattern has no `*`.
- `is_good_word(word)` and `count_good_words(words)`: a word is good when
  equal letters can be paired by non-crossing arcs.
- `PokemonIndex(names)`: a two-way index between names and their 1-based
  positions. `lookup(query)` returns the name for a numeric query and the
  number for a name; it raises `KeyError` when nothing matches.

### `drillbook.arith`: number drills

- `repunit_length(n)`: digits of the smallest number made only of ones that
  is divisible by `n`; `ValueError` when `n` is not positive or is divisible
  by 2 or 5.
- `max_window_sum(values, k)`: the largest sum of `k` consecutive values.
- `lead_times(goals)`: given `(team, "MM:SS")` goals in time order for teams
  1 and 2, the seconds each team was in the lead over a 48-minute game.
  `format_clock(seconds)` renders seconds as `MM:SS`.
- `trailing_zeros(n)`: trailing zeros of `n!`.
- `outfit_combinations(items)`: the number of non-empty outfits from
  `(name, category)` items, wearing at most one item per category.
- `mod_pow(base, exponent, modulus)`: `base ** exponent % modulus` for an
  exponent of at least 1 and a positive modulus.
- `count_pair_sums(values, target)`: pairs of distinct positions whose values
  add up to `target`.

### `drillbook.grids`: grid searches

Grids are given as rows of ints or digit strings.

- `count_components(grid)`: 4-connected regions of cells marked 1.
- `count_cabbage_patches(rows, cols, positions)`: connected patches among
  the `(row, col)` positions in a `rows` by `cols` field.
- `split_areas(rows, cols, rectangles)`: the areas, ascending, left uncovered
  by `(x1, y1, x2, y2)` rectangles on a sheet.
- `shortest_path(grid)`: the number of cells on the shortest path of 1s from
  the top-left to the bottom-right corner, or 0 when there is none.
- `melt_cheese(grid)`: the hours until all cheese (1) touching outside air has
  melted, and the number of cells that melted in the last hour.
- `quadtree(grid)`: quadtree compression of a square image whose side is a
  power of two, e.g. `"((110(0101))(0010)1(0001))"`.
- `cloud_arrival(rows)`: for each cell of rows of `c` and `.`, the minutes
  until a cloud drifting east arrives (0 under a cloud, -1 if never).
- `min_chicken_distance(grid, keep)`: the smallest total distance from houses
  (1) to their nearest open chicken shop (2) when `keep` shops stay open.

Invalid grids and arguments raise `ValueError`.

```python
from drillbook.text import rot13, is_palindrome
from drillbook.arith import mod_pow, trailing_zeros

rot13("Hello")          # 'Uryyb'
is_palindrome("level")  # True
mod_pow(10, 11, 12)     # 4
trailing_zeros(100)     # 24
```

## Command line

`drillbook` reads the puzzle input from standard input and prints the answer.
It takes one subcommand:

- `rot13`: applies ROT13 to the first line of input.
- `components`: reads `N M` and then `N*M` grid values, and prints the number
  of connected regions of 1s.
- `lead`: reads a goal count and then that many `team MM:SS` pairs, and prints
  how long team 1 and team 2 each led, one `MM:SS` per line.
- `palindrome`: reads a name and prints its smallest palindrome, or
  `I'm Sorry Hansoo`.

```
$ echo "Hello" | drillbook rot13
Uryyb
$ printf '3 3\n1 0 1\n0 0 0\n1 0 1\n' | drillbook components
4
$ printf '3\n1 01:10\n2 21:10\n2 31:30\n' | drillbook lead
20:00
16:30
$ echo AABB | drillbook palindrome
ABBA
```

Malformed input makes the command print an error to standard error and exit
with status 1. `drillbook --help` lists the subcommands.

## What it does not do

Only the four drills above can be run from the command line; every other
drill is available only as a library function. The package keeps no state
between runs and reads no files.