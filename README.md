# automatas

Small, dependency-free cellular automata: a one-dimensional rule 110
automaton, the classic Langton's ant on a bounded tape, a multi-colour tape
for generalised ants, and a Game of Life cell.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running Langton's ant

```
langton-ant config.txt
```

`langton-ant -h` (or `--help`) prints the help. The configuration file looks
like this:

```
10 10
5 5 2
4 5
6 6
```

- Line 1: tape width and height.
- Line 2: ant x, y and direction (`0` west, `1` east, `2` north, `3` south).
- Following lines: `x y` of each black cell; cells outside the tape are
  ignored.

After the file is loaded, press ENTER to start. During the run, press ENTER
to take a step, `s` to save the current state to a file (in the same format)
or `q` to stop. When the ant leaves the tape the final picture is shown; in
either case you are then offered to save the final state. The command prints
the number of steps taken and exits with status 1 if the file cannot be read
or is malformed.

## Using the library

### Elementary automaton — `automatas.elementary.automaton`

`Lattice(size, border, temperature)` holds a row of `Cell` objects with only
the middle cell alive. `border` is `Border.OPEN` or `Border.PERIODIC` (or the
strings `"open"` / `"periodic"`); with an open border the cells beyond the
ends take the state `temperature`. Each generation applies rule 110.

```python
from automatas.elementary.automaton import Border, Lattice

lattice = Lattice(21, Border.OPEN, temperature=False)
for _ in range(5):
    lattice.next_generation()
    print(lattice)          # e.g. "[          XX         ]"
print(lattice.alive_cells(), lattice.dead_cells())
```

`Lattice.from_file(filename, border, temperature)` reads the first line of a
file as a row of `0`/`1` digits; `lattice.load(filename)` replaces the cells
of an existing lattice the same way. `initial_setting()` resets to a single
live middle cell. `lattice.cell(i)` raises `IndexError` outside the row.

### Langton's ant — `automatas.langton`

- `tape.Tape(size_x, size_y)`: a grid of white (0) and black (1) cells with
  `get`, `set`, `is_valid_position`, `render_cell`, `load_cells(text)` and
  `save(filename, ant_x, ant_y, ant_direction)`. Out-of-range access raises
  `IndexError`; a non-positive size raises `ValueError`.
- `ant.Ant(x, y, direction, tape)` with `ant.Direction` (`LEFT`, `RIGHT`,
  `UP`, `DOWN`). `move()` paints white black and turns left, or black white
  and turns right, then advances.
- `simulator.Simulator`: built from sizes and ant position, from
  configuration text with `Simulator.parse(text)`, or from a file with
  `Simulator.from_file(filename)`.

```python
from automatas.langton.simulator import Simulator

sim = Simulator.from_file("config.txt")
while not sim.is_finished():
    sim.step()
print(sim.render())
print(sim.steps)
sim.save_state("final.txt")
```

`Simulator.run(stdin, stdout)` is the interactive loop used by the command.

### Multi-colour tape — `automatas.generalized.tape`

`Tape(size_x, size_y, number_colors)` stores colours from `Color` (`WHITE`,
`BLACK`, `RED`, `GREEN`, `BLUE`, `YELLOW`, `MAGENTA`, `CYAN`). `set` wraps
the value modulo `number_colors`; fewer than two colours raises
`ValueError`. `render_cell` gives a space for white and an ANSI background
block otherwise. `load_cells(text)` reads `x y colour` triples, and
`save(filename, ants)` writes the size line, the ants as
`type x y <symbol>` separated by ` ; `, and every non-white cell.

### Game of Life cell — `automatas.life.cell`

`Cell(position, state)` computes its next state under rule 23/3 with
`next_state(lattice)` and applies it with `update_state()`. The lattice
passed in only needs a `border` attribute whose `get_cell(lattice,
(row, col))` returns the neighbouring `Cell`; how cells beyond the edge are
resolved is up to that object.

## What the package does not do

- There are no generalised ant types or multi-ant simulator: the
  `automatas.generalized` package provides only the coloured `Tape`.
- There is no Game of Life grid, border implementation, file loading or
  saving: `automatas.life` provides only `Cell`, so you bring your own
  lattice and border.
- The only command is `langton-ant`; the elementary automaton and the other
  parts are used from Python.