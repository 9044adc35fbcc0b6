# lemin

A solver for the "lem-in" ant farm puzzle. You give it a number of ants, a set
of rooms and the tunnels between them. It searches for routes from the start
room to the end room, spreads the ants over those routes and prints every turn
of their trip.

## Installation

```
pip install .
```

## Usage

The `lem-in` command reads the map from standard input. It takes no arguments.
If you pass any, it prints `Invalid number of argument` and exits with status 1.

```
lem-in < map.txt
```

A map looks like this:

```
3
##start
start 0 0
a 1 0
b 1 1
##end
end 2 0
start-a
a-end
start-b
b-end
```

- The first line gives the number of ants. It must be made only of digits.
- A room line has the form `name x y`, with exactly two spaces. A room name
  may not contain `-` and must be printable. No two rooms may share a name or
  a position.
- `##start` or `##end` on the line before a room marks that room as the start
  or the end room. Each can be given only once.
- A link line has the form `name1-name2`, with exactly one `-`. Both rooms must
  exist, and the same link may not be given twice.
- A line that starts with a single `#` is a comment and is skipped.
- Reading stops at the first empty line, or at the first line that fits none
  of these forms.

The map is echoed first, followed by an empty line. After that comes one line
per turn. Each line lists the moves made in that turn as `L<ant>-<room>`. The
last line gives the number of turns. For the map above the output ends with:

```
L1-a L2-b
L1-end L2-end L3-a
L3-end
Solved in : 3
```

The final summary is printed in colour with ANSI escape codes.

When the input is invalid, the program prints the problem and, where there is
one, the offending line. Examples are `Bad room settings : ...`,
`Bad link settings : ...`, `Link already exists : ...`,
`Input file has a bad syntax : ...` and
`Data not enough to launch the simulation`. It then exits with status 1.

## Using it as a library

The steps of the program can be called one at a time:

```python
import io

from lemin.parser import parse_lines
from lemin.solution import create_solution
from lemin.distribution import assign_ants, move_ants

out = io.StringIO()
simulation = parse_lines(lines, False, out)   # echoes the map to `out`
create_solution(simulation)                   # sets simulation.best_paths
assign_ants(simulation.best_paths, simulation)
turns = move_ants(simulation.ants_queue, out)
```

- `lemin.parser.parse_stream(stream, visu, out)` reads from a text stream.
  By default it reads standard input and writes to standard output.
  When `visu` is true, comments of the form `#background:r,g,b`, `#link:...`,
  `#start:...`, `#end:...` and `#rooms:...` set the colours in
  `simulation.colors`.
- `lemin.pathfinding.find_paths(simulation, start)` runs the breadth-first
  search for paths from a room to the end room.
- `lemin.printer` formats rooms, paths, ants, graphs and simulations as
  coloured text dumps for debugging, through `format_room`, `format_path`,
  `format_paths`, `format_ant`, `format_graph` and `format_simulation`.
- `lemin.model` holds the data classes `Room`, `Graph`, `Path`, `Ant`,
  `Simulation`, `Color` and `VisualColors`.

All errors are raised as subclasses of `lemin.errors.LemInError`. Converting
one to a string gives the message shown above.

## What it does not do

The package computes the visual colours but has no graphical viewer. It
produces only text output.

## Running the tests

```
pip install .[test]
pytest
```