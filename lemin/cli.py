"""Command line entry point: read a farm on standard input and solve it."""

from __future__ import annotations

import sys

from lemin.distribution import assign_ants, move_ants
from lemin.errors import InvalidArgumentCount, LemInError, NotEnoughData
from lemin.parser import parse_stream
from lemin.solution import create_solution

_RED = "\033[1;31m"


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    out = sys.stdout
    if argv:
        out.write(f"{InvalidArgumentCount()}\n")
        return 1
    try:
        simulation = parse_stream()
        if simulation.is_incomplete():
            raise NotEnoughData()
        create_solution(simulation)
        assign_ants(simulation.best_paths, simulation)
        move_ants(simulation.ants_queue)
    except LemInError as error:
        out.write(f"{_RED}{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())