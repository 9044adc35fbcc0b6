"""Spreading the ants over the chosen paths and moving them turn by turn."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from itertools import cycle
from typing import TextIO

from lemin.errors import NotEnoughData
from lemin.model import Ant, Path, Simulation, new_ant

_GREEN = "\033[1;32m"
_RESET = "\033[0m"


def _load(path: Path) -> int:
    return path.size + path.ants_in_path


def _next_higher_load(paths: list[Path], load: int) -> int:
    """The first load above ``load``, or the last path's load if none is."""
    return next((_load(path) for path in paths if _load(path) > load), _load(paths[-1]))


def _add_ant(path: Path, number: int) -> None:
    path.ants_in_path += 1
    path.ants.append(new_ant(number, path))


def _fill(paths: list[Path], remaining: int, number: int) -> None:
    for path in cycle(paths):
        if remaining <= 0:
            break
        _add_ant(path, number)
        remaining -= 1
        number += 1


def queue_ants(paths: Iterable[Path]) -> list[Ant]:
    """Take the ants off the paths, one per path in turn, into a single queue."""
    paths = list(paths)
    if not paths:
        return []
    queue: list[Ant] = []
    while True:
        for path in paths:
            if path.ants:
                queue.append(path.ants.pop(0))
        if not paths[0].ants:
            break
    return queue


def assign_ants(paths: Iterable[Path], simulation: Simulation) -> list[Ant]:
    """Give every ant a path, balancing length plus load, and queue them.

    The queue is built from ``simulation.best_paths`` and stored as
    ``simulation.ants_queue``.
    """
    paths = list(paths)
    if not paths:
        raise NotEnoughData()
    remaining = simulation.ants
    number = 1
    while remaining > 0:
        current = _load(paths[0])
        target = _next_higher_load(paths, current)
        if target == current:
            _fill(paths, remaining, number)
            break
        for path in paths:
            if path.size == target:
                break
            _add_ant(path, number)
            remaining -= 1
            number += 1
    simulation.ants_queue = queue_ants(simulation.best_paths)
    return simulation.ants_queue


def format_move(ant: Ant) -> str:
    """The move of an ant into its current room, as 'L<number>-<room> '."""
    return f"L{ant.number}-{ant.room.name} "


def _move_forward(ant: Ant, out: TextIO) -> bool:
    ant.moved = True
    ant.path.full = False
    ant.position += 1
    out.write(format_move(ant))
    return ant.position == len(ant.path.rooms) - 1


def move_ants(ants: Iterable[Ant], out: TextIO | None = None) -> int:
    """Print the moves of every turn and return the number of turns."""
    out = sys.stdout if out is None else out
    pending = deque(ants)
    queue: deque[Ant] = deque()
    turns = 0
    while pending or queue:
        while pending and not pending[0].path.full:
            ant = pending.popleft()
            queue.append(ant)
            ant.path.full = True
        while queue and not queue[0].moved:
            if _move_forward(queue[0], out):
                queue.popleft()
            else:
                queue.rotate(-1)
        for ant in queue:
            ant.moved = False
        out.write("\n")
        turns += 1
        if not queue:
            break
    out.write(f"{_RESET}\n{_GREEN}Solved in : {turns}{_RESET}\n")
    return turns