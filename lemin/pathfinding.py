"""Breadth-first search for paths from a room to the end room."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from lemin.model import Path, Room, Simulation


@dataclass(eq=False)
class _Step:
    room: Room
    parent: _Step | None


def _walk_back(step: _Step | None) -> Iterator[Room]:
    while step is not None:
        yield step.room
        step = step.parent


def create_path(chain: Iterable[Room], start: Room | None) -> Path:
    """Build a path from rooms listed from its last room back to its first."""
    backwards = list(chain)
    multi = [
        room
        for room in backwards
        if room.is_multi_node() and not room.is_end and not room.is_start
    ]
    for room in multi:
        room.used_in_path += 1
    rooms = backwards[::-1]
    if rooms and not rooms[0].is_start and start is not None:
        rooms.insert(0, start)
    return Path(rooms=rooms, multi_rooms=multi, size=len(rooms))


def _enqueue(step: _Step, queue: deque[_Step]) -> bool:
    for neighbor in step.room.neighbors:
        if neighbor.is_end:
            neighbor.in_queue = True
            queue.appendleft(_Step(neighbor, step))
            return True
        if not neighbor.seen and not neighbor.in_queue:
            neighbor.in_queue = True
            queue.append(_Step(neighbor, step))
    return False


def find_paths(simulation: Simulation, start: Room) -> list[Path]:
    """Every path the search from ``start`` reaches the end room with."""
    start.seen = True
    queue: deque[_Step] = deque([_Step(start, None)])
    paths: list[Path] = []
    while queue:
        step = queue[0]
        step.room.seen = True
        if step.room.is_end or _enqueue(step, queue):
            paths.append(create_path(_walk_back(queue[0]), simulation.graph.start))
            queue.popleft()
        if queue:
            queue.popleft()
    simulation.graph.reset_search()
    return paths