"""Choosing the set of paths the ants will walk."""

from __future__ import annotations

from collections.abc import Iterable

from lemin.errors import NotEnoughData
from lemin.model import Path, Room, Simulation, init_problematic_nodes
from lemin.pathfinding import find_paths


def _distinct(paths: Iterable[Path]) -> list[Path]:
    """Paths not yet marked as sorted, each object once, in first-seen order."""
    seen: set[int] = set()
    result = []
    for path in paths:
        if path.sorted or id(path) in seen:
            continue
        seen.add(id(path))
        result.append(path)
    return result


def _heuristic_key(path: Path) -> tuple[float, int]:
    return (-path.heuristic, path.size)


def is_augmented_path(path: Path, paths: Iterable[Path]) -> bool:
    """True when none of the path's shared rooms is shared by any of ``paths``."""
    taken = {
        room.name
        for other in paths
        for room in other.problematic_rooms
        if not (room.is_start or room.is_end)
    }
    return not any(room.name in taken for room in path.problematic_rooms)


def faster_augmented_paths(paths: Iterable[Path]) -> list[Path]:
    """Greedily keep the paths whose shared rooms do not clash with those kept."""
    chosen: list[Path] = []
    for path in paths:
        if is_augmented_path(path, chosen):
            chosen.append(path)
    return chosen


def multi_rooms(rooms: Iterable[Room]) -> list[Room]:
    """Rooms linked to more than two others."""
    return [room for room in rooms if len(room.neighbors) > 2]


def _merge_unique(found: list[Room], unique: list[Room]) -> None:
    # The search resumes where the previous match was found and, once it
    # has run past the end, every further room is appended.
    limit = len(unique)
    cursor = 0
    for room in found:
        while cursor < limit and unique[cursor].name != room.name:
            cursor += 1
        if cursor >= limit:
            unique.append(room)


def count_multi_rooms(path_groups: Iterable[Iterable[Path]]) -> None:
    """Count, for each multi room, how many path groups go through it."""
    for group in path_groups:
        unique: list[Room] = []
        for path in group:
            _merge_unique(multi_rooms(path.rooms), unique)
        for room in unique:
            room.used_in_path += 1


def sort_by_size(paths: Iterable[Path]) -> list[Path]:
    """Unsorted paths from shortest to longest; they are marked as sorted."""
    ordered = sorted(_distinct(paths), key=lambda path: path.size)
    for path in ordered:
        path.sorted = True
    return ordered


def sort_by_heuristic(paths: Iterable[Path]) -> list[Path]:
    """Unsorted paths from best to worst heuristic, shorter first on ties."""
    return sorted(_distinct(paths), key=_heuristic_key)


def find_best_heuristic(paths: Iterable[Path]) -> Path | None:
    """The path with the highest heuristic, the shortest one on ties."""
    return min(paths, key=_heuristic_key, default=None)


def _is_used_node(room: Room, path: Path) -> bool:
    return any(other.name == room.name for other in path.problematic_rooms)


def is_unused_path(path: Path, used: Iterable[Path]) -> bool:
    """True when a non-unique path clashes with none of the ``used`` paths."""
    if path.unique:
        return False
    used = list(used)
    first_step = path.rooms[1].name
    for room in path.problematic_rooms:
        for other in used:
            if other.rooms[1].name == first_step or _is_used_node(room, other):
                return False
    return True


def _release_rooms(paths: Iterable[Path]) -> None:
    released: set[int] = set()
    for path in paths:
        for room in path.rooms:
            if id(room) not in released and room.used_in_path > 0:
                released.add(id(room))
                room.used_in_path -= 1


def delete_used_paths(
    path_groups: Iterable[Iterable[Path]], used: Iterable[Path]
) -> list[Path]:
    """Paths still usable next to ``used``; the others give back their rooms."""
    used = list(used)
    kept: list[Path] = []
    dropped: list[Path] = []
    for group in path_groups:
        for path in group:
            (kept if is_unused_path(path, used) else dropped).append(path)
    _release_rooms(dropped)
    return kept


def unique_paths(path_groups: Iterable[Iterable[Path]]) -> list[Path]:
    """Every path that shares no room with another path."""
    return [path for group in path_groups for path in group if path.unique]


def calculate_heuristic(paths: Iterable[Path]) -> None:
    """Recompute the shared rooms and heuristic of every path."""
    paths = list(paths)
    for path in paths:
        path.problematic_rooms.clear()
        path.pb_count = 0
        path.heuristic = 0.0
    init_problematic_nodes([paths])


def create_heuristic_paths(simulation: Simulation) -> list[Path]:
    """Unique paths plus the best remaining ones, shortest first."""
    chosen = unique_paths(simulation.all_paths)
    while True:
        rest = delete_used_paths(simulation.all_paths, chosen)
        if not rest:
            break
        chosen.append(find_best_heuristic(rest))
    return sort_by_size(chosen)


def create_solution(simulation: Simulation) -> list[Path]:
    """Pick the paths for the ants and store them as ``best_paths``."""
    graph = simulation.graph
    if graph.start is None:
        raise NotEnoughData()
    fastest = find_paths(simulation, graph.start)
    if fastest:
        simulation.faster_paths.append(fastest)
        init_problematic_nodes(simulation.faster_paths)
    elif simulation.ants <= 0 or not simulation.faster_paths:
        raise NotEnoughData()
    faster = faster_augmented_paths(simulation.faster_paths[0])
    for neighbor in list(graph.start.neighbors):
        graph.start.seen = True
        simulation.all_paths.append(find_paths(simulation, neighbor))
    graph.reset_all()
    count_multi_rooms(simulation.all_paths)
    init_problematic_nodes(simulation.all_paths)
    flow = create_heuristic_paths(simulation)
    if len(faster) > len(flow) or simulation.ants <= len(faster):
        simulation.best_paths = faster
    else:
        simulation.best_paths = flow
    return simulation.best_paths