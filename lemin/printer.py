"""Coloured text dumps of rooms, paths, ants and simulations."""

from __future__ import annotations

from collections.abc import Iterable

from lemin.model import Ant, Graph, Path, Room, Simulation

_RED = "\033[1;31m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"
_MAGENTA = "\033[1;35m"
_RESET = "\033[0m"


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{_RESET}"


def _field(prefix: str, value: object) -> str:
    return _paint(_YELLOW, prefix) + _paint(_BLUE, str(value)) + "\n"


def _float_field(prefix: str, value: float) -> str:
    return _field(prefix, f"{value:.6f}")


def _bool_field(prefix: str, value: bool) -> str:
    return _field(prefix, "true" if value else "false")


def _name_list(label: str, names: Iterable[str]) -> str:
    painted = [_paint(_BLUE, name) for name in names]
    return _paint(_YELLOW, label) + " | ".join(painted) + ("\n" if painted else "")


def _room_names(label: str, rooms: Iterable[Room]) -> str:
    return _name_list(label, (room.name for room in rooms))


def format_room(room: Room) -> str:
    return "".join(
        [
            _paint(_MAGENTA, "\n---\nRoom : \n"),
            _field("Name : ", room.name),
            _bool_field("Start : ", room.is_start),
            _bool_field("End : ", room.is_end),
            _bool_field("IsSeen: ", room.seen),
            _bool_field("IsInQueue: ", room.in_queue),
            _field("Used In Paths: ", room.used_in_path),
            _paint(_YELLOW, "Position : "),
            f"{_BLUE} X = {room.x} Y = {room.y}{_RESET}\n",
            _field("Number of Neighbors: ", room.neigh_size),
            _room_names("Neighbors : ", room.neighbors),
            "\n",
        ]
    )


def format_path(path: Path) -> str:
    rule = _paint(_RED, "\n-------------------------------\n")
    return "".join(
        [
            rule,
            _bool_field("Unique : ", path.unique),
            _field("Path Size : ", path.size),
            _float_field("Heuristic : ", path.heuristic),
            _field("num of pb nodes : ", path.pb_count),
            _room_names("Multi Room : ", path.multi_rooms),
            _room_names("Problematic Room : ", path.problematic_rooms),
            _field("Total Weigh : ", int(path.total_weight)),
            rule,
        ]
    )


def format_paths(paths: Iterable[Path]) -> str:
    head = _paint(_MAGENTA, "\n" + "-" * 89 + "\nPaths : \n")
    tail = _paint(_MAGENTA, "\n" + "-" * 88 + "\n")
    return head + "".join(format_path(path) for path in paths) + tail


def format_ant(ant: Ant) -> str:
    return "".join(
        [
            _field("ant number :", ant.number),
            _room_names("path used : ", ant.path.rooms[ant.position:]),
            _float_field("ant posX:", ant.x),
            _float_field("ant posY:", ant.y),
            _bool_field("Reached: ", ant.reached),
            "\n",
        ]
    )


def format_graph(graph: Graph) -> str:
    return (
        _paint(_MAGENTA, "\n-----\nGraph : \n")
        + _field("Number of Rooms : ", graph.num_rooms)
        + "".join(format_room(room) for room in graph.rooms)
    )


def format_simulation(simulation: Simulation) -> str:
    return (
        _paint(_MAGENTA, "Simulation\n----------\n\n")
        + _field("Number of Ants : ", simulation.ants)
        + _name_list("ALL Rooms Names : ", simulation.room_names)
        + format_graph(simulation.graph)
    )