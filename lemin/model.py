"""Data model of an ant farm simulation."""

from __future__ import annotations

import re
import struct
from collections.abc import Iterable
from dataclasses import dataclass, field

from lemin.validation import is_valid_num

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Color:
    a: int
    r: int
    g: int
    b: int


def red_color() -> Color:
    return Color(255, 126, 28, 41)


def green_color() -> Color:
    return Color(255, 29, 109, 63)


def grey_color() -> Color:
    return Color(255, 20, 20, 20)


def blue_color() -> Color:
    return Color(255, 40, 121, 190)


def white_color() -> Color:
    return Color(255, 255, 255, 255)


@dataclass
class VisualColors:
    """Colours used when the farm is drawn."""

    background: Color = field(default_factory=grey_color)
    rooms: Color = field(default_factory=blue_color)
    start: Color = field(default_factory=red_color)
    end: Color = field(default_factory=green_color)
    link: Color = field(default_factory=white_color)


@dataclass(eq=False)
class Room:
    name: str
    x: int = 0
    y: int = 0
    is_start: bool = False
    is_end: bool = False
    neighbors: list[Room] = field(default_factory=list, repr=False)
    seen: bool = False
    in_queue: bool = False
    up_used: bool = False
    used_in_path: int = 0
    neigh_size: int = 0

    def is_multi_node(self) -> bool:
        """A room with more than two links."""
        return self.neigh_size > 2

    def is_problematic(self) -> bool:
        """A room shared by more than one path."""
        return self.used_in_path > 1


def parse_room(line: str) -> Room | None:
    """Build a room from 'name x y', or return None if the line is malformed."""
    parts = [part for part in line.split(" ") if part]
    if len(parts) != 3:
        return None
    name, x, y = parts
    if not is_valid_num(x) and not is_valid_num(y):
        return None
    return Room(name, _atoi(x), _atoi(y))


@dataclass
class Graph:
    rooms: list[Room] = field(default_factory=list)
    start: Room | None = None
    end: Room | None = None

    @property
    def num_rooms(self) -> int:
        return len(self.rooms)

    def room_named(self, name: str) -> Room | None:
        return next((room for room in self.rooms if room.name == name), None)

    def reset_search(self) -> None:
        """Clear the marks left by a breadth-first search."""
        for room in self.rooms:
            room.seen = False
            room.in_queue = False

    def reset_all(self) -> None:
        """Clear search marks and path usage counters."""
        for room in self.rooms:
            room.used_in_path = 0
            room.in_queue = False
            room.seen = False


@dataclass(eq=False)
class Path:
    rooms: list[Room] = field(default_factory=list)
    multi_rooms: list[Room] = field(default_factory=list)
    problematic_rooms: list[Room] = field(default_factory=list)
    size: int = 0
    unique: bool = False
    pb_count: int = 0
    ants_in_path: int = 0
    ants: list[Ant] = field(default_factory=list, repr=False)
    full: bool = False
    sorted: bool = False
    color: Color | None = None
    heuristic: float = -42000.0
    total_weight: float = 1.0


@dataclass(eq=False)
class Ant:
    number: int
    path: Path = field(repr=False)
    position: int = 0
    x: float = 0.0
    y: float = 0.0
    dist_x: float = 0.0
    dist_y: float = 0.0
    reached: bool = False
    moved: bool = False
    in_queue: bool = False
    ended: bool = False
    color: Color | None = None

    @property
    def room(self) -> Room:
        """The room the ant currently stands in."""
        return self.path.rooms[self.position]


def new_ant(number: int, path: Path) -> Ant:
    """An ant placed at the first room of its path."""
    first = path.rooms[0]
    return Ant(number, path, x=float(first.x), y=float(first.y), color=path.color)


@dataclass
class Simulation:
    graph: Graph = field(default_factory=Graph)
    ants: int = 0
    visu: bool = False
    room_names: list[str] = field(default_factory=list)
    all_paths: list[list[Path]] = field(default_factory=list)
    faster_paths: list[list[Path]] = field(default_factory=list)
    best_paths: list[Path] = field(default_factory=list)
    ants_queue: list[Ant] = field(default_factory=list)
    colors: VisualColors | None = None

    def is_incomplete(self) -> bool:
        """True when nothing at all was read."""
        if self.room_names:
            return False
        if self.all_paths or self.faster_paths or self.best_paths:
            return False
        graph = self.graph
        if graph.rooms or graph.start is not None or graph.end is not None:
            return False
        return True


def init_problematic_nodes(path_groups: Iterable[Iterable[Path]]) -> None:
    """Mark shared rooms on every path and score each path by its heuristic."""
    for group in path_groups:
        for path in group:
            problematic = [room for room in path.multi_rooms if room.used_in_path > 1]
            path.problematic_rooms.extend(problematic)
            path.pb_count = len(problematic)
            path.heuristic = _to_float32(1 / (path.size + path.pb_count * 1.5))
            if not problematic:
                path.unique = True