"""Reading an ant farm description line by line."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import TextIO

from lemin.errors import (
    BadInputFile,
    BadInstruction,
    BadLinkSettings,
    BadRoomSettings,
    FatalError,
    LinkAlreadyExists,
)
from lemin.model import Color, Room, Simulation, VisualColors, parse_room
from lemin.validation import (
    is_comment,
    is_end,
    is_instruction,
    is_link,
    is_positive_number,
    is_room,
    is_start,
    name_is_valid,
    pos_is_valid,
)

_COLOR_TARGETS = {
    "#background": "background",
    "#link": "link",
    "#start": "start",
    "#end": "end",
    "#rooms": "rooms",
}


class _Stage(Enum):
    ANTS = auto()
    ROOMS = auto()
    LINKS = auto()


def _is_color_component(text: str) -> bool:
    return is_positive_number(text) and int(text) <= 255


def _parse_color(text: str) -> Color | None:
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3 or not all(_is_color_component(part) for part in parts):
        return None
    red, green, blue = (int(part) for part in parts)
    return Color(255, red, green, blue)


def apply_color_comment(line: str, simulation: Simulation) -> bool:
    """Apply a '#target:r,g,b' colour comment; return whether it was applied."""
    parts = [part for part in line.split(":") if part]
    if len(parts) != 2:
        return False
    target = _COLOR_TARGETS.get(parts[0])
    color = _parse_color(parts[1])
    if target is None or color is None:
        return False
    if simulation.colors is None:
        simulation.colors = VisualColors()
    setattr(simulation.colors, target, color)
    return True


def handle_link(line: str, simulation: Simulation) -> None:
    """Link the two rooms named by a 'first-second' line."""
    names = [part for part in line.split("-") if part]
    if len(names) < 2 or not all(name in simulation.room_names for name in names[:2]):
        raise BadLinkSettings(line)
    first = simulation.graph.room_named(names[0])
    second = simulation.graph.room_named(names[1])
    if first is None or second is None:
        raise FatalError()
    if second in first.neighbors or first in second.neighbors:
        raise LinkAlreadyExists(line)
    first.neighbors.append(second)
    second.neighbors.append(first)
    first.neigh_size += 1
    second.neigh_size += 1


def _room_is_acceptable(room: Room | None, simulation: Simulation) -> bool:
    valid_name = name_is_valid(room, simulation.room_names)
    valid_pos = pos_is_valid(room, simulation.graph.rooms)
    return valid_name and valid_pos


def _add_room(simulation: Simulation, room: Room) -> None:
    simulation.room_names.append(room.name)
    simulation.graph.rooms.append(room)


def _read_special_room(
    instruction: str, source: Iterator[str], simulation: Simulation, out: TextIO
) -> None:
    raw = next(source, None)
    if raw is None:
        raise BadRoomSettings()
    room = parse_room(raw)
    if room is None or not _room_is_acceptable(room, simulation):
        raise BadRoomSettings(raw.replace("\n", ""))
    graph = simulation.graph
    if is_start(instruction) and graph.start is None:
        room.is_start = True
        graph.start = room
    elif is_end(instruction) and graph.end is None:
        room.is_end = True
        graph.end = room
    else:
        raise BadInstruction(instruction)
    _add_room(simulation, room)
    out.write(raw)


def parse_lines(
    lines: Iterable[str], visu: bool = False, out: TextIO | None = None
) -> Simulation:
    """Build a simulation from input lines, echoing them to ``out``."""
    out = sys.stdout if out is None else out
    simulation = Simulation(visu=visu, colors=VisualColors() if visu else None)
    stage = _Stage.ANTS
    source = iter(lines)
    for raw in source:
        line = raw.replace("\n", "")
        out.write(line + "\n")
        if not line:
            break
        if is_comment(line):
            if visu:
                apply_color_comment(line, simulation)
            continue
        if is_positive_number(line):
            if stage is not _Stage.ANTS:
                raise BadInputFile(line)
            simulation.ants = int(line)
            stage = _Stage.ROOMS
        elif is_instruction(line):
            if stage is not _Stage.ROOMS:
                raise BadInputFile(line)
            _read_special_room(line, source, simulation, out)
        elif is_room(line):
            if stage is not _Stage.ROOMS:
                raise BadInputFile(line)
            room = parse_room(line)
            if room is None or not _room_is_acceptable(room, simulation):
                raise BadRoomSettings(line)
            _add_room(simulation, room)
        elif is_link(line):
            stage = _Stage.LINKS
            handle_link(line, simulation)
        else:
            break
    out.write("\n")
    return simulation


def parse_stream(
    stream: TextIO | None = None, visu: bool = False, out: TextIO | None = None
) -> Simulation:
    """Build a simulation from a text stream (standard input by default)."""
    stream = sys.stdin if stream is None else stream
    return parse_lines(stream, visu, out)