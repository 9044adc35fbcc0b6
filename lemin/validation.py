"""Classification and validation of input lines and rooms."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lemin.model import Room

_DIGITS = frozenset("0123456789")


def _is_printable(char: str) -> bool:
    return 32 <= ord(char) <= 126


def is_valid_num(text: str) -> bool:
    """True for an optional '-' followed by at least one digit."""
    body = text[1:] if text.startswith("-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def is_positive_number(text: str) -> bool:
    """True when every character is a digit (vacuously true for '')."""
    return all(char in _DIGITS for char in text)


def only_digit_str(text: str) -> bool:
    """True when every character is a digit or '-'."""
    return all(char in _DIGITS or char == "-" for char in text)


def is_comment(text: str) -> bool:
    """A comment starts with one '#' not followed by another."""
    return text.startswith("#") and not text.startswith("##")


def is_start(text: str) -> bool:
    return text == "##start"


def is_end(text: str) -> bool:
    return text == "##end"


def is_room(text: str) -> bool:
    """A room line holds exactly two spaces."""
    return text.count(" ") == 2


def is_link(text: str) -> bool:
    """A link line holds exactly one dash."""
    return text.count("-") == 1


def is_instruction(text: str) -> bool:
    return text.startswith("##")


def is_null_or_empty(text: str | None) -> bool:
    return text is None or text == ""


def name_is_valid(room: Room | None, names: Iterable[str]) -> bool:
    """A room name must be printable, free of '-', and not already taken."""
    if room is None:
        return False
    if any(char == "-" or not _is_printable(char) for char in room.name):
        return False
    return room.name not in names


def pos_is_valid(room: Room | None, rooms: Iterable[Room]) -> bool:
    """No two rooms may share the same coordinates."""
    if room is None:
        return False
    return not any(other.x == room.x and other.y == room.y for other in rooms)