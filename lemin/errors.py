"""Errors raised while reading or solving an ant farm."""

from __future__ import annotations


class LemInError(Exception):
    """Base error; its text is the message, followed by the offending line if any."""

    message = "Fatal Error"

    def __init__(self, line: str | None = None) -> None:
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} : {self.line}"


class InvalidArgumentCount(LemInError):
    """The program was started with arguments."""

    message = "Invalid number of argument"


class NotEnoughData(LemInError):
    """The input does not describe a farm that can be simulated."""

    message = "Data not enough to launch the simulation"


class FatalError(LemInError):
    """An internal inconsistency was found."""

    message = "Fatal Error"


class BadInputFile(LemInError):
    """A line appears where the input syntax does not allow it."""

    message = "Input file has a bad syntax"


class BadInstruction(LemInError):
    """An unknown or repeated ## instruction."""

    message = "Instruction doesn't exist or already set"


class BadRoomSettings(LemInError):
    """A room line is malformed, or its name or position is taken."""

    message = "Bad room settings"


class BadLinkSettings(LemInError):
    """A link names a room that does not exist."""

    message = "Bad link settings"


class LinkAlreadyExists(LemInError):
    """The same two rooms are linked twice."""

    message = "Link already exists"