#!/usr/bin/env python3
"""Failure kinds reported on a move result. The dispatcher catches these; nothing here is fatal."""


class PathfindingError(Exception):
    kind = "PathfindingError"

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class MissingStartOrGoal(PathfindingError):
    kind = "MissingStartOrGoal"


class OutOfBounds(PathfindingError):
    kind = "OutOfBounds"


class MissingParameters(PathfindingError):
    kind = "MissingParameters"


class InvalidCellType(PathfindingError):
    kind = "InvalidCellType"


class InvalidLevel(PathfindingError):
    kind = "InvalidLevel"


class UnknownAlgorithm(PathfindingError):
    kind = "UnknownAlgorithm"


class UnknownAction(PathfindingError):
    kind = "UnknownAction"


class NotInChallengeMode(PathfindingError):
    kind = "NotInChallengeMode"


class NoMoreLevels(PathfindingError):
    kind = "NoMoreLevels"


class DeserializationError(PathfindingError):
    kind = "DeserializationError"


class InvalidOption(PathfindingError):
    kind = "InvalidOption"


class LevelFormatError(PathfindingError):
    kind = "LevelFormatError"
