"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


class Mark(StrEnum):
    """The symbol a player places. X always moves first."""

    X = "X"
    O = "O"
