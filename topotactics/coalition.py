"""The factions a guest piece can belong to."""

from enum import IntEnum


class Coalition(IntEnum):
    """Faction of a piece; NONE marks an empty seat."""

    NONE = 0
    ORANGE = 1
    BLUE = 2
    GREEN = 3
    PINK = 4