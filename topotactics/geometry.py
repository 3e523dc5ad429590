"""Rectangles and the edges drawn between seats."""

from dataclasses import dataclass

import pygame

from .colors import BLACK, Color


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = sorted((self.left, self.left + self.width))
        min_y, max_y = sorted((self.top, self.top + self.height))
        return min_x <= x < max_x and min_y <= y < max_y


class Line:
    """A straight edge between two seats, remembering their ids."""

    def __init__(self, source, target, color: Color = BLACK) -> None:
        self.from_id = source.id
        self.to_id = target.id
        self.start = (source.x, source.y)
        self.end = (target.x, target.y)
        self.color = color

    def set_from_coords(self, x: float, y: float) -> None:
        self.start = (x, y)

    def set_to_coords(self, x: float, y: float) -> None:
        self.end = (x, y)

    def draw(self, surface: "pygame.Surface") -> None:
        pygame.draw.line(surface, self.color.rgba, self.start, self.end)