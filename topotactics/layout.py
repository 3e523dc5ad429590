"""A row of pieces laid out left to right."""

from .piece import Piece


class HorizontalLayout:
    """Places pieces side by side from a starting point with fixed padding."""

    def __init__(self, x: float, y: float, padding: float) -> None:
        self.x = x
        self.y = y
        self.padding = padding
        self.items: list[Piece] = []

    def add(self, piece: Piece) -> None:
        self.items.append(piece)

    def calculate(self) -> None:
        """Position every piece after the one before it."""
        running = self.x
        for piece in self.items:
            piece.set_position(running, self.y)
            running += self.padding + piece.width * piece.scale

    def draw(self, surface) -> None:
        for piece in self.items:
            piece.draw(surface)