"""Guest pieces that players place on seats."""

import copy

import pygame

from .coalition import Coalition
from .geometry import Rect

PIECE_SIZES = {
    Coalition.GREEN: (296.0, 340.0),
    Coalition.BLUE: (430.0, 278.0),
    Coalition.PINK: (330.0, 268.0),
    Coalition.ORANGE: (250.0, 295.0),
}
PIECE_SCALE = 0.3


class Piece:
    """A guest of one coalition owned by one player, shown happy or sad."""

    def __init__(self, coalition: Coalition, player: str, happy_texture, sad_texture) -> None:
        self.coalition = Coalition(coalition)
        self.player = player
        self.selected = False
        self.width, self.height = PIECE_SIZES.get(self.coalition, (0.0, 0.0))
        self.scale = PIECE_SCALE
        self.happy_texture = happy_texture
        self.sad_texture = sad_texture
        self.texture = happy_texture
        self.x = 0.0
        self.y = 0.0

    @property
    def bounds(self) -> Rect:
        width, height = self.texture.get_size()
        return Rect(self.x, self.y, width * self.scale, height * self.scale)

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_texture(self, happy: bool) -> None:
        self.texture = self.happy_texture if happy else self.sad_texture

    def copy(self) -> "Piece":
        """An independent piece sharing the same textures."""
        return copy.copy(self)

    def draw(self, surface: "pygame.Surface") -> None:
        width, height = self.texture.get_size()
        size = (max(round(width * self.scale), 0), max(round(height * self.scale), 0))
        surface.blit(pygame.transform.scale(self.texture, size), (self.x, self.y))