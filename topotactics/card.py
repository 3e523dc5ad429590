"""Action cards a player can play."""

import pygame

from .colors import CardProps, Color
from .geometry import Rect

CARD_SCALE = 0.125


class Card:
    """A playable card shown as a scaled image."""

    def __init__(self, card_id: int, x: float, y: float, texture, props: CardProps | None = None) -> None:
        self.id = card_id
        self.x = x
        self.y = y
        self.texture = texture
        self.scale = CARD_SCALE
        self.props = props if props is not None else CardProps()
        self.outline_color: Color = self.props.card_outline_color
        self.hovered = False
        self.selected = False
        self.played = False

    @property
    def bounds(self) -> Rect:
        width, height = self.texture.get_size()
        return Rect(self.x, self.y, width * self.scale, height * self.scale)

    def set_selected(self, select: bool) -> None:
        self.selected = select
        self.outline_color = (
            self.props.card_selected_outline_color if select else self.props.card_outline_color
        )

    def draw(self, surface: "pygame.Surface") -> None:
        width, height = self.texture.get_size()
        size = (round(width * self.scale), round(height * self.scale))
        surface.blit(pygame.transform.scale(self.texture, size), (self.x, self.y))