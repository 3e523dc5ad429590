"""A clickable image button."""

from typing import Callable

import pygame

from .geometry import Rect


class Button:
    """Shows a pressed image while held and runs an action on release."""

    def __init__(self, unclicked, clicked, x: float, y: float) -> None:
        self.unclicked = unclicked
        self.clicked = clicked
        self.x = x
        self.y = y
        self.current = unclicked
        self.on_click: Callable[[], object] | None = None

    @property
    def bounds(self) -> Rect:
        width, height = self.current.get_size()
        return Rect(self.x, self.y, width, height)

    def bind_on_click(self, action: Callable[[], object]) -> None:
        self.on_click = action

    def mouse_pressed(self, x: float, y: float) -> None:
        if self.bounds.contains(x, y):
            self.current = self.clicked

    def mouse_released(self, x: float, y: float) -> None:
        self.current = self.unclicked
        if self.bounds.contains(x, y) and self.on_click is not None:
            self.on_click()

    def draw(self, surface: "pygame.Surface") -> None:
        surface.blit(self.current, (self.x, self.y))