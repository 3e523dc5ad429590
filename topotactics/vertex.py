"""Seats on the board."""

import pygame

from .coalition import Coalition
from .colors import Color, VertexProps
from .geometry import Rect
from .piece import Piece


class Vertex:
    """A seat drawn as an outlined circle, or as the piece sitting on it."""

    def __init__(self, vertex_id: int, x: float, y: float, props: VertexProps | None = None) -> None:
        self.id = vertex_id
        self.x = x
        self.y = y
        self.props = props if props is not None else VertexProps()
        self.fill_color: Color = self.props.node_fill_color
        self.outline_color: Color = self.props.node_outline_color
        self.hovered = False
        self.selected = False
        self.draggable = False
        self.happy = True
        self.piece: Piece | None = None
        self.player = ""
        self.reserved = False

    @property
    def has_piece(self) -> bool:
        return self.piece is not None

    @property
    def coalition(self) -> Coalition:
        return Coalition.NONE if self.piece is None else self.piece.coalition

    @coalition.setter
    def coalition(self, value: Coalition) -> None:
        if self.piece is None:
            raise ValueError(f"seat {self.id} has no piece")
        self.piece.coalition = Coalition(value)

    @property
    def bounds(self) -> Rect:
        """Bounding box of the circle including its outline."""
        reach = self.props.node_size + self.props.node_outline_thickness
        return Rect(self.x - reach, self.y - reach, 2 * reach, 2 * reach)

    def set_hovered(self, hover: bool) -> None:
        self.hovered = hover
        self.outline_color = (
            self.props.node_outline_selected_color if hover else self.props.node_outline_color
        )

    def set_happy(self, happy: bool) -> None:
        self.happy = happy
        if self.piece is not None:
            self.piece.set_texture(happy)

    def set_coords(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_piece(self, piece: Piece) -> None:
        """Seat a copy of the piece, centred on this seat and happy."""
        placed = piece.copy()
        bounds = placed.bounds
        placed.set_position(self.x - bounds.width / 2.0, self.y - bounds.height / 2.0)
        placed.set_texture(True)
        self.piece = placed
        self.happy = True

    def draw(self, surface: "pygame.Surface") -> None:
        if self.piece is not None:
            self.piece.draw(surface)
            return
        radius = self.props.node_size
        thickness = self.props.node_outline_thickness
        center = (self.x, self.y)
        if thickness > 0:
            pygame.draw.circle(surface, self.outline_color.rgba, center, radius + thickness)
        pygame.draw.circle(surface, self.fill_color.rgba, center, radius)