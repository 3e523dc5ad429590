"""Colours and the visual properties of vertices and cards."""

from dataclasses import dataclass

from .coalition import Coalition


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b, self.a):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")

    def to_integer(self) -> int:
        """Pack the colour as 0xRRGGBBAA."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @classmethod
    def from_integer(cls, value: int) -> "Color":
        """Unpack a colour packed as 0xRRGGBBAA."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed colour out of range: {value}")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
MAGENTA = Color(255, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0)
PINK = Color(255, 192, 203)
ORANGE = Color(255, 165, 0)

COALITION_COLORS = {
    Coalition.GREEN: GREEN,
    Coalition.BLUE: BLUE,
    Coalition.PINK: PINK,
    Coalition.ORANGE: ORANGE,
}


@dataclass(frozen=True)
class VertexProps:
    """Appearance shared by all seats on the board."""

    node_size: float = 15.0
    node_outline_thickness: int = 3
    node_fill_color: Color = WHITE
    node_outline_unhappy_color: Color = RED
    node_fill_hover_color: Color = BLUE
    node_outline_color: Color = BLACK
    node_outline_selected_color: Color = MAGENTA


@dataclass(frozen=True)
class CardProps:
    """Appearance shared by all action cards."""

    card_width: int = 60
    card_height: int = 90
    num_cards: int = 5
    card_outline_thickness: int = 5
    card_fill_color: Color = TRANSPARENT
    card_outline_color: Color = WHITE
    card_selected_outline_color: Color = YELLOW