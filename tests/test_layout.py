import pygame
import pytest

from topotactics.coalition import Coalition
from topotactics.layout import HorizontalLayout
from topotactics.piece import Piece


def _piece(coalition):
    texture = pygame.Surface((50, 50))
    texture.fill((0, 255, 0))
    return Piece(coalition, "Player 1", texture, texture)


def test_calculate_places_pieces_in_a_row():
    layout = HorizontalLayout(50, 350, 2)
    pieces = [_piece(c) for c in (Coalition.GREEN, Coalition.BLUE, Coalition.PINK, Coalition.ORANGE)]
    for piece in pieces:
        layout.add(piece)
    layout.calculate()
    assert (pieces[0].x, pieces[0].y) == (50, 350)
    assert all(piece.y == 350 for piece in pieces)
    for before, after in zip(pieces, pieces[1:]):
        assert after.x == pytest.approx(before.x + 2 + before.width * before.scale)


def test_items_keep_insertion_order():
    layout = HorizontalLayout(0, 0, 0)
    first, second = _piece(Coalition.BLUE), _piece(Coalition.GREEN)
    layout.add(first)
    layout.add(second)
    assert layout.items == [first, second]


def test_calculate_on_empty_layout():
    layout = HorizontalLayout(10, 10, 1)
    layout.calculate()
    assert layout.items == []


def test_draw_draws_every_piece():
    surface = pygame.Surface((200, 50))
    surface.fill((0, 0, 0))
    layout = HorizontalLayout(0, 0, 1)
    layout.add(_piece(Coalition.GREEN))
    layout.add(_piece(Coalition.BLUE))
    layout.calculate()
    layout.draw(surface)
    for piece in layout.items:
        assert tuple(surface.get_at((int(piece.x) + 2, 2)))[:3] == (0, 255, 0)