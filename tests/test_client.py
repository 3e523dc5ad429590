import socket

import pygame
import pytest

from topotactics.board import Board
from topotactics.client import (
    Client,
    MenuButton,
    _handle_click,
    apply_update,
    load_cards,
    load_pieces,
    receive_messages,
)
from topotactics.coalition import Coalition
from topotactics.colors import GREEN, RED, WHITE, Color
from topotactics.network import Packet, receive_packet, send_packet
from topotactics.piece import Piece
from topotactics.textures import TextureManager
from topotactics.vertex import Vertex


def _surface(width=10, height=10):
    return pygame.Surface((width, height))


def _all_pieces():
    pieces = []
    for player in ("Player 1", "Player 2"):
        for coalition in (Coalition.GREEN, Coalition.BLUE, Coalition.PINK, Coalition.ORANGE):
            pieces.append(Piece(coalition, player, _surface(), _surface()))
    return pieces


def _two_seat_board():
    board = Board()
    board.add_connection(Vertex(1, 100, 100), Vertex(2, 200, 100))
    return board


def _update_packet(entries, turn):
    packet = Packet().write_uint32(len(entries))
    for vertex_id, color in entries:
        packet.write_int32(vertex_id).write_uint32(color.to_integer())
    return Packet.from_bytes(packet.write_string(turn).to_bytes())


def test_connect_reads_identity_and_turn():
    client = Client()
    a, b = socket.socketpair()
    with a, b:
        send_packet(b, Packet().write_string("Player 2").write_string("Player 1"))
        client.connect(a)
    assert client.identity == "Player 2"
    assert client.player_turn == "Player 1"


def test_connect_raises_when_server_leaves():
    a, b = socket.socketpair()
    with a:
        b.close()
        with pytest.raises(ConnectionError):
            Client().connect(a)


def test_board_selection_round_trip():
    sender, receiver = Client(), Client()
    a, b = socket.socketpair()
    with a, b:
        sender.send_board_selection(a, 3)
        assert receiver.receive_board_selection(b) == 3


def test_send_neighbor_colors_wire_format():
    client = Client()
    first, second = Vertex(7, 0, 0), Vertex(9, 0, 0)
    a, b = socket.socketpair()
    with a, b:
        client.send_neighbor_colors([(first, GREEN), (second, RED)], a)
        packet = receive_packet(b)
    assert packet.read_uint32() == 2
    assert packet.read_int32() == 7
    assert Color.from_integer(packet.read_uint32()) == GREEN
    assert packet.read_int32() == 9
    assert Color.from_integer(packet.read_uint32()) == RED
    assert packet.at_end


def test_increment_turn_releases_reserved_seat_within_target():
    client = Client()
    seat = Vertex(1, 0, 0)
    seat.reserved = True
    client.reserved_seat = seat
    client.set_target_turn(0, 2)
    client.increment_turn()
    assert seat.reserved is False
    assert client.reserved_seat is None


def test_increment_turn_keeps_seat_without_card():
    client = Client()
    seat = Vertex(1, 0, 0)
    seat.reserved = True
    client.reserved_seat = seat
    before = client.current_turn
    client.increment_turn()
    assert client.current_turn == before + 1
    assert client.reserved_seat is seat
    assert seat.reserved is True


def test_inside_joke_lasts_for_its_turns():
    client = Client()
    assert client.inside_joke_in_effect() is False
    client.set_target_turn(3, 1)
    assert client.target_turn[3] == client.current_turn + 1
    assert client.inside_joke_in_effect() is True
    client.increment_turn()
    assert client.inside_joke_in_effect() is True
    client.increment_turn()
    assert client.inside_joke_in_effect() is False


def test_guest_swap_list():
    client = Client()
    first, second = Vertex(1, 0, 0), Vertex(2, 0, 0)
    client.add_guest_to_swap(first)
    assert client.can_swap() is False
    client.add_guest_to_swap(second)
    assert client.can_swap() is True
    assert client.guest(0) is first
    assert client.guest(1) is second
    client.clear_guests_to_swap()
    assert client.can_swap() is False
    with pytest.raises(IndexError):
        client.guest(0)


def test_menu_button_hit_area():
    button = MenuButton("Map 1", None, 300, 200)
    assert button.is_clicked(300, 200)
    assert button.is_clicked(499, 249)
    assert not button.is_clicked(500, 200)
    assert not button.is_clicked(299, 200)
    assert not button.is_clicked(300, 250)


def test_apply_update_sets_colors_turn_and_score():
    board = _two_seat_board()
    board.vertex(1).player = "Player 1"
    client = Client()
    client.identity = "Player 1"
    score = apply_update(board, client, _update_packet([(1, GREEN), (2, RED)], "Player 2"))
    assert board.vertex(1).fill_color == GREEN
    assert board.vertex(2).outline_color == RED
    assert board.vertex(2).happy is False
    assert board.vertex(1).has_piece is False
    assert client.player_turn == "Player 2"
    assert score == client.score == 1


def test_apply_update_places_opponent_piece():
    board = _two_seat_board()
    pieces = _all_pieces()
    for piece in pieces:
        board.add_piece(piece)
    client = Client()
    client.identity = "Player 1"
    apply_update(board, client, _update_packet([(2, GREEN)], "Player 1"))
    seat = board.vertex(2)
    assert seat.coalition == Coalition.GREEN
    assert seat.piece.player == pieces[4].player


def test_inside_joke_doubles_matching_guests():
    def scored(with_joke):
        board = _two_seat_board()
        seat = board.vertex(1)
        seat.set_piece(Piece(Coalition.GREEN, "Player 1", _surface(), _surface()))
        seat.player = "Player 1"
        client = Client()
        client.identity = "Player 1"
        if with_joke:
            client.inside_joke = Coalition.GREEN
            client.set_target_turn(3, 1)
        return apply_update(board, client, _update_packet([(1, GREEN)], "Player 2"))

    assert scored(True) == 2 * scored(False)
    assert scored(False) > 0


def test_receive_messages_applies_until_closed():
    board = _two_seat_board()
    board.vertex(1).player = "Player 1"
    client = Client()
    client.identity = "Player 1"
    a, b = socket.socketpair()
    with a:
        send_packet(b, _update_packet([(1, GREEN)], "Player 2"))
        b.close()
        receive_messages(a, board, client)
    assert board.vertex(1).fill_color == GREEN
    assert client.player_turn == "Player 2"


def test_apply_update_unknown_seat_raises():
    board = _two_seat_board()
    with pytest.raises(KeyError):
        apply_update(board, Client(), _update_packet([(42, GREEN)], "Player 1"))


def test_load_cards(tmp_path):
    for card_id in range(4):
        pygame.image.save(_surface(80, 120), str(tmp_path / f"card{card_id}.png"))
    board = Board()
    cards = []
    result = load_cards(board, cards, tmp_path)
    assert result is cards
    assert [card.id for card in cards] == [0, 1, 2, 3]
    assert [card.x for card in cards] == [100, 250, 400, 550]
    assert all(card.y == 325 for card in cards)
    assert board.cards == cards


def test_load_cards_missing_image(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_cards(Board(), [], tmp_path)


def test_load_pieces(tmp_path):
    pygame.image.save(_surface(1700, 1700), str(tmp_path / "CharactersHighlights.png"))
    textures = TextureManager(tmp_path)
    board = Board()
    own = load_pieces(board, textures, "Player 2")
    assert len(board.pieces) == 8
    assert [p.coalition for p in board.pieces[:4]] == [
        Coalition.GREEN,
        Coalition.BLUE,
        Coalition.PINK,
        Coalition.ORANGE,
    ]
    assert [p.coalition for p in board.pieces[4:]] == [p.coalition for p in board.pieces[:4]]
    assert all(p.player == "Player 1" for p in board.pieces[:4])
    assert own == board.pieces[4:]
    assert board.draw_pieces == own
    assert own[0].x == 50
    assert all(p.y == 350 for p in own)
    assert all(left.x < right.x for left, right in zip(own, own[1:]))
    assert textures.get("Dad1Sad").get_size() == (336, 376)


def test_click_places_selected_piece_and_sends_move():
    board = Board()
    seat = Vertex(1, 100, 100)
    board.add_vertex(seat)
    client = Client()
    client.identity = "Player 1"
    client.selected_piece = Piece(Coalition.GREEN, "Player 1", _surface(), _surface())
    client.has_selected_piece = True
    before = client.current_turn
    a, b = socket.socketpair()
    with a, b:
        placed = _handle_click(board, client, a, [], 100, 100)
        packet = receive_packet(b)
    assert placed is True
    assert seat.coalition == Coalition.GREEN
    assert seat.player == "Player 1"
    assert client.current_turn == before + 1
    assert client.has_selected_piece is False
    assert packet.read_uint32() == 1
    assert packet.read_int32() == 1
    assert Color.from_integer(packet.read_uint32()) == GREEN


def test_click_on_reserved_seat_of_opponent_is_refused():
    board = Board()
    seat = Vertex(1, 100, 100)
    seat.reserved = True
    seat.player = "Player 2"
    board.add_vertex(seat)
    client = Client()
    client.identity = "Player 1"
    client.selected_piece = Piece(Coalition.BLUE, "Player 1", _surface(), _surface())
    client.has_selected_piece = True
    placed = _handle_click(board, client, None, [], 100, 100)
    assert placed is False
    assert seat.has_piece is False
    assert seat.fill_color == WHITE
    assert client.has_selected_piece is True


def test_reserved_seating_card_reserves_empty_seat():
    board = Board()
    seat = Vertex(1, 100, 100)
    board.add_vertex(seat)
    client = Client()
    client.identity = "Player 1"
    client.activating_card = 0
    _handle_click(board, client, None, [], 100, 100)
    assert seat.reserved is True
    assert seat.player == "Player 1"
    assert client.reserved_seat is seat
    assert client.activating_card == -1
    assert client.target_turn[0] == client.current_turn + 2