"""The game client: joins the relay server, shows the board and plays turns."""

import argparse
import socket
import sys
import threading
from pathlib import Path

import pygame

from .board import Board
from .card import Card
from .coalition import Coalition
from .colors import BLUE, RED, WHITE, Color, VertexProps
from .geometry import Rect
from .layout import HorizontalLayout
from .network import Packet, receive_packet, send_packet
from .piece import Piece
from .textures import TextureManager
from .vertex import Vertex

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2222
PLAYER_ONE = "Player 1"
PLAYER_TWO = "Player 2"

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_COLOR = WHITE

DEFAULT_FILES_DIR = Path("../files")
DEFAULT_ASSETS_DIR = Path("../assets")
DEFAULT_FONT = Path("../Fonts/MightySouly-lxggD.ttf")

# Card ids and the effect each one starts.
RESERVED_SEATING = 0
EMBARRASSING_FAMILY = 1
REARRANGEMENT = 2
INSIDE_JOKE = 3
NO_CARD = -1

CARD_POSITIONS = ((0, 100.0, 325.0), (1, 250.0, 325.0), (2, 400.0, 325.0), (3, 550.0, 325.0))

CHARACTER_SHEET = "CharactersHighlights"
# Sprite columns on the character sheet: left edge, width, height.
_SPRITE_COLUMNS = {
    "Dad": (0, 336, 376),
    "Mom": (472, 464, 308),
    "MH": (944, 360, 304),
    "Bro": (1416, 284, 332),
}
# Top edge of each sprite row, by player number and mood.
_SPRITE_ROWS = {
    (1, "Sad"): 0,
    (1, "Happy"): 424,
    (2, "Sad"): 848,
    (2, "Happy"): 1272,
}
_GUESTS = (
    (Coalition.GREEN, "Dad"),
    (Coalition.BLUE, "Mom"),
    (Coalition.PINK, "MH"),
    (Coalition.ORANGE, "Bro"),
)


class Client:
    """One player's view of the game: identity, turn, score and active card effects."""

    def __init__(self) -> None:
        self.identity = ""
        self.player_turn = ""
        self.selected_piece: Piece | None = None
        self.has_selected_piece = False
        self.current_turn = 1
        self.score = 0
        # Turn at which each card's effect ends; 0 means the card is not in effect.
        self.target_turn = [0, 0, 0, 0]
        self.activating_card = NO_CARD
        self.reserved_seat: Vertex | None = None
        self.guests_to_swap: list[Vertex] = []
        self.inside_joke = Coalition.NONE

    def connect(self, sock) -> None:
        """Receive this player's identity and the first turn from the server."""
        packet = receive_packet(sock)
        self.identity = packet.read_string()
        self.player_turn = packet.read_string()
        print(f"You are {self.identity}")
        print(f"player turn: {self.player_turn}")

    def send_board_selection(self, sock, selection: int) -> None:
        send_packet(sock, Packet().write_int32(selection))

    def receive_board_selection(self, sock) -> int:
        return receive_packet(sock).read_int32()

    def send_neighbor_colors(self, changed, sock) -> None:
        """Send the seats whose colours changed; the first entry is the placed piece's fill."""
        packet = Packet().write_uint32(len(changed))
        for vertex, color in changed:
            packet.write_int32(vertex.id)
            packet.write_uint32(color.to_integer())
        send_packet(sock, packet)

    def increment_turn(self) -> None:
        self.current_turn += 1
        if self.current_turn <= self.target_turn[RESERVED_SEATING] and self.reserved_seat is not None:
            self.reserved_seat.reserved = False
            self.reserved_seat = None

    def inside_joke_in_effect(self) -> bool:
        return self.current_turn <= self.target_turn[INSIDE_JOKE]

    def set_target_turn(self, card_id: int, turns: int) -> None:
        self.target_turn[card_id] = self.current_turn + turns

    def add_guest_to_swap(self, vertex: Vertex) -> None:
        self.guests_to_swap.append(vertex)

    def can_swap(self) -> bool:
        return len(self.guests_to_swap) == 2

    def guest(self, index: int) -> Vertex:
        return self.guests_to_swap[index]

    def clear_guests_to_swap(self) -> None:
        self.guests_to_swap.clear()


class MenuButton:
    """A labelled rectangle on the board selection menu."""

    WIDTH = 200
    HEIGHT = 50

    def __init__(self, text: str, font, x: float, y: float) -> None:
        self.text = text
        self.font = font
        self.rect = Rect(x, y, self.WIDTH, self.HEIGHT)

    def is_clicked(self, x: float, y: float) -> bool:
        return self.rect.contains(x, y)

    def draw(self, surface: "pygame.Surface") -> None:
        area = (self.rect.left, self.rect.top, self.rect.width, self.rect.height)
        pygame.draw.rect(surface, BLUE.rgba, area)
        if self.font is not None:
            label = self.font.render(self.text, True, WHITE.rgba)
            surface.blit(label, (self.rect.left + 50, self.rect.top + 10))


def apply_update(board: Board, client: Client, packet: Packet) -> int:
    """Apply one relayed move to the board, take the next turn and add to the score."""
    for index in range(packet.read_uint32()):
        vertex_id = packet.read_int32()
        color = Color.from_integer(packet.read_uint32())
        seat = board.vertex(vertex_id)
        if index == 0:
            seat.fill_color = color
            if seat.player != client.identity:
                board.receive_update(vertex_id, color, client.identity)
        else:
            seat.outline_color = color
            seat.set_happy(color != RED)

    client.player_turn = packet.read_string()

    for seat in board.vertices:
        if seat.fill_color != WHITE and seat.outline_color != RED and seat.player == PLAYER_ONE:
            client.score += 1
            if client.inside_joke_in_effect() and seat.coalition == client.inside_joke:
                client.score += 1
    return client.score


def receive_messages(sock, board: Board, client: Client) -> None:
    """Apply relayed moves until the connection ends."""
    while True:
        try:
            packet = receive_packet(sock)
        except OSError:
            break
        score = apply_update(board, client, packet)
        print(f"Current score: {score}")


def load_cards(board: Board, cards: list, assets_dir=DEFAULT_ASSETS_DIR) -> list:
    """Create the four action cards from card<id>.png and put them on the board."""
    textures = TextureManager(assets_dir)
    for card_id, x, y in CARD_POSITIONS:
        card = Card(card_id, x, y, textures.get(f"card{card_id}"))
        board.add_card(card)
        cards.append(card)
    return cards


def load_pieces(board: Board, textures: TextureManager, identity: str) -> list[Piece]:
    """Create both players' pieces; lay out this player's row beside the board."""
    for (number, mood), top in _SPRITE_ROWS.items():
        for name, (left, width, height) in _SPRITE_COLUMNS.items():
            textures.load(CHARACTER_SHEET, (left, top, width, height), f"{name}{number}{mood}")

    by_player = {
        player: [
            Piece(
                coalition,
                player,
                textures.get(f"{name}{number}Happy"),
                textures.get(f"{name}{number}Sad"),
            )
            for coalition, name in _GUESTS
        ]
        for number, player in ((1, PLAYER_ONE), (2, PLAYER_TWO))
    }

    own = by_player[PLAYER_ONE] if identity == PLAYER_ONE else by_player[PLAYER_TWO]
    layout = HorizontalLayout(50, 350, 2)
    for piece in own:
        layout.add(piece)

    # The board needs every piece to show both players' moves.
    for piece in by_player[PLAYER_ONE] + by_player[PLAYER_TWO]:
        board.add_piece(piece)

    layout.calculate()
    board.set_layout(layout)
    return own


def _load_font(size: int):
    try:
        return pygame.font.Font(str(DEFAULT_FONT), size)
    except (FileNotFoundError, OSError):
        print("No Font Found")
        return pygame.font.Font(None, size)


def main_menu() -> int:
    """Let Player 1 pick a board; returns 1 to 3, or 0 if the menu was closed."""
    pygame.init()
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("TopoTactics")
    font = _load_font(20)
    title_font = _load_font(50)
    choices = [
        (MenuButton(f"Map {number}", font, 300, 100 + 100 * number), number) for number in (1, 2, 3)
    ]
    exit_button = MenuButton("Exit", font, 300, 500)
    title = title_font.render("TopoTactics", True, BLUE.rgba)
    clock = pygame.time.Clock()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                for button, number in choices:
                    if button.is_clicked(x, y):
                        print(f"Map{number} Selected!")
                        return number
                if exit_button.is_clicked(x, y):
                    return 0
        window.fill(WINDOW_COLOR.rgba)
        for button, _ in choices:
            button.draw(window)
        exit_button.draw(window)
        window.blit(title, (281, 100))
        pygame.display.flip()
        clock.tick(60)


def _handle_click(board: Board, client: Client, sock, cards, x: float, y: float) -> bool:
    """Act on a mouse release during this player's turn; True when a piece was placed."""
    card_effect = client.activating_card

    if card_effect == RESERVED_SEATING:
        seat = board.mouse_released(x, y)
        if seat is not None and not seat.reserved and not seat.has_piece:
            seat.reserved = True
            seat.player = client.identity
            client.reserved_seat = seat
            client.set_target_turn(RESERVED_SEATING, 2)
            client.activating_card = NO_CARD
        return False

    if card_effect == EMBARRASSING_FAMILY:
        if board.click_piece(x, y) is not None:
            client.set_target_turn(EMBARRASSING_FAMILY, 2)
            client.activating_card = NO_CARD
        return False

    if card_effect == REARRANGEMENT:
        seat = board.mouse_released(x, y)
        if seat is not None:
            if seat.player == client.identity and seat.has_piece:
                client.add_guest_to_swap(seat)
            if client.can_swap():
                first, second = client.guest(0), client.guest(1)
                first.coalition, second.coalition = second.coalition, first.coalition
                client.clear_guests_to_swap()
                client.activating_card = NO_CARD
        return False

    if card_effect == INSIDE_JOKE:
        piece = board.click_piece(x, y)
        if piece is not None:
            client.inside_joke = piece.coalition
            client.set_target_turn(INSIDE_JOKE, 1)
            client.activating_card = NO_CARD
        return False

    if not client.has_selected_piece:
        card = board.click_card(x, y, cards)
        piece = board.click_piece(x, y)
        if card is not None:
            client.activating_card = card.id
            card.played = True
        elif piece is not None:
            client.selected_piece = piece
            client.has_selected_piece = True
        return False

    seat = board.mouse_released(x, y)
    if seat is None or client.selected_piece is None:
        return False
    print(f"Reserved?{int(seat.reserved)}")
    if seat.reserved and seat.player != client.identity:
        return False
    client.increment_turn()
    seat.set_piece(client.selected_piece)
    seat.player = client.identity
    client.send_neighbor_colors(board.update_board(seat.id), sock)
    client.has_selected_piece = False
    return True


def _run_game(sock, board: Board, client: Client, assets_dir: Path) -> None:
    pygame.init()
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(client.identity)
    textures = TextureManager(assets_dir)
    try:
        background = textures.get("Background_1")
    except (FileNotFoundError, pygame.error):
        background = None

    cards: list[Card] = []
    load_cards(board, cards, assets_dir)
    load_pieces(board, textures, client.identity)

    receiver = threading.Thread(target=receive_messages, args=(sock, board, client), daemon=True)
    receiver.start()
    clock = pygame.time.Clock()
    running = True
    while running:
        window.fill(WINDOW_COLOR.rgba)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif (
                event.type == pygame.MOUSEBUTTONUP
                and client.identity == client.player_turn
                and _handle_click(board, client, sock, cards, *event.pos)
            ):
                break
        if background is not None:
            window.blit(background, (0, 0))
        board.draw(window)
        pygame.display.flip()
        clock.tick(60)

    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()
    receiver.join()
    pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Client for the two-player seating game.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    parser.add_argument("--files-dir", type=Path, default=DEFAULT_FILES_DIR, help="board files")
    parser.add_argument("--assets-dir", type=Path, default=DEFAULT_ASSETS_DIR, help="images")
    args = parser.parse_args(argv)

    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError:
        print("Error Failed to connect to the server", file=sys.stderr)
        return 1

    client = Client()
    try:
        client.connect(sock)
        if client.identity == PLAYER_ONE:
            selection = main_menu()
            print(selection)
            client.send_board_selection(sock, selection)
        else:
            selection = client.receive_board_selection(sock)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sock.close()
        return 1

    board = Board()
    if selection in (1, 2, 3):
        board.load_board(args.files_dir / f"board{selection}.txt", VertexProps())
    elif selection == 0:
        print("Error: No Board Selected")

    _run_game(sock, board, client, args.assets_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())