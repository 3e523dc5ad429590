"""The seating graph: seats, the edges between them, cards and pieces."""

from pathlib import Path

from .coalition import Coalition
from .colors import BLUE, COALITION_COLORS, GREEN, ORANGE, PINK, RED, Color, VertexProps
from .geometry import Line
from .piece import Piece
from .vertex import Vertex

# For each coalition: the neighbour colour it upsets, and the neighbour colour that upsets it.
_RIVALRIES: dict[Coalition, tuple[Color, Color]] = {
    Coalition.GREEN: (BLUE, ORANGE),
    Coalition.BLUE: (PINK, GREEN),
    Coalition.PINK: (ORANGE, BLUE),
    Coalition.ORANGE: (GREEN, PINK),
}

# Index of the piece to show for an opponent's move, seen by Player 1 and by anyone else.
_OPPONENT_PIECE_INDEX: dict[Color, tuple[int, int]] = {
    GREEN: (4, 0),
    BLUE: (5, 1),
    PINK: (6, 2),
    ORANGE: (7, 3),
}


class Board:
    """Seats joined by edges, plus the cards and pieces shown around them."""

    def __init__(self) -> None:
        self.editing = False
        self.cards: list = []
        self.pieces: list[Piece] = []
        self.edges: list[Line] = []
        self.draw_pieces: list[Piece] = []
        self._seats: dict[int, Vertex] = {}
        self._neighbors: dict[int, list[Vertex]] = {}

    @property
    def vertices(self) -> list[Vertex]:
        """Every seat in the graph, in insertion order."""
        return list(self._seats.values())

    def __contains__(self, key: object) -> bool:
        return key in self._seats

    def __len__(self) -> int:
        return len(self._seats)

    def load_board(self, path, props: VertexProps | None = None) -> None:
        """Read seats and their connections from a board file.

        The first line holds the seat count n; the next n lines are "id,x,y";
        the n lines after that are "id,neighbour,neighbour,...".
        """
        props = props if props is not None else VertexProps()
        with Path(path).open(encoding="utf-8") as board_file:
            lines = iter(board_file.read().splitlines())
            count = int(next(lines))
            seats = []
            for _ in range(count):
                vertex_id, x, y = next(lines).split(",", 2)
                seats.append(Vertex(int(vertex_id), float(x), float(y), props))
            for seat in seats:
                tokens = next(lines).split(",")
                endpoints = tokens[1:] if len(tokens) > 1 else tokens
                for token in endpoints:
                    endpoint_id = int(token)
                    for other in seats:
                        if other.id == endpoint_id:
                            self.add_connection(seat, other)

    def receive_update(self, key: int, fill_color: Color, identity: str) -> None:
        """Seat the opponent's piece matching fill_color on seat key."""
        indices = _OPPONENT_PIECE_INDEX.get(fill_color)
        if indices is None:
            return
        index = indices[0] if identity == "Player 1" else indices[1]
        self.vertex(key).set_piece(self.pieces[index])

    def update_board(self, key: int) -> list[tuple[Vertex, Color]]:
        """Colour changes caused by the piece just placed on seat key."""
        changed: list[tuple[Vertex, Color]] = []
        seat = self.vertex(key)
        color = COALITION_COLORS.get(seat.coalition)
        if color is not None:
            changed.append((seat, color))
        self.update_neighbors(key, changed)
        return changed

    def update_neighbors(self, key: int, changed: list[tuple[Vertex, Color]]) -> None:
        """Append the seats made unhappy around seat key and mark them so."""
        seat = self.vertex(key)
        rivalry = _RIVALRIES.get(seat.coalition)
        if rivalry is None:
            return
        upsets, upset_by = rivalry
        for neighbor in self.neighbors(key):
            if neighbor.fill_color == upsets:
                changed.append((neighbor, RED))
                neighbor.set_happy(False)
            elif neighbor.fill_color == upset_by:
                changed.append((seat, RED))
                seat.set_happy(False)

    def vertex(self, key: int) -> Vertex:
        return self._seats[key]

    def neighbors(self, key: int) -> list[Vertex]:
        self._seats[key]
        return self._neighbors[key]

    def neighbor_at(self, key: int, index: int) -> Vertex:
        return self.neighbors(key)[index]

    def describe_ids(self) -> str:
        """One line per seat giving its key and id."""
        return "\n".join(f"Key: {key} Vertex ID: {seat.id}" for key, seat in self._seats.items())

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a seat unless its id is taken; report whether it was added."""
        if vertex.id in self._seats:
            return False
        self._seats[vertex.id] = vertex
        self._neighbors[vertex.id] = []
        return True

    def add_connection(self, source: Vertex, target: Vertex) -> None:
        """Join two seats both ways, adding them if needed."""
        for seat in (source, target):
            self._seats[seat.id] = seat
            self._neighbors.setdefault(seat.id, [])
        self._neighbors[source.id].append(target)
        self._neighbors[target.id].append(source)
        self.edges.append(Line(source, target))

    def add_card(self, card) -> None:
        self.cards.append(card)

    def add_piece(self, piece: Piece) -> None:
        self.pieces.append(piece)

    def set_layout(self, layout) -> None:
        """Show the pieces of a layout beside the board."""
        self.draw_pieces = list(layout.items)

    def update_edge(self, vertex_id: int, x: float, y: float) -> None:
        """Move the ends of every edge touching seat vertex_id."""
        for line in self.edges:
            if line.from_id == vertex_id:
                line.set_from_coords(x, y)
            if line.to_id == vertex_id:
                line.set_to_coords(x, y)

    def mouse_moved(self, x: float, y: float) -> None:
        for key, seat in self._seats.items():
            seat.set_hovered(seat.bounds.contains(x, y))
            if seat.draggable:
                seat.set_coords(x, y)
                self.update_edge(key, x, y)

    def mouse_released(self, x: float, y: float) -> Vertex | None:
        """The seat under the pointer when not editing; ends any dragging."""
        selected = None
        for seat in self._seats.values():
            if not self.editing and seat.bounds.contains(x, y):
                selected = seat
            else:
                seat.draggable = False
        return selected

    def mouse_pressed(self, x: float, y: float) -> None:
        for seat in self._seats.values():
            if self.editing and seat.bounds.contains(x, y):
                seat.draggable = True

    def click_card(self, x: float, y: float, cards) -> object | None:
        """The first of the given cards under the pointer."""
        return next((card for card in cards if card.bounds.contains(x, y)), None)

    def click_piece(self, x: float, y: float) -> Piece | None:
        """The first board piece under the pointer, marked selected."""
        for piece in self.pieces:
            if piece.bounds.contains(x, y):
                piece.selected = True
                return piece
        return None

    def draw(self, surface) -> None:
        for line in self.edges:
            line.draw(surface)
        for seat in self._seats.values():
            seat.draw(surface)
        for card in self.cards:
            if not card.played:
                card.draw(surface)
        for piece in self.draw_pieces:
            piece.draw(surface)