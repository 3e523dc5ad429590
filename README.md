# topotactics

A two-player, turn-based board game played over the network. The board is a
graph of seats. Each player places guests from four coalitions (green, blue,
pink and orange) on seats. A guest placed next to a rival coalition upsets
it, or is upset by it: green upsets blue, blue upsets pink, pink upsets
orange, and orange upsets green. Upset seats get a red outline and their
guest is shown sad.

## Installing

```
pip install .
```

The game window uses `pygame`.

## Playing

Start the relay server first:

```
topotactics-server [--host HOST] [--port PORT]
```

It listens on port 2222 by default, waits for two players, tells the first
one it is "Player 1" and the second "Player 2" (Player 1 moves first), passes
Player 1's board choice on to Player 2, and then relays moves, alternating
turns, until a player leaves.

Then start a client for each player:

```
topotactics-client [--host HOST] [--port PORT] [--files-dir DIR] [--assets-dir DIR]
```

The client connects to `127.0.0.1:2222` by default. Player 1 picks one of
three maps from a menu; the client then loads `board1.txt`, `board2.txt` or
`board3.txt` from the files directory (default `../files`). Images are read
from the assets directory (default `../assets`):

- `card0.png` to `card3.png` for the four cards,
- `CharactersHighlights.png`, the sheet the guest sprites are cut from,
- `Background_1.png` for the background (optional).

The menu font is read from `../Fonts/MightySouly-lxggD.ttf`; pygame's default
font is used if it is missing.

On your turn, click one of your guests in the tray and then a seat to place
it, or click a card to play it:

- card 0, reserved seating: click an empty seat to reserve it for you;
- card 1, embarrassing family: click a guest to pick a coalition;
- card 2, rearrangement: click two of your seated guests to swap their
  coalitions;
- card 3, inside joke: click a guest; for the next turn, Player 1's seats of
  that coalition count double.

After every relayed move the client adds one point for each coloured seat
belonging to Player 1 that does not have a red outline, and prints the score.

### Board files

```
<number of seats n>
<id>,<x>,<y>            (n lines)
<id>,<neighbour>,...    (n lines)
```

## Using the library

The game objects can be used without a window:

- `topotactics.board.Board` holds the seat graph; `load_board` reads a board
  file, `add_connection` joins two seats, and `update_board(key)` returns the
  `(Vertex, Color)` changes caused by the piece on a seat, marking upset
  seats unhappy.
- `topotactics.vertex.Vertex`, `topotactics.piece.Piece` and
  `topotactics.card.Card` are the seats, guests and cards.
- `topotactics.colors.Color` packs and unpacks colours as `0xRRGGBBAA`
  (`to_integer`, `from_integer`).
- `topotactics.network.Packet` reads and writes big-endian 32-bit integers
  and length-prefixed UTF-8 strings; `send_packet` and `receive_packet` send
  and receive packets preceded by their 32-bit length.
- `topotactics.server.serve` runs one game on a listening socket you supply.
- `topotactics.client.apply_update` applies a received move to a board and
  updates a `Client`'s turn and score.
- `topotactics.textures.TextureManager` loads and caches PNG images,
  optionally cropped.

## What it does not do

The package ships no board files, images or fonts; they must be supplied in
the directories above. Card effects are applied only on the player's own
board and are not sent to the other player, and the embarrassing family card
records its use but does not make any guests unhappy.

## Running the tests

```
pip install .[test]
pytest
```