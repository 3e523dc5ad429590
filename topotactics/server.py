"""The relay server that pairs two players and forwards their moves."""

import argparse
import socket
import sys

from .network import Packet, receive_packet, send_packet

DEFAULT_PORT = 2222
PLAYER_ONE = "Player 1"
PLAYER_TWO = "Player 2"


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _send_identity(player, identity: str, turn: str) -> None:
    try:
        send_packet(player, Packet().write_string(identity).write_string(turn))
    except OSError as exc:
        raise ConnectionError(f"Failed to send identity to {identity.lower()}") from exc


def _relay_turn(sender, receiver, next_turn: str, sender_name: str, receiver_name: str) -> bool:
    """Forward one move to both players, tagged with whose turn is next."""
    try:
        packet = receive_packet(sender)
    except OSError:
        _error(f"Failed to receive message from {sender_name}")
        return False
    packet.write_string(next_turn)
    for target, name in ((receiver, receiver_name), (sender, sender_name)):
        try:
            send_packet(target, packet)
        except OSError:
            _error(f"Failed to send message to {name}")
            return False
    return True


def serve(listener: socket.socket) -> None:
    """Run one game on a listening socket until a player leaves.

    Raises ConnectionError if the players cannot be connected and told who they are.
    """
    print("Server is running, waiting for players to connect...")
    try:
        player1, _ = listener.accept()
    except OSError as exc:
        raise ConnectionError("Failed to accept player 1's connection") from exc
    with player1:
        print("Player 1 connected, waiting for player 2...")
        try:
            player2, _ = listener.accept()
        except OSError as exc:
            raise ConnectionError("Failed to accept player 2's connection") from exc
        with player2:
            print("Player 2 connected")
            _send_identity(player1, PLAYER_ONE, PLAYER_ONE)
            _send_identity(player2, PLAYER_TWO, PLAYER_ONE)

            try:
                board_packet = receive_packet(player1)
            except OSError:
                _error("Failed to receive board selection packet from player 1")
                board_packet = Packet()
            try:
                send_packet(player2, board_packet)
            except OSError:
                _error("Failed to send board selection packet to player 2")

            while _relay_turn(player1, player2, PLAYER_TWO, "player 1", "player 2") and _relay_turn(
                player2, player1, PLAYER_ONE, "player 2", "player 1"
            ):
                pass


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Relay server for a two-player game.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        listener = socket.create_server((args.host, args.port))
    except OSError:
        _error(f"Failed to bind the listener to port {args.port}")
        return 1
    with listener:
        try:
            serve(listener)
        except ConnectionError as exc:
            _error(str(exc))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())