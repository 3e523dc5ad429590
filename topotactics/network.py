"""Length-prefixed binary packets exchanged between clients and the server."""

import struct


class PacketError(ValueError):
    """Raised when a packet holds too little data for a read."""


class Packet:
    """A buffer of big-endian values written in order and read back in order."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._data)

    def clear(self) -> None:
        self._data.clear()
        self._position = 0

    def _write(self, fmt: str, value: int) -> "Packet":
        try:
            self._data += struct.pack(fmt, value)
        except struct.error as exc:
            raise ValueError(f"value does not fit: {value!r}") from exc
        return self

    def _take(self, size: int) -> bytes:
        end = self._position + size
        if end > len(self._data):
            raise PacketError(f"need {size} bytes, {len(self._data) - self._position} left")
        chunk = bytes(self._data[self._position:end])
        self._position = end
        return chunk

    def write_int32(self, value: int) -> "Packet":
        return self._write(">i", value)

    def write_uint32(self, value: int) -> "Packet":
        return self._write(">I", value)

    def write_string(self, value: str) -> "Packet":
        encoded = value.encode("utf-8")
        self.write_uint32(len(encoded))
        self._data += encoded
        return self

    def read_int32(self) -> int:
        return struct.unpack(">i", self._take(4))[0]

    def read_uint32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def read_string(self) -> str:
        length = self.read_uint32()
        return self._take(length).decode("utf-8")

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Packet":
        return cls(data)


def _receive_exact(sock, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError("connection closed by peer")
        chunks += chunk
    return bytes(chunks)


def send_packet(sock, packet: Packet) -> None:
    """Send a packet preceded by its length."""
    data = packet.to_bytes()
    sock.sendall(struct.pack(">I", len(data)) + data)


def receive_packet(sock) -> Packet:
    """Receive one length-prefixed packet; raises ConnectionError if the peer leaves."""
    (size,) = struct.unpack(">I", _receive_exact(sock, 4))
    return Packet.from_bytes(_receive_exact(sock, size))