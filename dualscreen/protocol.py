"""Framing, checksums and command codes of the serial control protocol."""

from __future__ import annotations

from dataclasses import dataclass, field

PACKET_HEADER = 0xAA
PACKET_TAIL = 0x55

CMD_RUN_APP = 0x01

APP_ID_DEMO01 = 0x01
APP_ID_DEMO02 = 0x02
APP_ID_DEMO03 = 0x03

_MIN_PACKET = 6
_MAX_DATA = 0xFF


class PacketError(ValueError):
    """Raised when bytes do not hold a valid packet."""


@dataclass
class Packet:
    """One command frame: header, command, length, data, checksum and tail."""

    command: int
    data: bytes = b""
    checksum: int | None = None
    header: int = PACKET_HEADER
    tail: int = PACKET_TAIL
    _: None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if len(self.data) > _MAX_DATA:
            raise ValueError("packet data is limited to 255 bytes")
        if not 0 <= self.command <= 0xFF:
            raise ValueError("command must fit in one byte")
        if self.checksum is None:
            self.checksum = calculate_checksum(self)

    @property
    def data_length(self) -> int:
        return len(self.data)


def calculate_checksum(packet: Packet) -> int:
    """Sum of header, command, length and data bytes, modulo 256."""
    return (packet.header + packet.command + packet.data_length + sum(packet.data)) & 0xFF


def verify_checksum(packet: Packet) -> bool:
    return calculate_checksum(packet) == packet.checksum


def parse_packet(buffer: bytes) -> Packet:
    """Parse the packet that starts at the first header byte in ``buffer``."""
    buffer = bytes(buffer)
    if len(buffer) < _MIN_PACKET:
        raise PacketError("buffer too short for a packet")
    start = buffer.find(PACKET_HEADER)
    if start < 0:
        raise PacketError("no packet header found")
    if start + _MIN_PACKET > len(buffer):
        raise PacketError("packet truncated after header")
    command = buffer[start + 1]
    length = buffer[start + 2]
    body = start + 3
    if body + length + 2 > len(buffer):
        raise PacketError("packet data truncated")
    data = buffer[body:body + length]
    checksum = buffer[body + length]
    tail = buffer[body + length + 1]
    if tail != PACKET_TAIL:
        raise PacketError(f"bad packet tail 0x{tail:02X}")
    packet = Packet(command, data, checksum=checksum, header=PACKET_HEADER, tail=tail)
    if not verify_checksum(packet):
        raise PacketError("checksum mismatch")
    return packet


def encode_packet(command: int, data: bytes = b"") -> bytes:
    """Frame a command and its data as bytes ready to send."""
    packet = Packet(command, data)
    return bytes(
        [packet.header, packet.command, packet.data_length, *packet.data, packet.checksum, packet.tail]
    )