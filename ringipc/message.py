"""Messages carried by the ring buffer and their CRC-16 checksum."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass, field

LETTERS = string.ascii_lowercase + string.ascii_uppercase
MAX_SIZE = 255

_CRC_INIT = 0xFFFF
_CRC_POLY = 0x1021


def crc16(data: bytes) -> int:
    """Return the CRC-16/CCITT-FALSE checksum of ``data``."""
    crc = _CRC_INIT
    for byte in bytes(data):
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ _CRC_POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


@dataclass(frozen=True)
class Message:
    """A payload of at most 255 bytes with its type and checksum."""

    data: bytes = b""
    type: int = 0
    checksum: int = field(init=False)

    def __post_init__(self) -> None:
        payload = bytes(self.data)
        if len(payload) > MAX_SIZE:
            raise ValueError(
                f"message payload is {len(payload)} bytes, at most {MAX_SIZE} allowed"
            )
        if not 0 <= self.type <= 0xFF:
            raise ValueError(f"message type {self.type} does not fit in a byte")
        object.__setattr__(self, "data", payload)
        object.__setattr__(self, "checksum", crc16(payload))

    @property
    def size(self) -> int:
        """Number of payload bytes."""
        return len(self.data)

    def describe(self) -> str:
        """Return a one-line, human-readable description of the message."""
        text = self.data.decode("latin-1")
        return (
            f"Message type: {self.type}, hash: {self.checksum:04x}, "
            f"size: {self.size}, data: {text}"
        )


def random_message(rng: random.Random | None = None) -> Message:
    """Build a message with a random payload of ASCII letters.

    The length is drawn from 0..256 and stored in a single byte, so a draw
    of 256 yields an empty payload.
    """
    rng = rng if rng is not None else random.Random()
    size = rng.randrange(MAX_SIZE + 2) % (MAX_SIZE + 1)
    payload = "".join(rng.choice(LETTERS) for _ in range(size))
    return Message(payload.encode("ascii"))