"""Pre-shared AES-256 key handling."""

from __future__ import annotations

from dataclasses import dataclass, field

from relaycrypt.crypto.errors import InvalidKeyLength
from relaycrypt.crypto.hexcodec import hex_to_bytes

KEY_SIZE = 32  # AES-256 key length in bytes


@dataclass(frozen=True)
class KeyMaterial:
    """
    Exactly 32 raw key bytes.

    Built per call from configuration and dropped afterwards; never cached.
    """
    raw: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.raw) != KEY_SIZE:
            raise InvalidKeyLength(expected=KEY_SIZE, actual=len(self.raw))


def parse_key(key_hex: str) -> KeyMaterial:
    """
    Decode a 64-character hex key.

    MalformedHex propagates from the decoder; a wrong decoded length
    raises InvalidKeyLength.
    """
    return KeyMaterial(hex_to_bytes(key_hex))
