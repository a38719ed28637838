"""Strict hex <-> bytes conversion.

Unlike a naive pairwise parse, hex_to_bytes never truncates odd-length
input and never turns a bad pair into a zero byte.
"""

import re

from relaycrypt.crypto.errors import MalformedHex

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data: bytes) -> str:
    """Return two lowercase hex characters per byte."""
    return data.hex()


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hex text (either case) into raw bytes.

    Raises MalformedHex on odd length or any non-hex character.
    """
    if not isinstance(text, str):
        raise MalformedHex(f"hex input must be str, got {type(text).__name__}")
    if len(text) % 2 != 0:
        raise MalformedHex(f"hex input has odd length {len(text)}")
    # fullmatch instead of bytes.fromhex, which tolerates whitespace
    if _HEX_RE.fullmatch(text) is None:
        raise MalformedHex("hex input contains non-hex characters")
    return bytes.fromhex(text)
