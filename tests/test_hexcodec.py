from __future__ import annotations

import pytest

from relaycrypt.crypto.errors import MalformedHex
from relaycrypt.crypto.hexcodec import bytes_to_hex, hex_to_bytes


def test_bytes_to_hex_is_lowercase_two_chars_per_byte() -> None:
    data = bytes([0x00, 0x0F, 0xAB, 0xFF])

    assert bytes_to_hex(data) == "000fabff"
    assert len(bytes_to_hex(bytes(range(256)))) == 512


def test_bytes_to_hex_empty() -> None:
    assert bytes_to_hex(b"") == ""


def test_hex_to_bytes_accepts_either_case() -> None:
    assert hex_to_bytes("00FFab") == b"\x00\xff\xab"
    assert hex_to_bytes("") == b""


def test_hex_to_bytes_rejects_odd_length_instead_of_truncating() -> None:
    with pytest.raises(MalformedHex, match="odd length"):
        hex_to_bytes("abc")


@pytest.mark.parametrize("text", ["zz", "0g", "ab cd", " abc", "ab\n", "+1"])
def test_hex_to_bytes_rejects_non_hex_instead_of_zero_filling(text: str) -> None:
    with pytest.raises(MalformedHex):
        hex_to_bytes(text)


def test_hex_to_bytes_rejects_non_str() -> None:
    with pytest.raises(MalformedHex, match="must be str"):
        hex_to_bytes(b"abcd")  # type: ignore[arg-type]


def test_malformed_hex_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        hex_to_bytes("x")


def test_bytes_to_hex_rejects_int_instead_of_zero_filling() -> None:
    with pytest.raises(AttributeError):
        bytes_to_hex(5)  # type: ignore[arg-type]
