"""Encrypted payload envelopes exchanged with the relay backend.

Wire format, shared byte-for-byte with the other clients::

    <ivHex>:<cipherHex>

AES-256-CBC with PKCS7 padding, a random 16-byte IV per message, and the
UTF-8 bytes of compact JSON as plaintext. The scheme is unauthenticated:
a wrong key and a tampered ciphertext fail the same way, and some
tampering is not detected at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
import json
import logging

from relaycrypt.crypto import symmetric
from relaycrypt.crypto.errors import (
    DecodingFailure,
    EncodingFailure,
    EnvelopeError,
    MalformedEnvelope,
    MalformedHex,
)
from relaycrypt.crypto.hexcodec import bytes_to_hex, hex_to_bytes
from relaycrypt.crypto.keys import parse_key

log = logging.getLogger(__name__)

_SEPARATOR = ":"


def _canonical_json(value: Any) -> bytes:
    """
    Compact JSON in insertion order, non-ASCII kept as raw UTF-8.

    This is the byte layout JSON.stringify produces for strings, ints,
    booleans, null, lists and dicts.
    """
    try:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodingFailure(f"payload serialization failed: {e}") from e
    return text.encode("utf-8")


def _reject_constant(token: str) -> Any:
    """NaN and +/-Infinity are not JSON; encrypt never writes them."""
    raise ValueError(f"non-finite number {token!r} is not allowed")


def encrypt_envelope(value: Any, key_hex: str) -> str:
    """
    Serialize and encrypt `value`, returning `ivHex:cipherHex`.

    Two calls with the same value and key give different strings because
    the IV is fresh each time.
    """
    key = parse_key(key_hex)
    plaintext = _canonical_json(value)
    iv, ciphertext = symmetric.encrypt_aes_cbc(key.raw, plaintext)
    return f"{bytes_to_hex(iv)}{_SEPARATOR}{bytes_to_hex(ciphertext)}"


def decrypt_envelope(envelope: str, key_hex: str) -> Any:
    """
    Parse, decrypt and deserialize an `ivHex:cipherHex` string.

    Raises InvalidKeyLength or MalformedHex for a bad key, MalformedEnvelope
    for a bad frame, DecryptionFailure for a cipher/padding error and
    DecodingFailure when the plaintext is not UTF-8 JSON.
    """
    key = parse_key(key_hex)

    if not isinstance(envelope, str):
        raise MalformedEnvelope(f"envelope must be str, got {type(envelope).__name__}")
    parts = envelope.split(_SEPARATOR)
    if len(parts) != 2:
        raise MalformedEnvelope(f"expected 2 fields separated by ':', got {len(parts)}")
    iv_hex, cipher_hex = parts
    if not iv_hex or not cipher_hex:
        raise MalformedEnvelope("envelope fields must be non-empty")

    try:
        iv = hex_to_bytes(iv_hex)
        ciphertext = hex_to_bytes(cipher_hex)
    except MalformedHex as e:
        raise MalformedEnvelope(f"envelope field is not valid hex: {e}") from e

    plaintext = symmetric.decrypt_aes_cbc(key.raw, iv, ciphertext)

    try:
        return json.loads(plaintext.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise DecodingFailure("decrypted payload is not valid UTF-8") from e
    except json.JSONDecodeError as e:
        raise DecodingFailure(f"decrypted payload is not valid JSON: {e.msg}") from e
    except (ValueError, RecursionError) as e:
        # oversized int literals, NaN/Infinity, nesting past the recursion limit
        raise DecodingFailure(f"decrypted payload is not valid JSON: {e}") from e


@dataclass(frozen=True)
class EnvelopeResult:
    """
    Outcome of seal/unseal.

    Exactly one of `value` (on success) or `error` (on failure) is
    meaningful; `ok` tells which.
    """
    value: Any = None
    error: Optional[EnvelopeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        """Failure class name, e.g. "DecryptionFailure"; None on success."""
        if self.error is None:
            return None
        return type(self.error).__name__


def seal(value: Any, key_hex: str) -> EnvelopeResult:
    try:
        return EnvelopeResult(value=encrypt_envelope(value, key_hex))
    except EnvelopeError as e:
        return EnvelopeResult(error=e)


def unseal(envelope: str, key_hex: str) -> EnvelopeResult:
    try:
        return EnvelopeResult(value=decrypt_envelope(envelope, key_hex))
    except EnvelopeError as e:
        return EnvelopeResult(error=e)


def encrypt_data(value: Any, key_hex: str) -> Optional[str]:
    """
    Envelope string for `value`, or None if anything failed.

    Only the failure kind is logged so the log cannot act as an oracle
    and never carries key material or plaintext.
    """
    result = seal(value, key_hex)
    if not result.ok:
        log.warning("envelope encryption failed kind=%s", result.kind)
        return None
    return result.value


def decrypt_data(envelope: str, key_hex: str) -> Any:
    """
    Decrypted value, or None if anything failed.

    A payload that decrypts to JSON null also yields None; use unseal()
    when the difference matters.
    """
    result = unseal(envelope, key_hex)
    if not result.ok:
        log.warning("envelope decryption failed kind=%s", result.kind)
        return None
    return result.value
