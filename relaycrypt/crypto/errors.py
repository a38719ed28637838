"""Error types raised by the envelope layer.

All of them derive from ValueError so callers that only care about
"bad input" can keep catching that.
"""


class EnvelopeError(ValueError):
    """Base exception for hex, key and envelope failures."""


class MalformedHex(EnvelopeError):
    """Raised when text is not an even-length run of hex digits."""


class InvalidKeyLength(EnvelopeError):
    """Raised when a key does not decode to the required number of bytes."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"key must be {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class MalformedEnvelope(EnvelopeError):
    """Raised when the `iv:ciphertext` frame cannot be parsed."""


class DecryptionFailure(EnvelopeError):
    """
    Raised when CBC decryption or PKCS7 unpadding fails.

    Wrong key, wrong IV and tampered ciphertext all end up here; the
    mode gives no way to tell them apart.
    """


class DecodingFailure(EnvelopeError):
    """Raised when decrypted bytes are not UTF-8 JSON."""


class EncodingFailure(EnvelopeError):
    """Raised when a value cannot be serialized to canonical JSON."""
