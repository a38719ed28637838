"""Random UUID-shaped correlation IDs.

These are request/record correlation IDs only. The fallback path below
uses a non-cryptographic generator and must never back keys, IVs or
anything else security-relevant.
"""

import logging
import os
import random
import re
import uuid

log = logging.getLogger(__name__)

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def _fallback_id() -> str:
    """Fill the v4 template from the `random` module (not a CSPRNG)."""
    chars = []
    for c in _TEMPLATE:
        if c == "x":
            chars.append(format(random.getrandbits(4), "x"))
        elif c == "y":
            chars.append(format(random.getrandbits(2) | 0x8, "x"))
        else:
            chars.append(c)
    return "".join(chars)


def generate_id() -> str:
    """
    Return a lowercase version-4 UUID string.

    Uses os.urandom; when the platform has no secure source it degrades
    to `random` and logs a warning.
    """
    try:
        raw = os.urandom(16)
    except NotImplementedError:
        log.warning("no secure random source available; generating identifier "
                    "with non-cryptographic PRNG (not for security-sensitive use)")
        return _fallback_id()
    return str(uuid.UUID(bytes=raw, version=4))


def is_valid_id(text) -> bool:
    """True for an 8-4-4-4-12 hex UUID with version 1-5 and RFC 4122 variant."""
    if not text or not isinstance(text, str):
        return False
    return _UUID_RE.fullmatch(text) is not None
