"""Request/response body helpers for the relay backend.

Outbound bodies carry the envelope as `{"encrypted_data": "<iv>:<ct>"}`;
successful responses carry it as `{"success": true, "data": "<iv>:<ct>"}`.
"""

from typing import Any, Dict, Optional

from relaycrypt.common.envelope import decrypt_data, encrypt_data

REQUEST_FIELD = "encrypted_data"
RESPONSE_FIELD = "data"


def seal_request_body(value: Any, key_hex: str) -> Optional[Dict[str, str]]:
    """Return a request body wrapping the encrypted `value`, or None on failure."""
    envelope = encrypt_data(value, key_hex)
    if envelope is None:
        return None
    return {REQUEST_FIELD: envelope}


def open_response(response: Dict[str, Any], key_hex: str) -> Any:
    """
    Decrypt the `data` field of a successful response.

    Returns None when the response is not a dict, is not marked successful,
    has no data, or the data does not decrypt.
    """
    if not isinstance(response, dict):
        return None
    if not response.get("success") or not response.get(RESPONSE_FIELD):
        return None
    return decrypt_data(response[RESPONSE_FIELD], key_hex)
