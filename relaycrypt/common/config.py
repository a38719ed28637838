import os
from dotenv import load_dotenv

from relaycrypt.crypto.keys import parse_key

# Load environment variables from .env
load_dotenv()


class ConfigError(RuntimeError):
    """Raised when required settings are missing or invalid."""


def get_shared_key() -> str:
    """
    Return the pre-shared 64-hex AES-256 key.

    Looked up in order:
      RELAYCRYPT_SHARED_KEY       the hex key itself
      RELAYCRYPT_SHARED_KEY_FILE  path to a file holding the hex key

    The key is validated here so a bad deployment fails at startup rather
    than on the first request.
    """
    key_hex = os.getenv("RELAYCRYPT_SHARED_KEY", "").strip()
    if not key_hex:
        key_file = os.getenv("RELAYCRYPT_SHARED_KEY_FILE", "").strip()
        if key_file:
            try:
                with open(key_file, "r", encoding="ascii") as f:
                    key_hex = f.read().strip()
            except OSError as e:
                raise ConfigError(f"cannot read RELAYCRYPT_SHARED_KEY_FILE {key_file!r}: {e}") from e

    if not key_hex:
        raise ConfigError("RELAYCRYPT_SHARED_KEY or RELAYCRYPT_SHARED_KEY_FILE must be set")

    try:
        parse_key(key_hex)
    except ValueError as e:
        raise ConfigError(f"shared key is invalid: {e}") from e
    return key_hex


def get_backend_url() -> str:
    return os.getenv("RELAYCRYPT_BACKEND_URL", "https://localhost").rstrip("/")


def get_log_level() -> str:
    return os.getenv("RELAYCRYPT_LOG_LEVEL", "INFO").upper()
