"""Create the pre-shared AES-256 key (64 hex chars) used by all relay clients."""

import os
import sys

from relaycrypt.crypto.hexcodec import bytes_to_hex
from relaycrypt.crypto.keys import KEY_SIZE, parse_key


def main():
    # Ensure keys directory exists
    keys_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "keys")
    os.makedirs(keys_dir, exist_ok=True)
    key_path = os.path.join(keys_dir, "shared.key")

    if os.path.exists(key_path):
        print(f"Refusing to overwrite existing key at {key_path}")
        sys.exit(1)

    key_hex = bytes_to_hex(os.urandom(KEY_SIZE))
    parse_key(key_hex)

    # Owner read/write only
    fd = os.open(key_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "w", encoding="ascii") as f:
        f.write(key_hex + "\n")

    print(f"Shared key saved to {key_path}")
    print("Distribute it out of band and set RELAYCRYPT_SHARED_KEY_FILE to this path.")


if __name__ == "__main__":
    main()
