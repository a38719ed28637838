from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding
import os

from relaycrypt.crypto.errors import DecryptionFailure, InvalidKeyLength, MalformedEnvelope
from relaycrypt.crypto.keys import KEY_SIZE

_BLOCK_SIZE = 16  # AES block size in bytes (128 bits)


def encrypt_aes_cbc(key: bytes, plaintext: bytes) -> tuple[bytes, bytes]:
    """
    Encrypts the plaintext using AES-256 in CBC mode with PKCS7 padding.
    A fresh IV is drawn from the OS CSPRNG on every call.
    Returns a tuple (iv, ciphertext), both as raw bytes.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(expected=KEY_SIZE, actual=len(key))

    iv = os.urandom(_BLOCK_SIZE)

    padder = padding.PKCS7(_BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    encryptor = cipher.encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return iv, ciphertext


def decrypt_aes_cbc(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypts the ciphertext using AES-256 in CBC mode and removes PKCS7 padding.
    Returns the original plaintext bytes.

    Misaligned ciphertext and bad padding both raise DecryptionFailure.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(expected=KEY_SIZE, actual=len(key))
    if len(iv) != _BLOCK_SIZE:
        raise MalformedEnvelope(f"IV must be {_BLOCK_SIZE} bytes, got {len(iv)}")

    cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
    decryptor = cipher.decryptor()
    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError as e:
        raise DecryptionFailure("ciphertext is not a whole number of blocks") from e

    unpadder = padding.PKCS7(_BLOCK_SIZE * 8).unpadder()
    try:
        plaintext = unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise DecryptionFailure("invalid padding after decryption") from e
    return plaintext
