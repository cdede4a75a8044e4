"""Event decryption and webhook signing helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16


def encrypt_key(key: str) -> bytes:
    """Derive the 32-byte AES key from the configured encrypt key."""
    return hashlib.sha256(key.encode("utf-8")).digest()


def _unpad(data: bytes) -> bytes:
    """Strip trailing zero bytes and then the padding the last byte announces."""
    length = len(data)
    unpadding = 0
    trailing_zeros = 0
    for index in range(length - 1, 0, -1):
        if data[index] != 0:
            unpadding = data[index]
            trailing_zeros = length - 1 - index
            break
    end = length - trailing_zeros - unpadding
    if end < 0:
        raise ValueError("invalid padding in decrypted data")
    return data[:end]


def decrypt(encrypted_key: bytes, data: str) -> bytes:
    """Decrypt a base64 AES-CBC payload whose IV is the key's first block.

    The first block of the plaintext is random filler and is dropped.
    """
    try:
        ciphertext = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc
    if len(ciphertext) % _BLOCK_SIZE:
        raise ValueError("ciphertext is not a multiple of the block size")

    iv = encrypted_key[:_BLOCK_SIZE]
    decryptor = Cipher(algorithms.AES(encrypted_key), modes.CBC(iv)).decryptor()
    plaintext = decryptor.update(ciphertext) + decryptor.finalize()

    # The buffer is sized after the encoded text, so it carries trailing zeros.
    buffer = plaintext + bytes(max(len(data) - len(plaintext), 0))
    message = _unpad(buffer)
    if len(message) < _BLOCK_SIZE:
        raise ValueError("msg length is less than blocksize")
    return message[_BLOCK_SIZE:]


def gen_sign(secret: str, timestamp: int) -> str:
    """Generate the signature a signed notification webhook expects."""
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(string_to_sign.encode("utf-8"), b"", hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")