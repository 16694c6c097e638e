'''
    AES-256-CBC symmetric encryption.

    Encoded form of a message:  base64( IV[16] || AES-CBC(PKCS#7(utf8(text))) )

    The IV is fresh per call and travels in the clear ahead of the
    ciphertext. Symmetric keys are plain bytes; their text form is base64 of
    the raw key.
'''

# ========== Imports ==========
import os

from cryptography.hazmat.primitives import padding as symmetric_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .base64_codec import DECODE_ERRORS, b64_decode, b64_encode
from .errors import DecryptError, EncryptError, ExportError, KeyImportError

SYMMETRIC_KEY_SIZE = 32   # bytes, AES-256
IV_SIZE = 16              # bytes, one AES block
_VALID_KEY_SIZES = (16, 24, 32)


# ========== Keys ==========

def create_random_symmetric_key() -> bytes:
    return os.urandom(SYMMETRIC_KEY_SIZE)


def export_symmetric_key(key: bytes) -> str:
    if not isinstance(key, (bytes, bytearray)) or len(key) not in _VALID_KEY_SIZES:
        raise ExportError("symmetric key must be 16, 24 or 32 raw bytes")
    return b64_encode(bytes(key))


def import_symmetric_key(text: str) -> bytes:
    try:
        key = b64_decode(text)
    except DECODE_ERRORS as exc:
        raise KeyImportError(f"invalid symmetric key: {exc}") from exc
    if len(key) not in _VALID_KEY_SIZES:
        raise KeyImportError(f"symmetric key has invalid length {len(key)}")
    return key


# ========== Encryption ==========

def symmetric_encrypt(key: bytes, data: str) -> str:
    iv = os.urandom(IV_SIZE)
    try:
        padder = symmetric_padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(data.encode("utf-8")) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    except (TypeError, ValueError) as exc:
        raise EncryptError(f"AES-CBC encryption failed: {exc}") from exc
    return b64_encode(iv + ciphertext)


# ========== Decryption ==========

def symmetric_decrypt(key_text: str, data: str) -> str:
    key = import_symmetric_key(key_text)
    try:
        combined = b64_decode(data)
    except DECODE_ERRORS as exc:
        raise DecryptError(f"ciphertext is not valid base64: {exc}") from exc

    iv, ciphertext = combined[:IV_SIZE], combined[IV_SIZE:]
    if len(iv) < IV_SIZE or not ciphertext:
        raise DecryptError("ciphertext too short to hold an IV and a block")

    try:
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = symmetric_padding.PKCS7(algorithms.AES.block_size).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except ValueError as exc:
        # bad block alignment, bad padding and invalid UTF-8 all land here
        raise DecryptError(f"AES-CBC decryption failed: {exc}") from exc
