'''
    RSA-OAEP encryption over base64 payloads.

    Payloads go in and come out as base64 so that binary material (wrapped
    symmetric keys, onion layers) never has to be valid text. There is no
    chunking: anything longer than oaep_max_plaintext_len() is rejected by
    the provider.
'''

# ========== Imports ==========
from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .base64_codec import DECODE_ERRORS, b64_decode, b64_encode
from .errors import DecryptError, EncryptError
from .rsa_key_management import load_private_key, load_public_key

_HASH_LEN = 32  # SHA-256


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


# ========== RSA OAEP Encryption ==========

def rsa_encrypt(b64_data: str, public_key: Union[str, RSAPublicKey]) -> str:
    key = load_public_key(public_key)
    try:
        data = b64_decode(b64_data)
    except DECODE_ERRORS as exc:
        raise EncryptError(f"payload is not valid base64: {exc}") from exc
    try:
        ciphertext = key.encrypt(data, _oaep())
    except ValueError as exc:
        raise EncryptError(f"RSA-OAEP encryption failed: {exc}") from exc
    return b64_encode(ciphertext)


def rsa_decrypt(b64_data: str, private_key: Union[str, RSAPrivateKey]) -> str:
    """Decrypt and return the plaintext bytes base64-encoded, not as text."""
    key = load_private_key(private_key)
    try:
        ciphertext = b64_decode(b64_data)
    except DECODE_ERRORS as exc:
        raise DecryptError(f"ciphertext is not valid base64: {exc}") from exc
    try:
        plaintext = key.decrypt(ciphertext, _oaep())
    except ValueError as exc:
        raise DecryptError(f"RSA-OAEP decryption failed: {exc}") from exc
    return b64_encode(plaintext)


# ========== Helper Function ==========

def oaep_max_plaintext_len(public_key: Union[str, RSAPublicKey]) -> int:
    k = (load_public_key(public_key).key_size + 7) // 8   # modulus bytes
    return k - 2 * _HASH_LEN - 2                          # 2048-bit -> 256-64-2 = 190
