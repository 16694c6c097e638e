'''
    RSA key management for overlay nodes.

    Keys are RSA-2048 with public exponent 65537, meant for RSA-OAEP/SHA-256.
    On the wire a public key is base64(SubjectPublicKeyInfo DER) and a
    private key is base64(unencrypted PKCS#8 DER). No PEM armour.
'''

# ========== Imports ==========
from typing import NamedTuple, Optional, Union

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .base64_codec import DECODE_ERRORS, b64_decode, b64_encode
from .errors import ExportError, KeyGenerationError, KeyImportError

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537


class AsymmetricKeyPair(NamedTuple):
    public_key: RSAPublicKey
    private_key: RSAPrivateKey


# ========== Generation ==========

def generate_rsa_keypair() -> AsymmetricKeyPair:
    try:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=RSA_KEY_SIZE,
        )
    except (ValueError, UnsupportedAlgorithm, InternalError) as exc:
        raise KeyGenerationError(f"RSA key generation failed: {exc}") from exc
    return AsymmetricKeyPair(private_key.public_key(), private_key)


# ========== Export ==========

def export_public_key(key: RSAPublicKey) -> str:
    try:
        der = key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    except (AttributeError, TypeError, ValueError, InternalError) as exc:
        raise ExportError(f"cannot export public key: {exc}") from exc
    return b64_encode(der)


def export_private_key(key: Optional[RSAPrivateKey]) -> Optional[str]:
    """
    Export a private key as base64 PKCS#8.

    Returns None when no key is given; callers must check before treating
    the result as text.
    """
    if key is None:
        return None
    try:
        der = key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (AttributeError, TypeError, ValueError, InternalError) as exc:
        raise ExportError(f"cannot export private key: {exc}") from exc
    return b64_encode(der)


# ========== Import ==========

def import_public_key(text: str) -> RSAPublicKey:
    try:
        key = serialization.load_der_public_key(b64_decode(text))
    except DECODE_ERRORS + (UnsupportedAlgorithm,) as exc:
        raise KeyImportError(f"invalid public key: {exc}") from exc
    if not isinstance(key, RSAPublicKey):
        raise KeyImportError(f"expected an RSA public key, got {type(key).__name__}")
    return key


def import_private_key(text: str) -> RSAPrivateKey:
    try:
        key = serialization.load_der_private_key(b64_decode(text), password=None)
    except DECODE_ERRORS + (UnsupportedAlgorithm,) as exc:
        raise KeyImportError(f"invalid private key: {exc}") from exc
    if not isinstance(key, RSAPrivateKey):
        raise KeyImportError(f"expected an RSA private key, got {type(key).__name__}")
    return key


# ========== Helpers ==========

def load_public_key(text_or_obj: Union[str, RSAPublicKey]) -> RSAPublicKey:
    if isinstance(text_or_obj, RSAPublicKey):
        return text_or_obj
    return import_public_key(text_or_obj)


def load_private_key(text_or_obj: Union[str, RSAPrivateKey]) -> RSAPrivateKey:
    if isinstance(text_or_obj, RSAPrivateKey):
        return text_or_obj
    return import_private_key(text_or_obj)
