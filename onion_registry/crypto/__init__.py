'''
    Crypto primitives for the overlay network.

    - RSA-OAEP (2048, SHA-256) key pairs with base64 SPKI / PKCS#8 export and import.
    - RSA-OAEP encrypt/decrypt over base64 payloads.
    - AES-256-CBC keys and IV-prefixed symmetric encrypt/decrypt.

    Stateless; knows nothing about the registry. Composing a hybrid scheme
    (wrap a fresh symmetric key under a node's public key) is up to the caller.
'''

from .aes_cbc import (
    create_random_symmetric_key,
    export_symmetric_key,
    import_symmetric_key,
    symmetric_decrypt,
    symmetric_encrypt,
)
from .base64_codec import b64_decode, b64_encode
from .errors import (
    CryptoError,
    DecryptError,
    EncryptError,
    ExportError,
    KeyGenerationError,
    KeyImportError,
)
from .rsa_key_management import (
    AsymmetricKeyPair,
    export_private_key,
    export_public_key,
    generate_rsa_keypair,
    import_private_key,
    import_public_key,
)
from .rsa_oaep import oaep_max_plaintext_len, rsa_decrypt, rsa_encrypt

__all__ = [
    "b64_encode", "b64_decode",
    "AsymmetricKeyPair", "generate_rsa_keypair",
    "export_public_key", "export_private_key",
    "import_public_key", "import_private_key",
    "rsa_encrypt", "rsa_decrypt", "oaep_max_plaintext_len",
    "create_random_symmetric_key", "export_symmetric_key", "import_symmetric_key",
    "symmetric_encrypt", "symmetric_decrypt",
    "CryptoError", "KeyGenerationError", "ExportError", "KeyImportError",
    "EncryptError", "DecryptError",
]
