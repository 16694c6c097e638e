'''
    Failure kinds raised by the crypto primitives.

    Every provider failure surfaces as exactly one of these, chained to the
    underlying `cryptography` exception, so callers can tell a bad key from
    a bad payload without parsing messages.
'''


class CryptoError(Exception):
    """Base class for all primitive failures."""


class KeyGenerationError(CryptoError):
    pass


class ExportError(CryptoError):
    pass


# Not called ImportError: that name belongs to the interpreter.
class KeyImportError(CryptoError):
    pass


class EncryptError(CryptoError):
    pass


class DecryptError(CryptoError):
    pass
