'''
    BASE64 functionality

    Keys and payloads cross the HTTP boundary as standard (padded) base64,
    not base64url. Decoding is strict: stray characters raise instead of
    being silently dropped.
'''

# ========== Imports ==========
import base64
import binascii


# ========== Base64 Encoding ==========
def b64_encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


# ========== Base64 Decoding ==========
def b64_decode(text: str) -> bytes:
    if isinstance(text, str):
        text = text.encode("ascii")
    return base64.b64decode(text, validate=True)


# Everything b64_decode can raise on malformed input
DECODE_ERRORS = (binascii.Error, ValueError, TypeError)
