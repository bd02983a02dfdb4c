"""Strict hex and base64 text codecs for binary test-vector fields.

Decoding never returns a best-effort result: whitespace, odd-length hex,
characters outside the alphabet and bad padding are all rejected.
"""

import base64
import binascii

from dgc_testdata.core.exceptions import Base64DecodingError, HexDecodingError


def encode_hex(data: bytes) -> str:
    """Encode bytes as lower-case hex text."""
    return binascii.hexlify(data).decode("ascii")


def decode_hex(text: str, field_name: str = "value") -> bytes:
    """Decode hex text to bytes.

    Upper and lower case digits are both accepted.

    Raises:
        HexDecodingError: If text contains non-hex characters or has odd length.
    """
    try:
        return binascii.unhexlify(text)
    except ValueError as e:
        raise HexDecodingError(f"{field_name} hex decode failed: {e}")


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str, field_name: str = "value") -> bytes:
    """Decode standard padded base64 text to bytes.

    Raises:
        Base64DecodingError: If text is outside the base64 alphabet or badly padded.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        raise Base64DecodingError(f"{field_name} base64 decode failed: {e}")
