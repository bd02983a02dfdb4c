# Utilities - text codecs for binary fields

from dgc_testdata.utils.codec import (
    decode_base64,
    decode_hex,
    encode_base64,
    encode_hex,
)

__all__ = [
    "decode_base64",
    "decode_hex",
    "encode_base64",
    "encode_hex",
]
