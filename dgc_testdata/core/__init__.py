# Core - configuration, exceptions, and logging

from dgc_testdata.core.exceptions import (
    TestDataError,
    DocumentError,
    DocumentSerializationError,
    DocumentParseError,
    EncodingError,
    HexDecodingError,
    Base64DecodingError,
    CertificateError,
    CertificateDecodingError,
    CertificateEncodingError,
)
from dgc_testdata.core.logging import configure_logging, JsonFormatter

__all__ = [
    "TestDataError",
    "DocumentError",
    "DocumentSerializationError",
    "DocumentParseError",
    "EncodingError",
    "HexDecodingError",
    "Base64DecodingError",
    "CertificateError",
    "CertificateDecodingError",
    "CertificateEncodingError",
    "configure_logging",
    "JsonFormatter",
]
