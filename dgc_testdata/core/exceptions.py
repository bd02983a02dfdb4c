"""Test data exceptions.

Every failure carries a code string for categorization and a human-readable
message. Absence of an optional field is never an error; these are raised
only when a value is present but cannot be converted.
"""


class TestDataError(Exception):
    """Base exception for test-vector operations.

    Attributes:
        code: Error code string for categorization
        message: Human-readable error message
    """

    __test__ = False  # not a pytest test class

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


# =============================================================================
# Document Exceptions
# =============================================================================

class DocumentError(TestDataError):
    """Base exception for canonical document errors."""
    pass


class DocumentSerializationError(DocumentError):
    """Payload has no representable JSON form.

    Used when:
    - Non-finite floats (NaN, Infinity)
    - bytes, sets or arbitrary objects inside the payload tree
    """

    def __init__(self, message: str = "Document serialization failed"):
        super().__init__("DOCUMENT_SERIALIZATION_FAILED", message)


class DocumentParseError(DocumentError):
    """JSON/structure parse failures.

    Used when:
    - Invalid JSON
    - Top-level value is not an object
    - A known key holds a value of the wrong type
    """

    def __init__(self, message: str = "Document parse failed"):
        super().__init__("DOCUMENT_PARSE_FAILED", message)


# =============================================================================
# Text Encoding Exceptions
# =============================================================================

class EncodingError(TestDataError):
    """Base exception for hex/base64 text fields that fail to decode."""
    pass


class HexDecodingError(EncodingError):
    """Hex field present but not valid hex."""

    def __init__(self, message: str = "Invalid hex encoding"):
        super().__init__("HEX_DECODING_FAILED", message)


class Base64DecodingError(EncodingError):
    """Base64 field present but not valid base64."""

    def __init__(self, message: str = "Invalid base64 encoding"):
        super().__init__("BASE64_DECODING_FAILED", message)


# =============================================================================
# Certificate Exceptions
# =============================================================================

class CertificateError(TestDataError):
    """Base exception for signing certificate conversions."""
    pass


class CertificateDecodingError(CertificateError):
    """Certificate text is not base64 of a single DER X.509 certificate."""

    def __init__(self, message: str = "Certificate decoding failed"):
        super().__init__("CERTIFICATE_DECODING_FAILED", message)


class CertificateEncodingError(CertificateError):
    """Certificate object could not be DER encoded."""

    def __init__(self, message: str = "Certificate encoding failed"):
        super().__init__("CERTIFICATE_ENCODING_FAILED", message)
