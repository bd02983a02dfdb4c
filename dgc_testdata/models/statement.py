"""Test statement models for DGC interoperability test vectors.

A test statement carries one test case through every stage of the
certificate pipeline:

    JSON -> CBOR -> COSE -> BASE45 -> PREFIX -> 2DCODE

together with the signing context (TESTCTX) and the outcomes a verifier
is expected to report (EXPECTEDRESULTS).

Binary stages are stored as their canonical text (hex or base64) and only
decoded when a caller asks for the bytes, so "absent" (None) stays
distinguishable from "present but malformed" (a decoding error).
"""

import copy
import json
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_serializer,
    field_validator,
    model_serializer,
)

from dgc_testdata.core.exceptions import (
    Base64DecodingError,
    CertificateDecodingError,
    CertificateEncodingError,
    DocumentParseError,
    DocumentSerializationError,
)
from dgc_testdata.utils.codec import decode_base64, decode_hex, encode_base64, encode_hex

log = logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, dict, list)) and not value)


# Instant text: date, time, at most microsecond precision, Z or a numeric offset
_INSTANT_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,6}))?(Z|[+-]\d{2}:\d{2})$"
)


def _parse_instant(text: str) -> datetime:
    """Parse an ISO-8601 instant without dropping any precision.

    Raises:
        ValueError: If text is not a full date-time with zone, or carries
            more fractional digits than a datetime can hold.
    """
    match = _INSTANT_PATTERN.match(text)
    if not match:
        raise ValueError(
            f"{text!r} is not an ISO-8601 instant with at most 6 fractional digits"
        )
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second),
        int((fraction or "0").ljust(6, "0")), tzinfo=tz,
    )


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity by default; the document format does not
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _dumps(value: Any, what: str) -> str:
    """Render a value as compact JSON, refusing anything JSON cannot represent."""
    try:
        return json.dumps(value, allow_nan=False, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise DocumentSerializationError(f"{what} has no JSON representation: {e}")


class _VectorModel(BaseModel):
    """Shared behaviour for all test-vector document models.

    - Unknown keys are ignored when parsing
    - Python field names work for construction, document keys for parsing
    - Nested models are copied on assignment, never shared between records
    - Unset and empty values are left out of the document entirely
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_by_alias=True,
        validate_by_name=True,
        validate_assignment=True,
        revalidate_instances="always",
    )

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> dict[str, Any]:
        document = handler(self)
        return {key: value for key, value in document.items() if not _is_empty(value)}

    def to_document(self) -> dict[str, Any]:
        """Return the canonical document as a dict keyed by document tokens."""
        try:
            return self.model_dump(by_alias=True, exclude_none=True)
        except ValueError as e:
            raise DocumentSerializationError(f"{type(self).__name__} serialization failed: {e}")

    def to_json(self) -> str:
        """Serialize to the canonical JSON document.

        Raises:
            DocumentSerializationError: If a value has no JSON representation.
        """
        return _dumps(self.to_document(), type(self).__name__)

    @classmethod
    def from_dict(cls, data: Any):
        """Build from a parsed document, ignoring unrecognized keys.

        Raises:
            DocumentParseError: If data is not an object or a known key has the wrong type.
        """
        if not isinstance(data, dict):
            raise DocumentParseError(
                f"{cls.__name__} document must be a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data, by_alias=True, by_name=False)
        except ValidationError as e:
            raise DocumentParseError(f"{cls.__name__} document invalid: {e}")

    @classmethod
    def from_json(cls, text: Union[str, bytes]):
        """Parse the canonical JSON document.

        Raises:
            DocumentParseError: If text is not valid JSON or not a valid document.
        """
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, UnicodeDecodeError) as e:
            raise DocumentParseError(f"{cls.__name__} JSON parse failed: {e}")
        return cls.from_dict(data)


class ExpectedResults(_VectorModel):
    """Outcomes a verifier is expected to report, one flag per pipeline stage.

    Each flag is tri-state: True (stage must succeed), False (stage must
    fail) or None (no assertion for this stage).
    """

    expected_valid_object: Optional[StrictBool] = Field(default=None, alias="EXPECTEDVALIDOBJECT")
    expected_schema_validation: Optional[StrictBool] = Field(default=None, alias="EXPECTEDSCHEMAVALIDATION")
    expected_encode: Optional[StrictBool] = Field(default=None, alias="EXPECTEDENCODE")
    expected_decode: Optional[StrictBool] = Field(default=None, alias="EXPECTEDDECODE")
    expected_verify: Optional[StrictBool] = Field(default=None, alias="EXPECTEDVERIFY")
    expected_unprefix: Optional[StrictBool] = Field(default=None, alias="EXPECTEDUNPREFIX")
    expected_valid_json: Optional[StrictBool] = Field(default=None, alias="EXPECTEDVALIDJSON")
    expected_base45_decode: Optional[StrictBool] = Field(default=None, alias="EXPECTEDB45DECODE")
    expected_picture_decode: Optional[StrictBool] = Field(default=None, alias="EXPECTEDPICTUREDECODE")
    expected_expiration_check: Optional[StrictBool] = Field(default=None, alias="EXPECTEDEXPIRATIONCHECK")

    def set_all_positive(self) -> None:
        """Expect every pipeline stage to succeed.

        Sets the nine stage flags to True. expected_valid_object is not a
        pipeline stage and keeps its current value.
        """
        self.expected_valid_json = True
        self.expected_schema_validation = True
        self.expected_encode = True
        self.expected_decode = True
        self.expected_verify = True
        self.expected_unprefix = True
        self.expected_base45_decode = True
        self.expected_picture_decode = True
        self.expected_expiration_check = True


class TestContext(_VectorModel):
    """Signing and schema metadata for a test statement.

    Attributes:
        version: Version of the test-vector format itself (not of the
            certificate or payload).
        schema_version: Version of the JSON schema the payload conforms to.
        certificate: Base64 of the DER-encoded signing certificate.
        validation_clock: Instant a verifier should treat as "now".
        description: Human-readable description of the test case.
    """

    __test__ = False  # not a pytest test class

    version: StrictInt = Field(default=0, alias="VERSION")
    schema_version: Optional[StrictStr] = Field(default=None, alias="SCHEMA")
    certificate: Optional[StrictStr] = Field(default=None, alias="CERTIFICATE")
    validation_clock: Optional[datetime] = Field(default=None, alias="VALIDATIONCLOCK")
    description: Optional[StrictStr] = Field(default=None, alias="DESCRIPTION")

    @field_validator("validation_clock", mode="before")
    @classmethod
    def _parse_clock(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _parse_instant(value)
        if value is not None and not isinstance(value, datetime):
            raise ValueError(f"VALIDATIONCLOCK must be an ISO-8601 string, got {type(value).__name__}")
        return value

    @field_validator("validation_clock")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_serializer("validation_clock")
    def _format_instant(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        text = value.strftime("%Y-%m-%dT%H:%M:%S")
        if value.microsecond:
            fraction = f"{value.microsecond:06d}"
            if fraction.endswith("000"):
                fraction = fraction[:3]
            text += f".{fraction}"
        return text + "Z"

    @property
    def certificate_object(self) -> Optional[x509.Certificate]:
        """Decode the signing certificate.

        Returns:
            The X.509 certificate, or None if no certificate is set.

        Raises:
            CertificateDecodingError: If the text is not base64 of a DER certificate.
        """
        if self.certificate is None:
            return None
        try:
            der = decode_base64(self.certificate, "CERTIFICATE")
        except Base64DecodingError as e:
            raise CertificateDecodingError(e.message)
        try:
            return x509.load_der_x509_certificate(der)
        except ValueError as e:
            raise CertificateDecodingError(f"CERTIFICATE is not a DER X.509 certificate: {e}")

    def set_certificate(self, certificate: x509.Certificate) -> None:
        """Store a certificate as base64 DER.

        Raises:
            CertificateEncodingError: If the certificate cannot be DER encoded.
        """
        try:
            der = certificate.public_bytes(serialization.Encoding.DER)
        except (AttributeError, TypeError, ValueError) as e:
            raise CertificateEncodingError(f"certificate cannot be DER encoded: {e}")
        self.certificate = encode_base64(der)


class TestStatement(_VectorModel):
    """One interoperability test case.

    Text fields hold the canonical stored form. Assigning text stores it
    verbatim; the *_bytes properties validate on read, and the
    set_*_bytes methods encode on write.

    Attributes:
        json_payload: The certificate claims as a JSON-like tree (JSON).
        cbor: Hex of the CBOR encoding of the payload (CBOR).
        cose: Hex of the signed COSE structure (COSE).
        base45: Base45 text of the compressed COSE bytes (BASE45).
        prefix: base45 with the scheme prefix prepended (PREFIX).
        barcode: Base64 of the rendered 2D barcode image (2DCODE).
        test_ctx: Signing and schema metadata (TESTCTX).
        expected_results: Expected verifier outcomes (EXPECTEDRESULTS).
    """

    __test__ = False  # not a pytest test class

    json_payload: Optional[Any] = Field(default=None, alias="JSON")
    cbor: Optional[StrictStr] = Field(default=None, alias="CBOR")
    cose: Optional[StrictStr] = Field(default=None, alias="COSE")
    base45: Optional[StrictStr] = Field(default=None, alias="BASE45")
    prefix: Optional[StrictStr] = Field(default=None, alias="PREFIX")
    barcode: Optional[StrictStr] = Field(default=None, alias="2DCODE")
    test_ctx: Optional[TestContext] = Field(default=None, alias="TESTCTX")
    expected_results: Optional[ExpectedResults] = Field(default=None, alias="EXPECTEDRESULTS")

    @field_validator("json_payload")
    @classmethod
    def _detach_payload(cls, value: Any) -> Any:
        try:
            return copy.deepcopy(value)
        except (TypeError, copy.Error) as e:
            raise DocumentSerializationError(f"JSON payload cannot be copied: {e}")

    @property
    def json_string(self) -> Optional[str]:
        """The payload as a standalone JSON document, or None if unset.

        Raises:
            DocumentSerializationError: If the payload has no JSON representation.
        """
        if self.json_payload is None:
            return None
        return _dumps(self.json_payload, "JSON payload")

    @property
    def cbor_bytes(self) -> Optional[bytes]:
        """Decoded CBOR bytes, or None if unset.

        Raises:
            HexDecodingError: If CBOR is not valid hex.
        """
        if self.cbor is None:
            return None
        return decode_hex(self.cbor, "CBOR")

    def set_cbor_bytes(self, data: bytes) -> None:
        self.cbor = encode_hex(data)

    @property
    def cose_bytes(self) -> Optional[bytes]:
        """Decoded COSE bytes, or None if unset.

        Raises:
            HexDecodingError: If COSE is not valid hex.
        """
        if self.cose is None:
            return None
        return decode_hex(self.cose, "COSE")

    def set_cose_bytes(self, data: bytes) -> None:
        self.cose = encode_hex(data)

    @property
    def barcode_bytes(self) -> Optional[bytes]:
        """Decoded 2D barcode image bytes, or None if unset.

        Raises:
            Base64DecodingError: If 2DCODE is not valid base64.
        """
        if self.barcode is None:
            return None
        return decode_base64(self.barcode, "2DCODE")

    def set_barcode_bytes(self, data: bytes) -> None:
        self.barcode = encode_base64(data)

    def to_json(self) -> str:
        """Serialize to the canonical JSON document.

        Unset and empty fields are omitted, never written as null.

        Raises:
            DocumentSerializationError: If the payload has no JSON representation.
        """
        text = super().to_json()
        log.debug(f"Serialized test statement ({len(text)} chars)")
        return text
