"""Shared fixtures for test statement tests."""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from dgc_testdata.models import ExpectedResults, TestContext, TestStatement

# CBOR for {"v": 1}
CBOR_HEX = "a1617601"
# Truncated COSE_Sign1 (tag 18) header, enough to exercise hex handling
COSE_HEX = "d2844da20448d919375fc1e7b6b20126a0"
# PNG signature
BARCODE_B64 = "iVBORw0KGgo="


@pytest.fixture(scope="session")
def signing_certificate() -> x509.Certificate:
    """Self-signed EC P-256 document signer certificate."""
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([
        x509.NameAttribute(NameOID.COUNTRY_NAME, "SE"),
        x509.NameAttribute(NameOID.COMMON_NAME, "DGC Test Signer"),
    ])
    not_before = datetime(2021, 5, 1, tzinfo=timezone.utc)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(0x1A2B3C)
        .not_valid_before(not_before)
        .not_valid_after(not_before + timedelta(days=365))
        .sign(key, hashes.SHA256())
    )


@pytest.fixture
def full_statement(signing_certificate) -> TestStatement:
    """Statement with every stage populated and all outcomes positive."""
    statement = TestStatement(
        json_payload={
            "ver": "1.3.0",
            "nam": {"fn": "Musterfrau", "gn": "Erika"},
            "dob": "1964-08-12",
            "v": [{"dn": 2, "sd": 2, "dt": "2021-05-29"}],
        },
        cbor=CBOR_HEX,
        cose=COSE_HEX,
        base45="6BFOXN*TS0BI$ZD",
        prefix="HC1:6BFOXN*TS0BI$ZD",
        barcode=BARCODE_B64,
    )
    ctx = TestContext(
        version=1,
        schema_version="1.3.0",
        validation_clock=datetime(2021, 6, 1, 10, 0, tzinfo=timezone.utc),
        description="VALID: EC 256 key",
    )
    ctx.set_certificate(signing_certificate)
    statement.test_ctx = ctx

    expected = ExpectedResults()
    expected.set_all_positive()
    statement.expected_results = expected
    return statement


@pytest.fixture
def restore_root_logger():
    """Put back root logger handlers replaced by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
