"""Test-vector inspection commands.

Commands:
    dgc-testdata show <file>       Print the canonical document
    dgc-testdata stages <file>     Report the pipeline stages a vector carries
    dgc-testdata list <directory>  List the vectors in a corpus
"""

from typing import Any, Optional

import typer

from dgc_testdata.cli.output import (
    EXIT_DECODE_ERROR,
    EXIT_PARSE_ERROR,
    OutputFormat,
    output,
    output_error,
)
from dgc_testdata.core.config import TESTDATA_DIR
from dgc_testdata.core.exceptions import CertificateError, DocumentError, EncodingError
from dgc_testdata.core.logging import configure_logging
from dgc_testdata.corpus import load_corpus, load_statement
from dgc_testdata.models.statement import TestStatement

app = typer.Typer(
    name="dgc-testdata",
    help="Inspect DGC interoperability test vectors.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to DGC_LOG_LEVEL or INFO)",
    ),
) -> None:
    configure_logging(log_level=log_level)


def _load(path: str) -> TestStatement:
    try:
        return load_statement(path)
    except DocumentError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)
    except OSError as e:
        output_error(code="FILE_READ_FAILED", message=str(e), exit_code=EXIT_PARSE_ERROR)


@app.command("show")
def show_cmd(
    path: str = typer.Argument(..., help="Test vector JSON file"),
    format: OutputFormat = typer.Option(
        OutputFormat.pretty,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Print a test vector as its canonical document.

    Unknown keys in the file are dropped; unset fields are omitted.
    """
    statement = _load(path)
    try:
        document = statement.to_document()
        # Reject non-finite numbers before printing
        statement.to_json()
    except DocumentError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)
        return  # unreachable, but helps type checker
    output(document, format)


def _stage_summary(statement: TestStatement) -> dict[str, Any]:
    """Presence and decoded size of each pipeline stage."""
    return {
        "JSON": {"present": statement.json_payload is not None},
        "CBOR": {
            "present": statement.cbor is not None,
            "bytes": len(statement.cbor_bytes) if statement.cbor is not None else None,
        },
        "COSE": {
            "present": statement.cose is not None,
            "bytes": len(statement.cose_bytes) if statement.cose is not None else None,
        },
        "BASE45": {"present": statement.base45 is not None},
        "PREFIX": {"present": statement.prefix is not None},
        "2DCODE": {
            "present": statement.barcode is not None,
            "bytes": len(statement.barcode_bytes) if statement.barcode is not None else None,
        },
    }


@app.command("stages")
def stages_cmd(
    path: str = typer.Argument(..., help="Test vector JSON file"),
    format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Report which pipeline stages a test vector carries.

    Binary stages are decoded to check their encoding and report their
    size. A malformed stage is an error, not an absent stage.

    Examples:
        dgc-testdata stages testdata/common/2DCode/raw/1.json
    """
    statement = _load(path)

    try:
        stages = _stage_summary(statement)
        certificate = None
        if statement.test_ctx is not None:
            cert = statement.test_ctx.certificate_object
            if cert is not None:
                certificate = {
                    "subject": cert.subject.rfc4514_string(),
                    "serial_number": format_serial(cert.serial_number),
                }
    except (EncodingError, CertificateError) as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_DECODE_ERROR)
        return  # unreachable, but helps type checker

    result: dict[str, Any] = {
        "file": path,
        "stages": stages,
        "certificate": certificate,
        "expected_results": (
            statement.expected_results.to_document()
            if statement.expected_results is not None
            else {}
        ),
    }
    if statement.test_ctx is not None:
        result["description"] = statement.test_ctx.description

    output(result, format)


def format_serial(serial_number: int) -> str:
    """Certificate serial number as colon-separated upper-case hex."""
    digits = f"{serial_number:X}"
    if len(digits) % 2:
        digits = "0" + digits
    return ":".join(digits[i:i + 2] for i in range(0, len(digits), 2))


@app.command("list")
def list_cmd(
    directory: str = typer.Argument(TESTDATA_DIR, help="Corpus directory"),
    pattern: Optional[str] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Glob for vector files (defaults to DGC_TESTDATA_GLOB)",
    ),
) -> None:
    """List the test vectors in a corpus, one per line."""
    try:
        entries = load_corpus(directory, pattern)
    except DocumentError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)
        return  # unreachable, but helps type checker
    except NotADirectoryError as e:
        output_error(code="CORPUS_NOT_FOUND", message=str(e), exit_code=EXIT_PARSE_ERROR)
        return

    for entry in entries:
        ctx = entry.statement.test_ctx
        description = ctx.description if ctx is not None and ctx.description else ""
        typer.echo(f"{entry.path}\t{description}")
