"""CLI output helpers.

Results go to stdout as JSON. Errors go to stderr as a JSON object with
code and message, followed by a non-zero exit.
"""

import json
from enum import Enum
from typing import Any

import typer

EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 2
EXIT_DECODE_ERROR = 3


class OutputFormat(str, Enum):
    json = "json"
    pretty = "pretty"


def output(result: Any, format: OutputFormat = OutputFormat.json) -> None:
    """Print a JSON-serializable result in the requested format."""
    if format == OutputFormat.pretty:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        typer.echo(json.dumps(result, ensure_ascii=False, separators=(",", ":")))


def output_error(code: str, message: str, exit_code: int) -> None:
    """Print an error object to stderr and exit."""
    typer.echo(json.dumps({"error": {"code": code, "message": message}}), err=True)
    raise typer.Exit(code=exit_code)
