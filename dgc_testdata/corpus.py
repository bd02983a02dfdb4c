"""Test-vector corpus files.

A corpus is a directory tree of JSON files, one test statement per file.
Files are loaded in sorted path order so runs are reproducible.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from dgc_testdata.core.config import CORPUS_GLOB
from dgc_testdata.core.exceptions import DocumentParseError
from dgc_testdata.models.statement import TestStatement

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class CorpusEntry:
    """A test statement together with the file it was read from."""

    path: Path
    statement: TestStatement

    @property
    def name(self) -> str:
        """File name without the .json suffix, used as the vector id."""
        return self.path.stem


def load_statement(path: PathLike) -> TestStatement:
    """Read one test statement file.

    Raises:
        DocumentParseError: If the file is not a valid test statement.
            The message names the file.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    data = path.read_bytes()
    try:
        statement = TestStatement.from_json(data)
    except DocumentParseError as e:
        raise DocumentParseError(f"{path}: {e.message}")
    log.debug(f"Loaded test statement {path.name}", extra={"path": str(path)})
    return statement


def load_corpus(directory: PathLike, pattern: Optional[str] = None) -> List[CorpusEntry]:
    """Load every test statement under a directory.

    Args:
        directory: Corpus root.
        pattern: Glob relative to the root. Defaults to DGC_TESTDATA_GLOB.

    Returns:
        Entries sorted by path.

    Raises:
        NotADirectoryError: If directory does not exist or is not a directory.
        DocumentParseError: On the first file that fails to parse.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Corpus directory not found: {root}")

    entries = [
        CorpusEntry(path=path, statement=load_statement(path))
        for path in sorted(root.glob(pattern or CORPUS_GLOB))
        if path.is_file()
    ]
    log.info(
        f"Loaded {len(entries)} test statements from {root}",
        extra={"path": str(root), "vector_count": len(entries)},
    )
    return entries


def save_statement(statement: TestStatement, path: PathLike) -> Path:
    """Write a test statement as its canonical document.

    Parent directories are created as needed.

    Raises:
        DocumentSerializationError: If the payload has no JSON representation.
    """
    path = Path(path)
    text = statement.to_json()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.debug(f"Wrote test statement {path.name}", extra={"path": str(path)})
    return path
