"""Logging configuration.

Provides JSON-formatted logging for the corpus tools and CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from dgc_testdata.core.config import LOG_FILE, LOG_LEVEL


class JsonFormatter(logging.Formatter):
    """One JSON object per line, timestamped from the record itself.

    Corpus fields passed through ``extra`` (the vector file path and the
    number of vectors loaded) are copied into the object when present.
    """

    EXTRA_FIELDS = ("path", "vector_count")

    def format(self, record):
        created = datetime.fromtimestamp(record.created, timezone.utc)
        entry = {
            "time": created.strftime("%Y-%m-%dT%H:%M:%S.") + f"{created.microsecond // 1000:03d}Z",
            "level": record.levelname,
            "logger": record.name,
            "source": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(
            {k: getattr(record, k) for k in self.EXTRA_FIELDS if hasattr(record, k)}
        )
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
):
    """Configure logging with JSON formatter.

    Args:
        log_file: Path to log file. Defaults to DGC_LOG_FILE; console only when unset.
        log_level: Log level. Defaults to DGC_LOG_LEVEL env var or 'INFO'.
    """
    # Console handler goes to stderr so CLI output on stdout stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JsonFormatter())
    handlers = [console_handler]

    log_file = log_file or LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or LOG_LEVEL).upper()
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.handlers = handlers
