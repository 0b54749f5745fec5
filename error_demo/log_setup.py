"""Operational logging, split across stdout and stderr by level.

The log collector infers severity from the stream, so anything below ERROR
must stay off stderr.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class _BelowLevel(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def configure_logging(level: str = "INFO") -> None:
    formatter = logging.Formatter(LOG_FORMAT)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setFormatter(formatter)
    out_handler.addFilter(_BelowLevel(logging.ERROR))

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setFormatter(formatter)
    err_handler.setLevel(logging.ERROR)

    logging.basicConfig(level=level, handlers=[out_handler, err_handler], force=True)
