"""Line sinks: the two output channels a log collector classifies by stream.

Lines written to stdout default to INFO, lines written to stderr default to
ERROR. A single-line JSON payload carrying a "severity" field overrides the
stream default.
"""

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class LineSink(Protocol):
    def write(self, line: str) -> None: ...


class StreamSink:
    """Writes one newline-terminated line per call to a text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def write(self, line: str) -> None:
        # One write call per line so concurrent requests never interleave mid-line
        self._stream.write(line.rstrip("\n") + "\n")
        self._stream.flush()


def stdout_sink() -> StreamSink:
    """INFO-classified channel."""
    return StreamSink(sys.stdout)


def stderr_sink() -> StreamSink:
    """ERROR-classified channel."""
    return StreamSink(sys.stderr)
