"""
Exceptions raised by the converter.

Row-level errors are skipped by the file processor, file-level errors are
skipped by the directory driver, and setup errors abort the run.
"""

from typing import Dict, Optional


class RowParseError(ValueError):
    """A data line could not be turned into a record."""


class InvalidRowError(RowParseError):
    def __init__(self, line: str):
        super().__init__(f"invalid row: {line}")
        self.line = line


class InvalidTimestampError(RowParseError):
    def __init__(self, timestamp: str):
        super().__init__(f"invalid timestamp: {timestamp}")
        self.timestamp = timestamp


class LogFileOpenError(OSError):
    """A log file could not be opened."""


class LogFileReadError(OSError):
    """
    Scanning a log file failed part way through.

    ``stats`` holds the per-file counters accumulated before the failure,
    including whether the header row had already been written.
    """

    def __init__(self, message: str, stats: Optional[Dict[str, int]] = None):
        super().__init__(message)
        self.stats = stats or {}


class InputPathError(OSError):
    """The input root is missing or cannot be accessed."""


class OutputFileError(OSError):
    """The output CSV could not be created."""
