"""
============================================================================
NESA2CSV PACKAGE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Package initialization file exposing core functionality from submodules.

AVAILABLE MODULES:
- logger: Logging and run statistics
- measurements: Static measurement lookup tables and column order
- row_parser: Station log line parsing
- file_processor: Single-pass log file to CSV streaming
- directory_walker: Log file discovery and batch driver
- csv_writer: Output CSV creation and validation
- exceptions: Row, file and setup errors

============================================================================
"""

from .logger import (
    setup_logger,
    log_file_processing,
    log_batch_summary
)

from .measurements import (
    MEASUREMENT_MAP,
    REQUIRED_MEASUREMENTS,
    CSV_HEADER,
    lookup_measurement
)

from .row_parser import (
    Record,
    zero_pad,
    parse_row,
    record_to_row
)

from .file_processor import process_file

from .directory_walker import (
    find_log_files,
    convert_directory
)

from .csv_writer import (
    open_output,
    create_writer,
    build_header,
    validate_csv_output
)

from .exceptions import (
    RowParseError,
    InvalidRowError,
    InvalidTimestampError,
    LogFileOpenError,
    LogFileReadError,
    InputPathError,
    OutputFileError
)

__all__ = [
    # Logger functions
    'setup_logger',
    'log_file_processing',
    'log_batch_summary',

    # Lookup tables
    'MEASUREMENT_MAP',
    'REQUIRED_MEASUREMENTS',
    'CSV_HEADER',
    'lookup_measurement',

    # Row parsing
    'Record',
    'zero_pad',
    'parse_row',
    'record_to_row',

    # File and directory processing
    'process_file',
    'find_log_files',
    'convert_directory',

    # CSV Writer functions
    'open_output',
    'create_writer',
    'build_header',
    'validate_csv_output',

    # Errors
    'RowParseError',
    'InvalidRowError',
    'InvalidTimestampError',
    'LogFileOpenError',
    'LogFileReadError',
    'InputPathError',
    'OutputFileError'
]

__version__ = '1.0.0'
