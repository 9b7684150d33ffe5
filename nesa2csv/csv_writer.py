"""
============================================================================
CSV WRITER MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Handles the lifecycle of the single consolidated output CSV: creating the
file, producing a row writer, and checking the finished file.

KEY FUNCTIONS:
- open_output: Create the output file (and its parent directory)
- create_writer: Row writer used for streaming records
- build_header: Header row for the output
- validate_csv_output: Read the finished CSV back and verify its shape

============================================================================
"""

import csv
import logging
from pathlib import Path
from typing import IO, List

import pandas as pd

from .exceptions import OutputFileError
from .measurements import CSV_HEADER


# Undecodable input bytes survive the round trip from log to CSV
PASSTHROUGH_ERRORS = 'surrogateescape'


def open_output(output_file: str, logger: logging.Logger) -> IO[str]:
    """
    Create the output CSV file for writing.

    INPUTS:
    - output_file (str): Path to output CSV file
    - logger (logging.Logger): Logger instance

    OUTPUTS:
    - IO[str]: Open text handle, caller closes it

    RAISES:
    - OutputFileError: If the file (or its directory) cannot be created
    """
    output_path = Path(output_file)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        handle = open(output_path, 'w', newline='', encoding='utf-8',
                      errors=PASSTHROUGH_ERRORS)
    except OSError as e:
        raise OutputFileError(f"Cannot create output file {output_file}: {e}") from e

    logger.debug(f"Output path: {output_path}")
    return handle


def create_writer(handle: IO[str]):
    """Row writer over an open output handle, one record per line."""
    return csv.writer(handle, lineterminator='\n')


def build_header() -> List[str]:
    return list(CSV_HEADER)


def validate_csv_output(
    output_path: str,
    expected_rows: int,
    expected_cols: int,
    logger: logging.Logger
) -> bool:
    """
    Validate that the CSV file was written correctly.

    INPUTS:
    - output_path (str): Path to CSV file
    - expected_rows (int): Expected number of data rows (header excluded)
    - expected_cols (int): Expected number of columns
    - logger (logging.Logger): Logger instance

    OUTPUTS:
    - bool: True if validation passes, False otherwise

    FUNCTIONALITY:
    Reads the CSV back with every column as text and compares its
    dimensions with what the run reported writing. An empty file is valid
    only when no rows were expected.
    """
    output_path = Path(output_path)

    if not output_path.exists():
        logger.error("CSV file does not exist")
        return False

    if output_path.stat().st_size == 0:
        if expected_rows == 0:
            logger.debug("CSV is empty, no rows were expected")
            return True
        logger.warning(f"CSV is empty but {expected_rows} rows were written")
        return False

    try:
        df = pd.read_csv(output_path, dtype=str, keep_default_na=False,
                         encoding_errors='replace')
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"CSV validation failed: {e}")
        return False

    if len(df.columns) != expected_cols:
        logger.warning(f"Column count mismatch: expected {expected_cols}, "
                       f"got {len(df.columns)}")
        return False

    if len(df) != expected_rows:
        logger.warning(f"Row count mismatch: expected {expected_rows}, "
                       f"got {len(df)}")
        return False

    logger.debug(f"CSV validation passed ({len(df):,} rows, {len(df.columns)} columns)")
    return True
