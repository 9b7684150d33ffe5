"""
============================================================================
FILE PROCESSOR MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Streams one station log file into the shared CSV writer in a single pass.

KEY FUNCTIONS:
- process_file: Convert every data line of a log file into a CSV row
- new_file_stats: Empty per-file counters

============================================================================
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from .csv_writer import PASSTHROUGH_ERRORS, build_header
from .exceptions import LogFileOpenError, LogFileReadError, RowParseError
from .row_parser import is_data_line, parse_row, record_to_row


def new_file_stats() -> Dict[str, int]:
    return {
        'lines_read': 0,
        'data_lines': 0,
        'rows_written': 0,
        'invalid_rows': 0,
        'too_old': 0,
        'header_written': 0,
    }


def _strip_line_ending(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def process_file(
    file_path: Union[str, Path],
    writer,
    write_header: bool,
    cutoff: Optional[datetime],
    logger: logging.Logger,
    encoding: str = 'utf-8'
) -> Dict[str, int]:
    """
    Convert a single log file and append its rows to the CSV writer.

    INPUTS:
    - file_path (str | Path): Log file to read
    - writer: csv writer shared by the whole run
    - write_header (bool): Write the header row once the file is open
    - cutoff (datetime, optional): Drop records older than this
    - logger (logging.Logger): Logger instance
    - encoding (str): Text encoding of the log file; bytes it cannot decode
      are carried through to the output unchanged

    OUTPUTS:
    - dict: Per-file counters (see new_file_stats)

    RAISES:
    - LogFileOpenError: File cannot be opened, nothing was written
    - LogFileReadError: Scan failed part way; rows written so far are kept
      and the exception carries the counters

    FUNCTIONALITY:
    Lines not starting with 'S,' are ignored. Lines that fail to parse are
    logged and skipped, records older than the cutoff are skipped silently,
    and everything else becomes one CSV row in line order.
    """
    stats = new_file_stats()

    try:
        handle = open(file_path, 'r', encoding=encoding,
                      errors=PASSTHROUGH_ERRORS, newline='\n')
    except OSError as e:
        raise LogFileOpenError(f"cannot open file {file_path}: {e}") from e

    with handle:
        if write_header:
            writer.writerow(build_header())
            stats['header_written'] = 1

        try:
            for raw_line in handle:
                stats['lines_read'] += 1
                line = _strip_line_ending(raw_line)
                if not is_data_line(line):
                    continue

                stats['data_lines'] += 1
                try:
                    record = parse_row(line, cutoff)
                except RowParseError as e:
                    logger.warning(f"Skipping line due to error: {e}")
                    stats['invalid_rows'] += 1
                    continue

                if record is None:
                    stats['too_old'] += 1
                    continue

                writer.writerow(record_to_row(record))
                stats['rows_written'] += 1

        except OSError as e:
            raise LogFileReadError(
                f"error reading file {file_path} after line {stats['lines_read']}: {e}",
                stats
            ) from e

    logger.debug(f"{Path(file_path).name}: {stats['lines_read']} lines, "
                 f"{stats['rows_written']} rows written, "
                 f"{stats['invalid_rows']} invalid, {stats['too_old']} too old")

    return stats
