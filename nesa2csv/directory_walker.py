"""
============================================================================
DIRECTORY WALKER MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Finds station log files under an input directory and drives the file
processor over them, keeping the run-wide "header written" flag.

KEY FUNCTIONS:
- find_log_files: Recursive, name-ordered search for log files
- convert_directory: Convert every log file into the shared CSV writer

============================================================================
"""

import fnmatch
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from tqdm import tqdm

from .exceptions import InputPathError, LogFileOpenError, LogFileReadError
from .file_processor import process_file
from .logger import log_file_processing


DEFAULT_PATTERN = '*.txt'


def _sorted_entries(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return sorted(it, key=lambda entry: entry.name)


def _walk(entries: List[os.DirEntry], pattern: str, logger: logging.Logger) -> Iterator[Path]:
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            try:
                children = _sorted_entries(entry.path)
            except OSError as e:
                logger.warning(f"Cannot access {entry.path}: {e}")
                continue
            yield from _walk(children, pattern, logger)
        elif fnmatch.fnmatchcase(entry.name, pattern):
            yield Path(entry.path)


def find_log_files(
    input_path: Union[str, Path],
    pattern: str,
    logger: logging.Logger
) -> List[Path]:
    """
    Find all log files matching the pattern.

    INPUTS:
    - input_path (str | Path): Directory to search OR path to single file
    - pattern (str): Filename glob to match (e.g. '*.txt')
    - logger: Logger instance

    OUTPUTS:
    - List[Path]: Matching files, in walk order

    RAISES:
    - InputPathError: Input path is missing or the root cannot be listed

    FUNCTIONALITY:
    Walks the tree depth-first with the entries of each directory in name
    order, files and subdirectories interleaved. Subdirectories that
    cannot be listed are logged and skipped.
    """
    input_path = Path(input_path)

    if not input_path.exists():
        raise InputPathError(f"cannot access {input_path}: path does not exist")

    if not input_path.is_dir():
        if fnmatch.fnmatchcase(input_path.name, pattern):
            logger.info(f"Processing single file: {input_path.name}")
            return [input_path]
        log_file_processing(logger, str(input_path), 'skip',
                            f"does not match pattern '{pattern}'")
        return []

    try:
        entries = _sorted_entries(str(input_path))
    except OSError as e:
        raise InputPathError(f"cannot access {input_path}: {e}") from e

    files = list(_walk(entries, pattern, logger))
    logger.info(f"Found {len(files)} files matching pattern '{pattern}'")
    return files


def convert_directory(
    input_path: Union[str, Path],
    writer,
    cutoff: Optional[datetime],
    logger: logging.Logger,
    pattern: str = DEFAULT_PATTERN,
    encoding: str = 'utf-8',
    show_progress: bool = True
) -> Dict[str, int]:
    """
    Convert every log file under input_path into the shared CSV writer.

    INPUTS:
    - input_path (str | Path): Input directory or single log file
    - writer: csv writer for the consolidated output
    - cutoff (datetime, optional): Recency cutoff, None disables filtering
    - logger (logging.Logger): Logger instance
    - pattern (str): Filename glob for log files
    - encoding (str): Text encoding of the log files
    - show_progress (bool): Show a progress bar over files

    OUTPUTS:
    - dict: Run summary counters

    RAISES:
    - InputPathError: Input root missing or inaccessible

    FUNCTIONALITY:
    Per-file errors are logged and the run moves on. The header row is
    written by the first file that opens successfully and never again.
    """
    files = find_log_files(input_path, pattern, logger)

    summary = {
        'files_found': len(files),
        'files_converted': 0,
        'files_failed': 0,
        'rows_written': 0,
        'invalid_rows': 0,
        'too_old': 0,
        'header_written': 0,
    }

    iterator = tqdm(files, desc="Converting logs", unit="file") if show_progress else files

    for file_path in iterator:
        log_file_processing(logger, str(file_path), 'start')
        write_header = not summary['header_written']

        try:
            stats = process_file(file_path, writer, write_header, cutoff, logger, encoding)
        except LogFileOpenError as e:
            log_file_processing(logger, str(file_path), 'error', str(e))
            summary['files_failed'] += 1
            continue
        except LogFileReadError as e:
            log_file_processing(logger, str(file_path), 'error', str(e))
            summary['files_failed'] += 1
            stats = e.stats
        else:
            summary['files_converted'] += 1
            log_file_processing(logger, str(file_path), 'success',
                                f"{stats['rows_written']:,} rows")

        if stats.get('header_written'):
            summary['header_written'] = 1
        for key in ('rows_written', 'invalid_rows', 'too_old'):
            summary[key] += stats.get(key, 0)

    return summary
