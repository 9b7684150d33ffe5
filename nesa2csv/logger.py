"""
============================================================================
LOGGER MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Provides centralized logging for conversion progress, skipped lines,
per-file errors and end-of-run statistics.

KEY FUNCTIONS:
- setup_logger: Initialize logger with stdout and optional file output
- log_file_processing: Track individual file processing status
- log_batch_summary: Report final batch statistics

============================================================================
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional


LOGGER_NAME = 'nesa2csv'


def setup_logger(
    log_file: Optional[str] = None,
    verbose: bool = False
) -> logging.Logger:
    """
    Setup and configure logger with console and file handlers.

    INPUTS:
    - log_file (str, optional): Path to log file. If None, only console logging
    - verbose (bool): If True, console shows DEBUG messages, otherwise INFO

    OUTPUTS:
    - logging.Logger: Configured logger instance

    FUNCTIONALITY:
    Console output goes to stdout. The log file, when given, is opened in
    append mode and always receives DEBUG+ messages.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Repeated runs in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return logger


def log_file_processing(
    logger: logging.Logger,
    filename: str,
    status: str,
    details: Optional[str] = None
) -> None:
    """
    Log the processing status of a single log file.

    INPUTS:
    - logger (logging.Logger): Logger instance
    - filename (str): Path of the file being processed
    - status (str): Processing status ('start', 'success', 'error', 'skip')
    - details (str, optional): Additional details or error message
    """
    status_messages = {
        'start': f"Processing file: {filename}",
        'success': f"✓ Converted: {filename}",
        'error': f"✗ Error processing file {filename}",
        'skip': f"⊗ Skipping file: {filename}"
    }

    message = status_messages.get(status, f"Unknown status for {filename}")

    if details:
        message += f" - {details}"

    if status == 'error':
        logger.error(message)
    elif status == 'skip':
        logger.warning(message)
    else:
        logger.info(message)


def log_batch_summary(
    logger: logging.Logger,
    summary: Dict[str, int]
) -> None:
    """
    Log final summary statistics for a conversion run.

    INPUTS:
    - logger (logging.Logger): Logger instance
    - summary (dict): Counters returned by convert_directory
    """
    total_files = summary.get('files_found', 0)
    successful = summary.get('files_converted', 0)

    logger.info("=" * 70)
    logger.info("CONVERSION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Log files found:         {total_files}")
    logger.info(f"Successfully converted:  {successful}")
    logger.info(f"Failed files:            {summary.get('files_failed', 0)}")
    logger.info(f"Rows written:            {summary.get('rows_written', 0):,}")
    logger.info(f"Invalid lines skipped:   {summary.get('invalid_rows', 0):,}")
    logger.info(f"Rows older than cutoff:  {summary.get('too_old', 0):,}")
    logger.info(f"Success rate:            {(successful/total_files*100):.1f}%" if total_files > 0 else "Success rate:            N/A")
    logger.info("=" * 70)
