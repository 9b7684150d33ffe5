#!/usr/bin/env python3
"""
============================================================================
NESA WEATHER LOG to CSV CONVERTER
============================================================================

SCRIPT PURPOSE:
Command-line tool that converts fixed-field weather station logs into a
single normalized CSV. Every "S," data line found in the .txt files under
the input directory becomes one row.

USAGE:
    python nesa_to_csv.py <input_directory> <output_file> [days]

POSITIONAL ARGUMENTS:
    input_directory Directory searched recursively for logs (or one log file)
    output_file     Consolidated CSV to create
    days            Keep only records from the last N days (default: 14)

OPTIONAL ARGUMENTS:
    --no-cutoff     Keep every record regardless of age
    --pattern       File pattern to match (default: *.txt)
    --encoding      Text encoding of the logs (default: utf-8)
    --log-file      Log file path (default: conversion.log)
    --verbose       Enable detailed debug logging
    --no-progress   Disable progress bars

OUTPUT FORMAT:
    station_id, timestamp, Temperature_Avg, Humidity_Avg, ..., Soiltemperature100_Avg
    One CSV per run, rows in file walk order then line order

============================================================================
"""

import argparse
import codecs
import sys
from datetime import datetime, timedelta
from typing import List, Optional

from nesa2csv import (
    setup_logger,
    log_batch_summary,
    convert_directory,
    open_output,
    create_writer,
    validate_csv_output,
    CSV_HEADER,
    InputPathError,
    OutputFileError
)


DEFAULT_DAYS = 14


def _encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value}")
    return value


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    OUTPUTS:
    - argparse.Namespace: Parsed arguments

    FUNCTIONALITY:
    A non-integer days value makes argparse print a message and exit.
    """
    parser = argparse.ArgumentParser(
        description='Convert NESA weather station logs to CSV format',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert the last 14 days of logs
  python nesa_to_csv.py ./logs ./output/weather.csv

  # Convert the last 30 days with verbose logging
  python nesa_to_csv.py ./logs ./output/weather.csv 30 --verbose

  # Convert everything, regardless of age
  python nesa_to_csv.py ./logs ./output/weather.csv --no-cutoff
        """
    )

    parser.add_argument(
        'input_directory',
        help='Directory containing station logs OR path to a single log file'
    )

    parser.add_argument(
        'output_file',
        help='Path of the consolidated CSV file'
    )

    parser.add_argument(
        'days',
        nargs='?',
        type=int,
        default=DEFAULT_DAYS,
        help=f'Keep only records from the last N days (default: {DEFAULT_DAYS})'
    )

    parser.add_argument(
        '--no-cutoff',
        action='store_true',
        help='Disable the recency filter and timestamp validation'
    )

    parser.add_argument(
        '--pattern',
        default='*.txt',
        help='File pattern to match (default: *.txt)'
    )

    parser.add_argument(
        '--encoding',
        type=_encoding,
        default='utf-8',
        help='Text encoding of the log files (default: utf-8)'
    )

    parser.add_argument(
        '--log-file',
        default='conversion.log',
        help='Log file path (default: conversion.log)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable detailed debug logging'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars'
    )

    return parser.parse_args(argv)


def compute_cutoff(days: int, now: Optional[datetime] = None) -> datetime:
    """Oldest timestamp kept: now minus the given number of days."""
    if now is None:
        now = datetime.now()
    return now - timedelta(days=days)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function for the log to CSV conversion.

    FUNCTIONALITY:
    1. Parse command-line arguments
    2. Setup logging
    3. Create the output CSV
    4. Convert every log file found
    5. Validate the output and report summary statistics

    Per-line and per-file problems are logged and do not change the exit
    status. Returns 1 only when the run cannot start.
    """
    args = parse_arguments(argv)

    logger = setup_logger(args.log_file, args.verbose)

    cutoff = None if args.no_cutoff else compute_cutoff(args.days)

    logger.info("=" * 70)
    logger.info("NESA Weather Log to CSV Converter")
    logger.info("=" * 70)
    logger.info(f"Input directory:  {args.input_directory}")
    logger.info(f"Output file:      {args.output_file}")
    logger.info(f"File pattern:     {args.pattern}")
    if cutoff is None:
        logger.info("Cutoff:           disabled")
    else:
        logger.info(f"Cutoff:           {cutoff:%Y-%m-%dT%H:%M:%S} ({args.days} days)")
    logger.info("=" * 70)

    try:
        out = open_output(args.output_file, logger)
    except OutputFileError as e:
        logger.error(str(e))
        return 1

    with out:
        writer = create_writer(out)
        try:
            summary = convert_directory(
                args.input_directory,
                writer,
                cutoff,
                logger,
                pattern=args.pattern,
                encoding=args.encoding,
                show_progress=not args.no_progress
            )
        except InputPathError as e:
            logger.error(f"Error walking directory: {e}")
            return 1

    expected_rows = summary['rows_written']
    if summary['header_written']:
        validate_csv_output(args.output_file, expected_rows, len(CSV_HEADER), logger)

    log_batch_summary(logger, summary)

    if summary['files_failed'] > 0:
        logger.warning(f"Completed with {summary['files_failed']} failed files")
    else:
        logger.info("All files processed successfully!")

    return 0


if __name__ == '__main__':
    sys.exit(main())
