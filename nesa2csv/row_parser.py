"""
============================================================================
ROW PARSER MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Turns a single comma-separated station log line into a Record and projects
Records onto the fixed CSV column order.

LINE LAYOUT:
    S,<station>,<hour>,<minute>,<second>,<day>,<month>,<year>,
      <measurementID>,<processingID>,<value>, ...

KEY FUNCTIONS:
- zero_pad: Pad single-digit date/time fields to two digits
- parse_row: Parse a data line, optionally applying a recency cutoff
- record_to_row: Project a Record onto the CSV column order

============================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .exceptions import InvalidRowError, InvalidTimestampError
from .measurements import REQUIRED_MEASUREMENTS, lookup_measurement


DATA_LINE_PREFIX = 'S,'
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S'
MISSING_VALUE = '*'

YEAR_INDEX = 7
FIRST_MEASUREMENT_INDEX = 8


@dataclass
class Record:
    station_id: str
    timestamp: str
    values: Dict[str, str] = field(default_factory=dict)


def is_data_line(line: str) -> bool:
    return line.startswith(DATA_LINE_PREFIX)


def zero_pad(num: str) -> str:
    """Pad a single-character number with a leading zero."""
    if len(num) == 1:
        return '0' + num
    return num


def parse_row(line: str, cutoff: Optional[datetime] = None) -> Optional[Record]:
    """
    Parse one station log line into a Record.

    INPUTS:
    - line (str): Log line without its trailing newline
    - cutoff (datetime, optional): Records strictly older than this are
      dropped. When None, no recency filter is applied and the timestamp
      is not validated.

    OUTPUTS:
    - Record, or None when the record is older than the cutoff

    RAISES:
    - InvalidRowError: Too few fields to hold station and timestamp
    - InvalidTimestampError: Assembled timestamp does not parse (cutoff mode)

    FUNCTIONALITY:
    Strips leading zeros from the station ID, assembles a zero-padded
    YYYY-MM-DDTHH:MM:SS timestamp, then walks the (measurement ID,
    processing ID, value) triples starting at field 8. Unknown IDs are
    dropped. In cutoff mode a value of '*' is stored as an empty string.
    """
    fields = line.split(',')
    # A row must reach the year field; anything shorter carries no timestamp
    if len(fields) <= YEAR_INDEX:
        raise InvalidRowError(line)

    station_id = fields[1].lstrip('0')
    hour = zero_pad(fields[2])
    minute = zero_pad(fields[3])
    second = zero_pad(fields[4])
    day = zero_pad(fields[5])
    month = zero_pad(fields[6])
    year = fields[YEAR_INDEX]
    timestamp = f"{year}-{month}-{day}T{hour}:{minute}:{second}"

    if cutoff is not None:
        # strptime would also accept non-ASCII digits
        if not timestamp.isascii():
            raise InvalidTimestampError(timestamp)
        try:
            record_time = datetime.strptime(timestamp, TIMESTAMP_FORMAT)
        except ValueError:
            raise InvalidTimestampError(timestamp) from None

        if record_time < cutoff:
            return None

    values: Dict[str, str] = {}
    for i in range(FIRST_MEASUREMENT_INDEX, len(fields) - 1, 3):
        name = lookup_measurement(fields[i], fields[i + 1])
        if name is None or i + 2 >= len(fields):
            continue

        value = fields[i + 2]
        if cutoff is not None and value == MISSING_VALUE:
            value = ''
        values[name] = value

    return Record(station_id=station_id, timestamp=timestamp, values=values)


def record_to_row(record: Record) -> List[str]:
    """Project a Record onto station_id, timestamp and the required columns."""
    row = [record.station_id, record.timestamp]
    row.extend(record.values.get(name, '') for name in REQUIRED_MEASUREMENTS)
    return row
