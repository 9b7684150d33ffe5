"""
============================================================================
MEASUREMENTS MODULE: NESA Weather Log to CSV Converter
============================================================================

MODULE PURPOSE:
Static lookup tables mapping station log measurement codes to CSV column
names, and the fixed column order of the output file.

KEY OBJECTS:
- MEASUREMENT_MAP: measurement ID -> processing ID -> column name
- REQUIRED_MEASUREMENTS: ordered measurement columns written to the CSV
- CSV_HEADER: full header row (station_id, timestamp, measurements...)

============================================================================
"""

from typing import Dict, List, Optional


# Processing IDs: 2 = average, 3 = minimum, 4 = maximum, 7 = accumulated
MEASUREMENT_MAP: Dict[str, Dict[str, str]] = {
    '1': {'2': 'Temperature_Avg', '3': 'Temperature_Min', '4': 'Temperature_Max'},
    '2': {'2': 'Humidity_Avg', '3': 'Humidity_Min', '4': 'Humidity_Max'},
    '9': {'2': 'Windspeed_Avg', '3': 'Windspeed_Min', '4': 'Windspeed_Max'},
    '4': {'2': 'Wind Direction_Avg', '3': 'Wind Direction_Min', '4': 'Wind Direction_Max'},
    '13': {'2': 'Pressure_Avg', '3': 'Pressure_Min', '4': 'Pressure_Max'},
    '10': {'7': 'Rainfall_Acc'},
    '51': {'2': 'Soiltemperature10_Avg'},
    '101': {'2': 'Soiltemperature20_Avg'},
    '151': {'2': 'Soiltemperature50_Avg'},
    '201': {'2': 'Soiltemperature100_Avg'},
}

REQUIRED_MEASUREMENTS: List[str] = [
    'Temperature_Avg',
    'Humidity_Avg',
    'Windspeed_Avg',
    'Wind Direction_Avg',
    'Pressure_Avg',
    'Rainfall_Acc',
    'Windspeed_Max',
    'Soiltemperature10_Avg',
    'Soiltemperature20_Avg',
    'Soiltemperature50_Avg',
    'Soiltemperature100_Avg',
]

KEY_COLUMNS: List[str] = ['station_id', 'timestamp']

CSV_HEADER: List[str] = KEY_COLUMNS + REQUIRED_MEASUREMENTS


def lookup_measurement(measurement_id: str, processing_id: str) -> Optional[str]:
    """
    Resolve a (measurement ID, processing ID) pair to its column name.

    Returns None when either ID is unknown.
    """
    processing_map = MEASUREMENT_MAP.get(measurement_id)
    if processing_map is None:
        return None
    return processing_map.get(processing_id)
