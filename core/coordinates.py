"""
Core — Coordinate Conversion

Converts the packed DMS coordinates stored on islands, e.g.::

    01°10'00.00" N 123°26'00.00" E

into signed decimal degrees ``(latitude, longitude)``.

@file core/coordinates.py
"""

import re

DMS_RE = re.compile(r"""
    (?P<deg>\d+(?:\.\d+)?)\s*°\s*
    (?P<min>\d+(?:\.\d+)?)\s*['’′]\s*
    (?P<sec>\d+(?:\.\d+)?)\s*["”″]\s*
    (?P<hem>[NSEW])
""", re.VERBOSE)

HEM_SIGNS = {'N': 1, 'E': 1, 'S': -1, 'W': -1}


class CoordinateParseError(ValueError):
    """The coordinate string is not a valid packed DMS pair."""

    def __init__(self, coordinate, reason):
        self.coordinate = coordinate
        self.reason = reason
        super().__init__(f'Cannot parse coordinate {coordinate!r}: {reason}')


class CoordinateConverter:
    """DMS → decimal degrees."""

    @staticmethod
    def dms_to_decimal(degrees: float, minutes: float, seconds: float, hemisphere: str) -> float:
        return HEM_SIGNS[hemisphere] * (degrees + minutes / 60 + seconds / 3600)

    def convert_to_number(self, coordinate: str) -> tuple[float, float]:
        """
        Parse a ``<lat> <lon>`` DMS pair.

        Raises ``CoordinateParseError`` when the string does not hold exactly
        one latitude token (N/S) followed by one longitude token (E/W).
        """
        if not isinstance(coordinate, str) or not coordinate.strip():
            raise CoordinateParseError(coordinate, 'empty value')

        tokens = []
        position = 0
        text = coordinate.strip()
        while position < len(text):
            match = DMS_RE.match(text, position)
            if match is None:
                raise CoordinateParseError(coordinate, f'unexpected input at offset {position}')
            tokens.append(match)
            position = match.end()
            if position < len(text) and not text[position].isspace():
                raise CoordinateParseError(coordinate, f'expected whitespace at offset {position}')
            while position < len(text) and text[position].isspace():
                position += 1

        if len(tokens) != 2:
            raise CoordinateParseError(coordinate, f'expected 2 DMS tokens, got {len(tokens)}')

        lat, lon = tokens
        if lat['hem'] not in ('N', 'S'):
            raise CoordinateParseError(coordinate, 'latitude hemisphere must be N or S')
        if lon['hem'] not in ('E', 'W'):
            raise CoordinateParseError(coordinate, 'longitude hemisphere must be E or W')

        latitude = self.dms_to_decimal(
            float(lat['deg']), float(lat['min']), float(lat['sec']), lat['hem'],
        )
        longitude = self.dms_to_decimal(
            float(lon['deg']), float(lon['min']), float(lon['sec']), lon['hem'],
        )
        return latitude, longitude


def convert_to_number(coordinate: str) -> tuple[float, float]:
    return CoordinateConverter().convert_to_number(coordinate)
