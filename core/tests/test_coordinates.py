"""
Core — Coordinate Conversion Tests

@file core/tests/test_coordinates.py
"""

import pytest

from core.coordinates import CoordinateConverter, CoordinateParseError, convert_to_number


class TestCoordinateConverter:
    @pytest.mark.parametrize('coordinate, expected', [
        ('01°10\'00.00" N 123°26\'00.00" E', (1.1667, 123.4333)),
        ('06°10\'30.00" S 106°49\'40.00" E', (-6.175, 106.8278)),
        ('02°52\'54.99" N 095°23\'35.69" E', (2.8819, 95.3932)),
        ('00°30\'00.00" S 010°15\'00.00" W', (-0.5, -10.25)),
        ('00°00\'00.00" N 000°00\'00.00" E', (0.0, 0.0)),
    ])
    def test_known_values(self, coordinate, expected):
        latitude, longitude = CoordinateConverter().convert_to_number(coordinate)
        assert latitude == pytest.approx(expected[0], abs=1e-4)
        assert longitude == pytest.approx(expected[1], abs=1e-4)

    def test_tolerates_extra_whitespace(self):
        latitude, longitude = convert_to_number('  01°10\'00.00"N    123°26\'00.00"  E ')
        assert latitude == pytest.approx(1.1667, abs=1e-4)
        assert longitude == pytest.approx(123.4333, abs=1e-4)

    @pytest.mark.parametrize('coordinate', [
        '',
        '   ',
        None,
        '01°10\'00.00" 123°26\'00.00" E',
        '01°10\'00.00" N',
        '01°10\'00.00" N 123°26\'00.00" E 05°00\'00.00" S',
        'AB°10\'00.00" N 123°26\'00.00" E',
        '01°10\'00.00" E 123°26\'00.00" N',
        '01°10\'00.00" N 123°26\'00.00" S',
        '1.1667, 123.4333',
        '01°10\'00.00"N123°26\'00.00"E',
        '01°10\'00.00" N123°26\'00.00" E',
    ])
    def test_malformed_input_raises(self, coordinate):
        with pytest.raises(CoordinateParseError) as exc_info:
            convert_to_number(coordinate)
        assert exc_info.value.coordinate == coordinate

    def test_parse_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            convert_to_number('garbage')
