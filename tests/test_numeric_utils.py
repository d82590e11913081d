import math

import pytest

from utils.numeric_utils import (
    clean_numeric,
    ieee_divide,
    is_valid_number,
    parse_percent,
    round_half_up,
    safe_format,
)


@pytest.mark.parametrize('value,expected', [
    (3.14, True),
    ('42', True),
    (float('nan'), False),
    (float('inf'), False),
    (None, False),
    (True, False),
    ('abc', False),
])
def test_is_valid_number(value, expected):
    assert is_valid_number(value) is expected


def test_clean_numeric():
    assert clean_numeric('42.5') == 42.5
    assert clean_numeric(float('nan')) is None
    assert clean_numeric('N/A') is None


@pytest.mark.parametrize('value,expected', [
    ('1.5%', 1.5),
    (' 2.1 ', 2.1),
    (0.8, 0.8),
    (0, 0.0),
    ('N/A', None),
    ('n/a', None),
    ('', None),
    (None, None),
    ('lots', None),
])
def test_parse_percent(value, expected):
    assert parse_percent(value) == expected


def test_safe_format():
    assert safe_format(12.345, '.1f', suffix='%') == '12.3%'
    assert safe_format(None) == 'N/A'
    assert safe_format(float('inf'), default='-') == '-'


def test_ieee_divide():
    assert ieee_divide(6.0, 3.0) == 2.0
    assert ieee_divide(1.0, 0.0) == math.inf
    assert ieee_divide(-1.0, 0.0) == -math.inf
    assert ieee_divide(1.0, -0.0) == -math.inf
    assert math.isnan(ieee_divide(0.0, 0.0))


@pytest.mark.parametrize('value,expected', [
    (72.5, 73),
    (71.5, 72),
    (0.4, 0),
    (0.5, 1),
    (99.49, 99),
    (92.00000000000001, 92),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
