"""
Tests for input validation and helper utilities.
"""

import pytest

from utils.helpers import round_half_up, percentage, parse_int, parse_bool, load_json_list
from utils.validators import (
    is_blank,
    missing_required_fields,
    validate_email,
    validate_password,
)
from utils.datetime_helpers import parse_timestamp


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        assert validate_email('user@example.com') is True
        assert validate_email('user+tag@example.co.uk') is True

    def test_invalid_email(self):
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('missing@domain') is False


class TestRequiredFields:
    """Tests for is_blank and missing_required_fields."""

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank('   ')
        assert not is_blank(0)
        assert not is_blank('x')

    def test_missing_fields_in_order(self):
        data = {'title': ' ', 'space_id': 0, 'club_id': None}
        assert missing_required_fields(data, ['space_id', 'club_id', 'title', 'end_time']) == [
            'club_id', 'title', 'end_time'
        ]


class TestTimestamps:
    """Tests for timestamp parsing."""

    @pytest.mark.parametrize('value', [
        '2024-06-10T14:00:00Z',
        '2024-06-10T14:00:00+02:00',
        '2024-06-10T14:00:00.123Z',
        '2024-06-10T14:00',
    ])
    def test_valid_timestamps(self, value):
        assert parse_timestamp(value).tzinfo is not None

    @pytest.mark.parametrize('value', ['', None, 'tomorrow', '2024-13-01T10:00:00Z'])
    def test_invalid_timestamps(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)


class TestHelpers:
    """Tests for numeric and parsing helpers."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4) == 2

    def test_percentage(self):
        assert percentage(1, 8) == 13
        assert percentage(3, 0) == 0

    def test_parse_int(self):
        assert parse_int('12') == 12
        assert parse_int('abc') is None
        assert parse_int(None, 5) == 5
        assert parse_int(True) is None

    def test_parse_bool(self):
        assert parse_bool('true') is True
        assert parse_bool('0') is False
        assert parse_bool(None) is False

    def test_load_json_list(self):
        assert load_json_list('["a", "b"]') == ['a', 'b']
        assert load_json_list('a, b') == ['a', 'b']
        assert load_json_list(None) == []


class TestValidatePassword:
    """Tests for password strength validation."""

    def test_valid(self):
        assert validate_password('long-enough') == (True, '')

    def test_too_short(self):
        valid, message = validate_password('short')
        assert valid is False
        assert '8 characters' in message

    def test_missing(self):
        assert validate_password('')[0] is False
