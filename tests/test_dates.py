import pytest

from timeline.core.errors import DatasetError
from timeline.dataset.dates import (
    datetime_string_to_date_string,
    datetime_string_to_timestamp,
    timestamp_to_datetime_string,
)


def test_parse_as_utc():
    assert datetime_string_to_timestamp('2019-01-01 00:00') == 1546300800000
    assert datetime_string_to_timestamp('2019-01-01T01:30') == 1546300800000 + 90 * 60 * 1000


def test_invalid_rejected():
    with pytest.raises(DatasetError):
        datetime_string_to_timestamp('yesterday')


def test_format():
    assert timestamp_to_datetime_string(1546300800000) == '2019-01-01 00:00'
    assert datetime_string_to_date_string('2019-03-01 14:05') == '2019-03-01'
