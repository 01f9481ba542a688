from datetime import datetime, timedelta, timezone

import pytest

from esendex.common.timestamps import (
    format_query_timestamp,
    format_timestamp,
    parse_optional_timestamp,
    parse_timestamp,
)

UTC = timezone.utc


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2012-01-01T12:00:05", datetime(2012, 1, 1, 12, 0, 5, tzinfo=UTC)),
        ("2012-01-01T12:00:05Z", datetime(2012, 1, 1, 12, 0, 5, tzinfo=UTC)),
        ("2012-01-01T12:00:05.000", datetime(2012, 1, 1, 12, 0, 5, tzinfo=UTC)),
        ("2012-01-01T12:00:01.05Z", datetime(2012, 1, 1, 12, 0, 1, 50000, tzinfo=UTC)),
        ("2015-11-11T11:11:11.111111111Z", datetime(2015, 11, 11, 11, 11, 11, 111111, tzinfo=UTC)),
        ("2012-01-01T13:00:00+01:00", datetime(2012, 1, 1, 12, 0, 0, tzinfo=UTC)),
        ("2012-01-01T10:30:00.5-01:30", datetime(2012, 1, 1, 12, 0, 0, 500000, tzinfo=UTC)),
    ],
)
def test_parse_known_layouts(text, expected):
    parsed = parse_timestamp(text)
    assert parsed == expected
    assert parsed.tzinfo == UTC


@pytest.mark.parametrize("text", ["", "yesterday", "2012-01-01", "2012-01-01 12:00:00", "2012-13-01T00:00:00"])
def test_parse_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_timestamp(text)


def test_parse_optional_blank_is_none():
    assert parse_optional_timestamp(None) is None
    assert parse_optional_timestamp("  ") is None
    assert parse_optional_timestamp("2012-01-01T12:00:05") == datetime(2012, 1, 1, 12, 0, 5, tzinfo=UTC)


def test_format_timestamp_trims_fraction():
    assert format_timestamp(datetime(2015, 11, 11, 11, 11, 11, 111111, tzinfo=UTC)) == "2015-11-11T11:11:11.111111Z"
    assert format_timestamp(datetime(2015, 11, 11, 11, 11, 11, 500000, tzinfo=UTC)) == "2015-11-11T11:11:11.5Z"
    assert format_timestamp(datetime(2015, 11, 11, 11, 11, 11, tzinfo=UTC)) == "2015-11-11T11:11:11Z"


def test_format_timestamp_converts_to_utc_and_treats_naive_as_utc():
    plus_two = timezone(timedelta(hours=2))
    assert format_timestamp(datetime(2015, 1, 1, 2, 0, 0, tzinfo=plus_two)) == "2015-01-01T00:00:00Z"
    assert format_timestamp(datetime(2015, 1, 1, 2, 0, 0)) == "2015-01-01T02:00:00Z"


def test_query_layout_round_trips_to_the_second():
    instant = datetime(2012, 6, 1, 8, 30, 15, 999999, tzinfo=UTC)
    text = format_query_timestamp(instant)
    assert text == "2012-06-01T08:30:15Z"
    assert parse_timestamp(text) == instant.replace(microsecond=0)


def test_canonical_layout_round_trips_microseconds():
    instant = datetime(2015, 11, 11, 11, 11, 11, 123456, tzinfo=UTC)
    assert parse_timestamp(format_timestamp(instant)) == instant
