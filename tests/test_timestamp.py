from dataclasses import replace

import pytest

from oratypes.errors import ParseOracleTypeError
from oratypes.timestamp import Timestamp


@pytest.fixture
def base():
    ts = Timestamp(2012, 3, 4, 5, 6, 7, 890123456).and_tz_hm_offset(8, 45)
    return replace(ts, with_tz=False)


@pytest.mark.parametrize(
    "precision, expected",
    [
        (0, "2012-03-04 05:06:07"),
        (1, "2012-03-04 05:06:07.8"),
        (2, "2012-03-04 05:06:07.89"),
        (3, "2012-03-04 05:06:07.890"),
        (4, "2012-03-04 05:06:07.8901"),
        (5, "2012-03-04 05:06:07.89012"),
        (6, "2012-03-04 05:06:07.890123"),
        (7, "2012-03-04 05:06:07.8901234"),
        (8, "2012-03-04 05:06:07.89012345"),
        (9, "2012-03-04 05:06:07.890123456"),
    ],
)
def test_to_string_precision(base, precision, expected):
    assert str(replace(base, precision=precision)) == expected


def test_to_string_time_zone(base):
    ts = replace(base, precision=9, with_tz=True)
    assert str(ts) == "2012-03-04 05:06:07.890123456 +08:45"
    ts = replace(ts, tz_hour_offset=-8, tz_minute_offset=-45)
    assert str(ts) == "2012-03-04 05:06:07.890123456 -08:45"
    ts = replace(ts, precision=0)
    assert str(ts) == "2012-03-04 05:06:07 -08:45"
    ts = replace(ts, year=-123)
    assert str(ts) == "-123-03-04 05:06:07 -08:45"
    ts = ts.and_tz_offset(-3600 - 1800)
    assert ts.tz_hour_offset == -1
    assert ts.tz_minute_offset == -30
    assert str(ts) == "-123-03-04 05:06:07 -01:30"
    ts = replace(ts, tz_hour_offset=0)
    assert str(ts) == "-123-03-04 05:06:07 -00:30"
    ts = replace(ts, tz_minute_offset=30)
    assert str(ts) == "-123-03-04 05:06:07 +00:30"
    ts = replace(ts, tz_minute_offset=0)
    assert str(ts) == "-123-03-04 05:06:07 +00:00"


def test_parse_dates():
    ts = Timestamp(2012, 1, 1, precision=0)
    parsed = Timestamp.parse("2012")
    assert parsed == ts
    assert parsed.precision == 0
    ts = replace(ts, month=3, day=4)
    assert Timestamp.parse("20120304") == ts
    assert Timestamp.parse("2012-03-04") == ts


def test_parse_times():
    ts = Timestamp(2012, 3, 4, 5, 6, 7, precision=0)
    for text in ("2012-03-04 05:06:07", "2012-03-04T05:06:07", "20120304T050607"):
        parsed = Timestamp.parse(text)
        assert parsed == ts
        assert not parsed.with_tz


@pytest.mark.parametrize(
    "text, nanosecond, precision",
    [
        ("2012-03-04 05:06:07.8", 800000000, 1),
        ("2012-03-04T05:06:07.89", 890000000, 2),
        ("20120304T050607.890", 890000000, 3),
        ("2012-03-04 05:06:07.8901", 890100000, 4),
        ("2012-03-04 05:06:07.89012", 890120000, 5),
        ("2012-03-04 05:06:07.890123", 890123000, 6),
        ("2012-03-04 05:06:07.8901234", 890123400, 7),
        ("2012-03-04 05:06:07.89012345", 890123450, 8),
        ("2012-03-04 05:06:07.890123456", 890123456, 9),
        ("2012-03-04 05:06:07.8901234567", 890123456, 9),
        ("2012-03-04 05:06:07.89012345678", 890123456, 9),
    ],
)
def test_parse_fraction(text, nanosecond, precision):
    parsed = Timestamp.parse(text)
    assert parsed == Timestamp(2012, 3, 4, 5, 6, 7, nanosecond)
    assert parsed.precision == precision


@pytest.mark.parametrize(
    "text",
    [
        "2012-03-04 05:06:07Z",
        "2012-03-04 05:06:07+00:00",
        "2012-03-04 05:06:07 +00:00",
        "2012-03-04 05:06:07+0000",
        "2012-03-04 05:06:07 +0000",
    ],
)
def test_parse_utc(text):
    parsed = Timestamp.parse(text)
    assert parsed == Timestamp(2012, 3, 4, 5, 6, 7)
    assert parsed.with_tz


@pytest.mark.parametrize(
    "text, hours, minutes",
    [
        ("2012-03-04 05:06:07+08:45", 8, 45),
        ("2012-03-04 05:06:07 +08:45", 8, 45),
        ("2012-03-04 05:06:07+0845", 8, 45),
        ("2012-03-04 05:06:07 +0845", 8, 45),
        ("2012-03-04 05:06:07-08:45", -8, -45),
        ("2012-03-04 05:06:07 -08:45", -8, -45),
        ("2012-03-04 05:06:07-0845", -8, -45),
        ("2012-03-04 05:06:07 -0845", -8, -45),
    ],
)
def test_parse_offsets(text, hours, minutes):
    parsed = Timestamp.parse(text)
    assert parsed == Timestamp(2012, 3, 4, 5, 6, 7).and_tz_hm_offset(hours, minutes)
    assert parsed.with_tz


def test_parse_fraction_with_offset_and_negative_year():
    ts = Timestamp(2012, 3, 4, 5, 6, 7, 123000000).and_tz_hm_offset(-8, -45)
    assert Timestamp.parse("2012-03-04 05:06:07.123-08:45") == ts
    assert Timestamp.parse("2012-03-04 05:06:07.123 -08:45") == ts
    ts = replace(ts, year=-123)
    assert Timestamp.parse("-123-03-04 05:06:07.123 -08:45") == ts
    ts = replace(ts, tz_hour_offset=0)
    assert Timestamp.parse("-123-03-04 05:06:07.123 -00:45") == ts
    ts = replace(ts, tz_minute_offset=45)
    assert Timestamp.parse("-123-03-04 05:06:07.123 +00:45") == ts


@pytest.mark.parametrize(
    "text",
    ["", "2012/03/04", "2012-03-04 05", "2012-03-04 05:06:07x", "2012-03-04X05:06"],
)
def test_parse_errors(text):
    with pytest.raises(ParseOracleTypeError):
        Timestamp.parse(text)


def test_documented_example():
    ts1 = Timestamp(2017, 8, 9, 11, 22, 33, 500000000)
    assert str(ts1) == "2017-08-09 11:22:33.500000000"
    ts2 = ts1.and_tz_hm_offset(-8, 0)
    assert str(ts2) == "2017-08-09 11:22:33.500000000 -08:00"
    ts3 = ts1.and_prec(3)
    assert str(ts3) == "2017-08-09 11:22:33.500"
    assert ts1 == ts3
    ts4 = Timestamp.parse("2017-08-09 11:22:33.500 -08:00")
    assert ts4.precision == 3
    assert ts4 == ts2


def test_tz_offset_round_trip():
    ts = Timestamp(2012, 3, 4).and_tz_offset(-3600 - 1800)
    assert ts.tz_offset() == -3600 - 1800
    assert Timestamp(2012, 3, 4).and_tz_offset(ts.tz_offset()) == ts


def test_string_round_trip():
    ts = Timestamp(2012, 3, 4, 5, 6, 7, 890123456).and_tz_hm_offset(-8, -45)
    assert Timestamp.parse(str(ts)) == ts


def test_equal_values_hash_equal():
    a = Timestamp(2012, 3, 4, 5, 6, 7).and_prec(0)
    b = Timestamp(2012, 3, 4, 5, 6, 7).and_prec(6)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Timestamp(2012, 3, 4, 5, 6, 8)