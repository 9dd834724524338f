"""Conversions between Oracle values and Python's datetime types, and bind types for Python values."""

import datetime as _dt

from .errors import OutOfRangeError
from .interval_ds import IntervalDS
from .interval_ym import IntervalYM
from .oracle_type import OracleType, OracleTypeKind
from .timestamp import Timestamp

_SECONDS_PER_DAY = 24 * 60 * 60
_US_PER_SECOND = 1_000_000


def _trunc_divmod(a, b):
    """Division and remainder truncated toward zero."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def _zone_for(ts, tz):
    if tz is None:
        return _dt.timezone(_dt.timedelta(seconds=ts.tz_offset()))
    return tz


def _checked_date(ts):
    try:
        return _dt.date(ts.year, ts.month, ts.day)
    except (ValueError, OverflowError):
        raise OutOfRangeError(
            f"invalid month and/or day: {ts.year}-{ts.month}-{ts.day}"
        ) from None


def _checked_time(ts, tzinfo=None):
    try:
        return _dt.time(
            ts.hour, ts.minute, ts.second, ts.nanosecond // 1000, tzinfo=tzinfo
        )
    except (ValueError, OverflowError):
        raise OutOfRangeError(
            f"invalid time: {ts.hour}:{ts.minute}:{ts.second}.{ts.nanosecond}"
        ) from None


def datetime_from_timestamp(ts, tz):
    """Return an aware datetime holding the fields of ``ts`` in zone ``tz``.

    When ``tz`` is None the time zone offset stored in ``ts`` is used.
    Nanoseconds are truncated to microseconds.
    """
    zone = _zone_for(ts, tz)
    return _dt.datetime.combine(_checked_date(ts), _checked_time(ts, zone))


def date_from_timestamp(ts, tz):
    """Return midnight of the date of ``ts`` as an aware datetime in zone ``tz``.

    When ``tz`` is None the time zone offset stored in ``ts`` is used.
    """
    zone = _zone_for(ts, tz)
    return _dt.datetime.combine(_checked_date(ts), _dt.time(0, tzinfo=zone))


def naive_datetime_from_timestamp(ts):
    """Return a naive datetime from the fields of ``ts``, ignoring its time zone."""
    return _dt.datetime.combine(_checked_date(ts), _checked_time(ts))


def naive_date_from_timestamp(ts):
    """Return the date part of ``ts``."""
    return _checked_date(ts)


def _offset_seconds(value):
    offset = value.utcoffset()
    if offset is None:
        return None
    return int(offset.total_seconds())


def timestamp_from_datetime(value):
    """Return a Timestamp for a datetime; aware datetimes carry their offset."""
    ts = Timestamp(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond * 1000,
    )
    offset = _offset_seconds(value)
    if offset is not None:
        ts = ts.and_tz_offset(offset)
    return ts


def timestamp_from_date(value):
    """Return a midnight Timestamp for a date.

    An aware datetime is taken as a date in its zone, and its offset is kept.
    """
    ts = Timestamp(value.year, value.month, value.day)
    if isinstance(value, _dt.datetime):
        offset = _offset_seconds(value)
        if offset is not None:
            ts = ts.and_tz_offset(offset)
    return ts


def timedelta_from_interval(interval):
    """Return a timedelta equal to an IntervalDS.

    Nanoseconds are truncated toward zero to microseconds.
    """
    micros, _ = _trunc_divmod(interval.nanoseconds, 1000)
    try:
        return _dt.timedelta(
            days=interval.days,
            hours=interval.hours,
            minutes=interval.minutes,
            seconds=interval.seconds,
            microseconds=micros,
        )
    except OverflowError:
        raise OutOfRangeError(f"Duration overflow: {interval}") from None


def interval_from_timedelta(value):
    """Return an IntervalDS equal to a timedelta, every component sharing its sign."""
    total_us = value // _dt.timedelta(microseconds=1)
    secs, rest_us = _trunc_divmod(total_us, _US_PER_SECOND)
    nsecs = rest_us * 1000
    days, secs = _trunc_divmod(secs, _SECONDS_PER_DAY)
    hours, secs = _trunc_divmod(secs, 3600)
    minutes, secs = _trunc_divmod(secs, 60)
    if abs(days) >= 1_000_000_000:
        raise OutOfRangeError(f"too large days: {value}")
    return IntervalDS(days, hours, minutes, secs, nsecs)


def oratype_for(value):
    """Return the Oracle type a Python value is bound as.

    A ``(value, OracleType)`` pair is bound as the given type.
    """
    if isinstance(value, OracleType):
        return value
    if isinstance(value, tuple):
        if len(value) == 2 and isinstance(value[1], OracleType):
            return value[1]
        raise TypeError("a tuple must be a (value, OracleType) pair")
    if isinstance(value, bool):
        return OracleType(OracleTypeKind.BOOLEAN)
    if isinstance(value, (int, float)):
        return OracleType(OracleTypeKind.NUMBER, 0, 0)
    if isinstance(value, str):
        return OracleType(OracleTypeKind.NVARCHAR2, len(value.encode("utf-8")))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return OracleType(OracleTypeKind.RAW, len(bytes(value)))
    if isinstance(value, Timestamp):
        return OracleType(OracleTypeKind.TIMESTAMP_TZ, 9)
    if isinstance(value, IntervalDS):
        return OracleType(OracleTypeKind.INTERVAL_DS, 9, 9)
    if isinstance(value, IntervalYM):
        return OracleType(OracleTypeKind.INTERVAL_YM, 9)
    if isinstance(value, _dt.datetime):
        if value.utcoffset() is None:
            return OracleType(OracleTypeKind.TIMESTAMP, 9)
        return OracleType(OracleTypeKind.TIMESTAMP_TZ, 9)
    if isinstance(value, _dt.date):
        return OracleType(OracleTypeKind.TIMESTAMP, 0)
    if isinstance(value, _dt.timedelta):
        return OracleType(OracleTypeKind.INTERVAL_DS, 9, 9)
    if value is None:
        raise TypeError("the type of a null value cannot be inferred; use oratype_for_null")
    raise TypeError(f"cannot bind a value of type {type(value).__name__}")


def oratype_for_null(pytype):
    """Return the Oracle type a null value of a Python type is bound as."""
    if not isinstance(pytype, type):
        raise TypeError("expected a type")
    if issubclass(pytype, bool):
        return OracleType(OracleTypeKind.BOOLEAN)
    if issubclass(pytype, (int, float)):
        return OracleType(OracleTypeKind.NUMBER, 0, 0)
    if issubclass(pytype, str):
        return OracleType(OracleTypeKind.NVARCHAR2, 0)
    if issubclass(pytype, (bytes, bytearray, memoryview)):
        return OracleType(OracleTypeKind.RAW, 0)
    if issubclass(pytype, Timestamp):
        return OracleType(OracleTypeKind.TIMESTAMP_TZ, 9)
    if issubclass(pytype, IntervalDS):
        return OracleType(OracleTypeKind.INTERVAL_DS, 9, 9)
    if issubclass(pytype, IntervalYM):
        return OracleType(OracleTypeKind.INTERVAL_YM, 9)
    if issubclass(pytype, _dt.datetime):
        return OracleType(OracleTypeKind.TIMESTAMP_TZ, 9)
    if issubclass(pytype, _dt.date):
        return OracleType(OracleTypeKind.TIMESTAMP, 0)
    if issubclass(pytype, _dt.timedelta):
        return OracleType(OracleTypeKind.INTERVAL_DS, 9, 9)
    raise TypeError(f"cannot bind a null value of type {pytype.__name__}")