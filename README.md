# oratypes

Python value types that mirror Oracle SQL data types, with exact text
formatting and parsing, and conversions to and from the standard `datetime`
module. The package has no dependencies outside the standard library.

## Installation

```
pip install oratypes
```

## Timestamps

`oratypes.timestamp.Timestamp` holds a date, a time with nanosecond
resolution, an optional time-zone offset and a display precision. It is an
immutable dataclass; `and_tz_offset`, `and_tz_hm_offset` and `and_prec`
return modified copies. The precision and the `with_tz` flag affect only the
text form; they are ignored when timestamps are compared.

```python
from oratypes.timestamp import Timestamp

ts = Timestamp(2017, 8, 9, 11, 22, 33, 500000000)
str(ts)                                # '2017-08-09 11:22:33.500000000'
str(ts.and_tz_hm_offset(-8, 0))        # '2017-08-09 11:22:33.500000000 -08:00'
str(ts.and_prec(3))                    # '2017-08-09 11:22:33.500'
ts.and_tz_offset(-5400).tz_hour_offset # -1 (and tz_minute_offset -30)

parsed = Timestamp.parse("2017-08-09 11:22:33.500 -08:00")
parsed.precision                       # 3
parsed.tz_offset()                     # -28800
```

`Timestamp.parse` accepts forms such as `2012`, `20120304`, `2012-03-04`,
`2012-03-04T05:06:07`, `20120304T050607`, fractional seconds of any length
(truncated to nine digits), and a zone written as `Z`, `+08:45`, `+0845`,
with or without a space before it. A leading `-` gives a negative year.
Malformed text raises `oratypes.errors.ParseOracleTypeError`, a subclass of
`ValueError`.

## Intervals

`oratypes.interval_ds.IntervalDS` is INTERVAL DAY TO SECOND;
`oratypes.interval_ym.IntervalYM` is INTERVAL YEAR TO MONTH. For a negative
interval every component is zero or negative. The precisions affect only the
text form, not comparison.

```python
from oratypes.interval_ds import IntervalDS
from oratypes.interval_ym import IntervalYM

str(IntervalDS(1, 2, 3, 4, 500000000))                 # '+000000001 02:03:04.500000000'
str(IntervalDS(1, 2, 3, 4, 500000000).and_prec(2, 3))  # '+01 02:03:04.500'
IntervalDS.parse("+1 02:03:04.50").fsprec              # 2

str(IntervalYM(-2, -3))                # '-000000002-03'
str(IntervalYM(2, 3).and_prec(3))      # '+002-03'
IntervalYM.parse("+002-3").precision   # 3
```

When parsing, the precisions are taken from the number of digits in the text.

## Oracle type descriptors

`oratypes.oracle_type.OracleType` describes a column or bind type: an
`OracleTypeKind` plus the parameters that kind takes (a size, a precision
and scale, or an object type with `schema` and `name` attributes). Wrong
parameter counts or types raise `TypeError`; out-of-range values raise
`ValueError`. Its text form matches the SQL spelling, leaving out default
precisions.

```python
from oratypes.oracle_type import OracleType, OracleTypeKind

str(OracleType(OracleTypeKind.NUMBER, 10, 2))        # 'NUMBER(10,2)'
str(OracleType(OracleTypeKind.NUMBER, 0, 0))         # 'NUMBER'
str(OracleType(OracleTypeKind.TIMESTAMP_TZ, 6))      # 'TIMESTAMP WITH TIME ZONE'
str(OracleType(OracleTypeKind.INTERVAL_DS, 2, 6))    # 'INTERVAL DAY TO SECOND'
str(OracleType(OracleTypeKind.LONG_RAW))             # 'LONG RAW'
```

## Conversions

`oratypes.conversions` converts between these types and `datetime`, `date`
and `timedelta`, and chooses the Oracle type used to bind a Python value or
a null of a given Python type.

```python
from datetime import timedelta, timezone
from oratypes.conversions import (
    datetime_from_timestamp,
    interval_from_timedelta,
    naive_datetime_from_timestamp,
    oratype_for,
    oratype_for_null,
    timedelta_from_interval,
    timestamp_from_datetime,
)
from oratypes.interval_ds import IntervalDS
from oratypes.timestamp import Timestamp

ts = Timestamp.parse("2017-08-09 11:22:33.500 -08:00")
datetime_from_timestamp(ts, timezone.utc)  # fields of ts in UTC
datetime_from_timestamp(ts, None)          # uses the offset stored in ts
naive_datetime_from_timestamp(ts)          # ignores the offset
timestamp_from_datetime(datetime_from_timestamp(ts, None))

interval_from_timedelta(timedelta(days=1, seconds=3.5))
timedelta_from_interval(IntervalDS(1, 2, 3, 4, 0))

str(oratype_for("abc"))                  # 'NVARCHAR2(3)'
str(oratype_for(timedelta(seconds=1)))   # 'INTERVAL DAY(9) TO SECOND(9)'
str(oratype_for_null(bytes))             # 'RAW(0)'
```

Nanoseconds are truncated to microseconds when converting to `datetime` and
`timedelta`. Invalid dates, intervals that do not fit a `timedelta`, and
durations of a billion days or more raise `oratypes.errors.OutOfRangeError`.

## What this package does not do

It only models values and type descriptors. It does not connect to a
database, run statements, fetch rows or read and write LOBs, and it has no
command-line interface.