"""Oracle datetime value with optional time zone and display precision."""

from dataclasses import dataclass, replace

from .errors import ParseOracleTypeError
from .scanner import Scanner


def _trunc_divmod(a, b):
    """Division and remainder truncated toward zero."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


@dataclass(frozen=True, eq=False)
class Timestamp:
    """Oracle timestamp.

    ``precision`` and ``with_tz`` only affect the text form, not comparison.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tz_hour_offset: int = 0
    tz_minute_offset: int = 0
    precision: int = 9
    with_tz: bool = False

    def and_tz_offset(self, offset):
        """Return a copy with a time zone offset given in seconds from UTC."""
        hours, rest = _trunc_divmod(offset, 3600)
        minutes, _ = _trunc_divmod(rest, 60)
        return replace(
            self, tz_hour_offset=hours, tz_minute_offset=minutes, with_tz=True
        )

    def and_tz_hm_offset(self, hour_offset, minute_offset):
        """Return a copy with a time zone offset in hours and minutes."""
        return replace(
            self,
            tz_hour_offset=hour_offset,
            tz_minute_offset=minute_offset,
            with_tz=True,
        )

    def and_prec(self, precision):
        """Return a copy with the given fractional second precision."""
        return replace(self, precision=precision)

    def tz_offset(self):
        """Total time zone offset from UTC in seconds."""
        return self.tz_hour_offset * 3600 + self.tz_minute_offset * 60

    def _key(self):
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
            self.tz_hour_offset,
            self.tz_minute_offset,
        )

    def __eq__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        text = (
            f"{self.year}-{self.month:02}-{self.day:02} "
            f"{self.hour:02}:{self.minute:02}:{self.second:02}"
        )
        if 1 <= self.precision <= 9:
            frac = self.nanosecond // 10 ** (9 - self.precision)
            text += f".{frac:0{self.precision}}"
        if self.with_tz:
            negative = self.tz_hour_offset < 0 or self.tz_minute_offset < 0
            sign = "-" if negative else "+"
            text += (
                f" {sign}{abs(self.tz_hour_offset):02}:{abs(self.tz_minute_offset):02}"
            )
        return text

    @classmethod
    def parse(cls, text):
        """Parse a timestamp such as ``2012-03-04 05:06:07.123 -08:45``."""

        def fail():
            return ParseOracleTypeError("Timestamp")

        def digits(s):
            value = s.read_digits()
            if value is None:
                raise fail()
            return value

        s = Scanner(text)
        minus = s.peek() == "-"
        if minus:
            s.advance()
        year = digits(s)
        month = 1
        day = 1
        c = s.peek()
        if c in ("T", " ", None):
            if year > 10000:
                day = year % 100
                month = (year // 100) % 100
                year //= 10000
        elif c == "-":
            s.advance()
            month = digits(s)
            if s.peek() == "-":
                s.advance()
                day = digits(s)
        else:
            raise fail()

        hour = minute = second = nsec = 0
        tz_hour = tz_min = 0
        precision = 0
        with_tz = False
        if not s.at_end():
            if s.peek() not in ("T", " "):
                raise fail()
            s.advance()
            hour = digits(s)
            if s.peek() == ":":
                s.advance()
                minute = digits(s)
                if s.peek() == ":":
                    s.advance()
                    second = digits(s)
            elif s.ndigits == 6:
                second = hour % 100
                minute = (hour // 100) % 100
                hour //= 10000
            else:
                raise fail()
            if s.peek() == ".":
                s.advance()
                nsec = digits(s)
                ndigit = s.ndigits
                precision = ndigit
                if ndigit < 9:
                    nsec *= 10 ** (9 - ndigit)
                elif ndigit > 9:
                    nsec //= 10 ** (ndigit - 9)
                    precision = 9
            if s.peek() == " ":
                s.advance()
            sign = s.peek()
            if sign in ("+", "-"):
                s.advance()
                tz_hour = digits(s)
                if s.peek() == ":":
                    s.advance()
                    tz_min = digits(s)
                else:
                    tz_min = tz_hour % 100
                    tz_hour //= 100
                if sign == "-":
                    tz_hour = -tz_hour
                    tz_min = -tz_min
                with_tz = True
            elif sign == "Z":
                s.advance()
                with_tz = True
            if not s.at_end():
                raise fail()

        return cls(
            -year if minus else year,
            month,
            day,
            hour,
            minute,
            second,
            nsec,
            tz_hour,
            tz_min,
            precision,
            with_tz,
        )