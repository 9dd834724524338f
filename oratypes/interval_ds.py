"""Oracle INTERVAL DAY TO SECOND value."""

from dataclasses import dataclass, replace

from .errors import ParseOracleTypeError
from .scanner import Scanner


@dataclass(frozen=True, eq=False)
class IntervalDS:
    """Oracle interval day to second.

    All components are zero or positive for a positive interval and zero or
    negative for a negative one. ``lfprec`` (leading field precision) and
    ``fsprec`` (fractional second precision) only affect the text form, not
    comparison.
    """

    days: int
    hours: int
    minutes: int
    seconds: int
    nanoseconds: int
    lfprec: int = 9
    fsprec: int = 9

    def and_prec(self, lfprec, fsprec):
        """Return a copy with the given leading field and fractional second precisions."""
        return replace(self, lfprec=lfprec, fsprec=fsprec)

    def _key(self):
        return (self.days, self.hours, self.minutes, self.seconds, self.nanoseconds)

    def __eq__(self, other):
        if not isinstance(other, IntervalDS):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        negative = any(value < 0 for value in self._key())
        sign = "-" if negative else "+"
        days = abs(self.days)
        if 2 <= self.lfprec <= 9:
            day_text = f"{days:0{self.lfprec}}"
        else:
            day_text = str(days)
        text = (
            f"{sign}{day_text} "
            f"{abs(self.hours):02}:{abs(self.minutes):02}:{abs(self.seconds):02}"
        )
        if 1 <= self.fsprec <= 9:
            frac = abs(self.nanoseconds) // 10 ** (9 - self.fsprec)
            text += f".{frac:0{self.fsprec}}"
        return text

    @classmethod
    def parse(cls, text):
        """Parse an interval such as ``+1 02:03:04.50``.

        The precisions are taken from the number of digits in the text.
        """

        def fail():
            return ParseOracleTypeError("IntervalDS")

        def digits(s):
            value = s.read_digits()
            if value is None:
                raise fail()
            return value

        def expect(s, char):
            if s.peek() != char:
                raise fail()
            s.advance()

        s = Scanner(text)
        minus = False
        first = s.peek()
        if first in ("+", "-"):
            minus = first == "-"
            s.advance()
        days = digits(s)
        lfprec = s.ndigits
        expect(s, " ")
        hours = digits(s)
        expect(s, ":")
        minutes = digits(s)
        expect(s, ":")
        seconds = digits(s)
        nsecs = 0
        fsprec = 0
        if s.peek() == ".":
            s.advance()
            nsecs = digits(s)
            ndigit = s.ndigits
            fsprec = ndigit
            if ndigit < 9:
                nsecs *= 10 ** (9 - ndigit)
            elif ndigit > 9:
                nsecs //= 10 ** (ndigit - 9)
                fsprec = 9
        if not s.at_end():
            raise fail()

        factor = -1 if minus else 1
        return cls(
            factor * days,
            factor * hours,
            factor * minutes,
            factor * seconds,
            factor * nsecs,
            lfprec,
            fsprec,
        )