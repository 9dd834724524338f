"""Oracle INTERVAL YEAR TO MONTH value."""

from dataclasses import dataclass, replace

from .errors import ParseOracleTypeError
from .scanner import Scanner


@dataclass(frozen=True, eq=False)
class IntervalYM:
    """Oracle interval year to month.

    Both components are zero or positive for a positive interval and zero or
    negative for a negative one. ``precision`` only affects the text form,
    not comparison.
    """

    years: int
    months: int
    precision: int = 9

    def and_prec(self, precision):
        """Return a copy with the given leading field precision."""
        return replace(self, precision=precision)

    def __eq__(self, other):
        if not isinstance(other, IntervalYM):
            return NotImplemented
        return (self.years, self.months) == (other.years, other.months)

    def __hash__(self):
        return hash((self.years, self.months))

    def __str__(self):
        sign = "-" if self.years < 0 or self.months < 0 else "+"
        years = abs(self.years)
        if 2 <= self.precision <= 9:
            year_text = f"{years:0{self.precision}}"
        else:
            year_text = str(years)
        return f"{sign}{year_text}-{abs(self.months):02}"

    @classmethod
    def parse(cls, text):
        """Parse an interval such as ``+02-03``.

        The precision is taken from the number of year digits in the text.
        """

        def fail():
            return ParseOracleTypeError("IntervalYM")

        def digits(s):
            value = s.read_digits()
            if value is None:
                raise fail()
            return value

        s = Scanner(text)
        minus = False
        first = s.peek()
        if first in ("+", "-"):
            minus = first == "-"
            s.advance()
        years = digits(s)
        precision = s.ndigits
        if s.peek() != "-":
            raise fail()
        s.advance()
        months = digits(s)
        if not s.at_end():
            raise fail()
        factor = -1 if minus else 1
        return cls(factor * years, factor * months, precision)