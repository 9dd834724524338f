"""A small cursor over text used by the value parsers."""


class Scanner:
    """Walks a string one character at a time and reads runs of digits."""

    def __init__(self, text):
        self._text = text
        self._pos = 0
        self.ndigits = 0

    def peek(self):
        """Return the current character, or None at the end of the text."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def advance(self):
        """Move past the current character."""
        if self._pos < len(self._text):
            self._pos += 1

    def read_digits(self):
        """Read a run of ASCII digits and return its value, or None if there is none.

        The number of digits read is left in ``ndigits``.
        """
        start = self._pos
        text = self._text
        while self._pos < len(text) and "0" <= text[self._pos] <= "9":
            self._pos += 1
        self.ndigits = self._pos - start
        if self.ndigits == 0:
            return None
        return int(text[start:self._pos])

    def at_end(self):
        """Return True when every character has been consumed."""
        return self._pos >= len(self._text)