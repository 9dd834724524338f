"""Exceptions raised when Oracle values cannot be parsed or converted."""


class ParseOracleTypeError(ValueError):
    """Raised when text cannot be parsed as an Oracle value of a given type."""

    def __init__(self, typename):
        self.typename = typename
        super().__init__(f"failed to parse {typename}")


class OutOfRangeError(ValueError):
    """Raised when a value does not fit into the target type."""