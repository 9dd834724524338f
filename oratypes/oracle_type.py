"""Oracle data type descriptions and their SQL text form."""

import enum


class OracleTypeKind(enum.Enum):
    """The kinds of Oracle data types."""

    VARCHAR2 = "VARCHAR2"
    NVARCHAR2 = "NVARCHAR2"
    CHAR = "CHAR"
    NCHAR = "NCHAR"
    ROWID = "ROWID"
    RAW = "RAW"
    BINARY_FLOAT = "BINARY_FLOAT"
    BINARY_DOUBLE = "BINARY_DOUBLE"
    NUMBER = "NUMBER"
    FLOAT = "FLOAT"
    DATE = "DATE"
    TIMESTAMP = "TIMESTAMP"
    TIMESTAMP_TZ = "TIMESTAMP_TZ"
    TIMESTAMP_LTZ = "TIMESTAMP_LTZ"
    INTERVAL_DS = "INTERVAL_DS"
    INTERVAL_YM = "INTERVAL_YM"
    CLOB = "CLOB"
    NCLOB = "NCLOB"
    BLOB = "BLOB"
    BFILE = "BFILE"
    REF_CURSOR = "REF_CURSOR"
    BOOLEAN = "BOOLEAN"
    OBJECT = "OBJECT"
    LONG = "LONG"
    LONG_RAW = "LONG_RAW"
    JSON = "JSON"
    INT64 = "INT64"
    UINT64 = "UINT64"


_U8 = (0, 255)
_I8 = (-128, 127)
_U32 = (0, 2**32 - 1)

# Integer ranges of the parameters each kind takes; None marks an object type.
_PARAMS = {
    OracleTypeKind.VARCHAR2: (_U32,),
    OracleTypeKind.NVARCHAR2: (_U32,),
    OracleTypeKind.CHAR: (_U32,),
    OracleTypeKind.NCHAR: (_U32,),
    OracleTypeKind.RAW: (_U32,),
    OracleTypeKind.NUMBER: (_U8, _I8),
    OracleTypeKind.FLOAT: (_U8,),
    OracleTypeKind.TIMESTAMP: (_U8,),
    OracleTypeKind.TIMESTAMP_TZ: (_U8,),
    OracleTypeKind.TIMESTAMP_LTZ: (_U8,),
    OracleTypeKind.INTERVAL_DS: (_U8, _U8),
    OracleTypeKind.INTERVAL_YM: (_U8,),
    OracleTypeKind.OBJECT: (None,),
}

_FIXED_NAMES = {
    OracleTypeKind.ROWID: "ROWID",
    OracleTypeKind.BINARY_FLOAT: "BINARY_FLOAT",
    OracleTypeKind.BINARY_DOUBLE: "BINARY_DOUBLE",
    OracleTypeKind.DATE: "DATE",
    OracleTypeKind.CLOB: "CLOB",
    OracleTypeKind.NCLOB: "NCLOB",
    OracleTypeKind.BLOB: "BLOB",
    OracleTypeKind.BFILE: "BFILE",
    OracleTypeKind.REF_CURSOR: "REF CURSOR",
    OracleTypeKind.BOOLEAN: "BOOLEAN",
    OracleTypeKind.LONG: "LONG",
    OracleTypeKind.LONG_RAW: "LONG RAW",
    OracleTypeKind.JSON: "JSON",
    OracleTypeKind.INT64: "INT64 used internally",
    OracleTypeKind.UINT64: "UINT64 used internally",
}

_SIZED_NAMES = {
    OracleTypeKind.VARCHAR2: "VARCHAR2",
    OracleTypeKind.NVARCHAR2: "NVARCHAR2",
    OracleTypeKind.CHAR: "CHAR",
    OracleTypeKind.NCHAR: "NCHAR",
    OracleTypeKind.RAW: "RAW",
}

_TIMESTAMP_SUFFIXES = {
    OracleTypeKind.TIMESTAMP: "",
    OracleTypeKind.TIMESTAMP_TZ: " WITH TIME ZONE",
    OracleTypeKind.TIMESTAMP_LTZ: " WITH LOCAL TIME ZONE",
}


class OracleType:
    """An Oracle data type together with its size, precision or object type.

    Parameters by kind:

    * ``VARCHAR2``, ``NVARCHAR2``, ``CHAR``, ``NCHAR``, ``RAW``: size
    * ``NUMBER``: precision (0 means unspecified) and scale
    * ``FLOAT``: precision
    * ``TIMESTAMP``, ``TIMESTAMP_TZ``, ``TIMESTAMP_LTZ``: fractional second precision
    * ``INTERVAL_DS``: leading field precision and fractional second precision
    * ``INTERVAL_YM``: leading field precision
    * ``OBJECT``: an object type with ``schema`` and ``name`` attributes
    * every other kind: none
    """

    __slots__ = ("kind", "args")

    def __init__(self, kind, *args):
        kind = OracleTypeKind(kind)
        specs = _PARAMS.get(kind, ())
        if len(args) != len(specs):
            raise TypeError(
                f"{kind.name} takes {len(specs)} parameter(s), got {len(args)}"
            )
        for value, spec in zip(args, specs):
            if spec is None:
                if not (hasattr(value, "schema") and hasattr(value, "name")):
                    raise TypeError(f"{kind.name} needs an object type")
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{kind.name} parameters must be integers")
            low, high = spec
            if not low <= value <= high:
                raise ValueError(
                    f"{kind.name} parameter {value} out of range {low}..{high}"
                )
        self.kind = kind
        self.args = tuple(args)

    def __eq__(self, other):
        if not isinstance(other, OracleType):
            return NotImplemented
        return self.kind is other.kind and self.args == other.args

    def __hash__(self):
        return hash((self.kind, self.args))

    def __repr__(self):
        params = "".join(f", {arg!r}" for arg in self.args)
        return f"OracleType({self.kind}{params})"

    def __str__(self):
        kind = self.kind
        if kind in _FIXED_NAMES:
            return _FIXED_NAMES[kind]
        if kind in _SIZED_NAMES:
            return f"{_SIZED_NAMES[kind]}({self.args[0]})"
        if kind is OracleTypeKind.NUMBER:
            prec, scale = self.args
            if prec == 0:
                return "NUMBER"
            if scale == 0:
                return f"NUMBER({prec})"
            return f"NUMBER({prec},{scale})"
        if kind is OracleTypeKind.FLOAT:
            (prec,) = self.args
            return "FLOAT" if prec == 126 else f"FLOAT({prec})"
        if kind in _TIMESTAMP_SUFFIXES:
            (fsprec,) = self.args
            head = "TIMESTAMP" if fsprec == 6 else f"TIMESTAMP({fsprec})"
            return head + _TIMESTAMP_SUFFIXES[kind]
        if kind is OracleTypeKind.INTERVAL_DS:
            lfprec, fsprec = self.args
            if lfprec == 2 and fsprec == 6:
                return "INTERVAL DAY TO SECOND"
            return f"INTERVAL DAY({lfprec}) TO SECOND({fsprec})"
        if kind is OracleTypeKind.INTERVAL_YM:
            (lfprec,) = self.args
            if lfprec == 2:
                return "INTERVAL YEAR TO MONTH"
            return f"INTERVAL YEAR({lfprec}) TO MONTH"
        objtype = self.args[0]
        return f"{objtype.schema}.{objtype.name}"