"""Runtime kind tags.

Every value is either a class (dispatched on itself), a structured object
(dispatched on its exact runtime class) or one of the data kinds below, which
never reach the dispatch table.
"""

import numbers
from enum import Enum


# Largest integer a double represents exactly; beyond it ints are LARGE_INTEGER
MAX_SAFE_INTEGER = 2 ** 53 - 1


class Kind(Enum):
    """Runtime kind of a value"""
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    LARGE_INTEGER = "large-integer"
    STRING = "string"
    SYMBOL = "symbol"
    CLASS = "class"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


# Primitive kinds; NULL is handled alongside them but kept out of this set
DATA_TYPES = frozenset({
    Kind.UNDEFINED,
    Kind.BOOLEAN,
    Kind.NUMBER,
    Kind.LARGE_INTEGER,
    Kind.STRING,
    Kind.SYMBOL,
})


class _Undefined:
    """Marker for "no value at all", distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return "UNDEFINED"


UNDEFINED = _Undefined()

_SYMBOLS = (Ellipsis, NotImplemented)


def kind_of(value) -> Kind:
    """Return the runtime kind tag of *value*."""
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Integral):
        if abs(int(value)) > MAX_SAFE_INTEGER:
            return Kind.LARGE_INTEGER
        return Kind.NUMBER
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, (str, bytes)):
        return Kind.STRING
    if any(value is s for s in _SYMBOLS):
        return Kind.SYMBOL
    if isinstance(value, type):
        return Kind.CLASS
    return Kind.OBJECT


def is_data_kind(kind: Kind) -> bool:
    """True for the primitive kinds and NULL."""
    return kind is Kind.NULL or kind in DATA_TYPES
