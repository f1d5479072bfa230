"""
Type descriptors used in option specifications.

A descriptor tells the parser how to turn the raw text following a flag into a
value, and whether the flag takes a value at all. The three builtin
descriptors ``String``, ``Number`` and ``Boolean`` are tagged with a ``Kind``
so the parser never has to compare function identities; any other callable
becomes a ``CUSTOM`` descriptor.

Example:
    spec = {
        "--name": String,
        "--port": Number,
        "--verbose": Boolean,
        "--tag": [String],
        "--level": lambda raw, flag: raw.upper(),
    }
"""

import dataclasses
import enum
import math
import re
from collections.abc import Callable
from typing import Any, Optional, Union

Converter = Callable[[str, str], Any]


class Kind(enum.Enum):
    TEXT = "text"
    NUMBER = "number"
    FLAG = "flag"
    CUSTOM = "custom"


@dataclasses.dataclass(frozen=True)
class Descriptor:
    """
    A tagged coercion rule for one option.

    Attributes:
        kind (Kind): Which builtin behaviour applies, or ``Kind.CUSTOM``.
        convert (Callable[[str, str], Any]): Called as ``convert(raw, flag)``
            where ``flag`` is the canonical option name.
        array (bool): When True each occurrence is appended to a list instead
            of overwriting the previous value.
    """

    kind: Kind
    convert: Converter
    array: bool = False

    @property
    def takes_value(self) -> bool:
        return self.kind is not Kind.FLAG

    def coerce(self, raw: Optional[str], flag: str) -> Any:
        if self.kind is Kind.FLAG:
            return True
        return self.convert(raw, flag)

    def __repr__(self) -> str:
        name = self.kind.name if self.kind is not Kind.CUSTOM else _callable_name(self.convert)
        return f"[{name}]" if self.array else name


def _callable_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)


def _to_text(raw: str, flag: str) -> str:
    return raw


_INTEGER = re.compile(r"[+-]?[0-9]+")
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = re.compile(r"([+-]?)Infinity")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _to_number(raw: str, flag: str) -> Union[int, float]:
    """
    Parse a number the lenient way: surrounding whitespace is ignored, an empty
    string is 0, unsigned 0x/0o/0b prefixes are honoured and anything
    unparseable is nan rather than an error.

    Only ASCII digits are accepted, with no '_' separators, and infinity must
    be spelled ``Infinity``.
    """
    text = raw.strip()
    if not text:
        return 0
    if _INTEGER.fullmatch(text):
        return int(text, 10)
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if _DECIMAL.fullmatch(text):
        return float(text)
    return math.nan


def _to_flag(raw: Optional[str], flag: str) -> bool:
    return True


String = Descriptor(Kind.TEXT, _to_text)
Number = Descriptor(Kind.NUMBER, _to_number)
Boolean = Descriptor(Kind.FLAG, _to_flag)

# Python builtins accepted as shorthands for the builtin descriptors
_BUILTIN_SHORTHANDS = {
    str: String,
    int: Number,
    float: Number,
    bool: Boolean,
}


def array_of(descriptor: Any) -> Descriptor:
    """
    Return the array variant of a base descriptor.

    Args:
        descriptor: A ``Descriptor``, builtin shorthand or custom callable.

    Returns:
        Descriptor: The same coercion rule with ``array=True``.

    Raises:
        TypeError: If ``descriptor`` is not a valid base descriptor.
    """
    base = _describe_base(descriptor)
    if base is None:
        raise TypeError(f"array_of() argument must be a scalar type descriptor, not {descriptor!r}")
    return dataclasses.replace(base, array=True)


def _describe_base(value: Any) -> Optional[Descriptor]:
    if isinstance(value, Descriptor):
        return value if not value.array else None
    if isinstance(value, type) and value in _BUILTIN_SHORTHANDS:
        return _BUILTIN_SHORTHANDS[value]
    if callable(value):
        return Descriptor(Kind.CUSTOM, value)
    return None


def describe(value: Any) -> Optional[Descriptor]:
    """
    Normalize a specification value into a ``Descriptor``.

    Accepts a ``Descriptor``, a builtin shorthand (``str``, ``int``, ``float``,
    ``bool``), any other callable, or a one-element list/tuple wrapping one of
    those. Alias strings are not descriptors and yield None, as does anything
    else that cannot be used.
    """
    if isinstance(value, Descriptor):
        return value
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            return None
        base = _describe_base(value[0])
        return dataclasses.replace(base, array=True) if base is not None else None
    return _describe_base(value)
