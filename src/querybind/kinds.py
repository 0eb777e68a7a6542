"""Declared-type classification for bindable fields.

Turns a resolved field annotation into a ``Kind``: how to convert one
query value (``scalar``), and whether the field holds one value, a
sequence of values, or raw bytes.  Annotations that do not classify
return ``None`` and the binder leaves those fields alone.

Sized numeric aliases mirror fixed-width machine types::

    from querybind.kinds import UInt8, Float32

    @dataclass
    class Pixel:
        red: UInt8 = field(default=0, metadata=tags(q="r"))
        alpha: Float32 = field(default=0.0, metadata=tags(q="a"))

Plain ``int`` binds as a signed 64-bit integer and plain ``float`` as a
double.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Annotated, Any, get_args, get_origin

from querybind.convert import (
    parse_bool,
    parse_float,
    parse_int,
    parse_uint,
    round_float32,
    wrap_int,
)

type Parser = Callable[[str], Any]


@dataclass(frozen=True, slots=True)
class Width:
    """Annotation marker for a fixed-width numeric field."""

    bits: int
    signed: bool = True


Int8 = Annotated[int, Width(8)]
Int16 = Annotated[int, Width(16)]
Int32 = Annotated[int, Width(32)]
Int64 = Annotated[int, Width(64)]
UInt8 = Annotated[int, Width(8, signed=False)]
UInt16 = Annotated[int, Width(16, signed=False)]
UInt32 = Annotated[int, Width(32, signed=False)]
UInt64 = Annotated[int, Width(64, signed=False)]
UInt = UInt64
Float32 = Annotated[float, Width(32)]
Float64 = Annotated[float, Width(64)]


@dataclass(frozen=True, slots=True)
class Scalar:
    """Conversion for one textual value.

    ``parse`` raises ``ValueError`` on malformed input; ``zero`` is the
    value a failed sequence element holds.  ``lenient`` scalars never
    leave a field untouched: a parse failure assigns ``zero`` instead.
    """

    name: str
    parse: Parser
    zero: Any
    lenient: bool = False


@dataclass(frozen=True, slots=True)
class Kind:
    """How a declared field type binds.

    ``shape`` is one of:

    - ``"scalar"``: one value, taken from the first query value
    - ``"sequence"``: one element per query value, built as ``container``
    - ``"bytes"``: raw bytes of the first query value, built as ``container``
    """

    shape: str
    scalar: Scalar | None = None
    container: type | None = None

    @property
    def label(self) -> str:
        if self.shape == "sequence" and self.scalar is not None and self.container is not None:
            return f"{self.container.__name__}[{self.scalar.name}]"
        if self.shape == "bytes" and self.container is not None:
            return self.container.__name__
        return self.scalar.name if self.scalar is not None else self.shape


def _sized_int(text: str, *, bits: int, signed: bool) -> int:
    n = parse_int(text) if signed else parse_uint(text)
    return wrap_int(n, bits, signed=signed)


def _float32(text: str) -> float:
    return round_float32(parse_float(text))


def _identity(text: str) -> str:
    return text


STRING = Scalar("str", _identity, "")
BOOL = Scalar("bool", parse_bool, False, lenient=True)
INT = Scalar("int", parse_int, 0)
FLOAT = Scalar("float", parse_float, 0.0)


def _scalar_for(annotation: Any) -> Scalar | None:
    """Classify a scalar annotation, or return None if unsupported."""
    if get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        widths = [m for m in extras if isinstance(m, Width)]
        if not widths:
            return _scalar_for(base)
        width = widths[-1]
        if base is int:
            prefix = "int" if width.signed else "uint"
            parse = partial(_sized_int, bits=width.bits, signed=width.signed)
            return Scalar(f"{prefix}{width.bits}", parse, 0)
        if base is float and width.bits == 32:
            return Scalar("float32", _float32, 0.0)
        if base is float and width.bits == 64:
            return FLOAT
        return None

    # bool before int: bool is an int subclass but never parses as one
    if annotation is bool:
        return BOOL
    if annotation is int:
        return INT
    if annotation is float:
        return FLOAT
    if annotation is str:
        return STRING
    return None


def classify(annotation: Any) -> Kind | None:
    """Classify a resolved field annotation.

    Returns None for anything the binder does not support: nested
    dataclasses, mappings, unions (including ``X | None``), ``Any``,
    sequences of unsupported or nested element types.
    """
    origin = get_origin(annotation)
    if origin is Annotated:
        base, *extras = get_args(annotation)
        if not any(isinstance(m, Width) for m in extras):
            return classify(base)

    if annotation is bytes or annotation is bytearray:
        return Kind("bytes", container=annotation)

    if origin is list:
        args = get_args(annotation)
        element = _scalar_for(args[0]) if len(args) == 1 else None
        return Kind("sequence", element, list) if element is not None else None
    if origin is tuple:
        args = get_args(annotation)
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
        element = _scalar_for(args[0])
        return Kind("sequence", element, tuple) if element is not None else None

    scalar = _scalar_for(annotation)
    if scalar is None:
        return None
    return Kind("scalar", scalar)
