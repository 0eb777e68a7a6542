"""String-to-scalar parsers for query values.

Each parser has the signature::

    def parse(value: str) -> T:
        '''Return the parsed value, or raise ValueError.'''

Parsing is deliberately stricter than the ``int()`` / ``float()``
builtins: no surrounding whitespace, no ``_`` digit separators, and
integers must fit in 64 bits.  Query strings are user input, so
``" 12"`` and ``"1_000"`` are rejected rather than guessed at.

Width handling (wrapping a parsed integer into an ``int8`` field, rounding
to single precision) is separate from parsing; see ``wrap_int`` and
``round_float32``.
"""

import math
import re
import struct

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOATS = frozenset({"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan"})

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def parse_int(value: str) -> int:
    """Parse a base-10 signed integer that fits in 64 bits."""
    if not _SIGNED_RE.fullmatch(value):
        msg = f"invalid signed integer: {value!r}"
        raise ValueError(msg)
    n = int(value)
    if not _INT64_MIN <= n <= _INT64_MAX:
        msg = f"signed integer out of range: {value!r}"
        raise ValueError(msg)
    return n


def parse_uint(value: str) -> int:
    """Parse a base-10 unsigned integer that fits in 64 bits.

    A leading sign is rejected, including ``+``.
    """
    if not _UNSIGNED_RE.fullmatch(value):
        msg = f"invalid unsigned integer: {value!r}"
        raise ValueError(msg)
    n = int(value)
    if n > _UINT64_MAX:
        msg = f"unsigned integer out of range: {value!r}"
        raise ValueError(msg)
    return n


def wrap_int(n: int, bits: int, *, signed: bool) -> int:
    """Truncate *n* to *bits* bits, two's complement when *signed*.

    ``wrap_int(300, 8, signed=False) == 44``
    ``wrap_int(200, 8, signed=True) == -56``
    """
    mask = (1 << bits) - 1
    n &= mask
    if signed and n >> (bits - 1):
        n -= 1 << bits
    return n


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------


def parse_float(value: str) -> float:
    """Parse a base-10 or hexadecimal floating point literal.

    Accepts ``inf``, ``infinity`` and ``nan`` in any case with an optional
    sign.  Finite literals that overflow a double (``1e400``) are rejected
    instead of silently becoming infinity.
    """
    if value.lower() in _SPECIAL_FLOATS:
        return float(value)
    if _DECIMAL_FLOAT_RE.fullmatch(value):
        result = float(value)
    elif _HEX_FLOAT_RE.fullmatch(value):
        try:
            result = float.fromhex(value)
        except OverflowError:
            msg = f"float out of range: {value!r}"
            raise ValueError(msg) from None
    else:
        msg = f"invalid float: {value!r}"
        raise ValueError(msg)
    if math.isinf(result):
        msg = f"float out of range: {value!r}"
        raise ValueError(msg)
    return result


def round_float32(x: float) -> float:
    """Round *x* to the nearest IEEE 754 single precision value."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------


def parse_bool(value: str) -> bool:
    """Parse the conventional boolean literal set.

    ``1 t T TRUE true True`` are true; ``0 f F FALSE false False`` are false.
    """
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"invalid boolean: {value!r}"
    raise ValueError(msg)
