# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This module implements the canonical textual form of numbers, which is what every codec delegates to.

A `Numeric[T]` knows how to render a value of type `T` to text and how to parse it back, codecs never special-case
a concrete numeric type. Parsing is strict: no surrounding whitespace, no `_` digit grouping and only ASCII
characters, so that a number never swallows a separator.

>>> U8.render(255)
'255'
>>> U8.parse('255')
255
>>> try:
...     U8.parse('256')
... except ValueError as e:
...     print(*e.args)
number too large to fit in target type

Floats are rendered with the shortest digits that round-trip for their width, in positional notation and with a
trailing `.0` dropped:

>>> F64.render(-135.0)
'-135'
>>> F64.render(1e20)
'100000000000000000000'
>>> F32.render(84.99)
'84.99'
>>> F32.parse('-1.1') == F32.parse('-1.10')
True

Plain Python types are mapped to a default numeric:

>>> as_numeric(int) is INT
True
>>> as_numeric(float) is F64
True
"""

import math
import re
import struct
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Generic, Optional, TypeVar, Union

from structlog import get_logger
from typing_extensions import override

from .exceptions import TokenParseError, TooLongError, UnsupportedTypeError

logger = get_logger()

T = TypeVar('T')

_INT_REGEX = re.compile(r'[+-]?[0-9]+')
_FORBIDDEN_CHARS_REGEX = re.compile(r'[\s_]')


class Numeric(ABC, Generic[T]):
    """Render-to-text and parse-from-text capability of a numeric type."""

    @abstractmethod
    def render(self, value: T) -> str:
        """Canonical text of `value`."""
        raise NotImplementedError

    @abstractmethod
    def parse(self, text: str) -> T:
        """Parse the canonical text back, raises `ValueError` describing the failure."""
        raise NotImplementedError


NumericLike = Union[Numeric[T], type[T]]


class IntNumeric(Numeric[int]):
    """ Integers, optionally with a fixed size and signedness.

    With `byte_size=None` the integer is unbounded (but still non-negative when `signed=False`). Rendering an integer
    with more digits than the interpreter's int-to-str limit raises `TooLongError`.
    """

    def __init__(self, *, byte_size: Optional[int] = None, signed: bool = True) -> None:
        assert byte_size is None or byte_size > 0
        self._byte_size = byte_size
        self._signed = signed

    def __repr__(self) -> str:
        return f'IntNumeric(byte_size={self._byte_size!r}, signed={self._signed!r})'

    def upper_bound_value(self) -> int | None:
        if self._byte_size is None:
            return None
        if self._signed:
            return 2**(self._byte_size * 8 - 1) - 1
        else:
            return 2**(self._byte_size * 8) - 1

    def lower_bound_value(self) -> int | None:
        if self._signed:
            if self._byte_size is None:
                return None
            return -(2**(self._byte_size * 8 - 1))
        else:
            return 0

    def _check_range(self, value: int) -> None:
        upper_bound = self.upper_bound_value()
        lower_bound = self.lower_bound_value()
        if upper_bound is not None and value > upper_bound:
            raise ValueError('number too large to fit in target type')
        if lower_bound is not None and value < lower_bound:
            raise ValueError('number too small to fit in target type')

    @override
    def render(self, value: int) -> str:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        self._check_range(value)
        try:
            return str(value)
        except ValueError as e:
            # the interpreter caps int-to-str conversion, see sys.set_int_max_str_digits
            raise TooLongError('integer has too many digits to render') from e

    @override
    def parse(self, text: str) -> int:
        if not text:
            raise ValueError('cannot parse integer from empty string')
        if not _INT_REGEX.fullmatch(text) or (not self._signed and text.startswith('-')):
            raise ValueError('invalid digit found in string')
        value = int(text)
        self._check_range(value)
        return value


class FloatNumeric(Numeric[float]):
    """ IEEE 754 floats of 64 or 32 bits.

    Values are held as Python floats, with 32 bits every parsed or rendered value is first rounded to the nearest
    float32.
    """

    def __init__(self, *, bits: int = 64) -> None:
        if bits not in (32, 64):
            raise ValueError('only 32 and 64 bit floats are supported')
        self._bits = bits

    def __repr__(self) -> str:
        return f'FloatNumeric(bits={self._bits!r})'

    @override
    def render(self, value: float) -> str:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError('expected float')
        value = float(value)
        if self._bits == 32:
            value = _to_float32(value)
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'inf' if value > 0 else '-inf'
        digits = _shortest_float32_repr(value) if self._bits == 32 else repr(value)
        return _positional(digits)

    @override
    def parse(self, text: str) -> float:
        if not text:
            raise ValueError('cannot parse float from empty string')
        if not text.isascii() or _FORBIDDEN_CHARS_REGEX.search(text):
            raise ValueError('invalid float literal')
        try:
            value = float(text)
        except ValueError:
            raise ValueError('invalid float literal') from None
        if self._bits == 32:
            value = _to_float32(value)
        return value


class DecimalNumeric(Numeric[Decimal]):
    """ Arbitrary precision decimals, the text is exactly what `str(Decimal)` gives.
    """

    def __repr__(self) -> str:
        return 'DecimalNumeric()'

    @override
    def render(self, value: Decimal) -> str:
        if not isinstance(value, Decimal):
            raise TypeError('expected Decimal')
        return str(value)

    @override
    def parse(self, text: str) -> Decimal:
        if not text:
            raise ValueError('cannot parse decimal from empty string')
        if not text.isascii() or _FORBIDDEN_CHARS_REGEX.search(text):
            raise ValueError('invalid decimal literal')
        try:
            return Decimal(text)
        except InvalidOperation:
            raise ValueError('invalid decimal literal') from None


def _to_float32(value: float) -> float:
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_float32_repr(value: float) -> str:
    # 9 significant digits always round-trip a float32
    for precision in range(1, 10):
        text = f'{value:.{precision}g}'
        if _to_float32(float(text)) == value:
            return text
    return repr(value)


def _positional(digits: str) -> str:
    if 'e' in digits or 'E' in digits:
        digits = format(Decimal(digits), 'f')
    if digits.endswith('.0'):
        digits = digits[:-2]
    return digits


INT = IntNumeric()
UINT = IntNumeric(signed=False)
I8 = IntNumeric(byte_size=1, signed=True)
I16 = IntNumeric(byte_size=2, signed=True)
I32 = IntNumeric(byte_size=4, signed=True)
I64 = IntNumeric(byte_size=8, signed=True)
I128 = IntNumeric(byte_size=16, signed=True)
U8 = IntNumeric(byte_size=1, signed=False)
U16 = IntNumeric(byte_size=2, signed=False)
U32 = IntNumeric(byte_size=4, signed=False)
U64 = IntNumeric(byte_size=8, signed=False)
U128 = IntNumeric(byte_size=16, signed=False)
F32 = FloatNumeric(bits=32)
F64 = FloatNumeric(bits=64)
DECIMAL = DecimalNumeric()

_DEFAULT_NUMERICS: dict[Any, Numeric[Any]] = {
    int: INT,
    float: F64,
    Decimal: DECIMAL,
}


def as_numeric(numeric: NumericLike[T]) -> Numeric[T]:
    """Accept either a `Numeric` or one of the plain Python types `int`, `float` and `Decimal`."""
    if isinstance(numeric, Numeric):
        return numeric
    try:
        return _DEFAULT_NUMERICS[numeric]
    except (KeyError, TypeError):
        raise UnsupportedTypeError(f'type not supported: {numeric!r}') from None


def parse_token(numeric: Numeric[T], token: str) -> T:
    """Parse a single token, wrapping any failure in a `TokenParseError` that carries the token."""
    try:
        return numeric.parse(token)
    except ValueError as e:
        cause = str(e)
        logger.debug('failed to parse token', token=token, numeric=repr(numeric), cause=cause)
        raise TokenParseError(token, cause) from e
