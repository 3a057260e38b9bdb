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
A list of numbers is encoded as the canonical text of each number joined with `_`, in order.

Layout: [value_0]_[value_1]_..._[value_N]

An empty list is encoded as an empty string, never as a lone separator.

>>> se = FieldSerializer.build_str_serializer()
>>> encode_num_list(se, [-1, 0, 3], int)
>>> encode_num_list(se, [], int)
>>> se.finalize()
['-1_0_3', '']

>>> de = FieldDeserializer.build_str_deserializer(['-1_0_3', ''])
>>> decode_num_list(de, int)
[-1, 0, 3]
>>> decode_num_list(de, int)
[]
>>> de.finalize()

The first token that fails to parse aborts the whole list:

>>> from csv_extra.exceptions import TokenParseError
>>> try:
...     parse_num_list('1_a_2', int)
... except TokenParseError as e:
...     print(e)
invalid token 'a': invalid digit found in string
"""

from collections.abc import Iterable
from typing import Optional, TypeVar

from csv_extra.deserializer import FieldDeserializer
from csv_extra.numeric import NumericLike, as_numeric, parse_token
from csv_extra.serializer import FieldSerializer
from csv_extra.settings import CodecSettings, get_global_settings

T = TypeVar('T')


def format_num_list(values: Iterable[T], numeric: NumericLike[T], *, settings: Optional[CodecSettings] = None) -> str:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    return settings.LIST_SEPARATOR.join(numeric.render(value) for value in values)


def parse_num_list(text: str, numeric: NumericLike[T], *, settings: Optional[CodecSettings] = None) -> list[T]:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    # splitting '' would give one empty token instead of no tokens
    if not text:
        return []
    return [parse_token(numeric, token) for token in text.split(settings.LIST_SEPARATOR)]


def encode_num_list(
    serializer: FieldSerializer,
    values: Iterable[T],
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> None:
    """ Encodes a list of numbers as a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = format_num_list(values, numeric, settings=settings)
    serializer.write_str(text, max_length=settings.FIELD_MAX_LENGTH)


def decode_num_list(
    deserializer: FieldDeserializer,
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> list[T]:
    """ Decodes a list of numbers from a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = deserializer.read_str(max_length=settings.FIELD_MAX_LENGTH)
    return parse_num_list(text, numeric, settings=settings)
