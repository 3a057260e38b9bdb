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
A matrix is a list of rows, each row a list of numbers. Each row is encoded like a list of numbers (joined with `_`)
and the rows are joined with `|`, in order. Rows may have different lengths.

Layout: [row_0]|[row_1]|...|[row_N]

>>> se = FieldSerializer.build_str_serializer()
>>> encode_num_matrix(se, [[-1, 1], [1, -1]], int)
>>> encode_num_matrix(se, [[0], [-1, 1]], int)
>>> encode_num_matrix(se, [], int)
>>> se.finalize()
['-1_1|1_-1', '0|-1_1', '']

>>> de = FieldDeserializer.build_str_deserializer(['-1_1|1_-1', '0|-1_1', ''])
>>> decode_num_matrix(de, int)
[[-1, 1], [1, -1]]
>>> decode_num_matrix(de, int)
[[0], [-1, 1]]
>>> decode_num_matrix(de, int)
[]
>>> de.finalize()

An empty row can't be represented (it would look like an empty number), so an empty row text is rejected:

>>> from csv_extra.exceptions import TokenParseError
>>> try:
...     parse_num_matrix('1||2', int)
... except TokenParseError as e:
...     print(e)
invalid token '': cannot parse integer from empty string
"""

from collections.abc import Iterable
from typing import Optional, TypeVar

from csv_extra.deserializer import FieldDeserializer
from csv_extra.encoding.num_list import format_num_list
from csv_extra.numeric import NumericLike, as_numeric, parse_token
from csv_extra.serializer import FieldSerializer
from csv_extra.settings import CodecSettings, get_global_settings

T = TypeVar('T')


def format_num_matrix(
    rows: Iterable[Iterable[T]],
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> str:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    return settings.ROW_SEPARATOR.join(format_num_list(row, numeric, settings=settings) for row in rows)


def parse_num_matrix(text: str, numeric: NumericLike[T], *, settings: Optional[CodecSettings] = None) -> list[list[T]]:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    # splitting '' would give one empty row instead of no rows
    if not text:
        return []
    rows: list[list[T]] = []
    for row_text in text.split(settings.ROW_SEPARATOR):
        row: list[T] = []
        for token in row_text.split(settings.LIST_SEPARATOR):
            row.append(parse_token(numeric, token))
        rows.append(row)
    return rows


def encode_num_matrix(
    serializer: FieldSerializer,
    rows: Iterable[Iterable[T]],
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> None:
    """ Encodes a list of lists of numbers as a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = format_num_matrix(rows, numeric, settings=settings)
    serializer.write_str(text, max_length=settings.FIELD_MAX_LENGTH)


def decode_num_matrix(
    deserializer: FieldDeserializer,
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> list[list[T]]:
    """ Decodes a list of lists of numbers from a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = deserializer.read_str(max_length=settings.FIELD_MAX_LENGTH)
    return parse_num_matrix(text, numeric, settings=settings)
