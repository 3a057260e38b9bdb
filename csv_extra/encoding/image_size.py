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
An optional image size `(width, height)` is encoded as `{width}x{height}`, `None` is encoded as an empty string.

Width and height can have different numeric types.

>>> from csv_extra.numeric import U8, U16
>>> se = FieldSerializer.build_str_serializer()
>>> encode_image_size(se, (16, 1024), U8, U16)
>>> encode_image_size(se, None, U8, U16)
>>> se.finalize()
['16x1024', '']

>>> de = FieldDeserializer.build_str_deserializer(['16x1024', ''])
>>> decode_image_size(de, U8, U16)
(16, 1024)
>>> str(decode_image_size(de, U8, U16))
'None'
>>> de.finalize()

The text is split on the first `x` only:

>>> from csv_extra.exceptions import FieldError
>>> try:
...     parse_image_size('1x2x3', int, int)
... except FieldError as e:
...     print(e)
invalid token '2x3': invalid digit found in string
>>> try:
...     parse_image_size('12', int, int)
... except FieldError as e:
...     print(e)
bad image size format
"""

from typing import Optional, TypeVar

from csv_extra.deserializer import FieldDeserializer
from csv_extra.exceptions import FormatError
from csv_extra.numeric import NumericLike, as_numeric, parse_token
from csv_extra.serializer import FieldSerializer
from csv_extra.settings import CodecSettings, get_global_settings

W = TypeVar('W')
H = TypeVar('H')


def format_image_size(
    size: Optional[tuple[W, H]],
    width_numeric: NumericLike[W],
    height_numeric: NumericLike[H],
    *,
    settings: Optional[CodecSettings] = None,
) -> str:
    settings = settings or get_global_settings()
    width_numeric = as_numeric(width_numeric)
    height_numeric = as_numeric(height_numeric)
    if size is None:
        return ''
    width, height = size
    width_text = width_numeric.render(width)
    height_text = height_numeric.render(height)
    return width_text + settings.IMAGE_SIZE_SEPARATOR + height_text


def parse_image_size(
    text: str,
    width_numeric: NumericLike[W],
    height_numeric: NumericLike[H],
    *,
    settings: Optional[CodecSettings] = None,
) -> Optional[tuple[W, H]]:
    settings = settings or get_global_settings()
    width_numeric = as_numeric(width_numeric)
    height_numeric = as_numeric(height_numeric)
    if not text:
        return None
    width_text, separator, height_text = text.partition(settings.IMAGE_SIZE_SEPARATOR)
    if not separator:
        raise FormatError('bad image size format')
    width = parse_token(width_numeric, width_text)
    height = parse_token(height_numeric, height_text)
    return width, height


def encode_image_size(
    serializer: FieldSerializer,
    size: Optional[tuple[W, H]],
    width_numeric: NumericLike[W],
    height_numeric: NumericLike[H],
    *,
    settings: Optional[CodecSettings] = None,
) -> None:
    """ Encodes an optional `(width, height)` pair as a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = format_image_size(size, width_numeric, height_numeric, settings=settings)
    serializer.write_str(text, max_length=settings.FIELD_MAX_LENGTH)


def decode_image_size(
    deserializer: FieldDeserializer,
    width_numeric: NumericLike[W],
    height_numeric: NumericLike[H],
    *,
    settings: Optional[CodecSettings] = None,
) -> Optional[tuple[W, H]]:
    """ Decodes an optional `(width, height)` pair from a single field.

    This modules's docstring has more details and examples.
    """
    settings = settings or get_global_settings()
    text = deserializer.read_str(max_length=settings.FIELD_MAX_LENGTH)
    return parse_image_size(text, width_numeric, height_numeric, settings=settings)
