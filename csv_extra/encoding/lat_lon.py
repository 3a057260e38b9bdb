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
An optional geographic coordinate `(lat, lon)` is encoded as `{lat};{lon}`, `None` is encoded as an empty string.

Both sides have the same numeric type.

>>> from csv_extra.numeric import F32
>>> se = FieldSerializer.build_str_serializer()
>>> encode_lat_lon(se, (84.99, -135.0), F32)
>>> encode_lat_lon(se, None, F32)
>>> se.finalize()
['84.99;-135', '']

>>> de = FieldDeserializer.build_str_deserializer(['-1.5;1.5', ''])
>>> decode_lat_lon(de, F32)
(-1.5, 1.5)
>>> str(decode_lat_lon(de, F32))
'None'
>>> de.finalize()

>>> from csv_extra.exceptions import FieldError
>>> try:
...     parse_lat_lon('84.99', F32)
... except FieldError as e:
...     print(e)
bad lat/lon format
"""

from typing import Optional, TypeVar

from csv_extra.deserializer import FieldDeserializer
from csv_extra.exceptions import FormatError
from csv_extra.numeric import NumericLike, as_numeric, parse_token
from csv_extra.serializer import FieldSerializer
from csv_extra.settings import CodecSettings, get_global_settings

T = TypeVar('T')


def format_lat_lon(
    coords: Optional[tuple[T, T]],
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> str:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    if coords is None:
        return ''
    lat, lon = coords
    return numeric.render(lat) + settings.LAT_LON_SEPARATOR + numeric.render(lon)


def parse_lat_lon(
    text: str,
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> Optional[tuple[T, T]]:
    settings = settings or get_global_settings()
    numeric = as_numeric(numeric)
    if not text:
        return None
    lat_text, separator, lon_text = text.partition(settings.LAT_LON_SEPARATOR)
    if not separator:
        raise FormatError('bad lat/lon format')
    return parse_token(numeric, lat_text), parse_token(numeric, lon_text)


def encode_lat_lon(
    serializer: FieldSerializer,
    coords: Optional[tuple[T, T]],
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> None:
    """ Encodes an optional `(lat, lon)` pair as a single field.
    """
    settings = settings or get_global_settings()
    text = format_lat_lon(coords, numeric, settings=settings)
    serializer.write_str(text, max_length=settings.FIELD_MAX_LENGTH)


def decode_lat_lon(
    deserializer: FieldDeserializer,
    numeric: NumericLike[T],
    *,
    settings: Optional[CodecSettings] = None,
) -> Optional[tuple[T, T]]:
    """ Decodes an optional `(lat, lon)` pair from a single field.
    """
    settings = settings or get_global_settings()
    text = deserializer.read_str(max_length=settings.FIELD_MAX_LENGTH)
    return parse_lat_lon(text, numeric, settings=settings)
