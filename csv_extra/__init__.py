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

"""
Field codecs that fit structured values (lists, matrices and optional pairs of numbers) into a single cell of a
row-oriented text format like CSV.
"""

from csv_extra.deserializer import FieldDeserializer
from csv_extra.encoding.image_size import decode_image_size, encode_image_size, format_image_size, parse_image_size
from csv_extra.encoding.lat_lon import decode_lat_lon, encode_lat_lon, format_lat_lon, parse_lat_lon
from csv_extra.encoding.num_list import decode_num_list, encode_num_list, format_num_list, parse_num_list
from csv_extra.encoding.num_matrix import decode_num_matrix, encode_num_matrix, format_num_matrix, parse_num_matrix
from csv_extra.exceptions import (
    FieldError,
    FormatError,
    OutOfDataError,
    TokenParseError,
    TooLongError,
    UnsupportedTypeError,
)
from csv_extra.numeric import (
    DECIMAL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    INT,
    U8,
    U16,
    U32,
    U64,
    U128,
    UINT,
    DecimalNumeric,
    FloatNumeric,
    IntNumeric,
    Numeric,
    as_numeric,
)
from csv_extra.serializer import FieldSerializer
from csv_extra.settings import CodecSettings, get_global_settings
from csv_extra.version import __version__

__all__ = [
    'FieldDeserializer',
    'FieldSerializer',
    'CodecSettings',
    'get_global_settings',
    'decode_image_size',
    'encode_image_size',
    'format_image_size',
    'parse_image_size',
    'decode_lat_lon',
    'encode_lat_lon',
    'format_lat_lon',
    'parse_lat_lon',
    'decode_num_list',
    'encode_num_list',
    'format_num_list',
    'parse_num_list',
    'decode_num_matrix',
    'encode_num_matrix',
    'format_num_matrix',
    'parse_num_matrix',
    'FieldError',
    'FormatError',
    'OutOfDataError',
    'TokenParseError',
    'TooLongError',
    'UnsupportedTypeError',
    'Numeric',
    'IntNumeric',
    'FloatNumeric',
    'DecimalNumeric',
    'as_numeric',
    'INT',
    'UINT',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'F32',
    'F64',
    'DECIMAL',
    '__version__',
]
