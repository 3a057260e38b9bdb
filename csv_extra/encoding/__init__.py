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
This module was made to hold the field encoding implementations.

Each encoder maps one structured value to the text of a single cell of a row-oriented text format (like CSV) and back.
The numbers inside the value are rendered and parsed by a `Numeric` given as a parameter, so every encoder works for
any numeric type.

The general organization should be that each submodule `x` deals with a single value shape and look like this:

    def format_x(value: ValueType, ...numerics..., *, settings: Optional[CodecSettings] = None) -> str:
        ...

    def parse_x(text: str, ...numerics..., *, settings: Optional[CodecSettings] = None) -> ValueType:
        ...

    def encode_x(serializer: FieldSerializer, value: ValueType, ...numerics..., *, settings=None) -> None:
        ...

    def decode_x(deserializer: FieldDeserializer, ...numerics..., *, settings=None) -> ValueType:
        ...

The empty string is reserved for the empty value (an empty list or `None`), it is always checked before splitting the
text on any separator.
"""
