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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, final

from .consts import DEFAULT_FIELD_MAX_LENGTH
from .exceptions import TooLongError

if TYPE_CHECKING:
    from .str_serializer import StrFieldSerializer


class FieldSerializer(ABC):
    """Write side of a row-oriented text format, as seen by a single field codec.

    The outer writer is responsible for quoting and escaping, a codec only hands it the text of one cell.
    """

    @staticmethod
    def build_str_serializer() -> StrFieldSerializer:
        from .str_serializer import StrFieldSerializer
        return StrFieldSerializer()

    @abstractmethod
    def _write_str(self, value: str) -> None:
        raise NotImplementedError

    @final
    def write_str(self, value: str, *, max_length: int | None = DEFAULT_FIELD_MAX_LENGTH) -> None:
        """Write the text of exactly one field.

        There is no limit on the length of the field unless `max_length` is given.
        """
        if not isinstance(value, str):
            raise TypeError('expected str')
        if max_length is not None and len(value) > max_length:
            raise TooLongError('field is too long')
        self._write_str(value)
