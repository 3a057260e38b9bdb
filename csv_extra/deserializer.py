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
from collections.abc import Iterable
from typing import TYPE_CHECKING, final

from .consts import DEFAULT_FIELD_MAX_LENGTH
from .exceptions import TooLongError

if TYPE_CHECKING:
    from .str_deserializer import StrFieldDeserializer


class FieldDeserializer(ABC):
    """Read side of a row-oriented text format, as seen by a single field codec."""

    @staticmethod
    def build_str_deserializer(cells: Iterable[str]) -> StrFieldDeserializer:
        from .str_deserializer import StrFieldDeserializer
        return StrFieldDeserializer(cells)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _read_str(self) -> str:
        raise NotImplementedError

    @final
    def read_str(self, *, max_length: int | None = DEFAULT_FIELD_MAX_LENGTH) -> str:
        """Read the text of exactly one field, errors if `max_length` is given and the field is longer."""
        value = self._read_str()
        if max_length is not None and len(value) > max_length:
            raise TooLongError('field is too long')
        return value
