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

from collections import deque
from collections.abc import Iterable

from typing_extensions import override

from .deserializer import FieldDeserializer
from .exceptions import FieldError, OutOfDataError


class StrFieldDeserializer(FieldDeserializer):
    """Simple implementation of FieldDeserializer to read fields from a sequence of cells.

    Cells are consumed from the front as they are read.
    """

    def __init__(self, cells: Iterable[str]) -> None:
        self._cells: deque[str] = deque(cells)

    def finalize(self) -> None:
        """Check that every cell was read."""
        if not self.is_empty():
            raise FieldError('trailing data')

    @override
    def is_empty(self) -> bool:
        return not self._cells

    @override
    def _read_str(self) -> str:
        if not self._cells:
            raise OutOfDataError('not enough fields to read')
        return self._cells.popleft()
