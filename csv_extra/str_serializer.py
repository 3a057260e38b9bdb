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

from typing_extensions import override

from .serializer import FieldSerializer


class StrFieldSerializer(FieldSerializer):
    """Simple implementation of FieldSerializer that keeps the written fields in memory.

    Each call to `write_str` adds one cell, `finalize` returns all of them in the order they were written.
    """

    def __init__(self) -> None:
        self._cells: list[str] = []

    def finalize(self) -> list[str]:
        """Get the written cells."""
        return list(self._cells)

    @override
    def _write_str(self, value: str) -> None:
        self._cells.append(value)
