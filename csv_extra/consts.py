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

from typing import Optional

# Separator between the numbers of a list, and between the numbers of a single matrix row
DEFAULT_LIST_SEPARATOR = '_'

# Separator between the rows of a matrix
DEFAULT_ROW_SEPARATOR = '|'

# Separator between width and height
DEFAULT_IMAGE_SIZE_SEPARATOR = 'x'

# Separator between latitude and longitude
DEFAULT_LAT_LON_SEPARATOR = ';'

# Maximum length of a single field, `None` means no limit; set a limit to guard against huge cells
DEFAULT_FIELD_MAX_LENGTH: Optional[int] = None

# Characters that are part of some numeric canonical text and therefore can't be used as separators
RESERVED_SEPARATOR_CHARS = frozenset('0123456789+-.')
