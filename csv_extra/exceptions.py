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

class FieldError(Exception):
    """Base class for all errors raised when encoding or decoding a field."""


class TokenParseError(FieldError):
    """A piece of text that should hold a number could not be parsed as the target numeric type."""

    def __init__(self, token: str, cause: str) -> None:
        super().__init__(f'invalid token {token!r}: {cause}')
        self.token = token
        self.cause = cause


class FormatError(FieldError):
    """The field text does not have the expected structure, e.g. a missing separator."""


class TooLongError(FieldError):
    pass


class OutOfDataError(FieldError):
    pass


class UnsupportedTypeError(FieldError):
    pass
