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

import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

import yaml
from pydantic import field_validator, model_validator
from structlog import get_logger
from typing_extensions import Self

from csv_extra.consts import (
    DEFAULT_FIELD_MAX_LENGTH,
    DEFAULT_IMAGE_SIZE_SEPARATOR,
    DEFAULT_LAT_LON_SEPARATOR,
    DEFAULT_LIST_SEPARATOR,
    DEFAULT_ROW_SEPARATOR,
    RESERVED_SEPARATOR_CHARS,
)
from csv_extra.utils.pydantic import BaseModel

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'CSV_EXTRA_CONFIG_YAML'


class CodecSettings(BaseModel):
    # Separator between numbers of a list (and of each matrix row)
    LIST_SEPARATOR: str = DEFAULT_LIST_SEPARATOR

    # Separator between matrix rows
    ROW_SEPARATOR: str = DEFAULT_ROW_SEPARATOR

    # Separator between width and height of an image size
    IMAGE_SIZE_SEPARATOR: str = DEFAULT_IMAGE_SIZE_SEPARATOR

    # Separator between latitude and longitude
    LAT_LON_SEPARATOR: str = DEFAULT_LAT_LON_SEPARATOR

    # Maximum length of a single field, the default `None` means no limit
    FIELD_MAX_LENGTH: Optional[int] = DEFAULT_FIELD_MAX_LENGTH

    @field_validator('LIST_SEPARATOR', 'ROW_SEPARATOR', 'IMAGE_SIZE_SEPARATOR', 'LAT_LON_SEPARATOR')
    @classmethod
    def _validate_separator(cls, separator: str) -> str:
        if len(separator) != 1:
            raise ValueError('separator must be a single character')
        if separator in RESERVED_SEPARATOR_CHARS:
            raise ValueError(f'{separator!r} is part of numeric text and cannot be a separator')
        return separator

    @field_validator('FIELD_MAX_LENGTH')
    @classmethod
    def _validate_field_max_length(cls, field_max_length: Optional[int]) -> Optional[int]:
        if field_max_length is not None and field_max_length <= 0:
            raise ValueError('FIELD_MAX_LENGTH must be positive')
        return field_max_length

    @model_validator(mode='after')
    def _validate_list_and_row_separators(self) -> Self:
        if self.LIST_SEPARATOR == self.ROW_SEPARATOR:
            raise ValueError('LIST_SEPARATOR and ROW_SEPARATOR must be different')
        return self

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Load settings from a yaml file, keys missing from the file keep their defaults.

        An empty file gives the default settings, anything other than a mapping at the top level is an error.
        """
        if not os.path.isfile(filepath):
            raise ValueError(f"'{filepath}' is not a file")

        with open(filepath, 'r') as file:
            settings_dict = yaml.safe_load(file) or {}

        if not isinstance(settings_dict, dict):
            raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")

        return cls.model_validate(settings_dict)


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the settings used by codecs that weren't given explicit settings.

    Tries to load the settings from a yaml filepath in the 'CSV_EXTRA_CONFIG_YAML' env var. If it's not set the
    default settings are used, which produce the canonical formats.
    """
    global _settings_singleton

    source = os.environ.get(CONFIG_YAML_ENV_VAR) or None

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading settings twice from a different source')
        return _settings_singleton.settings

    log = logger.new()
    if source is None:
        settings = CodecSettings()
    else:
        settings = CodecSettings.from_yaml(filepath=source)
    log.info('loaded codec settings', source=source or 'defaults')

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
