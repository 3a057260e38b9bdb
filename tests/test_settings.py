from pathlib import Path

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from csv_extra.encoding.image_size import format_image_size, parse_image_size
from csv_extra.encoding.lat_lon import format_lat_lon
from csv_extra.encoding.num_list import format_num_list
from csv_extra.encoding.num_matrix import format_num_matrix, parse_num_matrix
from csv_extra.settings import CONFIG_YAML_ENV_VAR, CodecSettings, get_global_settings


def test_defaults_are_canonical() -> None:
    settings = CodecSettings()
    assert settings.LIST_SEPARATOR == '_'
    assert settings.ROW_SEPARATOR == '|'
    assert settings.IMAGE_SIZE_SEPARATOR == 'x'
    assert settings.LAT_LON_SEPARATOR == ';'
    assert settings.FIELD_MAX_LENGTH is None
    assert get_global_settings() == settings


@pytest.mark.parametrize('kwargs', [
    dict(LIST_SEPARATOR=''),
    dict(LIST_SEPARATOR='__'),
    dict(ROW_SEPARATOR='1'),
    dict(IMAGE_SIZE_SEPARATOR='-'),
    dict(LAT_LON_SEPARATOR='.'),
    dict(LAT_LON_SEPARATOR='+'),
    dict(ROW_SEPARATOR='_'),
    dict(FIELD_MAX_LENGTH=0),
    dict(UNKNOWN_SETTING=1),
])
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        CodecSettings(**kwargs)


def test_settings_are_frozen() -> None:
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.LIST_SEPARATOR = ':'  # type: ignore[misc]


def test_explicit_settings() -> None:
    settings = CodecSettings(LIST_SEPARATOR=' ', ROW_SEPARATOR='/', IMAGE_SIZE_SEPARATOR='*', LAT_LON_SEPARATOR=':')
    assert format_num_matrix([[1, 2], [3]], int, settings=settings) == '1 2/3'
    assert parse_num_matrix('1 2/3', int, settings=settings) == [[1, 2], [3]]
    assert format_image_size((16, 9), int, int, settings=settings) == '16*9'
    assert parse_image_size('16*9', int, int, settings=settings) == (16, 9)
    assert format_lat_lon((1.5, -2.0), float, settings=settings) == '1.5:-2'


def test_from_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'settings.yml'
    filepath.write_text("LIST_SEPARATOR: ':'\nFIELD_MAX_LENGTH: null\n")
    settings = CodecSettings.from_yaml(filepath=filepath)
    assert settings.LIST_SEPARATOR == ':'
    assert settings.ROW_SEPARATOR == '|'
    assert settings.FIELD_MAX_LENGTH is None


def test_from_yaml_empty_file(tmp_path: Path) -> None:
    filepath = tmp_path / 'settings.yml'
    filepath.write_text('')
    assert CodecSettings.from_yaml(filepath=filepath) == CodecSettings()


def test_from_yaml_errors(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        CodecSettings.from_yaml(filepath=tmp_path / 'missing.yml')

    filepath = tmp_path / 'list.yml'
    filepath.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        CodecSettings.from_yaml(filepath=filepath)

    filepath = tmp_path / 'invalid.yml'
    filepath.write_text("ROW_SEPARATOR: '_'\n")
    with pytest.raises(ValidationError):
        CodecSettings.from_yaml(filepath=filepath)


def test_global_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    filepath = tmp_path / 'settings.yml'
    filepath.write_text("LIST_SEPARATOR: ':'\n")
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))

    with capture_logs() as log_list:
        settings = get_global_settings()
    assert settings.LIST_SEPARATOR == ':'
    assert get_global_settings() is settings
    assert format_num_list([1, 2], int) == '1:2'

    assert len(log_list) == 1
    assert log_list[0]['event'] == 'loaded codec settings'
    assert log_list[0]['source'] == str(filepath)


def test_global_settings_source_cannot_change(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    get_global_settings()
    filepath = tmp_path / 'settings.yml'
    filepath.write_text('')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    with pytest.raises(Exception, match='different source'):
        get_global_settings()
