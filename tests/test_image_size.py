import pytest

from csv_extra.deserializer import FieldDeserializer
from csv_extra.encoding.image_size import decode_image_size, encode_image_size, format_image_size, parse_image_size
from csv_extra.exceptions import FormatError, TokenParseError
from csv_extra.numeric import F64, U8, U16
from csv_extra.serializer import FieldSerializer


def test_literal() -> None:
    assert format_image_size((16, 1024), U8, U16) == '16x1024'
    assert parse_image_size('16x1024', U8, U16) == (16, 1024)
    assert format_image_size((1, 2), int, int) == '1x2'


def test_none_is_empty_string() -> None:
    assert format_image_size(None, U8, U16) == ''
    assert parse_image_size('', U8, U16) is None


def test_round_trip() -> None:
    se = FieldSerializer.build_str_serializer()
    encode_image_size(se, (128, 64), U8, U16)
    encode_image_size(se, None, U8, U16)
    encode_image_size(se, (3, 4.5), U8, F64)
    cells = se.finalize()
    assert cells == ['128x64', '', '3x4.5']

    de = FieldDeserializer.build_str_deserializer(cells)
    assert decode_image_size(de, U8, U16) == (128, 64)
    assert decode_image_size(de, U8, U16) is None
    assert decode_image_size(de, U8, F64) == (3, 4.5)
    de.finalize()


@pytest.mark.parametrize('text, token', [
    ('1x', ''),
    ('x1', ''),
    ('x', ''),
    ('1x2x3', '2x3'),
    ('ax2', 'a'),
    ('256x1', '256'),
])
def test_invalid_token(text: str, token: str) -> None:
    with pytest.raises(TokenParseError) as exc_info:
        parse_image_size(text, U8, U16)
    assert exc_info.value.token == token


@pytest.mark.parametrize('text', ['1', '12', '1;2', '1X2'])
def test_missing_separator(text: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        parse_image_size(text, U8, U16)
    assert str(exc_info.value) == 'bad image size format'


def test_height_uses_its_own_type() -> None:
    assert parse_image_size('255x65535', U8, U16) == (255, 65535)
    with pytest.raises(TokenParseError) as exc_info:
        parse_image_size('255x65536', U8, U16)
    assert exc_info.value.token == '65536'


def test_unsupported_numeric_fails_for_none() -> None:
    from csv_extra.exceptions import UnsupportedTypeError

    with pytest.raises(UnsupportedTypeError):
        format_image_size(None, str, U16)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedTypeError):
        parse_image_size('', U8, bool)
