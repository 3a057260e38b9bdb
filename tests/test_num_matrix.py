import pytest

from csv_extra.deserializer import FieldDeserializer
from csv_extra.encoding.num_list import format_num_list, parse_num_list
from csv_extra.encoding.num_matrix import decode_num_matrix, encode_num_matrix, format_num_matrix, parse_num_matrix
from csv_extra.exceptions import TokenParseError
from csv_extra.numeric import F64, I8
from csv_extra.serializer import FieldSerializer


def test_literal() -> None:
    assert format_num_matrix([[-1, 1], [1, -1]], int) == '-1_1|1_-1'
    assert parse_num_matrix('-1_1|1_-1', int) == [[-1, 1], [1, -1]]
    assert format_num_matrix([[0], [-1, 1]], int) == '0|-1_1'
    assert parse_num_matrix('0|-1_1', int) == [[0], [-1, 1]]


def test_empty_is_empty_string() -> None:
    assert format_num_matrix([], int) == ''
    assert parse_num_matrix('', int) == []


def test_rows_and_list_separators_are_distinct() -> None:
    assert format_num_matrix([[1], [2]], int) == '1|2'
    assert format_num_list([1, 2], int) == '1_2'
    assert parse_num_matrix('1_2', int) == [[1, 2]]
    assert parse_num_matrix('1|2', int) == [[1], [2]]
    with pytest.raises(TokenParseError):
        parse_num_list('1|2', int)


def test_ragged_rows_round_trip() -> None:
    rows = [[1.5], [-135.0, 84.99, 0.0], [2.0, 3.0]]
    se = FieldSerializer.build_str_serializer()
    encode_num_matrix(se, rows, F64)
    encode_num_matrix(se, [], F64)
    cells = se.finalize()
    assert cells == ['1.5|-135_84.99_0|2_3', '']

    de = FieldDeserializer.build_str_deserializer(cells)
    assert decode_num_matrix(de, F64) == rows
    assert decode_num_matrix(de, F64) == []
    de.finalize()


@pytest.mark.parametrize('text', ['1||2', '1|', '|1', '|', '1_2||3'])
def test_empty_row_is_rejected(text: str) -> None:
    with pytest.raises(TokenParseError) as exc_info:
        parse_num_matrix(text, int)
    assert exc_info.value.token == ''
    assert exc_info.value.cause == 'cannot parse integer from empty string'


def test_bad_token_aborts_whole_matrix() -> None:
    with pytest.raises(TokenParseError) as exc_info:
        parse_num_matrix('1_2|3_200|x', I8)
    assert exc_info.value.token == '200'
