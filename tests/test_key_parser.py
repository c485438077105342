import pytest

from hillplayfair.core.errors import DimensionMismatchError, MalformedKeyError
from hillplayfair.parsers.key_parser import KeyParser


@pytest.fixture
def parser():
    return KeyParser(max_dimension=8)


def test_parse_2x2(parser):
    key = parser.parse_string("2\n3 3\n2 5\n")
    assert key.dimension == 2
    assert key.rows == [[3, 3], [2, 5]]


def test_layout_is_free_form(parser):
    assert parser.parse_string("3 6 24 1 13 16 10\n20\n17 15").rows == [
        [6, 24, 1],
        [13, 16, 10],
        [20, 17, 15],
    ]


def test_trailing_tokens_ignored(parser):
    assert parser.parse_string("1\n7\nextra stuff 99").rows == [[7]]


def test_negative_entries(parser):
    assert parser.parse_string("2 -1 0 0 -27").rows == [[-1, 0], [0, -27]]


@pytest.mark.parametrize(
    "text",
    ["", "   \n", "two 1 0 0 1", "2 1 0 0", "2 1 a 0 1", "2.5 1 2 3 4"],
)
def test_malformed(parser, text):
    with pytest.raises(MalformedKeyError):
        parser.parse_string(text)


@pytest.mark.parametrize("text", ["0", "-2 1 2 3 4", "9"])
def test_dimension_out_of_range(parser, text):
    with pytest.raises(DimensionMismatchError):
        parser.parse_string(text)


def test_parse_file(parser, tmp_path):
    path = tmp_path / "key.txt"
    path.write_text("2\n1 2\n3 4\n", encoding="utf-8")
    assert parser.parse_file(path).rows == [[1, 2], [3, 4]]


def test_parse_missing_file(parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        parser.parse_file(tmp_path / "absent.txt")
