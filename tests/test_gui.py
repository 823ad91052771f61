import pytest

from commentedit.extractor import extract_grouped_comments
from commentedit.gui import row_height, table_height


def test_single_line_uses_minimum_height():
    assert row_height("x") == 25
    assert row_height("") == 25


def test_two_lines_height():
    assert row_height("first\nsecond") == 40


def test_row_height_grows_with_lines():
    heights = [row_height("\n".join(["c"] * n)) for n in range(1, 8)]
    assert heights == sorted(heights)
    assert all(a < b for a, b in zip(heights[1:], heights[2:]))


def test_row_height_proportional_beyond_minimum():
    five = row_height("\n".join(["c"] * 5))
    ten = row_height("\n".join(["c"] * 10))
    assert ten == 2 * five


def test_row_height_ignores_line_length():
    assert row_height("a" * 500) == row_height("a")


def test_empty_table_has_positive_height():
    assert table_height([]) > 0


@pytest.mark.parametrize(
    "texts",
    [["a"], ["a", "b\nc"], ["one\ntwo\nthree", "", "x\ny"]],
)
def test_table_height_adds_rows(texts):
    assert table_height(texts) - table_height([]) == sum(row_height(t) for t in texts)


def test_table_height_independent_of_order():
    texts = ["a\nb\nc", "d", "e\nf"]
    assert table_height(texts) == table_height(list(reversed(texts)))


def test_single_row_adds_minimum():
    assert table_height(["note"]) - table_height([]) == 25


def test_table_height_accepts_generator():
    texts = ["a", "b\nc"]
    assert table_height(t for t in texts) == table_height(texts)


def test_row_height_for_extracted_group(tmp_path):
    source = tmp_path / "sample.py"
    source.write_text("# first\n# second\nx = 1\n")
    groups = extract_grouped_comments(source)
    assert len(groups) == 1
    shown = groups[0].combined_comments()
    assert row_height(shown) == row_height("first\nsecond")
    assert table_height([shown]) > table_height(["first"])