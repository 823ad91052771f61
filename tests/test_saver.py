import pytest

from commentedit.saver import (
    comment_marker,
    decode_insertion,
    encode_insertion,
    expand_multiline_comment,
    indentation,
    save_comments,
    save_comments_with_multiline,
)


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_encode_matches_source_format():
    assert encode_insertion(5, 0) == -5001


@pytest.mark.parametrize("base,offset", [(1, 0), (2, 3), (40, 998), (0, 0)])
def test_encode_decode_round_trip(base, offset):
    assert decode_insertion(encode_insertion(base, offset)) == (base, offset)


def test_decode_rejects_non_negative():
    with pytest.raises(ValueError):
        decode_insertion(3)


def test_encode_rejects_bad_offset():
    with pytest.raises(ValueError):
        encode_insertion(1, -1)


@pytest.mark.parametrize(
    "name,marker",
    [("a.py", "#"), ("a.CPP", "//"), ("b.h", "//"), ("c.ts", "//"),
     ("d.js", "//"), ("e.txt", "#"), ("noext", "#")],
)
def test_comment_marker(name, marker):
    assert comment_marker(name) == marker


def test_indentation_keeps_spaces_and_tabs():
    assert indentation("\t  x = 1  ") == "\t  "
    assert indentation("x") == ""


def test_expand_multiline_comment():
    result = expand_multiline_comment("a\n\n b ", "//", "  ")
    assert result == ["  // a", "  //", "  // b"]


def test_save_comments_replaces_whole_line_comments(tmp_path):
    path = _write(tmp_path, "f.py", "x = 1\n  # old\n// keep\ny = 2\n")
    save_comments(path, [(2, "new"), (3, "also"), (4, "ignored")])
    assert path.read_text(encoding="utf-8") == "x = 1\n  # new\n// also\ny = 2\n"
    assert not (tmp_path / "f.py.tmp").exists()


def test_save_comments_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_comments(tmp_path / "missing.py", [(1, "x")])


def test_multiline_replaces_standalone_comment(tmp_path):
    path = _write(tmp_path, "f.cpp", "int a;\n    // old\n")
    save_comments_with_multiline(path, [(2, "new")])
    assert path.read_text(encoding="utf-8") == "int a;\n    // new\n"


def test_multiline_replaces_inline_comment(tmp_path):
    path = _write(tmp_path, "f.py", "x = 1  # old\n")
    save_comments_with_multiline(path, [(1, "new")])
    assert path.read_text(encoding="utf-8") == "x = 1  # new\n"


def test_multiline_adds_comment_on_plain_line(tmp_path):
    path = _write(tmp_path, "f.js", "  let a;\n")
    save_comments_with_multiline(path, [(1, "note")])
    assert path.read_text(encoding="utf-8") == "  // note\n"


def test_multiline_expands_edit(tmp_path):
    path = _write(tmp_path, "f.py", "  # old\nz = 3\n")
    save_comments_with_multiline(path, [(1, "one\ntwo")])
    lines = path.read_text(encoding="utf-8").split("\n")
    assert lines[:3] == ["  # one", "  # two", "z = 3"]


def test_multiline_insertions_after_lines(tmp_path):
    path = _write(tmp_path, "f.py", "a\n# c1\nb\nd\n")
    changes = [
        (encode_insertion(3, 0), "after b"),
        (encode_insertion(2, 1), "second"),
        (encode_insertion(2, 0), "first"),
    ]
    save_comments_with_multiline(path, changes)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["a", "# c1", "# first", "# second", "b", "# after b", "d"]


def test_multiline_line_beyond_end_pads(tmp_path):
    path = _write(tmp_path, "f.py", "a\n")
    save_comments_with_multiline(path, [(3, "z")])
    assert path.read_text(encoding="utf-8").splitlines() == ["a", "", "# z"]


def test_multiline_preserves_untouched_file(tmp_path):
    text = "a = 1\n# c\nb = 2\n"
    path = _write(tmp_path, "f.py", text)
    save_comments_with_multiline(path, [])
    assert path.read_text(encoding="utf-8") == text
    assert not (tmp_path / "f.py.tmp").exists()


def test_multiline_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_comments_with_multiline(tmp_path / "nope.py", [(1, "x")])