"""Write edited comments back into source files."""

from __future__ import annotations

import os
import re
from typing import Iterable, List, Sequence, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]
Change = Tuple[int, str]

_INSERTION_BASE = 1000

_CPP_LINE = re.compile(r"^(\s*//\s*)(.*)$")
_PY_LINE = re.compile(r"^(\s*#\s*)(.*)$")
_INLINE = re.compile(r"^(.+)(//|#)(.*)$")

_SLASH_EXTENSIONS = frozenset({"cpp", "h", "ts", "js"})


def encode_insertion(base_line: int, offset: int) -> int:
    """Line number that asks for a new comment line after ``base_line``.

    ``offset`` counts the new lines placed after the same base line, from 0.
    """
    if base_line < 0:
        raise ValueError(f"base line must not be negative: {base_line}")
    if not 0 <= offset < _INSERTION_BASE - 1:
        raise ValueError(f"offset out of range: {offset}")
    return -(base_line * _INSERTION_BASE + offset + 1)


def decode_insertion(number: int) -> Tuple[int, int]:
    """Split an insertion line number into (base line, offset)."""
    if number >= 0:
        raise ValueError(f"not an insertion line number: {number}")
    encoded = -number
    return encoded // _INSERTION_BASE, encoded % _INSERTION_BASE - 1


def comment_marker(path: PathLike) -> str:
    """Single-line comment marker for a file, chosen by its extension."""
    name = os.path.basename(os.fspath(path))
    extension = name.rsplit(".", 1)[1].lower() if "." in name else ""
    if extension in _SLASH_EXTENSIONS:
        return "//"
    return "#"


def indentation(line: str) -> str:
    """Leading spaces and tabs of a line."""
    return line[: len(line) - len(line.lstrip(" \t"))]


def expand_multiline_comment(comment: str, marker: str, indent: str) -> List[str]:
    """Turn a multi-line comment text into one marked source line per line."""
    result = []
    for line in comment.split("\n"):
        text = line.strip()
        result.append(f"{indent}{marker} {text}" if text else f"{indent}{marker}")
    return result


def _read_lines(path: PathLike) -> List[str]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\n") for line in handle]


def _replace_file(path: PathLike, lines: Iterable[str]) -> None:
    temp_path = os.fspath(path) + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")
        os.replace(temp_path, path)
    except OSError:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


def _replace_marked(line: str, text: str) -> str:
    for pattern in (_CPP_LINE, _PY_LINE):
        match = pattern.match(line)
        if match:
            return match.group(1) + text
    return line


def save_comments(path: PathLike, comments: Sequence[Change]) -> None:
    """Replace the text of whole-line ``//`` or ``#`` comments in place.

    Each change is (line number, new text); only the first change for a
    line is used. Raises OSError when the file cannot be read or written.
    """
    by_line = {}
    for number, text in comments:
        by_line.setdefault(number, text)
    lines = _read_lines(path)
    updated = [
        _replace_marked(line, by_line[number]) if number in by_line else line
        for number, line in enumerate(lines, start=1)
    ]
    _replace_file(path, updated)


def _apply_replacement(lines: List[str], number: int, text: str, marker: str) -> None:
    index = number - 1
    if index < 0:
        return
    if index < len(lines):
        original = lines[index]
        indent = indentation(original)
        if "\n" in text:
            expanded = expand_multiline_comment(text, marker, indent)
            lines[index : index + 1] = expanded
            return
        for pattern in (_CPP_LINE, _PY_LINE):
            match = pattern.match(original)
            if match:
                lines[index] = match.group(1) + text
                return
        match = _INLINE.match(original)
        if match:
            lines[index] = f"{match.group(1)}{match.group(2)} {text}"
        else:
            lines[index] = f"{indent}{marker} {text}"
        return
    while len(lines) < index:
        lines.append("")
    lines.append(f"{marker} {text}")


def save_comments_with_multiline(path: PathLike, comments: Sequence[Change]) -> None:
    """Apply edited comments, including multi-line edits and new lines.

    Non-negative line numbers replace the comment on that line (or add
    one); negative numbers made by :func:`encode_insertion` insert a new
    comment line. Raises OSError when the file cannot be read or written.
    """
    lines = _read_lines(path)
    marker = comment_marker(path)

    replacements = sorted(
        (change for change in comments if change[0] >= 0), key=lambda c: c[0]
    )
    insertions = sorted(
        (change for change in comments if change[0] < 0),
        key=lambda c: decode_insertion(c[0]),
    )

    for number, text in replacements:
        _apply_replacement(lines, number, text, marker)

    for number, text in insertions:
        base_line, offset = decode_insertion(number)
        before = 0
        for previous, _ in insertions:
            if previous == number:
                break
            if decode_insertion(previous)[0] < base_line:
                before += 1
        index = base_line + offset + before
        if 0 <= index <= len(lines):
            lines.insert(index, f"{marker} {text}")

    _replace_file(path, lines)