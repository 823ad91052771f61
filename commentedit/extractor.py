"""Find comments in source files and group them by consecutive lines."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

_CPP_COMMENT = re.compile(r"//(.*)")
_PY_COMMENT = re.compile(r"#(.*)")
_BLOCK_COMMENT = re.compile(r"/\*(.*?)\*/", re.DOTALL)

_MARKERS = ("//", "#", "/*")


@dataclass
class CommentGroup:
    """Comments found on a run of consecutive lines."""

    line_numbers: List[int] = field(default_factory=list)
    comments: List[str] = field(default_factory=list)
    full_lines: List[str] = field(default_factory=list)
    is_inline: List[bool] = field(default_factory=list)

    def add(self, entry: "ContextComment") -> None:
        """Append one comment with its line context."""
        self.line_numbers.append(entry.line_number)
        self.comments.append(entry.comment)
        self.full_lines.append(entry.full_line)
        self.is_inline.append(is_inline_comment(entry.full_line, entry.comment))

    def line_range(self) -> str:
        """Line numbers of the group, one per line."""
        return "\n".join(str(number) for number in self.line_numbers)

    def combined_comments(self) -> str:
        """Display text: whole code line for inline comments, bare text otherwise."""
        shown = []
        for i, comment in enumerate(self.comments):
            inline = i < len(self.is_inline) and self.is_inline[i]
            if inline and i < len(self.full_lines):
                shown.append(self.full_lines[i].strip())
            else:
                shown.append(comment)
        return "\n".join(shown)


@dataclass(frozen=True)
class ContextComment:
    """A comment together with the line it was found on."""

    line_number: int
    comment: str
    full_line: str


def _read_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        for number, line in enumerate(handle, start=1):
            yield number, line.rstrip("\n")


def extract_comments(path: PathLike) -> List[Tuple[int, str]]:
    """Return (line number, comment) for every non-empty comment in a file."""
    found: List[Tuple[int, str]] = []
    for number, line in _read_lines(path):
        for pattern in (_CPP_COMMENT, _PY_COMMENT, _BLOCK_COMMENT):
            for match in pattern.finditer(line):
                text = match.group(1).strip()
                if text:
                    found.append((number, text))
    return found


def extract_comments_with_context(path: PathLike) -> List[ContextComment]:
    """Return the first comment of each style per line, with the whole line."""
    found: List[ContextComment] = []
    for number, line in _read_lines(path):
        for pattern in (_CPP_COMMENT, _PY_COMMENT, _BLOCK_COMMENT):
            match = pattern.search(line)
            if match is None:
                continue
            text = match.group(1).strip()
            if text:
                found.append(ContextComment(number, text, line))
    return found


def extract_grouped_comments(path: PathLike) -> List[CommentGroup]:
    """Group comments whose line numbers follow each other directly."""
    groups: List[CommentGroup] = []
    previous_line = None
    for entry in extract_comments_with_context(path):
        if previous_line is None or entry.line_number != previous_line + 1:
            groups.append(CommentGroup())
        groups[-1].add(entry)
        previous_line = entry.line_number
    return groups


def is_inline_comment(full_line: str, comment: str) -> bool:
    """True when code precedes a comment marker on the line."""
    for marker in _MARKERS:
        position = full_line.find(marker)
        if position > 0 and full_line[:position].strip():
            return True
    return False