"""Keep edited comment tables for a set of files and write them back."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from .extractor import CommentGroup, extract_grouped_comments
from .saver import encode_insertion, save_comments_with_multiline

PathLike = Union[str, "os.PathLike[str]"]
Change = Tuple[int, str]

_log = logging.getLogger(__name__)


def extract_comment_from_full_line(full_line: str) -> str:
    """Return the comment text of a whole code line.

    ``#`` is looked for first, then ``//``, then a ``/* ... */`` block.
    A line without any marker is returned stripped.
    """
    position = full_line.find("#")
    if position >= 0:
        return full_line[position + 1 :].strip()
    position = full_line.find("//")
    if position >= 0:
        return full_line[position + 2 :].strip()
    start = full_line.find("/*")
    end = full_line.find("*/")
    if start >= 0 and end > start:
        return full_line[start + 2 : end].strip()
    return full_line.strip()


def group_changes(group: CommentGroup, edited_text: str) -> List[Change]:
    """Map the edited text of one group back to line-numbered changes.

    Each text line up to the size of the group replaces the comment on the
    matching original line; inline comments are taken from the whole code
    line shown. Extra text lines become insertions after the group's last
    line, numbered with :func:`encode_insertion`.
    """
    changes: List[Change] = []
    known = len(group.line_numbers)
    for i, text in enumerate(edited_text.split("\n")):
        if i < known:
            inline = i < len(group.is_inline) and group.is_inline[i]
            comment = extract_comment_from_full_line(text) if inline else text
            changes.append((group.line_numbers[i], comment))
        else:
            number = encode_insertion(group.line_numbers[-1], i - known)
            changes.append((number, text))
    return changes


@dataclass
class FileEntry:
    """One opened file: its comment groups and the text shown for each."""

    path: str
    groups: List[CommentGroup] = field(default_factory=list)
    texts: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        """File name without directories."""
        return os.path.basename(self.path)


@dataclass(frozen=True)
class SaveReport:
    """Outcome of saving every opened file."""

    saved: int
    total: int
    failed: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """True when every file was saved."""
        return self.saved == self.total

    def summary(self) -> str:
        """Message describing how many files were saved."""
        if self.ok:
            return f"All {self.saved} files saved successfully!"
        return (
            f"Saved {self.saved} out of {self.total} files. "
            "Check logs for details."
        )


class EditSession:
    """Files whose comments are being edited."""

    def __init__(self) -> None:
        self.files: List[FileEntry] = []

    def open(self, paths: Iterable[PathLike]) -> List[FileEntry]:
        """Replace the opened files with ``paths`` and read their comments.

        A file that cannot be read is kept with no comments.
        """
        entries = []
        for path in paths:
            path_text = os.fspath(path)
            try:
                groups = extract_grouped_comments(path_text)
            except OSError as error:
                _log.warning("Could not open file: %s (%s)", path_text, error)
                groups = []
            texts = [group.combined_comments() for group in groups]
            entries.append(FileEntry(path_text, groups, texts))
        self.files = entries
        return entries

    def _entry(self, file_index: int) -> FileEntry:
        if not 0 <= file_index < len(self.files):
            raise IndexError(f"no opened file at index {file_index}")
        return self.files[file_index]

    def edit(self, file_index: int, row: int, text: str) -> None:
        """Set the edited text of one comment group."""
        entry = self._entry(file_index)
        if not 0 <= row < len(entry.texts):
            raise IndexError(f"no comment row {row} in {entry.path}")
        entry.texts[row] = text

    def modified_comments(self, file_index: int) -> List[Change]:
        """All changes for one file, in row order."""
        entry = self._entry(file_index)
        changes: List[Change] = []
        for group, text in zip(entry.groups, entry.texts):
            changes.extend(group_changes(group, text))
        return changes

    def save(self) -> SaveReport:
        """Write every opened file back.

        Raises RuntimeError when no files are open.
        """
        if not self.files:
            raise RuntimeError("Please open files first before saving.")
        failed = []
        for index, entry in enumerate(self.files):
            try:
                save_comments_with_multiline(entry.path, self.modified_comments(index))
            except (OSError, ValueError) as error:
                _log.warning("Failed to save: %s (%s)", entry.path, error)
                failed.append(entry.path)
        total = len(self.files)
        return SaveReport(total - len(failed), total, tuple(failed))