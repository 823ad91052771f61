"""Desktop window for reviewing and editing the comments of source files."""

from __future__ import annotations

import argparse
import os
from typing import Iterable, List, Optional, Sequence, Union

from .session import EditSession, FileEntry, SaveReport

PathLike = Union[str, "os.PathLike[str]"]

_MIN_ROW_HEIGHT = 25
_LINE_HEIGHT = 20
_HEADER_HEIGHT = 25
_BORDER = 2
_BUTTON_AREA = 80
_BOTTOM_MARGIN = 20
_EXTRA_PADDING = 40
_MIN_SCROLL_HEIGHT = 200
_EXPAND_RATIO = 0.6

_FILE_TYPES = (("Code Files", "*.cpp *.h *.py *.ts"), ("All Files", "*"))


def row_height(text: str) -> int:
    """Pixel height of a table row showing ``text``: 20 per line, at least 25."""
    return max(_MIN_ROW_HEIGHT, len(text.split("\n")) * _LINE_HEIGHT)


def table_height(texts: Iterable[str]) -> int:
    """Pixel height of a comment table: header, borders and every row."""
    return _HEADER_HEIGHT + _BORDER + sum(row_height(text) for text in texts)


def _scroll_area_height(content: int, available: int) -> Optional[int]:
    """Fixed height for the scroll area, or None to let it expand."""
    if content > available * _EXPAND_RATIO:
        return None
    return max(_MIN_SCROLL_HEIGHT, min(content, available))


class CommentWindow:
    """Main window: one editable comment table per opened file."""

    def __init__(self, root=None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._tk = tk
        self._ttk = ttk
        self.session = EditSession()
        self._editors: List[List["tk.Text"]] = []

        self.root = root if root is not None else tk.Tk()
        self.root.title("Code Comments")
        self.root.geometry("900x600")

        buttons = ttk.Frame(self.root)
        buttons.pack(side="top", fill="x", padx=10, pady=10)
        ttk.Button(buttons, text="Open File(s)", command=self._on_open).pack(
            side="left"
        )
        ttk.Button(buttons, text="Save", command=self.save).pack(side="left", padx=5)

        self._area = ttk.Frame(self.root)
        self._canvas = tk.Canvas(self._area, highlightthickness=0)
        scrollbar = ttk.Scrollbar(
            self._area, orient="vertical", command=self._canvas.yview
        )
        self._canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self._canvas.pack(side="left", fill="both", expand=True)

        self._inner = ttk.Frame(self._canvas)
        self._inner_id = self._canvas.create_window(
            (0, 0), window=self._inner, anchor="nw"
        )
        self._inner.bind(
            "<Configure>",
            lambda _event: self._canvas.configure(
                scrollregion=self._canvas.bbox("all")
            ),
        )
        self._canvas.bind(
            "<Configure>",
            lambda event: self._canvas.itemconfigure(self._inner_id, width=event.width),
        )
        self._area.pack(side="top", fill="both", expand=True, padx=10)

    def _on_open(self) -> None:
        from tkinter import filedialog

        paths = filedialog.askopenfilenames(
            parent=self.root, title="Open Code File(s)", filetypes=_FILE_TYPES
        )
        if paths:
            self.open_files(paths)

    def open_files(self, paths: Sequence[PathLike]) -> List[FileEntry]:
        """Load ``paths``, replacing whatever was shown before."""
        for child in self._inner.winfo_children():
            child.destroy()
        self._editors = []
        entries = self.session.open(paths)
        for index, entry in enumerate(entries):
            self._add_section(entry, separator=index < len(entries) - 1)
        self._fit_scroll_area()
        return entries

    def _add_section(self, entry: FileEntry, separator: bool) -> None:
        tk, ttk = self._tk, self._ttk
        ttk.Label(self._inner, text=entry.name, font=("TkDefaultFont", 14, "bold")).pack(
            anchor="w", pady=(10, 5)
        )

        table = ttk.Frame(self._inner, relief="solid", borderwidth=1)
        table.columnconfigure(1, weight=1)
        table.grid_rowconfigure(0, minsize=_HEADER_HEIGHT)
        ttk.Label(table, text="Line").grid(row=0, column=0, sticky="e", padx=4)
        ttk.Label(table, text="Comment").grid(row=0, column=1, sticky="w", padx=4)

        editors = []
        for row, (group, text) in enumerate(zip(entry.groups, entry.texts), start=1):
            table.grid_rowconfigure(row, minsize=row_height(text))
            ttk.Label(table, text=group.line_range(), anchor="e", justify="right").grid(
                row=row, column=0, sticky="ne", padx=4, pady=1
            )
            editor = tk.Text(
                table, height=len(text.split("\n")), wrap="word", undo=True
            )
            editor.insert("1.0", text)
            editor.grid(row=row, column=1, sticky="nsew", padx=4, pady=1)
            editors.append(editor)
        table.pack(fill="x")
        self._editors.append(editors)

        if separator:
            ttk.Separator(self._inner, orient="horizontal").pack(fill="x", pady=(15, 10))

    def _fit_scroll_area(self) -> None:
        self.root.update_idletasks()
        content = self._inner.winfo_reqheight() + _EXTRA_PADDING
        available = self.root.winfo_height() - _BUTTON_AREA - _BOTTOM_MARGIN
        height = _scroll_area_height(content, available)
        self._area.pack_forget()
        if height is None:
            self._area.pack(side="top", fill="both", expand=True, padx=10)
        else:
            self._canvas.configure(height=height)
            self._area.pack(side="top", fill="x", expand=False, padx=10)

    def _collect_edits(self) -> None:
        for file_index, editors in enumerate(self._editors):
            for row, editor in enumerate(editors):
                self.session.edit(file_index, row, editor.get("1.0", "end-1c"))

    def save(self) -> Optional[SaveReport]:
        """Write every opened file back and report the outcome."""
        from tkinter import messagebox

        self._collect_edits()
        try:
            report = self.session.save()
        except RuntimeError as error:
            messagebox.showwarning("No Files Selected", str(error), parent=self.root)
            return None
        if report.ok:
            messagebox.showinfo("Save Successful", report.summary(), parent=self.root)
        else:
            messagebox.showwarning("Partial Save", report.summary(), parent=self.root)
        return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the comment editor, optionally opening files given on the command line."""
    parser = argparse.ArgumentParser(description="Review and edit code comments.")
    parser.add_argument("files", nargs="*", help="source files to open")
    args = parser.parse_args(argv)
    window = CommentWindow()
    if args.files:
        window.open_files(args.files)
    window.root.mainloop()
    return 0