# commentedit

commentedit finds the comments in source files, shows them grouped by
consecutive lines and writes your edits back into the files.

It recognises `//` comments, `#` comments and `/* ... */` comments that
open and close on the same line. That covers C, C++, TypeScript,
JavaScript and Python sources.

## Installing

```
pip install .
```

The package uses only the Python standard library. The desktop editor is
built on tkinter, which some systems ship as a separate package (for
example `python3-tk`). To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## The desktop editor

```
commentedit [FILE ...]
```

This opens a window with an "Open File(s)" button and a "Save" button. Any
files named on the command line are opened right away. Each opened file gets
its own table. Each row of a table holds a group of comments on consecutive
lines. The left column lists the line numbers and the right column holds the
editable comment text. When a comment follows code on the same line, the row
shows the whole line of code.

You can reword the text in place. To insert new comments after a group, add
lines at the end of its row. "Save" writes every opened file back and reports
how many of them were saved.

## Using it from Python

### Reading comments

```python
from commentedit.extractor import extract_grouped_comments

for group in extract_grouped_comments("example.py"):
    print(group.line_range())
    print(group.combined_comments())
```

- `extract_comments(path)` returns `(line number, comment)` pairs for every
  non-empty comment found.
- `extract_comments_with_context(path)` returns `ContextComment` objects.
  Each one has `line_number`, `comment` and `full_line`, and there is at most
  one per comment style per line.
- `extract_grouped_comments(path)` collects these into `CommentGroup` objects
  by consecutive line numbers. A group has `line_numbers`, `comments`,
  `full_lines` and `is_inline`.
- `is_inline_comment(full_line, comment)` tells whether code comes before a
  comment marker on the line.

### Writing comments back

```python
from commentedit.saver import encode_insertion, save_comments_with_multiline

save_comments_with_multiline(
    "example.py",
    [
        (3, "a reworded comment"),
        (encode_insertion(3, 0), "a new comment placed after line 3"),
    ],
)
```

How `save_comments_with_multiline` handles each change:

- A non-negative line number replaces the comment text on that line:
  - On a whole-line comment, the marker and the whitespace around it are kept.
  - On an inline comment, the code before the marker is kept.
  - On a line with no comment, the line becomes a new comment line.
  - A line number past the end of the file appends the comment, padding the
    file with empty lines first.
- Comment text that spans several lines becomes one comment line per line,
  indented like the original line.
- A negative number made with `encode_insertion(base_line, offset)` inserts a
  new comment line after `base_line`. `decode_insertion` turns such a number
  back into `(base_line, offset)`.

`comment_marker(path)` chooses the marker for new lines from the file
extension: `//` for `.cpp`, `.h`, `.ts` and `.js`, and `#` for everything
else. `indentation` and `expand_multiline_comment` are the helpers used for
this.

`save_comments(path, comments)` is a simpler variant. It only replaces the
text of whole-line `//` and `#` comments.

Both functions first write to `<path>.tmp` and then replace the original file
with it. They raise `OSError` when the file cannot be read or written.

### Editing several files in one go, without the window

```python
from commentedit.session import EditSession

session = EditSession()
session.open(["main.cpp", "tool.py"])
session.edit(0, 0, "first group, new wording")
report = session.save()
print(report.summary())
```

- `EditSession.open` loads the files. A file that cannot be read is kept
  with no comments.
- `EditSession.edit(file_index, row, text)` sets the text of one group.
  It raises `IndexError` for an unknown file or row.
- `EditSession.modified_comments(file_index)` shows the changes that would be
  written for a file.
- `EditSession.save()` writes every file and returns a `SaveReport` with
  `saved`, `total`, `failed`, `ok` and `summary()`. It raises `RuntimeError`
  when no files are open.
- `group_changes(group, edited_text)` gives the same mapping for a single
  group, and `extract_comment_from_full_line` does it for a single line.

## Limitations

- A `/* ... */` comment that spans more than one line is not recognised.
  Neither save function rewrites the text of block comments.
- Files are read as UTF-8 and always written back with `\n` line endings and
  a final newline.