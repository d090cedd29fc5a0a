"""Reading map files into rows of tiles."""

from .lines import iter_lines, split_fields


def read_map(path):
    """Read the map at ``path`` and return its non-empty rows.

    Raises OSError when the file cannot be opened.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        content = "".join(iter_lines(handle))
    return split_fields(content, "\n")