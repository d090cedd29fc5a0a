"""Line reading and string splitting helpers."""

BUFFER_SIZE = 128


def iter_lines(stream, buffer_size=BUFFER_SIZE):
    """Yield lines from ``stream``, reading ``buffer_size`` units at a time.

    Each line keeps its trailing newline; a final line without one is
    yielded as is. Works on text and binary streams alike.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    newline = None
    while True:
        chunk = stream.read(buffer_size)
        if pending is None:
            pending = chunk[:0]
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
        pending += chunk
        while True:
            index = pending.find(newline)
            if index < 0:
                break
            yield pending[: index + 1]
            pending = pending[index + 1 :]
        if not chunk:
            break
    if pending:
        yield pending


def split_fields(text, sep):
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in text.split(sep) if field]


def substring(text, start, length):
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return text[:0]
    return text[start : start + length]