"""Minimal printf-style formatting and coloured console output."""

import sys

RESET = "\033[0m"

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value):
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _conv_char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _conv_string(value):
    return "(null)" if value is None else str(value)


def _conv_pointer(value):
    if value is None or int(value) == 0:
        return "(nil)"
    return "0x" + format(int(value) & _PTR_MASK, "x")


def _conv_signed(value):
    return str(_to_int32(value))


def _conv_unsigned(value):
    return str(int(value) & _UINT_MASK)


def _conv_hex_lower(value):
    return format(int(value) & _UINT_MASK, "x")


def _conv_hex_upper(value):
    return format(int(value) & _UINT_MASK, "X")


_CONVERSIONS = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def format_printf(fmt, *args):
    """Format ``fmt`` with the conversions %c %s %p %d %i %u %x %X and %%.

    Unknown conversion characters produce no output. Raises ValueError
    when the format asks for more arguments than were given.
    """
    out = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(f"missing argument for %{spec}") from None
            out.append(_CONVERSIONS[spec](value))
    return "".join(out)


def print_formatted(fmt, *args):
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def print_colored(color, text):
    """Write ``text`` wrapped in a colour escape and a reset; return its length."""
    output = f"{color}{text}{RESET}"
    sys.stdout.write(output)
    sys.stdout.flush()
    return len(output)


def itoa(n):
    """Return the decimal representation of an integer."""
    return str(int(n))