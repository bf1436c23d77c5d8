import math
import re
from typing import Iterator

# See rfc8216 section 4.2, "Attribute Lists"

_INTEGER_RE = re.compile(r"[0-9]+")
_SIGNED_INTEGER_RE = re.compile(r"-?[0-9]+")
_DECIMAL_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def split_attributes(text: str) -> Iterator[str]:
    """Yield the comma separated fragments of an attribute list.

    Commas between double quotes belong to the value, so
    ``CODECS="avc1.4d401f,mp4a.40.2"`` stays in one piece.
    """
    start = 0
    quoted = False
    for index, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            yield text[start:index]
            start = index + 1
    yield text[start:]


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_attributes(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE,...`` into a mapping.

    Fragments without ``=`` are skipped, so a malformed tail does not
    spoil the rest of the line. Required keys are checked by the caller.
    """
    attributes = {}
    for fragment in split_attributes(text):
        key, sep, value = fragment.partition("=")
        if not sep:
            continue
        attributes[key.strip()] = unquote(value.strip())
    return attributes


def parse_integer(value: str, signed: bool = False) -> int:
    pattern = _SIGNED_INTEGER_RE if signed else _INTEGER_RE
    if not pattern.fullmatch(value):
        raise ValueError(f"Invalid integer: {value!r}")
    return int(value)


def parse_decimal(value: str) -> float:
    if not _DECIMAL_RE.fullmatch(value):
        raise ValueError(f"Invalid decimal: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Invalid decimal: {value!r}")
    return number


def format_decimal(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def parse_boolean(value: str) -> bool:
    return value == "YES"


def format_boolean(value: bool) -> str:
    return "YES" if value else "NO"
