import logging
from functools import partial
from typing import Any, Callable, Optional

from .attributes import (
    parse_attributes,
    parse_boolean,
    parse_decimal,
    parse_integer,
)
from .tags import (
    ATTRIBUTE_TAGS,
    BARE_TAGS,
    BOOLEAN,
    DECIMAL,
    INTEGER,
    ExtInf,
    ExtXBitrate,
    ExtXByteRange,
    ExtXDefine,
    ExtXDiscontinuitySequence,
    ExtXMediaSequence,
    ExtXPlaylistType,
    ExtXProgramDateTime,
    ExtXTargetDuration,
    ExtXVersion,
    Tag,
    Uri,
)

_logger = logging.getLogger("m3u8tags")

PLAYLIST_TYPES = ("EVENT", "VOD")


class ParseError(ValueError):
    """A line that cannot be decoded into a tag.

    ``lineno`` is set when the line was read as part of a playlist.
    """

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


def _number(parse: Callable[[str], Any], value: str, name: str) -> Any:
    try:
        return parse(value)
    except ValueError as error:
        raise ParseError(f"Invalid {name} value") from error


def _extinf(payload: str) -> ExtInf:
    duration, _, title = payload.partition(",")
    return ExtInf(
        _number(parse_decimal, duration.strip(), ExtInf.directive),
        title.strip() or None,
    )


def _playlist_type(payload: str) -> ExtXPlaylistType:
    if payload not in PLAYLIST_TYPES:
        raise ParseError(f"Invalid {ExtXPlaylistType.directive} value")
    return ExtXPlaylistType(payload)


def _integer(tag: type[Tag], signed: bool = False) -> Callable[[str], Tag]:
    parse = partial(parse_integer, signed=signed)

    def _decode(payload: str) -> Tag:
        return tag(_number(parse, payload, tag.directive))

    return _decode


def _attribute_list(tag: type[Tag]) -> Callable[[str], Tag]:
    def _decode(payload: str) -> Tag:
        attributes = parse_attributes(payload)
        fields = {}
        for attribute in tag.attributes:
            value = attributes.get(attribute.key)
            if value is None:
                if attribute.required:
                    raise ParseError(f"Missing {attribute.key} attribute")
                continue
            if attribute.kind == INTEGER:
                fields[attribute.field] = _number(parse_integer, value, attribute.key)
            elif attribute.kind == DECIMAL:
                fields[attribute.field] = _number(parse_decimal, value, attribute.key)
            elif attribute.kind == BOOLEAN:
                fields[attribute.field] = parse_boolean(value)
            else:
                fields[attribute.field] = value
        return tag(**fields)

    return _decode


_DECODERS: dict[str, Callable[[str], Tag]] = {
    ExtXVersion.directive: _integer(ExtXVersion, signed=True),
    ExtInf.directive: _extinf,
    ExtXTargetDuration.directive: _integer(ExtXTargetDuration),
    ExtXMediaSequence.directive: _integer(ExtXMediaSequence),
    ExtXDiscontinuitySequence.directive: _integer(ExtXDiscontinuitySequence),
    ExtXProgramDateTime.directive: ExtXProgramDateTime,
    ExtXByteRange.directive: ExtXByteRange,
    # Negative bitrates are reported by the validator
    ExtXBitrate.directive: _integer(ExtXBitrate, signed=True),
    ExtXPlaylistType.directive: _playlist_type,
    ExtXDefine.directive: ExtXDefine,
}
_DECODERS.update((tag.directive, _attribute_list(tag)) for tag in ATTRIBUTE_TAGS)

_BARE: dict[str, type[Tag]] = {tag.directive: tag for tag in BARE_TAGS}


def parse_line(line: str) -> Optional[Tag]:
    """Decode one trimmed, non-empty playlist line.

    Returns ``None`` for comments and directives this package does not
    know, so they never break parsing. Raises ``ParseError`` for a known
    directive with a bad or incomplete payload.
    """
    if not line.startswith("#"):
        return Uri(line)
    name, sep, payload = line[1:].partition(":")
    if bare := _BARE.get(name):
        return bare()
    if sep and (decode := _DECODERS.get(name)):
        return decode(payload.strip())
    _logger.debug("Ignoring line: %s", line)
    return None
