from typing import Any, Callable

from .attributes import format_boolean, format_decimal
from .tags import (
    ATTRIBUTE_TAGS,
    BARE_TAGS,
    BOOLEAN,
    CLOSED_CAPTIONS,
    DECIMAL,
    QUOTED,
    Attribute,
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


def _attribute_value(attribute: Attribute, value: Any) -> str:
    if attribute.kind == QUOTED:
        return f'"{value}"'
    if attribute.kind == CLOSED_CAPTIONS:
        return value if value == "NONE" else f'"{value}"'
    if attribute.kind == DECIMAL:
        return format_decimal(value)
    if attribute.kind == BOOLEAN:
        return format_boolean(value)
    return str(value)


def _attribute_list(tag: Tag) -> str:
    pairs = []
    for attribute in tag.attributes:
        value = getattr(tag, attribute.field)
        if value is None:
            continue
        pairs.append(f"{attribute.key}={_attribute_value(attribute, value)}")
    return f"#{tag.directive}:{','.join(pairs)}"


def _bare(tag: Tag) -> str:
    return f"#{tag.directive}"


def _extinf(tag: ExtInf) -> str:
    return f"#EXTINF:{format_decimal(tag.duration)},{tag.title or ''}"


def _scalar(field: str) -> Callable[[Any], str]:
    def _format(tag: Any) -> str:
        return f"#{tag.directive}:{getattr(tag, field)}"

    return _format


def _uri(tag: Uri) -> str:
    return tag.uri


_FORMATTERS: dict[type, Callable[[Any], str]] = {
    ExtInf: _extinf,
    ExtXVersion: _scalar("number"),
    ExtXTargetDuration: _scalar("duration"),
    ExtXMediaSequence: _scalar("number"),
    ExtXDiscontinuitySequence: _scalar("number"),
    ExtXProgramDateTime: _scalar("date_time"),
    ExtXByteRange: _scalar("byterange"),
    ExtXBitrate: _scalar("bitrate"),
    ExtXPlaylistType: _scalar("playlist_type"),
    ExtXDefine: _scalar("definition"),
    Uri: _uri,
}
_FORMATTERS.update((tag, _bare) for tag in BARE_TAGS)
_FORMATTERS.update((tag, _attribute_list) for tag in ATTRIBUTE_TAGS)


def format_tag(tag: Tag) -> str:
    """Render a tag as its playlist line, without the line terminator.

    Optional attributes that are ``None`` are left out; the others are
    written in a fixed order per tag so output is stable and diffable.
    """
    try:
        formatter = _FORMATTERS[type(tag)]
    except KeyError:
        raise TypeError(f"Not a playlist tag: {tag!r}") from None
    return formatter(tag)
