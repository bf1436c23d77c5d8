import io
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, NamedTuple, Optional, Union

from .parser import ParseError, parse_line
from .serializer import format_tag
from .tags import ExtInf, Tag, Uri
from .validation import ValidationError, validate

# See rfc8216 and https://developer.apple.com/documentation/http_live_streaming

_logger = logging.getLogger("m3u8tags")


class Segment(NamedTuple):
    uri: str
    duration: float
    title: Optional[str]


class Playlist:
    """An ordered, read-only sequence of tags.

    Order is significant: an ``ExtInf`` describes the ``Uri`` after it and
    an ``ExtXKey`` applies until the next one.
    """

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags = tuple(tags)

    @property
    def tags(self) -> tuple[Tag, ...]:
        return self._tags

    @property
    def segments(self) -> List[Segment]:
        segments = []
        extinf: Optional[ExtInf] = None
        for tag in self._tags:
            if isinstance(tag, ExtInf):
                extinf = tag
            elif isinstance(tag, Uri) and extinf is not None:
                segments.append(Segment(tag.uri, extinf.duration, extinf.title))
                extinf = None
        return segments

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Playlist":
        tags = []
        for lineno, line in enumerate(lines, start=1):
            if lineno == 1:
                line = line.removeprefix("\ufeff")
            line = line.strip()
            if not line:
                continue
            try:
                tag = parse_line(line)
            except ParseError as error:
                error.lineno = lineno
                raise
            if tag is not None:
                tags.append(tag)
        return cls(tags)

    @classmethod
    def loads(cls, text: str) -> "Playlist":
        # Universal newlines only, like load()
        return cls.from_lines(io.StringIO(text, newline=None))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Playlist":
        path = Path(path)
        with path.open(encoding="utf-8-sig") as m3u8:
            playlist = cls.from_lines(m3u8)
        _logger.info("Read %d tag(s) from %s", len(playlist), path)
        return playlist

    def validate(self) -> list[ValidationError]:
        return validate(self._tags)

    def dump(self, sink: IO[str]) -> None:
        for tag in self._tags:
            sink.write(f"{format_tag(tag)}\n")

    def dumps(self) -> str:
        return "".join(f"{format_tag(tag)}\n" for tag in self._tags)

    def write(self, path: Union[str, Path]) -> None:
        path = Path(path)
        with path.open(mode="w", encoding="utf-8", newline="\n") as m3u8:
            self.dump(m3u8)
        _logger.info("Wrote %d tag(s) to %s", len(self), path)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __getitem__(self, index: int) -> Tag:
        return self._tags[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playlist):
            return NotImplemented
        return self._tags == other._tags

    def __hash__(self) -> int:
        return hash(self._tags)

    def __repr__(self) -> str:
        return f"Playlist({list(self._tags)!r})"

    def __str__(self) -> str:
        return self.dumps()


load = Playlist.load
loads = Playlist.loads
