from dataclasses import dataclass
from typing import ClassVar, NamedTuple, Optional

# See rfc8216 and https://developer.apple.com/documentation/http_live_streaming

# Attribute value kinds, rfc8216 section 4.2
QUOTED = "quoted-string"
ENUMERATED = "enumerated-string"
INTEGER = "decimal-integer"
DECIMAL = "decimal-floating-point"
BOOLEAN = "yes-no"
CLOSED_CAPTIONS = "quoted-string-or-none"


class Attribute(NamedTuple):
    key: str
    field: str
    kind: str
    required: bool = False


class Tag:
    """One line of a playlist.

    Subclasses are frozen dataclasses. ``directive`` is the name after the
    leading ``#`` and ``attributes`` lists, in output order, the attribute
    list of tags that carry one.
    """

    directive: ClassVar[str] = ""
    attributes: ClassVar[tuple[Attribute, ...]] = ()

    def __str__(self) -> str:
        # serializer imports this module for the tag classes
        from .serializer import format_tag

        return format_tag(self)


# Bare directives


@dataclass(frozen=True)
class ExtM3U(Tag):
    directive = "EXTM3U"


@dataclass(frozen=True)
class ExtXEndList(Tag):
    directive = "EXT-X-ENDLIST"


@dataclass(frozen=True)
class ExtXDiscontinuity(Tag):
    directive = "EXT-X-DISCONTINUITY"


@dataclass(frozen=True)
class ExtXGap(Tag):
    directive = "EXT-X-GAP"


@dataclass(frozen=True)
class ExtXIndependentSegments(Tag):
    directive = "EXT-X-INDEPENDENT-SEGMENTS"


@dataclass(frozen=True)
class ExtXIFramesOnly(Tag):
    directive = "EXT-X-I-FRAMES-ONLY"


# Directives with a single value


@dataclass(frozen=True)
class ExtXVersion(Tag):
    directive = "EXT-X-VERSION"
    number: int


@dataclass(frozen=True)
class ExtInf(Tag):
    directive = "EXTINF"
    duration: float
    title: Optional[str] = None


@dataclass(frozen=True)
class ExtXTargetDuration(Tag):
    directive = "EXT-X-TARGETDURATION"
    duration: int


@dataclass(frozen=True)
class ExtXMediaSequence(Tag):
    directive = "EXT-X-MEDIA-SEQUENCE"
    number: int


@dataclass(frozen=True)
class ExtXDiscontinuitySequence(Tag):
    directive = "EXT-X-DISCONTINUITY-SEQUENCE"
    number: int


@dataclass(frozen=True)
class ExtXProgramDateTime(Tag):
    directive = "EXT-X-PROGRAM-DATE-TIME"
    date_time: str


@dataclass(frozen=True)
class ExtXByteRange(Tag):
    directive = "EXT-X-BYTERANGE"
    byterange: str


@dataclass(frozen=True)
class ExtXBitrate(Tag):
    directive = "EXT-X-BITRATE"
    bitrate: int


@dataclass(frozen=True)
class ExtXPlaylistType(Tag):
    directive = "EXT-X-PLAYLIST-TYPE"
    playlist_type: str


@dataclass(frozen=True)
class ExtXDefine(Tag):
    directive = "EXT-X-DEFINE"
    definition: str


@dataclass(frozen=True)
class Uri(Tag):
    """A media segment or variant playlist URI, i.e. any line without ``#``."""

    uri: str


# Directives with an attribute list

_KEY_ATTRIBUTES = (
    Attribute("METHOD", "method", ENUMERATED, required=True),
    Attribute("URI", "uri", QUOTED),
    Attribute("IV", "iv", ENUMERATED),
    Attribute("KEYFORMAT", "keyformat", QUOTED),
    Attribute("KEYFORMATVERSIONS", "keyformatversions", QUOTED),
)


@dataclass(frozen=True)
class ExtXKey(Tag):
    directive = "EXT-X-KEY"
    attributes = _KEY_ATTRIBUTES
    method: str
    uri: Optional[str] = None
    iv: Optional[str] = None
    keyformat: Optional[str] = None
    keyformatversions: Optional[str] = None


@dataclass(frozen=True)
class ExtXSessionKey(Tag):
    directive = "EXT-X-SESSION-KEY"
    attributes = _KEY_ATTRIBUTES
    method: str
    uri: Optional[str] = None
    iv: Optional[str] = None
    keyformat: Optional[str] = None
    keyformatversions: Optional[str] = None


@dataclass(frozen=True)
class ExtXMap(Tag):
    directive = "EXT-X-MAP"
    attributes = (
        Attribute("URI", "uri", QUOTED, required=True),
        Attribute("BYTERANGE", "byterange", QUOTED),
    )
    uri: str
    byterange: Optional[str] = None


@dataclass(frozen=True)
class ExtXDateRange(Tag):
    directive = "EXT-X-DATERANGE"
    attributes = (
        Attribute("ID", "id", QUOTED, required=True),
        Attribute("CLASS", "class_name", QUOTED),
        Attribute("START-DATE", "start_date", QUOTED, required=True),
        Attribute("END-DATE", "end_date", QUOTED),
        Attribute("DURATION", "duration", DECIMAL),
        Attribute("PLANNED-DURATION", "planned_duration", DECIMAL),
        Attribute("SCTE35-CMD", "scte35_cmd", ENUMERATED),
        Attribute("SCTE35-OUT", "scte35_out", ENUMERATED),
        Attribute("SCTE35-IN", "scte35_in", ENUMERATED),
        Attribute("END-ON-NEXT", "end_on_next", BOOLEAN),
    )
    id: str
    start_date: str
    class_name: Optional[str] = None
    end_date: Optional[str] = None
    duration: Optional[float] = None
    planned_duration: Optional[float] = None
    scte35_cmd: Optional[str] = None
    scte35_out: Optional[str] = None
    scte35_in: Optional[str] = None
    end_on_next: Optional[bool] = None


@dataclass(frozen=True)
class ExtXStart(Tag):
    directive = "EXT-X-START"
    attributes = (
        # Kept verbatim, the validator only checks it is not empty.
        Attribute("TIME-OFFSET", "time_offset", ENUMERATED, required=True),
        Attribute("PRECISE", "precise", BOOLEAN),
    )
    time_offset: str
    precise: Optional[bool] = None


@dataclass(frozen=True)
class ExtXMedia(Tag):
    directive = "EXT-X-MEDIA"
    attributes = (
        Attribute("TYPE", "type", ENUMERATED, required=True),
        Attribute("URI", "uri", QUOTED),
        Attribute("GROUP-ID", "group_id", QUOTED, required=True),
        Attribute("LANGUAGE", "language", QUOTED),
        Attribute("ASSOC-LANGUAGE", "assoc_language", QUOTED),
        Attribute("NAME", "name", QUOTED),
        Attribute("DEFAULT", "default", BOOLEAN),
        Attribute("AUTOSELECT", "autoselect", BOOLEAN),
        Attribute("FORCED", "forced", BOOLEAN),
        Attribute("INSTREAM-ID", "instream_id", QUOTED),
        Attribute("CHARACTERISTICS", "characteristics", QUOTED),
        Attribute("CHANNELS", "channels", QUOTED),
    )
    type: str
    group_id: str
    uri: Optional[str] = None
    language: Optional[str] = None
    assoc_language: Optional[str] = None
    name: Optional[str] = None
    default: Optional[bool] = None
    autoselect: Optional[bool] = None
    forced: Optional[bool] = None
    instream_id: Optional[str] = None
    characteristics: Optional[str] = None
    channels: Optional[str] = None


@dataclass(frozen=True)
class ExtXStreamInf(Tag):
    """A variant stream; the following ``Uri`` is its media playlist."""

    directive = "EXT-X-STREAM-INF"
    attributes = (
        Attribute("BANDWIDTH", "bandwidth", INTEGER, required=True),
        Attribute("AVERAGE-BANDWIDTH", "average_bandwidth", INTEGER),
        Attribute("CODECS", "codecs", QUOTED),
        Attribute("RESOLUTION", "resolution", ENUMERATED),
        Attribute("FRAME-RATE", "frame_rate", DECIMAL),
        Attribute("HDCP-LEVEL", "hdcp_level", ENUMERATED),
        Attribute("AUDIO", "audio", QUOTED),
        Attribute("VIDEO", "video", QUOTED),
        Attribute("SUBTITLES", "subtitles", QUOTED),
        Attribute("CLOSED-CAPTIONS", "closed_captions", CLOSED_CAPTIONS),
    )
    bandwidth: int
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[str] = None
    frame_rate: Optional[float] = None
    hdcp_level: Optional[str] = None
    audio: Optional[str] = None
    video: Optional[str] = None
    subtitles: Optional[str] = None
    closed_captions: Optional[str] = None


@dataclass(frozen=True)
class ExtXIFrameStreamInf(Tag):
    directive = "EXT-X-I-FRAME-STREAM-INF"
    attributes = (
        Attribute("BANDWIDTH", "bandwidth", INTEGER, required=True),
        Attribute("AVERAGE-BANDWIDTH", "average_bandwidth", INTEGER),
        Attribute("CODECS", "codecs", QUOTED),
        Attribute("RESOLUTION", "resolution", ENUMERATED),
        Attribute("HDCP-LEVEL", "hdcp_level", ENUMERATED),
        Attribute("VIDEO", "video", QUOTED),
        Attribute("URI", "uri", QUOTED, required=True),
    )
    bandwidth: int
    uri: str
    average_bandwidth: Optional[int] = None
    codecs: Optional[str] = None
    resolution: Optional[str] = None
    hdcp_level: Optional[str] = None
    video: Optional[str] = None


@dataclass(frozen=True)
class ExtXSessionData(Tag):
    directive = "EXT-X-SESSION-DATA"
    attributes = (
        Attribute("DATA-ID", "data_id", QUOTED, required=True),
        Attribute("VALUE", "value", QUOTED),
        Attribute("URI", "uri", QUOTED),
        Attribute("LANGUAGE", "language", QUOTED),
    )
    data_id: str
    value: Optional[str] = None
    uri: Optional[str] = None
    language: Optional[str] = None


@dataclass(frozen=True)
class ExtXServerControl(Tag):
    directive = "EXT-X-SERVER-CONTROL"
    attributes = (
        Attribute("CAN-SKIP-UNTIL", "can_skip_until", DECIMAL),
        Attribute("CAN-SKIP-DATERANGES", "can_skip_dateranges", BOOLEAN),
        Attribute("HOLD-BACK", "hold_back", DECIMAL),
        Attribute("PART-HOLD-BACK", "part_hold_back", DECIMAL),
        Attribute("CAN-BLOCK-RELOAD", "can_block_reload", BOOLEAN),
    )
    can_skip_until: Optional[float] = None
    can_skip_dateranges: Optional[bool] = None
    hold_back: Optional[float] = None
    part_hold_back: Optional[float] = None
    can_block_reload: Optional[bool] = None


@dataclass(frozen=True)
class ExtXPartInf(Tag):
    directive = "EXT-X-PART-INF"
    attributes = (Attribute("PART-TARGET", "part_target", DECIMAL, required=True),)
    part_target: float


@dataclass(frozen=True)
class ExtXPart(Tag):
    directive = "EXT-X-PART"
    attributes = (
        Attribute("URI", "uri", QUOTED, required=True),
        Attribute("DURATION", "duration", DECIMAL),
        Attribute("INDEPENDENT", "independent", BOOLEAN),
        Attribute("BYTERANGE", "byterange", QUOTED),
        Attribute("GAP", "gap", BOOLEAN),
    )
    uri: str
    duration: Optional[float] = None
    independent: Optional[bool] = None
    byterange: Optional[str] = None
    gap: Optional[bool] = None


@dataclass(frozen=True)
class ExtXPreloadHint(Tag):
    directive = "EXT-X-PRELOAD-HINT"
    attributes = (
        Attribute("TYPE", "type", ENUMERATED, required=True),
        Attribute("URI", "uri", QUOTED, required=True),
        Attribute("BYTERANGE-START", "byterange_start", INTEGER),
        Attribute("BYTERANGE-LENGTH", "byterange_length", INTEGER),
    )
    type: str
    uri: str
    byterange_start: Optional[int] = None
    byterange_length: Optional[int] = None


@dataclass(frozen=True)
class ExtXSkip(Tag):
    directive = "EXT-X-SKIP"
    attributes = (
        Attribute("SKIPPED-SEGMENTS", "skipped_segments", INTEGER, required=True),
        Attribute("DURATION", "duration", DECIMAL),
        Attribute(
            "RECENTLY-REMOVED-DATERANGES", "recently_removed_dateranges", QUOTED
        ),
    )
    skipped_segments: int
    duration: Optional[float] = None
    recently_removed_dateranges: Optional[str] = None


@dataclass(frozen=True)
class ExtXRenditionReport(Tag):
    directive = "EXT-X-RENDITION-REPORT"
    attributes = (
        Attribute("URI", "uri", QUOTED, required=True),
        Attribute("LAST-MSN", "last_msn", INTEGER),
        Attribute("LAST-PART", "last_part", INTEGER),
    )
    uri: str
    last_msn: Optional[int] = None
    last_part: Optional[int] = None


BARE_TAGS: tuple[type[Tag], ...] = (
    ExtM3U,
    ExtXEndList,
    ExtXDiscontinuity,
    ExtXGap,
    ExtXIndependentSegments,
    ExtXIFramesOnly,
)

ATTRIBUTE_TAGS: tuple[type[Tag], ...] = (
    ExtXKey,
    ExtXSessionKey,
    ExtXMap,
    ExtXDateRange,
    ExtXStart,
    ExtXMedia,
    ExtXStreamInf,
    ExtXIFrameStreamInf,
    ExtXSessionData,
    ExtXServerControl,
    ExtXPartInf,
    ExtXPart,
    ExtXPreloadHint,
    ExtXSkip,
    ExtXRenditionReport,
)

SCALAR_TAGS: tuple[type[Tag], ...] = (
    ExtXVersion,
    ExtInf,
    ExtXTargetDuration,
    ExtXMediaSequence,
    ExtXDiscontinuitySequence,
    ExtXProgramDateTime,
    ExtXByteRange,
    ExtXBitrate,
    ExtXPlaylistType,
    ExtXDefine,
)

ALL_TAGS: tuple[type[Tag], ...] = BARE_TAGS + SCALAR_TAGS + ATTRIBUTE_TAGS + (Uri,)
