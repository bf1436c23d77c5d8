"""Fluent construction of playlists.

    playlist = (
        PlaylistBuilder()
        .extm3u()
        .version(3)
        .target_duration(10)
        .segment("https://example.org/0.ts", 9.009)
        .end_list()
        .build()
    )

Each call appends one tag. Nothing is checked until ``build()``.
"""

from typing import Any, Optional

from .playlist import Playlist
from .tags import (
    ExtInf,
    ExtM3U,
    ExtXBitrate,
    ExtXByteRange,
    ExtXDateRange,
    ExtXDefine,
    ExtXDiscontinuity,
    ExtXDiscontinuitySequence,
    ExtXEndList,
    ExtXGap,
    ExtXIFrameStreamInf,
    ExtXIFramesOnly,
    ExtXIndependentSegments,
    ExtXKey,
    ExtXMap,
    ExtXMedia,
    ExtXMediaSequence,
    ExtXPart,
    ExtXPartInf,
    ExtXPlaylistType,
    ExtXPreloadHint,
    ExtXProgramDateTime,
    ExtXRenditionReport,
    ExtXServerControl,
    ExtXSessionData,
    ExtXSessionKey,
    ExtXSkip,
    ExtXStart,
    ExtXStreamInf,
    ExtXTargetDuration,
    ExtXVersion,
    Tag,
    Uri,
)
from .validation import ValidationError


class InvalidPlaylistError(ValueError):
    def __init__(self, errors: list[ValidationError]) -> None:
        super().__init__("; ".join(map(str, errors)))
        self.errors = errors


class PlaylistBuilder:
    def __init__(self) -> None:
        self._tags: list[Tag] = []

    def tag(self, tag: Tag) -> "PlaylistBuilder":
        self._tags.append(tag)
        return self

    def build(self) -> Playlist:
        """Freeze the tags added so far and validate them.

        Raises ``InvalidPlaylistError`` carrying every violation found.
        """
        playlist = Playlist(self._tags)
        if errors := playlist.validate():
            raise InvalidPlaylistError(errors)
        return playlist

    # Media playlist

    def extm3u(self) -> "PlaylistBuilder":
        return self.tag(ExtM3U())

    def version(self, number: int) -> "PlaylistBuilder":
        return self.tag(ExtXVersion(number))

    def extinf(self, duration: float, title: Optional[str] = None) -> "PlaylistBuilder":
        return self.tag(ExtInf(duration, title))

    def uri(self, uri: str) -> "PlaylistBuilder":
        return self.tag(Uri(uri))

    def segment(
        self, uri: str, duration: float, title: Optional[str] = None
    ) -> "PlaylistBuilder":
        return self.extinf(duration, title).uri(uri)

    def target_duration(self, duration: int) -> "PlaylistBuilder":
        return self.tag(ExtXTargetDuration(duration))

    def media_sequence(self, number: int) -> "PlaylistBuilder":
        return self.tag(ExtXMediaSequence(number))

    def discontinuity_sequence(self, number: int) -> "PlaylistBuilder":
        return self.tag(ExtXDiscontinuitySequence(number))

    def end_list(self) -> "PlaylistBuilder":
        return self.tag(ExtXEndList())

    def playlist_type(self, playlist_type: str) -> "PlaylistBuilder":
        return self.tag(ExtXPlaylistType(playlist_type.upper()))

    def i_frames_only(self) -> "PlaylistBuilder":
        return self.tag(ExtXIFramesOnly())

    def independent_segments(self) -> "PlaylistBuilder":
        return self.tag(ExtXIndependentSegments())

    def start(
        self, time_offset: str, precise: Optional[bool] = None
    ) -> "PlaylistBuilder":
        return self.tag(ExtXStart(time_offset, precise))

    def define(self, definition: str) -> "PlaylistBuilder":
        return self.tag(ExtXDefine(definition))

    # Media segment

    def byterange(self, byterange: str) -> "PlaylistBuilder":
        return self.tag(ExtXByteRange(byterange))

    def discontinuity(self) -> "PlaylistBuilder":
        return self.tag(ExtXDiscontinuity())

    def gap(self) -> "PlaylistBuilder":
        return self.tag(ExtXGap())

    def bitrate(self, bitrate: int) -> "PlaylistBuilder":
        return self.tag(ExtXBitrate(bitrate))

    def key(
        self,
        method: str,
        uri: Optional[str] = None,
        iv: Optional[str] = None,
        keyformat: Optional[str] = None,
        keyformatversions: Optional[str] = None,
    ) -> "PlaylistBuilder":
        return self.tag(ExtXKey(method, uri, iv, keyformat, keyformatversions))

    def map(self, uri: str, byterange: Optional[str] = None) -> "PlaylistBuilder":
        return self.tag(ExtXMap(uri, byterange))

    def program_date_time(self, date_time: str) -> "PlaylistBuilder":
        return self.tag(ExtXProgramDateTime(date_time))

    def date_range(
        self, id: str, start_date: str, **attributes: Any
    ) -> "PlaylistBuilder":
        return self.tag(ExtXDateRange(id, start_date, **attributes))

    # Multivariant playlist

    def media(self, type: str, group_id: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXMedia(type, group_id, **attributes))

    def stream_inf(self, bandwidth: int, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXStreamInf(bandwidth, **attributes))

    def i_frame_stream_inf(
        self, bandwidth: int, uri: str, **attributes: Any
    ) -> "PlaylistBuilder":
        return self.tag(ExtXIFrameStreamInf(bandwidth, uri, **attributes))

    def session_data(self, data_id: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXSessionData(data_id, **attributes))

    def session_key(self, method: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXSessionKey(method, **attributes))

    # Low-latency

    def server_control(self, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXServerControl(**attributes))

    def part_inf(self, part_target: float) -> "PlaylistBuilder":
        return self.tag(ExtXPartInf(part_target))

    def part(self, uri: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXPart(uri, **attributes))

    def preload_hint(self, type: str, uri: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXPreloadHint(type, uri, **attributes))

    def skip(self, skipped_segments: int, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXSkip(skipped_segments, **attributes))

    def rendition_report(self, uri: str, **attributes: Any) -> "PlaylistBuilder":
        return self.tag(ExtXRenditionReport(uri, **attributes))
