import pytest

from m3u8tags.builder import InvalidPlaylistError, PlaylistBuilder
from m3u8tags.playlist import Playlist
from m3u8tags.tags import (
    ExtInf,
    ExtM3U,
    ExtXDateRange,
    ExtXEndList,
    ExtXIFrameStreamInf,
    ExtXKey,
    ExtXMap,
    ExtXMedia,
    ExtXPart,
    ExtXPartInf,
    ExtXPlaylistType,
    ExtXPreloadHint,
    ExtXRenditionReport,
    ExtXServerControl,
    ExtXSkip,
    ExtXStreamInf,
    ExtXTargetDuration,
    ExtXVersion,
    Uri,
)
from m3u8tags.validation import (
    InvalidDateRangeDuration,
    InvalidDateRangeId,
    InvalidVersion,
    MissingExtM3U,
)


def test_playlist_builder():
    playlist = (
        PlaylistBuilder()
        .extm3u()
        .version(7)
        .target_duration(10)
        .extinf(5.005)
        .uri("https://media.example.com/first.ts")
        .segment("https://media.example.com/second.ts", 3.003, "second")
        .end_list()
        .build()
    )

    assert playlist == Playlist(
        [
            ExtM3U(),
            ExtXVersion(7),
            ExtXTargetDuration(10),
            ExtInf(5.005),
            Uri("https://media.example.com/first.ts"),
            ExtInf(3.003, "second"),
            Uri("https://media.example.com/second.ts"),
            ExtXEndList(),
        ]
    )


def test_playlist_builder_media_playlist_tags():
    playlist = (
        PlaylistBuilder()
        .extm3u()
        .playlist_type("vod")
        .key("AES-128", uri="https://priv.example.com/key.php?r=52")
        .map("init.mp4")
        .date_range("ad-1", "2024-01-01T00:00:00Z", duration=30.0)
        .build()
    )

    assert list(playlist)[1:] == [
        ExtXPlaylistType("VOD"),
        ExtXKey("AES-128", uri="https://priv.example.com/key.php?r=52"),
        ExtXMap("init.mp4"),
        ExtXDateRange("ad-1", "2024-01-01T00:00:00Z", duration=30.0),
    ]


def test_playlist_builder_multivariant_tags():
    playlist = (
        PlaylistBuilder()
        .extm3u()
        .media("AUDIO", "aac", name="English", default=True)
        .stream_inf(1280000, codecs="avc1.4d401f,mp4a.40.2", audio="aac")
        .uri("720p.m3u8")
        .i_frame_stream_inf(86000, "iframe.m3u8")
        .build()
    )

    assert list(playlist)[1:] == [
        ExtXMedia("AUDIO", "aac", name="English", default=True),
        ExtXStreamInf(1280000, codecs="avc1.4d401f,mp4a.40.2", audio="aac"),
        Uri("720p.m3u8"),
        ExtXIFrameStreamInf(86000, "iframe.m3u8"),
    ]


def test_playlist_builder_low_latency_tags():
    playlist = (
        PlaylistBuilder()
        .extm3u()
        .server_control(can_block_reload=True, part_hold_back=1.0)
        .part_inf(0.33334)
        .skip(3, duration=12.0)
        .part("filePart271.0.ts", duration=0.33334)
        .preload_hint("PART", "filePart273.4.mp4")
        .rendition_report("../1M/waitForMSN.php", last_msn=273)
        .build()
    )

    assert list(playlist)[1:] == [
        ExtXServerControl(can_block_reload=True, part_hold_back=1.0),
        ExtXPartInf(0.33334),
        ExtXSkip(3, duration=12.0),
        ExtXPart("filePart271.0.ts", duration=0.33334),
        ExtXPreloadHint("PART", "filePart273.4.mp4"),
        ExtXRenditionReport("../1M/waitForMSN.php", last_msn=273),
    ]


def test_playlist_builder_collects_every_error():
    builder = (
        PlaylistBuilder()
        .version(8)
        .date_range("", "2024-01-01T00:00:00Z", duration=-60.0)
    )

    with pytest.raises(InvalidPlaylistError) as excinfo:
        builder.build()

    assert excinfo.value.errors == [
        MissingExtM3U(),
        InvalidVersion(8),
        InvalidDateRangeId(),
        InvalidDateRangeDuration(-60.0),
    ]
    assert "Invalid version: 8" in str(excinfo.value)


def test_playlist_builder_does_not_validate_before_build():
    builder = PlaylistBuilder().version(99)

    assert builder.extm3u() is builder


def test_playlist_builder_build_is_a_snapshot():
    builder = PlaylistBuilder().extm3u()
    playlist = builder.build()
    builder.end_list()

    assert list(playlist) == [ExtM3U()]
