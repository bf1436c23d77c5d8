import pytest
from click.testing import CliRunner

SIMPLE_PLAYLIST = (
    "#EXTM3U\n"
    "#EXT-X-VERSION:3\n"
    "#EXT-X-TARGETDURATION:10\n"
    "#EXTINF:9.009,\n"
    "http://media.example.com/first.ts\n"
    "#EXT-X-ENDLIST\n"
)


@pytest.fixture
def m3u8(tmpdir):
    return tmpdir / "playlist.m3u8"


@pytest.fixture
def simple_playlist(m3u8):
    m3u8.write_text(SIMPLE_PLAYLIST, encoding="utf-8")
    return m3u8


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def simple_text():
    return SIMPLE_PLAYLIST
