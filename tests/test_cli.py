import logging
from unittest.mock import patch

import pytest

import m3u8tags
from m3u8tags.cli import main


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert str(m3u8tags.__version__) in result.output


def test_validate(runner, simple_playlist):
    result = runner.invoke(main, ["validate", str(simple_playlist)])

    assert result.exit_code == 0
    assert result.stdout == "OK\n"


def test_validate_invalid_playlist(runner, m3u8):
    m3u8.write_text("#EXT-X-VERSION:8\n#EXTINF:0,\na.ts\n", encoding="utf-8")

    result = runner.invoke(main, ["validate", str(m3u8)])

    assert result.exit_code == 1
    assert "Playlist does not start with #EXTM3U" in result.output
    assert "Invalid version: 8" in result.output
    assert "Invalid segment duration: 0.0" in result.output
    assert "3 validation error(s)" in result.output


def test_validate_parse_error(runner, m3u8):
    m3u8.write_text('#EXTM3U\n#EXT-X-MAP:BYTERANGE="1@0"\n', encoding="utf-8")

    result = runner.invoke(main, ["validate", str(m3u8)])

    assert result.exit_code == 1
    assert "Parse failed: line 2: Missing URI attribute" in result.output


def test_validate_missing_file(runner, tmpdir):
    result = runner.invoke(main, ["validate", str(tmpdir / "missing.m3u8")])

    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_format(runner, m3u8):
    m3u8.write_text(
        "#EXTM3U\r\n"
        "# comment\r\n"
        "#EXT-X-KEY:URI=\"https://x/key\", METHOD=AES-128\r\n"
        "#EXTINF:10.000,  Title\r\n"
        "a.ts\r\n",
        encoding="utf-8",
    )

    result = runner.invoke(main, ["format", str(m3u8)])

    assert result.exit_code == 0
    assert result.stdout == (
        "#EXTM3U\n"
        '#EXT-X-KEY:METHOD=AES-128,URI="https://x/key"\n'
        "#EXTINF:10,Title\n"
        "a.ts\n"
    )


def test_format_to_file(runner, simple_playlist, simple_text, tmpdir):
    output = tmpdir / "out.m3u8"

    result = runner.invoke(main, ["format", str(simple_playlist), "-o", str(output)])

    assert result.exit_code == 0
    assert not result.output
    assert output.read() == simple_text


@pytest.mark.parametrize("check, exit_code", [("--validate", 1), ("--no-validate", 0)])
def test_format_invalid_playlist(runner, m3u8, check, exit_code):
    m3u8.write_text("#EXT-X-VERSION:8\n", encoding="utf-8")

    result = runner.invoke(main, ["format", check, str(m3u8)])

    assert result.exit_code == exit_code
    if exit_code:
        assert "Invalid version: 8" in result.output
    else:
        assert result.stdout == "#EXT-X-VERSION:8\n"


def test_tags(runner, simple_playlist):
    result = runner.invoke(main, ["tags", str(simple_playlist)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 6
    assert lines[0].split() == ["ExtM3U", "#EXTM3U"]
    assert lines[3].split() == ["ExtInf", "#EXTINF:9.009,"]


def test_verbose(runner, simple_playlist):
    logger = logging.getLogger("m3u8tags")
    level = logger.level
    try:
        with patch.object(logger, "setLevel") as set_level:
            result = runner.invoke(
                main, ["--verbose", "validate", str(simple_playlist)]
            )
    finally:
        logger.setLevel(level)

    assert result.exit_code == 0
    set_level.assert_called_once_with(logging.DEBUG)
