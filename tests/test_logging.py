import os
import subprocess
import sys

import pytest

IMPORT = "import logging, m3u8tags; print(logging.getLogger('m3u8tags').level)"


@pytest.mark.parametrize(
    "value, level",
    [("debug", "10"), ("INFO", "20"), ("verbose", "30"), ("", "30")],
)
def test_log_level_from_environment(value, level):
    env = dict(os.environ, M3U8TAGS_LOG_LEVEL=value)

    result = subprocess.run(
        [sys.executable, "-c", IMPORT],
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == level
