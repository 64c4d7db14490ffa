import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

SAMPLE_INPUT = """\
[Stations]
0 1001 1002
1 1003
2 1004

[Charger Availability Reports]
1001 0 50000 true
1001 50000 100000 true
1002 50000 100000 true
1003 25000 75000 false
1004 0 50000 true
1004 100000 200000 true
"""


@pytest.fixture
def sample_text():
    return SAMPLE_INPUT


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input_1.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "STATION_UPTIME_SOURCE",
        "STATION_UPTIME_TIMEOUT",
        "STATION_UPTIME_FORMAT",
        "STATION_UPTIME_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
