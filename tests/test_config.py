import pytest

from station_uptime.config import Settings, load_settings


def test_load_settings_defaults():
    assert load_settings() == Settings(source=None, timeout=30, output_format="text", debug=False)


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("STATION_UPTIME_SOURCE", "https://example.org/input.txt")
    monkeypatch.setenv("STATION_UPTIME_TIMEOUT", "2.5")
    monkeypatch.setenv("STATION_UPTIME_FORMAT", "JSON")
    monkeypatch.setenv("STATION_UPTIME_DEBUG", "1")
    settings = load_settings()
    assert settings.source == "https://example.org/input.txt"
    assert settings.timeout == 2.5
    assert settings.output_format == "json"
    assert settings.debug is True


@pytest.mark.parametrize("value", ["0", "false", "No", "off"])
def test_load_settings_debug_false_values(monkeypatch, value):
    monkeypatch.setenv("STATION_UPTIME_DEBUG", value)
    assert load_settings().debug is False


@pytest.mark.parametrize(
    "name,value",
    [
        ("STATION_UPTIME_TIMEOUT", "soon"),
        ("STATION_UPTIME_TIMEOUT", "0"),
        ("STATION_UPTIME_FORMAT", "xml"),
    ],
)
def test_load_settings_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_settings()
