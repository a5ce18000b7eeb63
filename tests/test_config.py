import pytest

from storage_calculator.config import ConfigError, Settings, get_settings

ENV_VARS = (
    "CONTAINER_WIDTH_IN",
    "CONTAINER_DEPTH_IN",
    "CONTAINER_HEIGHT_IN",
    "FILL_FACTOR",
    "ITEM_GAP_IN",
    "CATALOG_FILE",
    "LOG_DIR",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings == Settings()
    assert settings.container.cubic_feet == pytest.approx(257.07, abs=0.01)


def test_overrides(monkeypatch):
    monkeypatch.setenv("CONTAINER_WIDTH_IN", "96")
    monkeypatch.setenv("CONTAINER_DEPTH_IN", "72")
    monkeypatch.setenv("CONTAINER_HEIGHT_IN", "96")
    monkeypatch.setenv("FILL_FACTOR", "0.9")
    monkeypatch.setenv("ITEM_GAP_IN", "1")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.container.cubic_feet == pytest.approx(384)
    assert settings.fill_factor == 0.9
    assert settings.item_gap == 1
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("FILL_FACTOR", "1"),
        ("FILL_FACTOR", "abc"),
        ("ITEM_GAP_IN", "-2"),
        ("CONTAINER_WIDTH_IN", "0"),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=name.split("_")[0]):
        get_settings()
