"""Test class AppConfig and load_config."""
from pydantic import ValidationError
import pytest

from pocket_calculator.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Remove calculator variables inherited from the outer environment."""
    for name in AppConfig.model_fields:
        monkeypatch.delenv(f"POCKET_CALCULATOR_{name.upper()}", raising=False)


def test_defaults() -> None:
    """Without environment variables the defaults apply."""
    config = load_config()
    assert config == AppConfig()
    assert config.geometry == "360x600"
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch) -> None:
    """POCKET_CALCULATOR_* variables override the defaults."""
    monkeypatch.setenv("POCKET_CALCULATOR_WIDTH", "400")
    monkeypatch.setenv("POCKET_CALCULATOR_WINDOW_TITLE", "Calc")
    monkeypatch.setenv("POCKET_CALCULATOR_LOG_LEVEL", "debug")
    config = load_config()
    assert config.width == 400
    assert config.window_title == "Calc"
    assert config.log_level == "DEBUG"
    assert config.geometry == "400x600"


@pytest.mark.parametrize("name,value", [
    ("WIDTH", "abc"),
    ("WIDTH", "10"),
    ("DISPLAY_FONT_SIZE", "0"),
    ("LOG_LEVEL", "verbose"),
    ("WINDOW_TITLE", ""),
])
def test_invalid_environment(monkeypatch, name, value) -> None:
    """Invalid values raise a validation error."""
    monkeypatch.setenv(f"POCKET_CALCULATOR_{name}", value)
    with pytest.raises(ValidationError):
        load_config()


def test_config_is_frozen() -> None:
    """The configuration cannot change once loaded."""
    config = AppConfig()
    with pytest.raises(ValidationError):
        config.width = 500
