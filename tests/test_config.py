import pytest

from hilo.game.models import GameOptions
from hilo.utils import config
from hilo.utils.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for variable in (
        "HILO_MAX_NUMBER_OF_PLAYERS",
        "HILO_MAX_NUMBER_OF_RANGE",
        "HILO_FINISH_GAME_WITH_INVALID_INPUT",
        "ENVIRONMENT",
        "LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(variable, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.max_number_of_players == 4
    assert settings.max_number_of_range == 1000
    assert settings.finish_game_with_invalid_input is False
    assert settings.game_options() == GameOptions(4, 1000)


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("HILO_MAX_NUMBER_OF_PLAYERS", "6  # six players")
    monkeypatch.setenv("HILO_MAX_NUMBER_OF_RANGE", "50")
    monkeypatch.setenv("HILO_FINISH_GAME_WITH_INVALID_INPUT", "True")

    settings = Settings()

    assert settings.max_number_of_players == 6
    assert settings.max_number_of_range == 50
    assert settings.finish_game_with_invalid_input is True


@pytest.mark.parametrize("value", ["abc", "0", "-2"])
def test_invalid_limits_raise(monkeypatch, value):
    monkeypatch.setenv("HILO_MAX_NUMBER_OF_RANGE", value)

    with pytest.raises(ValueError, match="HILO_MAX_NUMBER_OF_RANGE"):
        Settings()


def test_settings_are_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("environment,development,production", [
    ("development", True, False),
    ("local", True, False),
    ("prod", False, True),
])
def test_environment_helpers(monkeypatch, environment, development, production):
    monkeypatch.setenv("ENVIRONMENT", environment)

    assert config.is_development() is development
    assert config.is_production() is production
