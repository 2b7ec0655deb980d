"""Tests for environment validation and bot name configuration."""

import pytest

from nobot.config import BotNames, get_bot_names, get_mongo_db_name, validate_environment_variables

REQUIRED = {
    "SLACK_BOT_TOKEN": "xoxb-test",
    "SLACK_SIGNING_SECRET": "secret",
    "MONGO_URL": "mongodb://localhost:27017",
}


def test_validate_passes_with_required_vars(monkeypatch):
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    validate_environment_variables()


@pytest.mark.parametrize("missing", sorted(REQUIRED))
def test_validate_exits_when_var_missing(monkeypatch, capsys, missing):
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv(missing, "   ")

    with pytest.raises(SystemExit) as exc:
        validate_environment_variables()

    assert exc.value.code == 1
    assert missing in capsys.readouterr().err


def test_default_bot_names(monkeypatch):
    monkeypatch.delenv("BOT_NAME", raising=False)
    monkeypatch.delenv("BOT_ALIASES", raising=False)
    names = get_bot_names()
    assert names.primary == "nobot"
    assert names.all == ("nobot", "awesomebot", "bot")


def test_bot_names_from_env(monkeypatch):
    monkeypatch.setenv("BOT_NAME", " Zed ")
    monkeypatch.setenv("BOT_ALIASES", "zeddy, ,ZBot,zed")
    names = get_bot_names()
    assert names.primary == "zed"
    assert names.all == ("zed", "zeddy", "zbot")


def test_empty_aliases_mean_no_aliases(monkeypatch):
    monkeypatch.setenv("BOT_ALIASES", "")
    assert get_bot_names().aliases == ()


def test_bot_names_all_deduplicates():
    assert BotNames("nobot", ("bot", "nobot", "")).all == ("nobot", "bot")


def test_mongo_db_name(monkeypatch):
    monkeypatch.delenv("MONGO_DB_NAME", raising=False)
    assert get_mongo_db_name() == "nobot"
    monkeypatch.setenv("MONGO_DB_NAME", "agendas_test")
    assert get_mongo_db_name() == "agendas_test"
