"""Tests for ollacommit.config and ollacommit.options modules."""

import pytest
from pydantic import ValidationError

from ollacommit import config
from ollacommit.global_config import GlobalConfigError
from ollacommit.options import RunOptions, resolve_options

ACTIVE_NAMES = (
    "ACTIVE_URL",
    "ACTIVE_MODEL",
    "ACTIVE_LANGUAGE",
    "ACTIVE_TEMPLATE",
    "ACTIVE_EMOJI",
    "MAX_TOKENS",
    "TOP_P",
    "TEMPERATURE",
    "REPETITION_PENALTY",
)


@pytest.fixture(autouse=True)
def restore_active_config():
    """load_config mutates module globals; put them back after each test."""
    saved = {name: getattr(config, name) for name in ACTIVE_NAMES}
    yield
    for name, value in saved.items():
        setattr(config, name, value)


@pytest.fixture
def global_values(mocker):
    """Patch the values read from ~/.ollacommit/config.yaml."""
    def _set(values):
        mocker.patch("ollacommit.global_config.load_global_config", return_value=values)
    return _set


class TestDefaults:
    """Tests for built-in defaults."""

    def test_default_url(self):
        assert config.DEFAULT_URL == "http://localhost:11434/api/generate"

    def test_default_limits(self):
        assert config.DEFAULT_MAX_TOKENS == 2048
        assert config.DEFAULT_TOP_P == 1
        assert config.DEFAULT_TEMPERATURE == 1
        assert config.DEFAULT_REPETITION_PENALTY == 1

    def test_emoji_on_by_default(self):
        assert config.DEFAULT_EMOJI is True


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_file_keeps_defaults(self, global_values, monkeypatch):
        monkeypatch.delenv(config.URL_ENV_VAR, raising=False)
        global_values({})

        config.load_config()

        assert config.ACTIVE_MODEL == config.DEFAULT_MODEL
        assert config.ACTIVE_URL == config.DEFAULT_URL
        assert config.MAX_TOKENS == config.DEFAULT_MAX_TOKENS

    def test_file_values_applied(self, global_values, monkeypatch):
        monkeypatch.delenv(config.URL_ENV_VAR, raising=False)
        global_values({
            "model": "llama3.2:3b",
            "language": "german",
            "emoji": False,
            "max_tokens": 4096,
            "url": "http://box:11434/api/generate",
        })

        config.load_config()

        assert config.ACTIVE_MODEL == "llama3.2:3b"
        assert config.ACTIVE_LANGUAGE == "german"
        assert config.ACTIVE_EMOJI is False
        assert config.MAX_TOKENS == 4096
        assert config.ACTIVE_URL == "http://box:11434/api/generate"

    def test_env_url_wins(self, global_values, monkeypatch):
        monkeypatch.setenv(config.URL_ENV_VAR, "http://env:11434/api/generate")
        global_values({"url": "http://file:11434/api/generate"})

        config.load_config()

        assert config.ACTIVE_URL == "http://env:11434/api/generate"

    def test_non_integer_limit_raises(self, global_values):
        global_values({"max_tokens": "lots"})

        with pytest.raises(GlobalConfigError) as exc_info:
            config.load_config()

        assert "max_tokens" in str(exc_info.value)

    def test_quoted_boolean_emoji_raises(self, global_values):
        global_values({"emoji": "false"})

        with pytest.raises(GlobalConfigError) as exc_info:
            config.load_config()

        assert "emoji" in str(exc_info.value)

    def test_invalid_value_keeps_previous_settings(self, global_values):
        before = config.MAX_TOKENS
        global_values({"max_tokens": 4096, "top_p": "high"})

        with pytest.raises(GlobalConfigError):
            config.load_config()

        assert config.MAX_TOKENS == before

    def test_unknown_keys_ignored(self, global_values, monkeypatch):
        monkeypatch.delenv(config.URL_ENV_VAR, raising=False)
        global_values({"provider": "openai", "model": "llama3.2:3b"})

        config.load_config()

        assert config.ACTIVE_MODEL == "llama3.2:3b"


class TestRunOptions:
    """Tests for RunOptions and resolve_options."""

    def test_is_frozen(self):
        options = RunOptions()

        with pytest.raises(ValidationError):
            options.model = "other"

    def test_blank_commit_type_is_unset(self):
        assert RunOptions(commit_type="  ").commit_type is None
        assert RunOptions(filter_files="").filter_files is None

    def test_resolve_uses_active_config(self, mocker):
        mocker.patch.object(config, "ACTIVE_MODEL", "from-config")
        mocker.patch.object(config, "ACTIVE_EMOJI", False)

        options = resolve_options()

        assert options.model == "from-config"
        assert options.emoji is False

    def test_cli_overrides_win(self, mocker):
        mocker.patch.object(config, "ACTIVE_MODEL", "from-config")

        options = resolve_options(model="from-cli", emoji=True, list_mode=True)

        assert options.model == "from-cli"
        assert options.emoji is True
        assert options.list_mode is True

    def test_none_overrides_ignored(self):
        options = resolve_options(max_tokens=None, commit_type=None)

        assert options.max_tokens == config.MAX_TOKENS
        assert options.commit_type is None
