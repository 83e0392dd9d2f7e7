"""Tests for config module."""
import pytest

from src.config import DEFAULT_STOP_WORDS, Config, MatcherConfig, get_config


class TestConfig:
    def test_default_values(self):
        config = Config()
        assert config.matcher.stop_words == frozenset({"the", "and", "of"})
        assert config.dataset_path is None
        assert config.debug is False
        assert config.result_limit is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("H_DATASET", "/tmp/shortcuts.json")
        monkeypatch.setenv("H_LIMIT", "5")

        config = Config.from_env()
        assert str(config.dataset_path) == "/tmp/shortcuts.json"
        assert config.result_limit == 5

    def test_debug_from_env(self, monkeypatch):
        monkeypatch.setenv("H_DEBUG", "true")
        assert Config.from_env().debug is True

    def test_debug_requires_exact_true(self, monkeypatch):
        monkeypatch.setenv("H_DEBUG", "1")
        assert Config.from_env().debug is False

    def test_stop_words_from_env(self, monkeypatch):
        monkeypatch.setenv("H_STOP_WORDS", "To, A ,the")
        assert MatcherConfig.from_env().stop_words == frozenset({"to", "a", "the"})

    def test_empty_stop_words_from_env(self, monkeypatch):
        monkeypatch.setenv("H_STOP_WORDS", "")
        assert MatcherConfig.from_env().stop_words == frozenset()

    def test_stop_words_default(self):
        assert MatcherConfig.from_env().stop_words == DEFAULT_STOP_WORDS

    def test_get_config_is_cached(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("H_DEBUG", "true")
        assert get_config() is first

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_limit_below_one_rejected(self, monkeypatch, value):
        monkeypatch.setenv("H_LIMIT", value)
        with pytest.raises(ValueError):
            Config.from_env()
