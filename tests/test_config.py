"""Tests for parser configuration."""

import logging

from modstatus.config import ParserConfig


class TestParserConfig:
    def test_defaults(self):
        config = ParserConfig.from_env()
        assert config.html_parser == "lxml"
        assert config.strict_headers is False
        assert config.log_level == "WARNING"
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MODSTATUS_HTML_PARSER", "html.parser")
        monkeypatch.setenv("MODSTATUS_STRICT_HEADERS", "TRUE")
        monkeypatch.setenv("MODSTATUS_LOG_LEVEL", "debug")
        config = ParserConfig.from_env()
        assert config.html_parser == "html.parser"
        assert config.strict_headers is True
        assert config.log_level_number == logging.DEBUG

    def test_strict_only_for_true(self, monkeypatch):
        monkeypatch.setenv("MODSTATUS_STRICT_HEADERS", "yes")
        assert ParserConfig.from_env().strict_headers is False

    def test_invalid_log_level(self):
        config = ParserConfig(log_level="LOUD")
        assert len(config.validate()) == 1
        assert config.log_level_number == logging.WARNING

    def test_empty_parser(self):
        problems = ParserConfig(html_parser="").validate()
        assert problems == ["html_parser (MODSTATUS_HTML_PARSER) is empty"]
