"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from ali_respeaker.config import load_api_address, load_render_options, parse_log_level
from ali_respeaker.core.ir import RenderOptions


class TestLoadRenderOptions:

    def test_defaults(self):
        assert load_render_options() == RenderOptions("hyphen", "en", False)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ALI_DEFAULT_SEPARATOR", "middot")
        monkeypatch.setenv("ALI_DEFAULT_LOCALE", "AR")
        monkeypatch.setenv("ALI_SHOW_SILENT", "yes")
        assert load_render_options() == RenderOptions("middot", "ar", True)

    def test_unknown_separator(self, monkeypatch):
        monkeypatch.setenv("ALI_DEFAULT_SEPARATOR", "dash")
        with pytest.raises(ValueError, match="Unknown separator 'dash'"):
            load_render_options()

    def test_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("ALI_SHOW_SILENT", "maybe")
        with pytest.raises(ValueError, match="ALI_SHOW_SILENT"):
            load_render_options()


class TestApiAddress:

    def test_defaults(self):
        assert load_api_address() == ("127.0.0.1", 8000)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ALI_API_HOST", "0.0.0.0")
        monkeypatch.setenv("ALI_API_PORT", "9001")
        assert load_api_address() == ("0.0.0.0", 9001)

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_bad_port(self, monkeypatch, port):
        monkeypatch.setenv("ALI_API_PORT", port)
        with pytest.raises(ValueError, match="ALI_API_PORT"):
            load_api_address()


class TestLogLevel:

    def test_default_warning(self):
        assert parse_log_level() == logging.WARNING

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ALI_LOG_LEVEL", "debug")
        assert parse_log_level() == logging.DEBUG

    def test_explicit_name(self):
        assert parse_log_level("Info") == logging.INFO

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown log level 'loud'"):
            parse_log_level("loud")
