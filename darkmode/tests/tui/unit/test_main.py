"""Unit tests for the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from textual.logging import TextualHandler

from darkmode.main import build_parser, configure_logging


class TestBuildParser:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.config_dir is None
        assert args.system_theme == "dark"
        assert args.log_level == "WARNING"
        assert args.log_file is None

    def test_options(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            [
                "--config-dir",
                str(tmp_path),
                "--system-theme",
                "light",
                "--log-level",
                "debug",
            ]
        )
        assert args.config_dir == tmp_path
        assert args.system_theme == "light"
        assert args.log_level == "DEBUG"

    def test_rejects_unknown_theme(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--system-theme", "sepia"])


class TestConfigureLogging:
    """Test logging setup."""

    @pytest.fixture
    def basic_config_calls(self, monkeypatch: pytest.MonkeyPatch) -> list[dict]:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_file_handler(self, tmp_path: Path, basic_config_calls: list[dict]) -> None:
        log_file = tmp_path / "logs" / "darkmode.log"
        configure_logging("INFO", log_file)
        [call] = basic_config_calls
        [handler] = call["handlers"]
        try:
            assert call["level"] == "INFO"
            assert isinstance(handler, logging.FileHandler)
            assert Path(handler.baseFilename) == log_file.absolute()
            assert log_file.parent.is_dir()
        finally:
            handler.close()

    def test_textual_handler_by_default(self, basic_config_calls: list[dict]) -> None:
        configure_logging("DEBUG")
        [call] = basic_config_calls
        [handler] = call["handlers"]
        assert isinstance(handler, TextualHandler)
        assert call["force"] is True
