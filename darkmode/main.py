"""Command-line entry point for the Dark Mode TUI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from textual.logging import TextualHandler

from darkmode.app import DarkModeApp
from darkmode.constants.defaults import (
    CONFIG_DIR_ENV_VAR,
    LOG_LEVEL_DEFAULT,
    SYSTEM_THEME_DEFAULT,
)
from darkmode.constants.enums import ThemeMode

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="darkmode",
        description="Toggle and persist a dark/light display preference.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help=f"Directory holding settings.json (default: ${CONFIG_DIR_ENV_VAR} or ~/.config/darkmode)",
    )
    parser.add_argument(
        "--system-theme",
        choices=[mode.value for mode in ThemeMode],
        default=SYSTEM_THEME_DEFAULT,
        help="Theme used while the stored preference is loading",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL_DEFAULT,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file instead of the Textual devtools console",
    )
    return parser


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Route log records somewhere that does not draw over the TUI."""
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()
    logging.basicConfig(level=level, handlers=[handler], force=True)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    app = DarkModeApp(config_dir=args.config_dir, system_theme=args.system_theme)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
