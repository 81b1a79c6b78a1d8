"""Dark Mode TUI - toggle and persist a dark/light display preference."""

__version__ = "0.1.0"
