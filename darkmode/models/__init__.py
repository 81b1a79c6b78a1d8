"""Data models for the Dark Mode TUI."""
