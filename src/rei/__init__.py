"""Rei: a personal task tracker driven by short text commands."""

__version__ = "0.3.0"
