"""Tomato - a Pomodoro timer for the command line."""

__version__ = "0.3.0"
