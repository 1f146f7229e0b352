"""Console utilities for Tomato."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console()
