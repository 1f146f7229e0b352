"""Command implementations for the tomato CLI."""
