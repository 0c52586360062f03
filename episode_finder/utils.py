"""Shared utilities for episode finder."""

from rich.console import Console

# Shared console instance for all modules
console = Console()


def parse_int_safe(text: str) -> int:
    """Parse an integer from text, returning 0 if invalid."""
    text = text.strip()
    return int(text) if text.isdigit() else 0


def truncate(text: str, max_length: int = 60) -> str:
    """Shorten text for table display, marking the cut with an ellipsis."""
    return text[:max_length] + "..." if len(text) > max_length else text
