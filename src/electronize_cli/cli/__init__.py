"""CLI helpers exposed for other modules."""

from .helpers import configure_logging, console, show_banner

__all__ = ["configure_logging", "console", "show_banner"]
