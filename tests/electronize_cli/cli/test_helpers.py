"""Tests for console and logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from electronize_cli.cli.helpers import configure_logging, console, err_console


def test_verbose_logging_writes_to_stderr() -> None:
    configure_logging(verbose=True)

    [handler] = logging.getLogger("electronize_cli").handlers
    assert isinstance(handler, RichHandler)
    assert handler.console is err_console
    assert err_console.stderr is True
    assert console.stderr is False


def test_quiet_logging_drops_records() -> None:
    configure_logging(verbose=False)

    package_logger = logging.getLogger("electronize_cli")
    assert [type(h) for h in package_logger.handlers] == [logging.NullHandler]
    assert package_logger.level == logging.WARNING
    assert package_logger.propagate is False
