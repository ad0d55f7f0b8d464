"""Logging setup: warnings on stderr, optional file-based debug log."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from popup.l3_interface_adapters.gateways.paths import DEBUG_LOG_NAME


class ClickEchoHandler(logging.Handler):
    """Writes records through click.echo(err=True) so the current stderr is used at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(log_dir: Path | None = None) -> Path | None:
    """Show warnings on stderr; with *log_dir*, also write a debug log there.

    Returns the debug log path, if one was configured.
    """
    root = logging.getLogger('popup')
    root.setLevel(logging.DEBUG)
    if not any(isinstance(h, ClickEchoHandler) for h in root.handlers):
        echo = ClickEchoHandler(level=logging.WARNING)
        echo.setFormatter(logging.Formatter('Warning: %(message)s'))
        root.addHandler(echo)

    if log_dir is None:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / DEBUG_LOG_NAME
    if not any(isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path for h in root.handlers):
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
        root.addHandler(handler)
    logging.getLogger('popup.cli').info('Debug logging started → %s', log_path)
    return log_path
