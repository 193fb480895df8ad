"""
Utility functions used by the genesis generator.
"""

import logging

import click


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes records to stderr with `click.echo`."""

    def emit(self, record: logging.LogRecord) -> None:
        """Echo the formatted record, looking the stream up at write time."""
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def get_stream_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a logger that writes to stderr.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = ClickEchoHandler()
        formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger
