"""Console helpers: timestamped output, headers, password prompt, logging."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from functools import partial

import click

OutputSink = Callable[[str], None]

_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

_stderr_sink: OutputSink = partial(click.echo, err=True)


def console_output(
    message: str, sink: OutputSink | None = None, *, timestamp: bool = True
) -> None:
    """Write *message* as a single line to *sink* (stderr by default).

    When *timestamp* is set the line is prefixed with the local time, the
    same way the standard logger of the Azure SDK samples prints it.
    """
    line = f"{datetime.now().strftime(_TIMESTAMP_FORMAT)} {message}" if timestamp else message
    (sink or _stderr_sink)(line)


def print_header(header: str, sink: OutputSink | None = None) -> None:
    """Print *header* followed by a dashed underline of the same width."""
    out = sink or click.echo
    out(header)
    out("-" * len(header))


def get_password(prompt: str, reader: Callable[[str], str] | None = None) -> str:
    """Prompt for a secret with echo disabled and return it stripped.

    *reader* receives the prompt and returns the raw input; it defaults to
    ``click.prompt`` with hidden input.
    """
    if reader is None:
        reader = partial(click.prompt, hide_input=True, default="", show_default=False)
    return str(reader(prompt)).strip()


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the root ``anf_sample`` logger with timestamped lines."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s - %(message)s",
            datefmt=_TIMESTAMP_FORMAT,
        )
    )
    app_logger = logging.getLogger("anf_sample")
    app_logger.handlers = [handler]
    app_logger.setLevel(level)
    app_logger.propagate = False

    # Silence noisy third-party loggers
    logging.getLogger("azure").setLevel(logging.WARNING)
