"""Logging setup for punctfix.

Package code logs through stdlib ``logging``; structlog's
ProcessorFormatter renders every record onto stderr so stdout stays free
for converted text.

- Console (default): ``level  [logger] message`` lines, colored on a TTY.
- JSON (``--log-json``): one object per line with an ISO timestamp and
  the punctfix version, CJK text left unescaped.  Suited to piping a
  long-running ``punctfix watch`` into a log collector.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from punctfix import __version__

LOGGER_NAME = "punctfix"

# Third-party loggers that chatter at DEBUG while parsing or touching the clipboard.
NOISY_LOGGERS = ("html5lib", "bs4", "pyperclip")


def app_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for the ``punctfix`` logger; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _add_version(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("version", __version__)
    return event_dict


def _pre_chain(log_json: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_version,
            structlog.processors.format_exc_info,
        ]
    else:
        # ConsoleRenderer formats exc_info itself.
        processors.append(structlog.processors.StackInfoRenderer())
    return processors


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Route all logging to stderr through structlog.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG output from punctfix.
        quiet: Only errors from punctfix.
        log_json: JSON lines instead of console lines.
    """
    pre_chain = _pre_chain(log_json)
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(app_level(verbose=verbose, quiet=quiet))
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
