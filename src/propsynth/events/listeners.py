"""Event listeners that forward run events to the logging system."""

from __future__ import annotations

import logging
from typing import Any, Callable

from propsynth.events import types as events

_LOGGER_NAME = "propsynth"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the propsynth hierarchy."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def logging_listener(logger: logging.Logger | None = None) -> Callable[[Any], None]:
    """Build a bus listener that logs every run event.

    Stage events go to DEBUG, run boundaries to INFO and abandoned runs to
    WARNING.
    """
    log = logger or get_logger("incremental")

    def _listener(event: Any) -> None:
        if isinstance(event, events.StageEvaluated):
            if event.skipped:
                log.debug("stage %s (%s): cached", event.name, event.kind)
            else:
                log.debug(
                    "stage %s (%s): %d evaluated, %d reused",
                    event.name,
                    event.kind,
                    event.evaluated,
                    event.reused,
                )
        elif isinstance(event, events.RunStarted):
            log.info("run v%d started", event.version)
        elif isinstance(event, events.RunCompleted):
            log.info(
                "run v%d completed: %d evaluated, %d reused",
                event.version,
                event.evaluations,
                event.reused,
            )
        elif isinstance(event, events.RunDiscarded):
            log.warning(
                "run v%d abandoned, superseded by v%d", event.version, event.latest_version
            )

    return _listener


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the propsynth logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[propsynth] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
