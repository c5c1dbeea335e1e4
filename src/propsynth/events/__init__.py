"""Event system: bus, run event types and logging listener."""

from propsynth.events.bus import EventBus
from propsynth.events.listeners import configure_logging, get_logger, logging_listener
from propsynth.events.types import RunDiscarded, RunCompleted, RunStarted, StageEvaluated

__all__ = [
    "EventBus",
    "RunDiscarded",
    "RunCompleted",
    "RunStarted",
    "StageEvaluated",
    "configure_logging",
    "get_logger",
    "logging_listener",
]
