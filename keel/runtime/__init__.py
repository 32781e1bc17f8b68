"""Engine runtime modules."""

from keel.runtime.clock import GameClock
from keel.runtime.errors import ClockDisposedError
from keel.runtime.logging import JsonFormatter, configure_engine_logging, setup_engine_logging
from keel.runtime.scheduler import Scheduler

__all__ = [
    "ClockDisposedError",
    "GameClock",
    "JsonFormatter",
    "Scheduler",
    "configure_engine_logging",
    "setup_engine_logging",
]
