"""Public engine API surface."""

from keel.api.logging import EngineLoggingConfig, configure_logging, get_logger, shutdown_logging

__all__ = ["EngineLoggingConfig", "configure_logging", "get_logger", "shutdown_logging"]
