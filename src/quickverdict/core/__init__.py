"""Core infrastructure: value source, configuration, logging, events."""

from quickverdict.core.config import RunConfig, deep_merge, load_config
from quickverdict.core.events import EventBus, EventBusProtocol, LoggingObserver, NullEventBus
from quickverdict.core.logging import configure_logging, get_logger
from quickverdict.core.source import ValueSource

__all__ = [
    "EventBus",
    "EventBusProtocol",
    "LoggingObserver",
    "NullEventBus",
    "RunConfig",
    "ValueSource",
    "configure_logging",
    "deep_merge",
    "get_logger",
    "load_config",
]
