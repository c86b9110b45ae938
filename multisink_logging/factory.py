# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating loggers and sinks."""

import os
from collections.abc import Callable, Mapping

from .config import SinkConfig
from .exceptions import ConfigurationError
from .levels import Severity, TraceMode
from .logger import Logger
from .memory_sink import MemorySink
from .sink import Sink
from .stdout_sink import StdoutSink
from .telegram_sink import TelegramSink


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


SINK_DRIVERS: Mapping[str, Callable[[SinkConfig], Sink]] = {
    "stdout": StdoutSink.from_config,
    "memory": MemorySink.from_config,
    "telegram": TelegramSink.from_config,
}


def create_sink(config: SinkConfig) -> Sink:
    """Create a sink from driver configuration.

    Args:
        config: SinkConfig whose driver_name selects the implementation

    Returns:
        Sink instance

    Raises:
        ConfigurationError: If config is missing or the driver is not recognized

    Example:
        >>> sink = create_sink(SinkConfig("stdout"))
        >>> sink = create_sink(SinkConfig("telegram", {
        ...     "url": "https://api.telegram.org/bot<token>/sendMessage",
        ...     "chat_ids": "1001,1002",
        ... }))
    """
    if config is None:
        raise ConfigurationError("sink config is required")

    driver = str(config.driver_name).lower()
    try:
        build = SINK_DRIVERS[driver]
    except KeyError as exc:
        supported = ", ".join(sorted(SINK_DRIVERS))
        raise ConfigurationError(
            f"Unknown sink driver: {driver}. Supported drivers: {supported}"
        ) from exc
    return build(config)


def create_logger(
    level: Severity | str | None = None,
    trace_mode: TraceMode | str | None = None,
    sinks: Mapping[Sink, tuple[str, ...]] | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        level: Minimum severity. Options: ERROR, INFO, DEBUG.
            Defaults to LOG_LEVEL env or "ERROR".
        trace_mode: Call-site capture. Options: SINGLE, FULL.
            Defaults to LOG_TRACE_MODE env or "SINGLE".
        sinks: Optional mapping of sink -> categories to register and
            attach, in mapping order

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If level or trace_mode is not recognized
        UnknownCategoryError: If a category in sinks is not recognized

    Example:
        >>> logger = create_logger(level="INFO", sinks={
        ...     StdoutSink(): ("log", "error", "fatal"),
        ... })
    """
    if not isinstance(level, Severity):
        level = _default(level, "LOG_LEVEL", "ERROR")
    if not isinstance(trace_mode, TraceMode):
        trace_mode = _default(trace_mode, "LOG_TRACE_MODE", "SINGLE")

    logger = Logger(level=level, trace_mode=trace_mode)

    for sink, categories in (sinks or {}).items():
        logger.register_sink(sink)
        for category in categories:
            logger.attach(category, sink.sink_id)

    return logger
