# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Multisink Logging.

A leveled logging façade: callers emit messages at a severity, the façade
builds one canonical message line (severity, timestamp, host, call sites,
flattened body) and fans it out to the sinks attached to that severity.

Example:
    >>> from multisink_logging import Logger, MemorySink, Severity, TraceMode
    >>>
    >>> logger = Logger(level=Severity.INFO, trace_mode=TraceMode.SINGLE)
    >>> sink = MemorySink()
    >>> logger.register_sink(sink)
    >>> logger.add_log_sinks("memory")
    >>> logger.add_error_sinks("memory")
    >>>
    >>> logger.log("cache warmed", 120, "entries")
    >>> logger.errorf("upstream returned %d", 503)
    >>> logger.debug("not emitted at INFO")
"""

import logging

__version__ = "0.1.0"

from .config import SinkConfig
from .exceptions import ConfigurationError, LoggingError, UnknownCategoryError
from .factory import create_logger, create_sink
from .levels import Category, Severity, TraceMode
from .logger import Logger, terminate_process
from .memory_sink import MemorySink
from .message import MessageBuilder, flatten, format_message, runner_boundary
from .router import Router
from .sink import Sink
from .stdout_sink import StdoutSink
from .telegram_sink import TelegramSink

# Library diagnostics stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Façade
    "Logger",
    "create_logger",
    "terminate_process",
    # Levels
    "Category",
    "Severity",
    "TraceMode",
    # Messages
    "MessageBuilder",
    "flatten",
    "format_message",
    "runner_boundary",
    # Routing
    "Router",
    # Sinks
    "Sink",
    "SinkConfig",
    "create_sink",
    "MemorySink",
    "StdoutSink",
    "TelegramSink",
    # Errors
    "LoggingError",
    "ConfigurationError",
    "UnknownCategoryError",
]
