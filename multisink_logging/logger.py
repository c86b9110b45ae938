# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Leveled logging façade that fans messages out to sinks."""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any, NoReturn

from .levels import Category, Severity, TraceMode
from .message import MessageBuilder, format_message
from .router import Router
from .sink import Sink

logger = logging.getLogger(__name__)

FATAL_EXIT_STATUS = 1

_TAGS = {
    Category.LOG: "LOG",
    Category.ERROR: "ERROR",
    Category.FATAL: "FATAL",
    Category.DEBUG: "DEBUG",
}


def terminate_process(status: int) -> NoReturn:
    """Flush standard streams and end the process immediately.

    Works from any thread. No interpreter cleanup runs.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            if stream is not None:
                stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; nothing left to save
            pass
    os._exit(status)


class Logger:
    """Severity-gated entry points that dispatch to routed sinks.

    ``error`` and ``fatal`` always run. ``log`` runs when the level is INFO
    or DEBUG, ``debug`` only when it is DEBUG. Each call builds one message
    line and hands it to every sink attached to the call's category, in
    attach order, in the calling thread.

    ``fatal`` terminates the process once its sinks have been called.

    Example:
        >>> from multisink_logging import Logger, Severity, StdoutSink
        >>> log = Logger(level=Severity.INFO)
        >>> log.register_sink(StdoutSink())
        >>> log.add_log_sinks("stdout")
        >>> log.add_error_sinks("stdout")
        >>> log.log("Service started on port", 8080)
        >>> log.errorf("Retry %d of %d failed", 2, 5)
    """

    def __init__(
        self,
        *,
        level: Severity | int | str = Severity.ERROR,
        trace_mode: TraceMode | int | str = TraceMode.SINGLE,
        builder: MessageBuilder | None = None,
        router: Router | None = None,
        exit_func: Callable[[int], Any] | None = None,
        flush_timeout: float | None = 5.0,
    ):
        """Initialize an empty logger.

        Args:
            level: Minimum severity emitted by log/debug calls
            trace_mode: Call-site capture mode
            builder: Message builder (default: a fresh MessageBuilder)
            router: Sink routing table (default: an empty Router)
            exit_func: Called with the exit status after fatal dispatch
                (default: terminate_process)
            flush_timeout: Seconds each fatal sink gets to flush before exit

        Raises:
            ConfigurationError: If level or trace_mode is invalid
        """
        self._level = Severity.parse(level)
        self._trace_mode = TraceMode.parse(trace_mode)
        self.builder = builder or MessageBuilder()
        self.router = router or Router()
        self._exit = exit_func or terminate_process
        self.flush_timeout = flush_timeout

    @property
    def level(self) -> Severity:
        return self._level

    @property
    def trace_mode(self) -> TraceMode:
        return self._trace_mode

    def set_level(self, level: Severity | int | str) -> None:
        """Set the minimum severity.

        Raises:
            ConfigurationError: If level is not a known severity; the
                current level is kept
        """
        self._level = Severity.parse(level)

    def set_trace_mode(self, trace_mode: TraceMode | int | str) -> None:
        """Set the call-site capture mode.

        Raises:
            ConfigurationError: If trace_mode is not SINGLE or FULL; the
                current mode is kept
        """
        self._trace_mode = TraceMode.parse(trace_mode)

    def is_enabled_for(self, severity: Severity) -> bool:
        return self._level >= severity

    # Registration

    def register_sink(self, sink: Sink) -> None:
        """Register a sink so its ID can be attached to categories."""
        self.router.register(sink)

    def attach(self, category: Category | str, *sink_ids: str) -> None:
        """Attach registered sinks to a category. See Router.attach."""
        self.router.attach(category, *sink_ids)

    def add_log_sinks(self, *sink_ids: str) -> None:
        self.router.attach(Category.LOG, *sink_ids)

    def add_error_sinks(self, *sink_ids: str) -> None:
        self.router.attach(Category.ERROR, *sink_ids)

    def add_fatal_sinks(self, *sink_ids: str) -> None:
        self.router.attach(Category.FATAL, *sink_ids)

    def add_debug_sinks(self, *sink_ids: str) -> None:
        self.router.attach(Category.DEBUG, *sink_ids)

    # Logging

    def log(self, *parts: Any) -> None:
        """Log an info-level message built from parts."""
        if self._level < Severity.INFO:
            return
        self._emit(Category.LOG, parts)

    def logf(self, fmt: str, *args: Any) -> None:
        """Log an info-level message from a %-style format string."""
        if self._level < Severity.INFO:
            return
        self.log(format_message(fmt, args))

    info = log
    infof = logf

    def debug(self, *parts: Any) -> None:
        """Log a debug-level message built from parts."""
        if self._level < Severity.DEBUG:
            return
        self._emit(Category.DEBUG, parts)

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log a debug-level message from a %-style format string."""
        if self._level < Severity.DEBUG:
            return
        self.debug(format_message(fmt, args))

    def error(self, *parts: Any) -> None:
        """Log an error message built from parts. Never gated."""
        self._emit(Category.ERROR, parts)

    def errorf(self, fmt: str, *args: Any) -> None:
        """Log an error message from a %-style format string. Never gated."""
        self.error(format_message(fmt, args))

    def fatal(self, *parts: Any) -> NoReturn:
        """Log a fatal message, then terminate the process.

        Every fatal-category sink is called and flushed before the exit
        function runs. The exit function runs even if a sink raises; the
        sinks attached after the failing one are then not called.
        """
        try:
            sinks = self._emit(Category.FATAL, parts)
            for sink in sinks:
                sink.flush(self.flush_timeout)
            logger.debug("Fatal message sent to %d sink(s), exiting", len(sinks))
        finally:
            self._exit(FATAL_EXIT_STATUS)

    def fatalf(self, fmt: str, *args: Any) -> NoReturn:
        """Log a fatal message from a %-style format string, then terminate."""
        self.fatal(format_message(fmt, args))

    def _emit(self, category: Category, parts: tuple[Any, ...]) -> list[Sink]:
        message = self.builder.build(_TAGS[category], parts, self._trace_mode)
        sinks = self.router.sinks(category)
        for sink in sinks:
            getattr(sink, category.value)(message)
        return sinks
