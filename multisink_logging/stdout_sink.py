# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Console sink implementation."""

import logging
import sys
from typing import TextIO

from .config import SinkConfig
from .sink import Sink


class StdoutSink(Sink):
    """Sink that writes each message line to the console.

    Log and debug lines go to stdout, error and fatal lines to stderr,
    unless a single stream is given. Every line is also emitted through a
    stdlib logger so test harnesses (caplog) and handlers can capture it.
    """

    def __init__(
        self,
        sink_id: str = "stdout",
        stream: TextIO | None = None,
        logger_name: str | None = None,
    ):
        """Initialize stdout sink.

        Args:
            sink_id: Identifier used for routing
            stream: Stream for every category (default: stdout/stderr split)
            logger_name: Name of the mirroring stdlib logger
        """
        self._sink_id = sink_id
        self.stream = stream
        # Use NOTSET to inherit the root level; the façade already gated the call
        self._stdlib_logger = logging.getLogger(logger_name or f"{__package__}.sinks.{sink_id}")
        self._stdlib_logger.setLevel(logging.NOTSET)

    @classmethod
    def from_config(cls, config: SinkConfig) -> "StdoutSink":
        """Create a StdoutSink from driver configuration.

        Args:
            config: SinkConfig with optional sink_id and logger_name

        Returns:
            Configured StdoutSink instance
        """
        return cls(sink_id=config.sink_id or "stdout", logger_name=config.logger_name)

    @property
    def sink_id(self) -> str:
        return self._sink_id

    def _write(self, level: int, message: bytes, default_stream: TextIO) -> None:
        text = message.decode("utf-8", errors="replace")
        stream = self.stream or default_stream
        try:
            print(text, file=stream, flush=True)
        except (OSError, ValueError) as e:
            # Broken or closed stream; report on stderr instead of raising
            print(f"stdout sink write failed: {e}", file=sys.__stderr__, flush=True)

        self._stdlib_logger.log(level, text)

    def log(self, message: bytes) -> None:
        self._write(logging.INFO, message, sys.stdout)

    def error(self, message: bytes) -> None:
        self._write(logging.ERROR, message, sys.stderr)

    def fatal(self, message: bytes) -> None:
        self._write(logging.CRITICAL, message, sys.stderr)

    def debug(self, message: bytes) -> None:
        self._write(logging.DEBUG, message, sys.stdout)
