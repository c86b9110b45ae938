# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Canonical message line construction.

A message line looks like::

    ERROR: 2016-11-21T14:50:23+03:00 myhost worker.py:124, main.py:102: message text

severity tag, RFC3339 timestamp, host name, comma-joined call sites
(innermost first) and the flattened message body.
"""

import inspect
import logging
import os
import socket
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
from types import FrameType
from typing import Any

from .levels import TraceMode

logger = logging.getLogger(__name__)

PACKAGE_NAME = __name__.rpartition(".")[0]

# Modules that drive the application rather than belong to it
RUNNER_MODULES = ("_pytest", "pluggy", "unittest", "runpy")

_LINE_BREAKS = str.maketrans({"\r": None, "\n": "\t"})


def frame_module(frame: FrameType) -> str:
    """Return the dotted module name a frame executes in."""
    return frame.f_globals.get("__name__") or ""


def module_matches(name: str, prefixes: Iterable[str]) -> bool:
    """True if name is one of prefixes or a sub-module of one."""
    return any(name == prefix or name.startswith(prefix + ".") for prefix in prefixes)


def runner_boundary(frame: FrameType) -> bool:
    """Default walk boundary: stop at test-runner and bootstrap frames."""
    return module_matches(frame_module(frame), RUNNER_MODULES)


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Render an RFC3339 timestamp with a numeric UTC offset."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


def _printable(part: Any) -> str:
    if isinstance(part, (bytes, bytearray)):
        return bytes(part).decode("utf-8", errors="replace")
    try:
        return str(part)
    except Exception as e:
        return f"%!v(PANIC={type(e).__name__}: {e})"


def flatten(parts: Iterable[Any]) -> str:
    """Join message parts into one single-line body.

    Parts are separated by one space. Carriage returns are dropped and
    newlines become tabs, so a multi-line part stays on one line.

    Args:
        parts: Values of any printable type

    Returns:
        The flattened body
    """
    return " ".join(_printable(part).translate(_LINE_BREAKS) for part in parts)


def _resolve_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning("Unable to resolve host name: %s", e)
        return ""


class MessageBuilder:
    """Builds canonical message lines.

    The builder reads the call stack and the clock and nothing else. Frames
    executing inside this package, or inside any module listed in
    ``internal_modules``, are skipped so the recorded location is the
    application's call site no matter how many wrapper layers sit in
    between.

    Attributes:
        clock: Callable returning the current time
        internal_modules: Module prefixes whose frames are never recorded
        boundary: Predicate that ends the stack walk, or None to walk it all
        max_depth: Maximum number of frames visited, or None for no limit
    """

    def __init__(
        self,
        *,
        hostname: str | None = None,
        clock: Callable[[], datetime] | None = None,
        internal_modules: Iterable[str] = (),
        boundary: Callable[[FrameType], bool] | None = runner_boundary,
        max_depth: int | None = None,
    ):
        """Initialize the message builder.

        Args:
            hostname: Pins the host name instead of resolving it
            clock: Time source (default: local wall clock)
            internal_modules: Extra module prefixes to skip, e.g. an
                application's own logging helpers
            boundary: Frame predicate where the walk stops
            max_depth: Maximum number of frames to visit
        """
        if max_depth is not None and max_depth <= 0:
            raise ValueError(f"max_depth must be a positive integer, got {max_depth!r}")

        self._hostname = hostname
        self.clock = clock or local_now
        self.internal_modules = (PACKAGE_NAME, *internal_modules)
        self.boundary = boundary
        self.max_depth = max_depth

    @property
    def hostname(self) -> str:
        """Host name, resolved on first use and cached.

        Compute once, read many. Concurrent first calls may each resolve the
        name; they all store the same value.
        """
        if self._hostname is None:
            self._hostname = _resolve_hostname()
        return self._hostname

    def caller_locations(
        self,
        trace_mode: TraceMode = TraceMode.SINGLE,
        frame: FrameType | None = None,
    ) -> list[str]:
        """Collect ``<file>:<line>`` entries for the external call sites.

        Args:
            trace_mode: SINGLE stops after the first external frame, FULL
                records every external frame up to the boundary
            frame: Frame to start from (default: the current frame)

        Returns:
            Locations, innermost first. Empty if the stack can't be read.
        """
        locations: list[str] = []
        if frame is None:
            frame = inspect.currentframe()

        visited = 0
        try:
            while frame is not None:
                if self.max_depth is not None and visited >= self.max_depth:
                    break
                visited += 1

                if module_matches(frame_module(frame), self.internal_modules):
                    frame = frame.f_back
                    continue
                if self.boundary is not None and self.boundary(frame):
                    break

                filename = os.path.basename(frame.f_code.co_filename)
                locations.append(f"{filename}:{frame.f_lineno}")

                if trace_mode == TraceMode.SINGLE:
                    break
                frame = frame.f_back
        except Exception:
            logger.debug("Call stack inspection failed", exc_info=True)
        finally:
            # Break the frame reference cycle
            del frame

        return locations

    def build(
        self,
        tag: str,
        parts: Sequence[Any],
        trace_mode: TraceMode = TraceMode.SINGLE,
    ) -> bytes:
        """Build one message line.

        Args:
            tag: Severity tag (LOG, ERROR, FATAL, DEBUG)
            parts: Message parts
            trace_mode: How many call sites to record

        Returns:
            UTF-8 encoded line without a trailing newline
        """
        host = self.hostname
        line = ", ".join(self.caller_locations(trace_mode))
        prefix = f"{tag}: {format_timestamp(self.clock())} {host} {line}: "
        text = (prefix + flatten(parts)).rstrip("\n")
        return text.encode("utf-8", errors="backslashreplace")


def format_message(fmt: str, args: Sequence[Any]) -> str:
    """Apply ``%``-style substitution the way the logging module does.

    A single non-empty mapping argument is used for named substitution.
    With no arguments the format string is returned unchanged. Substitution
    errors never propagate; the format string is returned with a
    ``%!(BADFORMAT ...)`` placeholder describing the problem.

    Args:
        fmt: Format string
        args: Positional substitution arguments

    Returns:
        The substituted text
    """
    if not args:
        return str(fmt)

    values: Any = tuple(args)
    if len(values) == 1 and isinstance(values[0], Mapping) and values[0]:
        values = values[0]

    try:
        return str(fmt) % values
    except Exception as e:
        return f"{fmt} %!(BADFORMAT {type(e).__name__}: {e}; args={args!r})"
