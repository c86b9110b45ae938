# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Telegram chat notification sink."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from threading import Lock

import requests

from .config import SinkConfig
from .exceptions import ConfigurationError
from .sink import Sink

logger = logging.getLogger(__name__)

TELEGRAM_SINK_ID = "telegram"

SUBJECTS = {
    "log": "Log message\n",
    "error": "Error message\n",
    "fatal": "Fatal message\n",
    "debug": "Debug message\n",
}


class TelegramSink(Sink):
    """Sink that posts every message to a list of Telegram chats.

    Delivery happens on a background thread pool; dispatch calls return as
    soon as the requests are queued. Each recipient gets its own request
    and its own failure handling, so one unreachable chat never holds back
    the others. Failures are logged and dropped.

    Attributes:
        url: Bot API sendMessage endpoint
        chat_ids: Recipient chat identifiers
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        url: str,
        chat_ids: list[str] | None,
        timeout: float = 10,
        max_workers: int = 4,
    ):
        """Initialize Telegram sink.

        Args:
            url: Bot API sendMessage endpoint
            chat_ids: Recipient chat identifiers (may be empty, not None)
            timeout: Per-request timeout in seconds (default: 10)
            max_workers: Size of the delivery thread pool

        Raises:
            ConfigurationError: If url is empty, chat_ids is None, or timeout
                or max_workers is not positive
        """
        if not url:
            raise ConfigurationError("Empty telegram url.")
        if chat_ids is None:
            raise ConfigurationError("Empty telegram chat ids.")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout!r}")
        if max_workers <= 0:
            raise ConfigurationError(f"max_workers must be positive, got {max_workers!r}")

        self.url = url
        self.chat_ids = [str(chat_id) for chat_id in chat_ids]
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="telegram-sink"
        )
        self._pending: set[Future] = set()
        self._lock = Lock()

    @classmethod
    def from_config(cls, config: SinkConfig) -> "TelegramSink":
        """Create a TelegramSink from driver configuration.

        Args:
            config: SinkConfig with url and chat_ids, optional timeout and
                max_workers. chat_ids may be a list or a comma-separated string.

        Returns:
            Configured TelegramSink instance

        Raises:
            ConfigurationError: If timeout or max_workers is not a number
        """
        chat_ids = config.chat_ids
        if isinstance(chat_ids, str):
            chat_ids = [chat_id.strip() for chat_id in chat_ids.split(",") if chat_id.strip()]

        try:
            timeout = float(config.get("timeout", 10))
            max_workers = int(config.get("max_workers", 4))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid telegram sink setting: {e}") from e

        return cls(
            url=config.url,
            chat_ids=chat_ids,
            timeout=timeout,
            max_workers=max_workers,
        )

    @property
    def sink_id(self) -> str:
        return TELEGRAM_SINK_ID

    def log(self, message: bytes) -> None:
        self._send(SUBJECTS["log"], message)

    def error(self, message: bytes) -> None:
        self._send(SUBJECTS["error"], message)

    def fatal(self, message: bytes) -> None:
        self._send(SUBJECTS["fatal"], message)

    def debug(self, message: bytes) -> None:
        self._send(SUBJECTS["debug"], message)

    def _send(self, subject: str, body: bytes) -> None:
        text = subject + body.decode("utf-8", errors="replace")
        for chat_id in self.chat_ids:
            try:
                future = self._executor.submit(self._deliver, chat_id, text)
            except RuntimeError:
                logger.warning("Telegram sink is closed; dropping message for chat %s", chat_id)
                continue

            with self._lock:
                self._pending.add(future)
            future.add_done_callback(self._forget)

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _deliver(self, chat_id: str, text: str) -> None:
        """Post one message to one chat."""
        try:
            response = requests.post(
                self.url,
                json={"chat_id": chat_id, "text": text},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout:
            logger.error("Timeout sending Telegram message to chat %s (timeout=%ss)",
                         chat_id, self.timeout)
        except requests.RequestException as e:
            logger.error("Error sending Telegram message to chat %s: %s", chat_id, e)

    def flush(self, timeout: float | None = None) -> None:
        """Wait for queued deliveries.

        Args:
            timeout: Maximum number of seconds to wait, or None to wait forever
        """
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return

        _, not_done = wait(pending, timeout=timeout)
        if not_done:
            logger.warning("%d Telegram deliveries still pending after flush", len(not_done))

    def close(self) -> None:
        """Finish queued deliveries and stop the worker threads."""
        self._executor.shutdown(wait=True)
