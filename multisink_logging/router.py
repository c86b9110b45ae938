# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Per-category routing of messages to registered sinks."""

import logging

from .levels import Category
from .sink import Sink

logger = logging.getLogger(__name__)


class Router:
    """Sink registry plus one ordered, duplicate-free ID list per category.

    Dispatch order is registration order. The router does not own sinks;
    it only keeps references to them.

    Configure the router before logging starts. Reads are safe from any
    thread; concurrent registration while messages are dispatched is not
    supported.
    """

    def __init__(self):
        self._sinks: dict[str, Sink] = {}
        self._routes: dict[Category, list[str]] = {category: [] for category in Category}

    def register(self, sink: Sink) -> None:
        """Add a sink to the registry. A later sink with the same ID wins.

        Args:
            sink: Sink to register
        """
        self._sinks[sink.sink_id] = sink

    def attach(self, category: Category | str, *sink_ids: str) -> None:
        """Append registered sinks to a category's dispatch list.

        Each argument is looked up in the registry; the sink's own reported
        ID is what gets stored, once. IDs that are not registered are
        ignored.

        Args:
            category: One of log, error, fatal, debug
            *sink_ids: IDs of registered sinks

        Raises:
            UnknownCategoryError: If category is not a known category
        """
        route = self._routes[Category.parse(category)]

        for sink_id in sink_ids:
            sink = self._sinks.get(sink_id)
            if sink is None:
                logger.debug("Ignoring unregistered sink %r for category %s", sink_id, category)
                continue

            reported_id = sink.sink_id
            if reported_id not in route:
                route.append(reported_id)

    def get(self, sink_id: str) -> Sink | None:
        return self._sinks.get(sink_id)

    def sink_ids(self, category: Category | str) -> tuple[str, ...]:
        """Return the dispatch list of a category, in order."""
        return tuple(self._routes[Category.parse(category)])

    def sinks(self, category: Category | str) -> list[Sink]:
        """Resolve a category's dispatch list to sink objects, in order."""
        return [
            self._sinks[sink_id]
            for sink_id in self._routes[Category.parse(category)]
            if sink_id in self._sinks
        ]

    def __contains__(self, sink_id: object) -> bool:
        return sink_id in self._sinks
