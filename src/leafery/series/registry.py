# ABOUTME: In-memory registry of known book series, keyed by series name.
# ABOUTME: Register, look up, and remove series definitions; last registration wins.

import logging
import threading
from collections.abc import Iterable, Iterator

from leafery.series.model import BookSeries

logger = logging.getLogger(__name__)


class SeriesNotFoundError(KeyError):
    """Raised when a series name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Series '{self.name}' not found"


class SeriesRegistry:
    """Holds BookSeries definitions for the lifetime of a process.

    Lookups and mutations are serialized by a lock so a registry can be
    shared across threads even though the normal workflow is single-threaded.
    """

    def __init__(self, series: Iterable[BookSeries] = ()) -> None:
        self._series: dict[str, BookSeries] = {}
        self._lock = threading.RLock()
        for entry in series:
            self.register(entry)

    def register(self, series: BookSeries) -> None:
        """Add a series, replacing any previous definition with the same name."""
        with self._lock:
            replaced = series.name in self._series
            self._series[series.name] = series
        logger.debug(
            "%s series %s (%d axes)",
            "Replaced" if replaced else "Registered",
            series.name,
            len(series.specificities),
        )

    def lookup(self, name: str) -> BookSeries:
        """Return the series registered under name.

        Raises:
            SeriesNotFoundError: If no series has that name.
        """
        with self._lock:
            try:
                return self._series[name]
            except KeyError:
                raise SeriesNotFoundError(name) from None

    def unregister(self, name: str) -> None:
        """Remove a series.

        Raises:
            SeriesNotFoundError: If no series has that name.
        """
        with self._lock:
            if self._series.pop(name, None) is None:
                raise SeriesNotFoundError(name)
        logger.debug("Unregistered series %s", name)

    def names(self) -> list[str]:
        """All registered series names, alphabetically sorted."""
        with self._lock:
            return sorted(self._series)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._series

    def __len__(self) -> int:
        with self._lock:
            return len(self._series)

    def __iter__(self) -> Iterator[BookSeries]:
        with self._lock:
            snapshot = [self._series[name] for name in sorted(self._series)]
        return iter(snapshot)
