"""Path memoization keyed by ordered node pair.

Public API:
    PathCache: Cache of discovered paths with an enable flag and a
        path-length hint derived from its contents.
"""

from __future__ import annotations

import logging

from ..exceptions import CacheUnavailableError
from .store import PairKey
from .types import Path

logger = logging.getLogger(__name__)


class PathCache:
    """Stores successful traces so repeated queries skip the search.

    The cache is cleared whenever caching is toggled, and callers clear it
    on every topology change.

    Args:
        enabled: Whether lookups and stores take effect.
        length_hint: Initial expected path length, in nodes.
    """

    def __init__(self, enabled: bool = True, length_hint: int = 5) -> None:
        self._enabled = enabled
        self._length_hint = length_hint
        self._paths: dict[PairKey, Path] = {}

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def length_hint(self) -> int:
        """Expected node count of an uncached search result."""
        return self._length_hint

    def toggle(self, enabled: bool) -> None:
        """Enable or disable caching; always clears stored paths."""
        self._enabled = enabled
        self.clear()

    def clear(self) -> None:
        if self._paths:
            logger.debug("Clearing %d cached paths", len(self._paths))
        self._paths.clear()

    def get(self, key: PairKey) -> Path | None:
        """Cached path for *key*, or None on a miss or when disabled."""
        if not self._enabled:
            return None
        return self._paths.get(key)

    def put(self, key: PairKey, path: Path) -> None:
        if self._enabled:
            self._paths[key] = path

    def optimize(self) -> int:
        """Derive the length hint from the average cached path length, rounded down.

        Returns:
            The new length hint.

        Raises:
            CacheUnavailableError: If caching is disabled or nothing is cached.
        """
        if not self._enabled:
            raise CacheUnavailableError("Path cache is disabled")
        if not self._paths:
            raise CacheUnavailableError("Path cache is empty")

        total = sum(len(path) for path in self._paths.values())
        self._length_hint = total // len(self._paths)
        logger.debug(
            "Path length hint set to %d from %d cached paths",
            self._length_hint,
            len(self._paths),
        )
        return self._length_hint


__all__ = ["PathCache"]
