"""Parse cache for template part sequences.

Memoizes parser output keyed by the exact raw template string so repeated
rendering of the same template skips re-parsing.

Architecture:
    - Owned, injectable instance (no process-wide singleton); lifetime is
      tied to whatever manages a dictionary (typically a TemplateBundle)
    - Exact string keys, no normalization
    - Unbounded: templates are a small, finite, known-at-build-time set
    - Part sequences are immutable tuples, safe to share between callers

Thread Safety (Accepted Race Condition):
    Lookups, stores and counters are protected by an RLock, but parsing
    runs outside the lock. Concurrent misses for the same unseen template
    may each parse it; the last store wins. The parser is deterministic,
    so duplicate work never produces a different rendering.

Python 3.13+.
"""

import logging
from threading import RLock

from pluralex.syntax.ast import Part
from pluralex.syntax.parser import TemplateParser

__all__ = ["ParseCache"]

logger = logging.getLogger(__name__)


class ParseCache:
    """Thread-safe memo of raw template -> part sequence.

    Example:
        >>> cache = ParseCache()
        >>> parts = cache.get_parts("{0} apple{{s}}")
        >>> cache.get_parts("{0} apple{{s}}") is parts
        True
        >>> cache.get_stats()["hits"]
        1
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses", "_parser")

    def __init__(self, parser: TemplateParser | None = None) -> None:
        """Initialize empty cache.

        Args:
            parser: Parser used on misses (default: new TemplateParser)
        """
        self._parser = parser if parser is not None else TemplateParser()
        self._entries: dict[str, tuple[Part, ...]] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get_parts(self, raw: str) -> tuple[Part, ...]:
        """Return the parsed parts of raw, parsing on first use.

        Args:
            raw: Template source (exact-match key)

        Returns:
            Immutable part sequence
        """
        with self._lock:
            parts = self._entries.get(raw)
            if parts is not None:
                self._hits += 1
                return parts
            self._misses += 1

        parts = self._parser.parse(raw)

        with self._lock:
            self._entries[raw] = parts
        return parts

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Parse cache cleared")

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with size, hits, misses and hit_rate (percent, 0.0 when unused)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, raw: object) -> bool:
        with self._lock:
            return raw in self._entries
