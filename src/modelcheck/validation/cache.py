"""In-memory cache of validation messages per model."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any

from ..exceptions import CacheRetrievalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Cached error and warning messages of one model."""
    error_messages: tuple[str, ...]
    warning_messages: tuple[str, ...]
    cached_at: datetime
    generation: int

    def is_expired(self, max_age_seconds: int | None) -> bool:
        if max_age_seconds is None:
            return False
        age = (datetime.now(UTC) - self.cached_at).total_seconds()
        return age >= max_age_seconds


def cache_key(model: Any, model_type: type | None = None) -> tuple[str, str]:
    """Cache key of ``model``: its path and the model type it was validated as."""
    model_type = model_type or type(model)
    return (model.path, f"{model_type.__module__}.{model_type.__qualname__}")


class ValidationCache:
    """Thread-safe cache of validation messages keyed by model path and type.

    ``clear()`` advances ``generation``. Writes tagged with an older generation
    are dropped so results computed before a clear cannot reappear after it.
    """

    def __init__(self, max_age_seconds: int | None = None):
        self.max_age_seconds = max_age_seconds
        self._entries: dict[tuple[str, str], CacheEntry] = {}
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def get_cached_error_messages(self, model: Any, model_type: type | None = None) -> list[str]:
        """Cached error messages of ``model``.

        Raises:
            CacheRetrievalError: If ``model`` has no live cache entry
        """
        return list(self._get_entry(model, model_type).error_messages)

    def get_cached_warning_messages(self, model: Any, model_type: type | None = None) -> list[str]:
        """Cached warning messages of ``model``.

        Raises:
            CacheRetrievalError: If ``model`` has no live cache entry
        """
        return list(self._get_entry(model, model_type).warning_messages)

    def cache_validation_results(self, model: Any, error_messages: list[str],
                                 warning_messages: list[str],
                                 generation: int | None = None) -> bool:
        """Store the messages of ``model``, replacing any previous entry.

        Args:
            model: Validated model
            error_messages: Messages of failed ERROR validators
            warning_messages: Messages of failed WARNING validators
            generation: Generation observed before validation started

        Returns:
            False if the write was dropped because the cache was cleared since
        """
        key = cache_key(model)
        with self._lock:
            if generation is not None and generation != self._generation:
                logger.debug(f"Dropping stale validation results for {key[0]}")
                return False
            self._entries[key] = CacheEntry(
                error_messages=tuple(error_messages),
                warning_messages=tuple(warning_messages),
                cached_at=datetime.now(UTC),
                generation=self._generation,
            )
        return True

    def invalidate(self, model: Any, model_type: type | None = None) -> None:
        with self._lock:
            self._entries.pop(cache_key(model, model_type), None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._generation += 1
        logger.info(f"Validation cache cleared ({count} entries)")

    @property
    def cached_validation_map(self) -> dict[tuple[str, str], CacheEntry]:
        with self._lock:
            return dict(self._entries)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "total_entries": len(self._entries),
                "generation": self._generation,
            }

    def _get_entry(self, model: Any, model_type: type | None) -> CacheEntry:
        key = cache_key(model, model_type)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.is_expired(self.max_age_seconds):
                del self._entries[key]
                entry = None
        if entry is None:
            raise CacheRetrievalError(
                f"No cached validation results for {key[0]} as {key[1]}", key=key
            )
        return entry
