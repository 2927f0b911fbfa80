import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from domain.models.currency import RATE_CACHE_TTL, RateSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CacheEntry:
    value: RateSnapshot
    stored_at: float


class RateCache:
    """In-process rate table cache keyed by base currency.

    Entries expire ``ttl`` after they were stored. Expiry is checked lazily:
    ``get`` evicts a stale entry when it sees one.
    """

    def __init__(
        self,
        ttl: timedelta = RATE_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(base_currency: str) -> str:
        return base_currency.upper()

    def get(self, key: str) -> RateSnapshot | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if self._clock() - entry.stored_at > self.ttl.total_seconds():
                del self._entries[key]
                logger.debug(f'Evicted expired rates for {key}')
                return None

            return entry.value

    def set(self, key: str, snapshot: RateSnapshot) -> None:
        with self._lock:
            self._entries[key] = _CacheEntry(value=snapshot, stored_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f'Rate cache cleared ({count} entries)')

    def keys(self) -> list[str]:
        # includes entries that have expired but not yet been read
        with self._lock:
            return sorted(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
