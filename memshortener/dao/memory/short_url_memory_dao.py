"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a thread-safe, in-memory implementation of ShortURLBaseDAO
holding expiring ShortURLModel mappings.

Responsibilities:
    - Store and resolve short URLs with an absolute expiry moment;
    - Lazily evict expired mappings discovered by lookups;
    - Eagerly evict every expired mapping on sweep();
    - Serialize all reads and writes through a single lock.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and resolving short URL mappings in process memory.

Example:
    >>> from datetime import timedelta
    >>> from memshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.put('abc123', 'https://example.com/page', ttl=timedelta(hours=24))
    <ShortURLMemoryDAO>

    >>> dao.get('abc123')
    'https://example.com/page'

    >>> dao.put('xyz789', 'https://example.com/gone', ttl=timedelta(0))
    <ShortURLMemoryDAO>
    >>> dao.get('xyz789') is None
    True
"""

import logging
import threading
from datetime import datetime, timedelta, UTC

from beartype import beartype

from memshortener.models import ShortURLModel
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory.helpers import synchronized
from memshortener.types import Clock


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface on top of a plain dict
    guarded by one `threading.Lock`. Puts, gets and sweeps issued from
    different threads are serialized, so a reader never observes a partially
    updated mapping and concurrent writers never lose an update.

    Attributes:
        _store (dict[str, ShortURLModel]):
            Mappings indexed by shortcode. Only accessed while holding `_lock`.
        _lock (threading.Lock):
            The store's single critical region.
        _clock (Clock):
            Source of the current UTC time.

    Methods:
        put(shortcode: str, target: str, ttl: timedelta) -> ShortURLMemoryDAO:
            Insert or overwrite a mapping expiring `ttl` from now.

        get(shortcode: str) -> str | None:
            Return the target of a live mapping. Removes the mapping and
            returns None if it has expired. Returns None if it doesn't exist.

        sweep() -> None:
            Remove all expired mappings.

        count() -> int:
            Return the number of stored mappings.
    """

    def __init__(self, clock: Clock | None = None):
        """Initialize an empty in-memory DAO

        Args:
            clock (Clock | None):
                Callable returning the current timezone-aware UTC datetime.
                Defaults to `datetime.now(UTC)`.
        """
        self._store: dict[str, ShortURLModel] = {}
        self._lock = threading.Lock()
        self._clock = clock or _utcnow

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @synchronized
    @beartype
    def put(self, shortcode: str, target: str, ttl: timedelta) -> 'ShortURLMemoryDAO':
        """Insert or overwrite a short URL mapping

        NOTE: an existing mapping under the same shortcode is silently replaced,
              live or not. Shortcode collisions are not detected.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            target (str):
                The original URL.
            ttl (timedelta):
                Lifetime of the mapping counted from now.

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Example:
            >>> dao.put('abc123', 'https://example.com', ttl=timedelta(minutes=5))
            <ShortURLMemoryDAO>
        """
        self._store[shortcode] = ShortURLModel(
            target=target,
            shortcode=shortcode,
            expires_at=self._clock() + ttl,
        )
        return self

    @synchronized
    @beartype
    def get(self, shortcode: str) -> str | None:
        """Resolve a stored short URL mapping by shortcode

        A mapping whose expiry moment has been reached is removed on the spot
        (lazy eviction), so it's never returned even if the sweeper hasn't
        caught up with it yet.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.

        Returns:
            str | None:
                The target URL of a live mapping, otherwise None.

        Example:
            >>> dao.get('abc123')
            'https://example.com'
            >>> dao.get('unknown') is None
            True
        """
        short_url = self._store.get(shortcode)
        if short_url is None:
            return None

        if short_url.is_expired(self._clock()):
            self._evict(shortcode)
            logger.debug('Expired short URL evicted on lookup.', extra={'shortcode': shortcode})
            return None

        return short_url.target

    @synchronized
    def sweep(self) -> None:
        """Remove every expired short URL mapping

        The whole scan runs under the lock against a single `now`, so
        the set of removed mappings is exactly the set expired at sweep time.
        """
        now = self._clock()
        expired = [shortcode for shortcode, short_url in self._store.items() if short_url.is_expired(now)]
        for shortcode in expired:
            self._evict(shortcode)
            logger.debug('Expired short URL removed.', extra={'shortcode': shortcode})

        if expired:
            logger.info(
                'Swept %d expired short URL(s).',
                len(expired),
                extra={'removed': len(expired), 'remaining': len(self._store)},
            )

    @synchronized
    def count(self) -> int:
        return len(self._store)

    def _evict(self, shortcode: str) -> None:
        # Caller holds the lock. Evicting a missing shortcode is a no-op:
        # lazy and eager eviction may race for the same mapping.
        self._store.pop(shortcode, None)
