"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for storing and resolving expiring short URL mappings.
    - Provide an interface for eagerly removing expired mappings (sweeping).
    - Enforce a consistent API for use by the shortening service.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import timedelta
        >>> from memshortener.dao import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> dao.put('a1b2c3', 'https://example.com/blog/article-123', ttl=timedelta(hours=24))
        <ShortURLMemoryDAO>

        >>> dao.get('a1b2c3')
        'https://example.com/blog/article-123'

        >>> dao.get('zzzzzz') is None
        True
"""

from abc import ABC, abstractmethod
from datetime import timedelta


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        put(shortcode: str, target: str, ttl: timedelta) -> ShortURLBaseDAO:
            Insert or overwrite the mapping for a shortcode.

        get(shortcode: str) -> str | None:
            Return the target URL of a live mapping, None otherwise.
            Expired mappings found on the way are removed.

        sweep() -> None:
            Remove every expired mapping.

        count() -> int:
            Return the number of stored mappings.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLMemoryDAO) must extend
        this class and implement all abstract methods. Implementations shared
        between threads must make every method safe to call concurrently.

    NOTE:
        - Mappings expire on their own. The DAO does not provide an interface
          to manually delete entries.
    """

    @abstractmethod
    def put(self, shortcode: str, target: str, ttl: timedelta) -> 'ShortURLBaseDAO':
        """Insert or overwrite a short URL mapping.

        Args:
            shortcode (str):
                The alias under which the target is stored.

            target (str):
                The original URL. Opaque to the data store.

            ttl (timedelta):
                Lifetime of the mapping, counted from now. Zero or negative
                values store an already expired mapping.

        Returns:
            ShortURLBaseDAO: self (for method chaining)
        """
        pass

    @abstractmethod
    def get(self, shortcode: str) -> str | None:
        """Resolve a shortcode to its target URL.

        Args:
            shortcode (str):
                The alias of the mapping to be resolved.

        Returns:
            str | None: The target URL if a live mapping exists, otherwise None.
        """
        pass

    @abstractmethod
    def sweep(self) -> None:
        """Remove every mapping whose expiry moment has passed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored mappings, expired but unswept ones included."""
        pass
