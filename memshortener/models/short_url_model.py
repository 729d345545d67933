from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping held by the store.

    Attributes:
        target (str):
            The original long URL that the short code resolves to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        expires_at (datetime):
            Absolute UTC moment after which the mapping is expired and
            must no longer be resolved.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="aZ3kQ9",
        ...     expires_at=datetime.now(UTC) + timedelta(hours=24)
        ... )
        >>> url.target
        'https://example.com/article/123'
        >>> url.is_expired(datetime.now(UTC))
        False
    """

    target: str
    shortcode: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Return True once `now` has reached the expiry moment."""
        return self.expires_at <= now
