import functools
from typing import Any
from collections.abc import Callable


__all__ = []


def synchronized[F: Callable[..., Any]](method: F) -> F:
    """Run a DAO method inside the DAO's critical region

    Args:
        method (Callable[..., Any]):
            DAO method reading or mutating shared state. The DAO instance
            must expose a `threading.Lock` as `self._lock`.

    Returns:
        Callable[..., Any]:
            Wrapped method which holds `self._lock` for its whole duration.

    Example:
        >>> @synchronized
        ... def count(self):
        ...     return len(self._store)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper
