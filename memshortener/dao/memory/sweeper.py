"""Background expiry sweeper for short URL DAOs.

Lookups only evict the expired mappings they happen to touch. Mappings which
are never looked up again would stay in memory forever, so a single background
thread calls `dao.sweep()` at a fixed interval for as long as it is running.

Classes:
    ExpirySweeper: start()/stop() lifecycle around the periodic sweep thread.

Example:
    >>> sweeper = ExpirySweeper(dao, interval=timedelta(seconds=1))
    >>> sweeper.start()
    >>> sweeper.running
    True
    >>> sweeper.stop()
    >>> sweeper.running
    False
"""

import logging
import threading
from datetime import timedelta

from memshortener.dao.base import ShortURLBaseDAO
from memshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodically remove expired mappings from a DAO on a daemon thread.

    The first sweep runs as soon as the thread starts, then once every
    `interval` until stop() is called.

    NOTE: sweeps run with a fixed delay, not at a fixed rate. The interval is
          counted from the end of one sweep to the start of the next, so a slow
          sweep pushes every later one back instead of triggering a burst of
          catch-up sweeps.

    Attributes:
        dao (ShortURLBaseDAO):
            DAO to sweep. Must be safe to call from another thread.
        interval (timedelta):
            Delay between the end of one sweep and the start of the next.
    """

    def __init__(self, dao: ShortURLBaseDAO, interval: timedelta):
        if interval <= timedelta(0):
            raise BadConfigurationError(f'Sweep interval must be positive (given value: {interval}).')

        self.dao = dao
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Spawn the sweep thread. No-op if it is already running.

        A thread left behind by a timed out stop() has already been told to
        exit, so it doesn't count as running: a fresh thread replaces it.
        """
        if self.running and not self._stop_event.is_set():
            logger.debug('Expiry sweeper already running.')
            return

        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name='expiry-sweeper', daemon=True)
        self._thread.start()
        logger.info('Expiry sweeper started.', extra={'intervalSeconds': self.interval.total_seconds()})

    def stop(self, timeout: float | None = None) -> None:
        """Signal the sweep thread to exit and wait for it

        Args:
            timeout (float | None):
                Maximum number of seconds to wait for the thread. None waits
                for the sweep in progress (if any) to complete.
        """
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning('Expiry sweeper did not stop in time.', extra={'timeoutSeconds': timeout})
            return

        self._thread = None
        logger.info('Expiry sweeper stopped.')

    def _run(self) -> None:
        stop_event = self._stop_event
        while not stop_event.is_set():
            try:
                self.dao.sweep()
            except Exception:
                # Keep sweeping on the next tick
                logger.exception('Expiry sweep failed.')
            stop_event.wait(self.interval.total_seconds())
