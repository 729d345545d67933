"""Worker pool running shorten/resolve requests concurrently.

Classes:
    WorkerPool: start()/shutdown() lifecycle around a ThreadPoolExecutor which
        reports rejected submissions as WorkerSubmissionError.

Example:
    >>> pool = WorkerPool(max_workers=4)
    >>> pool.start()
    >>> pool.submit(sum, [1, 2, 3]).result()
    6
    >>> pool.shutdown()
    >>> pool.submit(sum, [1, 2, 3])
    Traceback (most recent call last):
        ...
    memshortener.exceptions.WorkerSubmissionError: Worker pool is not running.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any
from collections.abc import Callable

from memshortener.exceptions import WorkerSubmissionError


logger = logging.getLogger(__name__)


class WorkerPool:
    """Thin wrapper over ThreadPoolExecutor

    Attributes:
        max_workers (int | None):
            Maximum number of worker threads. None lets ThreadPoolExecutor decide.
    """

    def __init__(self, max_workers: int | None = None):
        self.max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._lifecycle_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._executor is not None

    def start(self) -> None:
        with self._lifecycle_lock:
            if self._executor is not None:
                return
            self._executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix='shortener-worker')
        logger.debug('Worker pool started.', extra={'maxWorkers': self.max_workers})

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks and release the worker threads

        Args:
            wait (bool):
                If True, block until queued and running tasks complete.
                If False, cancel queued tasks and return immediately.
        """
        with self._lifecycle_lock:
            executor, self._executor = self._executor, None
        if executor is None:
            return
        executor.shutdown(wait=wait, cancel_futures=not wait)
        logger.debug('Worker pool shut down.', extra={'wait': wait})

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        """Schedule `fn(*args, **kwargs)` on a worker thread

        Returns:
            Future: future holding the call's result or exception.

        Raises:
            WorkerSubmissionError:
                If the pool was never started, has been shut down, or the
                executor refuses the task.
        """
        executor = self._executor
        if executor is None:
            logger.error('Task submitted to a worker pool which is not running.', extra={'task': getattr(fn, '__name__', repr(fn))})
            raise WorkerSubmissionError('Worker pool is not running.')

        try:
            return executor.submit(fn, *args, **kwargs)
        except RuntimeError as e:
            # ThreadPoolExecutor refuses new futures after (or during) shutdown
            logger.error('Worker pool rejected task.', extra={'task': getattr(fn, '__name__', repr(fn)), 'reason': str(e)})
            raise WorkerSubmissionError(f'Worker pool rejected task: {e}') from e
