"""URL shortening service

Façade tying the shortcode generator, the expiring short URL store, the
background expiry sweeper and the worker pool together.

Shortening procedure:
    - Step 1: Generate a random shortcode
    - Step 2: Store the shortcode -> target mapping with an expiry moment (via DAO)
    - Step 3: Render the short URL from the configured base URL

Resolving procedure:
    - Step 1: Strip the configured base URL to recover the shortcode
    - Step 2: Look up the shortcode (via DAO); expired mappings are not returned

Example:
    >>> with URLShorteningService() as service:
    ...     short_url = service.shorten('https://www.example.com')
    ...     short_url
    ...     service.resolve(short_url)
    'http://short.url/aZ3kQ9'
    'https://www.example.com'
"""

import logging
from concurrent.futures import Future

from beartype import beartype

from memshortener.dao import ShortURLBaseDAO, ShortURLMemoryDAO, ExpirySweeper
from memshortener.exceptions import MalformedShortURLError
from memshortener.service.workers import WorkerPool
from memshortener.utils import ShortenerConfig, load_config, generate_shortcode, get_short_url, extract_shortcode


logger = logging.getLogger(__name__)


class URLShorteningService:
    """Shorten URLs into expiring random aliases and resolve them back

    shorten() and resolve() are plain synchronized calls on the DAO and can be
    used from any number of threads. submit_shorten() and submit_resolve() run
    the same calls on the service's worker pool.

    Attributes:
        config (ShortenerConfig):
            Base URL, shortcode length, TTL, sweep interval and pool size.
        dao (ShortURLBaseDAO):
            Store owning every short URL mapping.
        sweeper (ExpirySweeper):
            Background task removing expired mappings from `dao`.
        workers (WorkerPool):
            Pool used by submit_shorten() and submit_resolve().
    """

    def __init__(self, config: ShortenerConfig | None = None, dao: ShortURLBaseDAO | None = None):
        """Initialize the service. Nothing runs in the background until start().

        Args:
            config (ShortenerConfig | None):
                Service configuration. Defaults to load_config() (environment).
            dao (ShortURLBaseDAO | None):
                Short URL store. Defaults to a new, empty ShortURLMemoryDAO.
        """
        self.config = config if config is not None else load_config()
        self.dao = dao if dao is not None else ShortURLMemoryDAO()
        self.sweeper = ExpirySweeper(self.dao, interval=self.config.sweep_interval)
        self.workers = WorkerPool(max_workers=self.config.max_workers)

    def __enter__(self) -> 'URLShorteningService':
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self.sweeper.running and self.workers.running

    def start(self) -> None:
        """Start the expiry sweeper and the worker pool."""
        self.workers.start()
        self.sweeper.start()

    def stop(self, wait: bool = True) -> None:
        """Stop the expiry sweeper and shut the worker pool down

        Args:
            wait (bool):
                If True, drain submitted requests before returning.
                If False, cancel requests which haven't started yet.
        """
        self.sweeper.stop()
        self.workers.shutdown(wait=wait)

    @beartype
    def shorten(self, target: str) -> str:
        """Map a target URL to a new short URL

        NOTE: shortcodes are not checked for collisions. A collision overwrites
              the older mapping, which then can't be resolved anymore.

        Args:
            target (str):
                The original URL. Stored as is.

        Returns:
            str: the short URL, e.g. 'http://short.url/aZ3kQ9'

        Example:
            >>> service.shorten('https://www.example.com')
            'http://short.url/aZ3kQ9'
        """
        shortcode = generate_shortcode(self.config.shortcode_length)
        self.dao.put(shortcode, target, ttl=self.config.ttl)
        logger.info('Shortened URL.', extra={'shortcode': shortcode, 'target': target})
        return get_short_url(shortcode, self.config.base_url)

    @beartype
    def resolve(self, short_url: str) -> str | None:
        """Resolve a short URL back to its target URL

        Args:
            short_url (str):
                A short URL previously returned by shorten().

        Returns:
            str | None:
                The target URL. None if the short URL is unknown or expired.

        Raises:
            MalformedShortURLError:
                If `short_url` doesn't start with the configured base URL or
                doesn't end with a well-formed shortcode.

        Example:
            >>> service.resolve('http://short.url/aZ3kQ9')
            'https://www.example.com'
            >>> service.resolve('http://short.url/zzzzzz') is None
            True
        """
        try:
            shortcode = extract_shortcode(short_url, self.config.base_url, self.config.shortcode_length)
        except MalformedShortURLError:
            logger.warning('Malformed short URL.', extra={'shortUrl': short_url})
            raise

        target = self.dao.get(shortcode)
        if target is None:
            logger.info('Short URL not found or expired.', extra={'shortcode': shortcode})
        return target

    def submit_shorten(self, target: str) -> Future:
        """Run shorten() on the worker pool

        Returns:
            Future: resolves to the short URL.

        Raises:
            WorkerSubmissionError: If the worker pool is not running.
        """
        return self.workers.submit(self.shorten, target)

    def submit_resolve(self, short_url: str) -> Future:
        """Run resolve() on the worker pool

        Returns:
            Future: resolves to the target URL or None; raises
                    MalformedShortURLError from result() on malformed input.

        Raises:
            WorkerSubmissionError: If the worker pool is not running.
        """
        return self.workers.submit(self.resolve, short_url)
