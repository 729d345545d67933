"""Utility functions for application configuration management.

The shortener is configured through environment variables. Every value has
a sensible default, so an empty environment yields a working service:

    SHORTENER_BASE_URL                 – public base URL of short links (default: http://short.url/)
    SHORTENER_SHORTCODE_LENGTH         – length of generated aliases (default: 6)
    SHORTENER_TTL_SECONDS              – lifetime of a mapping in seconds (default: 86400, i.e. 24 hours)
    SHORTENER_SWEEP_INTERVAL_SECONDS   – delay between two expiry sweeps (default: 1)
    SHORTENER_MAX_WORKERS              – worker pool size (default: ThreadPoolExecutor's own default)

Classes:
    ShortenerConfig
        Immutable, validated configuration consumed by URLShorteningService.

Functions:
    load_config() -> ShortenerConfig
        Build a ShortenerConfig from environment variables.

Example:
    >>> os.environ['SHORTENER_TTL_SECONDS'] = '60'
    >>> config = load_config()
    >>> config.ttl
    datetime.timedelta(seconds=60)
    >>> config.base_url
    'http://short.url/'
"""

import os
import logging
import urllib.parse
from dataclasses import dataclass
from datetime import timedelta

from memshortener.constants import ENV, Defaults
from memshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortenerConfig:
    """Shortener service configuration.

    Attributes:
        base_url (str):
            Public base URL prepended to every alias, e.g. 'http://short.url/'.
        shortcode_length (int):
            Exact length of generated aliases.
        ttl (timedelta):
            Lifetime of a mapping, counted from the moment it is stored.
        sweep_interval (timedelta):
            Delay between two eager expiry sweeps.
        max_workers (int | None):
            Size of the worker pool. None lets ThreadPoolExecutor decide.

    Raises:
        BadConfigurationError:
            If any attribute has the wrong type or is out of its valid range.
    """

    base_url: str = Defaults.BASE_URL
    shortcode_length: int = Defaults.SHORTCODE_LENGTH
    ttl: timedelta = timedelta(seconds=Defaults.TTL_SECONDS)
    sweep_interval: timedelta = timedelta(seconds=Defaults.SWEEP_INTERVAL_SECONDS)
    max_workers: int | None = None

    def __post_init__(self) -> None:
        self.__validate_types()

        components = urllib.parse.urlparse(self.base_url)
        if components.scheme not in {'http', 'https'} or not components.netloc:
            raise BadConfigurationError(f"Base URL must be an absolute http(s) URL (given value: '{self.base_url}').")
        if self.shortcode_length < 1:
            raise BadConfigurationError(f'Shortcode length must be a positive integer (given value: {self.shortcode_length}).')
        if self.ttl < timedelta(0):
            raise BadConfigurationError(f'TTL must not be negative (given value: {self.ttl}).')
        if self.sweep_interval <= timedelta(0):
            raise BadConfigurationError(f'Sweep interval must be positive (given value: {self.sweep_interval}).')
        if self.max_workers is not None and self.max_workers < 1:
            raise BadConfigurationError(f'Max workers must be a positive integer (given value: {self.max_workers}).')

    def __validate_types(self) -> None:
        # bool is an int subclass but never a valid length or pool size
        def is_int(value) -> bool:
            return isinstance(value, int) and not isinstance(value, bool)

        checks = [
            ('Base URL', self.base_url, isinstance(self.base_url, str), 'a string'),
            ('Shortcode length', self.shortcode_length, is_int(self.shortcode_length), 'an integer'),
            ('TTL', self.ttl, isinstance(self.ttl, timedelta), 'a timedelta'),
            ('Sweep interval', self.sweep_interval, isinstance(self.sweep_interval, timedelta), 'a timedelta'),
            ('Max workers', self.max_workers, self.max_workers is None or is_int(self.max_workers), 'an integer or None'),
        ]
        for label, value, valid, expected in checks:
            if not valid:
                raise BadConfigurationError(f'{label} must be {expected} (given value: {value!r}).')


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable {name} must be an integer (given value: '{raw}').") from e


def _env_seconds(name: str, default: float) -> timedelta:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return timedelta(seconds=default)
    try:
        return timedelta(seconds=float(raw.strip()))
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable {name} must be a number of seconds (given value: '{raw}').") from e


def load_config() -> ShortenerConfig:
    """Load shortener configuration from environment variables

    Returns:
        ShortenerConfig: validated configuration, defaults for unset variables.

    Raises:
        BadConfigurationError:
            If a variable can't be parsed or holds an out-of-range value.

    Example:
        >>> load_config().shortcode_length
        6
    """
    config = ShortenerConfig(
        base_url=os.environ.get(ENV.Shortener.BASE_URL, Defaults.BASE_URL).strip(),
        shortcode_length=_env_int(ENV.Shortener.SHORTCODE_LENGTH, Defaults.SHORTCODE_LENGTH),
        ttl=_env_seconds(ENV.Shortener.TTL_SECONDS, Defaults.TTL_SECONDS),
        sweep_interval=_env_seconds(ENV.Shortener.SWEEP_INTERVAL_SECONDS, Defaults.SWEEP_INTERVAL_SECONDS),
        max_workers=_env_int(ENV.Shortener.MAX_WORKERS, None),
    )
    logger.debug(
        'Loaded shortener configuration from environment.',
        extra={
            'baseUrl': config.base_url,
            'shortcodeLength': config.shortcode_length,
            'ttlSeconds': config.ttl.total_seconds(),
            'sweepIntervalSeconds': config.sweep_interval.total_seconds(),
            'maxWorkers': config.max_workers,
        },
    )
    return config
