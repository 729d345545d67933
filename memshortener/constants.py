from enum import StrEnum


class Defaults:
    """Default configuration values."""

    BASE_URL = 'http://short.url/'
    SHORTCODE_LENGTH = 6
    # Short URL TTL duration (24 hours in seconds)
    TTL_SECONDS = 86_400  # 60 * 60 * 24
    # Delay between two expiry sweeps
    SWEEP_INTERVAL_SECONDS = 1
    LOG_LEVEL = 'INFO'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        BASE_URL = 'SHORTENER_BASE_URL'
        SHORTCODE_LENGTH = 'SHORTENER_SHORTCODE_LENGTH'
        TTL_SECONDS = 'SHORTENER_TTL_SECONDS'
        SWEEP_INTERVAL_SECONDS = 'SHORTENER_SWEEP_INTERVAL_SECONDS'
        MAX_WORKERS = 'SHORTENER_MAX_WORKERS'  # unset => ThreadPoolExecutor default
