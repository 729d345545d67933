from memshortener.utils.config import ShortenerConfig, load_config
from memshortener.utils.helpers import get_short_url, extract_shortcode
from memshortener.utils.shortener import generate_shortcode
from memshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'ShortenerConfig',
    'load_config',
    'get_short_url',
    'extract_shortcode',
    'initialize_logging',
]
