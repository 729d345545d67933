"""Helper utilities for rendering and parsing short URLs.

Functions:
    get_short_url(shortcode: str, base_url: str) -> str
        Get string representation of short URL for a given shortcode
    extract_shortcode(short_url: str, base_url: str, length: int) -> str
        Recover the shortcode from a short URL produced by get_short_url()

Example:
    Typical round trip:

        >>> from memshortener.utils.helpers import get_short_url, extract_shortcode
        >>> get_short_url('aZ3kQ9', 'http://short.url/')
        'http://short.url/aZ3kQ9'

        >>> extract_shortcode('http://short.url/aZ3kQ9', 'http://short.url', length=6)
        'aZ3kQ9'

        >>> extract_shortcode('https://elsewhere.com/aZ3kQ9', 'http://short.url', length=6)
        Traceback (most recent call last):
            ...
        memshortener.exceptions.MalformedShortURLError: ...
"""

from memshortener.exceptions import MalformedShortURLError
from memshortener.utils.shortener import ALPHABET


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL, with or without a trailing slash

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'


def extract_shortcode(short_url: str, base_url: str, length: int) -> str:
    """Strip the base URL from a short URL and validate the leftover shortcode

    Unlike a naive string replacement, the base URL must be an actual prefix
    of `short_url`, and the remainder must look exactly like a generated
    shortcode. Anything else is rejected instead of being looked up as a
    garbage alias.

    Args:
        short_url (str): short URL, e.g. 'http://short.url/aZ3kQ9'
        base_url (str): public base URL the short URL was rendered with
        length (int): expected shortcode length

    Returns:
        str: the shortcode

    Raises:
        MalformedShortURLError:
            If the prefix is missing or the shortcode part is malformed.
    """
    prefix = get_short_url('', base_url)
    if not short_url.startswith(prefix):
        raise MalformedShortURLError(f"Short URL '{short_url}' doesn't start with '{prefix}'.")

    shortcode = short_url[len(prefix) :]
    if len(shortcode) != length or any(char not in ALPHABET for char in shortcode):
        raise MalformedShortURLError(f"Short URL '{short_url}' doesn't contain a valid {length}-character shortcode.")

    return shortcode
