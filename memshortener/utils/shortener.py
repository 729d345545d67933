"""Shortcode generation utility

This module provides a helper function for generating short, random,
fixed-length aliases for URLs.

Functions:
    generate_shortcode(length=6):
        Generate a random alphanumeric string suitable for use as a URL slug.

Example:
    >>> from memshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'aZ3kQ9'
    >>> len(generate_shortcode(length=10))
    10
"""

import secrets
import string

from memshortener.constants import Defaults


ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
BASE = len(ALPHABET)  # 26 uppercase + 26 lowercase + 10 digits = 62


def generate_shortcode(length: int = Defaults.SHORTCODE_LENGTH) -> str:
    """Generate a random, fixed-length Base62 URL alias.

    Every character is drawn independently and uniformly from the Base62
    alphabet (A-Z, a-z, 0-9) using the `secrets` module, i.e. the operating
    system's cryptographically secure random source.

    Args:
        length (int, optional):
            Exact length of the resulting alias.
            Defaults to 6.

    Returns:
        str: A random alphanumeric alias of exactly `length` characters.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is smaller than 1.

    Example:
        >>> generate_shortcode(length=6)
        'Gh71WP'

    NOTE:
        - The function keeps no state and is safe to call from many threads.
        - Collisions with aliases already in use are NOT checked. With 62^6
          possible aliases and short-lived mappings the risk is accepted;
          a colliding insert overwrites the previous mapping.
    """
    # bool is a subclass of int, but length=True is a programming error
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
