"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of exactly the requested length.

2. Output format
   - All characters must belong to the Base62 alphabet (letters and digits only).

3. Randomness source
   - Ensures characters are drawn with the `secrets` CSPRNG.
   - Ensures consecutive calls don't repeat the same alias.

4. Error handling
   - Ensures invalid lengths raise appropriate exceptions.
"""

import string

import pytest

from memshortener.utils import generate_shortcode
from memshortener.utils import shortener
from memshortener.utils.shortener import ALPHABET, BASE


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_default_length():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 6


@pytest.mark.parametrize('length', [1, 6, 7, 32])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length)) == length


# -------------------------------
# 2. Output format
# -------------------------------


def test_alphabet_is_base62():
    assert BASE == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


def test_generate_shortcode_is_alphanumeric():
    for _ in range(100):
        assert all(char in ALPHABET for char in generate_shortcode(12))


# -------------------------------
# 3. Randomness source
# -------------------------------


def test_generate_shortcode_uses_secrets(monkeypatch):
    """Ensure every character comes from secrets.choice over the Base62 alphabet."""
    alphabets = []

    def fake_choice(seq):
        alphabets.append(seq)
        return 'Z'

    monkeypatch.setattr(shortener.secrets, 'choice', fake_choice)

    assert generate_shortcode(6) == 'ZZZZZZ'
    assert alphabets == [ALPHABET] * 6


def test_generate_shortcode_is_random():
    results = {generate_shortcode() for _ in range(1000)}
    assert len(results) > 990


def test_generate_shortcode_covers_alphabet():
    seen = set(''.join(generate_shortcode(32) for _ in range(200)))
    assert seen == set(ALPHABET)


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', [0, -1])
def test_generate_shortcode_with_non_positive_length(length):
    with pytest.raises(ValueError, match='Length must be a positive integer'):
        generate_shortcode(length)


@pytest.mark.parametrize('length', ['6', 6.0, None, True])
def test_generate_shortcode_with_invalid_type(length):
    with pytest.raises(TypeError, match='Length must be of type integer'):
        generate_shortcode(length)
