"""Shorten and resolve an example URL with a freshly started service

Configuration is read from the environment (see memshortener.utils.config).

Usage:
    $ python -m memshortener
    Shortened URL: http://short.url/aZ3kQ9
    Resolved URL: https://www.example.com
"""

from memshortener.service import URLShorteningService
from memshortener.utils import initialize_logging, load_config


def main():
    initialize_logging()

    with URLShorteningService(load_config()) as service:
        short_url = service.shorten('https://www.example.com')
        print(f'Shortened URL: {short_url}')

        resolved_url = service.resolve(short_url)
        print(f'Resolved URL: {resolved_url}')


if __name__ == '__main__':
    main()
