from memshortener.service import URLShorteningService
from memshortener.utils import ShortenerConfig, load_config


__all__ = [
    'URLShorteningService',
    'ShortenerConfig',
    'load_config',
]
