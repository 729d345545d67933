from memshortener.service.url_shortening_service import URLShorteningService
from memshortener.service.workers import WorkerPool


__all__ = [
    'URLShorteningService',
    'WorkerPool',
]
