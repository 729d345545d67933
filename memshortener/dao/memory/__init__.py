from memshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO
from memshortener.dao.memory.sweeper import ExpirySweeper


__all__ = [
    'ShortURLMemoryDAO',
    'ExpirySweeper',
]
