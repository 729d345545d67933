from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import ShortURLMemoryDAO, ExpirySweeper


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
    'ExpirySweeper',
]
