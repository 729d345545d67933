from memshortener.models.short_url_model import ShortURLModel


__all__ = ['ShortURLModel']
