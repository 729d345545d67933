class MemShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:memshortener_error'


class MalformedShortURLError(MemShortenerError):
    """Raised when a short URL doesn't carry the expected base URL or alias."""

    error_code = 'app:malformed_short_url_error'


class WorkerSubmissionError(MemShortenerError):
    """Raised when the worker pool rejects a task (not started or shut down)."""

    error_code = 'app:worker_submission_error'


class ConfigurationError(MemShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
