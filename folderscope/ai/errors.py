class ProviderError(Exception):
    """Upstream provider call failed. The upstream message is kept intact."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(ProviderError):
    """Provider answered without any text."""


class ConfigurationError(Exception):
    """Server is not configured well enough to call the provider."""


class NoCredentialsError(ConfigurationError):
    """Credential pool is empty."""

    def __init__(self, message="No API credentials configured"):
        super().__init__(message)


class DeadlineExceededError(Exception):
    """Every attempt within the time budget failed with a retryable error."""

    def __init__(self, attempts, pool_size, last_error_message):
        self.attempts = attempts
        self.pool_size = pool_size
        self.last_error_message = last_error_message
        super().__init__(
            f"All API keys exhausted after {attempts} attempts "
            f"across {pool_size} key(s). Last error: {last_error_message}"
        )
