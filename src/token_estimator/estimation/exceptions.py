"""Token estimation exceptions."""


class TokenEstimatorError(Exception):
    """Base class for token estimator errors."""
    pass


class EncodingLoadError(TokenEstimatorError):
    """Raised when a tokenizer table cannot be loaded."""
    pass


class TokenizationError(TokenEstimatorError):
    """Raised when encoding a string fails."""
    pass
