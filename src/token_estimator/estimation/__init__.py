from .config import EstimatorConfig
from .encodings import get_encoding, encoding_for_model, encoding_name_for_model, clear_cache
from .estimator import (
    TokenEstimate,
    count_tokens,
    estimate_tokens,
    estimate_tokens_per_string,
    estimate_tokens_from_string_list,
)
from .exceptions import TokenEstimatorError, EncodingLoadError, TokenizationError
from .heuristics import has_long_sequential_repeat, estimate_tokens_by_char_count
from .constants import MODEL_CHAR_PER_TOKEN_RATIOS, DEFAULT_MODEL

__all__ = ['EstimatorConfig', 'get_encoding', 'encoding_for_model', 'encoding_name_for_model',
           'clear_cache', 'TokenEstimate', 'count_tokens', 'estimate_tokens',
           'estimate_tokens_per_string', 'estimate_tokens_from_string_list',
           'TokenEstimatorError', 'EncodingLoadError', 'TokenizationError',
           'has_long_sequential_repeat', 'estimate_tokens_by_char_count',
           'MODEL_CHAR_PER_TOKEN_RATIOS', 'DEFAULT_MODEL']
