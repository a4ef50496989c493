"""Token estimates for batches of strings: exact where possible, heuristic otherwise."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import tiktoken

from .config import EstimatorConfig
from .encodings import encoding_for_model
from .exceptions import EncodingLoadError, TokenizationError
from .heuristics import has_long_sequential_repeat, estimate_tokens_by_char_count

logger = logging.getLogger(__name__)

METHOD_EXACT = 'exact'
METHOD_HEURISTIC = 'heuristic'
METHOD_EMPTY = 'empty'


@dataclass(frozen=True)
class TokenEstimate:
    tokens: int
    method: str


def count_tokens(model: str, text: str) -> int:
    """
    Count tokens in text exactly with the model's encoding.

    Args:
        model: Model or encoding name
        text: Text to tokenize

    Returns:
        Number of tokens in the text

    Raises:
        EncodingLoadError: If the encoding cannot be loaded or the load settings are invalid
        TokenizationError: If the text cannot be encoded
    """
    encoding = encoding_for_model(model)
    try:
        return len(encoding.encode(text))
    except Exception as e:
        raise TokenizationError(f"Failed to encode text with {encoding.name}: {e}") from e


def _estimate_one(text, model: str, encoder: Optional[tiktoken.Encoding], threshold: int) -> TokenEstimate:
    if not isinstance(text, str) or not text:
        return TokenEstimate(0, METHOD_EMPTY)

    if encoder is None or has_long_sequential_repeat(text, threshold):
        return TokenEstimate(estimate_tokens_by_char_count(text, model), METHOD_HEURISTIC)

    try:
        return TokenEstimate(len(encoder.encode(text)), METHOD_EXACT)
    except Exception as e:
        logger.debug(f"Encoding failed ({type(e).__name__}: {e}), estimating by character count")
        return TokenEstimate(estimate_tokens_by_char_count(text, model), METHOD_HEURISTIC)


def estimate_tokens(text: str, model: Optional[str] = None,
                    encoder: Optional[tiktoken.Encoding] = None,
                    repeat_threshold: Optional[int] = None) -> int:
    """
    Estimate tokens for a single string. Never raises.

    Without an encoder the character-count heuristic is used.
    """
    try:
        model = model or EstimatorConfig.get_model()
        threshold = repeat_threshold if repeat_threshold is not None else EstimatorConfig.get_repeat_threshold()
        return _estimate_one(text, model, encoder, threshold).tokens
    except Exception as e:
        logger.warning(f"Token estimation failed: {e}")
        return 0


def _load_encoder(model: str) -> Optional[tiktoken.Encoding]:
    try:
        return encoding_for_model(model)
    except EncodingLoadError as e:
        logger.warning(f"Tokenizer unavailable for {model}, estimating by character count: {e}")
        return None


def estimate_tokens_per_string(texts: Sequence[str], model: Optional[str] = None,
                               repeat_threshold: Optional[int] = None) -> List[TokenEstimate]:
    """
    Estimate tokens for each string in `texts`.

    Args:
        texts: List or tuple of strings; other items count as empty
        model: Model or encoding name
        repeat_threshold: Run length that forces the heuristic; defaults to config,
            0 or less turns the repeat check off

    Returns:
        One TokenEstimate per item, or an empty list if `texts` is not a list or tuple
    """
    if not isinstance(texts, (list, tuple)):
        return []

    model = model or EstimatorConfig.get_model()
    threshold = repeat_threshold if repeat_threshold is not None else EstimatorConfig.get_repeat_threshold()
    encoder = _load_encoder(model) if texts else None

    estimates = []
    for text in texts:
        try:
            estimates.append(_estimate_one(text, model, encoder, threshold))
        except Exception as e:
            logger.debug(f"Skipping item after error: {e}")
            estimates.append(TokenEstimate(0, METHOD_EMPTY))
    return estimates


def estimate_tokens_from_string_list(texts: Sequence[str], model: Optional[str] = None,
                                     repeat_threshold: Optional[int] = None) -> int:
    """
    Estimate the total number of tokens in a list of strings.

    Each string is encoded with the model's tokenizer, except strings with a
    long run of one repeated character and strings the tokenizer rejects,
    which are estimated by character count. If the tokenizer cannot be
    loaded, every string is estimated by character count.

    Args:
        texts: List or tuple of strings
        model: Model or encoding name
        repeat_threshold: Run length that forces the heuristic; defaults to config,
            0 or less turns the repeat check off

    Returns:
        Total estimated tokens; 0 for invalid input or on complete failure
    """
    try:
        estimates = estimate_tokens_per_string(texts, model, repeat_threshold)
    except Exception as e:
        logger.error(f"Token estimation failed for {model}: {e}")
        return 0
    return sum(estimate.tokens for estimate in estimates)
