"""Character-count fallbacks for text the tokenizer should not see."""

import math
import logging

from .constants import (
    MODEL_CHAR_PER_TOKEN_RATIOS,
    DEFAULT_CHARS_PER_TOKEN,
    DEFAULT_REPEAT_THRESHOLD,
)

logger = logging.getLogger(__name__)


def has_long_sequential_repeat(text: str, threshold: int = DEFAULT_REPEAT_THRESHOLD) -> bool:
    """
    Check whether text contains one character repeated at least `threshold` times in a row.

    BPE merges on such runs are quadratic, so these texts are estimated
    rather than encoded.

    Args:
        text: Text to scan
        threshold: Minimum run length that counts as pathological

    Returns:
        True if a run of at least `threshold` identical characters exists
    """
    if not isinstance(text, str) or not text:
        return False
    if threshold <= 0 or len(text) < threshold:
        return False

    previous = text[0]
    run = 1
    if run >= threshold:
        return True
    for char in text[1:]:
        if char == previous:
            run += 1
            if run >= threshold:
                return True
        else:
            previous = char
            run = 1
    return False


def get_chars_per_token(model: str) -> float:
    """Return the heuristic characters-per-token ratio for a model or encoding name."""
    ratio = MODEL_CHAR_PER_TOKEN_RATIOS.get(model, DEFAULT_CHARS_PER_TOKEN)
    if not isinstance(ratio, (int, float)) or not math.isfinite(ratio) or ratio <= 0:
        logger.debug(f"Invalid chars-per-token ratio {ratio!r} for {model}, using {DEFAULT_CHARS_PER_TOKEN}")
        return DEFAULT_CHARS_PER_TOKEN
    return ratio


def estimate_tokens_by_char_count(text: str, model: str = 'cl100k_base') -> int:
    """
    Estimate a token count from the text length.

    Args:
        text: Text to estimate
        model: Model or encoding name used to pick the ratio

    Returns:
        ceil(len(text) / ratio), or 0 for empty or non-string input
    """
    if not isinstance(text, str) or not text:
        return 0
    return math.ceil(len(text) / get_chars_per_token(model))
