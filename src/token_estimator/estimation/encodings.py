"""Lazily loaded, process-wide cache of tiktoken encodings."""

import logging
import threading
from typing import Dict, List

import tiktoken
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)  # for exponential backoff

from .config import EstimatorConfig
from .constants import SUPPORTED_ENCODINGS, FALLBACK_ENCODING, DEFAULT_MODEL
from .exceptions import EncodingLoadError

logger = logging.getLogger(__name__)

_cache: Dict[str, tiktoken.Encoding] = {}
_lock = threading.Lock()
_load_locks: Dict[str, threading.Lock] = {}

# Table downloads fail with OSError subclasses (requests errors included)
_LOAD_WAIT = wait_random_exponential(multiplier=0.5, max=8)


def _load(encoding_name: str) -> tiktoken.Encoding:
    table = encoding_name if encoding_name in SUPPORTED_ENCODINGS else FALLBACK_ENCODING
    if table != encoding_name:
        logger.debug(f"Encoding {encoding_name} is not supported, loading {table}")

    try:
        retrying = Retrying(
            stop=stop_after_attempt(EstimatorConfig.get_load_attempts()),
            wait=_LOAD_WAIT,
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )
        return retrying(tiktoken.get_encoding, table)
    except Exception as e:
        logger.error(f"Failed to load tokenizer table {table}: {e}")
        raise EncodingLoadError(f"Could not load encoding {table}: {e}") from e


def get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """
    Return the encoding for `encoding_name`, loading it on first use.

    Unsupported names are served by the fallback table. Failed loads are
    not cached, so a later call tries again.

    Raises:
        EncodingLoadError: If the table cannot be loaded or the load settings are invalid
    """
    encoding = _cache.get(encoding_name)
    if encoding is not None:
        return encoding

    with _lock:
        name_lock = _load_locks.setdefault(encoding_name, threading.Lock())

    # One loader per name; other names stay available while it downloads
    with name_lock:
        encoding = _cache.get(encoding_name)
        if encoding is None:
            encoding = _load(encoding_name)
            with _lock:
                _cache[encoding_name] = encoding
        return encoding


def encoding_name_for_model(model: str) -> str:
    """Resolve a model (or encoding) name to the name of its encoding."""
    if not model:
        model = DEFAULT_MODEL
    if model in tiktoken.list_encoding_names():
        return model
    try:
        return tiktoken.encoding_name_for_model(model)
    except KeyError:
        logger.warning(f"Unknown model {model}, using encoding of {DEFAULT_MODEL}")
        return tiktoken.encoding_name_for_model(DEFAULT_MODEL)


def encoding_for_model(model: str) -> tiktoken.Encoding:
    return get_encoding(encoding_name_for_model(model))


def cached_encodings() -> List[str]:
    with _lock:
        return sorted(_cache)


def clear_cache() -> None:
    with _lock:
        _cache.clear()
