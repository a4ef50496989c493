"""Token estimation constants."""

# Average characters per token, keyed by model or encoding name
MODEL_CHAR_PER_TOKEN_RATIOS = {
    'gpt-4o': 3.8,
    'gpt-4': 4.0,
    'gpt-3.5-turbo': 4.0,
    'cl100k_base': 4.0,
    'o200k_base': 3.5,
    'p50k_base': 4.2,
    'r50k_base': 4.2,
}

DEFAULT_CHARS_PER_TOKEN = 4.0

# Tables we load; anything else is served by FALLBACK_ENCODING
SUPPORTED_ENCODINGS = ('o200k_base', 'cl100k_base')
FALLBACK_ENCODING = 'cl100k_base'

DEFAULT_MODEL = 'gpt-4o'

DEFAULT_REPEAT_THRESHOLD = 1000

DEFAULT_LOAD_ATTEMPTS = 3
