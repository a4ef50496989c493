import os
from dotenv import load_dotenv

from .constants import DEFAULT_MODEL, DEFAULT_REPEAT_THRESHOLD, DEFAULT_LOAD_ATTEMPTS

load_dotenv()


def _positive_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f'{env_var} must be an integer, got {raw!r}') from e
    if value <= 0:
        raise ValueError(f'{env_var} must be positive, got {value}')
    return value


class EstimatorConfig:
    @classmethod
    def get_model(cls) -> str:
        """Get the model used when none is given explicitly."""
        return os.getenv('TOKEN_ESTIMATOR_MODEL') or DEFAULT_MODEL

    @classmethod
    def get_repeat_threshold(cls) -> int:
        """Get the run length at which a text is estimated instead of encoded."""
        return _positive_int('TOKEN_ESTIMATOR_REPEAT_THRESHOLD', DEFAULT_REPEAT_THRESHOLD)

    @classmethod
    def get_load_attempts(cls) -> int:
        """Get how many times loading a tokenizer table is attempted."""
        return _positive_int('TOKEN_ESTIMATOR_LOAD_ATTEMPTS', DEFAULT_LOAD_ATTEMPTS)

    @classmethod
    def validate(cls):
        cls.get_repeat_threshold()
        cls.get_load_attempts()
