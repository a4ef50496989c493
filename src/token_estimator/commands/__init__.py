from .cmd_count import count
from .cmd_encodings import encodings


__all__ = ['count', 'encodings']
