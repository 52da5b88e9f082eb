from .config import Config, DEFAULT_DISALLOWED_KEYS

__all__ = [
    "Config",
    "DEFAULT_DISALLOWED_KEYS",
]
