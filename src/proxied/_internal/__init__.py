from . import API
from .config import config, ConfigImpl
from .utils import debug_repr, debug_repr_all, Singleton

__all__ = [
    "API",
    "config",
    "ConfigImpl",
    "debug_repr",
    "debug_repr_all",
    "Singleton",
]
