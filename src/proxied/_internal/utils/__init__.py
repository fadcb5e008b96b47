from .. import API
from .debug import debug_repr, debug_repr_all
from .meta import Singleton

__all__ = ["API", "debug_repr", "debug_repr_all", "Singleton"]
