from dataclasses import dataclass

from typing_extensions import final

from . import API
from .utils import Singleton


@API.private
@final
@dataclass(eq=False)
class ConfigImpl(Singleton):
    __slots__ = ("_opaque_hides_proxy_marker",)
    _opaque_hides_proxy_marker: bool

    def __init__(self) -> None:
        object.__setattr__(self, "_opaque_hides_proxy_marker", True)

    @property
    def opaque_hides_proxy_marker(self) -> bool:
        return self._opaque_hides_proxy_marker

    @opaque_hides_proxy_marker.setter
    def opaque_hides_proxy_marker(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"opaque_hides_proxy_marker must be a boolean, not a {type(value)}.")
        object.__setattr__(self, "_opaque_hides_proxy_marker", value)


config = ConfigImpl()
