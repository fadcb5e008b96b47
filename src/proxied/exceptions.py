from __future__ import annotations

from ._internal import API, debug_repr

__all__ = ["ProxiedError", "NoUserInterfacesError", "FrozenConfigError"]


@API.public
class ProxiedError(Exception):
    """Base class of all errors of proxied."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


@API.public
class NoUserInterfacesError(ProxiedError, ValueError):
    """
    Raised by :py:func:`.proxied_user_interfaces` when the object does not implement any
    interface besides the marker ones. It's always a programming error of the caller.
    """

    @API.private
    def __init__(self, proxy: object) -> None:
        super().__init__(
            f"{debug_repr(type(proxy))} does not implement any user interface, "
            f"is it a proxy at all?"
        )


@API.public
class FrozenConfigError(ProxiedError):
    """
    Raised when modifying a :py:class:`.ProxyConfig` which was frozen.
    """

    @API.private
    def __init__(self, config: object) -> None:
        super().__init__(f"{config!r} is frozen, it cannot be modified anymore.")
