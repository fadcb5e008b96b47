from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from ._internal import API
from .markers import Advised

if TYPE_CHECKING:
    from .proxy import ProxyConfig, ProxyConfigDescriptor

__all__ = [
    "get_singleton_target",
    "ultimate_target_class",
    "equals_proxied_interfaces",
    "equals_in_proxy",
]


@API.public
def get_singleton_target(candidate: object) -> Optional[object]:
    """
    Target of the proxy if it exposes its configuration, :py:obj:`None` otherwise.
    """
    if isinstance(candidate, Advised):
        target: object = getattr(candidate.get_proxy_config(), "target", None)
        return target
    return None


@API.public
def ultimate_target_class(candidate: object) -> type:
    """
    Class of the object behind any number of nested proxies. Opaque proxies cannot be
    looked through, their own class is returned instead.

    .. doctest:: utils_ultimate_target_class

        >>> from abc import ABC, abstractmethod
        >>> from proxied import ProxyFactory, ultimate_target_class
        >>> class Greeter(ABC):
        ...     @abstractmethod
        ...     def greet(self) -> str:
        ...         ...
        >>> class English(Greeter):
        ...     def greet(self) -> str:
        ...         return "Hello"
        >>> inner = ProxyFactory(English(), Greeter).get_proxy()
        >>> outer = ProxyFactory(inner, Greeter).get_proxy()
        >>> ultimate_target_class(outer) is English
        True

    """
    current: object = candidate
    result: Optional[type] = None
    while isinstance(current, Advised):
        result = current.get_proxy_config().target_class
        current = get_singleton_target(current)
    if result is None:
        result = type(candidate)
    return result


@API.public
def equals_proxied_interfaces(a: ProxyConfigDescriptor, b: ProxyConfigDescriptor) -> bool:
    """Whether both configurations proxy the same interfaces in the same order."""
    return a.proxied_interfaces == b.proxied_interfaces


@API.public
def equals_in_proxy(a: ProxyConfig, b: ProxyConfig) -> bool:
    """
    Whether proxies created from both configurations would behave the same: same
    interfaces, same opacity and equal targets.
    """
    return a is b or (
        equals_proxied_interfaces(a, b) and a.opaque == b.opaque and a.target == b.target
    )
