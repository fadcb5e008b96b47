"""
Marker interfaces added by proxied to the proxies it generates. They expose framework
internals and are never part of what the user asked for, see
:py:func:`.proxied_user_interfaces`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, TYPE_CHECKING

from ._internal import API

if TYPE_CHECKING:
    from .proxy import ProxyConfigDescriptor

__all__ = ["ProxiedObject", "Advised", "DecoratingProxy", "MARKER_INTERFACES"]


@API.public
class ProxiedObject(ABC):
    """
    Implemented by every proxy generated by proxied, unless it's opaque. It doesn't define
    any method, it only allows one to check whether an object is a proxy:

    .. doctest:: markers_proxied_object

        >>> from abc import ABC, abstractmethod
        >>> from proxied import ProxiedObject, ProxyFactory
        >>> class Greeter(ABC):
        ...     @abstractmethod
        ...     def greet(self) -> str:
        ...         ...
        >>> class English(Greeter):
        ...     def greet(self) -> str:
        ...         return "Hello"
        >>> proxy = ProxyFactory(English(), Greeter).get_proxy()
        >>> isinstance(proxy, ProxiedObject)
        True
        >>> proxy.greet()
        'Hello'

    """

    __slots__ = ()


@API.public
class Advised(ABC):
    """
    Gives access to the configuration from which a proxy was generated.
    """

    __slots__ = ()

    @abstractmethod
    def get_proxy_config(self) -> ProxyConfigDescriptor:
        raise NotImplementedError()  # pragma: no cover


@API.public
class DecoratingProxy(ABC):
    """
    Implemented by proxies decorating a target object, exposes the class of the latter.
    """

    __slots__ = ()

    @abstractmethod
    def get_decorated_class(self) -> type | None:
        raise NotImplementedError()  # pragma: no cover


MARKER_INTERFACES: FrozenSet[type] = frozenset({ProxiedObject, Advised, DecoratingProxy})
