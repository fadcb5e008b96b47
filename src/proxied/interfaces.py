from __future__ import annotations

import inspect
import logging
import typing
from abc import ABC, ABCMeta
from typing import List, Tuple, TYPE_CHECKING

from ._internal import API, config, debug_repr_all
from .exceptions import NoUserInterfacesError
from .markers import Advised, DecoratingProxy, MARKER_INTERFACES, ProxiedObject

if TYPE_CHECKING:
    from .proxy import ProxyConfigDescriptor

__all__ = [
    "PROXY_MANIFEST",
    "is_interface",
    "is_proxy_class",
    "interfaces_of",
    "complete_proxied_interfaces",
    "proxied_user_interfaces",
]

logger = logging.getLogger(__name__)

# Attribute of generated proxy classes holding the interfaces they were built with.
PROXY_MANIFEST = "__proxied_interfaces__"


@API.private
def _is_protocol(obj: type) -> bool:
    return issubclass(obj, typing.cast(type, typing.Generic)) and bool(
        obj.__dict__.get("_is_protocol", False)
    )


@API.public
def is_interface(__obj: object) -> bool:
    """
    Whether the object can be used as an interface of a proxy. Protocols are interfaces,
    and so are abstract base classes which either are abstract or inherit directly from
    :py:class:`abc.ABC`.

    .. doctest:: interfaces_is_interface

        >>> from abc import ABC
        >>> from typing_extensions import Protocol
        >>> from proxied import is_interface
        >>> class Closeable(Protocol):
        ...     def close(self) -> None:
        ...         ...
        >>> is_interface(Closeable)
        True
        >>> class Marker(ABC):
        ...     pass
        >>> is_interface(Marker)
        True
        >>> is_interface(object)
        False

    """
    if not inspect.isclass(__obj):
        return False
    if _is_protocol(__obj):
        return True
    return isinstance(__obj, ABCMeta) and (ABC in __obj.__bases__ or inspect.isabstract(__obj))


@API.public
def is_proxy_class(__cls: object) -> bool:
    """Whether the class was generated by :py:func:`.new_proxy_class`."""
    return inspect.isclass(__cls) and PROXY_MANIFEST in __cls.__dict__


@API.public
def interfaces_of(__cls: type) -> Tuple[type, ...]:
    """
    Interfaces directly implemented by the class. For generated proxies, those are
    the interfaces used to build it in the same order. Otherwise they're the direct bases
    which are interfaces, in the order of their declaration.
    """
    if is_proxy_class(__cls):
        return tuple(getattr(__cls, PROXY_MANIFEST))
    return tuple(base for base in __cls.__bases__ if is_interface(base))


@API.public
def complete_proxied_interfaces(
    proxy_config: ProxyConfigDescriptor, *, decorating: bool = False
) -> Tuple[type, ...]:
    """
    Determines all the interfaces a proxy created from the configuration must implement:
    the declared ones first, in their order, followed by the markers :py:class:`.ProxiedObject`
    and :py:class:`.Advised`. If no interface was declared and the target class is an
    interface, or a generated proxy, its interfaces are used instead.

    An opaque configuration never adds any marker, unless
    :py:attr:`.Config.opaque_hides_proxy_marker` is deactivated, in which case
    :py:class:`.ProxiedObject` is still added.

    Args:
        proxy_config: Configuration of the proxy.
        decorating: Whether :py:class:`.DecoratingProxy` should be added too.

    Returns:
        Tuple of unique interfaces.
    """
    interfaces: List[type] = list(proxy_config.proxied_interfaces)
    if not interfaces:
        target_class = proxy_config.target_class
        if target_class is not None:
            if is_interface(target_class):
                interfaces.append(target_class)
            elif is_proxy_class(target_class):
                interfaces.extend(_user_interfaces_of(target_class))

    def add(intf: type) -> None:
        if intf not in interfaces:
            interfaces.append(intf)

    if not proxy_config.opaque:
        add(ProxiedObject)
        if not proxy_config.is_interface_proxied(Advised):
            add(Advised)
        if decorating:
            add(DecoratingProxy)
    elif not config.opaque_hides_proxy_marker:
        add(ProxiedObject)

    result = tuple(interfaces)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Resolved proxied interfaces: %s", debug_repr_all(result))
    return result


@API.private
def _user_interfaces_of(cls: type) -> List[type]:
    return [intf for intf in interfaces_of(cls) if intf not in MARKER_INTERFACES]


@API.public
def proxied_user_interfaces(proxy: object) -> Tuple[type, ...]:
    """
    Extracts the interfaces implemented by the proxy which are not markers, in the order
    they were declared.

    Args:
        proxy: Proxy to inspect.

    Returns:
        Non-empty tuple of interfaces.

    Raises:
        NoUserInterfacesError: If the object doesn't implement any user interface.
    """
    interfaces = _user_interfaces_of(type(proxy))
    if not interfaces:
        raise NoUserInterfacesError(proxy)
    return tuple(interfaces)
