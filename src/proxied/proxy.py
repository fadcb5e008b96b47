from __future__ import annotations

import inspect
import itertools
import logging
import typing
from abc import ABC
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

import typing_extensions
from typing_extensions import final, Protocol

from ._internal import API, debug_repr, debug_repr_all
from .exceptions import FrozenConfigError
from .interfaces import (
    complete_proxied_interfaces,
    interfaces_of,
    is_interface,
    PROXY_MANIFEST,
)
from .markers import Advised, DecoratingProxy
from .utils import ultimate_target_class

__all__ = [
    "ProxyConfigDescriptor",
    "ProxyConfig",
    "InvocationHandler",
    "new_proxy_class",
    "new_proxy_instance",
    "ProxyFactory",
]

logger = logging.getLogger(__name__)

_proxy_ids: Iterator[int] = itertools.count()

# Classes providing no behavior to proxy.
_INFRASTRUCTURE = frozenset(
    {object, ABC, typing.Generic, typing.Protocol, typing_extensions.Protocol}  # type: ignore
)
_NOT_PROXIED = frozenset(
    {
        "__init__",
        "__new__",
        "__init_subclass__",
        "__annotate__",
        "__annotate_func__",
        "__subclasshook__",
        "__class_getitem__",
        "__getattr__",
        "__getattribute__",
        "__setattr__",
        "__delattr__",
        "__slots__",
        "__weakref__",
        "__dict__",
    }
)


@API.public
class ProxyConfigDescriptor(Protocol):
    """
    Read-only view of a proxy configuration, all that's needed to determine the interfaces
    of a proxy.
    """

    @property
    def proxied_interfaces(self) -> Tuple[type, ...]:
        """Interfaces explicitly declared, in their insertion order."""
        ...

    @property
    def opaque(self) -> bool:
        """Whether the proxy should hide the fact it's a proxy."""
        ...

    @property
    def frozen(self) -> bool:
        ...

    @property
    def target_class(self) -> Optional[type]:
        ...

    def is_interface_proxied(self, intf: type) -> bool:
        ...


@API.public
class ProxyConfig:
    """
    Mutable configuration of a proxy. Interfaces are kept in their insertion order and
    added only once. Once frozen, the configuration cannot be changed anymore.

    .. doctest:: proxy_config

        >>> from abc import ABC, abstractmethod
        >>> from proxied import ProxyConfig
        >>> class Service(ABC):
        ...     @abstractmethod
        ...     def run(self) -> None:
        ...         ...
        >>> conf = ProxyConfig(Service)
        >>> conf.add_interface(Service)
        >>> conf.proxied_interfaces == (Service,)
        True
        >>> conf.freeze()
        >>> conf.frozen
        True

    """

    def __init__(
        self,
        *interfaces: type,
        target: object = None,
        target_class: Optional[type] = None,
        opaque: bool = False,
    ) -> None:
        if target_class is not None and not inspect.isclass(target_class):
            raise TypeError(f"target_class must be a class, not a {type(target_class)!r}")
        self._interfaces: List[type] = []
        self._target = target
        self._target_class = target_class
        self._opaque = False
        self._frozen = False
        self.opaque = opaque
        for intf in interfaces:
            self.add_interface(intf)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(interfaces={debug_repr_all(self._interfaces)}, "
            f"target_class={debug_repr(self.target_class)}, opaque={self._opaque}, "
            f"frozen={self._frozen})"
        )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise FrozenConfigError(self)

    @property
    def proxied_interfaces(self) -> Tuple[type, ...]:
        return tuple(self._interfaces)

    def add_interface(self, intf: type) -> None:
        """
        Adds an interface to proxy. Adding it twice has no effect.

        Raises:
            TypeError: If the argument is not an interface.
            FrozenConfigError: If the configuration is frozen.
        """
        self._check_not_frozen()
        if not is_interface(intf):
            raise TypeError(f"{debug_repr(intf)} is not an interface.")
        if intf not in self._interfaces:
            self._interfaces.append(intf)

    def remove_interface(self, intf: type) -> bool:
        """
        Removes an interface, returns whether it was proxied at all.
        """
        self._check_not_frozen()
        try:
            self._interfaces.remove(intf)
        except ValueError:
            return False
        return True

    def set_interfaces(self, *interfaces: type) -> None:
        self._check_not_frozen()
        self._interfaces.clear()
        for intf in interfaces:
            self.add_interface(intf)

    def is_interface_proxied(self, intf: type) -> bool:
        """Whether the interface, or one of its subclasses, is proxied."""
        return any(
            proxied is intf or intf in getattr(proxied, "__mro__", ())
            for proxied in self._interfaces
        )

    @property
    def opaque(self) -> bool:
        return self._opaque

    @opaque.setter
    def opaque(self, value: bool) -> None:
        self._check_not_frozen()
        if not isinstance(value, bool):
            raise TypeError(f"opaque must be a boolean, not a {type(value)}.")
        self._opaque = value

    @property
    def target(self) -> object:
        return self._target

    @target.setter
    def target(self, value: object) -> None:
        self._check_not_frozen()
        self._target = value

    @property
    def target_class(self) -> Optional[type]:
        """
        Class explicitly defined, or otherwise the class of the target if any.
        """
        if self._target_class is not None:
            return self._target_class
        if self._target is not None:
            return type(self._target)
        return None

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def copy_from(self, other: ProxyConfig) -> None:
        """
        Copies the whole configuration of another one, frozen state excluded.
        """
        self._check_not_frozen()
        self._interfaces = list(other._interfaces)
        self._target = other._target
        self._target_class = other._target_class
        self._opaque = other._opaque


@API.public
class InvocationHandler(Protocol):
    """
    Called by a proxy for every method or property of its interfaces.
    Reading a property is forwarded with no arguments, assigning it with the new value as
    single positional argument.
    """

    def __call__(
        self, proxy: object, name: str, args: Tuple[object, ...], kwargs: Mapping[str, object]
    ) -> object:
        ...


def _dispatching_method(cls_name: str, name: str) -> Callable[..., object]:
    def method(self: Any, *args: object, **kwargs: object) -> object:
        return self._proxy_handler(self, name, args, kwargs)

    method.__name__ = name
    method.__qualname__ = f"{cls_name}.{name}"
    return method


def _dispatching_property(name: str, original: property) -> property:
    def getter(self: Any) -> object:
        return self._proxy_handler(self, name, (), {})

    def setter(self: Any, value: object) -> None:
        self._proxy_handler(self, name, (value,), {})

    return property(getter, setter if original.fset is not None else None, doc=original.__doc__)


def _proxied_members(interfaces: Sequence[type]) -> Iterator[Tuple[str, object]]:
    for intf in interfaces:
        for cls in intf.__mro__:
            if cls in _INFRASTRUCTURE:
                continue
            for name, member in vars(cls).items():
                if name in _NOT_PROXIED or name.startswith("_abc_"):
                    continue
                if inspect.isfunction(member) or isinstance(member, property):
                    yield name, member


def _check_no_abstract_class_level_methods(interfaces: Sequence[type]) -> None:
    # classmethods and staticmethods have no proxy instance to dispatch through
    for intf in interfaces:
        for cls in intf.__mro__:
            for name, member in vars(cls).items():
                if isinstance(member, (classmethod, staticmethod)) and getattr(
                    member, "__isabstractmethod__", False
                ):
                    raise TypeError(
                        f"{debug_repr(intf)} cannot be proxied, abstract {type(member).__name__} "
                        f"{name!r} of {debug_repr(cls)} cannot be forwarded to an instance."
                    )


@API.public
def new_proxy_class(interfaces: Sequence[type]) -> type:
    """
    Generates a class implementing all the interfaces. Each of their methods and properties
    is forwarded to the invocation handler given to the constructor, whether it's abstract
    or not.
    Properties are forwarded with no arguments when read and with the new value when
    assigned, if they have a setter. Class methods and static methods are inherited as is,
    interfaces with abstract ones are rejected.

    Args:
        interfaces: Interfaces to implement, in order. May be empty.

    Returns:
        New proxy class, recognized by :py:func:`.is_proxy_class`.
    """
    interfaces = tuple(interfaces)
    for intf in interfaces:
        if not is_interface(intf):
            raise TypeError(f"{debug_repr(intf)} is not an interface.")
    if len(set(interfaces)) != len(interfaces):
        raise ValueError(f"Repeated interface in {debug_repr_all(interfaces)}")
    _check_no_abstract_class_level_methods(interfaces)

    cls_name = f"Proxy{next(_proxy_ids)}"

    def __init__(self: Any, handler: InvocationHandler) -> None:
        if not callable(handler):
            raise TypeError(f"handler must be callable, not a {type(handler)!r}")
        object.__setattr__(self, "_proxy_handler", handler)

    namespace: Dict[str, object] = {
        "__init__": __init__,
        "__module__": __name__,
        "__qualname__": cls_name,
        PROXY_MANIFEST: interfaces,
    }
    for name, member in _proxied_members(interfaces):
        if name in namespace:
            continue
        if isinstance(member, property):
            namespace[name] = _dispatching_property(name, member)
        else:
            namespace[name] = _dispatching_method(cls_name, name)

    # interfaces inherited by another one are implied, listing them would break the MRO
    bases = tuple(
        intf
        for intf in interfaces
        if not any(other is not intf and intf in other.__mro__ for other in interfaces)
    )
    cls = type(cls_name, bases or (object,), namespace)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Generated %s implementing %s", cls_name, debug_repr_all(interfaces))
    return cls


@API.public
def new_proxy_instance(interfaces: Sequence[type], handler: InvocationHandler) -> object:
    """
    Shortcut for :code:`new_proxy_class(interfaces)(handler)`.
    """
    return new_proxy_class(interfaces)(handler)


@API.private
@final
class _TargetInvocationHandler:
    """
    Forwards everything to the target, except the methods of the markers which are handled
    by the configuration itself.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ProxyConfig) -> None:
        self._config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"

    def __call__(
        self, proxy: object, name: str, args: Tuple[object, ...], kwargs: Mapping[str, object]
    ) -> object:
        if not self._config.opaque:
            if name == "get_proxy_config" and isinstance(proxy, Advised):
                return self._config
            if name == "get_decorated_class" and isinstance(proxy, DecoratingProxy):
                target = self._config.target
                if isinstance(target, Advised):
                    return ultimate_target_class(target)
                return self._config.target_class

        target = self._config.target
        if target is None:
            raise AttributeError(f"{name!r} cannot be invoked on a proxy without target.")
        if isinstance(inspect.getattr_static(type(proxy), name, None), property):
            if args:
                setattr(target, name, args[0])
                return None
            return getattr(target, name)
        return getattr(target, name)(*args, **kwargs)


@API.public
class ProxyFactory(ProxyConfig):
    """
    Configuration which creates proxies forwarding all calls to its target. Proxies
    implement the declared interfaces and the markers determined by
    :py:func:`.complete_proxied_interfaces`.

    Args:
        target: Object to which calls are forwarded.
        *interfaces: Interfaces to proxy. If none is given, those directly implemented by
            the class of the target are used.
        opaque: Whether markers should be hidden.
    """

    def __init__(self, target: object = None, *interfaces: type, opaque: bool = False) -> None:
        if not interfaces and target is not None:
            interfaces = interfaces_of(type(target))
        super().__init__(*interfaces, target=target, opaque=opaque)

    def get_proxy_class(self) -> type:
        return new_proxy_class(complete_proxied_interfaces(self, decorating=True))

    def get_proxy(self) -> object:
        return self.get_proxy_class()(_TargetInvocationHandler(self))
