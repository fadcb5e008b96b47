from __future__ import annotations

import logging

from typing_extensions import Protocol

from ._internal import API, config as _config
from .exceptions import FrozenConfigError, NoUserInterfacesError, ProxiedError
from .interfaces import (
    complete_proxied_interfaces,
    interfaces_of,
    is_interface,
    is_proxy_class,
    proxied_user_interfaces,
)
from .lambdas import (
    ClassDescriptor,
    classify,
    describe,
    ImplementationKind,
    is_lambda,
    is_synthesized_lambda,
)
from .markers import Advised, DecoratingProxy, MARKER_INTERFACES, ProxiedObject
from .proxy import (
    InvocationHandler,
    new_proxy_class,
    new_proxy_instance,
    ProxyConfig,
    ProxyConfigDescriptor,
    ProxyFactory,
)
from .utils import (
    equals_in_proxy,
    equals_proxied_interfaces,
    get_singleton_target,
    ultimate_target_class,
)

__all__ = [
    "Advised",
    "ClassDescriptor",
    "DecoratingProxy",
    "FrozenConfigError",
    "ImplementationKind",
    "InvocationHandler",
    "MARKER_INTERFACES",
    "NoUserInterfacesError",
    "ProxiedError",
    "ProxiedObject",
    "ProxyConfig",
    "ProxyConfigDescriptor",
    "ProxyFactory",
    "__version__",
    "classify",
    "complete_proxied_interfaces",
    "config",
    "describe",
    "equals_in_proxy",
    "equals_proxied_interfaces",
    "get_singleton_target",
    "interfaces_of",
    "is_interface",
    "is_lambda",
    "is_proxy_class",
    "is_synthesized_lambda",
    "new_proxy_class",
    "new_proxy_instance",
    "proxied_user_interfaces",
    "ultimate_target_class",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

config: Config = _config  # pyright: ignore


@API.public
class Config(Protocol):
    """
    This class itself shouldn't be used directly, rely on the singleton :py:obj:`.config` instead.

    Global configuration of proxied.
    """

    opaque_hides_proxy_marker: bool
    """
    Whether opaque proxies also hide the :py:class:`.ProxiedObject` marker. Activated by
    default, so opaque proxies don't implement any marker at all. When deactivated,
    :py:class:`.ProxiedObject` is treated as the identity of the proxy and is kept:

    .. doctest:: config_opaque_hides_proxy_marker

        >>> from proxied import complete_proxied_interfaces, config, ProxiedObject, ProxyConfig
        >>> complete_proxied_interfaces(ProxyConfig(opaque=True))
        ()
        >>> config.opaque_hides_proxy_marker = False
        >>> complete_proxied_interfaces(ProxyConfig(opaque=True)) == (ProxiedObject,)
        True

    .. testcleanup:: config_opaque_hides_proxy_marker

        config.opaque_hides_proxy_marker = True

    """
