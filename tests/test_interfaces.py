from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

import pytest
from typing_extensions import Protocol

from proxied import (
    Advised,
    complete_proxied_interfaces,
    DecoratingProxy,
    new_proxy_class,
    ProxiedObject,
    ProxyConfig,
)


class ITestBean(ABC):
    @abstractmethod
    def get_name(self) -> str:
        ...


class Comparable(Protocol):
    def compare_to(self, other: object) -> int:
        ...


class Bean(ITestBean):
    def get_name(self) -> str:
        return "bean"


@dataclass
class Descriptor:
    proxied_interfaces: Tuple[type, ...] = field(default_factory=tuple)
    opaque: bool = False
    frozen: bool = False
    target_class: Optional[type] = None

    def is_interface_proxied(self, intf: type) -> bool:
        return intf in self.proxied_interfaces


def test_no_interfaces() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig())
    assert len(interfaces) == 2
    assert Advised in interfaces
    assert ProxiedObject in interfaces


def test_no_interfaces_opaque() -> None:
    assert complete_proxied_interfaces(ProxyConfig(opaque=True)) == ()


@pytest.mark.usefixtures("proxy_marker_kept")
def test_no_interfaces_opaque_keeping_proxy_marker() -> None:
    assert complete_proxied_interfaces(ProxyConfig(opaque=True)) == (ProxiedObject,)


def test_advised_not_included() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean, Comparable))
    assert interfaces == (ITestBean, Comparable, ProxiedObject, Advised)


def test_advised_included() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean, Comparable, Advised))
    assert len(interfaces) == 4
    assert interfaces.count(Advised) == 1
    assert interfaces == (ITestBean, Comparable, Advised, ProxiedObject)


def test_advised_subclass_included() -> None:
    class CustomAdvised(Advised):
        @abstractmethod
        def describe(self) -> str:
            ...

    interfaces = complete_proxied_interfaces(ProxyConfig(CustomAdvised))
    assert interfaces == (CustomAdvised, ProxiedObject)


def test_proxy_marker_declared() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ProxiedObject, ITestBean))
    assert interfaces == (ProxiedObject, ITestBean, Advised)


def test_opaque_with_interfaces() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean, Comparable, opaque=True))
    assert interfaces == (ITestBean, Comparable)
    assert Advised not in interfaces


@pytest.mark.usefixtures("proxy_marker_kept")
def test_opaque_with_interfaces_keeping_proxy_marker() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean, opaque=True))
    assert interfaces == (ITestBean, ProxiedObject)


def test_opaque_keeps_declared_markers() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean, Advised, opaque=True))
    assert interfaces == (ITestBean, Advised)


def test_decorating() -> None:
    conf = ProxyConfig(ITestBean)
    assert complete_proxied_interfaces(conf, decorating=True) == (
        ITestBean,
        ProxiedObject,
        Advised,
        DecoratingProxy,
    )

    conf.opaque = True
    assert complete_proxied_interfaces(conf, decorating=True) == (ITestBean,)


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_declared_interfaces_come_first(n: int) -> None:
    declared = [type(f"I{i}", (ABC,), {}) for i in range(n)]
    interfaces = complete_proxied_interfaces(ProxyConfig(*declared))
    assert len(interfaces) == n + 2
    assert len(set(interfaces)) == len(interfaces)
    assert list(interfaces[:n]) == declared
    assert set(interfaces[n:]) == {ProxiedObject, Advised}


def test_target_class_interface() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(target_class=ITestBean))
    assert interfaces == (ITestBean, ProxiedObject, Advised)


def test_target_class_proxy() -> None:
    proxy_class = new_proxy_class([ITestBean, Comparable, ProxiedObject])
    interfaces = complete_proxied_interfaces(ProxyConfig(target_class=proxy_class))
    assert interfaces == (ITestBean, Comparable, ProxiedObject, Advised)


def test_target_class_ignored_when_interfaces_are_declared() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(Comparable, target_class=ITestBean))
    assert interfaces == (Comparable, ProxiedObject, Advised)


def test_plain_target() -> None:
    interfaces = complete_proxied_interfaces(ProxyConfig(target=Bean()))
    assert interfaces == (ProxiedObject, Advised)


def test_idempotence() -> None:
    conf = ProxyConfig(ITestBean, Comparable)
    assert complete_proxied_interfaces(conf) == complete_proxied_interfaces(conf)


def test_any_descriptor() -> None:
    descriptor = Descriptor(proxied_interfaces=(ITestBean, Advised))
    assert complete_proxied_interfaces(descriptor) == (ITestBean, Advised, ProxiedObject)

    descriptor = Descriptor(opaque=True, target_class=ITestBean)
    assert complete_proxied_interfaces(descriptor) == (ITestBean,)


def test_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="proxied"):
        complete_proxied_interfaces(ProxyConfig(ITestBean))
    assert "ITestBean" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="proxied"):
        complete_proxied_interfaces(ProxyConfig(ITestBean))
    assert caplog.text == ""


def test_no_debug_repr_without_debug_logging(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    import proxied.interfaces
    import proxied.proxy

    def fail(*args: object) -> str:
        raise AssertionError("debug repr computed while DEBUG is disabled")

    monkeypatch.setattr(proxied.interfaces, "debug_repr_all", fail)
    monkeypatch.setattr(proxied.proxy, "debug_repr_all", fail)
    with caplog.at_level(logging.INFO, logger="proxied"):
        interfaces = complete_proxied_interfaces(ProxyConfig(ITestBean))
        new_proxy_class(interfaces)
