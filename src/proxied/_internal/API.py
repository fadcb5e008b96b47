from typing import TypeVar

T = TypeVar("T")


def public(x: T) -> T:
    """
    Part of the public API of proxied. Breaking changes follow semantic versioning.
    """
    return x  # pragma: no cover


def private(x: T) -> T:
    """
    Internal use only, may change without warning.
    """
    return x  # pragma: no cover
