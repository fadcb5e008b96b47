from __future__ import annotations

import enum
import inspect
import re
import types
from dataclasses import dataclass
from typing import Optional

from typing_extensions import final

from ._internal import API

__all__ = [
    "ImplementationKind",
    "ClassDescriptor",
    "describe",
    "is_synthesized_lambda",
    "is_lambda",
    "classify",
]

# The interpreter wraps the names of what it synthesizes in angle brackets: <lambda>, ...
_SYNTHESIZED_NAME = re.compile(r"<.+>")

_BOUND_METHOD_TYPES = (types.MethodType, types.BuiltinMethodType, types.MethodWrapperType)


@API.public
class ImplementationKind(enum.Enum):
    """
    How an implementation was created.
    """

    NAMED = enum.auto()
    """Class or function with a name chosen by the user."""
    ANONYMOUS = enum.auto()
    """Class without a name or defined within a function."""
    SYNTHESIZED = enum.auto()
    """Lambda expression or bound method reference, created by the interpreter."""


@API.public
@final
@dataclass(frozen=True)
class ClassDescriptor:
    """
    Description of an implementation, obtained through :py:func:`.describe`.

    Attributes:
        synthetic: Whether the implementation was synthesized by the interpreter rather than
            defined by a class statement.
        name: Simple name of the implementation.
        qualname: Qualified name of the implementation.
        module: Module in which it was defined if known.
    """

    __slots__ = ("synthetic", "name", "qualname", "module")
    synthetic: bool
    name: str
    qualname: str
    module: Optional[str]

    @property
    def kind(self) -> ImplementationKind:
        if is_synthesized_lambda(self):
            return ImplementationKind.SYNTHESIZED
        if not self.synthetic and (not self.name or "<locals>" in self.qualname):
            return ImplementationKind.ANONYMOUS
        return ImplementationKind.NAMED


def _str_attr(obj: object, name: str) -> str:
    value = getattr(obj, name, "")
    return value if isinstance(value, str) else ""


def _module_of(obj: object) -> Optional[str]:
    module = getattr(obj, "__module__", None)
    return module if isinstance(module, str) else None


def _is_bound_method(obj: object) -> bool:
    if not isinstance(obj, _BOUND_METHOD_TYPES):
        return False
    owner = getattr(obj, "__self__", None)
    # builtin functions such as len() are bound to their module
    return owner is not None and not inspect.ismodule(owner)


@API.public
def describe(obj: object) -> ClassDescriptor:
    """
    Describes the implementation of a value. Functions and bound methods are described
    themselves, as they're created by the interpreter. Classes are described as is and any
    other object through its class.

    .. doctest:: lambdas_describe

        >>> from proxied import describe
        >>> describe(lambda: None).name
        '<lambda>'
        >>> describe(lambda: None).synthetic
        True
        >>> describe(object()).name
        'object'

    """
    if _is_bound_method(obj):
        func = getattr(obj, "__func__", obj)
        qualname = _str_attr(func, "__qualname__")
        return ClassDescriptor(
            synthetic=True,
            name=f"<bound method {qualname}>",
            qualname=qualname,
            module=_module_of(func),
        )
    if isinstance(obj, (types.FunctionType, types.BuiltinFunctionType)):
        return ClassDescriptor(
            synthetic=True,
            name=_str_attr(obj, "__name__"),
            qualname=_str_attr(obj, "__qualname__"),
            module=_module_of(obj),
        )
    cls = obj if inspect.isclass(obj) else type(obj)
    return ClassDescriptor(
        synthetic=False,
        name=_str_attr(cls, "__name__"),
        qualname=_str_attr(cls, "__qualname__"),
        module=_module_of(cls),
    )


@API.public
def is_synthesized_lambda(descriptor: ClassDescriptor) -> bool:
    """
    Whether the descriptor represents a lambda expression or a bound method reference.
    Both the synthetic flag and the naming convention of the interpreter must match, a
    class merely named like a lambda is not one. Returns :py:obj:`False` for anything
    which cannot be checked.
    """
    synthetic = getattr(descriptor, "synthetic", False)
    name = getattr(descriptor, "name", None)
    return (
        synthetic is True
        and isinstance(name, str)
        and _SYNTHESIZED_NAME.fullmatch(name) is not None
    )


@API.public
def is_lambda(obj: object) -> bool:
    """
    Whether the value is a lambda expression or a bound method reference.

    .. doctest:: lambdas_is_lambda

        >>> from proxied import is_lambda
        >>> is_lambda(lambda: "lambda")
        True
        >>> is_lambda("text".upper)
        True
        >>> def named() -> str:
        ...     return "named"
        >>> is_lambda(named)
        False

    """
    return is_synthesized_lambda(describe(obj))


@API.public
def classify(obj: object) -> ImplementationKind:
    """Kind of implementation of the value, see :py:func:`.describe`."""
    return describe(obj).kind
