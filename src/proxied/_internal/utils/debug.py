from __future__ import annotations

import inspect

from .. import API


@API.private
def debug_repr(__obj: object) -> str:
    """Fully qualified name for classes and functions, repr() for anything else."""
    if inspect.isclass(__obj) or inspect.isfunction(__obj):
        module = getattr(__obj, "__module__", None)
        if isinstance(module, str) and module not in {"__main__", "builtins"}:
            prefix = module + "."
        else:
            prefix = ""
        return f"{prefix}{__obj.__qualname__}"
    return repr(__obj)


@API.private
def debug_repr_all(objects: object) -> str:
    return "[" + ", ".join(debug_repr(o) for o in objects) + "]"  # type: ignore
