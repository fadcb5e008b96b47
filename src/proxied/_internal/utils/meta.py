from __future__ import annotations

from typing import Any, ClassVar, Optional

from .. import API


@API.private
class Singleton:
    __instance: ClassVar[Optional[Any]] = None

    def __new__(cls) -> Any:
        if cls.__instance is None:
            cls.__instance = super().__new__(cls)
        return cls.__instance
