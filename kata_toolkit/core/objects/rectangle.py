from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

from kata_toolkit.core.errors import InputLoadError, InputValidationError


T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def to_json(obj: Any) -> str:
    """Compact JSON, e.g. [1, 2, 3] => '[1,2,3]'. Dataclasses encode as their fields."""
    return json.dumps(obj, separators=(",", ":"), default=_encode_default)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of ``cls`` from a JSON object.

    Raises InputLoadError when ``text`` is not valid JSON, and
    InputValidationError when it is not an object or its keys do not fit the
    constructor of ``cls``.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputLoadError(code="E_JSON_PARSE", message=str(e)) from e

    if not isinstance(data, dict):
        raise InputValidationError(
            code="E_JSON_SHAPE",
            message=f"expected a JSON object for {cls.__name__}",
        )

    try:
        return cls(**data)
    except TypeError as e:
        raise InputValidationError(code="E_JSON_SHAPE", message=str(e)) from e


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
