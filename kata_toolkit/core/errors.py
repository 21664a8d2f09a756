from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KataError(Exception):
    """Base error envelope. The CLI prints these; library code raises them as-is."""

    code: str
    message: str
    source: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.source:
            parts.append(self.source)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<input>"
        return f"{loc}: {self.code}: {self.message}"


class InputLoadError(KataError):
    pass


class InputValidationError(KataError):
    pass


class MalformedPatternError(KataError):
    pass


class SelectorError(KataError):
    pass
