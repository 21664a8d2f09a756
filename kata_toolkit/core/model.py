from __future__ import annotations

from dataclasses import dataclass


Domino = tuple[int, int]


@dataclass(frozen=True)
class BraceGroup:
    start: int  # offset of "{"
    end: int  # offset one past the matching "}"
    alternatives: tuple[str, ...]


@dataclass(frozen=True)
class CompassPoint:
    abbreviation: str
    azimuth: float
