from __future__ import annotations

from kata_toolkit.core.model import CompassPoint


# Clockwise from N. Two-letter parts always name N/S before E/W (SE, NW).
ABBREVIATIONS: list[str] = [
    "N", "NbE", "NNE", "NEbN", "NE", "NEbE", "ENE", "EbN",
    "E", "EbS", "ESE", "SEbE", "SE", "SEbS", "SSE", "SbE",
    "S", "SbW", "SSW", "SWbS", "SW", "SWbW", "WSW", "WbS",
    "W", "WbN", "WNW", "NWbW", "NW", "NWbN", "NNW", "NbW",
]

POINT_COUNT = len(ABBREVIATIONS)
STEP_DEGREES = 360 / POINT_COUNT  # 11.25


def create_compass_points() -> list[CompassPoint]:
    """Return the 32 compass points clockwise from N with their azimuths.

    See https://en.wikipedia.org/wiki/Points_of_the_compass#32_cardinal_points
    """

    return [
        CompassPoint(abbreviation=abbr, azimuth=i * STEP_DEGREES)
        for i, abbr in enumerate(ABBREVIATIONS)
    ]
