from typing import Literal

UnitName = Literal[
    "kilometers",
    "miles",
    "nauticalmiles",
    "meters",
    "metres",
    "yards",
    "feet",
    "inches",
]

# units per kilometer
UNITS: dict[str, float] = {
    "kilometers": 1.0,
    "miles": 1000 / 1609.344,
    "nauticalmiles": 1000 / 1852,
    "meters": 1000.0,
    "metres": 1000.0,
    "yards": 1000 / 0.9144,
    "feet": 1000 / 0.3048,
    "inches": 1000 / 0.0254,
}

DEFAULT_UNIT: UnitName = "kilometers"
