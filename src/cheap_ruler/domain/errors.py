class RulerError(Exception):
    """Base class for ruler errors."""


class InvalidUnitError(RulerError, ValueError):
    """Unit name missing from the unit table. The ruler falls back to kilometers."""

    def __init__(self, unit: str):
        super().__init__(f"{unit!r} is not a valid unit")
        self.unit = unit


class DegenerateInputError(RulerError, ValueError):
    """Line too short for the requested operation."""
