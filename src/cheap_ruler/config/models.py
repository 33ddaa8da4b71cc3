from math import isfinite
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from cheap_ruler.domain.units import DEFAULT_UNIT, UNITS


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "cheap_ruler"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class RulerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    lat: float  # reference latitude, degrees
    unit: str = DEFAULT_UNIT
    strict: bool = False  # reject unknown units instead of falling back to kilometers

    @field_validator("lat")
    @classmethod
    def _check_lat(cls, v: float) -> float:
        if not isfinite(v) or not -90.0 <= v <= 90.0:
            raise ValueError(f"lat must be a finite latitude in [-90, 90], got {v}")
        return v

    @model_validator(mode="after")
    def _check_unit(self):
        if self.strict and self.unit not in UNITS:
            raise ValueError(f"unit must be one of {sorted(UNITS)}, got {self.unit!r}")
        return self


class SettingsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    ruler: RulerModel
    log: LogModel = LogModel()
