# cheap_ruler/domain/ruler/ruler_factory.py
import logging

from cheap_ruler.config.models import RulerModel
from cheap_ruler.domain.errors import InvalidUnitError
from cheap_ruler.domain.ruler.ruler_core import CheapRuler, ruler_factors
from cheap_ruler.domain.units import DEFAULT_UNIT, UNITS

log = logging.getLogger(__name__)


def resolve_unit(unit: str) -> tuple[float, InvalidUnitError | None]:
    try:
        return UNITS[unit], None
    except KeyError:
        return UNITS[DEFAULT_UNIT], InvalidUnitError(unit)


def new_ruler(lat: float, unit: str = DEFAULT_UNIT) -> tuple[CheapRuler, InvalidUnitError | None]:
    """
    Ruler for a reference latitude and unit.
    An unknown unit is not fatal: the ruler falls back to kilometers and the error is returned next to it.
    """
    multiplier, err = resolve_unit(unit)
    if err is not None:
        log.warning(
            "invalid_unit",
            extra={"extra": {"unit": unit, "fallback": DEFAULT_UNIT, "lat": lat}},
        )
    kx, ky = ruler_factors(lat, multiplier)
    return CheapRuler(kx=kx, ky=ky), err


def build_ruler(cfg: RulerModel) -> CheapRuler:
    ruler = CheapRuler.from_latitude(cfg.lat, cfg.unit, strict=cfg.strict)
    log.debug(
        "ruler_built",
        extra={"extra": {"lat": cfg.lat, "unit": cfg.unit, "kx": ruler.kx, "ky": ruler.ky}},
    )
    return ruler
