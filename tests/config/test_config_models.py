import math

import pytest
from pydantic import ValidationError

from cheap_ruler.config.models import LogModel, RulerModel, SettingsModel


def test_ruler_model_defaults():
    m = RulerModel(lat=48.8629)
    assert m.unit == "kilometers"
    assert m.strict is False


@pytest.mark.parametrize("lat", [91.0, -90.5, math.inf, math.nan])
def test_ruler_model_rejects_bad_latitude(lat):
    with pytest.raises(ValidationError):
        RulerModel(lat=lat)


def test_ruler_model_unknown_unit_is_lenient_by_default():
    assert RulerModel(lat=10.0, unit="furlongs").unit == "furlongs"


def test_ruler_model_strict_rejects_unknown_unit():
    with pytest.raises(ValidationError):
        RulerModel(lat=10.0, unit="furlongs", strict=True)
    assert RulerModel(lat=10.0, unit="metres", strict=True).unit == "metres"


def test_models_forbid_extra_keys():
    with pytest.raises(ValidationError):
        RulerModel.model_validate({"lat": 10.0, "datum": "WGS84"})
    with pytest.raises(ValidationError):
        LogModel.model_validate({"level": "INFO", "json": True})


def test_settings_from_mapping():
    s = SettingsModel.model_validate({"ruler": {"lat": 42.0, "unit": "miles"}})
    assert s.ruler.unit == "miles"
    assert s.log.level == "INFO"
    assert s.log.name == "cheap_ruler"


def test_log_level_is_constrained():
    with pytest.raises(ValidationError):
        LogModel(level="TRACE")
