# cheap_ruler/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from cheap_ruler.config.models import SettingsModel
from cheap_ruler.domain.ruler.ruler_core import CheapRuler
from cheap_ruler.domain.ruler.ruler_factory import build_ruler
from cheap_ruler.io.ruler_logging import configure_logging


@dataclass
class App:
    settings: SettingsModel
    ruler: CheapRuler
    log: logging.Logger | None


def build(cfg: SettingsModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, SettingsModel) else SettingsModel.model_validate(cfg)

    # 1) Logging first so ruler construction warnings are formatted
    log = configure_logging(model.log) if use_logging else None

    # 2) Ruler
    ruler = build_ruler(model.ruler)
    return App(settings=model, ruler=ruler, log=log)
