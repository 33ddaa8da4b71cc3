# io/ruler_logging.py
import json
import logging
import sys

from cheap_ruler.config.models import LogModel


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def get_logger(name: str = "cheap_ruler", level: str = "INFO", stream=None) -> logging.Logger:
    """
    Package logger with a single JSON handler on stdout.
    Module loggers (cheap_ruler.*) propagate into it.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def configure_logging(cfg: LogModel, stream=None) -> logging.Logger:
    return get_logger(cfg.name, cfg.level, stream=stream)
