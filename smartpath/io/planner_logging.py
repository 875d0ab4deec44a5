# smartpath/io/planner_logging.py
import json
import logging
import sys

ROOT_LOGGER = "smartpath"


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
        return json.dumps(payload, default=str)


class PlainFormatter(logging.Formatter):
    """`nivel logger: msg k=v ...` para la consola."""

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname:<7} {record.name}: {record.getMessage()}"
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict) and extra:
            base += " " + " ".join(f"{k}={v}" for k, v in extra.items())
        return base


def configure_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Un único handler a stdout sobre el logger raíz del paquete.
    Llamadas repetidas solo ajustan nivel y formato.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(sys.stdout))
    for h in logger.handlers:
        h.setFormatter(JsonFormatter() if json_format else PlainFormatter())
    logger.setLevel(level.upper())
    return logger


def emit(logger: logging.Logger, level: str, msg: str, **fields) -> None:
    """Log estructurado: los campos viajan en record.extra."""
    logger.log(getattr(logging, level.upper()), msg, extra={"extra": fields})
