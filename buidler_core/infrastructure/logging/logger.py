import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from buidler_core.config.settings import settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if settings.log_redact_content:
            msg = (msg or "")[:64]
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": msg,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logger() -> logging.Logger:
    logger = logging.getLogger("buidler_core")
    logger.setLevel(settings.log_level)
    if settings.log_to_file and not logger.handlers:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "buidler.log", encoding="utf-8")
        fh.setLevel(settings.log_level)
        fh.setFormatter(JsonFormatter())
        logger.addHandler(fh)
    return logger


def get_logger(name: str) -> logging.Logger:
    """返回 buidler_core 下的子 logger，例如 get_logger("bre")。"""

    return logger.getChild(name)


logger = setup_logger()
