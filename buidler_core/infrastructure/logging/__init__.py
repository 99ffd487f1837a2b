"""JSON 日志。"""

from .logger import JsonFormatter, get_logger, logger

__all__ = ["JsonFormatter", "get_logger", "logger"]
