"""Logging setup shared by the web app and the document reader."""
import logging
import sys
from datetime import datetime

from config import Config


class CleanFormatter(logging.Formatter):
    """Custom formatter: 2026-02-08 11:28:10 | INFO  | fnol_agent.server       | message"""
    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(5)
        module = record.name.ljust(24)
        message = f"{timestamp} | {level} | {module} | {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logger(name, level=None):
    """Create a logger with the clean format."""
    logger = logging.getLogger(name)
    logger.setLevel(level or Config.LOG_LEVEL)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CleanFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def quiet_library_loggers():
    """Silence pdf parsing chatter and per-request werkzeug lines."""
    logging.getLogger("pdfminer").setLevel(logging.CRITICAL)
    logging.getLogger("pdfplumber").setLevel(logging.CRITICAL)
    logging.getLogger("pypdf").setLevel(logging.ERROR)
    logging.getLogger("werkzeug").setLevel(logging.ERROR)
