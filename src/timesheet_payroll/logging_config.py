"""Logging configuration for the payroll engine.

The engine itself only uses module-level loggers; hosts call ``setup_logging``
once at startup (see ``build_container``).
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """JSON structured log formatter for production."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        for extra in ("site_id", "period", "employee_id"):
            if hasattr(record, extra):
                log_entry[extra] = getattr(record, extra)
        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", json_output: bool = True, logger_name: str = "timesheet_payroll"):
    """Configure the package logger."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
        ))

    logger.handlers = [handler]
    return logger
