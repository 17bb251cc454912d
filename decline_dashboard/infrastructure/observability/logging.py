"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from decline_dashboard.domain.models import FilterParams


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "decline-dashboard"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_query(
    request_id: str,
    endpoint: str,
    filters: FilterParams,
    matched: int,
    duration_ms: float,
) -> None:
    """Log structured analytics query outcome for analysis"""
    active_filters = {
        name: value for name, value in vars(filters).items() if value
    }
    logging.info(
        "Analytics query completed",
        extra={
            "request_id": request_id,
            "step": "query_complete",
            "endpoint": endpoint,
            "filters": active_filters,
            "matched_transactions": matched,
            "duration_ms": duration_ms,
        },
    )
