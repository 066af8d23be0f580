"""Structured JSON logging for SDK consumers"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TYPE_CHECKING

from pythonjsonlogger import jsonlogger

from fraud_sdk.config import settings

if TYPE_CHECKING:
    from fraud_sdk.domain.case import CaseModel

PACKAGE_LOGGER = "fraud_sdk"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure structured JSON logging on the package logger"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def log_case_built(case: "CaseModel") -> None:
    """Log structured summary of a case built from a payload"""
    logging.getLogger(PACKAGE_LOGGER).info(
        "Case built",
        extra={
            "step": "case_built",
            "order_id": case.purchase.order_id if case.purchase else None,
            "recipient_count": len(case.recipients),
            "transaction_count": len(case.transactions),
            "seller_count": len(case.sellers),
        },
    )
