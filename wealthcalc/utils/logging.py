from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, UTC

# Calculator currently being run by the tool layer
calculator_var: ContextVar[str] = ContextVar("calculator", default="-")


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.calculator = calculator_var.get()
        return True


class SimpleStructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")
        return (
            f"{ts} level={record.levelname} logger={record.name} "
            f"calculator={getattr(record, 'calculator', '-')} "
            f"msg={record.getMessage()}"
        )


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(lvl)

    # Replace handlers so repeated setup never duplicates output
    root.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.addFilter(ContextFilter())
    handler.setFormatter(SimpleStructuredFormatter())

    root.addHandler(handler)


def set_calculator(calculator_name: str) -> None:
    calculator_var.set(calculator_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
