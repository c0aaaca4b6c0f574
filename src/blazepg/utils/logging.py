"""Logging helpers for blazepg."""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("blazepg")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"blazepg.{name}")
