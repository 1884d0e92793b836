"""Logging helpers for BlazeSQL."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..security.redaction import redact_params

ROOT_LOGGER = "blazesql"


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def log_statement(
    logger: logging.Logger,
    kind: str,
    sql: str,
    params: Sequence[Any],
    *,
    columns: Optional[Sequence[Optional[str]]] = None,
    redact: bool = True,
) -> None:
    """
    Record a rendered statement at DEBUG, masking sensitive parameters.

    ``columns`` runs parallel to ``params`` and lets values bound to columns
    such as ``password`` be masked.
    """

    if not logger.isEnabledFor(logging.DEBUG):
        return
    logged_params = redact_params(params, columns) if redact else list(params)
    logger.debug(
        "Built %s statement with %d parameter(s): %s",
        kind,
        len(logged_params),
        sql,
        extra={"sql": sql, "params": logged_params},
    )
