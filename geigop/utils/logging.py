"""Structured log events."""

import json
import logging


def log_event(
    logger: logging.Logger,
    event: str,
    level: int = logging.DEBUG,
    **payload: object,
) -> None:
    """Emit a one-line JSON log record, skipping serialization when disabled."""
    if not logger.isEnabledFor(level):
        return
    body = {"event": event, **payload}
    logger.log(level, json.dumps(body, sort_keys=True))
