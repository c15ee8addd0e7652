"""Logging for the trigger functions.

Every module logs through a ``ContextualLogger``: a ``LoggerAdapter`` that
carries a dict of dimensions (event type, uid, profile id, ...) and merges it
into each record's ``extra``. Outside local development records are rendered
as one JSON object per line, with ``levelname`` exposed as ``severity`` so
Cloud Logging assigns the right level.

Usage:
    from oshub.core.logging import logger

    log = logger.with_context(event_type="account.created", uid=uid)
    log.info("User created")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from pythonjsonlogger import json

from oshub.core.config import Environment, settings

_ROOT_LOGGER_NAME = "oshub"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches structured dimensions to every record."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap *logger* with the given dimensions and message prefix."""
        super().__init__(logger, dict(dimensions or {}))
        self.prefix = prefix

    @property
    def dimensions(self) -> dict[str, Any]:
        """Dimensions attached to every record emitted by this logger."""
        return dict(self.extra)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        """Merge dimensions into ``extra``; call-site extras win on conflict."""
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.extra, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends *prefix* to every message."""
        return ContextualLogger(self.logger, self.extra, prefix)


class LoggerConfigurator:
    """Builds contextual loggers under the package root logger.

    The root handler is installed once per process, on first use.
    """

    _configured = False

    @staticmethod
    def _build_formatter() -> logging.Formatter:
        if settings.ENVIRONMENT == Environment.LOCAL:
            return logging.Formatter(_FORMAT)
        return json.JsonFormatter(_FORMAT, rename_fields={"levelname": "severity"})

    @classmethod
    def _ensure_configured(cls) -> None:
        if cls._configured:
            return

        root = logging.getLogger(_ROOT_LOGGER_NAME)
        root.setLevel(settings.LOG_LEVEL.upper())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(cls._build_formatter())
        root.addHandler(handler)

        cls._configured = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a contextual logger named *name* carrying *dimensions*."""
        cls._ensure_configured()
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger(_ROOT_LOGGER_NAME)
