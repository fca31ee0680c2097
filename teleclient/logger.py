"""TeleclientLogger -- singleton JSON logger for the Bot API client.

All records go to stdout as one JSON object per line.  When a log directory
is configured (``LOG_DIR``), the same records are also written to a rotating
``teleclient.log`` file there.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Serialize a record to single-line JSON.

    The fixed keys are ``timestamp``, ``level``, ``logger``, ``message``,
    ``module`` and ``func_name``.  Anything passed through ``extra`` is merged
    in, which is how the transport attaches ``api_endpoint``,
    ``http_method`` or ``status_code``::

        logger.warning("Bot API call failed", extra={"api_endpoint": "sendMessage", "status_code": 400})
    """

    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in entry:
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TeleclientLogger:
    """Owns the ``teleclient`` logger and its handlers.

    Usage::

        from teleclient.logger import TeleclientLogger

        logger = TeleclientLogger.get_logger()
        logger.info("Client ready")
    """

    _instance: Optional["TeleclientLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "teleclient"
    _LOG_FILE: str = "teleclient.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "TeleclientLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_dir)
        return cls._instance

    def _init_logger(self, level: int, log_dir: Optional[str]) -> None:
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        if self._logger.handlers:
            return

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(_JsonFormatter())
        self._logger.addHandler(stream_handler)

        if log_dir:
            self._add_file_handler(level, log_dir)

    def _add_file_handler(self, level: int, log_dir: str) -> None:
        assert self._logger is not None
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, self._LOG_FILE),
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(_JsonFormatter())
        self._logger.addHandler(file_handler)

    @staticmethod
    def get_logger(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Return the shared logger, creating it on first call.

        *level* and *log_dir* only take effect on that first call; use
        :meth:`configure` to change an existing logger.
        """
        instance = TeleclientLogger(level, log_dir)
        assert instance._logger is not None
        return instance._logger

    @classmethod
    def configure(cls, level: int, log_dir: Optional[str] = None) -> logging.Logger:
        """Apply *level* to the shared logger and its handlers, creating it if needed.

        A rotating file handler is added for *log_dir* unless one is already
        attached.
        """
        logger = cls.get_logger(level, log_dir)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        if log_dir and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            instance = cls._instance
            assert instance is not None
            instance._add_file_handler(level, log_dir)
        return logger

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next ``get_logger`` call reconfigures it."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
