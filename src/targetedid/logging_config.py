"""
Logging configuration for targetedid.

Library modules log through module-level loggers and never configure
handlers themselves. Applications may call setup_logging() to get
JSON-formatted output on stdout.

Environment Variables:
    TARGETEDID_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    TARGETEDID_LOG_FORMAT: Log format (json, text) - default: json
"""

import logging
import os
import sys
from typing import Iterable, Optional

from pythonjsonlogger.json import JsonFormatter

from .config import LOG_LEVEL_ENV, LOG_FORMAT_ENV, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT, REDACTED


# Attributes every LogRecord carries; anything else arrived via extra=.
_RECORD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', None, None).__dict__) | {'message', 'asctime'}


class SecretRedactionFilter(logging.Filter):
    """
    Logging filter that replaces known secrets in a record before formatting.

    Covers the message, string values passed via extra=, and the
    exception and stack text. Non-string extra values are not inspected.
    """
    
    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self._secrets = [s for s in secrets if s]
    
    def _redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, REDACTED)
        return text
    
    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        
        message = record.getMessage()
        redacted = self._redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        
        for key, value in list(record.__dict__.items()):
            if key not in _RECORD_ATTRS and isinstance(value, str):
                setattr(record, key, self._redact(value))
        
        if record.exc_info:
            exc_text = record.exc_text or logging.Formatter().formatException(record.exc_info)
            redacted = self._redact(exc_text)
            if redacted != exc_text:
                # formatters fall back to exc_text once exc_info is cleared
                record.exc_text = redacted
                record.exc_info = None
        elif record.exc_text:
            record.exc_text = self._redact(record.exc_text)
        
        if record.stack_info:
            record.stack_info = self._redact(record.stack_info)
        return True


def setup_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    secrets: Iterable[str] = (),
) -> logging.Handler:
    """
    Configure the targetedid logger with a stdout handler.
    
    Args:
        level: Log level name; defaults to TARGETEDID_LOG_LEVEL or INFO
        log_format: "json" or "text"; defaults to TARGETEDID_LOG_FORMAT or json
        secrets: Values to redact from every record (e.g. the secret salt)
        
    Returns:
        The installed handler
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    format_name = (log_format or os.getenv(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT)).lower()
    
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    
    logger = logging.getLogger('targetedid')
    logger.setLevel(level_value)
    
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level_value)
    
    if format_name == 'text':
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    
    handler.setFormatter(formatter)
    handler.addFilter(SecretRedactionFilter(secrets))
    logger.addHandler(handler)
    return handler
