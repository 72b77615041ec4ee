"""
Logger
Structured logging for the ds-mcp server.

Everything goes to stderr: stdout carries the MCP stdio transport.
"""

import logging
import sys
from typing import Optional, TextIO


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.DEBUG)


def _with_fields(message: str, extra: Optional[dict]) -> str:
    """Append structured fields as key=value pairs."""
    if not extra:
        return message
    fields = " ".join(f"{key}={value}" for key, value in extra.items())
    return f"{message} [{fields}]"


class Logger:
    """Logger wrapper that renders `extra` fields inline.
    
    Loggers are shared by name: the first Logger for a name installs the
    stream handler, later ones reuse it. Passing `stream` again redirects
    that shared handler.
    """
    
    def __init__(self, name: str = "ds-mcp", level: str = "DEBUG", stream: Optional[TextIO] = None):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(level))
        
        handler = next(
            (h for h in self.logger.handlers if isinstance(h, logging.StreamHandler)),
            None
        )
        if handler is None:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)
        elif stream is not None:
            handler.setStream(stream)
        self.logger.propagate = False
    
    def setLevel(self, level: str) -> None:
        self.logger.setLevel(_resolve_level(level))
    
    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(_with_fields(message, extra))
    
    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(_with_fields(message, extra))
    
    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(_with_fields(message, extra))
    
    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(_with_fields(message, extra))
    
    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
