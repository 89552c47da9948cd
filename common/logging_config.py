import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LongMessageFilter(logging.Filter):
    """Filter that shortens log records carrying large chunk dumps."""

    MAX_LENGTH = 512

    def filter(self, record: logging.LogRecord) -> bool:
        """Truncate the rendered message if it exceeds MAX_LENGTH."""
        message = record.getMessage()
        if len(message) > self.MAX_LENGTH:
            record.msg = f"{message[:self.MAX_LENGTH]}... ({len(message)} chars)"
            record.args = None

        return True


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
    peer_target: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the component (e.g., 'cli', 'chunkget')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or WARNING
        peer_target: Optional peer address to include in log format

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'WARNING')

    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(peer_target))
    handler.addFilter(LongMessageFilter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Modules of the 'chunkget' and 'cli' packages log through the handler
    installed on their component logger by setup_logging().

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_peer_target(logger: logging.Logger, peer_target: str) -> None:
    """
    Update logger handlers to include the peer address in format.

    Args:
        logger: Logger instance to update
        peer_target: Peer address ("host:port") to include
    """
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setFormatter(_build_formatter(peer_target))


def _build_formatter(peer_target: Optional[str]) -> logging.Formatter:
    if peer_target:
        return logging.Formatter(
            f'%(asctime)s - %(name)s - %(levelname)s - [{peer_target}] - %(message)s',
            datefmt=LOG_DATE_FORMAT
        )
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
