"""
Logging configuration for the AWS client wrapper.

Every module obtains its logger through get_logger() so that controller
processes get one consistent stdout format regardless of which service
class emitted the record.
"""
import logging
import os
import sys


class CorrelationIdFilter(logging.Filter):
    """Give records logged outside a helper call an empty correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'correlation_id'):
            record.correlation_id = '-'
        return True


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    The level comes from LOG_LEVEL; unknown names fall back to INFO.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    if logger.handlers:
        return logger

    log_level = logging.getLevelName(os.environ.get('LOG_LEVEL', 'INFO').upper())
    logger.setLevel(log_level if isinstance(log_level, int) else logging.INFO)

    # Controllers run in pods; stdout is collected by the cluster log pipeline
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.propagate = False

    return logger
