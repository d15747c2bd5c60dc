"""
Logging setup for scripts that drive meshmorph.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
configure handlers themselves. Frame rendering reports at INFO, the resampler
traces individual cells at DEBUG.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "meshmorph"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach handlers to the 'meshmorph' logger.

    Calling it again replaces the handlers from the previous call, so scripts
    may switch level or log file between runs.

    Args:
        level: Logging level for the logger and its handlers.
        log_file: Optional path; the file is truncated.
        stream: Console stream, stdout when omitted.

    Returns:
        The 'meshmorph' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
