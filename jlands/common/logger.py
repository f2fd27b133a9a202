import logging
from sys import stderr
from typing import Optional

from jlands.common.environments import env
from jlands.feature_flags import in_global_debug_mode

logging_format = '[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'
overriding_logging_level_name = env(
    'JLANDS_LOG_LEVEL',
    description='Default CLI/library log level. In the debug mode, the log level will be overridden to DEBUG',
    required=False
)
default_logging_level = getattr(logging, overriding_logging_level_name) \
    if overriding_logging_level_name in ('DEBUG', 'INFO', 'WARNING', 'ERROR') \
    else logging.WARNING

if in_global_debug_mode:
    default_logging_level = logging.DEBUG


class TraceableLogger(logging.Logger):
    def __init__(self, name, level=logging.NOTSET, trace_id: Optional[str] = None):
        super().__init__(name, level)

        self.actual_name = name
        self.trace_id = trace_id

        # Override the name of the logger.
        if self.trace_id:
            self.name = f'{self.actual_name},{self.trace_id}'

    @classmethod
    def make(cls, name, level: Optional[int] = None, trace_id: Optional[str] = None):
        log_level = level or default_logging_level

        formatter = logging.Formatter(logging_format)

        handler = logging.StreamHandler(stderr)
        handler.setLevel(log_level)
        handler.setFormatter(formatter)

        logger = cls(name, level=log_level, trace_id=trace_id)
        logger.setLevel(log_level)
        logger.addHandler(handler)

        return logger


def get_logger(name: str, level: Optional[int] = None) -> TraceableLogger:
    return TraceableLogger.make(name, level)


def get_logger_for(ref: object,
                   level: Optional[int] = None) -> TraceableLogger:
    """ Shortcut for creating a logger of a class/object

        The name of the logger is the fully qualified class name of the given object.
    """
    logger_name = f'{type(ref).__module__}.{type(ref).__name__}'

    return TraceableLogger.make(logger_name, level)
