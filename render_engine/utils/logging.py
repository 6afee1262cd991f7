"""
Logging helpers for the render engine.

Library modules only create module level loggers; handlers are installed by
``setup_logging``, which the command line tool calls once at start-up.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

ROOT_LOGGER_NAME = "render_engine"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

_RESET = '\033[0m'


def _level(name: str, fallback: int) -> int:
    return LOG_LEVELS.get((name or "").upper(), fallback)


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name of each record."""
    
    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }
    
    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.
        
        Args:
            colored: Whether to use colored output; ignored on Windows consoles
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'
    
    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if not self.colored or color is None:
            return text
        # Only the first occurrence is the level field; the message may repeat the word
        return text.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)


def _console_handler(level: int, colored: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(LogFormatter(colored=colored, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Install console and file handlers on the render engine logger.
    
    Calling it again for a logger that already has handlers returns that
    logger unchanged.
    
    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level name; unknown names mean INFO
        file_level: File logging level name; unknown names mean DEBUG
        component: Optional sub-logger name, e.g. "layout"
        colored: Whether console output is colored
    
    Returns:
        logging.Logger: Configured logger
    """
    logger_name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(logger_name)
    
    if logger.handlers:
        return logger
    
    handlers = [_console_handler(_level(console_level, logging.INFO), colored)]
    if log_file:
        handlers.append(_file_handler(log_file, _level(file_level, logging.DEBUG)))
    
    # The logger must let through everything at least one handler wants
    logger.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        logger.addHandler(handler)
    
    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at error level, traceback included.
    
    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    logger.error(f"{message}: {exception}",
                 exc_info=(type(exception), exception, exception.__traceback__))


class PerformanceLogger:
    """
    Times the stages of a pipeline run and logs their durations.
    
    The most recent duration of every finished stage is kept in ``timings``.
    """
    
    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.
        
        Args:
            logger: Logger to use
            component: Component name used as message prefix
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}
        self.timings: Dict[str, float] = {}
    
    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()
    
    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing a stage and log how long it took.
        
        Returns:
            float: Duration in seconds, 0.0 if the stage was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0
        
        duration = time.perf_counter() - started
        self.timings[name] = duration
        self.log(name, duration, level)
        return duration
    
    @contextmanager
    def stage(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """
        Time the enclosed block as one stage.
        
        A stage that raises is discarded rather than logged.
        """
        self.start(name)
        try:
            yield
        except BaseException:
            self.start_times.pop(name, None)
            raise
        self.end(name, level)
    
    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        getattr(self.logger, level.lower())(f"{self.component} {name} took {duration:.4f} seconds")
    
    def clear(self) -> None:
        """Forget stages that were started but never finished."""
        self.start_times.clear()
