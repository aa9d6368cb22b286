"""Logging configuration and utilities."""

import logging
import logging.handlers
import os
from pathlib import Path
from config.settings import settings

_console_suppressed = False

class DeviceContextFilter(logging.Filter):
    """Filter to add network device context to log records."""

    def __init__(self):
        super().__init__()
        self.device = None

    def set_device_context(self, device: str):
        """Set the device context for this filter."""
        self.device = device

    def filter(self, record):
        """Add device context to the log record."""
        record.device = self.device or '-'
        return True

def get_logger(name: str, device: str = None) -> logging.Logger:
    """Get configured logger instance with optional device context."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Configure logger
        level = getattr(logging, settings.get('logging.level', 'INFO').upper())
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - [%(device)s] - %(levelname)s - %(message)s'
        )

        # Console handler
        if not _console_suppressed:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)

            device_filter = DeviceContextFilter()
            if device:
                device_filter.set_device_context(device)
            console_handler.addFilter(device_filter)
            logger.addHandler(console_handler)

        # File handler
        log_file = settings.get('logging.file', 'logs/ndevtop.log')
        log_dir = os.path.dirname(log_file)
        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=settings.get('logging.max_bytes', 10485760),
            backupCount=settings.get('logging.backup_count', 5)
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

        file_device_filter = DeviceContextFilter()
        if device:
            file_device_filter.set_device_context(device)
        file_handler.addFilter(file_device_filter)
        logger.addHandler(file_handler)

    if device and logger.handlers:
        update_logger_device_context(logger, device)

    return logger

def update_logger_device_context(logger: logging.Logger, device: str):
    """Update the device context for an existing logger."""
    for handler in logger.handlers:
        for filter_obj in handler.filters:
            if isinstance(filter_obj, DeviceContextFilter):
                filter_obj.set_device_context(device)

def suppress_console_logging():
    """Send log output to the log file only while the TUI owns the terminal.

    Applies to loggers created before and after the call.
    """
    global _console_suppressed
    _console_suppressed = True
    for logger in _configured_loggers():
        _drop_console_handlers(logger)

def _configured_loggers():
    manager = logging.Logger.manager
    return [
        obj for obj in manager.loggerDict.values()
        if isinstance(obj, logging.Logger) and obj.handlers
    ]

def _drop_console_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        # RotatingFileHandler is itself a StreamHandler subclass
        if type(handler) is logging.StreamHandler:
            logger.removeHandler(handler)
