#!/usr/bin/env python3
"""
Logging Utilities
Section-aware logging for the demonstration runner

Records carry an ``extra_fields`` dict. The ``section`` (notifications or
reports) and ``variant`` (channel or department value) keys are promoted by
both formatters; everything else is treated as details.
"""

import json
import logging
import sys
import time
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

import psutil

CONTEXT_FIELDS = ("section", "variant")

def _memory_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024

def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return dict(getattr(record, 'extra_fields', None) or {})

def _context_tag(fields: Dict[str, Any]) -> str:
    """'section:variant' for lines logged inside a section, else empty"""
    return ":".join(str(fields[key]) for key in CONTEXT_FIELDS if fields.get(key))

class StructuredFormatter(logging.Formatter):
    """JSON lines with section and variant as top-level keys"""

    def format(self, record):
        fields = _record_fields(record)
        entry = {
            'time': datetime.fromtimestamp(record.created).isoformat(timespec='milliseconds'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key in CONTEXT_FIELDS:
            if key in fields:
                entry[key] = fields.pop(key)
        if fields:
            entry['details'] = fields

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)

class ConsoleFormatter(logging.Formatter):
    """Human-readable lines, optionally tagged with process memory via psutil"""

    def __init__(self, show_memory: bool = True):
        super().__init__()
        self.show_memory = show_memory

    def format(self, record):
        parts = [
            f"[{self.formatTime(record, '%Y-%m-%d %H:%M:%S')}]",
            f"[{record.levelname:8s}]",
            f"[{record.name}]",
        ]
        if self.show_memory:
            parts.append(f"[{_memory_mb():.0f}MB]")

        tag = _context_tag(_record_fields(record))
        if tag:
            parts.append(f"<{tag}>")

        line = " ".join(parts + [record.getMessage()])

        if record.levelno == logging.DEBUG:
            line += f" ({record.filename}:{record.lineno})"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line

def setup_logger(name: str,
                 level: Union[str, int] = "INFO",
                 log_file: Optional[Union[str, Path]] = None,
                 structured: bool = False,
                 performance: bool = True,
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure a non-propagating logger for the demo

    Args:
        name: Logger name
        level: Logging level name or number
        log_file: Optional file receiving the same lines as the console
        structured: Emit JSON lines instead of console lines
        performance: Tag console lines with process memory
        stream: Console stream, stderr by default so stdout carries only demo output

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger.setLevel(level)

    formatter = StructuredFormatter() if structured else ConsoleFormatter(show_memory=performance)

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger

class LogContext:
    """Logs start, completion or failure of one demo section or variant run"""

    def __init__(self, logger: logging.Logger, section: str, variant: Any = None,
                 level: int = logging.INFO, **details):
        self.logger = logger
        self.level = level
        self.fields = {'section': section, **details}
        if variant is not None:
            self.fields['variant'] = getattr(variant, 'value', variant)
        self._started = None

    @property
    def label(self) -> str:
        return _context_tag(self.fields)

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.log(self.level, f"{self.label} started", extra={'extra_fields': dict(self.fields)})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        fields = {**self.fields, 'duration_seconds': round(time.perf_counter() - self._started, 3)}

        if exc_type is None:
            self.logger.log(self.level, f"{self.label} completed", extra={'extra_fields': fields})
        else:
            fields['error_type'] = exc_type.__name__
            fields['error_message'] = str(exc_val)
            self.logger.error(f"{self.label} failed", extra={'extra_fields': fields})

        return False

def performance_monitor(logger: Optional[logging.Logger] = None):
    """
    Decorator logging duration and memory delta of a demo run

    When the wrapped function returns the list of lines it wrote, the count
    is recorded as ``lines_written``. Failures are logged and re-raised.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            func_logger = logger or logging.getLogger(func.__module__)
            started = time.perf_counter()
            start_memory = _memory_mb()

            def metrics(status: str) -> Dict[str, Any]:
                end_memory = _memory_mb()
                return {
                    'function': func.__name__,
                    'status': status,
                    'duration_seconds': round(time.perf_counter() - started, 3),
                    'memory_mb': round(end_memory, 1),
                    'memory_delta_mb': round(end_memory - start_memory, 1),
                }

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                fields = {**metrics('error'), 'error_type': type(e).__name__, 'error_message': str(e)}
                func_logger.error(f"{func.__name__} failed", extra={'extra_fields': fields})
                raise

            fields = metrics('success')
            if isinstance(result, list):
                fields['lines_written'] = len(result)
            func_logger.info(
                f"{func.__name__} completed in {fields['duration_seconds']}s",
                extra={'extra_fields': fields}
            )
            return result

        return wrapper
    return decorator
