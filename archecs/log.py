"""Levelled line logger writing timestamped lines to a stream."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Severity of a log line, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name


class LogLine:
    """One line of log output; the header is written on creation, the newline on close."""

    def __init__(self, severity: LogLevel, logger: Logger) -> None:
        self.severity = LogLevel(severity)
        self.logger = logger
        self._closed = False
        logger.write_header(self.severity)

    def write(self, *args: Any) -> LogLine:
        """Append each value to the line and return the line for chaining."""
        for value in args:
            self.logger.write(self.severity, value)
        return self

    def close(self) -> None:
        """End the line. Calling this more than once has no further effect."""
        if not self._closed:
            self._closed = True
            self.logger.end_line(self.severity)

    def __enter__(self) -> LogLine:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Logger:
    """Writes lines whose severity is at least the configured log level."""

    _instance: Logger | None = None

    def __init__(self, stream: TextIO | None = None, log_level: LogLevel = LogLevel.INFO) -> None:
        self.stream = stream
        self.log_level = LogLevel(log_level)

    @classmethod
    def get_instance(cls) -> Logger:
        """Return the process-wide logger, creating it on first use."""
        if Logger._instance is None:
            Logger._instance = Logger()
        return Logger._instance

    @property
    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def _enabled(self, severity: LogLevel) -> bool:
        return severity >= self.log_level

    def set_log_level(self, log_level: LogLevel) -> None:
        self.log_level = LogLevel(log_level)

    def write(self, severity: LogLevel, value: Any) -> None:
        if self._enabled(severity):
            self._out.write(str(value))

    def write_header(self, severity: LogLevel) -> None:
        if self._enabled(severity):
            now_ns = time.time_ns()
            stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(now_ns // 1_000_000_000))
            fraction = now_ns % 1_000_000
            self._out.write(f"{stamp}.{fraction:06d}Z {LogLevel(severity)} ")

    def end_line(self, severity: LogLevel) -> None:
        if self._enabled(severity):
            out = self._out
            out.write("\n")
            out.flush()

    def line(self, severity: LogLevel) -> LogLine:
        return LogLine(severity, self)

    def log(self, severity: LogLevel, *args: Any) -> None:
        """Write one complete line made of the given values."""
        with self.line(severity) as line:
            line.write(*args)


def _emit(severity: LogLevel, args: tuple[Any, ...]) -> None:
    caller = sys._getframe(2).f_code.co_name
    Logger.get_instance().log(severity, caller, " ", *args)


def trace(*args: Any) -> None:
    _emit(LogLevel.TRACE, args)


def debug(*args: Any) -> None:
    _emit(LogLevel.DEBUG, args)


def info(*args: Any) -> None:
    _emit(LogLevel.INFO, args)


def warning(*args: Any) -> None:
    _emit(LogLevel.WARNING, args)


def error(*args: Any) -> None:
    _emit(LogLevel.ERROR, args)


def fatal(*args: Any) -> None:
    _emit(LogLevel.FATAL, args)