"""Server logging: console and file output, audit log, reports and per-area logs."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Iterable, TextIO

from athena.webhook import DiscordWebhook, WebhookError


class LogLevel(IntEnum):
    """Severity of a log message, lowest first."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """The tag printed in front of messages of this level."""
        return _LABELS[self]


_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_UNSAFE_AREA_CHARS = str.maketrans({c: "_" for c in '/\\:*?"<>|'})


def sanitize_area_name(name: str) -> str:
    """Turn an area name into a name that is safe to use as a folder name."""
    return name.translate(_UNSAFE_AREA_CHARS)


def _stamp(now: datetime) -> str:
    millis = now.microsecond // 1000
    return f"{_MONTHS[now.month - 1]} {now.day:2d} {now:%H:%M:%S}.{millis:03d}"


@dataclass
class Logger:
    """Writes server messages to standard output and log files."""

    log_path: str | os.PathLike[str] = "logs"
    level: LogLevel = LogLevel.INFO
    log_stdout: bool = True
    log_file: bool = False
    enable_area_logging: bool = False
    debug_network: bool = False
    webhook: DiscordWebhook | None = None
    stream: TextIO | None = None
    _output_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )
    _file_lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )
    _area_guard: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )
    _area_locks: dict[str, threading.Lock] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def log(self, level: LogLevel, message: str) -> None:
        """Write a message if its level is at least the logger's level."""
        level = LogLevel(level)
        if level < self.level:
            return
        line = f"{_stamp(datetime.now(timezone.utc))}: {level.label}: {message}"
        if self.log_stdout:
            out = self.stream if self.stream is not None else sys.stdout
            with self._output_lock:
                print(line, file=out)
        if self.log_file:
            self.write_log(line + "\n")

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def fatal(self, message: str) -> None:
        self.log(LogLevel.FATAL, message)

    def write_report(self, name: str, buffer: Iterable[str]) -> None:
        """Post an area buffer to the webhook and save it as a report file."""
        with self._file_lock:
            stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H%M%SZ")
            fname = f"report-{stamp}-{name}.log"
            contents = "\n".join(buffer)
            if self.webhook is not None:
                try:
                    self.webhook.post_report(fname, contents)
                except WebhookError as exc:
                    self.error(str(exc))
                    return
            try:
                (Path(self.log_path) / fname).write_bytes(contents.encode("utf-8"))
            except OSError as exc:
                self.error(str(exc))

    def write_audit(self, line: str) -> None:
        """Append a dated line to the audit log."""
        with self._file_lock:
            day = datetime.now(timezone.utc).strftime("%Y/%m/%d")
            try:
                with open(Path(self.log_path) / "audit.log", "a", encoding="utf-8") as f:
                    f.write(f"[{day}] {line}\n")
            except OSError as exc:
                self.error(str(exc))

    def write_log(self, line: str) -> None:
        """Append text to the server log; file logging is switched off on failure."""
        with self._file_lock:
            try:
                with open(Path(self.log_path) / "server.log", "a", encoding="utf-8") as f:
                    f.write(line)
            except OSError as exc:
                # Switching off first keeps the error report from recursing.
                self.log_file = False
                self.error(str(exc))

    def create_area_log_directory(self, area_name: str) -> None:
        """Create the log folder of an area when area logging is on."""
        if not self.enable_area_logging:
            return
        directory = Path(self.log_path) / sanitize_area_name(area_name)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create area log directory: {exc}") from exc

    def _area_lock(self, safe_name: str) -> threading.Lock:
        with self._area_guard:
            return self._area_locks.setdefault(safe_name, threading.Lock())

    def write_area_log(self, area_name: str, entry: str) -> None:
        """Append an entry to the area's log file for today."""
        if not self.enable_area_logging:
            return
        safe_name = sanitize_area_name(area_name)
        with self._area_lock(safe_name):
            today = date.today().isoformat()
            filename = Path(self.log_path) / safe_name / f"{safe_name}-{today}.txt"
            try:
                with open(filename, "a", encoding="utf-8") as f:
                    f.write(entry + "\n")
            except OSError as exc:
                self.error(f"Failed to write to area log file {filename}: {exc}")