"""File logging with per-thread request context and a persisted log id."""

from __future__ import annotations

import atexit
import inspect
import os
import re
import threading
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO

from sctoolkit.schead import current_times

LOG_NAME = "sc.log"
WF_NAME = "sc.log.wf"
LOGID_NAME = "__lid__"

_LITTLE = 64
_MAX_LINE = (1024 << 3) - 1
_MASK32 = 0xFFFFFFFF
_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


class Level(str, Enum):
    """Log levels; FATAL and WARNING also go to the warning file."""

    FATAL = "FATAL"
    WARNING = "WARNING"
    NOTICE = "NOTICE"
    INFO = "INFO"
    TRACE = "TRACE"
    DEBUG = "DEBUG"

    @property
    def is_warning(self) -> bool:
        return self in (Level.FATAL, Level.WARNING)


@dataclass
class _ThreadInfo:
    logid: int
    reqip: str
    module: str
    started_ns: int


def _null(value: object) -> str:
    return "(null)" if value is None else str(value)


def _is_own_frame(filename: str) -> bool:
    return os.path.normcase(os.path.abspath(filename)) == _THIS_FILE


class SCLogger:
    """Writes to ``sc.log`` and, for warnings, ``sc.log.wf`` in a directory."""

    def __init__(self, directory: str | os.PathLike[str] = "log", debug: bool = False) -> None:
        self.directory = Path(directory)
        self._debug = debug
        self._started = False
        self._log: IO[str] | None = None
        self._wf: IO[str] | None = None
        self._counter = 0
        self._counter_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._local = threading.local()

    @property
    def log_path(self) -> Path:
        return self.directory / LOG_NAME

    @property
    def wf_path(self) -> Path:
        return self.directory / WF_NAME

    @property
    def logid_path(self) -> Path:
        return self.directory / LOGID_NAME

    def start(self) -> "SCLogger":
        """Create the directory, open the files and restore the saved log id."""
        if not self._started:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._started = True
            atexit.register(self.close)
        if self._log is None:
            self._log = open(self.log_path, "a+", encoding="utf-8")
        if self._wf is None:
            try:
                self._wf = open(self.wf_path, "a+", encoding="utf-8")
            except OSError:
                self._log.close()
                self._log = None
                raise
        try:
            saved = self.logid_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            saved = ""
        match = re.match(r"\s*(\d+)", saved)
        if match:
            with self._counter_lock:
                self._counter = int(match.group(1)) & _MASK32
        self.init_thread("main thread", "0.0.0.0")
        return self

    def close(self) -> None:
        """Close the files, save the current log id and drop this thread's context."""
        if not self._started:
            return
        for handle in (self._log, self._wf):
            if handle is not None:
                handle.close()
        self._log = self._wf = None
        self._started = False
        try:
            self.logid_path.write_text(str(self._counter), encoding="utf-8")
        except OSError:
            pass
        self._local.info = None
        atexit.unregister(self.close)

    def _info(self) -> _ThreadInfo | None:
        return getattr(self._local, "info", None)

    def init_thread(self, module: str, reqip: str) -> None:
        """Give the calling thread a fresh log id, request ip and module name."""
        with self._counter_lock:
            self._counter = (self._counter + 1) & _MASK32
            logid = self._counter
        self._local.info = _ThreadInfo(
            logid=logid,
            reqip=reqip[: _LITTLE - 1],
            module=module[: _LITTLE - 1],
            started_ns=time.monotonic_ns(),
        )

    def reset_timer(self) -> None:
        """Restart the calling thread's elapsed-time clock."""
        info = self._info()
        if info is None:
            raise RuntimeError("thread log context is not initialised")
        info.started_ns = time.monotonic_ns()

    def logid(self) -> int:
        """Return the calling thread's log id, or 0 without context."""
        info = self._info()
        return info.logid if info is not None else 0

    def reqip(self) -> str | None:
        info = self._info()
        return info.reqip if info is not None else None

    def elapsed(self) -> int | None:
        """Microseconds since the thread's context was set or its timer reset."""
        info = self._info()
        if info is None:
            return None
        return ((time.monotonic_ns() - info.started_ns) // 1000) & _MASK32

    def module_name(self) -> str | None:
        info = self._info()
        return info.module if info is not None else None

    @staticmethod
    def _caller() -> tuple[str, int, str]:
        frame = inspect.currentframe()
        while frame is not None and _is_own_frame(frame.f_code.co_filename):
            frame = frame.f_back
        if frame is None:
            return "?", 0, "?"
        code = frame.f_code
        return os.path.basename(code.co_filename), frame.f_lineno, code.co_name

    def write(self, level: Level | str, message: str) -> str:
        """Write one line at ``level`` and return it."""
        level = Level(level)
        if not self._started or self._log is None or self._wf is None:
            raise RuntimeError(f"logger in {self.directory} is not started")
        filename, lineno, func = self._caller()
        line = (
            f"[{current_times()} {_null(self.elapsed())}][{level.value}]"
            f"[{filename}:{lineno}:{func}][logid:{self.logid()}]"
            f"[reqip:{_null(self.reqip())}][mod:{_null(self.module_name())}]"
            f"{message}\n"
        )[:_MAX_LINE]
        with self._write_lock:
            self._log.write(line)
            self._log.flush()
            if level.is_warning:
                self._wf.write(line)
                self._wf.flush()
        return line

    def fatal(self, message: str) -> str:
        return self.write(Level.FATAL, message)

    def warning(self, message: str) -> str:
        return self.write(Level.WARNING, message)

    def notice(self, message: str) -> str:
        return self.write(Level.NOTICE, message)

    def info(self, message: str) -> str:
        return self.write(Level.INFO, message)

    def trace(self, message: str) -> str | None:
        """Write a TRACE line only when debug logging is enabled."""
        return self.write(Level.TRACE, message) if self._debug else None

    def debug(self, message: str) -> str | None:
        """Write a DEBUG line only when debug logging is enabled."""
        return self.write(Level.DEBUG, message) if self._debug else None

    def __enter__(self) -> "SCLogger":
        return self.start()

    def __exit__(self, *args: object) -> None:
        self.close()