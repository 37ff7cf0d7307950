"""
Text sinks (output destinations).

Each provider owns exactly one sink and shares it with every logger it
issues. A sink receives finished lines and writes them synchronously, one
line per call, flushed immediately.
"""

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO


class TextSink(ABC):
    """Base sink. Receives formatted lines."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one line. A trailing newline is appended by the sink."""
        ...

    def flush(self) -> None:
        """Flush pending output. Override in sinks that hold resources."""
        pass

    def close(self) -> None:
        """Cleanup. Override if sink holds resources."""
        self.flush()


class StreamSink(TextSink):
    """
    Writes to a text stream. With no stream given, standard output is looked
    up at write time so redirection of sys.stdout is honored.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        with self._lock:
            print(line, file=self.stream, flush=True)

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()


class FileSink(TextSink):
    """
    Appends lines to a UTF-8 text file.
    The file is opened on first write and reopened after close().
    """

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self._file: Optional[TextIO] = None

    def _ensure_file(self) -> TextIO:
        """Open file if needed. Must hold self._lock."""
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.path, "a", encoding="utf-8")
        return self._file

    def write_line(self, line: str) -> None:
        with self._lock:
            f = self._ensure_file()
            f.write(line + "\n")
            f.flush()

    def flush(self) -> None:
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    @property
    def is_open(self) -> bool:
        return self._file is not None
