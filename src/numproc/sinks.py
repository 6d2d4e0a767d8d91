"""
A logger with one switchable output sink: console, file or nothing.

Each sink is a logging.Handler. SinkLogger keeps a private logging.Logger
(outside the global logger registry) and swaps its single handler when the
sink changes, so every message is tagged with the caller's file, function
and line by the logging machinery itself.
"""

from enum import Enum
from .logger import logger
import logging
import sys
import threading


LOG_FILE = "app.log"
MESSAGE_FORMAT = "[%(pathname)s:%(funcName)s:%(lineno)d] %(message)s"


class SinkType(Enum):
    CONSOLE = "console"
    FILE = "file"
    NONE = "none"


class ConsoleSink(logging.StreamHandler):
    """Writes to whatever sys.stdout is when the record is emitted."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stdout


class FileSink(logging.FileHandler):
    """
    Appends one line per record to a log file, flushing each write.

    If the file can't be opened the sink degrades: the failure is reported
    once here, and every later write is dropped with an error.
    """

    def __init__(self, log_path=LOG_FILE):
        super().__init__(log_path, mode="a", encoding="utf-8", delay=True)
        self.log_path = log_path
        self.file_open = False
        try:
            self.stream = self._open()
            self.file_open = True
        except OSError as e:
            logger.error(f"Error opening file {log_path} for writing: {e}")

    def emit(self, record):
        if not self.file_open:
            logger.error(f"Error: File {self.log_path} is not open.")
            return
        super().emit(record)


class NullSink(logging.NullHandler):
    pass


class SinkLogger:
    """
    Logger that writes through exactly one sink at a time.

    Construct one at the entry point and pass it to whatever needs to log.
    set_sink() and log() are serialized so a switch never interleaves with
    a write.
    """

    def __init__(self, log_path=LOG_FILE):
        self.log_path = log_path
        self.sink_factories = {
            SinkType.CONSOLE: ConsoleSink,
            SinkType.FILE: lambda: FileSink(self.log_path),
            SinkType.NONE: NullSink,
        }
        self.status_messages = {
            SinkType.CONSOLE: "Logging redirected to console.",
            SinkType.FILE: f"Logging redirected to file {self.log_path}.",
            SinkType.NONE: "Logging disabled.",
        }
        self._lock = threading.RLock()
        self._logger = logging.Logger(f"numproc.sink.{id(self):x}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._sink = None
        self._sink_type = None
        self._install(SinkType.CONSOLE, ConsoleSink())

    @property
    def sink_type(self):
        return self._sink_type

    def set_sink(self, sink_type):
        with self._lock:
            try:
                factory = self.sink_factories[sink_type]
            except (KeyError, TypeError):
                logger.error("Unknown sink type. Previous sink remains.")
                return
            self._install(sink_type, factory())
            print(self.status_messages[sink_type])

    def log(self, message):
        with self._lock:
            self._logger.info(message, stacklevel=2)

    def close(self):
        with self._lock:
            self._remove_sink()

    def _install(self, sink_type, sink):
        self._remove_sink()
        sink.setFormatter(logging.Formatter(MESSAGE_FORMAT))
        self._logger.addHandler(sink)
        self._sink = sink
        self._sink_type = sink_type

    def _remove_sink(self):
        if self._sink is not None:
            self._logger.removeHandler(self._sink)
            self._sink.close()
            self._sink = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def parse_sink_type(text):
    """Map console/file/none (any case) to a SinkType; anything else is CONSOLE."""
    try:
        return SinkType(text.lower())
    except ValueError:
        return SinkType.CONSOLE
