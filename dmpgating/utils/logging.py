"""Customized log handlers for gating function evaluation."""
import io
import logging
import sys
from enum import IntEnum
from logging.handlers import RotatingFileHandler
from numbers import Number
from pathlib import Path
from typing import Optional, Union

from dmpgating.utils.helpers import check_arg


root_logger = logging.getLogger()
logger = logging.getLogger(__name__)


DEFAULT_STREAM = object()


class LogLevel(IntEnum):
    """dmpgating log level.

    FULL_DEBUG : Detailed debug log, emitted at each evaluation
    DEBUG : Debug log
    INFO : Information log
    WARNING : Warning log
    ERROR : Error log
    CRITICAL : Critical log
    """

    FULL_DEBUG = logging.DEBUG - 1
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


VERBOSE_LEVEL = LogLevel.DEBUG


class PhaseFilter(logging.Filter):
    """Log record filter depending on the phase at which a gating function is evaluated.

    Records less severe than `VERBOSE_LEVEL` are let through only if they carry
    a `phase` attribute greater or equal to `start_phase`, or no phase at all.

    Parameters
    ----------
    start_phase : Number
        Phase from which verbose log will be recorded
    """

    def __init__(self, start_phase: Number):
        super().__init__()
        check_arg(start_phase, "start_phase", Number)
        self.__start_phase = start_phase

    @property
    def start_phase(self) -> Number:
        """Number : Phase from which verbose log will be recorded"""
        return self.__start_phase

    def filter(self, record: logging.LogRecord) -> int:
        """Is the specified record to be logged? Returns zero for no, nonzero for yes.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to test

        Returns
        -------
        int
            Non-zero if the record is to be logged.
        """
        if record.levelno > VERBOSE_LEVEL:
            return 1
        phase = getattr(record, "phase", None)
        return int(phase is None or phase >= self.__start_phase)


class GatingLogHandler:
    """Marker base class for the handlers installed by `set_log`."""
    pass


class FileLogHandler(RotatingFileHandler, GatingLogHandler):
    """Special RotatingFileHandler for dmpgating log message.

    Parameters
    ----------
    filename : str or Path, optional
        Log filename; default "dmpgating_trace.log"
    backupCount : int, optional
        Number of backup log files; default 5
    encoding : str, optional
        File encoding to be enforced
    """

    def __init__(
        self,
        filename: Union[str, Path] = "dmpgating_trace.log",
        backupCount: int = 5,
        encoding: Optional[str] = None,
    ) -> None:
        RotatingFileHandler.__init__(
            self, filename, backupCount=backupCount, encoding=encoding, delay=True
        )


class StreamLogHandler(logging.StreamHandler, GatingLogHandler):
    """Special StreamHandler for dmpgating log message."""

    def __init__(self, stream: io.TextIOBase = DEFAULT_STREAM) -> None:
        if stream is DEFAULT_STREAM:
            stream = sys.stdout
        logging.StreamHandler.__init__(self, stream=stream)


def rollover_logfile() -> None:
    """Rollover all rotating log files of the root logger."""
    for handler in root_logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.doRollover()


def set_log(
    filename: Union[str, Path, None] = "dmpgating_trace.log",
    stream: Optional[io.TextIOBase] = DEFAULT_STREAM,
    level: int = LogLevel.INFO,
    start_phase: Optional[Number] = None,
    format: str = "%(message)s",
    encoding: Optional[str] = None,
    backupCount: int = 5,
) -> None:
    """Set the dmpgating log behavior.

    If `backupCount` is nonzero, at most `backupCount` files will be kept, and if more
    would be created when rollover occurs, the oldest one is deleted.

    By default the log messages are written to a file (specified by its `filename`) and
    to a stream. Set either `filename` or `stream` to None to deactivate the corresponding
    log handler.

    Parameters
    ----------
    filename : str or Path or None, optional
        Log filename; default "dmpgating_trace.log"
    stream : io.TextIOBase or None, optional
        Log stream; default ``sys.stdout``
    level : int or LogLevel, optional
        Log level; default LogLevel.INFO
    start_phase : Number or None, optional
        Phase from which verbose evaluation log will be recorded; default all phases
    format : str, optional
        Log record format; default "%(message)s"
    encoding : str, optional
        File encoding to be enforced
    backupCount : int, optional
        Number of backup log files; default 5
    """
    nonetype = type(None)
    check_arg(filename, "filename", (str, Path, nonetype))
    if stream is not DEFAULT_STREAM:
        check_arg(stream, "stream", (io.TextIOBase, nonetype))
    check_arg(level, "level", (int, LogLevel))
    check_arg(start_phase, "start_phase", (Number, nonetype))
    check_arg(format, "format", str)
    check_arg(encoding, "encoding", (str, nonetype))
    check_arg(backupCount, "backupCount", int, lambda v: v >= 0)

    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if isinstance(handler, GatingLogHandler):
            handler.close()  # Be sure to close the file descriptor
            root_logger.removeHandler(handler)

    def add_handler(h):
        h.setFormatter(logging.Formatter(format))
        h.setLevel(level)
        if start_phase is not None:
            h.addFilter(PhaseFilter(start_phase))
        root_logger.addHandler(h)

    handlers = list()
    if filename is not None:
        handlers.append(
            FileLogHandler(filename, backupCount=backupCount, encoding=encoding)
        )

    if stream is not None:
        handlers.append(StreamLogHandler(stream))

    for handler in handlers:
        add_handler(handler)

    if len(handlers) == 0:
        logger.warning("No dmpgating log handlers added.")
