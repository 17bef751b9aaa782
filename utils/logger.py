"""
Logging setup for the fuzzy controller.

Every named logger writes to its own file in the log directory, and the
console logger ("main" by default) also echoes to the terminal. Each record
is tagged with the current evaluation cycle so that lines from the
fuzzifier, rule engine and defuzzifier can be matched up across files:

    000003 | DEBUG | WZ_engine | Rule# 0 W= 0.250, Z= 25.000, W*Z= 6.250

Library modules only ask for their logger by name; handlers are installed
here by the application.
"""
import glob
import logging
import os
from contextvars import ContextVar
from typing import Iterable, Optional

_CYCLE_I = ContextVar("cycle_i", default=-1)

LOGGER_NAMES = (
    "main",
    "controller",
    "rule_engine",
    "WZ_engine",
    "fuzzifier",
    "defuzzifier",
    "peaks",
    "profiler",
)

LOG_FORMAT = "%(i)06d | %(levelname)s | %(name)s | %(message)s"


def set_cycle_index(i: int) -> None:
    """Tags subsequent records in this context with cycle index i."""
    _CYCLE_I.set(int(i))


class CycleIndexFilter(logging.Filter):
    """Adds the current cycle index to every record as `record.i`."""

    def filter(self, record):
        record.i = _CYCLE_I.get()
        return True


def _remove_rotated(log_dir: str) -> int:
    removed = 0
    for path in glob.glob(os.path.join(log_dir, "*.log.*")):
        try:
            os.remove(path)
            removed += 1
        except FileNotFoundError:
            pass
    return removed


def _reset_handlers(log: logging.Logger) -> None:
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()


def setup_logging(
    log_dir: str = "logs",
    overwrite: bool = True,
    log_level: int = logging.DEBUG,
    console_level: int = logging.INFO,
    cleanup_rotated: bool = True,
    logger_names: Iterable[str] = LOGGER_NAMES,
    console_logger: Optional[str] = "main",
) -> None:
    """
    Installs file and console handlers on the named loggers.

    Args:
        log_dir (str): Directory for the per-logger `<name>.log` files.
        overwrite (bool): Truncate existing log files instead of appending.
        log_level (int): Level of the loggers and their file handlers.
        console_level (int): Level of the console handler.
        cleanup_rotated (bool): Delete rotated `*.log.*` files first.
        logger_names (Iterable[str]): Loggers to configure. They stop
            propagating to the root logger.
        console_logger (str, optional): Logger that also writes to the
            console. None disables console output.
    """
    os.makedirs(log_dir, exist_ok=True)
    removed = _remove_rotated(log_dir) if cleanup_rotated else 0

    fmt = logging.Formatter(LOG_FORMAT)
    cycle_filter = CycleIndexFilter()
    mode = "w" if overwrite else "a"

    names = list(logger_names)
    for name in names:
        log = logging.getLogger(name)
        log.setLevel(log_level)
        log.propagate = False
        _reset_handlers(log)

        fh = logging.FileHandler(os.path.join(log_dir, f"{name}.log"), mode=mode, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(log_level)
        fh.addFilter(cycle_filter)
        log.addHandler(fh)

    if console_logger is not None:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        console.setLevel(console_level)
        console.addFilter(cycle_filter)
        logging.getLogger(console_logger).addHandler(console)

    logging.getLogger(console_logger or "main").info(
        "Logging system initialized (%d loggers in '%s', %d rotated files removed).",
        len(names), log_dir, removed,
    )
