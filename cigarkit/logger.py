import logging
import sys

__all__ = [
    "get_main_logger",
    "attach_stream_handler",
    "get_cli_logger",
    "log_levels",
]

fmt = logging.Formatter(fmt="%(name)s:\t[%(levelname)s]\t%(message)s")


def get_main_logger(level: int = logging.DEBUG):
    logger = logging.getLogger("cigarkit-main")
    logger.setLevel(level)
    return logger


def attach_stream_handler(level: int, logger_=None):
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger_.addHandler(ch)


def get_cli_logger(level: int):
    """
    Main logger for command-line use, writing to stderr. Repeated calls (e.g. several runs of main() in one
    process) re-level the existing handler rather than stacking new ones.
    """
    logger = get_main_logger(level)
    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
    else:
        attach_stream_handler(level, logger)
    return logger


log_levels = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
