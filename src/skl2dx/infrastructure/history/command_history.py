"""Append each invocation's command line to a shared history file."""

import logging
import os
from typing import Sequence

COMMAND_LOG_FILE = "command"

_history_logger = logging.getLogger("skl2dx.command_history")
_history_logger.propagate = False
_history_logger.setLevel(logging.INFO)


def record_command(argv: Sequence[str], log_file: str = COMMAND_LOG_FILE) -> None:
    """
    Append ``argv`` as one space separated line to ``log_file``.

    Args:
        argv: Program name followed by its arguments
        log_file: History file, opened in append mode
    """
    program = os.path.basename(argv[0]) if argv else "make-dx"
    handler = logging.FileHandler(log_file, mode="a")
    handler.setFormatter(logging.Formatter("%(message)s"))
    _history_logger.addHandler(handler)
    try:
        _history_logger.info(" ".join([program, *argv[1:]]))
    finally:
        _history_logger.removeHandler(handler)
        handler.close()
