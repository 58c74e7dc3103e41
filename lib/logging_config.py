"""
Console logging for nginx-allowlist.

Each daily run reports its phases on stdout: provider fetch failures, the
written allowlist path and line count, and the outcome of the nginx reload.
Run by hand in a terminal, lines are colored with a level symbol. Run as a
service (systemd, cron, docker), lines carry a timestamp and the module path
so the journal shows which step reported.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from lib.constants import LOG_LEVEL


class TTYAwareFormatter(logging.Formatter):
    """Formats pipeline progress for a terminal or for the service journal.

    TTY mode:
        ✓ NGINX configuration reloaded successfully
        ✗ Error fetching Gcore IPs: 503 Server Error

    Non-TTY mode:
        2026-10-17 03:00:00.412 INFO > lib/pipeline.py:57: NGINX configuration reloaded successfully
    """

    GREY = "\033[90m"
    CYAN = "\033[96m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    RESET = "\033[0m"

    SYMBOLS = {
        "DEBUG": "•",
        "INFO": "✓",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "✗",
    }

    COLORS = {
        "DEBUG": CYAN,
        "INFO": GREEN,
        "WARNING": YELLOW,
        "ERROR": RED,
        "CRITICAL": RED,
    }

    def __init__(self, is_tty: bool):
        self.is_tty = is_tty
        if is_tty:
            super().__init__("%(message)s")
        else:
            super().__init__("%(asctime)s %(levelname)s > %(module_path)s:%(lineno)d: %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        if not self.is_tty:
            ct = datetime.fromtimestamp(record.created)
            return ct.strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"
        return super().formatTime(record, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if not self.is_tty:
            record.module_path = record.name.replace(".", "/") + ".py"

        message = super().format(record)

        if self.is_tty:
            symbol = self.SYMBOLS.get(record.levelname, "›")
            color = self.COLORS.get(record.levelname, self.GREY)
            return f"{color}{symbol}{self.RESET} {message}"

        return message


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Route all pipeline and scheduler logging to stdout, once at CLI startup.

    Args:
        level: Log level name; `--verbose` passes DEBUG to also show provider
               URLs, per-provider entry counts and the reload command.
               Defaults to LOG_LEVEL env var or INFO
        log_file: `--log-file` path; always gets the timestamped format so a
                  daemonized sync leaves an audit trail of its daily runs
    """
    level = (level or LOG_LEVEL).upper()
    level_const = getattr(logging, level, logging.INFO)

    is_tty = sys.stdout.isatty()

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(TTYAwareFormatter(is_tty))
    handlers.append(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(TTYAwareFormatter(is_tty=False))
        handlers.append(file_handler)

    logging.root.setLevel(level_const)
    logging.root.handlers = handlers
