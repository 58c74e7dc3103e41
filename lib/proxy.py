#!/usr/bin/env python3

"""Reverse proxy management"""

import logging
import subprocess

from lib.constants import RELOAD_COMMAND
from lib.errors import ReloadError
from lib.utils import run_command

logger = logging.getLogger(__name__)


def reload_proxy() -> None:
    """Reload nginx configuration without dropping connections.

    Raises ReloadError if nginx can't be started or exits non-zero.
    """
    logger.debug(f"Running {' '.join(RELOAD_COMMAND)}")
    try:
        run_command(RELOAD_COMMAND)
    except subprocess.CalledProcessError as e:
        raise ReloadError(f"{' '.join(RELOAD_COMMAND)} exited with status {e.returncode}") from e
    except OSError as e:
        raise ReloadError(str(e)) from e
