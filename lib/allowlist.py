#!/usr/bin/env python3

"""Rendering and writing of the nginx allowlist file"""

import logging
import os
from typing import Iterable, Tuple

from jinja2 import Template

from lib.constants import FILE_MODE, HEADER_COMMENT
from lib.errors import WriteError

logger = logging.getLogger(__name__)

ALLOWLIST_TEMPLATE = """{{ header }}
{% for ip in ips if ip %}allow {{ ip }};
{% endfor %}deny all;
"""

template = Template(ALLOWLIST_TEMPLATE, keep_trailing_newline=True)


def render_allowlist(ips: Iterable[str]) -> Tuple[str, int]:
    """Render allow rules for all non-empty entries followed by a deny-all.

    Returns:
        The rendered document and its number of lines
    """
    content = template.render(header=HEADER_COMMENT, ips=list(ips))
    return content, content.count("\n")


def write_allowlist(content: str, filepath: str) -> None:
    """Overwrite filepath with content.

    FILE_MODE applies when the file is created; an existing file keeps its mode.
    """
    logger.debug(f"Writing {len(content)} bytes to {filepath}")
    try:
        fd = os.open(filepath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(str(e)) from e
