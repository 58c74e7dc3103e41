#!/usr/bin/env python3

"""One pass of fetch, render, write and reload"""

import logging

from lib.allowlist import render_allowlist, write_allowlist
from lib.errors import AllowlistError
from lib.fetch import fetch_plain_ips, fetch_structured_ips
from lib.models import RunResult, Step, TaskConfig
from lib.proxy import reload_proxy

logger = logging.getLogger(__name__)


def _fail(step: Step, doing: str, error: AllowlistError, **kwargs) -> RunResult:
    logger.error(f"Error {doing}: {error}")
    return RunResult(failed_step=step, error=str(error), **kwargs)


def execute_task(config: TaskConfig) -> RunResult:
    """Fetch all provider lists, write the allowlist and reload nginx.

    Every failure ends the run early and is reported in the returned result;
    nothing is raised.
    """
    try:
        gcore_ips = fetch_structured_ips(config.gcore_url)
    except AllowlistError as e:
        return _fail(Step.fetch_gcore, "fetching Gcore IPs", e)

    try:
        cloudflare_v4 = fetch_plain_ips(config.cloudflare_v4_url)
    except AllowlistError as e:
        return _fail(Step.fetch_cloudflare_v4, "fetching Cloudflare IPv4 IPs", e)

    try:
        cloudflare_v6 = fetch_plain_ips(config.cloudflare_v6_url)
    except AllowlistError as e:
        return _fail(Step.fetch_cloudflare_v6, "fetching Cloudflare IPv6 IPs", e)

    content, lines = render_allowlist(gcore_ips + cloudflare_v4 + cloudflare_v6)

    try:
        write_allowlist(content, config.filepath)
    except AllowlistError as e:
        return _fail(Step.write, "writing config", e)

    logger.info(f"NGINX whitelist configuration has been written to {config.filepath} with {lines} lines")

    try:
        reload_proxy()
    except AllowlistError as e:
        return _fail(Step.reload, "reloading NGINX", e, lines=lines, written=True)

    logger.info("NGINX configuration reloaded successfully")
    return RunResult(lines=lines, written=True, reloaded=True)
