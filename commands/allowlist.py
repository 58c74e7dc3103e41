#!/usr/bin/env python3

"""Scheduled nginx allowlist sync"""

import logging

import click

from lib.constants import DEFAULT_FILENAME, DEFAULT_HOUR, DEFAULT_LOCATION
from lib.logging_config import setup_logging
from lib.models import TaskConfig
from lib.scheduler import run_forever

logger = logging.getLogger(__name__)


@click.command()
@click.option("--location", default=DEFAULT_LOCATION, show_default=True, help="Directory to save the allow.conf file")
@click.option("--filename", default=DEFAULT_FILENAME, show_default=True, help="Name of the allow.conf file")
@click.option(
    "--hour",
    type=click.IntRange(0, 23),
    default=DEFAULT_HOUR,
    show_default=True,
    help="Hour of the day to run the task (0-23)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def allowlist(location, filename, hour, verbose, log_file):
    """
    🛡️ Keep an nginx allowlist of Gcore and Cloudflare edge IPs

    Fetches the provider IP lists, writes an allow/deny config fragment and
    reloads nginx. Runs once on startup, then every day at --hour (local time)
    until terminated.

    \b
    Examples:
        nginx-allowlist                                  # Write /etc/nginx/conf.d/allow.conf
        nginx-allowlist --hour 5                         # Daily run at 05:00
        nginx-allowlist --location /tmp --filename cdn.conf
    """
    setup_logging(level="DEBUG" if verbose else None, log_file=log_file)

    config = TaskConfig(location=location, filename=filename, hour=hour)
    logger.info(f"Writing allowlist to {config.filepath}, daily at {config.hour:02d}:00")

    run_forever(config)


def main() -> None:
    allowlist()


if __name__ == "__main__":
    main()
