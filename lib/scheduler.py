#!/usr/bin/env python3

"""Daily scheduling of the allowlist pipeline"""

import logging
import time
from datetime import datetime, timedelta

from lib.models import TaskConfig
from lib.pipeline import execute_task

logger = logging.getLogger(__name__)


def next_run(now: datetime, hour: int) -> datetime:
    """Next occurrence of hour:00:00 strictly after now (naive local time)."""
    candidate = now.replace(hour=hour, minute=0, second=0, microsecond=0)
    if candidate <= now:
        candidate += timedelta(days=1)
    return candidate


def seconds_until(upcoming: datetime, now: datetime) -> float:
    """Real seconds between two naive local times, DST transitions included."""
    return upcoming.timestamp() - now.timestamp()


def run_forever(config: TaskConfig) -> None:
    """Run the pipeline now, then daily at config.hour. Never returns."""
    execute_task(config)

    while True:
        now = datetime.now()
        upcoming = next_run(now, config.hour)
        logger.info(f"Next run at {upcoming:%Y-%m-%d %H:%M:%S}")
        time.sleep(seconds_until(upcoming, now))

        execute_task(config)
