"""Shared fixtures: fixed clock, seeded random source, small dataset."""

from datetime import datetime, timedelta, timezone

import pytest

from config import MockSettings
from dashboard_data import build_dashboard_data
from models import (
    ERROR_TYPES, ERROR_MESSAGE_SUFFIX, STATUS_COMPLETED, STATUS_FAILED,
    Job, JobStep,
)
from random_source import RandomSource

NOW = datetime(2026, 3, 9, 12, 0, tzinfo=timezone.utc)

SMALL_SETTINGS = MockSettings(
    today_job_count=20,
    week_job_count=40,
    month_job_count=60,
    seed=1234,
)


class FixedRandom:
    """Stands in for random.Random; replays the given values in a loop."""

    def __init__(self, values):
        self.values = list(values)
        self.i = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v


@pytest.fixture()
def now():
    return NOW


@pytest.fixture()
def rng():
    return RandomSource(seed=42)


@pytest.fixture(scope="session")
def dataset():
    return build_dashboard_data(now=NOW, rng=RandomSource(seed=7), settings=SMALL_SETTINGS)


def make_job(
    job_id="JOB-1",
    status=STATUS_COMPLETED,
    cluster="Registration",
    tier="Tier 2",
    start=None,
    error_type=None,
    records=1000,
    failed_step=None,
    loads=(),
):
    """Hand-built job for aggregation tests."""
    start = start or NOW - timedelta(hours=1)
    end = start + timedelta(minutes=60)
    error_analysis = {et: 0 for et in ERROR_TYPES}
    message = ""
    if status == STATUS_FAILED:
        error_analysis[error_type] = 3
        message = f"{error_type}{ERROR_MESSAGE_SUFFIX}"

    steps = [
        JobStep(name, STATUS_FAILED if name == failed_step else STATUS_COMPLETED,
                start, end, "20m", 0)
        for name in ("Extract", "Transform", "Load")
    ]

    return Job(
        id=job_id,
        name=f"REG_D_{job_id}",
        description="",
        tier=tier,
        cluster=cluster,
        status=status,
        start_time=start,
        end_time=end,
        duration="1h",
        pic="Andi Pratama",
        records_processed=records,
        error_message=message,
        error_type=error_type,
        steps=steps,
        error_analysis=error_analysis,
        loads=loads,
    )
