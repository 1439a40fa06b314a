# ======================================================================
#  File......: mock_api.py
#  Purpose...: Read-only lookup API over the mock dashboard dataset.
#  Version...: 0.3.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

import logging
from typing import List, Dict, Optional, Union

from dashboard_data import DashboardData
from models import (
    AggregatedDataPoint, ClusterData, DailyDataPoint, DetailedErrorJob,
    ErrorClusteredJob, Job, tier_key,
)
from periods import PERIOD_FREQ, aggregate_daily_data

logger = logging.getLogger(__name__)


def _window_bucket(structure: dict, tier: str, window: str) -> Optional[dict]:
    return structure.get(tier_key(tier), {}).get(window)


def find_job(data: DashboardData, job_id: str) -> Optional[Job]:
    for job in data.jobs:
        if job.id == job_id:
            return job
    return None


def get_job_load_analysis(
    data: DashboardData,
    job_id: str,
    load_id: str,
    granularity: str = "day",
) -> Union[List[DailyDataPoint], List[AggregatedDataPoint]]:
    """
    Daily series of one job load, or its week / month / quarter roll-up.
    Unknown job, load or granularity -> [].
    """
    job = find_job(data, job_id)
    load = job.find_load(load_id) if job else None
    if load is None:
        logger.warning("No load %s for job %s", load_id, job_id)
        return []

    if granularity == "day":
        return list(load.daily_data)
    if granularity not in PERIOD_FREQ:
        logger.warning("Unsupported granularity %r", granularity)
        return []
    return aggregate_daily_data(load.daily_data, granularity)


def get_error_cluster_details(
    data: DashboardData, tier: str, window: str, error_type: str
) -> List[DetailedErrorJob]:
    bucket = _window_bucket(data.detailed_error_clusters, tier, window) or {}
    return list(bucket.get(error_type, []))


def get_aggregated_data(data: DashboardData, tier: str, window: str) -> ClusterData:
    """Sum ClusterData over every cluster of (tier, window)."""
    bucket = _window_bucket(data.cluster_data, tier, window)
    total = ClusterData()
    if bucket is None:
        logger.warning("No cluster data for %s / %s", tier, window)
        return total

    for cluster_data in bucket.values():
        total = total + cluster_data
    return total


def get_error_analysis_data(data: DashboardData, tier: str, window: str) -> Dict[str, int]:
    bucket = _window_bucket(data.error_analysis, tier, window)
    if bucket is None:
        logger.warning("No error analysis data for %s / %s", tier, window)
        return {}

    totals: Dict[str, int] = {}
    for tally in bucket.values():
        for error_type, count in tally.items():
            totals[error_type] = totals.get(error_type, 0) + count
    return totals


def get_error_clustered_jobs(
    data: DashboardData, tier: str, window: str
) -> Dict[str, List[ErrorClusteredJob]]:
    bucket = _window_bucket(data.error_clustered_jobs, tier, window) or {}
    return {message: list(refs) for message, refs in bucket.items()}


def get_cluster_names(data: DashboardData, tier: str, window: str) -> List[str]:
    bucket = _window_bucket(data.cluster_data, tier, window) or {}
    return sorted(bucket)


def get_job_details(data: DashboardData, job_id: str) -> Optional[Job]:
    job = find_job(data, job_id)
    if job is None:
        logger.warning("Job %s not found", job_id)
    return job


def get_recent_jobs(data: DashboardData, tier: str, window: str, limit: int = 10) -> List[Job]:
    """Jobs of (tier, window), newest start time first."""
    key = tier_key(tier)
    jobs = [
        j for j, job_window in zip(data.jobs, data.time_windows)
        if tier_key(j.tier) == key and job_window == window
    ]
    jobs.sort(key=lambda j: j.start_time, reverse=True)
    return jobs[:limit]
