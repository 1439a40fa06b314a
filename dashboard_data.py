# ======================================================================
#  File......: dashboard_data.py
#  Purpose...: Build the immutable mock dataset (jobs + aggregates) once.
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Dict, List, Tuple

from aggregators import (
    aggregate_cluster_data,
    aggregate_detailed_error_clusters,
    aggregate_error_analysis,
    aggregate_error_clustered_jobs,
)
from config import MockSettings, load_settings
from job_generator import classify_jobs, generate_populations
from models import ClusterData, DetailedErrorJob, ErrorClusteredJob, Job
from random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardData:
    """
    Everything the dashboard reads, captured at one fixed `now`.

    Built once; accessors only read it. To regenerate, build a new one and
    swap the reference. `time_windows[i]` is the bucket of `jobs[i]`.
    """

    now: datetime
    jobs: Tuple[Job, ...]
    time_windows: Tuple[str, ...]
    cluster_data: Dict[str, Dict[str, Dict[str, ClusterData]]]
    error_analysis: Dict[str, Dict[str, Dict[str, Dict[str, int]]]]
    error_clustered_jobs: Dict[str, Dict[str, Dict[str, List[ErrorClusteredJob]]]]
    detailed_error_clusters: Dict[str, Dict[str, Dict[str, List[DetailedErrorJob]]]]


def build_from_jobs(jobs: List[Job], now: datetime, rng: RandomSource) -> DashboardData:
    classified = classify_jobs(jobs, now)

    return DashboardData(
        now=now,
        jobs=tuple(jobs),
        time_windows=tuple(window for _, window in classified),
        cluster_data=aggregate_cluster_data(classified),
        error_analysis=aggregate_error_analysis(classified),
        error_clustered_jobs=aggregate_error_clustered_jobs(classified),
        detailed_error_clusters=aggregate_detailed_error_clusters(classified, rng),
    )


def build_dashboard_data(
    now: Optional[datetime] = None,
    rng: Optional[RandomSource] = None,
    settings: Optional[MockSettings] = None,
) -> DashboardData:
    settings = settings or load_settings()
    now = now or datetime.now(timezone.utc)
    rng = rng or RandomSource(settings.seed)

    jobs = generate_populations(now, rng, settings)
    data = build_from_jobs(jobs, now, rng)

    logger.info(
        "Generated %d mock jobs at %s (seed=%s)", len(data.jobs), now.isoformat(), rng.seed
    )
    return data
