# ======================================================================
#  File......: aggregators.py
#  Purpose...: Folds over the job population into dashboard aggregates.
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

from typing import Dict, List, Tuple

from models import (
    ERROR_TYPES, ERROR_MESSAGE_SUFFIX,
    STATUS_COMPLETED, STATUS_FAILED, STATUS_RUNNING, STATUS_NOT_RUNNING,
    ClusterData, DetailedErrorJob, ErrorClusteredJob, Job, tier_key,
)
from random_source import RandomSource

# every structure below is: tier key -> time window -> third key -> value
ClassifiedJobs = List[Tuple[Job, str]]


def _bucket(root: dict, job: Job, window: str) -> dict:
    return root.setdefault(tier_key(job.tier), {}).setdefault(window, {})


STATUS_COUNTER = {
    STATUS_RUNNING: "running_jobs",
    STATUS_COMPLETED: "completed_jobs",
    STATUS_FAILED: "failed_jobs",
    STATUS_NOT_RUNNING: "not_running_jobs",
}


def aggregate_cluster_data(classified: ClassifiedJobs) -> Dict[str, Dict[str, Dict[str, ClusterData]]]:
    out: Dict[str, Dict[str, Dict[str, ClusterData]]] = {}

    for job, window in classified:
        bucket = _bucket(out, job, window)
        counts = {"active_jobs": 1}
        counter = STATUS_COUNTER.get(job.status)
        if counter:
            counts[counter] = 1
        bucket[job.cluster] = bucket.get(job.cluster, ClusterData()) + ClusterData(**counts)

    return out


def aggregate_error_analysis(classified: ClassifiedJobs) -> Dict[str, Dict[str, Dict[str, Dict[str, int]]]]:
    out: Dict[str, Dict[str, Dict[str, Dict[str, int]]]] = {}

    for job, window in classified:
        tally = _bucket(out, job, window).setdefault(
            job.cluster, {et: 0 for et in ERROR_TYPES}
        )
        for error_type, count in job.error_analysis.items():
            tally[error_type] = tally.get(error_type, 0) + count

    return out


def aggregate_error_clustered_jobs(
    classified: ClassifiedJobs,
) -> Dict[str, Dict[str, Dict[str, List[ErrorClusteredJob]]]]:
    out: Dict[str, Dict[str, Dict[str, List[ErrorClusteredJob]]]] = {}

    for job, window in classified:
        if job.status != STATUS_FAILED:
            continue
        _bucket(out, job, window).setdefault(job.error_message, []).append(
            ErrorClusteredJob(
                id=job.id,
                name=job.name,
                start_time=job.start_time,
                duration=job.duration,
            )
        )

    return out


def error_type_from_message(message: str) -> str:
    if message.endswith(ERROR_MESSAGE_SUFFIX):
        return message[: -len(ERROR_MESSAGE_SUFFIX)]
    return message


def failed_step_name(job: Job) -> str:
    for step in job.steps:
        if step.status == STATUS_FAILED:
            return step.name
    return "Unknown"


def aggregate_detailed_error_clusters(
    classified: ClassifiedJobs,
    rng: RandomSource,
) -> Dict[str, Dict[str, Dict[str, List[DetailedErrorJob]]]]:
    out: Dict[str, Dict[str, Dict[str, List[DetailedErrorJob]]]] = {}

    for job, window in classified:
        if job.status != STATUS_FAILED:
            continue
        error_type = error_type_from_message(job.error_message)
        _bucket(out, job, window).setdefault(error_type, []).append(
            DetailedErrorJob(
                id=job.id,
                name=job.name,
                cluster=job.cluster,
                start_time=job.start_time,
                duration=job.duration,
                failed_step=failed_step_name(job),
                affected_records=int(job.records_processed * rng.uniform()),
                error_message=job.error_message,
            )
        )

    return out
