# ======================================================================
#  File......: models.py
#  Purpose...: Dataclasses / constants for mock job, load and aggregate records.
#  Version...: 0.2.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Optional, Tuple, Mapping, Dict, Any


TIERS = ("Tier 2", "Tier 3")
TIER_KEYS = ("tier2", "tier3")
TIME_WINDOWS = ("today", "week", "month")

STATUS_COMPLETED = "Completed"
STATUS_FAILED = "Failed"
STATUS_RUNNING = "Running"
STATUS_NOT_RUNNING = "Not Running"
JOB_STATUSES = (STATUS_COMPLETED, STATUS_FAILED, STATUS_RUNNING, STATUS_NOT_RUNNING)

ERROR_TYPES = (
    "Connection Timeout",
    "Data Validation Error",
    "Transformation Error",
    "Source Data Unavailable",
    "Insufficient Resources",
)
ERROR_MESSAGE_SUFFIX = " during job execution"

CLUSTERS = (
    "Registration",
    "Audit",
    "Collection",
    "Payment",
    "Reporting",
    "Supervision",
)

DATA_TYPES = ("dimension", "fact")
GRANULARITIES = ("day", "week", "month", "quarter")
STEP_NAMES = ("Extract", "Transform", "Load")


def tier_key(tier: str) -> str:
    """'Tier 2' -> 'tier2'."""
    return tier.replace(" ", "").lower()


def format_duration(minutes: int) -> str:
    """Dashboard duration label, e.g. 90 -> '1h 30m', 45 -> '45m'."""
    minutes = int(minutes)
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours}h {mins}m"
    if hours:
        return f"{hours}h"
    return f"{mins}m"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class JobStep:
    name: str
    status: str
    start_time: datetime
    end_time: Optional[datetime]
    duration: str
    records_processed: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "startTime": _iso(self.start_time),
            "endTime": _iso(self.end_time),
            "duration": self.duration,
            "recordsProcessed": self.records_processed,
        }


@dataclass(frozen=True)
class DailyDataPoint:
    date: date
    records_processed: int
    duration: int
    throughput: float
    is_initial_load: bool
    data_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "recordsProcessed": self.records_processed,
            "duration": self.duration,
            "throughput": self.throughput,
            "isInitialLoad": self.is_initial_load,
            "dataType": self.data_type,
        }


@dataclass(frozen=True)
class JobLoad:
    load_run_id: str
    load_id: str
    table_name: str
    status: str
    output_row_count: int
    start_time: datetime
    duration: str
    daily_data: Tuple[DailyDataPoint, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "daily_data", tuple(self.daily_data))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loadRunId": self.load_run_id,
            "loadId": self.load_id,
            "tableName": self.table_name,
            "status": self.status,
            "outputRowCount": self.output_row_count,
            "startTime": _iso(self.start_time),
            "duration": self.duration,
            "dailyData": [p.to_dict() for p in self.daily_data],
        }


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: str
    component: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": _iso(self.timestamp),
            "level": self.level,
            "component": self.component,
            "message": self.message,
        }


@dataclass(frozen=True)
class Job:
    id: str
    name: str
    description: str
    tier: str
    cluster: str
    status: str
    start_time: datetime
    end_time: datetime
    duration: str
    pic: str
    records_processed: int
    error_message: str = ""
    error_type: Optional[str] = None
    source_system: str = ""
    target_system: str = ""

    steps: Tuple[JobStep, ...] = field(default_factory=tuple)
    error_analysis: Mapping[str, int] = field(default_factory=dict)
    logs: Tuple[LogEntry, ...] = field(default_factory=tuple)
    loads: Tuple[JobLoad, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # generated jobs never change; callers get read-only views
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "error_analysis", MappingProxyType(dict(self.error_analysis)))
        object.__setattr__(self, "logs", tuple(self.logs))
        object.__setattr__(self, "loads", tuple(self.loads))

    def find_load(self, load_id: str) -> Optional[JobLoad]:
        for load in self.loads:
            if load.load_id == load_id:
                return load
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "tier": self.tier,
            "clusterName": self.cluster,
            "status": self.status,
            "startTime": _iso(self.start_time),
            "endTime": _iso(self.end_time),
            "duration": self.duration,
            "pic": self.pic,
            "recordsProcessed": self.records_processed,
            "errorMessage": self.error_message,
            "sourceSystem": self.source_system,
            "targetSystem": self.target_system,
            "steps": [s.to_dict() for s in self.steps],
            "errorAnalysis": dict(self.error_analysis),
            "logs": [entry.to_dict() for entry in self.logs],
            "jobLoads": [load.to_dict() for load in self.loads],
        }


@dataclass(frozen=True)
class ClusterData:
    active_jobs: int = 0
    running_jobs: int = 0
    completed_jobs: int = 0
    failed_jobs: int = 0
    not_running_jobs: int = 0

    def __add__(self, other: "ClusterData") -> "ClusterData":
        return ClusterData(
            active_jobs=self.active_jobs + other.active_jobs,
            running_jobs=self.running_jobs + other.running_jobs,
            completed_jobs=self.completed_jobs + other.completed_jobs,
            failed_jobs=self.failed_jobs + other.failed_jobs,
            not_running_jobs=self.not_running_jobs + other.not_running_jobs,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "activeJobs": self.active_jobs,
            "runningJobs": self.running_jobs,
            "completedJobs": self.completed_jobs,
            "failedJobs": self.failed_jobs,
            "notRunningJobs": self.not_running_jobs,
        }


@dataclass(frozen=True)
class ErrorClusteredJob:
    id: str
    name: str
    start_time: datetime
    duration: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "startTime": _iso(self.start_time),
            "duration": self.duration,
        }


@dataclass(frozen=True)
class DetailedErrorJob:
    id: str
    name: str
    cluster: str
    start_time: datetime
    duration: str
    failed_step: str
    affected_records: int
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "clusterName": self.cluster,
            "startTime": _iso(self.start_time),
            "duration": self.duration,
            "failedStep": self.failed_step,
            "affectedRecords": self.affected_records,
            "errorMessage": self.error_message,
        }


@dataclass(frozen=True)
class AggregatedDataPoint:
    period: str
    period_start: date
    records_processed: int
    total_duration: int
    average_throughput: float
    data_points: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "periodStart": self.period_start.isoformat(),
            "recordsProcessed": self.records_processed,
            "totalDuration": self.total_duration,
            "averageThroughput": self.average_throughput,
            "dataPoints": self.data_points,
        }
