# ======================================================================
#  File......: job_generator.py
#  Purpose...: Mock ETL job / load synthesis + population generation.
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, List, Tuple

from config import MockSettings
from models import (
    CLUSTERS, DATA_TYPES, ERROR_TYPES, ERROR_MESSAGE_SUFFIX, STEP_NAMES, TIERS,
    STATUS_COMPLETED, STATUS_FAILED, STATUS_RUNNING,
    DailyDataPoint, Job, JobLoad, JobStep, LogEntry, format_duration,
)
from random_source import RandomSource


CLUSTER_PREFIX = {
    "Registration": "REG",
    "Audit": "AUD",
    "Collection": "COL",
    "Payment": "PAY",
    "Reporting": "RPT",
    "Supervision": "SUP",
}

TABLE_NAMES = [
    "OBJEK_PAJAK", "REPRESENTATIF", "REPRESENTATIF_LAYANAN", "REPRESENTATIF_PERAN",
    "WP_ALAMAT", "WP_BANK", "WP_EKONOMI", "WP_IDENTITAS", "WP_KEGIATAN",
    "WP_KONTAK", "WP_KORPORASI", "WP_KUASA", "WP_ORANG_PRIBADI", "WP_PENGURUS",
    "AGAMA", "DOKUMEN", "JABATAN", "JENIS_PAJAK", "KECAMATAN", "KELURAHAN",
    "KODE_POS", "KOTA", "NEGARA", "PEKERJAAN", "PROVINSI",
]

PICS = ["Andi Pratama", "Budi Santoso", "Citra Lestari", "Dewi Anggraini", "Eko Wibowo"]
SOURCE_SYSTEMS = ["Core Tax DB", "CRM System", "Document Archive", "Payment Gateway", "Legacy Mainframe"]
TARGET_SYSTEMS = ["Data Warehouse", "Data Mart", "Reporting Lake"]

LOG_COMPONENTS = ("Extractor", "Transformer", "Loader")
LOG_MESSAGES = {
    "Extractor": "Extracting batch {n} from source",
    "Transformer": "Transforming batch {n}",
    "Loader": "Loading batch {n} into target",
}
COMPLETION_MESSAGE = "Job finished processing"

TIER_3_EVERY = 3
MAX_LOADS = 5
LOAD_JITTER_MINUTES = 30


# ---------------------------------------------------------------------
# Time windows
# ---------------------------------------------------------------------

def classify_time_window(start_time: datetime, now: datetime) -> str:
    """
    Exactly one bucket per job:
      today -> within last 24h
      week  -> within last 7 days (and not today)
      month -> everything else
    """
    age = now - start_time
    if age <= timedelta(days=1):
        return "today"
    if age <= timedelta(days=7):
        return "week"
    return "month"


def classify_jobs(jobs: List[Job], now: datetime) -> List[Tuple[Job, str]]:
    return [(job, classify_time_window(job.start_time, now)) for job in jobs]


# ---------------------------------------------------------------------
# Loads
# ---------------------------------------------------------------------

def generate_daily_data(start: datetime, days: int, rng: RandomSource) -> List[DailyDataPoint]:
    points: List[DailyDataPoint] = []
    first_day = start.date()

    for i in range(days):
        initial = i == 0
        if initial:
            records = rng.between(100_000, 1_000_000)
            duration = rng.between(60, 240)
        else:
            records = rng.between(1_000, 5_000)
            duration = rng.between(30, 60)

        points.append(DailyDataPoint(
            date=first_day + timedelta(days=i),
            records_processed=records,
            duration=duration,
            throughput=records / duration,
            is_initial_load=initial,
            data_type=rng.choice(DATA_TYPES),
        ))

    return points


def generate_job_load(start: datetime, rng: RandomSource, status: str) -> JobLoad:
    days = rng.between(30, 91)
    daily = generate_daily_data(start, days, rng)

    return JobLoad(
        load_run_id=rng.identifier("LR"),
        load_id=rng.identifier("LD"),
        table_name=rng.choice(TABLE_NAMES),
        status=status,
        output_row_count=sum(p.records_processed for p in daily),
        start_time=start,
        duration=format_duration(sum(p.duration for p in daily)),
        daily_data=daily,
    )


# ---------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------

def _build_steps(
    start: datetime,
    end: datetime,
    duration: int,
    records: int,
    status: str,
    rng: RandomSource,
) -> List[JobStep]:
    third = duration // 3
    extract_end = start + timedelta(minutes=third)
    transform_end = extract_end + timedelta(minutes=third)

    extract_records = int(records * 0.4)
    transform_records = int(records * 0.3)
    load_records = records - extract_records - transform_records

    transform_failed = False
    load_failed = False
    if status == STATUS_FAILED:
        # one draw decides which step broke
        if rng.chance(0.5):
            transform_failed = True
        else:
            load_failed = True

    load_status = STATUS_FAILED if load_failed else STATUS_COMPLETED
    load_end: Optional[datetime] = end
    if status == STATUS_RUNNING:
        load_status = STATUS_RUNNING
        load_end = None

    extract_name, transform_name, load_name = STEP_NAMES
    return [
        JobStep(extract_name, STATUS_COMPLETED, start, extract_end,
                format_duration(third), extract_records),
        JobStep(transform_name, STATUS_FAILED if transform_failed else STATUS_COMPLETED,
                extract_end, transform_end, format_duration(third), transform_records),
        JobStep(load_name, load_status, transform_end, load_end,
                format_duration(duration - 2 * third), load_records),
    ]


def _build_logs(start: datetime, duration: int, status: str, error_message: str) -> List[LogEntry]:
    span = timedelta(minutes=duration)
    logs: List[LogEntry] = []

    for i in range(10):
        component = LOG_COMPONENTS[(i // 4) % len(LOG_COMPONENTS)]
        level = "INFO"
        message = LOG_MESSAGES[component].format(n=i + 1)

        if i == 9:
            if status == STATUS_FAILED:
                level = "ERROR"
                message = error_message
            else:
                message = COMPLETION_MESSAGE

        logs.append(LogEntry(
            timestamp=start + span * i / 9,
            level=level,
            component=component,
            message=message,
        ))

    return logs


def generate_job(
    cluster: str,
    start: datetime,
    rng: RandomSource,
    tier: Optional[str] = None,
) -> Job:
    duration = rng.between(30, 150)
    end = start + timedelta(minutes=duration)
    status = rng.weighted_status()
    tier = tier or rng.weighted_tier()
    records = rng.randint(1_000_000)

    error_type = rng.choice(ERROR_TYPES) if status == STATUS_FAILED else None
    error_message = f"{error_type}{ERROR_MESSAGE_SUFFIX}" if error_type else ""

    error_analysis = {et: 0 for et in ERROR_TYPES}
    if error_type:
        error_analysis[error_type] = rng.between(1, 11)

    table = rng.choice(TABLE_NAMES)
    prefix = CLUSTER_PREFIX.get(cluster, cluster[:3].upper())
    kind = rng.choice(("D", "M"))

    steps = _build_steps(start, end, duration, records, status, rng)
    logs = _build_logs(start, duration, status, error_message)

    loads = []
    for _ in range(rng.between(1, MAX_LOADS + 1)):
        load_start = start + timedelta(minutes=rng.randint(LOAD_JITTER_MINUTES))
        loads.append(generate_job_load(load_start, rng, status))

    return Job(
        id=rng.identifier("JOB"),
        name=f"{prefix}_{kind}_{table}",
        description=f"Load {table.replace('_', ' ').lower()} data for the {cluster} cluster.",
        tier=tier,
        cluster=cluster,
        status=status,
        start_time=start,
        end_time=end,
        duration=format_duration(duration),
        pic=rng.choice(PICS),
        records_processed=records,
        error_message=error_message,
        error_type=error_type,
        source_system=rng.choice(SOURCE_SYSTEMS),
        target_system=rng.choice(TARGET_SYSTEMS),
        steps=steps,
        error_analysis=error_analysis,
        logs=logs,
        loads=loads,
    )


# ---------------------------------------------------------------------
# Populations
# ---------------------------------------------------------------------

def generate_jobs(start: datetime, end: datetime, count: int, rng: RandomSource) -> List[Job]:
    """`count` jobs with start times uniformly spread over [start, end)."""
    span = end - start
    jobs: List[Job] = []

    for i in range(count):
        started = start + span * rng.uniform()
        cluster = rng.choice(CLUSTERS)
        forced_tier = TIERS[1] if i % TIER_3_EVERY == 0 else None
        jobs.append(generate_job(cluster, started, rng, tier=forced_tier))

    return jobs


def generate_populations(now: datetime, rng: RandomSource, settings: MockSettings) -> List[Job]:
    """Last 24h, last 7d and last 30d populations, concatenated in that order."""
    plan = [
        (settings.today_window_days, settings.today_job_count),
        (settings.week_window_days, settings.week_job_count),
        (settings.month_window_days, settings.month_job_count),
    ]

    jobs: List[Job] = []
    for days, count in plan:
        jobs.extend(generate_jobs(now - timedelta(days=days), now, count, rng))
    return jobs
