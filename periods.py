# ======================================================================
#  File......: periods.py
#  Purpose...: Roll daily load data up into calendar week / month / quarter.
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

from typing import List

import pandas as pd

from models import AggregatedDataPoint, DailyDataPoint

# weeks start on Sunday (W-SAT = weeks ending Saturday)
PERIOD_FREQ = {
    "week": "W-SAT",
    "month": "M",
    "quarter": "Q",
}


def period_label(period: pd.Period, granularity: str) -> str:
    start = period.start_time
    if granularity == "week":
        # the Sunday start sits in the previous ISO week; label by the Monday
        year, week, _ = (start + pd.Timedelta(days=1)).isocalendar()
        return f"Week {week}, {year}"
    if granularity == "month":
        return start.strftime("%b %Y")
    return f"Q{period.quarter} {period.year}"


def points_to_frame(points: List[DailyDataPoint]) -> pd.DataFrame:
    df = pd.DataFrame({
        "date": [p.date for p in points],
        "records_processed": [p.records_processed for p in points],
        "duration": [p.duration for p in points],
    })
    df["date"] = pd.to_datetime(df["date"])
    return df


def aggregate_daily_data(points: List[DailyDataPoint], granularity: str) -> List[AggregatedDataPoint]:
    """
    Group a daily series by calendar period.

    Records and durations are summed; average throughput is recomputed from
    the sums (total records / total duration), not averaged per day.
    """
    freq = PERIOD_FREQ.get(granularity)
    if freq is None:
        raise ValueError(f"Unsupported granularity: {granularity!r}")
    if not points:
        return []

    df = points_to_frame(points)
    df["period"] = df["date"].dt.to_period(freq)

    grouped = (
        df.groupby("period", sort=True)
        .agg(
            records_processed=("records_processed", "sum"),
            total_duration=("duration", "sum"),
            data_points=("date", "count"),
        )
    )

    out: List[AggregatedDataPoint] = []
    for period, r in grouped.iterrows():
        records = int(r["records_processed"])
        total_duration = int(r["total_duration"])
        out.append(AggregatedDataPoint(
            period=period_label(period, granularity),
            period_start=period.start_time.date(),
            records_processed=records,
            total_duration=total_duration,
            average_throughput=records / total_duration if total_duration else 0.0,
            data_points=int(r["data_points"]),
        ))

    return out
