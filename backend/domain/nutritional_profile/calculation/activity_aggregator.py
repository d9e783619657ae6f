"""ActivityAggregator - daily device records to an ActivitySample."""

from datetime import date, timedelta
from typing import Iterable, Optional

import structlog

from ..core.value_objects.activity_sample import ActivitySample, DailyActivity

logger = structlog.get_logger(__name__)

DEFAULT_WINDOW_DAYS = 7


class ActivityAggregator:
    """Average the last N days of device activity.

    - steps, active minutes, exercise calories: mean per observed day
    - exercise sessions: total scaled to a 7-day week
      (sessions / observed days × 7)

    Days without a record are not counted as zero activity; only
    observed days enter the averages.
    """

    def aggregate(
        self,
        days: Iterable[DailyActivity],
        window_days: int = DEFAULT_WINDOW_DAYS,
        today: Optional[date] = None,
    ) -> Optional[ActivitySample]:
        """Aggregate daily records inside ``(today - window_days, today]``.

        Args:
            days: Daily records, any order; duplicates for a day keep the last
            window_days: Size of the window in days (minimum 1)
            today: Last day of the window; defaults to the latest record

        Returns:
            Optional[ActivitySample]: None when no record falls in the window
        """
        records = list(days)
        if not records:
            return None

        end = today or max(r.day for r in records)
        start = end - timedelta(days=max(1, window_days) - 1)

        by_day: dict[date, DailyActivity] = {}
        for record in records:
            if start <= record.day <= end:
                by_day[record.day] = record

        if not by_day:
            logger.debug("no_activity_in_window", start=str(start), end=str(end))
            return None

        observed = len(by_day)
        window = by_day.values()
        sample = ActivitySample(
            steps=sum(r.steps for r in window) / observed,
            active_minutes=sum(r.active_minutes for r in window) / observed,
            exercise_calories=sum(r.calories_burned for r in window) / observed,
            weekly_exercise_sessions=sum(r.exercise_sessions for r in window)
            / observed
            * 7,
        )
        logger.debug(
            "activity_aggregated",
            observed_days=observed,
            data_sources=sorted({r.data_source for r in window if r.data_source}),
            sample=sample,
        )
        return sample
