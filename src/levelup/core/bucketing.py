"""Time buckets and list views for tasks - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum

from .days import as_aware, start_of_day
from .tasks import Task


class TaskListFilter(Enum):
    """Named list views. Applied before bucketing; not a bucket themselves."""

    INBOX = "inbox"  # Everything still open, whatever the due date
    TODAY = "today"
    UPCOMING = "upcoming"
    DONE = "done"


class Bucket(Enum):
    """Where a task's due date falls relative to now."""

    OVERDUE = "overdue"
    TODAY = "today"
    NEXT_7_DAYS = "next7Days"
    LATER = "later"
    NO_DATE = "noDate"

    @property
    def label(self) -> str:
        return _BUCKET_LABELS[self]


_BUCKET_LABELS = {
    Bucket.OVERDUE: "Overdue",
    Bucket.TODAY: "Today",
    Bucket.NEXT_7_DAYS: "Next 7 Days",
    Bucket.LATER: "Later",
    Bucket.NO_DATE: "No Date",
}

BUCKET_DISPLAY_ORDER = [
    Bucket.OVERDUE,
    Bucket.TODAY,
    Bucket.NEXT_7_DAYS,
    Bucket.LATER,
    Bucket.NO_DATE,
]


@dataclass(frozen=True)
class Boundaries:
    """Day starts used for one classification pass."""

    start_of_today: datetime
    start_of_tomorrow: datetime
    start_of_day_after_7: datetime

    @property
    def end_of_today(self) -> datetime:
        return self.start_of_tomorrow


@dataclass
class Section:
    """A bucket and its tasks, in display order."""

    bucket: Bucket
    tasks: list[Task]


def boundaries(now: datetime, tz: tzinfo) -> Boundaries:
    """
    Day boundaries around `now` in `tz`.

    The next-7-days window runs from tomorrow through the seventh day after
    today, inclusive.
    """
    return Boundaries(
        start_of_today=start_of_day(now, tz),
        start_of_tomorrow=start_of_day(now, tz, offset_days=1),
        start_of_day_after_7=start_of_day(now, tz, offset_days=8),
    )


def _bucket_within(task: Task, b: Boundaries) -> Bucket:
    if task.due_date is None:
        return Bucket.NO_DATE

    due = as_aware(task.due_date)
    if due < b.start_of_today:
        return Bucket.OVERDUE
    if due < b.start_of_tomorrow:
        return Bucket.TODAY
    if due < b.start_of_day_after_7:
        return Bucket.NEXT_7_DAYS
    return Bucket.LATER


def bucket(task: Task, now: datetime, tz: tzinfo) -> Bucket:
    """Classify one task. Pure function - no I/O."""
    return _bucket_within(task, boundaries(now, tz))


def filtered_tasks(
    tasks: list[Task],
    list_filter: TaskListFilter,
    now: datetime,
    tz: tzinfo,
) -> list[Task]:
    """
    Apply a list view, keeping input order.

    Pure function - no I/O.
    """
    b = boundaries(now, tz)

    def keep(task: Task) -> bool:
        match list_filter:
            case TaskListFilter.INBOX:
                return not task.is_done
            case TaskListFilter.TODAY:
                if task.is_done or task.due_date is None:
                    return False
                return b.start_of_today <= as_aware(task.due_date) < b.start_of_tomorrow
            case TaskListFilter.UPCOMING:
                if task.is_done or task.due_date is None:
                    return False
                return as_aware(task.due_date) >= b.start_of_tomorrow
            case TaskListFilter.DONE:
                return task.is_done

    return [t for t in tasks if keep(t)]


def sort_for_list(tasks: list[Task]) -> list[Task]:
    """
    Dated tasks first, nearest due date first; then undated tasks.

    Ties (and undated tasks) go most recently updated first.
    """

    def sort_key(t: Task) -> tuple[bool, float, float]:
        # Negative timestamp for descending updated_at
        due = as_aware(t.due_date).timestamp() if t.due_date else 0.0
        return (t.due_date is None, due, -as_aware(t.updated_at).timestamp())

    return sorted(tasks, key=sort_key)


def sections(tasks: list[Task], now: datetime, tz: tzinfo) -> list[Section]:
    """
    Group tasks into buckets, in display order, skipping empty buckets.

    Pure function - no I/O.
    """
    b = boundaries(now, tz)
    grouped: dict[Bucket, list[Task]] = {}
    for task in tasks:
        grouped.setdefault(_bucket_within(task, b), []).append(task)

    return [
        Section(bucket=bk, tasks=sort_for_list(grouped[bk]))
        for bk in BUCKET_DISPLAY_ORDER
        if grouped.get(bk)
    ]
