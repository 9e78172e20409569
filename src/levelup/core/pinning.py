"""
Pinned-goal bookkeeping - no I/O dependencies.

At most MAX_PINNED_GOALS goals are pinned at once. Pinning one more evicts
the goal that has been pinned the longest.

Goals are mutated in place. Callers must not change the same Goal objects
from elsewhere while one of these functions is running.
"""

import logging
from datetime import datetime, timezone

from .days import as_aware
from .goals import Goal

logger = logging.getLogger(__name__)

MAX_PINNED_GOALS = 3

# Stand-in for a missing timestamp: sorts before every real one.
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _pinned_key(goal: Goal) -> datetime:
    return as_aware(goal.pinned_at) if goal.pinned_at else _EARLIEST


def _created_key(goal: Goal) -> datetime:
    return as_aware(goal.created_at) if goal.created_at else _EARLIEST


def _set_pinned(goal: Goal, now: datetime) -> None:
    goal.is_pinned = True
    goal.pinned_at = now


def unpin(goal: Goal) -> None:
    """Clear pin state. Safe to call on an unpinned goal."""
    goal.is_pinned = False
    goal.pinned_at = None


def pin(goal: Goal, all_goals: list[Goal], now: datetime) -> Goal | None:
    """
    Pin `goal`, evicting the oldest pin if the cap is reached.

    Returns the evicted goal, or None if nothing was evicted. Pinning a goal
    that is already pinned changes nothing.

    When two pins share the same pinned_at, the one earlier in `all_goals`
    is evicted.
    """
    if goal.is_pinned:
        return None

    others = [g for g in all_goals if g.is_pinned and g.id != goal.id]

    evicted: Goal | None = None
    while len(others) >= MAX_PINNED_GOALS:
        # min() keeps the first of equal keys, i.e. input order.
        oldest = min(others, key=_pinned_key)
        unpin(oldest)
        others = [g for g in others if g is not oldest]
        if evicted is None:
            evicted = oldest
            logger.info(f"Unpinned '{oldest.title}' to make room for '{goal.title}'")
        else:
            logger.warning(f"Too many pinned goals; also unpinned '{oldest.title}'")

    _set_pinned(goal, now)
    return evicted


def pinned_goals(all_goals: list[Goal]) -> list[Goal]:
    """Pinned goals, most recently pinned first."""
    # sorted() is stable with reverse=True, so ties keep input order.
    return sorted((g for g in all_goals if g.is_pinned), key=_pinned_key, reverse=True)


def auto_pin_if_needed(active_goals: list[Goal], now: datetime) -> bool:
    """
    Make sure something is pinned.

    If no goal in the list is pinned, pin the most recently created one and
    return True. Otherwise leave everything alone and return False.
    """
    if not active_goals or any(g.is_pinned for g in active_goals):
        return False

    newest = max(active_goals, key=_created_key)
    _set_pinned(newest, now)
    logger.info(f"Auto-pinned '{newest.title}'")
    return True
