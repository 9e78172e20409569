"""LevelUp CLI - progression, pinning and task buckets."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import click

from .adapters import APIError, FileSettingsStore, LevelUpAPIAdapter
from .config import load_config
from .core.bucketing import TaskListFilter, filtered_tasks, sections
from .core.dates import InvalidTimestampError, parse_optional_timestamp, parse_timestamp
from .core.goals import Goal, active_goals
from .core.pinning import auto_pin_if_needed, pinned_goals
from .core.progression import progress_for, update_streak
from .core.records import RecordError
from .core.tasks import Task
from .ports import GoalRepository, SettingsStore


def _settings_store() -> SettingsStore:
    return FileSettingsStore(load_config().settings_path())


def _fetch_active_goals(repo: GoalRepository) -> list[Goal]:
    """Active goals from the server, with one auto-pinned if none are."""
    active = active_goals([r.to_goal() for r in repo.fetch_goals()])
    auto_pin_if_needed(active, datetime.now(timezone.utc))
    return active


def _now(value: str | None) -> datetime:
    """The --now override, or the wall clock."""
    if value is None:
        return datetime.now(timezone.utc)
    return parse_timestamp(value)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """LevelUp - goals, streaks and task buckets."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("points", type=int)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def level(points: int, as_json: bool):
    """Show the level reached with POINTS total points."""
    progress = progress_for(points)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total_points": progress.total_points,
                    "level": progress.level,
                    "points_to_next": progress.points_to_next,
                    "next_level_threshold": progress.next_level_threshold,
                },
                indent=2,
            )
        )
    else:
        click.echo(f"Level {progress.level} ({progress.total_points} pts)")
        click.echo(f"{progress.points_to_next} pts to level {progress.level + 1}")


@main.command()
@click.option("--current", default=0, show_default=True, help="Current streak in days")
@click.option("--longest", default=0, show_default=True, help="Longest streak in days")
@click.option("--last", "last_activity", default=None, help="Last activity timestamp")
@click.option("--now", "now_str", default=None, help="Reference time (defaults to now)")
def streak(current: int, longest: int, last_activity: str | None, now_str: str | None):
    """Show the streak after recording an activity."""
    config = load_config()
    try:
        now = _now(now_str)
        last = parse_optional_timestamp(last_activity)
    except InvalidTimestampError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    state = update_streak(current, longest, last, now, config.tz())
    last_str = state.last_activity.isoformat() if state.last_activity else "never"
    click.echo(f"Current streak: {state.current} day(s)")
    click.echo(f"Longest streak: {state.longest} day(s)")
    click.echo(f"Last activity:  {last_str}")


@main.command("parse-date")
@click.argument("value")
def parse_date(value: str):
    """Decode an API timestamp and print it in UTC."""
    try:
        parsed = parse_timestamp(value)
    except InvalidTimestampError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(parsed.astimezone(timezone.utc).isoformat())


@main.command()
@click.argument("tasks_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--filter",
    "list_filter",
    type=click.Choice([f.value for f in TaskListFilter]),
    default=TaskListFilter.INBOX.value,
    show_default=True,
)
@click.option("--now", "now_str", default=None, help="Reference time (defaults to now)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(tasks_file: Path, list_filter: str, now_str: str | None, as_json: bool):
    """Show tasks from TASKS_FILE grouped by due-date bucket."""
    config = load_config()
    tz = config.tz()
    try:
        now = _now(now_str)
        all_tasks = [Task.from_api(t) for t in json.loads(tasks_file.read_text())]
    except (InvalidTimestampError, KeyError, TypeError, json.JSONDecodeError) as e:
        click.echo(f"Error: could not load tasks: {e}", err=True)
        sys.exit(1)

    visible = filtered_tasks(all_tasks, TaskListFilter(list_filter), now, tz)
    grouped = sections(visible, now, tz)

    if as_json:
        click.echo(
            json.dumps(
                [{"bucket": s.bucket.value, "tasks": [t.to_dict() for t in s.tasks]} for s in grouped],
                indent=2,
            )
        )
        return

    if not grouped:
        click.echo("No tasks.")
        return

    for i, section in enumerate(grouped):
        if i:
            click.echo()
        click.echo(f"### {section.bucket.label}")
        for task in section.tasks:
            due = f" (due {task.due_date.astimezone(tz):%Y-%m-%d %H:%M})" if task.due_date else ""
            click.echo(f"• {task.title}{due}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def goals(as_json: bool):
    """List goals from the LevelUp server, pinned first."""
    config = load_config()
    try:
        active = _fetch_active_goals(LevelUpAPIAdapter(config))
    except (APIError, RecordError, InvalidTimestampError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    pinned = pinned_goals(active)
    ordered = pinned + [g for g in active if not g.is_pinned]

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": g.id,
                        "title": g.title,
                        "pinned": g.is_pinned,
                        "progress": g.progress_percentage,
                    }
                    for g in ordered
                ],
                indent=2,
            )
        )
        return

    if not ordered:
        click.echo("No active goals.")
        return

    for goal in ordered:
        marker = "*" if goal.is_pinned else " "
        click.echo(f"{marker} {goal.title} ({goal.progress_percentage:.0%})")


@main.group()
def settings():
    """Show or change user settings."""
    pass


@settings.command("show")
def settings_show():
    """Print settings and the derived prompt prefix."""
    store = _settings_store()
    current = store.load()
    click.echo(f"Full name:   {current.full_name}")
    click.echo(f"Nickname:    {current.nickname}")
    click.echo(f"Preferences: {current.preferences}")
    prefix = current.prompt_prefix()
    if prefix:
        click.echo()
        click.echo(prefix)


@settings.command("set")
@click.option("--full-name", default=None)
@click.option("--nickname", default=None)
@click.option("--preferences", default=None)
def settings_set(full_name: str | None, nickname: str | None, preferences: str | None):
    """Update one or more settings."""
    store = _settings_store()
    current = store.load()
    if full_name is not None:
        current.full_name = full_name
    if nickname is not None:
        current.nickname = nickname
    if preferences is not None:
        current.preferences = preferences
    store.save(current)
    click.echo("Settings saved.")
