"""goaltrack CLI - objectives, tasks and progress."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.backup import export_backup, read_backup
from .config import Config, load_config
from .core.errors import IndexOutOfRange, InvalidImportFormat
from .core.model import Objective, Task
from .core.query import (
    DueStatus,
    FilterMode,
    ViewContext,
    display_tasks,
    due_status,
    format_due_date,
    objective_stats,
    overall_stats,
    visible_objectives,
)
from .session import PlanSession, get_store

PRIORITIES = ["high", "medium", "low"]
EMPTY_MESSAGE = "No objectives yet. Add one to get started!"


def _open_session(config: Config) -> PlanSession:
    return PlanSession.open(get_store(config))


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """goaltrack - track objectives and their tasks."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


# ============== Views ==============


def _task_line(number: int, task: Task, today: date, soon_days: int) -> str:
    check = "x" if task.done else " "
    priority = f" ({task.priority.value})" if task.priority else ""
    due = ""
    if task.due_date:
        due = f"  {format_due_date(task.due_date)}"
        status = due_status(task, today, soon_days)
        if status is not DueStatus.NONE:
            due += f" [{status.value}]"
    return f"   [{check}] {number}. {task.text}{priority}{due}"


def _task_json(index: int, task: Task, today: date, soon_days: int) -> dict:
    data = task.to_dict()
    data["number"] = index + 1
    data["dueStatus"] = due_status(task, today, soon_days).value
    return data


@main.command("list")
@click.option(
    "--filter", "filter_mode",
    type=click.Choice([m.value for m in FilterMode]),
    default=None,
    help="Show all, active or completed tasks",
)
@click.option("--search", default="", help="Only tasks containing this text")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_objectives(config: Config, filter_mode: str | None, search: str, as_json: bool):
    """List objectives with their tasks."""
    session = _open_session(config)
    mode = FilterMode(filter_mode) if filter_mode else config.default_filter
    context = ViewContext(filter_mode=mode, search_text=search.strip())
    today = date.today()
    numbers = {id(o): i + 1 for i, o in enumerate(session.objectives)}
    shown: list[Objective] = visible_objectives(session.objectives, context)

    if as_json:
        output = []
        for obj in shown:
            stats = objective_stats(obj)
            output.append(
                {
                    "number": numbers[id(obj)],
                    "title": obj.title,
                    "description": obj.description,
                    "total": stats.total,
                    "done": stats.done,
                    "percent": stats.percent,
                    "tasks": [
                        _task_json(i, t, today, config.due_soon_days)
                        for i, t in display_tasks(obj, context)
                    ],
                }
            )
        click.echo(json.dumps(output, indent=2))
        return

    if not session.objectives:
        click.echo(EMPTY_MESSAGE)
        return
    if not shown:
        click.echo("No tasks match the current filter.")
        return

    for obj in shown:
        stats = objective_stats(obj)
        click.echo(f"{numbers[id(obj)]}. {obj.title}")
        if obj.description:
            click.echo(f"   {obj.description}")
        click.echo(f"   {stats.done} / {stats.total} tasks completed ({stats.percent}%)")
        for i, task in display_tasks(obj, context):
            click.echo(_task_line(i + 1, task, today, config.due_soon_days))
        click.echo()


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def stats(config: Config, as_json: bool):
    """Show overall progress."""
    session = _open_session(config)
    totals = overall_stats(session.objectives)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "totalObjectives": totals.total_objectives,
                    "totalTasks": totals.total_tasks,
                    "completedTasks": totals.completed_tasks,
                    "percent": totals.percent,
                },
                indent=2,
            )
        )
        return

    click.echo(f"Objectives:      {totals.total_objectives}")
    click.echo(f"Tasks:           {totals.total_tasks}")
    click.echo(f"Completed:       {totals.completed_tasks}")
    click.echo(f"Completion rate: {totals.percent}%")


# ============== Objectives ==============


@main.command()
@click.argument("title")
@click.option("--description", "-d", default="", help="Optional description")
@click.pass_obj
def add(config: Config, title: str, description: str):
    """Add an objective."""
    session = _open_session(config)
    if session.add_objective(title, description):
        click.echo(f"✓ Added objective {len(session.objectives)}: {title.strip()}")
    else:
        click.echo("Nothing added: title is empty.")


@main.command()
@click.argument("number", type=click.IntRange(min=1))
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_obj
def delete(config: Config, number: int, yes: bool):
    """Delete an objective and all its tasks."""
    session = _open_session(config)
    if not yes and not click.confirm("Delete this objective and all its tasks?"):
        return
    try:
        session.delete_objective(number - 1)
    except IndexOutOfRange as e:
        _fail(e)
    click.echo(f"✓ Deleted objective {number}")


@main.command()
@click.argument("number", type=click.IntRange(min=1))
@click.option("--title", "-t", default=None, help="New title")
@click.option("--description", "-d", default=None, help="New description (empty clears it)")
@click.pass_obj
def edit(config: Config, number: int, title: str | None, description: str | None):
    """Edit an objective's title or description."""
    if title is None and description is None:
        click.echo("Nothing to edit: pass --title and/or --description.", err=True)
        sys.exit(1)
    session = _open_session(config)
    changed = False
    try:
        if title is not None:
            if session.edit_objective(number - 1, "title", title):
                changed = True
            else:
                click.echo("Title unchanged: it cannot be empty.")
        if description is not None:
            changed = session.edit_objective(number - 1, "description", description) or changed
    except IndexOutOfRange as e:
        _fail(e)
    if changed:
        click.echo(f"✓ Updated objective {number}")


# ============== Tasks ==============


@main.group()
def task():
    """Manage an objective's tasks."""
    pass


@task.command("add")
@click.argument("number", type=click.IntRange(min=1))
@click.argument("text")
@click.option("--due", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Due date (YYYY-MM-DD)")
@click.option("--priority", "-p", type=click.Choice(PRIORITIES), default=None)
@click.pass_obj
def task_add(config: Config, number: int, text: str, due, priority: str | None):
    """Add a task to objective NUMBER."""
    session = _open_session(config)
    try:
        added = session.add_task(number - 1, text, due.date() if due else None, priority)
    except IndexOutOfRange as e:
        _fail(e)
    if added:
        click.echo(f"✓ Added task to objective {number}")
    else:
        click.echo("Nothing added: task text is empty.")


@task.command("toggle")
@click.argument("number", type=click.IntRange(min=1))
@click.argument("task_number", type=click.IntRange(min=1))
@click.pass_obj
def task_toggle(config: Config, number: int, task_number: int):
    """Mark a task done, or not done."""
    session = _open_session(config)
    try:
        session.toggle_task(number - 1, task_number - 1)
    except IndexOutOfRange as e:
        _fail(e)
    toggled = session.objectives[number - 1].tasks[task_number - 1]
    click.echo(f"✓ {toggled.text}: {'done' if toggled.done else 'not done'}")


@task.command("delete")
@click.argument("number", type=click.IntRange(min=1))
@click.argument("task_number", type=click.IntRange(min=1))
@click.pass_obj
def task_delete(config: Config, number: int, task_number: int):
    """Delete a task."""
    session = _open_session(config)
    try:
        session.delete_task(number - 1, task_number - 1)
    except IndexOutOfRange as e:
        _fail(e)
    click.echo(f"✓ Deleted task {task_number} from objective {number}")


@task.command("edit")
@click.argument("number", type=click.IntRange(min=1))
@click.argument("task_number", type=click.IntRange(min=1))
@click.argument("text")
@click.pass_obj
def task_edit(config: Config, number: int, task_number: int, text: str):
    """Replace a task's text."""
    session = _open_session(config)
    try:
        changed = session.edit_task(number - 1, task_number - 1, text)
    except IndexOutOfRange as e:
        _fail(e)
    if changed:
        click.echo(f"✓ Updated task {task_number}")
    else:
        click.echo("Task unchanged: text cannot be empty.")


@task.command("move")
@click.argument("number", type=click.IntRange(min=1))
@click.argument("from_number", type=click.IntRange(min=1))
@click.argument("to_number", type=click.IntRange(min=1))
@click.pass_obj
def task_move(config: Config, number: int, from_number: int, to_number: int):
    """Move a task to a new position within its objective."""
    session = _open_session(config)
    try:
        moved = session.reorder_task(number - 1, from_number - 1, to_number - 1)
    except IndexOutOfRange as e:
        _fail(e)
    if moved:
        click.echo(f"✓ Moved task {from_number} to position {to_number}")
    else:
        click.echo(f"Task {from_number} is already at position {to_number}.")


# ============== Backup ==============


@main.command("export")
@click.option("--dir", "directory", type=click.Path(file_okay=False, path_type=Path),
              default=None, help="Directory to write the backup to")
@click.pass_obj
def export_cmd(config: Config, directory: Path | None):
    """Export all objectives to a backup file."""
    session = _open_session(config)
    path = export_backup(session.objectives, directory or config.export_path, config.plan_name)
    click.echo(f"✓ Exported to {path}")


@main.command("import")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_obj
def import_cmd(config: Config, file: Path, yes: bool):
    """Replace all objectives with the contents of a backup file."""
    try:
        data = read_backup(file)
    except InvalidImportFormat as e:
        _fail(e)

    session = _open_session(config)
    prompt = (
        f"Replace {len(session.objectives)} objectives with "
        f"{len(data)} from {file.name}?"
    )
    if not yes and not click.confirm(prompt):
        return
    try:
        session.replace_model(data)
    except InvalidImportFormat as e:
        _fail(e)
    click.echo(f"✓ Imported {len(session.objectives)} objectives")


if __name__ == "__main__":
    main()
