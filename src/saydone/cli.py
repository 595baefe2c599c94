"""CLI interface for task capture."""

import logging
from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table

from .config import get_vocabulary, settings
from .database import init_db, load_tasks, save_tasks
from .models.task import Category, TaskRecord, Urgency, parse_due_date
from .services.task_parser import parse_tasks
from .services.task_store import TaskStore

app = typer.Typer(help="Turn spoken or typed sentences into tasks")
console = Console()

URGENCY_COLORS = {
    Urgency.HIGH: "red",
    Urgency.MEDIUM: "yellow",
    Urgency.LOW: "dim",
}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    """Voice-to-task capture."""
    logging.basicConfig(
        level=logging.DEBUG if verbose or settings.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _open_store() -> TaskStore:
    init_db()
    return TaskStore(load_tasks(), history_limit=settings.history_limit, on_change=save_tasks)


def _resolve_id(store: TaskStore, id_prefix: str) -> str:
    """Find the single task whose id starts with the given prefix."""
    matches = [task.id for task in store.tasks if task.id.startswith(id_prefix)]
    if len(matches) != 1:
        reason = "No task" if not matches else "Several tasks"
        console.print(f"[red]{reason} matching id: {id_prefix}[/red]")
        raise typer.Exit(1)
    return matches[0]


def _print_tasks(tasks: list[TaskRecord], title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Task")
    table.add_column("Due")
    table.add_column("Category")
    table.add_column("Urgency")
    table.add_column("Done")

    for task in tasks:
        color = URGENCY_COLORS.get(task.urgency, "white")
        table.add_row(
            task.id[:8],
            task.description,
            task.due_date_display,
            task.category.value,
            f"[{color}]{task.urgency.value}[/{color}]",
            "✓" if task.completed else "",
        )

    console.print(table)


@app.command()
def parse(
    text: str,
    now: datetime = typer.Option(
        None, "--now", help="Reference date for relative dates", formats=["%Y-%m-%d"]
    ),
):
    """Show the tasks extracted from TEXT without saving them."""
    tasks = parse_tasks(text, now=now)
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return
    _print_tasks(tasks, f"Parsed Tasks ({len(tasks)})")


@app.command()
def add(text: str):
    """Extract tasks from TEXT and add them to the list."""
    store = _open_store()
    tasks = store.add(parse_tasks(text))
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return
    console.print(f"[green]Added {len(tasks)} task(s)[/green]")
    _print_tasks(tasks, "New Tasks")


@app.command("list")
def list_tasks(
    pending: bool = typer.Option(False, "--pending", "-p", help="Hide completed tasks"),
    category: Category = typer.Option(
        None, "--category", "-c", help="Only this category", case_sensitive=False
    ),
):
    """Show the task list, newest first."""
    tasks = _open_store().tasks
    if pending:
        tasks = [t for t in tasks if not t.completed]
    if category:
        tasks = [t for t in tasks if t.category == category]

    if not tasks:
        console.print("[yellow]No tasks[/yellow]")
        return
    _print_tasks(tasks, f"Tasks ({len(tasks)})")


@app.command()
def done(task_id: str):
    """Toggle completion of a task."""
    store = _open_store()
    task = store.toggle_complete(_resolve_id(store, task_id))
    state = "complete" if task.completed else "incomplete"
    console.print(f"[green]Marked {state}:[/green] {task.description}")


@app.command()
def edit(
    task_id: str,
    description: str = typer.Option(None, "--description", "-d", help="New description"),
    due: str = typer.Option(None, "--due", help="Due date as DD-MMM or 'Not specified'"),
    category: Category = typer.Option(
        None, "--category", "-c", help="Work or Home", case_sensitive=False
    ),
    urgency: Urgency = typer.Option(
        None, "--urgency", "-u", help="Low, Medium or High", case_sensitive=False
    ),
):
    """Edit fields of a task."""
    store = _open_store()
    resolved_id = _resolve_id(store, task_id)

    updates = {}
    if description is not None:
        updates["description"] = description
    if category is not None:
        updates["category"] = category
    if urgency is not None:
        updates["urgency"] = urgency
    try:
        if due is not None:
            updates["due_date"] = parse_due_date(due)
        if not updates:
            console.print("[yellow]Nothing to change[/yellow]")
            return
        task = store.edit(resolved_id, **updates)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    _print_tasks([task], "Updated Task")


@app.command()
def remove(task_id: str):
    """Remove a task from the list."""
    store = _open_store()
    task = store.remove(_resolve_id(store, task_id))
    console.print(f"[green]Removed:[/green] {task.description}")


@app.command()
def config():
    """Show current configuration."""
    vocabulary = get_vocabulary()
    console.print("\n[bold]Configuration[/bold]")
    console.print(f"  Environment: {settings.environment}")
    console.print(f"  DB path: {settings.db_path}")
    console.print(f"  History limit: {settings.history_limit}")
    console.print(f"  Vocabulary: {settings.vocabulary_path or 'built-in'}")
    console.print(f"  Work keywords: {len(vocabulary.work_keywords)}")
    console.print(f"  Home keywords: {len(vocabulary.home_keywords)}")
    console.print(f"  Filler phrases: {len(vocabulary.filler_phrases)}")


if __name__ == "__main__":
    app()
