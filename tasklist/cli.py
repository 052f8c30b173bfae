#!/usr/bin/env python3
"""
Command-line interface for tasklist.
"""
import sys
import click
from typing import Optional

from tasklist.config import Settings, configure_logging, get_settings
from tasklist.exceptions import ServiceError
from tasklist.models import TaskListAdapter
from tasklist.services import TaskListService
from tasklist.shell import TaskShell, format_listing
from tasklist.storage import create_store


def build_service(
    store_name: Optional[str] = None,
    store_dir: Optional[str] = None,
    memory: bool = False,
) -> TaskListService:
    """Build a TaskListService over the configured store."""
    settings = Settings(store_dir=store_dir) if store_dir else get_settings()
    store = create_store(settings, name=store_name, backend="memory" if memory else None)
    return TaskListService(store)


def get_service(ctx: click.Context) -> TaskListService:
    """Get the context's service, building it on first use."""
    if 'service' not in ctx.obj:
        ctx.obj['service'] = build_service(
            store_name=ctx.obj['store_name'],
            store_dir=ctx.obj['store_dir'],
            memory=ctx.obj['memory'],
        )
    return ctx.obj['service']


def resolve_index(service: TaskListService, position: int) -> int:
    """Convert a 1-based position to a 0-based index, exiting on a bad one."""
    index = position - 1
    if not service.is_in_range(index):
        click.echo(f"Error: no todo #{position} (list has {len(service)})", err=True)
        sys.exit(1)
    return index


@click.group()
@click.option('--name', 'store_name', envvar='TASKLIST_STORE_NAME', default=None,
              help='Store name; the file is <store-dir>/<name>.json (default: todos)')
@click.option('--store-dir', 'store_dir', envvar='TASKLIST_STORE_DIR', default=None,
              type=click.Path(file_okay=False), help='Directory of the store file (default: home)')
@click.option('--memory', is_flag=True, default=False,
              help='Use a volatile in-memory store (nothing is saved)')
@click.pass_context
def cli(ctx, store_name, store_dir, memory):
    """Todo list manager."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj['store_name'] = store_name
    ctx.obj['store_dir'] = store_dir
    ctx.obj['memory'] = memory


@cli.command()
@click.argument('title', nargs=-1, required=True)
@click.pass_context
def add(ctx, title):
    """Add a todo."""
    service = get_service(ctx)
    task = service.add_task(' '.join(title))
    click.echo(f"Todo added: {task.title}")


@cli.command(name='list')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def list_(ctx, output_format):
    """List todos."""
    service = get_service(ctx)
    if output_format == 'json':
        click.echo(TaskListAdapter.dump_json(service.tasks, by_alias=True, indent=2).decode('utf-8'))
    else:
        click.echo(format_listing(service.list_tasks()))


@cli.command()
@click.argument('position', type=int)
@click.pass_context
def toggle(ctx, position):
    """Toggle completion of the todo at POSITION (1-based)."""
    service = get_service(ctx)
    index = resolve_index(service, position)
    try:
        task = service.toggle_completion(index)
    except ServiceError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    state = "completed" if task.is_completed else "not completed"
    click.echo(f"Todo #{position} marked {state}")


@cli.command()
@click.argument('position', type=int)
@click.pass_context
def delete(ctx, position):
    """Delete the todo at POSITION (1-based)."""
    service = get_service(ctx)
    index = resolve_index(service, position)
    try:
        task = service.delete_task(index)
    except ServiceError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Todo deleted: {task.title}")


@cli.command()
@click.pass_context
def shell(ctx):
    """Run the interactive todo shell."""
    TaskShell(get_service(ctx)).run()


if __name__ == '__main__':
    cli()
