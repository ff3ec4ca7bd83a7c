# entry_tracker/cli.py
import logging
import os
from dataclasses import dataclass

import anyio
import click
from dotenv import load_dotenv

from entry_tracker.config import load_config
from entry_tracker.core.models import DISPLAY_NAMES, DisplayOption
from entry_tracker.effects import create_entry, delete_entry, load_entries
from entry_tracker.errors import NotFound, PersistenceError, ValidationError
from entry_tracker.manual import load_manual_entries
from entry_tracker.outputs import get_output
from entry_tracker.settings import SettingsStore
from entry_tracker.state import (
    AddEntryToggled,
    AppState,
    DisplayOptionChanged,
    NoticesCleared,
    SettingsToggled,
    Store,
)
from entry_tracker.storage import get_repository
from entry_tracker.utils import parse_entry_date
from entry_tracker.views import VIEW_NAMES, get_view

logger = logging.getLogger(__name__)


@dataclass
class App:
    config: dict
    repo: object
    settings: SettingsStore
    store: Store

    def run(self, effect, *args):
        async def _go():
            return await self.store.run(effect(self.repo, *args))
        return anyio.run(_go)

    def refresh(self):
        return self.run(load_entries)

    def flush_notices(self):
        for message in self.store.state.notices:
            click.echo(f"Warning: {message}", err=True)
        self.store.dispatch(NoticesCleared())


pass_app = click.make_pass_decorator(App)


@click.group()
@click.option(
    '--config', 'config_path',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='Path to config.yaml (defaults are used when it does not exist)'
)
@click.option(
    '--db', 'db_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='SQLite database file holding the entries'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file with DAYBOOK_* overrides'
)
@click.pass_context
def main(ctx, config_path, db_path, env_file):
    """
    Record income and expense entries and view them grouped by date,
    as a flat list, or as a spreadsheet grid.
    """
    if env_file:
        load_dotenv(env_file)
    logging.basicConfig(level=os.getenv("DAYBOOK_LOG_LEVEL", "WARNING").upper())

    cfg = load_config(config_path)
    if db_path:
        cfg['db_path'] = db_path
    settings = SettingsStore(cfg['settings_path'])
    store = Store(AppState(display_option=settings.get_display_option()))
    ctx.obj = App(
        config=cfg,
        repo=get_repository(cfg['storage_backend'], cfg),
        settings=settings,
        store=store,
    )


@main.command()
@click.argument('date')
@click.argument('description')
@click.argument('amount', type=click.FloatRange(min=0))
@click.option('--expense/--income', 'is_expense', default=False,
              help='Record an expense instead of income')
@pass_app
def add(app, date, description, amount, is_expense):
    """Add an entry dated DATE (DD/MM/YYYY or YYYY-MM-DD)."""
    try:
        day, month, year = parse_entry_date(date)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint='DATE')

    app.refresh()
    app.store.dispatch(AddEntryToggled(True))
    before = len(app.store.state.entries)
    state = app.run(create_entry, {
        'day': day,
        'month': month,
        'year': year,
        'description': description,
        'amount': amount,
        'is_expense': is_expense,
    })
    if len(state.entries) > before:
        click.echo(f"Added entry #{state.entries[-1].id}.")
    app.flush_notices()


@main.command('list')
@click.option(
    '--view', 'view_name',
    default=None,
    type=click.Choice(list(DISPLAY_NAMES)),
    help='Display mode; defaults to the stored display option'
)
@click.option('--chronological', is_flag=True, default=False,
              help='Sort date groups by date instead of first appearance')
@pass_app
def list_entries(app, view_name, chronological):
    """Show all entries."""
    state = app.refresh()
    option = DisplayOption.from_name(view_name) if view_name else state.display_option
    view = get_view(option, dict(app.config, chronological=chronological))
    click.echo(view.render(app.store.state))
    app.flush_notices()


@main.command()
@click.argument('entry_id', type=int)
@pass_app
def delete(app, entry_id):
    """Delete the entry with ENTRY_ID. Unknown ids are left alone."""
    state = app.refresh()
    known = any(e.id == entry_id for e in state.entries)
    before = len(app.store.state.notices)
    app.run(delete_entry, entry_id)
    if len(app.store.state.notices) == before:
        if known:
            click.echo(f"Deleted entry #{entry_id}.")
        else:
            click.echo(f"No entry with id {entry_id}; nothing deleted.")
    app.flush_notices()


@main.command()
@click.argument('entry_id', type=int)
@pass_app
def show(app, entry_id):
    """Show a single entry."""
    try:
        rec = app.repo.get(entry_id)
    except NotFound as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(1)
    except PersistenceError as exc:
        logger.error("Could not read entry %s: %s", entry_id, exc)
        click.echo(f"Warning: {exc}", err=True)
        return
    view = get_view(DisplayOption.FLAT_LIST, app.config)
    click.echo(view.render(AppState(entries=(rec,))))


@main.command()
@click.argument('view_name', required=False, type=click.Choice(list(DISPLAY_NAMES)))
@pass_app
def display(app, view_name):
    """Show or change the default display mode."""
    if view_name is None:
        click.echo(VIEW_NAMES[app.store.state.display_option])
        return
    app.store.dispatch(SettingsToggled(True))
    state = app.store.dispatch(DisplayOptionChanged(DisplayOption.from_name(view_name)))
    app.settings.set_display_option(state.display_option)
    click.echo(f"Display mode set to {view_name}.")


@main.command('import')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@pass_app
def import_entries(app, path):
    """Create entries from a YAML file."""
    try:
        entries = load_manual_entries(path)
    except ValidationError as exc:
        raise click.ClickException(str(exc))

    app.refresh()
    before = len(app.store.state.entries)
    for data in entries:
        app.run(create_entry, data)
    created = len(app.store.state.entries) - before
    click.echo(f"Imported {created} of {len(entries)} entries.")
    app.flush_notices()


@main.command()
@click.option(
    '--format', 'output_format',
    default='csv',
    type=click.Choice(['csv', 'excel']),
    help='Export target: csv or excel'
)
@click.option(
    '--out-dir', 'out_dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for the exported file (defaults to output_dir in config)'
)
@pass_app
def export(app, output_format, out_dir):
    """Export all entries to a file."""
    before = len(app.store.state.notices)
    state = app.refresh()
    if len(state.notices) > before:
        # nothing loaded; leave earlier exports alone
        app.flush_notices()
        return
    cfg = dict(app.config)
    if out_dir:
        cfg['output_dir'] = out_dir
    out_path = get_output(output_format, cfg).write(list(state.entries))
    click.echo(f"Exported {len(state.entries)} entries to {out_path}.")
    app.flush_notices()
