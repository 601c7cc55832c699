"""
Workout logging module.

This module provides the WorkoutLog facade, which wires storage, command
handlers and rendering together, and the `treino` command line interface
for logging sessions, viewing the log and its summary, exporting and
importing CSV, and clearing all data.
"""

import logging
import datetime
from pathlib import Path
from typing import List, Optional, Union

import typer

from treino_core.config import load_config, get_config_value, get_data_file, resolve_path
from treino_core.constants import (
    DATE_FORMAT, DEFAULT_EXPORT_DIR, MSG_CONFIRM_CLEAR, MSG_EMPTY_SUMMARY, STORAGE_KEY
)
from treino_core.handlers import (
    CommandDispatcher, CommandResult, WorkoutHandlers, WorkoutLogError,
    SubmitWorkout, ExportCsv, ImportCsv, ClearAll, ShowEntries, ShowSummary
)
from treino_core.models import WorkoutRecord, WorkoutSummary
from treino_core.render import render_entries_table, render_summary
from treino_core.storage import BlobStore, JsonFileBlobStore, WorkoutRepository

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)
package_logger = logging.getLogger("treino_core")


class WorkoutLog:
    """Main class for workout logging functionality."""

    def __init__(self, store: BlobStore, export_dir: Union[str, Path] = DEFAULT_EXPORT_DIR,
                 key: str = STORAGE_KEY, verbose: bool = False):
        """
        Initialize the workout log.

        Args:
            store: Blob store holding the persisted log
            export_dir: Directory for CSV exports
            key: Key of the entries blob
            verbose: Enable verbose logging
        """
        self.export_dir = Path(export_dir)
        self.verbose = verbose

        if verbose:
            package_logger.setLevel(logging.DEBUG)

        self.repository = WorkoutRepository(store, key)
        self.dispatcher = WorkoutHandlers(self.repository).register_all(CommandDispatcher())

    def submit(self, **fields) -> CommandResult:
        """Log one exercise record from raw form fields."""
        return self.dispatcher.dispatch(SubmitWorkout(**fields))

    def entries(self) -> List[WorkoutRecord]:
        return self.dispatcher.dispatch(ShowEntries()).entries

    def summary(self) -> WorkoutSummary:
        return self.dispatcher.dispatch(ShowSummary()).summary

    def export_csv(self, directory: Optional[Union[str, Path]] = None,
                   today: Optional[datetime.date] = None) -> str:
        """Export the log to CSV and return the file path."""
        target = str(directory) if directory else str(self.export_dir)
        return self.dispatcher.dispatch(ExportCsv(directory=target, today=today)).path

    def import_csv(self, path: Union[str, Path]) -> CommandResult:
        return self.dispatcher.dispatch(ImportCsv(path=str(path)))

    def clear(self, confirmed: bool = True) -> CommandResult:
        return self.dispatcher.dispatch(ClearAll(confirmed=confirmed))


# --- Command line interface ---

app = typer.Typer(help="Log workouts and follow load progression.")


def _workout_log(ctx: typer.Context) -> WorkoutLog:
    return ctx.obj["workout_log"]


def _fail(error: Exception) -> None:
    typer.echo(str(error), err=True)
    raise typer.Exit(1)


@app.callback()
def main(ctx: typer.Context,
         config_file: Optional[Path] = typer.Option(None, "--config-file", help="Path to a YAML configuration file."),
         data_file: Optional[Path] = typer.Option(None, "--data-file", help="Path to the JSON storage file."),
         verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging.")):
    """Initialize the Typer context with configuration and the workout log."""
    config = load_config(str(config_file) if config_file else None)
    level = get_config_value(config, "logging.level", "INFO")
    package_logger.setLevel(logging.DEBUG if verbose else level)

    store = JsonFileBlobStore(get_data_file(config, str(data_file) if data_file else None))
    export_dir = resolve_path(get_config_value(config, "export.directory", DEFAULT_EXPORT_DIR))
    key = get_config_value(config, "storage.key", STORAGE_KEY)

    ctx.obj = {
        "config": config,
        "workout_log": WorkoutLog(store, export_dir=export_dir, key=key, verbose=verbose),
    }


@app.command(name="add")
def add(
    ctx: typer.Context,
    exercise: Optional[str] = typer.Option(None, "--exercise", "-e", help="Exercise name."),
    sets: Optional[str] = typer.Option(None, "--sets", "-s", help="Number of sets."),
    reps: Optional[str] = typer.Option(None, "--reps", "-r", help="Repetitions per set."),
    weight: Optional[str] = typer.Option(None, "--weight", "-w", help="Load in kg."),
    start: Optional[str] = typer.Option(None, "--start", help="Start time (HH:MM)."),
    end: Optional[str] = typer.Option(None, "--end", help="End time (HH:MM)."),
    date: Optional[str] = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD), defaults to today."),
    rest: Optional[str] = typer.Option(None, "--rest", help="Rest between sets in seconds."),
    rpe: Optional[str] = typer.Option(None, "--rpe", help="Rate of perceived exertion."),
    notes: str = typer.Option("", "--notes", "-n", help="Free text notes."),
):
    """Log one exercise of a training session."""
    if date is None:
        date = datetime.date.today().strftime(DATE_FORMAT)
    try:
        result = _workout_log(ctx).submit(
            date=date, start=start, end=end, exercise=exercise, sets=sets,
            reps=reps, weight=weight, rest=rest, rpe=rpe, notes=notes,
        )
    except (WorkoutLogError, ValueError, OSError) as e:
        _fail(e)
    typer.echo(result.message)


@app.command(name="list")
def list_(ctx: typer.Context):
    """Show every logged record, most recent first."""
    entries = _workout_log(ctx).entries()
    if not entries:
        typer.echo(MSG_EMPTY_SUMMARY)
        return
    typer.echo(render_entries_table(entries))


@app.command(name="summary")
def summary(ctx: typer.Context):
    """Show total volume per date and load progression per exercise."""
    typer.echo(render_summary(_workout_log(ctx).summary()))


@app.command(name="export")
def export(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for the CSV file."),
):
    """Export the log to treinos_<date>.csv."""
    try:
        path = _workout_log(ctx).export_csv(output_dir)
    except (WorkoutLogError, OSError) as e:
        _fail(e)
    typer.echo(f"Exportado para {path}")


@app.command(name="import")
def import_(ctx: typer.Context, csv_file: Path = typer.Argument(..., help="CSV file produced by export.")):
    """Add the records of an exported CSV file to the log."""
    try:
        result = _workout_log(ctx).import_csv(csv_file)
    except (ValueError, OSError) as e:
        _fail(e)
    typer.echo(result.message)


@app.command(name="clear")
def clear(ctx: typer.Context, yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation.")):
    """Delete every record."""
    confirmed = yes or typer.confirm(MSG_CONFIRM_CLEAR)
    result = _workout_log(ctx).clear(confirmed=confirmed)
    typer.echo(result.message)
    if confirmed:
        typer.echo(render_summary(result.summary))


if __name__ == "__main__":
    app()
