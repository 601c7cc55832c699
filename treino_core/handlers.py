"""
Command handling for the workout log.

Each user action is a command object. The CommandDispatcher routes a command
to the handler registered for its type and returns a CommandResult.
"""

import datetime
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type

from treino_core.constants import MSG_REQUIRED_FIELDS, MSG_NOTHING_TO_EXPORT, DEFAULT_EXPORT_DIR
from treino_core.export import export_csv, import_csv
from treino_core.models import WorkoutForm, WorkoutRecord, WorkoutSummary
from treino_core.storage import WorkoutRepository, sort_entries
from treino_core.summary import summarize

logger = logging.getLogger(__name__)


# --- Errors ---

class WorkoutLogError(Exception):
    """Base class for errors reported to the user."""


class MissingFieldsError(WorkoutLogError):
    """A submission lacks required fields; nothing was saved."""

    def __init__(self, fields: List[str]):
        super().__init__(MSG_REQUIRED_FIELDS)
        self.fields = fields


class NothingToExportError(WorkoutLogError):
    """Export was requested on an empty log."""

    def __init__(self) -> None:
        super().__init__(MSG_NOTHING_TO_EXPORT)


class UnknownCommandError(WorkoutLogError):
    """No handler is registered for a command type."""


# --- Commands ---

@dataclass
class SubmitWorkout:
    """Form submission of one exercise record."""
    date: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    exercise: Optional[str] = None
    sets: Optional[Any] = None
    reps: Optional[Any] = None
    weight: Optional[Any] = None
    rest: Optional[Any] = None
    rpe: Optional[Any] = None
    notes: Optional[str] = ""


@dataclass
class ExportCsv:
    directory: str = DEFAULT_EXPORT_DIR
    today: Optional[datetime.date] = None


@dataclass
class ImportCsv:
    path: str


@dataclass
class ClearAll:
    confirmed: bool = False


@dataclass
class ShowEntries:
    pass


@dataclass
class ShowSummary:
    pass


@dataclass
class CommandResult:
    """Outcome of a dispatched command."""
    message: str = ""
    entries: List[WorkoutRecord] = field(default_factory=list)
    summary: Optional[WorkoutSummary] = None
    path: Optional[str] = None


Handler = Callable[[Any], CommandResult]


class CommandDispatcher:
    """Routes commands to handlers by command type."""

    def __init__(self) -> None:
        self._handlers: Dict[Type, Handler] = {}

    def register(self, command_type: Type, handler: Handler) -> None:
        self._handlers[command_type] = handler

    def dispatch(self, command: Any) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise UnknownCommandError(f"No handler for {type(command).__name__}")
        logger.debug(f"Dispatching {type(command).__name__}")
        return handler(command)


# --- Handlers ---

class WorkoutHandlers:
    """Handlers that act on a WorkoutRepository."""

    def __init__(self, repository: WorkoutRepository):
        self.repository = repository

    def submit(self, command: SubmitWorkout) -> CommandResult:
        form = WorkoutForm(**vars(command))
        missing = form.missing_fields()
        if missing:
            logger.debug(f"Rejected submission, missing: {', '.join(missing)}")
            raise MissingFieldsError(missing)
        record = form.to_record()
        entries = self.repository.add_entry(record)
        return CommandResult(
            message=f"Registrado: {record.exercise} ({record.date}), volume {record.volume}",
            entries=entries,
            summary=summarize(entries),
        )

    def export(self, command: ExportCsv) -> CommandResult:
        entries = self.repository.load_entries()
        if not entries:
            raise NothingToExportError()
        path = export_csv(entries, command.directory, command.today)
        return CommandResult(message=f"Exportado para {path}", entries=entries, path=path)

    def import_(self, command: ImportCsv) -> CommandResult:
        imported = import_csv(command.path)
        entries = sort_entries(self.repository.load_entries() + imported)
        self.repository.save_entries(entries)
        logger.info(f"Imported {len(imported)} entries from {command.path}")
        return CommandResult(
            message=f"Importados {len(imported)} registros",
            entries=entries,
            summary=summarize(entries),
            path=str(Path(command.path)),
        )

    def clear(self, command: ClearAll) -> CommandResult:
        if not command.confirmed:
            return CommandResult(message="Nada foi apagado.", entries=self.repository.load_entries())
        self.repository.clear()
        return CommandResult(message="Todos os registros foram apagados.", summary=summarize([]))

    def show_entries(self, command: ShowEntries) -> CommandResult:
        return CommandResult(entries=self.repository.load_entries())

    def show_summary(self, command: ShowSummary) -> CommandResult:
        entries = self.repository.load_entries()
        return CommandResult(entries=entries, summary=summarize(entries))

    def register_all(self, dispatcher: CommandDispatcher) -> CommandDispatcher:
        dispatcher.register(SubmitWorkout, self.submit)
        dispatcher.register(ExportCsv, self.export)
        dispatcher.register(ImportCsv, self.import_)
        dispatcher.register(ClearAll, self.clear)
        dispatcher.register(ShowEntries, self.show_entries)
        dispatcher.register(ShowSummary, self.show_summary)
        return dispatcher
