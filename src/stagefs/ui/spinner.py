"""Build system spinner."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn

# Spinner glyph, caller-supplied prefix, tool name and a message filling the rest of the line
SPINNER_TEMPLATE = "{task.fields[prefix]} trunk | {task.description}"


class SpinnerHandle:
    """A rich Progress holding a single spinner task."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id

    def set_message(self, message: str) -> None:
        self.progress.update(self.task_id, description=message)

    def set_prefix(self, prefix: str) -> None:
        self.progress.update(self.task_id, prefix=prefix)

    @property
    def message(self) -> str:
        return self.progress.tasks[0].description

    @property
    def prefix(self) -> str:
        return self.progress.tasks[0].fields.get("prefix", "")

    def start(self) -> None:
        self.progress.start()

    def stop(self) -> None:
        self.progress.stop()

    def __enter__(self) -> SpinnerHandle:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


def spinner(prefix: str = "", console: Console | None = None) -> SpinnerHandle:
    """Create a transient spinner; rendering starts when entered or started."""
    progress = Progress(
        SpinnerColumn(),
        TextColumn(SPINNER_TEMPLATE, markup=False),
        console=console,
        transient=True,
        expand=True,
    )
    task_id = progress.add_task("", total=None, prefix=prefix)
    return SpinnerHandle(progress, task_id)
