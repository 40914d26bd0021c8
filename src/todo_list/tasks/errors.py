# tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for every recoverable task-list error."""


class LoadError(TodoError):
    """The source document could not be fetched or understood."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ValidationError(TodoError, ValueError):
    pass


class EmptyTextError(ValidationError):
    def __init__(self) -> None:
        super().__init__("task text is empty")


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"no task with id={task_id}")
        self.task_id = task_id


class NothingToClearError(TodoError):
    """clear_completed() called while no task is completed."""

    def __init__(self) -> None:
        super().__init__("no completed tasks to clear")


class UnknownConfirmationError(TodoError, LookupError):
    def __init__(self, token: str) -> None:
        super().__init__(f"no pending action for token={token}")
        self.token = token
