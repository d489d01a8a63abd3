"""Exceptions shared by the store, the remote layer and the controller."""

from __future__ import annotations


class TaskNotFoundError(KeyError):
    """Raised when an operation addresses an id the store does not hold."""

    def __init__(self, task_id: str):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task {self.task_id!r} not found"


class BlankTitleError(ValueError):
    def __init__(self, message: str = "Task title must not be blank"):
        super().__init__(message)


class DuplicateTaskIdError(ValueError):
    def __init__(self, task_id: str):
        super().__init__(f"Task id {task_id!r} is already in use")
        self.task_id = task_id


class RemoteFailureError(RuntimeError):
    """A create/update/delete/fetch against the remote collection failed."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


class AuthRequiredError(Exception):
    """Raised when stored credentials are invalid and interactive re-authentication is needed."""

    def __init__(self, message: str = "Stored credentials expired; sign in again"):
        super().__init__(message)
