"""In-memory, ordered collection of task items.

TaskStore is the single source of truth for the visible list. The view never
holds task data; it re-renders when ``items_changed`` fires. Remote mirroring
lives elsewhere and only reaches the store through the controller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from PyQt6.QtCore import QObject, pyqtSignal

from todo_tracker.domain.errors import BlankTitleError, DuplicateTaskIdError, TaskNotFoundError
from todo_tracker.domain.models import TaskItem, new_local_id, normalize_tags


logger = logging.getLogger(__name__)


class TaskStore(QObject):
    items_changed = pyqtSignal()

    def __init__(self, *, strict_titles: bool = False, parent: QObject | None = None):
        super().__init__(parent)
        self.strict_titles = strict_titles
        self._items: list[TaskItem] = []
        self._revision = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TaskItem]:
        return iter(tuple(self._items))

    @property
    def revision(self) -> int:
        """Incremented by every mutation that changed the collection."""
        return self._revision

    def items(self) -> tuple[TaskItem, ...]:
        return tuple(self._items)

    def get(self, task_id: str) -> TaskItem | None:
        index = self._index_of(task_id)
        return None if index is None else self._items[index]

    def has_completed(self) -> bool:
        return any(item.done for item in self._items)

    def add(self, title: str, tags: Iterable[str] | None = None) -> TaskItem | None:
        if not title or not title.strip():
            if self.strict_titles:
                raise BlankTitleError()
            logger.debug("Ignoring add with blank title.")
            return None

        item = TaskItem(id=new_local_id(), title=title, tags=normalize_tags(tags))
        self._items.append(item)
        self._changed()
        return item

    def toggle_done(self, task_id: str, value: bool) -> TaskItem:
        index = self._require_index(task_id)
        updated = self._items[index].with_done(value)
        if updated != self._items[index]:
            self._items[index] = updated
            self._changed()
        return updated

    def remove(self, task_id: str) -> TaskItem:
        index = self._require_index(task_id)
        removed = self._items.pop(index)
        self._changed()
        return removed

    def clear_completed(self) -> list[TaskItem]:
        removed = [item for item in self._items if item.done]
        if removed:
            self._items = [item for item in self._items if not item.done]
            self._changed()
        return removed

    def clear_all(self) -> list[TaskItem]:
        removed = list(self._items)
        if removed:
            self._items.clear()
            self._changed()
        return removed

    def replace_all(self, items: Iterable[TaskItem]) -> None:
        """Discard the current content and load ``items`` in the given order."""
        accepted: list[TaskItem] = []
        seen: set[str] = set()
        for item in items:
            if not item.title.strip():
                logger.warning("Dropping snapshot item %s with blank title.", item.id)
                continue
            if item.id in seen:
                logger.warning("Dropping snapshot item with duplicate id %s.", item.id)
                continue
            seen.add(item.id)
            accepted.append(item)

        self._items = accepted
        self._changed()

    def assign_remote_id(self, local_id: str, remote_id: str) -> TaskItem:
        index = self._require_index(local_id)
        if local_id == remote_id:
            return self._items[index]
        if self._index_of(remote_id) is not None:
            raise DuplicateTaskIdError(remote_id)

        rebound = self._items[index].with_id(remote_id)
        self._items[index] = rebound
        self._changed()
        return rebound

    def _index_of(self, task_id: str) -> int | None:
        if not task_id:
            return None
        for index, item in enumerate(self._items):
            if item.id == task_id:
                return index
        return None

    def _require_index(self, task_id: str) -> int:
        index = self._index_of(task_id)
        if index is None:
            raise TaskNotFoundError(task_id)
        return index

    def _changed(self) -> None:
        self._revision += 1
        self.items_changed.emit()
