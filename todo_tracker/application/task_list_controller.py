"""Presentation boundary: the only object the view talks to.

Local mutations are applied to the TaskStore first, then mirrored through
RemoteSync. Remote completions arrive on worker threads and are forwarded to
this object's thread through a queued signal before touching the store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Future
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from todo_tracker.application.usecases.hydrate_store import HydrateStoreUseCase
from todo_tracker.domain.errors import RemoteFailureError, TaskNotFoundError
from todo_tracker.domain.models import AppSyncState, SyncOperation, SyncResult, TaskItem
from todo_tracker.remote_sync import RemoteSync
from todo_tracker.store.task_store import TaskStore


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RemoteCall:
    operation: SyncOperation
    local_id: str = ""
    sent: TaskItem | None = None
    revision: int = 0


class TaskListController(QObject):
    sync_state_changed = pyqtSignal(object)  # AppSyncState
    sync_error = pyqtSignal(str)
    _remote_completed = pyqtSignal(object, object)  # RemoteCall, Future

    def __init__(
        self,
        store: TaskStore,
        remote: RemoteSync | None = None,
        *,
        tags_enabled: bool = True,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self.store = store
        self.remote = remote
        self.tags_enabled = tags_enabled
        self._hydrate = HydrateStoreUseCase(store)
        self._in_flight = 0
        self._last_failed = False
        self._state = AppSyncState.IDLE if remote is not None else AppSyncState.LOCAL_ONLY
        self._remote_completed.connect(self._on_remote_completed)

    @property
    def sync_state(self) -> AppSyncState:
        return self._state

    @property
    def in_flight(self) -> int:
        return self._in_flight

    # ---- entry points used by the view ----

    def hydrate(self) -> None:
        if self.remote is None:
            return
        self._dispatch(
            self.remote.fetch_all(),
            RemoteCall(SyncOperation.FETCH, revision=self.store.revision),
        )

    def add_task(self, title: str, tags: Iterable[str] | None = None) -> TaskItem | None:
        item = self.store.add(title, tags if self.tags_enabled else None)
        if item is None:
            return None
        if self.remote is not None:
            self._dispatch(self.remote.create(item), RemoteCall(SyncOperation.CREATE, local_id=item.id, sent=item))
        return item

    def toggle_task(self, task_id: str, done: bool) -> TaskItem | None:
        try:
            item = self.store.toggle_done(task_id, done)
        except TaskNotFoundError:
            logger.warning("Toggle ignored; task %s is not in the list.", task_id)
            return None
        self._mirror_update(item)
        return item

    def remove_task(self, task_id: str) -> TaskItem | None:
        try:
            removed = self.store.remove(task_id)
        except TaskNotFoundError:
            logger.warning("Remove ignored; task %s is not in the list.", task_id)
            return None
        self._mirror_delete(removed)
        return removed

    def clear_completed(self) -> list[TaskItem]:
        removed = self.store.clear_completed()
        for item in removed:
            self._mirror_delete(item)
        return removed

    def clear_all(self) -> list[TaskItem]:
        removed = self.store.clear_all()
        for item in removed:
            self._mirror_delete(item)
        return removed

    def shutdown(self) -> None:
        if self.remote is not None:
            self.remote.shutdown(wait=False)

    # ---- remote mirroring ----

    def _mirror_update(self, item: TaskItem) -> None:
        if self.remote is None:
            return
        if not item.is_persisted:
            # The create completion sends the latest state once the id is known.
            logger.debug("Task %s has no remote id yet; update deferred.", item.id)
            return
        self._dispatch(self.remote.update(item.id, item), RemoteCall(SyncOperation.UPDATE, local_id=item.id, sent=item))

    def _mirror_delete(self, item: TaskItem) -> None:
        if self.remote is None:
            return
        if not item.is_persisted:
            logger.debug("Task %s has no remote id yet; delete deferred.", item.id)
            return
        self._dispatch(self.remote.delete(item.id), RemoteCall(SyncOperation.DELETE, local_id=item.id))

    def _dispatch(self, future: Future, call: RemoteCall) -> None:
        self._in_flight += 1
        self._refresh_state()
        future.add_done_callback(lambda done, call=call: self._remote_completed.emit(call, done))

    @pyqtSlot(object, object)
    def _on_remote_completed(self, call: RemoteCall, future: Future) -> None:
        self._in_flight = max(0, self._in_flight - 1)
        try:
            if future.cancelled():
                return
            result = self._result_of(call, future)
            self._last_failed = not result.ok
            if not result.ok:
                self._report_failure(call, result)
                return

            if call.operation == SyncOperation.FETCH:
                self._hydrate.execute(result.items, call.revision)
            elif call.operation == SyncOperation.CREATE:
                self._on_created(call, result.remote_id)
        finally:
            self._refresh_state()

    def _on_created(self, call: RemoteCall, remote_id: str) -> None:
        current = self.store.get(call.local_id)
        if current is None:
            logger.info("Task %s was removed before its create finished; deleting %s.", call.local_id, remote_id)
            self._dispatch(self.remote.delete(remote_id), RemoteCall(SyncOperation.DELETE, local_id=remote_id))
            return

        if self.store.get(remote_id) is not None:
            # A hydration snapshot already delivered this document.
            self._collapse_into_hydrated(current, remote_id)
            return

        rebound = self.store.assign_remote_id(call.local_id, remote_id)
        if call.sent is not None and not rebound.same_content(call.sent):
            self._mirror_update(rebound)

    def _collapse_into_hydrated(self, placeholder: TaskItem, remote_id: str) -> None:
        logger.info("Task %s already hydrated as %s; dropping the placeholder.", placeholder.id, remote_id)
        self.store.remove(placeholder.id)
        hydrated = self.store.get(remote_id)
        # Only the done flag can change locally after an add.
        if hydrated.done != placeholder.done:
            self._mirror_update(self.store.toggle_done(remote_id, placeholder.done))

    def _report_failure(self, call: RemoteCall, result: SyncResult) -> None:
        if call.operation == SyncOperation.CREATE:
            logger.warning("Task %s kept locally; remote create failed.", call.local_id)
        self.sync_error.emit(result.error_message or f"Remote {call.operation.value} failed.")

    @staticmethod
    def _result_of(call: RemoteCall, future: Future) -> SyncResult:
        try:
            return future.result()
        except RemoteFailureError as exc:
            return SyncResult(operation=call.operation, ok=False, error_message=str(exc))

    def _refresh_state(self) -> None:
        if self.remote is None:
            state = AppSyncState.LOCAL_ONLY
        elif self._in_flight:
            state = AppSyncState.SYNCING
        elif self._last_failed:
            state = AppSyncState.ERROR
        else:
            state = AppSyncState.IDLE

        if state != self._state:
            self._state = state
            self.sync_state_changed.emit(state)
