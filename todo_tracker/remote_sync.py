"""Best-effort mirroring of TaskStore mutations to the remote collection.

Every call is dispatched to a worker pool and returns immediately with a
Future. The future resolves to a SyncResult; with ``raise_errors`` enabled a
failed call resolves with the RemoteFailureError instead. Failures are always
logged here and never reach the code that performed the local mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Protocol

from todo_tracker.domain.errors import RemoteFailureError
from todo_tracker.domain.models import SyncOperation, SyncResult, TaskItem


logger = logging.getLogger(__name__)


class DocumentsGateway(Protocol):
    def list_documents(self) -> list[TaskItem]: ...

    def create_document(self, item: TaskItem) -> str: ...

    def update_document(self, doc_id: str, item: TaskItem) -> None: ...

    def delete_document(self, doc_id: str) -> None: ...


class RemoteSync:
    def __init__(
        self,
        gateway: DocumentsGateway,
        *,
        executor: Executor | None = None,
        max_workers: int = 4,
        raise_errors: bool = False,
    ):
        self.gateway = gateway
        self.raise_errors = raise_errors
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="remote-sync")

    def fetch_all(self) -> Future:
        return self._submit(SyncOperation.FETCH, "", self._fetch_all)

    def create(self, item: TaskItem) -> Future:
        return self._submit(SyncOperation.CREATE, item.id, lambda: self._create(item))

    def update(self, doc_id: str, item: TaskItem) -> Future:
        return self._submit(SyncOperation.UPDATE, doc_id, lambda: self._update(doc_id, item))

    def delete(self, doc_id: str) -> Future:
        return self._submit(SyncOperation.DELETE, doc_id, lambda: self._delete(doc_id))

    def shutdown(self, wait: bool = False) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def _fetch_all(self) -> SyncResult:
        items = self.gateway.list_documents()
        logger.info("Fetched %d documents from the remote collection.", len(items))
        return SyncResult(operation=SyncOperation.FETCH, ok=True, items=items)

    def _create(self, item: TaskItem) -> SyncResult:
        remote_id = self.gateway.create_document(item)
        logger.info("Document added with ID: %s", remote_id)
        return SyncResult(operation=SyncOperation.CREATE, ok=True, remote_id=remote_id)

    def _update(self, doc_id: str, item: TaskItem) -> SyncResult:
        self.gateway.update_document(doc_id, item)
        logger.info("Document updated with ID: %s", doc_id)
        return SyncResult(operation=SyncOperation.UPDATE, ok=True, remote_id=doc_id)

    def _delete(self, doc_id: str) -> SyncResult:
        self.gateway.delete_document(doc_id)
        logger.info("Successfully deleted document with ID: %s", doc_id)
        return SyncResult(operation=SyncOperation.DELETE, ok=True, remote_id=doc_id)

    def _submit(self, operation: SyncOperation, target: str, call: Callable[[], SyncResult]) -> Future:
        def run() -> SyncResult:
            try:
                return call()
            except RemoteFailureError as exc:
                logger.warning("Remote %s failed for %r: %s", operation.value, target, exc.message)
                error = exc
            except Exception as exc:
                logger.exception("Unexpected error during remote %s for %r.", operation.value, target)
                error = RemoteFailureError(operation.value, str(exc))

            if self.raise_errors:
                raise error
            remote_id = target if operation in (SyncOperation.UPDATE, SyncOperation.DELETE) else ""
            return SyncResult(operation=operation, ok=False, remote_id=remote_id, error_message=str(error))

        return self._executor.submit(run)
