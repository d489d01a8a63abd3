from __future__ import annotations

import logging
from collections.abc import Iterable

from todo_tracker.domain.models import TaskItem
from todo_tracker.store.task_store import TaskStore


logger = logging.getLogger(__name__)


def merge_snapshot(snapshot: Iterable[TaskItem], local_items: Iterable[TaskItem]) -> list[TaskItem]:
    """Remote items first, then local items the snapshot does not know about."""
    merged = list(snapshot)
    remote_ids = {item.id for item in merged}
    merged.extend(item for item in local_items if item.id not in remote_ids)
    return merged


class HydrateStoreUseCase:
    """Apply a startup snapshot to the store.

    A plain replace is only safe while the store is untouched. If the user
    added or changed items while the fetch was in flight (the store revision
    moved), the snapshot is merged with the local content instead.
    """

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, snapshot: list[TaskItem], requested_revision: int) -> bool:
        if self.store.revision == requested_revision:
            self.store.replace_all(snapshot)
            return False

        merged = merge_snapshot(snapshot, self.store.items())
        logger.info(
            "Store changed during hydration; merged %d remote and %d local items.",
            len(snapshot),
            len(merged) - len(snapshot),
        )
        self.store.replace_all(merged)
        return True
