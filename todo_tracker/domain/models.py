from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

LOCAL_ID_PREFIX = "local-"
DEFAULT_TAG_VOCABULARY = ("School", "Personal", "House")


class AppSyncState(str, Enum):
    IDLE = "idle"
    SYNCING = "syncing"
    LOCAL_ONLY = "local_only"
    ERROR = "error"


class SyncOperation(str, Enum):
    FETCH = "fetch"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def new_local_id() -> str:
    return f"{LOCAL_ID_PREFIX}{uuid.uuid4().hex}"


def normalize_tags(tags: Iterable[str] | None) -> frozenset[str]:
    if not tags:
        return frozenset()
    if isinstance(tags, str):
        # a bare string is one tag, not a sequence of characters
        return frozenset({tags})
    return frozenset(str(tag) for tag in tags)


@dataclass(frozen=True, slots=True)
class TaskItem:
    id: str
    title: str
    done: bool = False
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of tags from callers, store a frozenset.
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", normalize_tags(self.tags))

    @property
    def is_persisted(self) -> bool:
        return bool(self.id) and not self.id.startswith(LOCAL_ID_PREFIX)

    def with_done(self, value: bool) -> "TaskItem":
        return replace(self, done=bool(value))

    def with_id(self, item_id: str) -> "TaskItem":
        return replace(self, id=item_id)

    def same_content(self, other: "TaskItem") -> bool:
        return (self.title, self.done, self.tags) == (other.title, other.done, other.tags)


@dataclass(slots=True)
class SyncResult:
    operation: SyncOperation
    ok: bool
    remote_id: str = ""
    items: list[TaskItem] = field(default_factory=list)
    error_message: str = ""
