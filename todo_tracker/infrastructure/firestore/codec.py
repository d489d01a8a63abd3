"""Mapping between TaskItem and Firestore REST documents.

Firestore has no set type, so tags travel as an array of strings. The array is
sorted on the way out; order is not meaningful on the way back in.
"""

from __future__ import annotations

from todo_tracker.domain.models import TaskItem

MUTABLE_FIELDS = ("title", "done", "tags")


def document_id(name: str) -> str:
    # projects/{p}/databases/{d}/documents/{collection}/{id}
    return name.rsplit("/", 1)[-1] if name else ""


def to_fields(item: TaskItem) -> dict:
    return {
        "title": {"stringValue": item.title},
        "done": {"booleanValue": item.done},
        "tags": {"arrayValue": {"values": [{"stringValue": tag} for tag in sorted(item.tags)]}},
    }


def from_document(document: dict) -> TaskItem:
    fields = document.get("fields") or {}

    title = (fields.get("title") or {}).get("stringValue", "")
    done = bool((fields.get("done") or {}).get("booleanValue", False))

    values = ((fields.get("tags") or {}).get("arrayValue") or {}).get("values") or []
    tags = frozenset(value["stringValue"] for value in values if "stringValue" in value)

    return TaskItem(
        id=document_id(document.get("name", "")),
        title=title,
        done=done,
        tags=tags,
    )
