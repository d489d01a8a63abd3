from __future__ import annotations

import logging

from todo_tracker.domain.errors import RemoteFailureError
from todo_tracker.domain.models import TaskItem
from todo_tracker.infrastructure.firestore.auth_service import FirestoreAuthService
from todo_tracker.infrastructure.firestore.codec import MUTABLE_FIELDS, document_id, from_document, to_fields


logger = logging.getLogger(__name__)


class FirestoreDocumentsGateway:
    """Blocking CRUD calls against one Firestore collection.

    Every failure surfaces as RemoteFailureError; callers decide whether to
    log, retry or propagate.
    """

    def __init__(
        self,
        auth_service: FirestoreAuthService,
        *,
        project_id: str,
        database_id: str = "(default)",
        collection: str = "todos",
        page_size: int = 300,
    ):
        self.auth = auth_service
        self.project_id = project_id
        self.database_id = database_id
        self.collection = collection
        self.page_size = page_size

    @property
    def parent(self) -> str:
        return f"projects/{self.project_id}/databases/{self.database_id}/documents"

    def document_name(self, doc_id: str) -> str:
        return f"{self.parent}/{self.collection}/{doc_id}"

    def is_available(self) -> bool:
        return bool(self.project_id) and self.auth.is_available()

    def _documents(self, operation: str):
        try:
            service = self.auth.get_service()
            http = self.auth.authorized_http()
        except Exception as exc:
            raise RemoteFailureError(operation, str(exc)) from exc
        if service is None:
            raise RemoteFailureError(operation, "Firestore service is not available")
        return service.projects().databases().documents(), http

    def list_documents(self) -> list[TaskItem]:
        documents, http = self._documents("fetch")
        items: list[TaskItem] = []
        try:
            request = documents.list(
                parent=self.parent,
                collectionId=self.collection,
                pageSize=self.page_size,
            )
            while request is not None:
                response = request.execute(http=http)
                items.extend(from_document(doc) for doc in response.get("documents", []))
                request = documents.list_next(request, response)
        except Exception as exc:
            raise RemoteFailureError("fetch", str(exc)) from exc
        return items

    def create_document(self, item: TaskItem) -> str:
        documents, http = self._documents("create")
        try:
            created = documents.createDocument(
                parent=self.parent,
                collectionId=self.collection,
                body={"fields": to_fields(item)},
            ).execute(http=http)
        except Exception as exc:
            raise RemoteFailureError("create", str(exc)) from exc

        remote_id = document_id(created.get("name", ""))
        if not remote_id:
            raise RemoteFailureError("create", "response carried no document name")
        return remote_id

    def update_document(self, doc_id: str, item: TaskItem) -> None:
        if not doc_id:
            raise RemoteFailureError("update", "missing document id")
        documents, http = self._documents("update")
        try:
            documents.patch(
                name=self.document_name(doc_id),
                body={"fields": to_fields(item)},
                updateMask_fieldPaths=list(MUTABLE_FIELDS),
            ).execute(http=http)
        except Exception as exc:
            raise RemoteFailureError("update", str(exc)) from exc

    def delete_document(self, doc_id: str) -> None:
        if not doc_id:
            raise RemoteFailureError("delete", "missing document id")
        documents, http = self._documents("delete")
        try:
            documents.delete(name=self.document_name(doc_id)).execute(http=http)
        except Exception as exc:
            raise RemoteFailureError("delete", str(exc)) from exc
