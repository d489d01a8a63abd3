"""Build the store/remote/controller graph from AppSettings."""

from __future__ import annotations

import logging

from todo_tracker.application.task_list_controller import TaskListController
from todo_tracker.domain.errors import AuthRequiredError
from todo_tracker.infrastructure.firestore.auth_service import FirestoreAuthService
from todo_tracker.infrastructure.firestore.documents_gateway import FirestoreDocumentsGateway
from todo_tracker.remote_sync import RemoteSync
from todo_tracker.settings import AppSettings
from todo_tracker.store.task_store import TaskStore


logger = logging.getLogger(__name__)


def build_gateway(settings: AppSettings) -> FirestoreDocumentsGateway:
    auth = FirestoreAuthService(settings.credentials_path, settings.token_path)
    return FirestoreDocumentsGateway(
        auth,
        project_id=settings.project_id,
        database_id=settings.database_id,
        collection=settings.collection,
        page_size=settings.page_size,
    )


def sign_in(gateway: FirestoreDocumentsGateway, *, interactive: bool = True) -> bool:
    """Authenticate up front on the UI thread so workers never need a browser."""
    try:
        return gateway.auth.authenticate()
    except AuthRequiredError:
        if not interactive:
            logger.warning("Stored credentials need interactive sign-in; running local-only.")
            return False
        logger.info("Stored credentials need interactive sign-in.")
        return gateway.auth.run_interactive_auth()


def build_remote_sync(settings: AppSettings, *, interactive: bool = True) -> RemoteSync | None:
    if not settings.remote_enabled:
        logger.info("Remote persistence disabled in settings.")
        return None

    gateway = build_gateway(settings)
    if not gateway.is_available():
        logger.warning("Firestore project id or credentials missing; running local-only.")
        return None

    if not sign_in(gateway, interactive=interactive):
        logger.error("Firestore sign-in failed; running local-only.")
        return None

    return RemoteSync(
        gateway,
        max_workers=settings.max_workers,
        raise_errors=settings.raise_remote_errors,
    )


def build_controller(settings: AppSettings, remote: RemoteSync | None = None) -> TaskListController:
    store = TaskStore(strict_titles=settings.strict_titles)
    return TaskListController(store, remote, tags_enabled=settings.tags_enabled)
