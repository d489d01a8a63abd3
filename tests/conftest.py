# tests/conftest.py

from __future__ import annotations

import pytest
from PyQt6.QtCore import QCoreApplication

from todo_tracker.application.task_list_controller import TaskListController
from todo_tracker.remote_sync import RemoteSync
from todo_tracker.store.task_store import TaskStore

from .fakes import FakeGateway, ImmediateExecutor, ManualExecutor


@pytest.fixture(scope="session", autouse=True)
def qt_app() -> QCoreApplication:
    """Signals only need a core application; no display is required."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def remote(gateway: FakeGateway) -> RemoteSync:
    return RemoteSync(gateway, executor=ImmediateExecutor())


@pytest.fixture()
def controller(store: TaskStore, remote: RemoteSync) -> TaskListController:
    return TaskListController(store, remote)


@pytest.fixture()
def manual_executor() -> ManualExecutor:
    return ManualExecutor()


@pytest.fixture()
def delayed_controller(store: TaskStore, gateway: FakeGateway, manual_executor: ManualExecutor) -> TaskListController:
    """Controller whose remote calls stay in flight until manual_executor runs them."""
    return TaskListController(store, RemoteSync(gateway, executor=manual_executor))
