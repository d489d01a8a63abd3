# tests/test_task_list_controller.py

from __future__ import annotations

import threading
import time

from PyQt6.QtCore import QCoreApplication

from todo_tracker.application.task_list_controller import TaskListController
from todo_tracker.domain.models import AppSyncState, TaskItem
from todo_tracker.remote_sync import RemoteSync
from todo_tracker.store.task_store import TaskStore

from .fakes import FakeGateway, ImmediateExecutor, ManualExecutor


def test_add_mirrors_and_rebinds_remote_id(controller: TaskListController, gateway: FakeGateway) -> None:
    controller.add_task("Buy milk", {"House"})

    (item,) = controller.store.items()
    assert item.id == "doc-1"
    assert item.is_persisted
    assert item.tags == frozenset({"House"})
    assert gateway.documents["doc-1"].title == "Buy milk"
    assert controller.sync_state == AppSyncState.IDLE


def test_blank_title_add_makes_no_remote_call(controller: TaskListController, gateway: FakeGateway) -> None:
    assert controller.add_task("   ") is None
    assert gateway.calls == []


def test_create_failure_keeps_local_item(controller: TaskListController, gateway: FakeGateway) -> None:
    errors: list[str] = []
    controller.sync_error.connect(errors.append)
    gateway.fail.add("create")

    item = controller.add_task("Offline task")

    assert controller.store.items() == (item,)
    assert not item.is_persisted
    assert gateway.documents == {}
    assert len(errors) == 1
    assert controller.sync_state == AppSyncState.ERROR


def test_toggle_persisted_item_sends_update(controller: TaskListController, gateway: FakeGateway) -> None:
    controller.add_task("a")

    updated = controller.toggle_task("doc-1", True)

    assert updated.done is True
    assert ("update", "doc-1") in gateway.calls
    assert gateway.documents["doc-1"].done is True


def test_toggle_unknown_id_is_a_no_op(controller: TaskListController, gateway: FakeGateway) -> None:
    controller.add_task("a")
    before = controller.store.items()
    calls = list(gateway.calls)

    assert controller.toggle_task("missing", True) is None
    assert controller.store.items() == before
    assert gateway.calls == calls


def test_remove_persisted_item_sends_delete(controller: TaskListController, gateway: FakeGateway) -> None:
    controller.add_task("a")

    removed = controller.remove_task("doc-1")

    assert removed.title == "a"
    assert len(controller.store) == 0
    assert "doc-1" not in gateway.documents


def test_remove_unknown_id_is_a_no_op(controller: TaskListController) -> None:
    assert controller.remove_task("missing") is None


def test_clear_completed_cascades_remote_deletes(controller: TaskListController, gateway: FakeGateway) -> None:
    for title in ("a", "b", "c"):
        controller.add_task(title)
    controller.toggle_task("doc-2", True)

    removed = controller.clear_completed()

    assert [item.id for item in removed] == ["doc-2"]
    assert [item.id for item in controller.store] == ["doc-1", "doc-3"]
    assert sorted(gateway.documents) == ["doc-1", "doc-3"]


def test_clear_all_deletes_every_persisted_item(controller: TaskListController, gateway: FakeGateway) -> None:
    controller.add_task("a")
    controller.add_task("b")

    controller.clear_all()

    assert len(controller.store) == 0
    assert gateway.documents == {}


def test_hydrate_replaces_untouched_store() -> None:
    gateway = FakeGateway([TaskItem(id="x", title="remote", done=True, tags=frozenset({"School"}))])
    controller = TaskListController(TaskStore(), RemoteSync(gateway, executor=ImmediateExecutor()))

    controller.hydrate()

    assert controller.store.items() == (TaskItem(id="x", title="remote", done=True, tags=frozenset({"School"})),)


def test_hydrate_merges_when_user_added_during_fetch(
    delayed_controller: TaskListController, gateway: FakeGateway, manual_executor: ManualExecutor
) -> None:
    gateway.documents["x"] = TaskItem(id="x", title="remote")
    delayed_controller.hydrate()
    local = delayed_controller.add_task("typed before load")

    manual_executor.run_next()  # fetch

    assert [item.title for item in delayed_controller.store] == ["remote", "typed before load"]
    assert delayed_controller.store.get(local.id) is not None


def test_remove_during_create_deletes_new_document(
    delayed_controller: TaskListController, gateway: FakeGateway, manual_executor: ManualExecutor
) -> None:
    item = delayed_controller.add_task("short lived")
    delayed_controller.remove_task(item.id)
    assert gateway.calls == []

    manual_executor.run_next()  # create
    assert "doc-1" in gateway.documents
    manual_executor.run_all()  # follow-up delete

    assert gateway.documents == {}
    assert len(delayed_controller.store) == 0


def test_toggle_during_create_sends_latest_state(
    delayed_controller: TaskListController, gateway: FakeGateway, manual_executor: ManualExecutor
) -> None:
    item = delayed_controller.add_task("quick")
    delayed_controller.toggle_task(item.id, True)

    manual_executor.run_all()

    assert delayed_controller.store.items()[0].id == "doc-1"
    assert gateway.documents["doc-1"].done is True
    assert ("update", "doc-1") in gateway.calls


def test_sync_state_reports_in_flight_work(
    delayed_controller: TaskListController, manual_executor: ManualExecutor
) -> None:
    states: list[AppSyncState] = []
    delayed_controller.sync_state_changed.connect(states.append)

    delayed_controller.add_task("a")
    assert delayed_controller.sync_state == AppSyncState.SYNCING
    assert delayed_controller.in_flight == 1

    manual_executor.run_all()

    assert states == [AppSyncState.SYNCING, AppSyncState.IDLE]
    assert delayed_controller.in_flight == 0


def test_raise_policy_failure_still_keeps_local_item(gateway: FakeGateway) -> None:
    gateway.fail.add("create")
    controller = TaskListController(
        TaskStore(), RemoteSync(gateway, executor=ImmediateExecutor(), raise_errors=True)
    )
    errors: list[str] = []
    controller.sync_error.connect(errors.append)

    controller.add_task("a")

    assert len(controller.store) == 1
    assert errors and "create failed" in errors[0]


def test_local_only_controller_never_touches_remote(store: TaskStore) -> None:
    controller = TaskListController(store)

    item = controller.add_task("a", {"House"})
    controller.toggle_task(item.id, True)
    controller.hydrate()

    assert controller.sync_state == AppSyncState.LOCAL_ONLY
    assert controller.clear_completed() == [item.with_done(True)]


def test_tags_disabled_drops_tags(store: TaskStore) -> None:
    controller = TaskListController(store, tags_enabled=False)

    item = controller.add_task("a", {"House"})

    assert item.tags == frozenset()


def test_create_finishing_after_hydration_collapses_placeholder(
    delayed_controller: TaskListController, gateway: FakeGateway, manual_executor: ManualExecutor
) -> None:
    delayed_controller.hydrate()
    item = delayed_controller.add_task("typed early")

    resolve_create = manual_executor.start(1)  # document written before the list call reads
    manual_executor.run_next()  # fetch already sees doc-1
    assert [task.id for task in delayed_controller.store] == ["doc-1", item.id]

    resolve_create()

    assert [task.id for task in delayed_controller.store] == ["doc-1"]
    assert delayed_controller.store.items()[0].title == "typed early"
    assert manual_executor.pending == []


def test_toggle_before_late_create_is_kept_on_hydrated_item(
    delayed_controller: TaskListController, gateway: FakeGateway, manual_executor: ManualExecutor
) -> None:
    delayed_controller.hydrate()
    item = delayed_controller.add_task("typed early")
    resolve_create = manual_executor.start(1)
    manual_executor.run_next()
    delayed_controller.toggle_task(item.id, True)

    resolve_create()
    manual_executor.run_all()

    (hydrated,) = delayed_controller.store.items()
    assert hydrated.id == "doc-1"
    assert hydrated.done is True
    assert gateway.documents["doc-1"].done is True
    assert ("update", "doc-1") in gateway.calls


def test_worker_completions_are_applied_on_the_store_thread(store: TaskStore, gateway: FakeGateway) -> None:
    remote = RemoteSync(gateway, max_workers=2)
    controller = TaskListController(store, remote)
    mutating_threads: set[int] = set()
    store.items_changed.connect(lambda: mutating_threads.add(threading.get_ident()))

    try:
        controller.add_task("from the pool")
        deadline = time.monotonic() + 5
        while controller.in_flight and time.monotonic() < deadline:
            QCoreApplication.processEvents()
            time.sleep(0.01)
    finally:
        remote.shutdown(wait=True)

    assert controller.in_flight == 0
    assert [task.id for task in store] == ["doc-1"]
    assert mutating_threads == {threading.get_ident()}
