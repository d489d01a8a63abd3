# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from todo_tracker.bootstrap import build_controller, build_remote_sync
from todo_tracker.domain.errors import AuthRequiredError, BlankTitleError
from todo_tracker.domain.models import AppSyncState
from todo_tracker.settings import AppSettings


def test_remote_disabled_runs_local_only() -> None:
    settings = AppSettings(remote_enabled=False)

    assert build_remote_sync(settings) is None
    assert build_controller(settings).sync_state == AppSyncState.LOCAL_ONLY


def test_missing_credentials_runs_local_only(tmp_path: Path) -> None:
    settings = AppSettings(project_id="demo", credentials_path=str(tmp_path / "absent.json"))

    assert build_remote_sync(settings) is None


def test_auth_required_without_interaction_runs_local_only(tmp_path: Path) -> None:
    credentials = tmp_path / "credentials.json"
    credentials.write_text("{}", encoding="utf-8")
    settings = AppSettings(project_id="demo", credentials_path=str(credentials), token_path=str(tmp_path / "t.json"))

    with patch(
        "todo_tracker.infrastructure.firestore.auth_service.FirestoreAuthService.authenticate",
        side_effect=AuthRequiredError(),
    ):
        assert build_remote_sync(settings, interactive=False) is None


def test_signed_in_gateway_builds_remote_sync(tmp_path: Path) -> None:
    credentials = tmp_path / "credentials.json"
    credentials.write_text("{}", encoding="utf-8")
    settings = AppSettings(project_id="demo", credentials_path=str(credentials), remote_error_policy="raise")

    with patch(
        "todo_tracker.infrastructure.firestore.auth_service.FirestoreAuthService.authenticate",
        return_value=True,
    ):
        remote = build_remote_sync(settings)

    try:
        assert remote is not None
        assert remote.raise_errors
        assert remote.gateway.parent == "projects/demo/databases/(default)/documents"
    finally:
        remote.shutdown(wait=True)


def test_strict_title_policy_reaches_store() -> None:
    controller = build_controller(AppSettings(remote_enabled=False, blank_title_policy="raise"))

    with pytest.raises(BlankTitleError):
        controller.add_task(" ")
    assert len(controller.store) == 0
