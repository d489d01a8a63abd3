"""Main application window for To-Do Tracker."""

from __future__ import annotations

from PyQt6.QtCore import QTimer, pyqtSlot
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from todo_tracker.application.task_list_controller import TaskListController
from todo_tracker.domain.models import AppSyncState
from todo_tracker.ui.styles import MAIN_STYLESHEET
from todo_tracker.ui.task_list import TaskListWidget

STATUS_MESSAGE_MS = 5000

STATE_LABELS = {
    AppSyncState.IDLE: "Synced",
    AppSyncState.SYNCING: "Syncing...",
    AppSyncState.LOCAL_ONLY: "Local only",
    AppSyncState.ERROR: "Last sync failed",
}


class MainWindow(QMainWindow):
    def __init__(self, controller: TaskListController, tag_vocabulary: tuple[str, ...] = ()):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("To-Do Tracker")
        self.setStyleSheet(MAIN_STYLESHEET)
        self.resize(420, 640)

        self.task_list = TaskListWidget(controller, tag_vocabulary)
        self.task_list.message_requested.connect(self._show_message)
        self.setCentralWidget(self.task_list)

        self.setStatusBar(QStatusBar(self))
        self._on_sync_state_changed(controller.sync_state)

        controller.sync_state_changed.connect(self._on_sync_state_changed)
        controller.sync_error.connect(self._show_message)

        # Load after the event loop starts so the window appears first.
        QTimer.singleShot(0, controller.hydrate)

    @pyqtSlot(object)
    def _on_sync_state_changed(self, state: AppSyncState):
        self.statusBar().showMessage(STATE_LABELS.get(state, ""))

    @pyqtSlot(str)
    def _show_message(self, message: str):
        self.statusBar().showMessage(message, STATUS_MESSAGE_MS)

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)
