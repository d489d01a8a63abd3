"""Task list pane: title input, tag chips, rows and the clear-completed action."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QScrollArea, QVBoxLayout, QWidget

from todo_tracker.application.task_list_controller import TaskListController
from todo_tracker.domain.errors import BlankTitleError
from todo_tracker.ui.task_list.tag_selection_row import TagSelectionRow
from todo_tracker.ui.task_list.task_item_widget import TaskItemWidget


class TaskListWidget(QWidget):
    """Renders the controller's store; owns no task data itself."""

    message_requested = pyqtSignal(str)

    def __init__(self, controller: TaskListController, tag_vocabulary: tuple[str, ...] = (), parent=None):
        super().__init__(parent)
        self.controller = controller
        self._rows: list[TaskItemWidget] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(8)

        header_label = QLabel("To-Do Tracker")
        header_label.setObjectName("headerLabel")
        layout.addWidget(header_label)

        input_layout = QHBoxLayout()
        input_layout.setSpacing(6)

        self.input_field = QLineEdit()
        self.input_field.setObjectName("taskInput")
        self.input_field.setPlaceholderText("Add a task...")
        self.input_field.returnPressed.connect(self._add_task)
        input_layout.addWidget(self.input_field, 1)

        self.add_button = QPushButton("Add")
        self.add_button.setObjectName("addButton")
        self.add_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_button.clicked.connect(self._add_task)
        input_layout.addWidget(self.add_button)
        layout.addLayout(input_layout)

        self.tag_row = TagSelectionRow(tag_vocabulary)
        self.tag_row.setVisible(controller.tags_enabled and bool(tag_vocabulary))
        layout.addWidget(self.tag_row)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.task_container = QWidget()
        self.task_layout = QVBoxLayout(self.task_container)
        self.task_layout.setContentsMargins(0, 0, 0, 0)
        self.task_layout.setSpacing(6)
        self.task_layout.addStretch()
        self.scroll_area.setWidget(self.task_container)
        layout.addWidget(self.scroll_area, 1)

        self.empty_label = QLabel("No tasks")
        self.empty_label.setObjectName("emptyLabel")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.task_layout.insertWidget(0, self.empty_label)

        self.clear_completed_button = QPushButton("Clear Completed")
        self.clear_completed_button.setObjectName("clearCompletedButton")
        self.clear_completed_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clear_completed_button.clicked.connect(lambda: self.controller.clear_completed())
        layout.addWidget(self.clear_completed_button)

        self.controller.store.items_changed.connect(self.render)
        self.render()

    @pyqtSlot()
    def render(self):
        for row in self._rows:
            self.task_layout.removeWidget(row)
            row.deleteLater()
        self._rows.clear()

        items = self.controller.store.items()
        for index, item in enumerate(items):
            row = TaskItemWidget(item)
            row.toggled.connect(self.controller.toggle_task)
            row.remove_requested.connect(self.controller.remove_task)
            # index 0 is the empty label
            self.task_layout.insertWidget(index + 1, row)
            self._rows.append(row)

        self.empty_label.setVisible(not items)
        self.clear_completed_button.setVisible(self.controller.store.has_completed())

    def _add_task(self):
        title = self.input_field.text()
        try:
            item = self.controller.add_task(title, self.tag_row.selected_tags())
        except BlankTitleError as exc:
            self.message_requested.emit(str(exc))
            return
        if item is None:
            return
        self.input_field.clear()
        self.tag_row.clear()
