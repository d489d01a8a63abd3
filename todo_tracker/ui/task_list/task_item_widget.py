"""Single task row widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from todo_tracker.domain.models import TaskItem


class TaskItemWidget(QFrame):
    """Checkbox, title, tags line and a delete button for one TaskItem."""

    toggled = pyqtSignal(str, bool)
    remove_requested = pyqtSignal(str)

    def __init__(self, item: TaskItem, parent=None):
        super().__init__(parent)
        self.task_id = item.id

        self.setMinimumHeight(46)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)
        layout.setSpacing(10)

        self.checkbox = QCheckBox()
        self.checkbox.setChecked(item.done)
        self.checkbox.setCursor(Qt.CursorShape.PointingHandCursor)
        self.checkbox.toggled.connect(self._on_toggle)
        layout.addWidget(self.checkbox)

        text_container = QWidget()
        text_layout = QVBoxLayout(text_container)
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(2)

        self.title_label = QLabel(item.title)
        self.title_label.setWordWrap(True)
        text_layout.addWidget(self.title_label)

        self.tags_label = QLabel(", ".join(sorted(item.tags)))
        self.tags_label.setObjectName("taskTags")
        self.tags_label.setVisible(bool(item.tags))
        text_layout.addWidget(self.tags_label)

        layout.addWidget(text_container, 1)

        self.delete_button = QPushButton("✕")
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.setToolTip("Delete Task")
        self.delete_button.setFixedSize(24, 24)
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_button.clicked.connect(lambda: self.remove_requested.emit(self.task_id))
        layout.addWidget(self.delete_button)

        self._apply_done_style(item.done)

    def _on_toggle(self, checked: bool):
        self._apply_done_style(checked)
        self.toggled.emit(self.task_id, checked)

    def _apply_done_style(self, done: bool):
        self.setObjectName("taskItemDone" if done else "taskItem")
        self.title_label.setObjectName("taskTitleDone" if done else "taskTitle")

        self.title_label.style().unpolish(self.title_label)
        self.title_label.style().polish(self.title_label)
        self.style().unpolish(self)
        self.style().polish(self)
