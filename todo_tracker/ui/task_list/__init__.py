"""Task list UI components."""

from todo_tracker.ui.task_list.tag_selection_row import TagSelectionRow
from todo_tracker.ui.task_list.task_item_widget import TaskItemWidget
from todo_tracker.ui.task_list.task_list_widget import TaskListWidget

__all__ = [
    "TagSelectionRow",
    "TaskItemWidget",
    "TaskListWidget",
]
