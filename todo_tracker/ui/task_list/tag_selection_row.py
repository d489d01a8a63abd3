from __future__ import annotations

from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QWidget


class TagSelectionRow(QWidget):
    """A row of checkable chips, one per tag in the vocabulary."""

    def __init__(self, vocabulary: tuple[str, ...], parent=None):
        super().__init__(parent)
        self._chips: dict[str, QCheckBox] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        for tag in vocabulary:
            chip = QCheckBox(tag)
            chip.setObjectName("tagChip")
            self._chips[tag] = chip
            layout.addWidget(chip)
        layout.addStretch()

    def selected_tags(self) -> set[str]:
        return {tag for tag, chip in self._chips.items() if chip.isChecked()}

    def clear(self):
        for chip in self._chips.values():
            chip.setChecked(False)
