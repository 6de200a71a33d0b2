"""
Status card and update log widgets.
"""
from typing import Iterable, Optional

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QFrame,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
)

from telemetry.model import LogEntry


class StatCard(QFrame):
    """Title / value / optional subtitle card."""

    def __init__(self, title: str, value: str = "", subtitle: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("card")

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(4)
        self.setLayout(layout)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("muted")
        self.value_label = QLabel(value)
        self.value_label.setObjectName("cardValue")

        layout.addWidget(self.title_label)
        layout.addWidget(self.value_label)

        self.subtitle_label = None
        if subtitle:
            self.subtitle_label = QLabel(subtitle)
            self.subtitle_label.setObjectName("muted")
            layout.addWidget(self.subtitle_label)

    def set_value(self, value: str):
        self.value_label.setText(value)

    def value(self) -> str:
        return self.value_label.text()


class UpdateLogPanel(QFrame):
    """
    Renders an event log snapshot, newest entry on top.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.setMinimumWidth(360)

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        self.setLayout(layout)

        header = QLabel("Update Log")
        header.setStyleSheet("font-weight: bold;")
        layout.addWidget(header)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QListWidget.NoSelection)
        self.list_widget.setFocusPolicy(QtCore.Qt.NoFocus)
        layout.addWidget(self.list_widget)

    def set_entries(self, entries: Iterable[LogEntry]):
        self.list_widget.clear()
        for entry in entries:
            item = QListWidgetItem(f"✔  {entry.title}\n     {entry.subtitle}")
            item.setData(QtCore.Qt.UserRole, entry)
            item.setToolTip(entry.subtitle)
            self.list_widget.addItem(item)

    def entries(self):
        return [self.list_widget.item(i).data(QtCore.Qt.UserRole) for i in range(self.list_widget.count())]
