"""
Sidebar navigation with a search filter.
"""
from typing import Dict, List, Sequence

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QFrame,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

NAV_GROUPS: List[Dict] = [
    {"label": "General", "items": ["Home", "Serials Checker", "PC Specs"]},
    {"label": "Main", "items": ["General", "Restore Point", "Virus Protection"]},
    {"label": "Tweaking", "items": ["General Tweaks", "Debloat"]},
]


def filter_items(items: Sequence[str], query: str) -> List[str]:
    """Case-insensitive substring filter over item labels."""
    needle = query.lower()
    return [item for item in items if needle in item.lower()]


class Sidebar(QFrame):
    """
    Static navigation list.

    Signals:
        item_activated(str label) - a navigation item was clicked
    """

    item_activated = QtCore.pyqtSignal(str)

    def __init__(self, user_name: str = "", membership: str = "", parent=None):
        super().__init__(parent)
        self.setObjectName("sidebar")
        self.setFixedWidth(224)

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(4)
        self.setLayout(layout)

        brand = QLabel("PULSE\nSERVICES")
        brand.setObjectName("brand")
        layout.addWidget(brand)

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search Anything")
        self.search.textChanged.connect(self.apply_filter)
        layout.addWidget(self.search)

        # label -> button, in display order
        self.buttons: Dict[str, QPushButton] = {}
        for group in NAV_GROUPS:
            header = QLabel(group["label"])
            header.setObjectName("muted")
            layout.addWidget(header)

            for label in group["items"]:
                btn = QPushButton(label)
                btn.setObjectName("navItem")
                btn.clicked.connect(lambda _checked=False, name=label: self.item_activated.emit(name))
                layout.addWidget(btn)
                self.buttons[label] = btn

        layout.addStretch()

        # Footer profile
        profile = QLabel(f"{user_name}\n{membership} User")
        profile.setObjectName("muted")
        layout.addWidget(profile)

    def apply_filter(self, query: str):
        for group in NAV_GROUPS:
            visible = set(filter_items(group["items"], query))
            for label in group["items"]:
                # isHidden() is meaningful before show(), isVisible() is not
                self.buttons[label].setHidden(label not in visible)

    def visible_items(self) -> List[str]:
        return [label for label, btn in self.buttons.items() if not btn.isHidden()]
