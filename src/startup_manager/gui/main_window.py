"""Main window listing startup applications."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..core.errors import StartupError, UnsupportedPlatformError
from ..core.manager import StartupManager
from ..core.models import StartupEntry
from .dialogs import AddEntryDialog

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    """Checkable list of entries; checking an item toggles it."""

    def __init__(self, manager: StartupManager):
        super().__init__()
        self.manager = manager
        self.setWindowTitle("Startup Applications")
        self.resize(640, 420)

        self._build_ui()
        self.refresh()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        location = self.manager.storage_dir or "not supported on this system"
        self.location_label = QLabel(f"Location: {location}")
        self.location_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.location_label)

        self.list = QListWidget()
        self.list.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.list, 1)

        btn_row = QHBoxLayout()
        self.btn_refresh = QPushButton("Refresh")
        self.btn_add = QPushButton("Add...")
        self.btn_delete = QPushButton("Delete")
        btn_row.addWidget(self.btn_refresh)
        btn_row.addStretch()
        btn_row.addWidget(self.btn_add)
        btn_row.addWidget(self.btn_delete)
        layout.addLayout(btn_row)

        self.status_label = QLabel()
        layout.addWidget(self.status_label)

        self.btn_refresh.clicked.connect(self.refresh)
        self.btn_add.clicked.connect(self._on_add)
        self.btn_delete.clicked.connect(self._on_delete)

        self.btn_add.setEnabled(self.manager.supported)

    def set_status(self, text: str):
        self.status_label.setText(text)

    def refresh(self):
        self.list.blockSignals(True)
        self.list.clear()
        for entry in self.manager.discover():
            item = QListWidgetItem(f"{entry.name}  ({entry.command})")
            item.setToolTip(str(entry.path))
            item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
            item.setCheckState(Qt.Checked if entry.enabled else Qt.Unchecked)
            item.setData(Qt.UserRole, entry)
            self.list.addItem(item)
        self.list.blockSignals(False)
        self.set_status(f"{self.list.count()} startup applications")

    def _show_error(self, title: str, error: StartupError):
        logger.error(f"{title}: {error}")
        if isinstance(error, UnsupportedPlatformError):
            QMessageBox.information(self, "Not Supported", str(error))
        else:
            QMessageBox.critical(self, title, str(error))

    def _on_item_changed(self, item: QListWidgetItem):
        entry: StartupEntry = item.data(Qt.UserRole)
        enable = item.checkState() == Qt.Checked
        try:
            self.manager.toggle(entry.path, enable)
        except StartupError as e:
            self._show_error("Toggle Failed", e)
        # Disabling can rename the file on Windows, so re-read. Deferred because
        # refresh() deletes the item whose signal is being handled.
        QTimer.singleShot(0, self.refresh)

    def _on_add(self):
        dialog = AddEntryDialog(self, self.manager.platform)
        if dialog.exec() != AddEntryDialog.Accepted:
            return
        name, command, description = dialog.values
        try:
            path = self.manager.create(name, command, description)
        except StartupError as e:
            self._show_error("Create Failed", e)
            return
        self.set_status(f"Created {path.name}")
        self.refresh()

    def _on_delete(self):
        item = self.list.currentItem()
        if not item:
            QMessageBox.information(self, "Delete", "Select an application first.")
            return
        entry: StartupEntry = item.data(Qt.UserRole)
        ret = QMessageBox.question(self, "Confirm Delete", f"Delete {entry.name} ({entry.id})?")
        if ret != QMessageBox.Yes:
            return
        try:
            self.manager.delete(entry.path)
        except StartupError as e:
            self._show_error("Delete Failed", e)
        self.refresh()
