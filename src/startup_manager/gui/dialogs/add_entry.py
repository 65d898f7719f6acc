"""Dialog for adding a startup application."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from ...core.models import PlatformKind
from ...core.naming import PROGRAM_EXTENSIONS, suggest_name


class AddEntryDialog(QDialog):
    """Collects name, command and description for a new entry."""

    def __init__(self, parent, platform: PlatformKind):
        super().__init__(parent)
        self.setWindowTitle("Add Startup Application")
        self.setMinimumWidth(450)

        layout = QVBoxLayout(self)
        form_layout = QFormLayout()

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("My Application")
        form_layout.addRow("Name:", self.name_edit)

        command_row = QHBoxLayout()
        self.command_edit = QLineEdit()
        self.command_edit.setPlaceholderText("/usr/bin/my-app --minimized")
        command_row.addWidget(self.command_edit)
        browse_btn = QPushButton("Browse...")
        browse_btn.clicked.connect(self._on_browse)
        command_row.addWidget(browse_btn)
        form_layout.addRow("Command:", command_row)

        self.description_edit = QLineEdit()
        form_layout.addRow("Description:", self.description_edit)

        layout.addLayout(form_layout)

        if platform == PlatformKind.WINDOWS:
            hint = QLabel("A batch launcher is created; the description is not stored.")
            hint.setStyleSheet("color: gray; font-style: italic;")
            hint.setWordWrap(True)
            layout.addWidget(hint)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    @property
    def values(self) -> tuple[str, str, str]:
        return (
            self.name_edit.text().strip(),
            self.command_edit.text().strip(),
            self.description_edit.text().strip(),
        )

    def _on_browse(self):
        patterns = " ".join(f"*.{ext}" for ext in PROGRAM_EXTENSIONS)
        selected, _ = QFileDialog.getOpenFileName(
            self, "Choose Program", "", f"Applications ({patterns});;All files (*)"
        )
        if not selected:
            return
        self.command_edit.setText(selected)
        if not self.name_edit.text():
            self.name_edit.setText(suggest_name(selected))

    def _on_accept(self):
        name, command, _ = self.values
        if not name or not command:
            QMessageBox.warning(self, "Missing Fields", "Name and command are required.")
            return
        self.accept()
