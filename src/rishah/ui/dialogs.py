"""
Qt Dialog Host - Native dialogs and window control for the bridge.
"""

from __future__ import annotations

from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QMainWindow,
    QMessageBox,
)

from rishah.bridge import FileFilter


class QtDialogHost:
    """DialogHost backed by QFileDialog and QMessageBox."""

    def __init__(self, window: QMainWindow):
        self._window = window

    def open_file(self, title: str, filters: list[FileFilter]) -> str:
        file_path, _ = QFileDialog.getOpenFileName(
            self._window,
            title,
            "",
            ";;".join(f.to_qt() for f in filters),
        )
        return file_path

    def save_file(self, title: str, default_filename: str, filters: list[FileFilter]) -> str:
        file_path, _ = QFileDialog.getSaveFileName(
            self._window,
            title,
            default_filename,
            ";;".join(f.to_qt() for f in filters),
        )
        return file_path

    def select_directory(self, title: str) -> str:
        return QFileDialog.getExistingDirectory(self._window, title, "")

    def ask(self, title: str, message: str) -> bool:
        reply = QMessageBox.warning(
            self._window,
            title,
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        return reply == QMessageBox.StandardButton.Yes

    def inform(self, title: str, message: str) -> None:
        QMessageBox.information(self._window, title, message)

    def set_title(self, title: str) -> None:
        self._window.setWindowTitle(title)

    def quit(self) -> None:
        QApplication.quit()
