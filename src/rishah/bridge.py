"""
Bridge - Operations exposed to the web front end.

The Bridge is the single object the front end talks to. Every operation
either returns its value or raises a BridgeError; native dialogs and window
control are delegated to a DialogHost so the bridge itself runs without Qt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from rishah.core.files import read_text_file, write_base64_file, write_text_file
from rishah.core.settings import SettingsStore
from rishah.core.startup import resolve_startup_document
from rishah.generation.pipeline import GenerationPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileFilter:
    """A file-type filter shown in native file dialogs."""
    display_name: str
    pattern: str

    def to_qt(self) -> str:
        """Render as a Qt name filter, e.g. "PNG Image (*.png)"."""
        patterns = " ".join(self.pattern.split(";"))
        if self.display_name.endswith(")"):
            return self.display_name
        return f"{self.display_name} ({patterns})"


DRAWING_FILTER = FileFilter("TLDraw Files (*.tldr)", "*.tldr")

EXPORT_FILTERS: dict[str, FileFilter] = {
    "png": FileFilter("PNG Image (*.png)", "*.png"),
    "svg": FileFilter("SVG Image (*.svg)", "*.svg"),
    "jpeg": FileFilter("JPEG Image (*.jpeg *.jpg)", "*.jpeg;*.jpg"),
    "webp": FileFilter("WebP Image (*.webp)", "*.webp"),
    "json": FileFilter("JSON File (*.json)", "*.json"),
}

ALL_FILES_FILTER = FileFilter("All Files (*)", "*")


def export_filter(format: str) -> FileFilter:
    """Get the save-dialog filter for an export format."""
    return EXPORT_FILTERS.get(format.lower(), ALL_FILES_FILTER)


class DialogHost(Protocol):
    """Native dialogs and window control provided by the UI layer."""

    def open_file(self, title: str, filters: list[FileFilter]) -> str: ...

    def save_file(self, title: str, default_filename: str, filters: list[FileFilter]) -> str: ...

    def select_directory(self, title: str) -> str: ...

    def ask(self, title: str, message: str) -> bool: ...

    def inform(self, title: str, message: str) -> None: ...

    def set_title(self, title: str) -> None: ...

    def quit(self) -> None: ...


class Bridge:
    """
    Front-end facing operations.

    Usage:
        bridge = Bridge(sys.argv[1:], dialogs=QtDialogHost(window))
        document = bridge.get_startup_file_content()
    """

    def __init__(
        self,
        startup_args: Sequence[str] = (),
        dialogs: DialogHost | None = None,
        settings: SettingsStore | None = None,
        pipeline: GenerationPipeline | None = None,
    ):
        self._startup_args = tuple(startup_args)
        self._dialogs = dialogs
        self.settings = settings or SettingsStore()
        self.pipeline = pipeline or GenerationPipeline()

    @property
    def dialogs(self) -> DialogHost:
        if self._dialogs is None:
            raise RuntimeError("No dialog host attached to the bridge")
        return self._dialogs

    def attach_dialogs(self, dialogs: DialogHost) -> None:
        self._dialogs = dialogs

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def get_startup_file_content(self) -> list[str] | None:
        """Get `[path, content]` of the document passed at startup, if any."""
        document = resolve_startup_document(self._startup_args)
        return document.as_list() if document else None

    def read_file(self, path: str) -> str:
        return read_text_file(path)

    def write_file(self, path: str, content: str) -> None:
        write_text_file(path, content)

    def write_file_base64(self, path: str, data: str) -> None:
        write_base64_file(path, data)

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def load_settings(self) -> str:
        return self.settings.load()

    def save_settings(self, settings_json: str) -> None:
        self.settings.save(settings_json)

    # -------------------------------------------------------------------------
    # AI generation
    # -------------------------------------------------------------------------

    def generate_image_with_ai(self, image_base64: str, output_style: str) -> str:
        """Run the generator and return its JSON result line."""
        return self.pipeline.generate(image_base64, output_style)

    # -------------------------------------------------------------------------
    # Dialogs and window
    # -------------------------------------------------------------------------

    def open_file_dialog(self) -> str:
        return self.dialogs.open_file("Open Drawing", [DRAWING_FILTER])

    def save_file_dialog(self, default_filename: str) -> str:
        return self.dialogs.save_file("Save Drawing", default_filename, [DRAWING_FILTER])

    def save_file_dialog_for_export(self, default_filename: str, format: str) -> str:
        return self.dialogs.save_file(
            "Export Drawing", default_filename, [export_filter(format)]
        )

    def select_directory_dialog(self) -> str:
        return self.dialogs.select_directory("Select Output Directory")

    def ask_dialog(self, title: str, message: str) -> bool:
        return self.dialogs.ask(title, message)

    def info_dialog(self, title: str, message: str) -> None:
        self.dialogs.inform(title, message)

    def set_title(self, title: str) -> None:
        self.dialogs.set_title(title)

    def quit(self) -> None:
        logger.info("Quit requested by front end")
        self.dialogs.quit()
