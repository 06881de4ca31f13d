"""
Web Bridge - Exposes Bridge operations to JavaScript over QWebChannel.

Exceptions cannot cross the channel, so every slot returns a JSON envelope:
{"ok": true, "value": ...} on success or {"ok": false, "error": "..."} when
the operation raised. The front end unwraps the envelope and rejects its
promise on error.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, Slot

from rishah.bridge import Bridge
from rishah.core.errors import BridgeError

logger = logging.getLogger(__name__)


def _envelope(call: Callable[[], Any]) -> str:
    try:
        value = call()
    except (BridgeError, OSError) as e:
        logger.warning(f"Bridge call failed: {e}")
        return json.dumps({"ok": False, "error": str(e), "type": type(e).__name__})
    return json.dumps({"ok": True, "value": value})


class WebBridge(QObject):
    """QObject registered on the web channel as "backend"."""

    def __init__(self, bridge: Bridge, parent: QObject | None = None):
        super().__init__(parent)
        self._bridge = bridge

    @Slot(result=str)
    def GetStartupFileContent(self) -> str:
        return _envelope(self._bridge.get_startup_file_content)

    @Slot(str, result=str)
    def ReadFile(self, path: str) -> str:
        return _envelope(lambda: self._bridge.read_file(path))

    @Slot(str, str, result=str)
    def WriteFile(self, path: str, content: str) -> str:
        return _envelope(lambda: self._bridge.write_file(path, content))

    @Slot(str, str, result=str)
    def WriteFileBase64(self, path: str, data: str) -> str:
        return _envelope(lambda: self._bridge.write_file_base64(path, data))

    @Slot(result=str)
    def LoadSettings(self) -> str:
        return _envelope(self._bridge.load_settings)

    @Slot(str, result=str)
    def SaveSettings(self, settings_json: str) -> str:
        return _envelope(lambda: self._bridge.save_settings(settings_json))

    @Slot(str, str, result=str)
    def GenerateImageWithAI(self, image_base64: str, output_style: str) -> str:
        return _envelope(lambda: self._bridge.generate_image_with_ai(image_base64, output_style))

    @Slot(result=str)
    def OpenFileDialog(self) -> str:
        return _envelope(self._bridge.open_file_dialog)

    @Slot(str, result=str)
    def SaveFileDialog(self, default_filename: str) -> str:
        return _envelope(lambda: self._bridge.save_file_dialog(default_filename))

    @Slot(str, str, result=str)
    def SaveFileDialogForExport(self, default_filename: str, format: str) -> str:
        return _envelope(lambda: self._bridge.save_file_dialog_for_export(default_filename, format))

    @Slot(result=str)
    def SelectDirectoryDialog(self) -> str:
        return _envelope(self._bridge.select_directory_dialog)

    @Slot(str, str, result=str)
    def AskDialog(self, title: str, message: str) -> str:
        return _envelope(lambda: self._bridge.ask_dialog(title, message))

    @Slot(str, str, result=str)
    def InfoDialog(self, title: str, message: str) -> str:
        return _envelope(lambda: self._bridge.info_dialog(title, message))

    @Slot(str)
    def SetTitle(self, title: str) -> None:
        self._bridge.set_title(title)

    @Slot()
    def Quit(self) -> None:
        self._bridge.quit()
