"""
Main Window - Hosts the drawing front end in a web view.

The window owns the QWebEngineView, the QWebChannel and the native dialog
host; everything the front end can do goes through the "backend" object
registered on the channel.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QUrl
from PySide6.QtWebChannel import QWebChannel
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QMainWindow, QWidget

from rishah.bridge import Bridge
from rishah.config import AppConfig
from rishah.ui.dialogs import QtDialogHost
from rishah.ui.web_bridge import WebBridge

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """The application window for Rishah."""

    def __init__(self, bridge: Bridge, config: AppConfig, parent: QWidget | None = None):
        super().__init__(parent)

        self.setWindowTitle(config.title)
        self.resize(config.width, config.height)

        self._bridge = bridge
        self._bridge.attach_dialogs(QtDialogHost(self))

        self._view = QWebEngineView(self)
        self.setCentralWidget(self._view)

        self._web_bridge = WebBridge(bridge, self)
        self._channel = QWebChannel(self._view.page())
        self._channel.registerObject("backend", self._web_bridge)
        self._view.page().setWebChannel(self._channel)

        url = config.get_frontend_url()
        logger.info(f"Loading front end from {url}")
        self._view.load(QUrl(url))
