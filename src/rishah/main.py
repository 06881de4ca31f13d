"""
Rishah - Main Entry Point

This module provides the main entry point for the application.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Install a console handler on the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """
    Main entry point for Rishah.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if sys.version_info < (3, 11):
        print("Error: Rishah requires Python 3.11 or later")
        return 1

    from rishah.config import AppConfig
    from rishah.bridge import Bridge
    from rishah.generation.pipeline import GenerationPipeline

    config = AppConfig.from_env()
    configure_logging(config.log_level)

    # Import Qt here to avoid import overhead if just checking version
    from PySide6.QtWidgets import QApplication

    from rishah.ui.main_window import MainWindow

    bridge = Bridge(
        startup_args=sys.argv[1:],
        pipeline=GenerationPipeline(config.generator),
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.title)
    app.setApplicationVersion("0.1.0")

    window = MainWindow(bridge, config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
