"""Application entry point.

Sets up logging and the exception hook, enforces a single running
instance, then shows the main window and starts polling the control API.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from .core.exceptions import install_exception_hook
from .core.logging_setup import setup_logging
from .core.paths import APP_NAME, ORG_NAME, app_version, log_dir
from .core.settings import Settings
from .core.single_instance import SingleInstanceGuard
from .main_window import MainWindow
from .rclone.client import ControlClient

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    app = QApplication(sys.argv if argv is None else argv)
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(app_version())

    settings = Settings()
    setup_logging(settings.log_level, log_dir() / "cloud-toolbar.log")
    install_exception_hook()

    guard = SingleInstanceGuard()
    if guard.is_another_instance_running():
        guard.send_message_to_existing_instance()
        logger.info("%s is already running; asked it to show the toolbar", APP_NAME)
        return 0

    client = ControlClient(settings.host_url, settings.auth_user, settings.auth_password)
    window = MainWindow(settings=settings, client=client, instance_guard=guard)
    window.show()
    window.start_polling()
    logger.info("%s %s started against %s", APP_NAME, app_version(), settings.host_url)

    return app.exec()
