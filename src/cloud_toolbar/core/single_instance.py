"""Single-instance application guard.

Only one toolbar process runs per user. A second launch connects to the
first instance's local socket, sends a short message (``show`` by default,
which opens the command palette there) and exits.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtNetwork import QLocalServer, QLocalSocket

from .paths import APP_NAME

logger = logging.getLogger(__name__)

SHOW_MESSAGE = b"show"


class SingleInstanceGuard:
    """Detects a running instance and relays messages to it."""

    def __init__(self, app_id: str | None = None) -> None:
        self.app_id = app_id or APP_NAME.replace(" ", "-").lower()
        self.socket_name = f"{self.app_id}-single-instance"
        self.server: QLocalServer | None = None
        self.socket: QLocalSocket | None = None
        self._handler: Callable[[bytes], None] | None = None

    def is_another_instance_running(self) -> bool:
        """Connect to an existing instance, or start listening if there is none.

        When another instance answers, the connected socket is kept so that
        ``send_message_to_existing_instance`` can use it.
        """
        socket = QLocalSocket()
        socket.connectToServer(self.socket_name, QLocalSocket.OpenModeFlag.ReadWrite)
        if socket.waitForConnected(500):
            logger.info("Another instance is listening on %s", self.socket_name)
            self.socket = socket
            return True

        self._create_server()
        return False

    def _create_server(self) -> None:
        self.server = QLocalServer()
        # A crashed instance can leave a stale socket file behind
        QLocalServer.removeServer(self.socket_name)
        if not self.server.listen(self.socket_name):
            logger.warning("Could not listen on %s; instance messages disabled", self.socket_name)
            return
        self.server.newConnection.connect(self._on_new_connection)

    def send_message_to_existing_instance(self, message: bytes = SHOW_MESSAGE) -> bool:
        """Send ``message`` to the running instance; True when it was written."""
        if not self.socket:
            return False
        self.socket.write(message)
        return self.socket.waitForBytesWritten(1000)

    def set_message_handler(self, handler: Callable[[bytes], None]) -> None:
        """Call ``handler`` with each message received from later launches."""
        self._handler = handler

    def _on_new_connection(self) -> None:
        if self.server is None:
            return
        connection = self.server.nextPendingConnection()
        while connection is not None:
            if connection.bytesAvailable() or connection.waitForReadyRead(500):
                message = bytes(connection.readAll()).strip()
                logger.debug("Received instance message %r", message)
                if self._handler is not None:
                    self._handler(message)
            connection.disconnectFromServer()
            connection = self.server.nextPendingConnection()

    def close(self) -> None:
        if self.server is not None:
            self.server.close()
            self.server = None
        if self.socket is not None:
            self.socket.disconnectFromServer()
            self.socket = None
