import socket
import sys

import uvicorn
from loguru import logger

from responder.main import app
from responder.settings import ServerSettings, settings_model


class ServerBindError(OSError):
    """Raised when the listening socket cannot be bound."""

    def __init__(self, host: str, port: int, error: OSError) -> None:
        super().__init__(error.errno, f"Could not bind {host}:{port}: {error.strerror or error}")
        self.host = host
        self.port = port
        self.error = error


def bind_socket(host: str, port: int) -> socket.socket:
    """Create a TCP socket bound to host:port.

    SO_REUSEADDR is set outside Windows so a restart is not blocked by
    connections left in TIME_WAIT. A port another socket is still listening
    on stays unavailable.

    Raises:
        ServerBindError: If the address is in use or not permitted.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    if sys.platform != "win32":
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise ServerBindError(host, port, e) from e
    return sock


def serve(settings: ServerSettings = settings_model) -> None:
    """Bind the configured address and serve the app until terminated."""
    sock = bind_socket(settings.host, settings.port)
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    # the address comes from the socket, not the config
    server = uvicorn.Server(uvicorn.Config(app))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    try:
        serve(settings_model)
    except ServerBindError as e:
        logger.error(f"Server failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
