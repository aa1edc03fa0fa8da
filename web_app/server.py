"""
Web App — Server Entry Point
=============================

What:  Binds the listening socket and runs uvicorn on it.
How:   The socket is bound here, before uvicorn starts, so a bind failure
       surfaces as a ServerStartupError that main() turns into a fatal log
       line and exit status 1.
Who:   `web-app` console script and `python -m web_app`.
When:  Once per process. Serves until SIGINT/SIGTERM.
"""

import logging
import signal
import socket
import sys

import uvicorn

from web_app.config import Settings, settings
from web_app.exceptions import ServerStartupError
from web_app.main import app, setup_logging

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Create a TCP socket bound to host:port.

    Raises:
        ServerStartupError: the address is in use, not permitted, or the
            host does not resolve. The socket is closed before raising.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family=family, type=socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise ServerStartupError(
            host,
            port,
            reason=exc.strerror or str(exc),
            context={"errno": exc.errno},
        ) from exc
    sock.set_inheritable(True)
    return sock


def run(config: Settings = settings) -> None:
    """Bind config.host:config.port and serve the app until shutdown."""
    sock = bind_socket(config.host, config.port)
    try:
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_config=None,     # setup_logging() owns the handlers
                access_log=False,    # RequestLoggingMiddleware writes it
                lifespan="on",
            )
        )
        logger.info("Listening and serving HTTP on %s:%d", config.host, config.port)
        server.run(sockets=[sock])
    finally:
        sock.close()


def _exit_on_sigterm(signum, frame) -> None:
    """SIGTERM is a requested shutdown, not a crash."""
    raise SystemExit(0)


def main() -> None:
    """
    Process entry point.

    Exit status:
        0  clean shutdown (SIGINT or SIGTERM)
        1  the listener cannot be bound

    uvicorn drains connections on a signal, then restores the previous
    handlers and re-raises the signal. The handler installed here turns that
    re-raised SIGTERM into exit status 0; SIGINT arrives as KeyboardInterrupt.
    """
    setup_logging()
    previous = signal.signal(signal.SIGTERM, _exit_on_sigterm)
    try:
        run(settings)
    except ServerStartupError as exc:
        logger.critical("Failed to start server: %s", exc.message)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)
