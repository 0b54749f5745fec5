"""Entry point for the error demo server."""

import logging
import signal
import socket
import sys
import threading

from werkzeug.serving import BaseWSGIServer, make_server

from error_demo.app import create_app
from error_demo.config import Config, load_config
from error_demo.log_setup import configure_logging
from error_demo.records import rfc3339_now
from error_demo.sinks import stdout_sink

logger = logging.getLogger(__name__)


def _listen_socket(host: str, port: int) -> tuple[str, socket.socket]:
    """Return (host, listening socket). All-interfaces accepts IPv4 and IPv6 where supported."""
    if host == "0.0.0.0" and socket.has_dualstack_ipv6():
        return "::", socket.create_server(("::", port), family=socket.AF_INET6, dualstack_ipv6=True)
    return host, socket.create_server((host, port))


def build_server(config: Config, app) -> BaseWSGIServer:
    """Bind the listen socket ourselves so a bind failure surfaces as OSError.

    Werkzeug's own bind path prints to stderr and calls sys.exit, bypassing logging.
    """
    host, sock = _listen_socket(config.host, config.port)
    try:
        # make_server dups the descriptor
        return make_server(host, config.port, app, threaded=True, fd=sock.fileno())
    finally:
        sock.close()


def main():
    configure_logging("INFO")

    try:
        config = load_config()
    except ValueError as e:
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)

    app = create_app()

    try:
        server = build_server(config, app)
    except OSError as e:
        logger.critical("Failed to bind %s:%d: %s", config.host, config.port, e)
        sys.exit(1)

    shutdown_event = threading.Event()

    def signal_handler(signum, frame):
        logger.info("Received signal %d, shutting down...", signum)
        shutdown_event.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    stdout_sink().write(
        f"INFO: starting Error Demo server on port {config.port} at {rfc3339_now()}"
    )
    logger.info("Listening on %s:%d", *server.socket.getsockname()[:2])

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        shutdown_event.wait()
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


if __name__ == "__main__":
    main()
