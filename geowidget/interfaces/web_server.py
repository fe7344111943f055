"""
HTTP JSON interface for GeoWidget
"""

import errno
import json
import logging
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional
from urllib.parse import parse_qs, unquote, urlparse

from geowidget.core.config import Config
from geowidget.core.exceptions import ValidationError
from geowidget.services import LookupService
from geowidget.utils.validation import Validator

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("geowidget.access")

ADDRESS_PREFIX = "/address/"
TRUE_VALUES = ("1", "true", "yes")

class WebServer:
    """HTTP JSON interface for GeoWidget"""

    def __init__(self, config: Config, service: LookupService):
        """
        Initialize web server interface

        Args:
            config: Configuration object
            service: Lookup service answering the requests
        """
        self.config = config
        self.service = service

        # Server settings
        self.address = config.server_bind_addr
        self.port = config.server_bind_port
        self.server = None
        self._thread = None

    def run(self, address: Optional[str] = None, port: Optional[int] = None) -> int:
        """
        Run the web server until interrupted

        Args:
            address: Bind address (default: from config)
            port: Bind port (default: from config)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.start(address, port)
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                print(f"Error: Port {self.port} is already in use.")
            else:
                print(f"Socket error: {e}")
            return 1

        print(f"Starting GeoWidget server on {self.address}:{self.port}")
        print("Press Ctrl+C to stop the server")

        # Wait for Ctrl+C
        try:
            while self._thread.is_alive():
                self._thread.join(1)
        except KeyboardInterrupt:
            print("\nShutting down server...")
        finally:
            self.stop()

        return 0

    def start(self, address: Optional[str] = None, port: Optional[int] = None) -> int:
        """
        Bind the server and serve requests on a background thread

        Args:
            address: Bind address (default: from config)
            port: Bind port (default: from config, 0 picks a free port)

        Returns:
            The port the server is listening on
        """
        self.address = address or self.address
        self.port = self.port if port is None else port

        self.server = ThreadingHTTPServer((self.address, self.port), self._make_handler())
        self.port = self.server.server_address[1]

        self._thread = threading.Thread(target=self._run_server, daemon=True)
        self._thread.start()
        return self.port

    def _run_server(self):
        """Run the HTTP server"""
        try:
            self.server.serve_forever()
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)

    def stop(self):
        """Stop the HTTP server"""
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None

    def _make_handler(self):
        """Create a request handler class with access to the lookup service"""
        context = self

        class GeoRequestHandler(BaseHTTPRequestHandler):
            server_version = "GeoWidget"

            def log_message(self, format, *args):
                """Send http.server diagnostics to the debug log"""
                logger.debug(f"{self.address_string()} - {format % args}")

            def do_GET(self):
                """Handle GET requests"""
                self._started = time.monotonic()

                parsed_path = urlparse(self.path)
                path = parsed_path.path
                params = parse_qs(parsed_path.query)
                pretty = context.config.json_pretty or params.get("pretty", ["0"])[0].lower() in TRUE_VALUES

                try:
                    if path == "/ping":
                        self.send_json(200, {"ping": "pong"}, pretty)
                    elif path == "/healthz":
                        self.handle_health(pretty)
                    elif path == "/metadata":
                        self.handle_metadata(pretty)
                    elif path.startswith(ADDRESS_PREFIX):
                        self.handle_address(unquote(path[len(ADDRESS_PREFIX):]), pretty)
                    else:
                        self.send_json(404, {"error": "Not Found"}, pretty)
                except Exception as e:
                    logger.error(f"Unexpected error handling {self.path}: {e}", exc_info=True)
                    self.send_json(500, {"error": "Internal Server Error"}, pretty)

            def handle_address(self, raw_address: str, pretty: bool):
                """Handle /address/<ip> requests"""
                if not raw_address:
                    self.send_json(400, {"error": "Missing address"}, pretty)
                    return
                try:
                    address = Validator.validate_ip(raw_address)
                except ValidationError as e:
                    self.send_json(400, {"error": str(e)}, pretty)
                    return

                result = context.service.resolve_address(address)
                self.send_json(200, result.to_dict(), pretty)

            def handle_health(self, pretty: bool):
                """Handle /healthz requests"""
                status = context.service.check_health()
                if not status.healthy:
                    logger.warning(status.reason)
                self.send_json(200 if status.healthy else 503, status.to_dict(), pretty)

            def handle_metadata(self, pretty: bool):
                """Handle /metadata requests"""
                sources = [source.to_dict() for source in context.service.describe_sources()]
                self.send_json(200, sources, pretty)

            def send_json(self, status: int, data: Any, pretty: bool = False):
                """Write a JSON response and an access log line"""
                if pretty:
                    body = json.dumps(data, indent=2) + "\n"
                else:
                    body = json.dumps(data, separators=(",", ":"))
                payload = body.encode()

                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.log_access(status, len(payload))
                self.wfile.write(payload)

            def log_access(self, status: int, size: int):
                elapsed = time.monotonic() - getattr(self, "_started", time.monotonic())
                referer = self.headers.get("Referer", "-")
                user_agent = self.headers.get("User-Agent", "-")
                access_logger.info(
                    f'{self.client_address[0]} "{self.requestline}" {status} {size} '
                    f'"{referer}" "{user_agent}" {elapsed:.6f}'
                )

        return GeoRequestHandler
