#!/usr/bin/env python3
"""
GeoWidget - geographic and network information for IP addresses

Looks addresses up in the GeoLite2 ASN and City databases, either once from
the command line or as a small JSON API server.
"""

import argparse
import logging
import sys
from pathlib import Path

from geowidget.core.config import Config
from geowidget.core.exceptions import GeoWidgetError
from geowidget.core.providers import ProviderRegistry
from geowidget.interfaces.cli import CLI
from geowidget.interfaces.web_server import WebServer
from geowidget.services.lookup import CompositeResolver
from geowidget.utils.validation import Validator

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(config: Config):
    """Configure the root logger from the debug/verbose settings"""
    if config.debug:
        handlers = [logging.StreamHandler()]
        if config.log_file:
            handlers.append(logging.FileHandler(config.log_file))
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT, handlers=handlers)
    elif config.verbose:
        # Access logs are written at INFO
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

def main(argv=None):
    """Main entry point for GeoWidget"""
    argv = sys.argv[1:] if argv is None else argv

    # Parse initial arguments to determine mode
    parser = argparse.ArgumentParser(description="GeoWidget - IP address geographic and network information", add_help=False)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging (including access logs)")
    parser.add_argument("--config", type=str, help="Path to configuration file")
    parser.add_argument("--server", action="store_true", help="Run in web server mode")
    parser.add_argument("-a", "--address", type=str, help="The IP address to listen for requests")
    parser.add_argument("-p", "--port", type=str, help="The port number to listen for requests")
    parser.add_argument("--asn-database-file", type=str, help="File path to the ASN database")
    parser.add_argument("--city-database-file", type=str, help="File path to the City database")
    parser.add_argument("--stale-threshold", type=str, help="Database age in seconds at which the health check fails")
    parser.add_argument("--version", action="store_true", help="Show version information")

    # Parse just the known args for initial setup
    args, remaining = parser.parse_known_args(argv)

    try:
        config_path = Path(args.config) if args.config else None
        config = Config(config_path, debug=args.debug)
        _update_config_from_args(config, args)
    except GeoWidgetError as e:
        print(f"Configuration error: {e}")
        return 1

    setup_logging(config)

    # Show version info if requested
    if args.version:
        from geowidget import __version__
        print(f"GeoWidget version {__version__}")
        return 0

    wants_help = "-h" in remaining or "--help" in remaining
    if wants_help or (not args.server and not remaining):
        parser.print_help()
        print()
        CLI(config, None).print_help()
        return 0 if wants_help else 1

    try:
        provider = ProviderRegistry.create(config)
    except GeoWidgetError as e:
        print(f"Error: {e}")
        return 1

    service = CompositeResolver(
        provider,
        sentinel=config.sentinel,
        stale_threshold_seconds=config.stale_threshold_seconds,
    )

    try:
        # Run in web server mode if requested
        if args.server:
            return WebServer(config, service).run()

        # Otherwise, run in CLI mode
        return CLI(config, service).run(remaining)
    finally:
        close = getattr(provider, "close", None)
        if close is not None:
            close()

def _update_config_from_args(config: Config, args: argparse.Namespace):
    """Apply command-line overrides on top of file and environment settings"""
    config.debug = config.debug or args.debug
    config.verbose = config.verbose or args.verbose
    if args.address:
        config.server_bind_addr = args.address
    if args.port is not None:
        config.server_bind_port = Validator.validate_port(args.port)
    if args.asn_database_file:
        config.asn_database_file = args.asn_database_file
    if args.city_database_file:
        config.city_database_file = args.city_database_file
    if args.stale_threshold is not None:
        config.stale_threshold_seconds = Validator.validate_integer_range(
            args.stale_threshold, "Stale threshold", 1, 2 ** 63 - 1
        )

if __name__ == "__main__":
    sys.exit(main())
