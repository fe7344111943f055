"""
Command-line interface for GeoWidget
"""

import argparse
import json
import logging
from typing import Any, List

from colorama import Fore, Style, init as colorama_init

from geowidget.core.config import Config
from geowidget.core.exceptions import GeoWidgetError, ValidationError
from geowidget.core.models import LookupResult, Pair
from geowidget.services import LookupService
from geowidget.utils.validation import Validator

# Initialize colorama for cross-platform color support
colorama_init(autoreset=True)

# Console color definitions
class Colors:
    GREEN = Fore.GREEN
    MAGENTA = Fore.MAGENTA
    YELLOW = Fore.YELLOW
    WHITE = Fore.WHITE
    BLUE = Fore.CYAN
    RED = Fore.RED
    DIM = Style.DIM
    RESET = Style.RESET_ALL

class CLI:
    """Command-line interface for GeoWidget"""

    def __init__(self, config: Config, service: LookupService):
        """
        Initialize CLI

        Args:
            config: Configuration object
            service: Lookup service answering the queries
        """
        self.config = config
        self.service = service

    def run(self, args: List[str]) -> int:
        """
        Run CLI with arguments

        Args:
            args: Command-line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parser = self._create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.address and (parsed_args.health or parsed_args.metadata):
            parser.error("--health and --metadata do not take addresses")

        if not parsed_args.address and not (parsed_args.health or parsed_args.metadata):
            parser.print_help()
            return 1

        self._update_config_from_args(parsed_args)

        try:
            if parsed_args.health:
                return self._run_health()
            if parsed_args.metadata:
                return self._run_metadata()
            return self._run_lookup(parsed_args.address)
        except GeoWidgetError as e:
            print(f"Error: {e}")
            return 1

    def print_help(self):
        self._create_parser().print_help()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            prog="geowidget",
            description="Geographic and network information for IP addresses"
        )

        parser.add_argument("-j", "--json", action="store_true", help="Set output to compact JSON mode (ideal for machine parsing)")
        parser.add_argument("-J", "--json-pretty", action="store_true", help="Set output to pretty-printed JSON mode")
        parser.add_argument("-m", "--monochrome", action="store_true", help="Disable colored output")

        reports = parser.add_mutually_exclusive_group()
        reports.add_argument("--health", action="store_true", help="Check that the databases are not stale")
        reports.add_argument("--metadata", action="store_true", help="Show database build metadata")

        parser.add_argument("address", nargs="*", help="IPv4 or IPv6 addresses to look up")

        return parser

    def _update_config_from_args(self, args: argparse.Namespace):
        """
        Update configuration from command-line arguments

        Args:
            args: Parsed command-line arguments
        """
        self.config.monochrome = self.config.monochrome or args.monochrome
        self.config.json_output = self.config.json_output or args.json or args.json_pretty
        self.config.json_pretty = self.config.json_pretty or args.json_pretty

    def _run_lookup(self, targets: List[str]) -> int:
        """
        Look up every address and print the results

        Invalid addresses are reported and skipped.

        Returns:
            0 if every address was valid, 1 otherwise
        """
        exit_code = 0
        for target in targets:
            try:
                address = Validator.validate_ip(target)
            except ValidationError as e:
                logging.debug(f"Skipping {target!r}: {e}")
                print(f"{self._color(Colors.RED)}Error: {e}")
                exit_code = 1
                continue

            result = self.service.resolve_address(address)
            if self.config.json_output:
                self._output_json(result.to_dict())
            else:
                self._output_result(result)

        return exit_code

    def _run_health(self) -> int:
        status = self.service.check_health()
        if self.config.json_output:
            self._output_json(status.to_dict())
        elif status.healthy:
            print(f"{self._color(Colors.GREEN)}OK{self._color(Colors.RESET)} {status.reason}")
        else:
            print(f"{self._color(Colors.RED)}STALE{self._color(Colors.RESET)} {status.reason}")
        return 0 if status.healthy else 1

    def _run_metadata(self) -> int:
        sources = self.service.describe_sources()
        if self.config.json_output:
            self._output_json([source.to_dict() for source in sources])
            return 0

        for source in sources:
            print(f"{self._color(Colors.GREEN)}{source.source_label}{self._color(Colors.RESET)}")
            print(f"  Build date:    {source.build_datetime:%Y-%m-%d %H:%M:%S} UTC ({source.build_epoch_seconds})")
            print(f"  Format:        {source.format_major}.{source.format_minor}")
            print(f"  Node count:    {source.node_count}")
            print(f"  Record size:   {source.record_size}")
        return 0

    def _output_json(self, data: Any):
        """
        Output data as JSON

        Args:
            data: Data to output as JSON
        """
        if self.config.json_pretty:
            print(json.dumps(data, indent=2))
        else:
            print(json.dumps(data))

    def _output_result(self, result: LookupResult):
        """
        Output a lookup result as colored text

        Args:
            result: LookupResult to output
        """
        reset = self._color(Colors.RESET)
        print(f"{self._color(Colors.BLUE)}{result.address}{reset}")
        print(f"  Summary:       {self._color(Colors.WHITE)}{result.summary}{reset}")
        print(f"  ASN:           {self._color(Colors.RED)}AS{result.asn}{reset}")
        print(f"  Organization:  {self._color(Colors.GREEN)}{result.organization}{reset}")
        print(f"  City:          {self._color(Colors.MAGENTA)}{result.city}{reset}")
        print(f"  Subdivision:   {self._pair(result.subdivision)}")
        print(f"  Country:       {self._pair(result.country)}")
        print(f"  Continent:     {self._pair(result.continent)}")

    def _pair(self, pair: Pair) -> str:
        code, name = pair
        return f"{self._color(Colors.YELLOW)}{name}{self._color(Colors.RESET)} ({code})"

    def _color(self, color: str) -> str:
        return "" if self.config.monochrome else color
