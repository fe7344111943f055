"""
Input validation utilities for GeoWidget
"""

import ipaddress
from typing import Union

from geowidget.core.exceptions import ValidationError
from geowidget.core.models import Address

class Validator:
    """Input validation utilities"""

    @staticmethod
    def validate_ip(ip: str) -> Address:
        """
        Validate and parse an IP address

        Args:
            ip: IP address to validate

        Returns:
            Parsed IPv4Address or IPv6Address

        Raises:
            ValidationError: If IP is invalid
        """
        if not isinstance(ip, str):
            raise ValidationError(f"Invalid IP address: {ip}")
        try:
            return ipaddress.ip_address(ip)
        except ValueError:
            raise ValidationError(f"Invalid IP address: {ip}")

    @staticmethod
    def validate_port(port: Union[str, int]) -> int:
        """
        Validate a port number

        Args:
            port: Port number to validate

        Returns:
            Port number as an integer

        Raises:
            ValidationError: If port is invalid
        """
        try:
            port_num = int(port)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid port number: {port}")
        if port_num < 1 or port_num > 65535:
            raise ValidationError(f"Port number must be between 1 and 65535: {port}")
        return port_num

    @staticmethod
    def validate_integer_range(value: Union[str, int], name: str, min_value: int, max_value: int) -> int:
        """
        Validate an integer within a range

        Args:
            value: Value to validate
            name: Name of the value for error messages
            min_value: Minimum allowed value
            max_value: Maximum allowed value

        Returns:
            The value as an integer

        Raises:
            ValidationError: If value is not an integer or outside the range
        """
        try:
            int_value = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{name} must be an integer: {value}")
        if int_value < min_value or int_value > max_value:
            raise ValidationError(f"{name} must be between {min_value} and {max_value}: {value}")
        return int_value
