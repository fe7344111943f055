"""
Unit tests for Validator class
"""

import ipaddress
import unittest

from geowidget.core.exceptions import ValidationError
from geowidget.utils.validation import Validator

class TestValidator(unittest.TestCase):
    """Test Validator class"""

    def test_validate_ip(self):
        """Test validate_ip method"""
        self.assertEqual(Validator.validate_ip("192.168.1.1"), ipaddress.IPv4Address("192.168.1.1"))
        self.assertEqual(Validator.validate_ip("2001:db8::1"), ipaddress.IPv6Address("2001:db8::1"))

        for invalid in ("256.0.0.1", "2001:db8::gggg", "example.com", "", "8.8.8.8/32"):
            with self.subTest(ip=invalid):
                with self.assertRaises(ValidationError):
                    Validator.validate_ip(invalid)

    def test_validate_ip_is_not_trimmed(self):
        """Test surrounding whitespace is rejected rather than stripped"""
        for padded in (" 8.8.8.8", "8.8.8.8 ", "\t2001:db8::1\n"):
            with self.subTest(ip=padded):
                with self.assertRaises(ValidationError):
                    Validator.validate_ip(padded)

    def test_validate_ip_rejects_non_strings(self):
        """Test integers are not read as packed addresses"""
        with self.assertRaises(ValidationError):
            Validator.validate_ip(134744072)

    def test_validate_ip_error_message(self):
        """Test the error names the rejected value"""
        with self.assertRaises(ValidationError) as ctx:
            Validator.validate_ip("not-an-ip")
        self.assertEqual(str(ctx.exception), "Invalid IP address: not-an-ip")

    def test_validate_port(self):
        """Test validate_port method"""
        self.assertEqual(Validator.validate_port(80), 80)
        self.assertEqual(Validator.validate_port("443"), 443)
        self.assertEqual(Validator.validate_port(65535), 65535)

        with self.assertRaises(ValidationError):
            Validator.validate_port(0)

        with self.assertRaises(ValidationError):
            Validator.validate_port(65536)

        with self.assertRaises(ValidationError):
            Validator.validate_port("abc")

    def test_validate_integer_range(self):
        """Test validate_integer_range method"""
        self.assertEqual(Validator.validate_integer_range(5, "test_value", 1, 10), 5)
        self.assertEqual(Validator.validate_integer_range("5", "test_value", 1, 10), 5)
        self.assertEqual(Validator.validate_integer_range(1, "test_value", 1, 10), 1)
        self.assertEqual(Validator.validate_integer_range(10, "test_value", 1, 10), 10)

        with self.assertRaises(ValidationError):
            Validator.validate_integer_range(0, "test_value", 1, 10)

        with self.assertRaises(ValidationError):
            Validator.validate_integer_range(11, "test_value", 1, 10)

        with self.assertRaises(ValidationError):
            Validator.validate_integer_range("abc", "test_value", 1, 10)

if __name__ == "__main__":
    unittest.main()
