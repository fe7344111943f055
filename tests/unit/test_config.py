"""
Unit tests for Config class
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from geowidget.core.config import Config
from geowidget.core.defaults import DEFAULT_STALE_THRESHOLD_SECONDS
from geowidget.core.exceptions import ConfigurationError

class TestConfig(unittest.TestCase):
    """Test Config class"""

    def setUp(self):
        """Set up for tests"""
        self.temp_dir = Path(tempfile.mkdtemp())

        self.config_file = self.temp_dir / "config.yaml"
        with open(self.config_file, 'w') as f:
            f.write("""
            debug: true
            monochrome: true
            server_bind_port: 8893
            asn_database_file: /var/db/GeoLite2-ASN.mmdb
            stale_threshold_seconds: 86400
            """)

    def tearDown(self):
        """Clean up after tests"""
        shutil.rmtree(self.temp_dir)

    @patch.dict(os.environ, {}, clear=True)
    def test_default_config(self):
        """Test default configuration"""
        config = Config()

        self.assertFalse(config.debug)
        self.assertFalse(config.verbose)
        self.assertFalse(config.monochrome)
        self.assertEqual(config.provider, "maxmind")
        self.assertEqual(config.asn_database_file, "GeoLite2-ASN.mmdb")
        self.assertEqual(config.city_database_file, "GeoLite2-City.mmdb")
        self.assertEqual(config.server_bind_addr, "0.0.0.0")
        self.assertEqual(config.server_bind_port, 8888)
        self.assertEqual(config.sentinel, "-")
        self.assertEqual(config.stale_threshold_seconds, DEFAULT_STALE_THRESHOLD_SECONDS)
        self.assertIsNone(config.log_file)

    @patch.dict(os.environ, {}, clear=True)
    def test_load_config_file(self):
        """Test loading config from file"""
        config = Config(self.config_file)

        self.assertTrue(config.debug)
        self.assertTrue(config.monochrome)
        self.assertEqual(config.server_bind_port, 8893)
        self.assertEqual(config.asn_database_file, "/var/db/GeoLite2-ASN.mmdb")
        self.assertEqual(config.city_database_file, "GeoLite2-City.mmdb")
        self.assertEqual(config.stale_threshold_seconds, 86400)

    def test_load_nonexistent_config_file(self):
        """Test loading nonexistent config file raises exception"""
        with self.assertRaises(ConfigurationError):
            Config(self.temp_dir / "nonexistent.yaml")

    def test_config_file_must_be_mapping(self):
        """Test a YAML list is rejected"""
        list_file = self.temp_dir / "list.yaml"
        list_file.write_text("- debug\n- verbose\n")

        with self.assertRaises(ConfigurationError):
            Config(list_file)

    @patch.dict(os.environ, {
        "GEOWIDGET_DEBUG": "1",
        "GEOWIDGET_MONOCHROME": "true",
        "GEOWIDGET_CITY_DATABASE_FILE": "/data/city.mmdb",
        "GEOWIDGET_PORT": "9000",
        "GEOWIDGET_STALE_THRESHOLD": "3600",
    }, clear=True)
    def test_load_environment_vars(self):
        """Test loading config from environment variables"""
        config = Config(self.config_file)

        self.assertTrue(config.debug)
        self.assertTrue(config.monochrome)
        self.assertEqual(config.city_database_file, "/data/city.mmdb")
        self.assertEqual(config.server_bind_port, 9000)
        self.assertEqual(config.stale_threshold_seconds, 3600)

    @patch.dict(os.environ, {"GEOWIDGET_PORT": "http"}, clear=True)
    def test_invalid_environment_integer(self):
        """Test non-numeric environment values are rejected"""
        with self.assertRaises(ConfigurationError):
            Config()

    @patch.dict(os.environ, {}, clear=True)
    def test_validate_configuration(self):
        """Test configuration validation"""
        for content in ("server_bind_port: 70000", "stale_threshold_seconds: -5",
                        "stale_threshold_seconds: soon", "sentinel: ''"):
            invalid_config_file = self.temp_dir / "invalid_config.yaml"
            invalid_config_file.write_text(content + "\n")

            with self.subTest(content=content):
                with self.assertRaises(ConfigurationError):
                    Config(invalid_config_file)

    @patch.dict(os.environ, {}, clear=True)
    def test_log_file_directory_created(self):
        """Test the log file's directory is created"""
        log_config = self.temp_dir / "log.yaml"
        log_file = self.temp_dir / "logs" / "geowidget.log"
        log_config.write_text(f"log_file: {log_file}\n")

        config = Config(log_config)

        self.assertTrue(log_file.parent.is_dir())
        self.assertEqual(config.log_file, str(log_file))

    @patch.dict(os.environ, {}, clear=True)
    def test_save_config(self):
        """Test saving configuration to file"""
        config = Config()
        config.debug = True
        config.city_database_file = "/srv/GeoLite2-City.mmdb"

        save_file = self.temp_dir / "saved" / "config.yaml"
        config.save(save_file)

        loaded_config = Config(save_file)

        self.assertTrue(loaded_config.debug)
        self.assertEqual(loaded_config.city_database_file, "/srv/GeoLite2-City.mmdb")

if __name__ == "__main__":
    unittest.main()
