"""
Unit tests for FreshnessEvaluator
"""

import unittest
from datetime import datetime, timezone

from geowidget.core.defaults import DEFAULT_STALE_THRESHOLD_SECONDS
from geowidget.core.models import SourceMetadata, HealthStatus
from geowidget.services.freshness import FreshnessEvaluator

NOW = 1_700_000_000

def source(label, age):
    return SourceMetadata(source_label=label, build_epoch_seconds=NOW - age,
                          format_major=2, format_minor=0, node_count=100, record_size=24)

class TestFreshnessEvaluator(unittest.TestCase):
    """Test FreshnessEvaluator class"""

    def setUp(self):
        self.evaluator = FreshnessEvaluator()

    def test_default_threshold(self):
        self.assertEqual(DEFAULT_STALE_THRESHOLD_SECONDS, 1296000)
        self.assertEqual(self.evaluator.stale_threshold_seconds, 1296000)

    def test_all_fresh(self):
        status = self.evaluator.evaluate([source("GeoLite2-ASN", 60), source("GeoLite2-City", 3600)], NOW)
        self.assertEqual(status, HealthStatus(True, "Check of databases passed"))

    def test_no_sources(self):
        self.assertTrue(self.evaluator.evaluate([], NOW).healthy)

    def test_threshold_boundary(self):
        self.assertFalse(self.evaluator.evaluate([source("GeoLite2-ASN", 1296000)], NOW).healthy)
        self.assertTrue(self.evaluator.evaluate([source("GeoLite2-ASN", 1295999)], NOW).healthy)

    def test_stale_reason(self):
        stale = SourceMetadata("GeoLite2-City", build_epoch_seconds=1_600_000_000)
        status = self.evaluator.evaluate([stale], NOW)

        self.assertFalse(status.healthy)
        self.assertEqual(
            status.reason,
            "Database is stale (GeoLite2-City build date: 2020-09-13 12:26:40 UTC)",
        )

    def test_first_stale_wins(self):
        a = source("A", 10)
        b = source("B", 2_000_000)
        c = source("C", 9_000_000)

        status = self.evaluator.evaluate([a, b, c], NOW)
        self.assertFalse(status.healthy)
        self.assertIn("(B build date:", status.reason)

        status = self.evaluator.evaluate([b, a], NOW)
        self.assertIn("(B build date:", status.reason)

    def test_stops_after_first_stale(self):
        examined = []

        def sources():
            for item in (source("A", 10), source("B", 2_000_000), source("C", 9_000_000)):
                examined.append(item.source_label)
                yield item

        self.evaluator.evaluate(sources(), NOW)
        self.assertEqual(examined, ["A", "B"])

    def test_datetime_now(self):
        now = datetime.fromtimestamp(NOW, tz=timezone.utc)
        self.assertFalse(self.evaluator.evaluate([source("A", 1296000)], now).healthy)

    def test_naive_datetime_now_is_utc(self):
        now = datetime.fromtimestamp(NOW, tz=timezone.utc).replace(tzinfo=None)
        self.assertFalse(self.evaluator.evaluate([source("A", 1296000)], now).healthy)
        self.assertTrue(self.evaluator.evaluate([source("A", 1295999)], now).healthy)

    def test_custom_threshold(self):
        evaluator = FreshnessEvaluator(stale_threshold_seconds=3600)
        self.assertFalse(evaluator.evaluate([source("A", 3600)], NOW).healthy)
        self.assertTrue(evaluator.evaluate([source("A", 3599)], NOW).healthy)

if __name__ == "__main__":
    unittest.main()
