"""
Unit tests for AsnResolver
"""

import unittest

from geowidget.core.models import RawAsnRecord, NormalizedAsn
from geowidget.services.asn_resolver import AsnResolver

class TestAsnResolver(unittest.TestCase):
    """Test AsnResolver class"""

    def setUp(self):
        self.resolver = AsnResolver()

    def test_no_record(self):
        self.assertEqual(self.resolver.resolve(None), NormalizedAsn(asn=0, organization="-"))

    def test_full_record(self):
        record = RawAsnRecord(asn_number=15169, organization_name="Google LLC")
        self.assertEqual(self.resolver.resolve(record), NormalizedAsn(15169, "Google LLC"))

    def test_fields_default_independently(self):
        self.assertEqual(
            self.resolver.resolve(RawAsnRecord(asn_number=13335)),
            NormalizedAsn(13335, "-"),
        )
        self.assertEqual(
            self.resolver.resolve(RawAsnRecord(organization_name="CLOUDFLARENET")),
            NormalizedAsn(0, "CLOUDFLARENET"),
        )

    def test_empty_organization_is_kept(self):
        """Present-but-empty is not the same as absent"""
        record = RawAsnRecord(asn_number=64512, organization_name="")
        self.assertEqual(self.resolver.resolve(record).organization, "")

    def test_custom_sentinel(self):
        self.assertEqual(AsnResolver("?").resolve(None), NormalizedAsn(0, "?"))

if __name__ == "__main__":
    unittest.main()
