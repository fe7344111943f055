"""
ASN record normalization
"""

from typing import Optional

from geowidget.core.defaults import SENTINEL
from geowidget.core.models import RawAsnRecord, NormalizedAsn

class AsnResolver:
    """Turns an optional ASN record into a fully populated NormalizedAsn"""

    def __init__(self, sentinel: str = SENTINEL):
        self.sentinel = sentinel

    def resolve(self, record: Optional[RawAsnRecord]) -> NormalizedAsn:
        """
        Normalize an ASN record

        Args:
            record: Record from the data source, or None if there was none

        Returns:
            NormalizedAsn; each missing field falls back on its own
        """
        if record is None:
            return NormalizedAsn(asn=0, organization=self.sentinel)

        asn = record.asn_number if record.asn_number is not None else 0
        if record.organization_name is not None:
            organization = record.organization_name
        else:
            organization = self.sentinel

        return NormalizedAsn(asn=asn, organization=organization)
