"""
Composite address lookup
"""

import logging
import time
from typing import Callable, List, Optional

from geowidget.core.defaults import SENTINEL, DEFAULT_LOCALE, DEFAULT_STALE_THRESHOLD_SECONDS
from geowidget.core.models import (
    Address, RawAsnRecord, RawCityRecord, LookupResult, SourceMetadata, HealthStatus
)
from geowidget.services import GeoDataProvider, MetadataProvider, LookupService
from geowidget.services.asn_resolver import AsnResolver
from geowidget.services.city_resolver import CityResolver
from geowidget.services.freshness import FreshnessEvaluator
from geowidget.services.summary import SummaryFormatter

logger = logging.getLogger(__name__)

class CompositeResolver(LookupService):
    """Merges the ASN and city lookups for an address into one LookupResult"""

    def __init__(self, provider: GeoDataProvider, metadata_provider: Optional[MetadataProvider] = None,
                 sentinel: str = SENTINEL, stale_threshold_seconds: int = DEFAULT_STALE_THRESHOLD_SECONDS,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the resolver

        Args:
            provider: Source of raw ASN and city records
            metadata_provider: Source of build metadata (default: provider, if it has any)
            sentinel: Placeholder for unresolved fields
            stale_threshold_seconds: Age at which a database counts as stale
            clock: Returns the current time in epoch seconds
        """
        self.provider = provider
        if metadata_provider is None and isinstance(provider, MetadataProvider):
            metadata_provider = provider
        self.metadata_provider = metadata_provider
        self.asn_resolver = AsnResolver(sentinel)
        self.city_resolver = CityResolver(sentinel, DEFAULT_LOCALE)
        self.freshness = FreshnessEvaluator(stale_threshold_seconds)
        self.clock = clock

    def resolve(self, address: Address) -> LookupResult:
        """
        Look up an address in both data sources

        A failure in one lookup only defaults that lookup's fields.

        Args:
            address: A valid IP address, echoed back unchanged

        Returns:
            Fully populated LookupResult
        """
        asn = self.asn_resolver.resolve(self._lookup_asn(address))
        city = self.city_resolver.resolve(self._lookup_city(address))
        summary = SummaryFormatter.format(asn, city)

        return LookupResult(
            address=address,
            asn=asn.asn,
            organization=asn.organization,
            city=city.city,
            continent=city.continent,
            country=city.country,
            subdivision=city.subdivision,
            summary=summary,
        )

    def resolve_address(self, address: Address) -> LookupResult:
        return self.resolve(address)

    def _lookup_asn(self, address: Address) -> Optional[RawAsnRecord]:
        try:
            record = self.provider.lookup_asn(address)
        except Exception as e:
            logger.debug(f"lookup_asn({address}) error: {e!r}")
            return None
        if record is None:
            logger.debug(f"lookup_asn({address}): no record")
        return record

    def _lookup_city(self, address: Address) -> Optional[RawCityRecord]:
        try:
            record = self.provider.lookup_city(address)
        except Exception as e:
            logger.debug(f"lookup_city({address}) error: {e!r}")
            return None
        if record is None:
            logger.debug(f"lookup_city({address}): no record")
        return record

    def describe_sources(self) -> List[SourceMetadata]:
        if self.metadata_provider is None:
            return []
        return [self.metadata_provider.get_metadata(source) for source in self.metadata_provider.sources]

    def check_health(self, now: Optional[float] = None) -> HealthStatus:
        """
        Run the freshness check over every data source

        Args:
            now: Current time in epoch seconds (default: the clock)

        Returns:
            HealthStatus for the sources in check order
        """
        if now is None:
            now = self.clock()
        return self.freshness.evaluate(self.describe_sources(), now)
