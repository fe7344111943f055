"""
GeoWidget service interfaces
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from geowidget.core.models import (
    Address, RawAsnRecord, RawCityRecord, LookupResult, SourceMetadata, HealthStatus
)

class GeoDataProvider(ABC):
    """Interface for address lookups against the ASN and city data sources"""

    @abstractmethod
    def lookup_asn(self, address: Address) -> Optional[RawAsnRecord]:
        """
        Look up the ASN record for an address

        Args:
            address: The IP address to look up

        Returns:
            RawAsnRecord, or None if the address is not in the data source
        """
        pass

    @abstractmethod
    def lookup_city(self, address: Address) -> Optional[RawCityRecord]:
        """
        Look up the city record for an address

        Args:
            address: The IP address to look up

        Returns:
            RawCityRecord, or None if the address is not in the data source
        """
        pass

class MetadataProvider(ABC):
    """Interface for data source build metadata"""

    @property
    @abstractmethod
    def sources(self) -> Sequence[str]:
        """Source identifiers in the order they are checked"""
        pass

    @abstractmethod
    def get_metadata(self, source: str) -> SourceMetadata:
        """
        Get build metadata for a data source

        Args:
            source: Source identifier (one of ``sources``)

        Returns:
            SourceMetadata for the source

        Raises:
            SourceUnavailableError: If the source is unknown or cannot be read
        """
        pass

class LookupService(ABC):
    """Interface used by the HTTP and command-line front ends"""

    @abstractmethod
    def resolve_address(self, address: Address) -> LookupResult:
        """
        Resolve everything known about an address

        Args:
            address: A valid IP address

        Returns:
            Fully populated LookupResult
        """
        pass

    @abstractmethod
    def check_health(self) -> HealthStatus:
        """
        Check whether the data sources are fresh

        Returns:
            HealthStatus describing the first stale source, if any
        """
        pass

    @abstractmethod
    def describe_sources(self) -> List[SourceMetadata]:
        """
        Get build metadata for every data source

        Returns:
            SourceMetadata list in check order
        """
        pass
