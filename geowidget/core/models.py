"""
Data models for GeoWidget

Raw records mirror what a database lookup may return: every level is
optional and ``None`` means the key was absent. Normalized records and
results are always fully populated.
"""

import ipaddress
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any, Tuple, Union

from geowidget.core.defaults import SENTINEL, HEALTHY_REASON

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
Pair = Tuple[str, str]

def _names(data: Dict[str, Any]) -> Optional[Dict[str, str]]:
    names = data.get("names")
    if names is None:
        return None
    return dict(names)

@dataclass(frozen=True)
class RawAsnRecord:
    """ASN database record"""
    asn_number: Optional[int] = None
    organization_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawAsnRecord":
        return cls(
            asn_number=data.get("autonomous_system_number"),
            organization_name=data.get("autonomous_system_organization"),
        )

@dataclass(frozen=True)
class RawCity:
    """City entry of a city database record"""
    names: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawCity":
        return cls(names=_names(data))

@dataclass(frozen=True)
class RawContinent:
    """Continent entry of a city database record"""
    code: Optional[str] = None
    names: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawContinent":
        return cls(code=data.get("code"), names=_names(data))

@dataclass(frozen=True)
class RawCountry:
    """Country entry of a city database record"""
    iso_code: Optional[str] = None
    names: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawCountry":
        return cls(iso_code=data.get("iso_code"), names=_names(data))

@dataclass(frozen=True)
class RawSubdivision:
    """Subdivision entry of a city database record"""
    iso_code: Optional[str] = None
    names: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawSubdivision":
        return cls(iso_code=data.get("iso_code"), names=_names(data))

@dataclass(frozen=True)
class RawCityRecord:
    """City database record"""
    city: Optional[RawCity] = None
    continent: Optional[RawContinent] = None
    country: Optional[RawCountry] = None
    subdivisions: Optional[List[RawSubdivision]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawCityRecord":
        """
        Build a record from a decoded database entry

        Args:
            data: Dictionary as returned by the database reader

        Returns:
            RawCityRecord with None for every absent key
        """
        city = data.get("city")
        continent = data.get("continent")
        country = data.get("country")
        subdivisions = data.get("subdivisions")

        return cls(
            city=RawCity.from_dict(city) if city is not None else None,
            continent=RawContinent.from_dict(continent) if continent is not None else None,
            country=RawCountry.from_dict(country) if country is not None else None,
            subdivisions=(
                [RawSubdivision.from_dict(entry) for entry in subdivisions]
                if subdivisions is not None else None
            ),
        )

@dataclass(frozen=True)
class NormalizedAsn:
    """ASN information with defaults applied"""
    asn: int = 0
    organization: str = SENTINEL

@dataclass(frozen=True)
class NormalizedCity:
    """City information with defaults applied"""
    city: str = SENTINEL
    continent: Pair = (SENTINEL, SENTINEL)
    country: Pair = (SENTINEL, SENTINEL)
    subdivision: Pair = (SENTINEL, SENTINEL)

@dataclass(frozen=True)
class LookupResult:
    """Merged ASN and city information for one address"""
    address: Address
    asn: int
    organization: str
    city: str
    continent: Pair
    country: Pair
    subdivision: Pair
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to a JSON-compatible dictionary

        Returns:
            Flat dictionary keyed by field name
        """
        return {
            "address": str(self.address),
            "asn": self.asn,
            "organization": self.organization,
            "city": self.city,
            "continent": list(self.continent),
            "country": list(self.country),
            "subdivision": list(self.subdivision),
            "summary": self.summary,
        }

@dataclass(frozen=True)
class SourceMetadata:
    """Build information about one database"""
    source_label: str
    build_epoch_seconds: int
    format_major: int = 0
    format_minor: int = 0
    node_count: int = 0
    record_size: int = 0

    @property
    def build_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.build_epoch_seconds, tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_label": self.source_label,
            "build_epoch_seconds": self.build_epoch_seconds,
            "build_datetime": self.build_datetime.isoformat(),
            "format_major": self.format_major,
            "format_minor": self.format_minor,
            "node_count": self.node_count,
            "record_size": self.record_size,
        }

@dataclass
class HealthStatus:
    """Outcome of a database freshness check"""
    healthy: bool = True
    reason: str = HEALTHY_REASON

    def to_dict(self) -> Dict[str, Any]:
        return {"healthy": self.healthy, "reason": self.reason}
