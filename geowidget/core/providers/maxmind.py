"""
MaxMind GeoLite2 database provider

Every lookup and metadata read opens the database file again, so a file
replaced on disk (e.g. by a scheduled GeoLite2 update on a shared volume)
is picked up on the next call without restarting the process.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Optional, Sequence

import maxminddb

from geowidget.core.exceptions import DatabaseOpenError, SourceUnavailableError
from geowidget.core.models import Address, RawAsnRecord, RawCityRecord, SourceMetadata
from geowidget.services import GeoDataProvider, MetadataProvider

logger = logging.getLogger(__name__)

ASN_SOURCE = "asn"
CITY_SOURCE = "city"

class MaxMindProvider(GeoDataProvider, MetadataProvider):
    """Reads ASN and city records from GeoLite2 .mmdb files"""

    def __init__(self, asn_database_file: str, city_database_file: str):
        """
        Check that both databases can be opened

        Args:
            asn_database_file: Path to the GeoLite2-ASN database
            city_database_file: Path to the GeoLite2-City database

        Raises:
            DatabaseOpenError: If either database cannot be opened
        """
        self._database_files: Dict[str, str] = {
            ASN_SOURCE: asn_database_file,
            CITY_SOURCE: city_database_file,
        }
        self._closed = False

        for source in self.sources:
            with self._reading(source):
                logger.info(f"Opened {source} database {self._database_files[source]}")

    @classmethod
    def from_config(cls, config) -> "MaxMindProvider":
        return cls(str(config.asn_database_file), str(config.city_database_file))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Stop answering queries"""
        self._closed = True

    @property
    def sources(self) -> Sequence[str]:
        return (ASN_SOURCE, CITY_SOURCE)

    def _open(self, source: str) -> maxminddb.Reader:
        if self._closed:
            raise SourceUnavailableError(source, "provider is closed")
        database_file = self._database_files.get(source)
        if database_file is None:
            raise SourceUnavailableError(source, "unknown database")

        try:
            return maxminddb.open_database(database_file)
        except (OSError, ValueError, maxminddb.InvalidDatabaseError) as e:
            raise DatabaseOpenError(source, f"{database_file}: {e}")

    @contextmanager
    def _reading(self, source: str):
        """Open a source's database for the duration of one read"""
        reader = self._open(source)
        try:
            yield reader
        finally:
            reader.close()

    def _get(self, source: str, address: Address) -> Optional[dict]:
        """
        Read the raw record for an address

        Returns None when the address is not in the database or the
        database cannot answer for it (e.g. IPv6 against an IPv4 file).

        Raises:
            DatabaseOpenError: If the database file can no longer be opened
        """
        with self._reading(source) as reader:
            try:
                data = reader.get(address)
            except (ValueError, maxminddb.InvalidDatabaseError) as e:
                logger.debug(f"{source} lookup for {address} failed: {e}")
                return None
        if not isinstance(data, dict):
            return None
        return data

    def lookup_asn(self, address: Address) -> Optional[RawAsnRecord]:
        data = self._get(ASN_SOURCE, address)
        return RawAsnRecord.from_dict(data) if data is not None else None

    def lookup_city(self, address: Address) -> Optional[RawCityRecord]:
        data = self._get(CITY_SOURCE, address)
        return RawCityRecord.from_dict(data) if data is not None else None

    def get_metadata(self, source: str) -> SourceMetadata:
        with self._reading(source) as reader:
            metadata = reader.metadata()
        return SourceMetadata(
            source_label=metadata.database_type,
            build_epoch_seconds=metadata.build_epoch,
            format_major=metadata.binary_format_major_version,
            format_minor=metadata.binary_format_minor_version,
            node_count=metadata.node_count,
            record_size=metadata.record_size,
        )
