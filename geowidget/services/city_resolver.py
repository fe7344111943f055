"""
City record normalization

Each group (city, continent, country, subdivision) is resolved on its
own, so a missing continent never affects the country and so on.

Only the first entry of ``subdivisions`` is used. For most countries this
is the first-level administrative division (state, province, region);
finer levels are ignored.
"""

from typing import Optional

from geowidget.core.defaults import SENTINEL, DEFAULT_LOCALE
from geowidget.core.models import (
    RawCityRecord, RawContinent, RawCountry, RawSubdivision, NormalizedCity, Pair
)
from geowidget.services.normalizer import select_locale

class CityResolver:
    """Turns an optional city record into a fully populated NormalizedCity"""

    def __init__(self, sentinel: str = SENTINEL, locale: str = DEFAULT_LOCALE):
        self.sentinel = sentinel
        self.locale = locale

    def resolve(self, record: Optional[RawCityRecord]) -> NormalizedCity:
        """
        Normalize a city record

        Args:
            record: Record from the data source, or None if there was none

        Returns:
            NormalizedCity with the sentinel in every slot that is unavailable
        """
        if record is None:
            return self._default()

        if record.city is not None:
            city = self._name(record.city.names)
        else:
            city = self.sentinel

        return NormalizedCity(
            city=city,
            continent=self._continent(record.continent),
            country=self._country(record.country),
            subdivision=self._subdivision(record),
        )

    def _default(self) -> NormalizedCity:
        empty = (self.sentinel, self.sentinel)
        return NormalizedCity(city=self.sentinel, continent=empty, country=empty, subdivision=empty)

    def _name(self, names) -> str:
        return select_locale(names, self.locale, self.sentinel)

    def _code(self, code: Optional[str]) -> str:
        return code if code is not None else self.sentinel

    def _continent(self, continent: Optional[RawContinent]) -> Pair:
        if continent is None:
            return (self.sentinel, self.sentinel)
        return (self._code(continent.code), self._name(continent.names))

    def _country(self, country: Optional[RawCountry]) -> Pair:
        if country is None:
            return (self.sentinel, self.sentinel)
        return (self._code(country.iso_code), self._name(country.names))

    def _subdivision(self, record: RawCityRecord) -> Pair:
        if not record.subdivisions:
            return (self.sentinel, self.sentinel)
        first: RawSubdivision = record.subdivisions[0]
        return (self._code(first.iso_code), self._name(first.names))
