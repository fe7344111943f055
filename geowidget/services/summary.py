"""
One-line summary of a lookup
"""

from geowidget.core.models import NormalizedAsn, NormalizedCity

class SummaryFormatter:
    """Formats "<CITY>,<STATE>/<COUNTRY>; <AS NAME> (<ASN>);" summaries"""

    @staticmethod
    def format(asn: NormalizedAsn, city: NormalizedCity) -> str:
        # Fields are joined verbatim, delimiters inside names are not escaped
        return (
            f"{city.city},{city.subdivision[0]}/{city.country[0]}; "
            f"{asn.organization} ({asn.asn});"
        )
