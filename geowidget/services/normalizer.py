"""
Locale selection for multi-locale name maps
"""

from typing import Dict, Optional

from geowidget.core.defaults import SENTINEL, DEFAULT_LOCALE

def select_locale(names: Optional[Dict[str, str]], locale: str = DEFAULT_LOCALE,
                  sentinel: str = SENTINEL) -> str:
    """
    Pick one locale from a name map

    Args:
        names: Mapping of locale to name, or None if the record has no names
        locale: Locale key to read
        sentinel: Value returned when the name is unavailable

    Returns:
        The name for the locale, unchanged, or the sentinel
    """
    if names is None:
        return sentinel
    return names.get(locale, sentinel)
