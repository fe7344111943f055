"""
GeoWidget - geographic and network information for IP addresses
"""

__version__ = "1.0.0"
