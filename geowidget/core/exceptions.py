"""
Custom exceptions for GeoWidget
"""

class GeoWidgetError(Exception):
    """Base exception for all GeoWidget errors"""
    pass

class ConfigurationError(GeoWidgetError):
    """Error in configuration settings"""
    pass

class ValidationError(GeoWidgetError):
    """Error validating input data"""
    pass

class DatabaseOpenError(GeoWidgetError):
    """A database file could not be opened"""
    def __init__(self, source, message):
        self.source = source
        super().__init__(f"Unable to open {source} database: {message}")

class SourceUnavailableError(GeoWidgetError):
    """A data source could not be queried"""
    def __init__(self, source, message):
        self.source = source
        super().__init__(f"{source} lookup failed: {message}")
