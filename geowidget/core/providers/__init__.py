"""
Provider registry for GeoWidget data sources
"""

from typing import Callable, Dict, List

from geowidget.core.config import Config
from geowidget.core.exceptions import ConfigurationError

ProviderFactory = Callable[[Config], object]

class ProviderRegistry:
    """Registry of data provider factories, keyed by name"""
    _providers: Dict[str, ProviderFactory] = {}

    @classmethod
    def register(cls, provider_name: str, factory: ProviderFactory):
        """
        Register a provider factory

        Args:
            provider_name: Name used in the ``provider`` configuration key
            factory: Callable building the provider from a Config
        """
        cls._providers[provider_name] = factory

    @classmethod
    def create(cls, config: Config):
        """
        Build the provider selected by the configuration

        Args:
            config: Configuration object

        Returns:
            Provider instance

        Raises:
            ConfigurationError: If the provider is not registered
        """
        if config.provider not in cls._providers:
            raise ConfigurationError(
                f"Unknown provider: {config.provider} (available: {', '.join(cls.names())})"
            )
        return cls._providers[config.provider](config)

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._providers)

def _register_builtin_providers():
    from geowidget.core.providers.maxmind import MaxMindProvider
    ProviderRegistry.register("maxmind", MaxMindProvider.from_config)

_register_builtin_providers()
