"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openmeteo import OpenMeteoApiClient, OpenMeteoApiError

__all__ = ['OpenMeteoApiClient', 'OpenMeteoApiError']
