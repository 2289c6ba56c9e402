"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_api_client import (
    OpenMeteoApiClient,
    OpenMeteoApiError
)

__all__ = ['OpenMeteoApiClient', 'OpenMeteoApiError']
