"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_dataset_repository_port import IWeatherDatasetRepository
from .weather_api_client_port import IWeatherApiClient
