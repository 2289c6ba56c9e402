"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de repositórios e clientes externos
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.openmeteo_dataset_repository import (
    OpenMeteoDatasetRepository,
    get_openmeteo_dataset_repository
)
from infrastructure.adapters.output.providers import OpenMeteoApiClient

__all__ = [
    'get_aiohttp_session_manager',
    'OpenMeteoDatasetRepository',
    'get_openmeteo_dataset_repository',
    'OpenMeteoApiClient'
]
