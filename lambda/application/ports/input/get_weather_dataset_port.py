"""
Input Port: Interface para buscar o dataset meteorológico normalizado
"""
from abc import ABC, abstractmethod

from domain.entities.dataset_filters import DatasetFilters
from domain.entities.weather_dataset import WeatherDataset
from domain.result import Result


class IGetWeatherDatasetUseCase(ABC):
    """Interface para caso de uso de buscar dataset de clima"""

    @abstractmethod
    async def get_dataset(self, filters: DatasetFilters) -> Result[WeatherDataset]:
        """
        Busca dataset ordenado e sem sobreposição entre histórico e previsão

        Args:
            filters: Filtros da consulta

        Returns:
            Result com o dataset normalizado ou a mensagem de erro do repositório
        """
        pass
