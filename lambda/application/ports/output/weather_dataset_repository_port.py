"""
Output Port: Interface para repositórios de datasets meteorológicos
"""
from abc import ABC, abstractmethod

from domain.entities.dataset_filters import DatasetFilters
from domain.entities.weather_dataset import WeatherDataset
from domain.result import Result


class IWeatherDatasetRepository(ABC):
    """
    Busca um dataset (histórico + previsão) para os filtros informados.

    Falhas de transporte não escapam como exceção: são devolvidas como
    Result.fail com a descrição do erro.
    """

    @abstractmethod
    async def get_dataset(self, filters: DatasetFilters) -> Result[WeatherDataset]:
        """
        Args:
            filters: Localização, intervalo, agregação e métrica

        Returns:
            Result com WeatherDataset (sucesso) ou mensagem de erro (falha)
        """
        pass
