"""
Weather Dataset Service
Entrega uma visão única, ordenada e sem duplicatas do dataset
"""
from ddtrace import tracer

from application.ports.input.get_weather_dataset_port import IGetWeatherDatasetUseCase
from application.ports.output.weather_dataset_repository_port import IWeatherDatasetRepository
from domain.entities.dataset_filters import DatasetFilters
from domain.entities.weather_dataset import WeatherDataset
from domain.exceptions import InvalidDateTimeException
from domain.result import Result
from domain.services.dataset_normalizer import DatasetNormalizer
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class WeatherDatasetService(IGetWeatherDatasetUseCase):
    """Delega ao repositório e normaliza o payload de sucesso"""

    def __init__(self, repository: IWeatherDatasetRepository):
        self.repository = repository

    @tracer.wrap(resource="service.get_weather_dataset")
    async def get_dataset(self, filters: DatasetFilters) -> Result[WeatherDataset]:
        result = await self.repository.get_dataset(filters)

        # Erro do repositório segue sem transformação
        if not result.success:
            return result

        try:
            dataset = DatasetNormalizer.normalize(result.payload)
        except InvalidDateTimeException as e:
            logger.error("Dataset contains unparsable dates", error=str(e), details=e.details)
            return Result.fail(str(e))

        logger.debug(
            "Dataset normalized",
            historical_in=len(result.payload.historical_data),
            historical_out=len(dataset.historical_data),
            forecast=len(dataset.forecast_data)
        )

        return Result.ok(dataset)
