"""
Open-Meteo Dataset Repository - Monta dataset histórico + previsão a partir de dois endpoints
"""
import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ddtrace import tracer

from application.ports.output.weather_api_client_port import IWeatherApiClient
from application.ports.output.weather_dataset_repository_port import IWeatherDatasetRepository
from domain.entities.dataset_filters import DatasetFilters
from domain.entities.weather_dataset import WeatherDataset, WeatherPoint
from domain.result import Result
from domain.value_objects.timeframe import Timeframe
from infrastructure.adapters.helpers.timeframe_partitioner import TimeframePartitioner
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDatasetMapper
from infrastructure.adapters.output.providers.openmeteo.openmeteo_api_client import OpenMeteoApiClient
from shared.config.settings import OPENMETEO_FORECAST_URL, OPENMETEO_HISTORICAL_URL
from shared.utils.datetime_parser import DateTimeParser
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class OpenMeteoDatasetRepository(IWeatherDatasetRepository):
    """
    Repositório de datasets sobre as APIs Open-Meteo

    Flow:
    1. Particiona o intervalo em previsão e/ou histórico em relação a "agora"
    2. Busca os sub-intervalos necessários em paralelo (asyncio.gather)
    3. Converte cada resposta em List[WeatherPoint]
    4. Qualquer falha de transporte vira Result.fail (sem dataset parcial)
    """

    def __init__(
        self,
        api_client: Optional[IWeatherApiClient] = None,
        clock: Callable[[], datetime] = _utc_now,
        forecast_url: str = OPENMETEO_FORECAST_URL,
        historical_url: str = OPENMETEO_HISTORICAL_URL
    ):
        """
        Args:
            api_client: Cliente de transporte (usa OpenMeteoApiClient se None)
            clock: Fonte do instante atual
            forecast_url: Endpoint de previsão
            historical_url: Endpoint histórico
        """
        self.api_client = api_client or OpenMeteoApiClient()
        self.clock = clock
        self.forecast_url = forecast_url
        self.historical_url = historical_url

    @tracer.wrap(resource="openmeteo.get_dataset")
    async def get_dataset(self, filters: DatasetFilters) -> Result[WeatherDataset]:
        partition = TimeframePartitioner.partition(filters.timeframe, self.clock())

        logger.debug(
            "Timeframe partitioned",
            forecast=partition.forecast is not None,
            historical=partition.historical is not None
        )

        try:
            forecast_data, historical_data = await asyncio.gather(
                self._fetch_points(self.forecast_url, "forecast", partition.forecast, filters),
                self._fetch_points(self.historical_url, "historical", partition.historical, filters)
            )
        except Exception as e:
            logger.error(
                "Failed to fetch weather dataset",
                error=str(e),
                aggregation=filters.aggregation.value,
                metric=filters.aggregation_metric.value,
                exc_info=True
            )
            return Result.fail(str(e))

        return Result.ok(WeatherDataset(
            aggregation=filters.aggregation,
            aggregation_metric=filters.aggregation_metric,
            location=filters.location,
            timeframe=filters.timeframe,
            historical_data=historical_data,
            forecast_data=forecast_data
        ))

    async def _fetch_points(
        self,
        url: str,
        kind: str,
        timeframe: Optional[Timeframe],
        filters: DatasetFilters
    ) -> List[WeatherPoint]:
        """Busca um sub-intervalo; sub-intervalo ausente não gera chamada"""
        if timeframe is None:
            return []

        params = self._build_params(timeframe, filters)

        logger.info(
            "Fetching Open-Meteo data",
            endpoint=kind,
            location=str(filters.location),
            start_date=params['start_date'],
            end_date=params['end_date']
        )

        responses = await self.api_client.fetch(url, params)
        if not responses:
            return []

        return OpenMeteoDatasetMapper.map_response_to_points(responses[0], filters.aggregation)

    @staticmethod
    def _build_params(timeframe: Timeframe, filters: DatasetFilters) -> Dict[str, Any]:
        return {
            'latitude': filters.location.latitude,
            'longitude': filters.location.longitude,
            'start_date': DateTimeParser.to_query_date(timeframe.start_date),
            'end_date': DateTimeParser.to_query_date(timeframe.end_date),
            **OpenMeteoDatasetMapper.map_aggregation_to_query_params(
                filters.aggregation,
                filters.aggregation_metric
            )
        }


# Factory singleton
_repository_instance = None


def get_openmeteo_dataset_repository() -> OpenMeteoDatasetRepository:
    """
    Factory para obter singleton do repositório
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _repository_instance

    if _repository_instance is None:
        _repository_instance = OpenMeteoDatasetRepository()

    return _repository_instance
