"""
Dataset Filters Parser
Builds DatasetFilters from API query string parameters
"""
from typing import Optional

from domain.entities.dataset_filters import DatasetFilters
from domain.value_objects.geo_location import GeoLocation
from domain.value_objects.timeframe import Timeframe
from shared.utils.validators import AggregationValidator, CoordinatesValidator


class DatasetFiltersParser:
    """Parse dataset filters from query parameters"""

    @staticmethod
    def from_query_params(
        aggregation: Optional[str],
        metric: Optional[str],
        latitude: Optional[str],
        longitude: Optional[str],
        start_date: Optional[str],
        end_date: Optional[str]
    ) -> DatasetFilters:
        """
        Valida e converte os parâmetros da rota em DatasetFilters

        Raises:
            InvalidDatasetFiltersException: Parâmetro ausente, desconhecido ou métrica incompatível
            InvalidCoordinatesException: Latitude/longitude fora do range
            InvalidDateTimeException: Data em formato inválido

        Example:
            >>> DatasetFiltersParser.from_query_params(
            ...     "daily", "temperature_max", "55.75", "37.62", "2025-02-01", "2025-02-10"
            ... )
        """
        parsed_aggregation = AggregationValidator.validate_aggregation(aggregation)
        parsed_metric = AggregationValidator.validate_metric(metric)

        location = GeoLocation(
            latitude=CoordinatesValidator.validate_latitude(latitude),
            longitude=CoordinatesValidator.validate_longitude(longitude)
        )
        timeframe = Timeframe.from_iso(start_date, end_date)

        return DatasetFilters(
            location=location,
            timeframe=timeframe,
            aggregation=parsed_aggregation,
            aggregation_metric=parsed_metric
        )
