"""
Dataset Filters Entity - Entrada completa de uma consulta de dataset
"""
from dataclasses import dataclass

from domain.exceptions import InvalidDatasetFiltersException
from domain.value_objects.aggregation import (
    AGGREGATION_METRICS,
    Aggregation,
    AggregationMetric,
    is_metric_allowed,
)
from domain.value_objects.geo_location import GeoLocation
from domain.value_objects.timeframe import Timeframe


@dataclass(frozen=True)
class DatasetFilters:
    """
    Filtros de uma consulta de dataset meteorológico

    Todos os campos são obrigatórios. A métrica precisa pertencer ao
    conjunto de métricas da agregação escolhida.
    """
    location: GeoLocation
    timeframe: Timeframe
    aggregation: Aggregation
    aggregation_metric: AggregationMetric

    def __post_init__(self):
        if not is_metric_allowed(self.aggregation, self.aggregation_metric):
            allowed = sorted(m.value for m in AGGREGATION_METRICS.get(self.aggregation, ()))
            raise InvalidDatasetFiltersException(
                f"Metric '{self.aggregation_metric.value}' is not available for "
                f"'{self.aggregation.value}' aggregation",
                details={
                    "aggregation": self.aggregation.value,
                    "metric": self.aggregation_metric.value,
                    "allowed": allowed
                }
            )
