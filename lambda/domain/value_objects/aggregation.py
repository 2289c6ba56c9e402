"""
Value Objects de agregação - granularidade da série e métricas válidas por granularidade
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, FrozenSet


class Aggregation(str, Enum):
    """Granularidade da série temporal"""
    DAILY = "daily"
    HOURLY = "hourly"


class AggregationMetric(str, Enum):
    """Grandeza física solicitada"""
    TEMPERATURE = "temperature"
    TEMPERATURE_MAX = "temperature_max"
    TEMPERATURE_MIN = "temperature_min"
    HUMIDITY = "humidity"
    RAIN = "rain"
    WIND_SPEED = "wind_speed"


# Métricas permitidas para cada agregação
AGGREGATION_METRICS: Mapping[Aggregation, FrozenSet[AggregationMetric]] = MappingProxyType({
    Aggregation.DAILY: frozenset({
        AggregationMetric.TEMPERATURE_MAX,
        AggregationMetric.TEMPERATURE_MIN,
        AggregationMetric.RAIN,
    }),
    Aggregation.HOURLY: frozenset({
        AggregationMetric.TEMPERATURE,
        AggregationMetric.HUMIDITY,
        AggregationMetric.RAIN,
        AggregationMetric.WIND_SPEED,
    }),
})


def is_metric_allowed(aggregation: Aggregation, metric: AggregationMetric) -> bool:
    """Verifica se a métrica pertence ao conjunto da agregação"""
    return metric in AGGREGATION_METRICS.get(aggregation, frozenset())
