"""
Weather Dataset Entities - Série temporal normalizada de histórico + previsão
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from domain.value_objects.aggregation import Aggregation, AggregationMetric
from domain.value_objects.geo_location import GeoLocation
from domain.value_objects.timeframe import Timeframe
from shared.utils.datetime_parser import DateTimeParser


@dataclass(frozen=True)
class WeatherPoint:
    """Uma amostra da série temporal"""
    date: str  # Instante ISO 8601
    value: float
    unit: str  # Unidade de exibição (°C, %, mm, km/h)

    @property
    def timestamp(self) -> datetime:
        """Instante da amostra como datetime UTC (usado para ordenação)"""
        return DateTimeParser.parse_iso(self.date, param_name="date")

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'value': self.value,
            'unit': self.unit
        }


@dataclass(frozen=True)
class WeatherDataset:
    """
    Resultado completo de uma consulta

    Ecoa os filtros da consulta e carrega os segmentos histórico e de previsão.
    Após a normalização os dois segmentos estão ordenados e nenhum ponto
    histórico ocorre no instante ou depois do primeiro ponto de previsão.
    """
    aggregation: Aggregation
    aggregation_metric: AggregationMetric
    location: GeoLocation
    timeframe: Timeframe
    historical_data: List[WeatherPoint] = field(default_factory=list)
    forecast_data: List[WeatherPoint] = field(default_factory=list)

    def to_api_response(self) -> Dict[str, Any]:
        """Converte para o formato JSON da API (camelCase)"""
        return {
            'aggregation': self.aggregation.value,
            'aggregationMetric': self.aggregation_metric.value,
            'location': self.location.to_api_response(),
            'timeframe': self.timeframe.to_api_response(),
            'historicalData': [p.to_api_response() for p in self.historical_data],
            'forecastData': [p.to_api_response() for p in self.forecast_data]
        }
