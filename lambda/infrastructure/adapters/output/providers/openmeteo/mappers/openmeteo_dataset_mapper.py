"""
OpenMeteo Dataset Mapper - Traduz filtros em query params e respostas em WeatherPoint
LOCALIZAÇÃO: infrastructure (conhece detalhes da API externa)
"""
import math
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from openmeteo_sdk.Unit import Unit
from openmeteo_sdk.WeatherApiResponse import WeatherApiResponse

from domain.entities.weather_dataset import WeatherPoint
from domain.value_objects.aggregation import Aggregation, AggregationMetric
from shared.utils.datetime_parser import DateTimeParser

# Campo Open-Meteo para cada par (agregação, métrica)
METRIC_FIELDS: Mapping[Aggregation, Mapping[AggregationMetric, str]] = MappingProxyType({
    Aggregation.HOURLY: MappingProxyType({
        AggregationMetric.TEMPERATURE: 'temperature_2m',
        AggregationMetric.HUMIDITY: 'relative_humidity_2m',
        AggregationMetric.RAIN: 'rain',
        AggregationMetric.WIND_SPEED: 'wind_speed_10m',
    }),
    Aggregation.DAILY: MappingProxyType({
        AggregationMetric.TEMPERATURE_MAX: 'temperature_2m_max',
        AggregationMetric.TEMPERATURE_MIN: 'temperature_2m_min',
        AggregationMetric.RAIN: 'rain_sum',
    }),
})

# Código de unidade do SDK -> string de exibição
UNIT_DISPLAY: Mapping[int, str] = MappingProxyType({
    Unit.celsius: '°C',
    Unit.kilometres_per_hour: 'km/h',
    Unit.percentage: '%',
    Unit.millimetre: 'mm',
})


class OpenMeteoDatasetMapper:
    """
    Mapper entre o domínio de datasets e a API Open-Meteo

    Responsabilidade: Traduzir (agregação, métrica) -> query params e
    WeatherApiResponse -> List[WeatherPoint]
    """

    @staticmethod
    def map_aggregation_to_query_params(
        aggregation: Aggregation,
        metric: AggregationMetric
    ) -> Dict[str, List[str]]:
        """
        Ex: (daily, temperature_max) -> {'daily': ['temperature_2m_max']}

        Par desconhecido não gera parâmetro (retorna dict vazio).
        """
        field = METRIC_FIELDS.get(aggregation, {}).get(metric)
        if field is None:
            return {}
        return {aggregation.value: [field]}

    @staticmethod
    def map_unit(unit_code: Optional[int]) -> str:
        """Código desconhecido (ou ausente) vira string vazia"""
        if unit_code is None:
            return ''
        return UNIT_DISPLAY.get(unit_code, '')

    @staticmethod
    def _select_block(response: WeatherApiResponse, aggregation: Aggregation) -> Any:
        if aggregation == Aggregation.DAILY:
            return response.Daily()
        if aggregation == Aggregation.HOURLY:
            return response.Hourly()
        return None

    @staticmethod
    def map_response_to_points(
        response: WeatherApiResponse,
        aggregation: Aggregation
    ) -> List[WeatherPoint]:
        """
        Reconstrói um WeatherPoint por índice: date = início + índice * intervalo

        Sem bloco para a agregação, ou sem variável 0: lista vazia.
        Quantidade de pontos = (fim - início) // intervalo (intervalo parcial descartado).
        Índice sem valor numérico (além do array, ou NaN): valor 0.
        """
        block = OpenMeteoDatasetMapper._select_block(response, aggregation)
        if block is None:
            return []

        # Variables(i) não checa limites no SDK
        if block.VariablesLength() < 1:
            return []

        variable = block.Variables(0)
        if variable is None:
            return []

        start = int(block.Time())
        end = int(block.TimeEnd())
        interval = int(block.Interval())
        if interval <= 0:
            return []

        unit = OpenMeteoDatasetMapper.map_unit(variable.Unit())
        values_length = variable.ValuesLength()
        count = max((end - start) // interval, 0)

        points = []
        for index in range(count):
            value = float(variable.Values(index)) if index < values_length else 0.0
            if math.isnan(value):
                value = 0.0

            points.append(WeatherPoint(
                date=DateTimeParser.to_iso_instant(DateTimeParser.from_unix(start + index * interval)),
                value=value,
                unit=unit
            ))

        return points
