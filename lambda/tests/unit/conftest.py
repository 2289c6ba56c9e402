"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timezone

import pytest
from openmeteo_sdk.Unit import Unit

from domain.entities.dataset_filters import DatasetFilters
from domain.entities.weather_dataset import WeatherDataset, WeatherPoint
from domain.value_objects.aggregation import Aggregation, AggregationMetric
from domain.value_objects.geo_location import GeoLocation
from domain.value_objects.timeframe import Timeframe

FIXED_NOW = datetime(2025, 2, 5, 12, 0, tzinfo=timezone.utc)


class FakeVariable:
    """Imita openmeteo_sdk VariableWithValues"""

    def __init__(self, values, unit):
        self._values = list(values)
        self._unit = unit

    def Values(self, index):
        return self._values[index]

    def ValuesLength(self):
        return len(self._values)

    def Unit(self):
        return self._unit


class FakeVariablesWithTime:
    """Imita openmeteo_sdk VariablesWithTime"""

    def __init__(self, start, interval, count, variables, time_end=None):
        self._start = start
        self._interval = interval
        self._time_end = start + count * interval if time_end is None else time_end
        self._variables = list(variables)

    def Time(self):
        return self._start

    def TimeEnd(self):
        return self._time_end

    def Interval(self):
        return self._interval

    def VariablesLength(self):
        return len(self._variables)

    def Variables(self, index):
        # Como no SDK: sem checagem de limites
        return self._variables[index]


class FakeWeatherApiResponse:
    """Imita openmeteo_sdk WeatherApiResponse"""

    def __init__(self, daily=None, hourly=None):
        self._daily = daily
        self._hourly = hourly

    def Daily(self):
        return self._daily

    def Hourly(self):
        return self._hourly


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def make_api_response():
    """
    Factory fixture para criar respostas Open-Meteo decodificadas

    Usage:
        def test_something(make_api_response):
            response = make_api_response(start=1738368000, values=[5.0])
    """
    def _make(
        aggregation: str = 'daily',
        start: int = 1738368000,  # 2025-02-01T00:00:00Z
        interval: int = 86400,
        count: int = None,
        values=(5.0,),
        unit: int = Unit.celsius,
        with_variable: bool = True,
        time_end: int = None
    ) -> FakeWeatherApiResponse:
        count = len(values) if count is None else count
        variables = [FakeVariable(values, unit)] if with_variable else []
        block = FakeVariablesWithTime(start, interval, count, variables, time_end=time_end)

        if aggregation == 'daily':
            return FakeWeatherApiResponse(daily=block)
        return FakeWeatherApiResponse(hourly=block)

    return _make


@pytest.fixture
def daily_filters():
    return DatasetFilters(
        location=GeoLocation(latitude=55.75, longitude=37.62),
        timeframe=Timeframe.from_iso('2025-02-01', '2025-02-10'),
        aggregation=Aggregation.DAILY,
        aggregation_metric=AggregationMetric.TEMPERATURE_MAX
    )


@pytest.fixture
def make_filters():
    """Factory fixture para DatasetFilters com valores padrão"""
    def _make(
        start_date: str = '2025-02-01',
        end_date: str = '2025-02-10',
        aggregation: Aggregation = Aggregation.DAILY,
        metric: AggregationMetric = AggregationMetric.TEMPERATURE_MAX,
        latitude: float = 55.75,
        longitude: float = 37.62
    ) -> DatasetFilters:
        return DatasetFilters(
            location=GeoLocation(latitude=latitude, longitude=longitude),
            timeframe=Timeframe.from_iso(start_date, end_date),
            aggregation=aggregation,
            aggregation_metric=metric
        )

    return _make


@pytest.fixture
def make_dataset(daily_filters):
    """Factory fixture para WeatherDataset a partir de listas de datas"""
    def _make(historical_dates=(), forecast_dates=(), unit: str = '°C') -> WeatherDataset:
        return WeatherDataset(
            aggregation=daily_filters.aggregation,
            aggregation_metric=daily_filters.aggregation_metric,
            location=daily_filters.location,
            timeframe=daily_filters.timeframe,
            historical_data=[WeatherPoint(date=d, value=float(i), unit=unit) for i, d in enumerate(historical_dates)],
            forecast_data=[WeatherPoint(date=d, value=float(i), unit=unit) for i, d in enumerate(forecast_dates)]
        )

    return _make


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-dataset-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weather-dataset-api'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-dataset-api'
        self.log_stream_name = '2025/02/05/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def mock_context():
    return MockContext()
