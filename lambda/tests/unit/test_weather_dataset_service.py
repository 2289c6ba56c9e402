"""
Testes Unitários - WeatherDatasetService
Ordenação e remoção de sobreposição entre histórico e previsão
"""
from unittest.mock import AsyncMock, Mock

import pytest

from application.services.weather_dataset_service import WeatherDatasetService
from domain.result import Result


@pytest.fixture
def repository():
    repo = Mock()
    repo.get_dataset = AsyncMock()
    return repo


@pytest.fixture
def service(repository):
    return WeatherDatasetService(repository)


def _dates(points):
    return [p.date for p in points]


class TestWeatherDatasetService:

    @pytest.mark.asyncio
    async def test_sorts_both_series(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-03T00:00:00.000Z', '2025-02-01T00:00:00.000Z'],
            forecast_dates=['2025-02-10T00:00:00.000Z', '2025-02-05T00:00:00.000Z']
        ))

        result = await service.get_dataset(daily_filters)

        assert result.success is True
        assert _dates(result.payload.historical_data) == [
            '2025-02-01T00:00:00.000Z', '2025-02-03T00:00:00.000Z'
        ]
        assert _dates(result.payload.forecast_data) == [
            '2025-02-05T00:00:00.000Z', '2025-02-10T00:00:00.000Z'
        ]

    @pytest.mark.asyncio
    async def test_trims_historical_at_first_forecast(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=[
                '2025-02-01T00:00:00.000Z',
                '2025-02-02T00:00:00.000Z',
                '2025-02-03T00:00:00.000Z',
            ],
            forecast_dates=['2025-02-02T00:00:00.000Z', '2025-02-04T00:00:00.000Z']
        ))

        result = await service.get_dataset(daily_filters)

        assert _dates(result.payload.historical_data) == ['2025-02-01T00:00:00.000Z']
        assert len(result.payload.forecast_data) == 2

    @pytest.mark.asyncio
    async def test_equal_instant_is_dropped_from_historical(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-01T12:00:00.000Z', '2025-02-02T12:00:00.000Z'],
            forecast_dates=['2025-02-02T12:00:00.000Z']
        ))

        result = await service.get_dataset(daily_filters)

        assert _dates(result.payload.historical_data) == ['2025-02-01T12:00:00.000Z']
        assert _dates(result.payload.forecast_data) == ['2025-02-02T12:00:00.000Z']

    @pytest.mark.asyncio
    async def test_sorts_by_instant_across_representations(self, service, repository, daily_filters, make_dataset):
        """REGRA: ordem cronológica, não lexical (offset, Z e fração de segundo misturados)"""
        repository.get_dataset.return_value = Result.ok(make_dataset(
            forecast_dates=[
                '2025-02-01T10:00:00+03:00',
                '2025-02-01T08:00:00.000Z',
                '2025-02-01T06:00:00.5Z',
            ]
        ))

        result = await service.get_dataset(daily_filters)

        assert _dates(result.payload.forecast_data) == [
            '2025-02-01T06:00:00.5Z',
            '2025-02-01T10:00:00+03:00',
            '2025-02-01T08:00:00.000Z',
        ]

    @pytest.mark.asyncio
    async def test_trim_cutoff_compares_instants_not_strings(self, service, repository, daily_filters, make_dataset):
        """REGRA: 2025-02-02T03:00:00+03:00 == 2025-02-02T00:00Z; mesmo instante sai do histórico"""
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=[
                '2025-02-02',
                '2025-02-01T23:00:00.000Z',
                '2025-02-02T00:00:00Z',
            ],
            forecast_dates=['2025-02-02T03:00:00+03:00']
        ))

        result = await service.get_dataset(daily_filters)

        assert _dates(result.payload.historical_data) == ['2025-02-01T23:00:00.000Z']

    @pytest.mark.asyncio
    async def test_unparsable_date_becomes_failure(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-01T00:00:00.000Z', 'not-a-date']
        ))

        result = await service.get_dataset(daily_filters)

        assert result.success is False
        assert result.payload is None
        assert "Invalid date format" in result.error

    @pytest.mark.asyncio
    async def test_empty_forecast_keeps_historical(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-02T00:00:00.000Z', '2025-02-01T00:00:00.000Z']
        ))

        result = await service.get_dataset(daily_filters)

        assert _dates(result.payload.historical_data) == [
            '2025-02-01T00:00:00.000Z', '2025-02-02T00:00:00.000Z'
        ]
        assert result.payload.forecast_data == []

    @pytest.mark.asyncio
    async def test_historical_after_forecast_is_emptied(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-06T00:00:00.000Z', '2025-02-07T00:00:00.000Z'],
            forecast_dates=['2025-02-05T00:00:00.000Z']
        ))

        result = await service.get_dataset(daily_filters)

        assert result.payload.historical_data == []

    @pytest.mark.asyncio
    async def test_keeps_filters_echo(self, service, repository, daily_filters, make_dataset):
        dataset = make_dataset(forecast_dates=['2025-02-05T00:00:00.000Z'])
        repository.get_dataset.return_value = Result.ok(dataset)

        result = await service.get_dataset(daily_filters)

        assert result.payload.aggregation == dataset.aggregation
        assert result.payload.aggregation_metric == dataset.aggregation_metric
        assert result.payload.location == dataset.location
        assert result.payload.timeframe == dataset.timeframe

    @pytest.mark.asyncio
    async def test_normalization_is_idempotent(self, service, repository, daily_filters, make_dataset):
        repository.get_dataset.return_value = Result.ok(make_dataset(
            historical_dates=['2025-02-03T00:00:00.000Z', '2025-02-01T00:00:00.000Z'],
            forecast_dates=['2025-02-02T00:00:00.000Z']
        ))
        first = await service.get_dataset(daily_filters)

        repository.get_dataset.return_value = first
        second = await service.get_dataset(daily_filters)

        assert second.payload == first.payload

    @pytest.mark.asyncio
    async def test_failure_is_returned_unchanged(self, service, repository, daily_filters):
        failure = Result.fail("Network error")
        repository.get_dataset.return_value = failure

        result = await service.get_dataset(daily_filters)

        assert result is failure
        repository.get_dataset.assert_awaited_once_with(daily_filters)
