"""
Dataset Normalizer - Ordena e remove sobreposição entre histórico e previsão
"""
from dataclasses import replace
from typing import List

from domain.entities.weather_dataset import WeatherDataset, WeatherPoint


class DatasetNormalizer:
    """
    Normalização independente de apresentação

    Regras:
    1. historical_data e forecast_data ordenados por instante (comparação de
       timestamps, não de strings)
    2. Sem previsão: histórico apenas ordenado
    3. Com previsão: histórico mantém só pontos estritamente anteriores ao
       primeiro ponto de previsão (instante compartilhado fica só na previsão)
    """

    @staticmethod
    def sort_points(points: List[WeatherPoint]) -> List[WeatherPoint]:
        return sorted(points, key=lambda point: point.timestamp)

    @staticmethod
    def trim_overlap(
        historical: List[WeatherPoint],
        forecast: List[WeatherPoint]
    ) -> List[WeatherPoint]:
        """
        Remove pontos históricos no instante ou após o primeiro ponto de previsão

        Args:
            historical: Histórico já ordenado
            forecast: Previsão já ordenada

        Returns:
            Histórico sem sobreposição
        """
        if not forecast:
            return historical

        cutoff = forecast[0].timestamp
        return [point for point in historical if point.timestamp < cutoff]

    @staticmethod
    def normalize(dataset: WeatherDataset) -> WeatherDataset:
        """
        Retorna novo dataset normalizado (não altera o original)
        """
        forecast = DatasetNormalizer.sort_points(dataset.forecast_data)
        historical = DatasetNormalizer.trim_overlap(
            DatasetNormalizer.sort_points(dataset.historical_data),
            forecast
        )

        return replace(
            dataset,
            historical_data=historical,
            forecast_data=forecast
        )
