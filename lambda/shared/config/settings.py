"""
Configurações centralizadas da aplicação
"""
import os

# APIs Open-Meteo (não requerem chave)
OPENMETEO_FORECAST_URL = os.environ.get(
    'OPENMETEO_FORECAST_URL',
    'https://api.open-meteo.com/v1/forecast'
)
OPENMETEO_HISTORICAL_URL = os.environ.get(
    'OPENMETEO_HISTORICAL_URL',
    'https://historical-forecast-api.open-meteo.com/v1/forecast'
)

# Logging / APM
SERVICE_NAME = os.environ.get('DD_SERVICE', 'weather-dataset')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
