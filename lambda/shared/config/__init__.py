"""Shared configuration"""
from .settings import OPENMETEO_FORECAST_URL, OPENMETEO_HISTORICAL_URL, CORS_ORIGIN
from .logger_config import get_logger, logger

__all__ = ['OPENMETEO_FORECAST_URL', 'OPENMETEO_HISTORICAL_URL', 'CORS_ORIGIN', 'get_logger', 'logger']
