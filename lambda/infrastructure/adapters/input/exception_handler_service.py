"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response

from domain.exceptions import (
    InvalidDatasetFiltersException,
    InvalidCoordinatesException,
    InvalidDateTimeException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções e resultados de falha em respostas HTTP
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _json_response(status_code: int, body: dict) -> Response:
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps(body)
        )

    @staticmethod
    def handle_invalid_filters(ex: InvalidDatasetFiltersException) -> Response:
        """Handle 400 - Missing or inconsistent dataset filters"""
        ExceptionHandlerService.logger.warning("Invalid dataset filters", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(400, {
            "type": "InvalidDatasetFiltersException",
            "error": "Invalid dataset filters",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_invalid_coordinates(ex: InvalidCoordinatesException) -> Response:
        """Handle 400 - Latitude/longitude out of range"""
        ExceptionHandlerService.logger.warning("Invalid coordinates", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(400, {
            "type": "InvalidCoordinatesException",
            "error": "Invalid coordinates",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_invalid_datetime(ex: InvalidDateTimeException) -> Response:
        """Handle 400 - Invalid datetime format"""
        ExceptionHandlerService.logger.warning("Invalid datetime", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(400, {
            "type": "InvalidDateTimeException",
            "error": "Invalid datetime",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_dataset_unavailable(error: str) -> Response:
        """Handle 502 - Upstream failure reported by the dataset service"""
        ExceptionHandlerService.logger.error("Weather dataset unavailable", error=error)
        return ExceptionHandlerService._json_response(502, {
            "type": "WeatherDatasetUnavailable",
            "error": "Weather dataset unavailable",
            "message": error
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService._json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
