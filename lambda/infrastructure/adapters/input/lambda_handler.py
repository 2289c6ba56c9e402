"""
Input Adapter: Lambda Handler HTTP
Rota GET /api/weather/dataset sobre APIGatewayRestResolver; o núcleo é async
e roda num event loop persistente entre invocações
"""
import asyncio
from typing import Any, Awaitable, Dict, Optional, TypeVar

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

from application.services.weather_dataset_service import WeatherDatasetService
from domain.exceptions import (
    InvalidCoordinatesException,
    InvalidDatasetFiltersException,
    InvalidDateTimeException,
)
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.openmeteo_dataset_repository import get_openmeteo_dataset_repository
from shared.config.logger_config import get_logger
from shared.config.settings import CORS_ORIGIN
from shared.utils.dataset_filters_parser import DatasetFiltersParser

T = TypeVar('T')

logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))
exception_service = ExceptionHandlerService()

app.exception_handler(InvalidDatasetFiltersException)(exception_service.handle_invalid_filters)
app.exception_handler(InvalidCoordinatesException)(exception_service.handle_invalid_coordinates)
app.exception_handler(InvalidDateTimeException)(exception_service.handle_invalid_datetime)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)

CORS_HEADERS = {
    'Access-Control-Allow-Origin': CORS_ORIGIN,
    'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With',
    'Access-Control-Allow-Methods': 'GET,OPTIONS',
    'Access-Control-Max-Age': '86400',
}

# Loop reaproveitado em warm starts (a sessão aiohttp fica presa a ele)
_event_loop: Optional[asyncio.AbstractEventLoop] = None


def run_async(coro: Awaitable[T]) -> T:
    """Executa a coroutine no loop persistente, criando-o se necessário"""
    global _event_loop

    if _event_loop is None or _event_loop.is_closed():
        _event_loop = asyncio.new_event_loop()
        asyncio.set_event_loop(_event_loop)

    return _event_loop.run_until_complete(coro)


def _query(name: str) -> Optional[str]:
    return app.current_event.get_query_string_value(name=name, default_value=None)


@app.get("/api/weather/dataset")
def get_weather_dataset_route():
    """
    GET /api/weather/dataset?aggregation=daily&metric=temperature_max
        &latitude=55.75&longitude=37.62&startDate=2025-02-01&endDate=2025-02-10

    Query params (todos obrigatórios):
    - aggregation: daily | hourly
    - metric: daily -> temperature_max, temperature_min, rain
              hourly -> temperature, humidity, rain, wind_speed
    - latitude / longitude
    - startDate / endDate: YYYY-MM-DD ou instante ISO-8601

    200 com histórico + previsão ordenados e sem sobreposição;
    502 quando o provedor falha.
    """
    filters = DatasetFiltersParser.from_query_params(
        aggregation=_query("aggregation"),
        metric=_query("metric"),
        latitude=_query("latitude"),
        longitude=_query("longitude"),
        start_date=_query("startDate"),
        end_date=_query("endDate")
    )

    service = WeatherDatasetService(get_openmeteo_dataset_repository())
    result = run_async(service.get_dataset(filters))

    if not result.success:
        return exception_service.handle_dataset_unavailable(result.error)

    return result.payload.to_api_response()


@logger.inject_lambda_context()
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """AWS Lambda main function (handler: lambda_function.lambda_handler)"""
    identity = (event.get('requestContext') or {}).get('identity') or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        query=event.get('queryStringParameters'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A')
    )

    response = app.resolve(event, context)
    response['headers'] = {**(response.get('headers') or {}), **CORS_HEADERS}

    status_code = response.get('statusCode')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response
