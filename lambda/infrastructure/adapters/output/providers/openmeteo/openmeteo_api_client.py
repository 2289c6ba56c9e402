"""
Open-Meteo API Client - Transporte HTTP assíncrono (aiohttp) + decodificação FlatBuffers
"""
from typing import Any, Dict, List, Optional

from ddtrace import tracer
from openmeteo_sdk.WeatherApiResponse import WeatherApiResponse

from domain.constants import API
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoApiError(Exception):
    """Resposta de erro da API Open-Meteo ({"error": true, "reason": "..."})"""
    pass


class OpenMeteoApiClient:
    """
    Cliente de transporte para as APIs Open-Meteo (forecast e historical)

    - GET com format=flatbuffers
    - Corpo = sequência de mensagens WeatherApiResponse, cada uma
      prefixada por 4 bytes (little-endian) com o tamanho
    - HTTP 400/429 trazem JSON com "reason" -> OpenMeteoApiError
    """

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None):
        self.session_manager = session_manager or get_aiohttp_session_manager()

    @staticmethod
    def build_query_params(params: Dict[str, Any]) -> Dict[str, Any]:
        """Listas viram strings separadas por vírgula; format fixo em flatbuffers"""
        query = {
            key: ','.join(str(v) for v in value) if isinstance(value, (list, tuple)) else value
            for key, value in params.items()
            if value is not None
        }
        query['format'] = API.OPENMETEO_FORMAT
        return query

    @staticmethod
    def decode_responses(data: bytes) -> List[WeatherApiResponse]:
        """
        Decodifica o corpo binário em mensagens WeatherApiResponse

        Args:
            data: Corpo da resposta HTTP

        Returns:
            Lista de respostas (uma por localização)
        """
        messages = []
        total = len(data)
        pos = 0
        while pos < total:
            length = int.from_bytes(data[pos:pos + 4], byteorder='little')
            messages.append(WeatherApiResponse.GetRootAs(data, pos + 4))
            pos += length + 4
        return messages

    @tracer.wrap(resource="openmeteo.fetch")
    async def fetch(self, url: str, params: Dict[str, Any]) -> List[WeatherApiResponse]:
        """
        Executa GET no endpoint Open-Meteo

        Raises:
            OpenMeteoApiError: Erro reportado pela API (parâmetros inválidos, rate limit)
            aiohttp.ClientError: Falha de rede ou status HTTP inesperado
        """
        query = self.build_query_params(params)
        session = await self.session_manager.get_session()

        async with session.get(url, params=query) as response:
            if response.status in (400, 429):
                body = await response.json(content_type=None)
                reason = body.get('reason', 'Unknown error') if isinstance(body, dict) else str(body)
                logger.warning(
                    "Open-Meteo API error",
                    url=url,
                    status=response.status,
                    reason=reason
                )
                raise OpenMeteoApiError(reason)

            response.raise_for_status()
            data = await response.read()

        return self.decode_responses(data)
