"""
Output Port: Cliente de transporte da API de clima
Faz a chamada HTTP e decodifica o formato binário do provedor
"""
from typing import Any, Dict, List, Protocol


class IWeatherApiClient(Protocol):
    """Interface assíncrona para o cliente HTTP do provedor"""

    async def fetch(self, url: str, params: Dict[str, Any]) -> List[Any]:
        """
        Executa GET no endpoint e retorna as respostas decodificadas
        (uma por localização consultada)

        Raises:
            Exception: Qualquer falha de rede ou resposta de erro do provedor
        """
        ...
