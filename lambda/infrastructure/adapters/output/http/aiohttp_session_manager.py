"""
Aiohttp Session Manager - Sessão HTTP compartilhada pelas chamadas Open-Meteo
Uma sessão por event loop; sobrevive entre invocações Lambda (warm starts)
"""
import asyncio
from dataclasses import dataclass
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass(frozen=True)
class HttpClientConfig:
    """Timeouts (segundos) e limites do pool de conexões"""
    total_timeout: float = API.HTTP_TIMEOUT_TOTAL
    connect_timeout: float = API.HTTP_TIMEOUT_CONNECT
    sock_read_timeout: float = API.HTTP_TIMEOUT_READ
    limit: int = API.HTTP_CONNECTION_LIMIT
    limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST
    ttl_dns_cache: int = API.DNS_CACHE_TTL

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )


class AiohttpSessionManager:
    """
    Dono da aiohttp.ClientSession usada pelo cliente Open-Meteo

    A sessão fica presa ao event loop em que foi criada. Se o loop mudar
    (ou a sessão for fechada por fora) uma nova sessão é aberta na próxima
    chamada de get_session().
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(self, config: Optional[HttpClientConfig] = None):
        self.config = config or HttpClientConfig()
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls, config: Optional[HttpClientConfig] = None) -> 'AiohttpSessionManager':
        """Singleton do processo; config só vale na primeira chamada"""
        if cls._instance is None:
            cls._instance = cls(config)
            logger.info("AiohttpSessionManager singleton created", config=str(cls._instance.config))
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _is_reusable(self, loop_id: int) -> bool:
        return (
            self._session is not None
            and not self._session.closed
            and self._session_loop_id == loop_id
        )

    def _build_session(self) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(
            limit=self.config.limit,
            limit_per_host=self.config.limit_per_host,
            ttl_dns_cache=self.config.ttl_dns_cache
        )
        return aiohttp.ClientSession(timeout=self.config.client_timeout(), connector=connector)

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Raises:
            RuntimeError: Chamado fora de um event loop em execução
        """
        loop_id = id(asyncio.get_running_loop())

        if self._is_reusable(loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed, replacing aiohttp session",
                old_loop_id=self._session_loop_id,
                new_loop_id=loop_id
            )
            await self.cleanup()

        self._session = self._build_session()
        self._session_loop_id = loop_id
        logger.debug("Aiohttp session opened", loop_id=loop_id)

        return self._session

    async def cleanup(self) -> None:
        """Fecha a sessão atual (se houver)"""
        session, self._session, self._session_loop_id = self._session, None, None
        if session is None or session.closed:
            return

        try:
            await session.close()
        except Exception as e:
            logger.warning("Error closing aiohttp session", error=str(e))


def get_aiohttp_session_manager(config: Optional[HttpClientConfig] = None) -> AiohttpSessionManager:
    """Factory function para obter instância singleton do gerenciador"""
    return AiohttpSessionManager.get_instance(config)
