"""
Testes Unitários - AiohttpSessionManager
"""
import pytest

from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    HttpClientConfig,
    get_aiohttp_session_manager,
)


@pytest.fixture(autouse=True)
def reset_singleton():
    AiohttpSessionManager.reset_instance()
    yield
    AiohttpSessionManager.reset_instance()


class TestAiohttpSessionManager:

    def test_factory_returns_singleton(self):
        first = get_aiohttp_session_manager(HttpClientConfig(total_timeout=3))
        second = get_aiohttp_session_manager(HttpClientConfig(total_timeout=99))

        assert first is second
        assert first.config.total_timeout == 3

    def test_default_config_uses_api_constants(self):
        timeout = HttpClientConfig().client_timeout()

        assert timeout.total == 15
        assert timeout.connect == 5
        assert timeout.sock_read == 10

    @pytest.mark.asyncio
    async def test_session_reused_within_same_loop(self):
        manager = AiohttpSessionManager(HttpClientConfig(total_timeout=7))

        session = await manager.get_session()
        again = await manager.get_session()

        assert session is again
        assert session.timeout.total == 7

        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_cleanup_closes_session(self):
        manager = AiohttpSessionManager()
        session = await manager.get_session()

        await manager.cleanup()

        assert session.closed
        assert manager._session is None

    @pytest.mark.asyncio
    async def test_closed_session_is_recreated(self):
        manager = AiohttpSessionManager()
        session = await manager.get_session()
        await session.close()

        fresh = await manager.get_session()

        assert fresh is not session
        await manager.cleanup()
