"""
Domain Constants - Todas as constantes da aplicação centralizadas
"""
from datetime import timedelta


class API:
    """Constantes de APIs externas"""

    # Open-Meteo (respostas binárias FlatBuffers)
    OPENMETEO_FORMAT = "flatbuffers"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 15  # segundos
    HTTP_TIMEOUT_CONNECT = 5  # segundos
    HTTP_TIMEOUT_READ = 10  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Dataset:
    """Constantes da montagem de datasets histórico + previsão"""

    # Janela que cruza o presente: histórico vai até (agora - 1 dia)
    HISTORICAL_END_OFFSET = timedelta(days=1)
