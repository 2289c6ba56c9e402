"""
DateTime Parser Utility
Shared utility for parsing and formatting dataset dates
"""
from datetime import datetime, timezone
from typing import Optional

from domain.exceptions import InvalidDateTimeException


class DateTimeParser:
    """Parse/format ISO-8601 dates used by query params and upstream calls"""

    @staticmethod
    def ensure_utc(value: datetime) -> datetime:
        """
        Garante datetime com timezone

        Datetimes naive são interpretados como UTC; datetimes com offset
        são convertidos para UTC.
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def parse_iso(value: Optional[str], param_name: str = "date") -> datetime:
        """
        Parse de data ISO-8601 (YYYY-MM-DD ou instante completo) para datetime UTC

        Args:
            value: String ISO (ex: 2025-02-01, 2025-02-01T12:00:00.000Z)
            param_name: Nome do parâmetro (para mensagem de erro)

        Returns:
            Datetime com timezone UTC

        Raises:
            InvalidDateTimeException: Se formato inválido

        Examples:
            >>> DateTimeParser.parse_iso("2025-02-01")
            datetime(2025, 2, 1, 0, 0, tzinfo=timezone.utc)

            >>> DateTimeParser.parse_iso("2025-02-05T12:00:00.000Z")
            datetime(2025, 2, 5, 12, 0, tzinfo=timezone.utc)
        """
        if not value or not value.strip():
            raise InvalidDateTimeException(
                f"{param_name} cannot be empty",
                details={param_name: value}
            )

        normalized = value.strip()
        if normalized.endswith(('Z', 'z')):
            normalized = normalized[:-1] + '+00:00'

        try:
            parsed = datetime.fromisoformat(normalized)
        except ValueError as e:
            raise InvalidDateTimeException(
                f"Invalid {param_name} format. Use YYYY-MM-DD or an ISO-8601 instant. Error: {str(e)}",
                details={param_name: value}
            )

        return DateTimeParser.ensure_utc(parsed)

    @staticmethod
    def to_query_date(value: datetime) -> str:
        """Formata como data sem horário (YYYY-MM-DD, UTC) para query params"""
        return DateTimeParser.ensure_utc(value).strftime('%Y-%m-%d')

    @staticmethod
    def to_iso_instant(value: datetime) -> str:
        """Formata como instante ISO-8601 UTC com milissegundos (ex: 2025-02-01T00:00:00.000Z)"""
        utc_value = DateTimeParser.ensure_utc(value)
        return utc_value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

    @staticmethod
    def from_unix(seconds: int) -> datetime:
        """Converte unix time (segundos) em datetime UTC"""
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
