"""
Value Object para intervalo de datas solicitado
"""
from dataclasses import dataclass
from datetime import datetime

from shared.utils.datetime_parser import DateTimeParser


@dataclass(frozen=True)
class Timeframe:
    """
    Intervalo [start_date, end_date] de uma consulta de dataset

    Datas sem fuso horário são interpretadas como UTC. A ordem
    start_date <= end_date é responsabilidade de quem constrói o filtro.
    """
    start_date: datetime
    end_date: datetime

    def __post_init__(self):
        object.__setattr__(self, 'start_date', DateTimeParser.ensure_utc(self.start_date))
        object.__setattr__(self, 'end_date', DateTimeParser.ensure_utc(self.end_date))

    @classmethod
    def from_iso(cls, start_date: str, end_date: str) -> 'Timeframe':
        """
        Factory a partir de strings ISO-8601 (YYYY-MM-DD ou instantes completos)

        Raises:
            InvalidDateTimeException: Se alguma data for inválida
        """
        return cls(
            start_date=DateTimeParser.parse_iso(start_date, param_name="startDate"),
            end_date=DateTimeParser.parse_iso(end_date, param_name="endDate")
        )

    def to_api_response(self) -> dict:
        return {
            'startDate': DateTimeParser.to_iso_instant(self.start_date),
            'endDate': DateTimeParser.to_iso_instant(self.end_date)
        }
