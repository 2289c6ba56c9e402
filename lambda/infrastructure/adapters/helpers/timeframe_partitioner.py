"""
Timeframe Partitioner - Divide o intervalo solicitado entre endpoint histórico e de previsão
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.constants import Dataset
from domain.value_objects.timeframe import Timeframe
from shared.utils.datetime_parser import DateTimeParser


@dataclass(frozen=True)
class TimeframePartition:
    """Sub-intervalos a buscar; None = endpoint não é chamado"""
    forecast: Optional[Timeframe] = None
    historical: Optional[Timeframe] = None


class TimeframePartitioner:
    """
    Decide quais endpoints chamar em relação a "agora"

    - Janela toda no passado (end < now): só histórico [start, end]
    - Janela toda no futuro (start > now): só previsão [start, end]
    - Janela cruza o presente: previsão [now, end] + histórico [start, now - 1 dia]
    """

    @staticmethod
    def partition(timeframe: Timeframe, now: datetime) -> TimeframePartition:
        now = DateTimeParser.ensure_utc(now)

        if timeframe.end_date < now:
            return TimeframePartition(historical=timeframe)

        if timeframe.start_date > now:
            return TimeframePartition(forecast=timeframe)

        return TimeframePartition(
            forecast=Timeframe(start_date=now, end_date=timeframe.end_date),
            historical=Timeframe(
                start_date=timeframe.start_date,
                end_date=now - Dataset.HISTORICAL_END_OFFSET
            )
        )
