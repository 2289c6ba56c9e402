"""
Logging estruturado (AWS Lambda Powertools)
O service name segue DD_SERVICE para correlacionar logs e traces no Datadog
"""
from typing import Optional

from aws_lambda_powertools import Logger

from shared.config.settings import SERVICE_NAME


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Logger do serviço

    Módulos internos usam child=True para herdar o contexto Lambda
    (request id, cold start) injetado no logger raiz pelo handler.
    """
    return Logger(service=service_name or SERVICE_NAME, child=child)


logger = get_logger()
