"""
Validadores dos query params da rota de dataset
Erros sobem como exceções de domínio (convertidas em HTTP 400 pelo handler)
"""
from typing import Optional, Type

from domain.exceptions import (
    DomainException,
    InvalidCoordinatesException,
    InvalidDatasetFiltersException,
)
from domain.value_objects.aggregation import Aggregation, AggregationMetric


class GenericValidator:
    """Checagens reutilizáveis; a classe de exceção é escolhida por quem chama"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Raises:
            exception_class: Se value fora de [min_val, max_val]. Exceções de
                domínio recebem details com o valor e os limites.
        """
        if min_val <= value <= max_val:
            return value

        message = f"{param_name} must be between {min_val} and {max_val}"
        if issubclass(exception_class, DomainException):
            raise exception_class(
                message,
                details={param_name: value, "min": min_val, "max": max_val}
            )
        raise exception_class(message)

    @staticmethod
    def validate_not_empty(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """Retorna o valor sem espaços nas bordas; vazio ou None é erro"""
        if value is None or not value.strip():
            raise exception_class(f"{param_name} cannot be empty")
        return value.strip()

    @staticmethod
    def validate_float(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        number = GenericValidator.validate_not_empty(value, param_name, exception_class)
        try:
            return float(number)
        except ValueError:
            raise exception_class(f"Invalid {param_name} format: {value}")


class CoordinatesValidator:
    """Validate latitude/longitude query parameters"""

    @staticmethod
    def validate_latitude(value: Optional[str]) -> float:
        latitude = GenericValidator.validate_float(value, "latitude", InvalidDatasetFiltersException)
        return GenericValidator.validate_range(
            value=latitude,
            min_val=-90.0,
            max_val=90.0,
            param_name="latitude",
            exception_class=InvalidCoordinatesException
        )

    @staticmethod
    def validate_longitude(value: Optional[str]) -> float:
        longitude = GenericValidator.validate_float(value, "longitude", InvalidDatasetFiltersException)
        return GenericValidator.validate_range(
            value=longitude,
            min_val=-180.0,
            max_val=180.0,
            param_name="longitude",
            exception_class=InvalidCoordinatesException
        )


class AggregationValidator:
    """Validate aggregation and metric parameters"""

    @staticmethod
    def validate_aggregation(value: Optional[str]) -> Aggregation:
        """
        Raises:
            InvalidDatasetFiltersException: Se ausente ou desconhecida
        """
        trimmed = GenericValidator.validate_not_empty(value, "aggregation", InvalidDatasetFiltersException)
        try:
            return Aggregation(trimmed.lower())
        except ValueError:
            raise InvalidDatasetFiltersException(
                f"Invalid aggregation: {value}",
                details={"aggregation": value, "allowed": [a.value for a in Aggregation]}
            )

    @staticmethod
    def validate_metric(value: Optional[str]) -> AggregationMetric:
        """
        Raises:
            InvalidDatasetFiltersException: Se ausente ou desconhecida
        """
        trimmed = GenericValidator.validate_not_empty(value, "metric", InvalidDatasetFiltersException)
        try:
            return AggregationMetric(trimmed.lower())
        except ValueError:
            raise InvalidDatasetFiltersException(
                f"Invalid metric: {value}",
                details={"metric": value, "allowed": [m.value for m in AggregationMetric]}
            )
