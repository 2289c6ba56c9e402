"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidDatasetFiltersException(DomainException):
    """Raised when dataset filters are missing or inconsistent"""
    pass


class InvalidCoordinatesException(DomainException):
    """Raised when latitude/longitude are outside the valid range"""
    pass


class InvalidDateTimeException(DomainException):
    """Raised when date/time parameters are invalid"""
    pass
