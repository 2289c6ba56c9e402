"""
Value Object para o ponto geográfico consultado
"""
from dataclasses import dataclass

from domain.exceptions import InvalidCoordinatesException

LATITUDE_RANGE = (-90, 90)
LONGITUDE_RANGE = (-180, 180)


@dataclass(frozen=True)
class GeoLocation:
    """Latitude/longitude em graus decimais, validadas na criação"""
    latitude: float
    longitude: float

    def __post_init__(self):
        for name, value, (low, high) in (
            ("latitude", self.latitude, LATITUDE_RANGE),
            ("longitude", self.longitude, LONGITUDE_RANGE),
        ):
            if not low <= value <= high:
                raise InvalidCoordinatesException(
                    f"Invalid {name} {value}: must be between {low} and {high}",
                    details={name: value, "min": low, "max": high}
                )

    def to_api_response(self) -> dict:
        return {'latitude': self.latitude, 'longitude': self.longitude}

    def __str__(self) -> str:
        ns = "N" if self.latitude >= 0 else "S"
        ew = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{ns}, {abs(self.longitude):.4f}°{ew}"
