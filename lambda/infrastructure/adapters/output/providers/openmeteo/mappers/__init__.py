"""Open-Meteo Mappers"""

from infrastructure.adapters.output.providers.openmeteo.mappers.openmeteo_dataset_mapper import (
    OpenMeteoDatasetMapper,
    METRIC_FIELDS,
    UNIT_DISPLAY
)

__all__ = ['OpenMeteoDatasetMapper', 'METRIC_FIELDS', 'UNIT_DISPLAY']
