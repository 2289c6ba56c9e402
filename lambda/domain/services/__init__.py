"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_dataset_mapper.py
"""

from domain.services.dataset_normalizer import DatasetNormalizer

__all__ = [
    'DatasetNormalizer'
]
