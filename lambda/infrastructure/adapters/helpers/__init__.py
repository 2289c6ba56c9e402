"""
Helper utilities for weather dataset assembly
"""

from infrastructure.adapters.helpers.timeframe_partitioner import TimeframePartitioner, TimeframePartition

__all__ = [
    'TimeframePartitioner',
    'TimeframePartition'
]
