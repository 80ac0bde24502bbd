"""
Content providers for Mushaf library.

Provides the abstract provider interface and the alquran.cloud implementation.
"""

from mushaf.providers.base import BaseProvider
from mushaf.providers.alquran_cloud import AlQuranCloudProvider

__all__ = [
    "BaseProvider",
    "AlQuranCloudProvider",
]
