"""
FAM client: models of remote resources, synced through a Reliable Data
Transport (RDT)

Model
Collection
RDTClient
"""

from .api.client import RDTClient
from .models.base import Model
from .models.collection import Collection, Syncable
from .exceptions import (
    CollectionError,
    ConfigurationError,
    FamException,
    TransportError,
)

__version__ = "0.1.0"
