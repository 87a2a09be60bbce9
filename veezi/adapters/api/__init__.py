"""
Client de l'API Veezi.

- VeeziClient: operations de lecture avec cache optionnel par type
- VeeziTransport: GET authentifies et decodage des reponses
- CacheConfig / EntityCacheSettings: reglages du cache (preset default())
- Erreurs: VeeziError et ses sous-classes
"""

from veezi.adapters.api.cache import CacheConfig, CacheStore, EntityCacheSettings
from veezi.adapters.api.errors import (
    RateLimitError,
    VeeziConfigError,
    VeeziDecodeError,
    VeeziError,
    VeeziStatusError,
    VeeziTransportError,
)
from veezi.adapters.api.transport import VeeziTransport
from veezi.adapters.api.veezi_client import VeeziClient

__all__ = [
    "CacheConfig",
    "CacheStore",
    "EntityCacheSettings",
    "RateLimitError",
    "VeeziConfigError",
    "VeeziDecodeError",
    "VeeziError",
    "VeeziStatusError",
    "VeeziTransportError",
    "VeeziTransport",
    "VeeziClient",
]
