"""
Client type pour l'API de billetterie Veezi.

Usage:
    async with VeeziClient(base_url, token, cache_config=CacheConfig.default()) as client:
        sessions = await client.list_sessions()
"""

from veezi.adapters.api.cache import CacheConfig, EntityCacheSettings
from veezi.adapters.api.errors import (
    RateLimitError,
    VeeziConfigError,
    VeeziDecodeError,
    VeeziError,
    VeeziStatusError,
    VeeziTransportError,
)
from veezi.adapters.api.veezi_client import VeeziClient

__version__ = "0.4.0"

__all__ = [
    "CacheConfig",
    "EntityCacheSettings",
    "RateLimitError",
    "VeeziClient",
    "VeeziConfigError",
    "VeeziDecodeError",
    "VeeziError",
    "VeeziStatusError",
    "VeeziTransportError",
    "__version__",
]
