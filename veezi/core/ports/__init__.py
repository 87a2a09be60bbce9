"""
Ports (interfaces abstraites) du domaine.

- IVeeziAPIClient : operations de lecture de l'API Veezi
"""

from veezi.core.ports.api_client import IVeeziAPIClient

__all__ = ["IVeeziAPIClient"]
