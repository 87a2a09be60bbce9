"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI:
configuration, client Veezi (avec ses caches) et services.
"""

from dependency_injector import containers, providers

from .adapters.api.veezi_client import VeeziClient
from .config import Settings
from .services.catalog import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.veezi_client()
        catalog = container.catalog_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client API - Singleton: les caches vivent aussi longtemps que le client
    veezi_client = providers.Singleton(
        VeeziClient.from_settings,
        settings=config,
    )

    # Services
    catalog_service = providers.Factory(
        CatalogService,
        client=veezi_client,
    )
