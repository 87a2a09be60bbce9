"""Services applicatifs construits sur le client Veezi."""

from veezi.services.catalog import CatalogService

__all__ = ["CatalogService"]
