"""Adaptateurs: client HTTP/cache de l'API Veezi et interface CLI."""
