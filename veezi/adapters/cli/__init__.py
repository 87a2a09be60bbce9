"""Interface en ligne de commande (typer + rich)."""

from veezi.adapters.cli.commands import (
    attributes,
    film,
    films,
    packages,
    schedule,
    screen,
    screens,
    sessions,
    site,
)

__all__ = [
    "attributes",
    "film",
    "films",
    "packages",
    "schedule",
    "screen",
    "screens",
    "sessions",
    "site",
]
