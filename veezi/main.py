"""
Point d'entree CLI du client Veezi.

Configure le logging et fournit les commandes de consultation.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import (
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
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="veezi",
    help="Consultation de l'API de billetterie Veezi",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs DEBUG (requetes, cache)"),
    ] = False,
) -> None:
    """Veezi - seances, films et ecrans d'un site Veezi."""
    if verbose:
        settings = get_config()
        configure_logging(
            log_level="DEBUG",
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
            show_http=True,
        )


app.command()(sessions)
app.command()(films)
app.command()(film)
app.command()(packages)
app.command()(screens)
app.command()(screen)
app.command()(site)
app.command()(attributes)
app.command()(schedule)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Veezi")
    typer.echo(f"URL de l'API : {config.base_url}")
    typer.echo(f"Jeton d'acces : {'configure' if config.api_enabled else 'absent'}")
    typer.echo(f"Timeout : {config.timeout:g} s")
    typer.echo(f"Tentatives sur 429 : {config.max_attempts}")
    cache_config = config.cache_config()
    typer.echo(f"Cache : {'actif' if cache_config.is_enabled else 'desactive'}")
    for name in ("sessions", "films", "film_packages", "screens", "attributes", "site"):
        entity_settings = getattr(cache_config, name)
        if entity_settings is not None:
            typer.echo(
                f"  {name} : {entity_settings.ttl.total_seconds():g} s, "
                f"{entity_settings.max_capacity} element(s)"
            )
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Trafic HTTP sur la console : {'oui' if config.log_http else 'non'}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"veezi v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        show_http=settings.log_http,
    )

    logger.debug("Demarrage du client Veezi", version=__version__)

    app()


if __name__ == "__main__":
    main()
