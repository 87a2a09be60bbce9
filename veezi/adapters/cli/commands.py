"""
Commandes CLI de consultation du catalogue Veezi.

Chaque commande construit le client via le container, interroge l'API
(ou le cache) puis affiche le resultat sous forme de tableau Rich.
"""

from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.table import Table

from veezi.adapters.cli.helpers import async_command, console, suppress_loguru, with_container
from veezi.core.entities import (
    AttributeId,
    Film,
    FilmId,
    ScreenId,
    SessionList,
)


def _sessions_table(title: str, sessions: SessionList) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Film")
    table.add_column("Ecran", justify="right")
    table.add_column("Debut")
    table.add_column("Statut")
    table.add_column("Places", justify="right")

    for session in sessions:
        places = str(session.seats_available)
        if session.tickets_sold_out:
            places = "[red]complet[/red]"
        elif session.few_tickets_left:
            places = f"[yellow]{places}[/yellow]"
        table.add_row(
            str(session.id),
            session.title,
            str(session.screen_id),
            session.pre_show_start_time.strftime("%Y-%m-%d %H:%M"),
            session.status.value,
            places,
        )
    return table


def _films_table(title: str, films: list[Film]) -> Table:
    table = Table(title=title)
    table.add_column("ID")
    table.add_column("Titre")
    table.add_column("Genre")
    table.add_column("Duree", justify="right")
    table.add_column("Classif.")
    table.add_column("Format")

    for film in films:
        table.add_row(
            film.id,
            film.title,
            film.genre,
            film.formatted_duration(),
            film.rating_display(),
            film.format.value,
        )
    return table


@async_command
@with_container()
async def sessions(
    container,
    web: Annotated[
        bool, typer.Option("--web", help="Seances en vente sur le web uniquement")
    ] = False,
    film: Annotated[
        Optional[str], typer.Option("--film", "-f", help="Filtrer par ID de film")
    ] = None,
    screen: Annotated[
        Optional[int], typer.Option("--screen", "-s", help="Filtrer par ID d'ecran")
    ] = None,
    attribute: Annotated[
        Optional[str], typer.Option("--attribute", "-a", help="Filtrer par ID d'attribut")
    ] = None,
    open_only: Annotated[
        bool, typer.Option("--open", help="Seances encore vendables uniquement")
    ] = False,
) -> None:
    """Liste les seances a venir."""
    client = container.veezi_client()
    with suppress_loguru():
        result = await (client.list_web_sessions() if web else client.list_sessions())

    if film is not None:
        result = result.filter_by_film(FilmId(film))
    if screen is not None:
        result = result.filter_by_screen(ScreenId(screen))
    if attribute is not None:
        result = result.filter_containing_attribute(AttributeId(attribute))
    if open_only:
        result = result.open_for_sales()

    if not result:
        console.print("[yellow]Aucune seance.[/yellow]")
        return
    console.print(_sessions_table(f"Seances ({len(result)})", result))


@async_command
@with_container()
async def films(
    container,
    genre: Annotated[
        Optional[str], typer.Option("--genre", "-g", help="Filtrer par genre")
    ] = None,
) -> None:
    """Liste les films du site."""
    with suppress_loguru():
        if genre is not None:
            result = await container.catalog_service().films_by_genre(genre)
        else:
            result = await container.veezi_client().list_films()

    if not result:
        console.print("[yellow]Aucun film.[/yellow]")
        return
    console.print(_films_table(f"Films ({len(result)})", result))


@async_command
@with_container()
async def film(
    container,
    film_id: Annotated[str, typer.Argument(help="ID du film")],
) -> None:
    """Affiche le detail d'un film et ses seances."""
    client = container.veezi_client()
    with suppress_loguru():
        item = await client.get_film(FilmId(film_id))
        item_sessions = await item.sessions(client)

    console.print(f"[bold cyan]{item.title}[/bold cyan] ({item.rating_display()})")
    console.print(f"  Genre: {item.genre}")
    console.print(f"  Duree: {item.formatted_duration()}")
    console.print(f"  Distributeur: {item.distributor}")
    if item.directors():
        console.print(f"  Realisation: {item.directors_formatted()}")
    if item.actors():
        console.print(f"  Avec: {item.actors_formatted()}")
    if item.synopsis:
        console.print(f"\n[dim]{item.synopsis}[/dim]")
    console.print()
    if item_sessions:
        console.print(_sessions_table("Seances", item_sessions))
    else:
        console.print("[yellow]Aucune seance programmee.[/yellow]")


@async_command
@with_container()
async def packages(container) -> None:
    """Liste les packages de films."""
    with suppress_loguru():
        result = await container.veezi_client().list_film_packages()

    table = Table(title=f"Packages ({len(result)})")
    table.add_column("ID", justify="right")
    table.add_column("Titre")
    table.add_column("Statut")
    table.add_column("Films")
    for package in result:
        table.add_row(
            str(package.id),
            package.title,
            package.status.value,
            ", ".join(f"{f.title} ({f.split_percent:g}%)" for f in package.ordered_films()),
        )
    console.print(table)


@async_command
@with_container()
async def screens(container) -> None:
    """Liste les ecrans du site."""
    with suppress_loguru():
        result = await container.veezi_client().list_screens()

    table = Table(title=f"Ecrans ({len(result)})")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    table.add_column("Numero")
    table.add_column("Places", justify="right")
    table.add_column("Places maison", justify="right")
    for item in result:
        table.add_row(
            str(item.id),
            item.name,
            item.screen_number,
            str(item.total_seats),
            str(item.house_seats),
        )
    console.print(table)


@async_command
@with_container()
async def screen(
    container,
    screen_id: Annotated[int, typer.Argument(help="ID de l'ecran")],
) -> None:
    """Affiche un ecran et ses seances a venir."""
    client = container.veezi_client()
    with suppress_loguru():
        item = await client.get_screen(ScreenId(screen_id))
        item_sessions = await item.sessions(client)

    console.print(
        f"[bold cyan]{item.name}[/bold cyan] - {item.total_seats} places"
        f"{' (plan personnalise)' if item.has_custom_layout else ''}"
    )
    if item_sessions:
        console.print(_sessions_table("Seances", item_sessions))
    else:
        console.print("[yellow]Aucune seance programmee.[/yellow]")


@async_command
@with_container()
async def site(container) -> None:
    """Affiche les informations du site."""
    with suppress_loguru():
        item = await container.veezi_client().get_site()

    console.print(f"[bold cyan]{item.name}[/bold cyan] ({item.legal_name})")
    for line in item.address_lines:
        console.print(f"  {line}")
    console.print(f"  Pays: {item.country}")
    console.print(f"  Fuseau horaire: {item.time_zone_identifier}")
    if item.phone_1:
        console.print(f"  Telephone: {item.phone_1}")
    console.print(f"  Ecrans: {', '.join(str(s) for s in item.screens) or '-'}")


@async_command
@with_container()
async def attributes(container) -> None:
    """Liste les attributs de seance."""
    with suppress_loguru():
        result = await container.veezi_client().list_attributes()

    table = Table(title=f"Attributs ({len(result)})")
    table.add_column("ID")
    table.add_column("Nom court")
    table.add_column("Description")
    table.add_column("Couleurs")
    for item in result:
        table.add_row(
            item.id,
            item.short_name,
            item.description,
            f"{item.font_color} / {item.background_color}",
        )
    console.print(table)


@async_command
@with_container()
async def schedule(
    container,
    start: Annotated[datetime, typer.Argument(formats=["%Y-%m-%d"], help="Date de debut")],
    end: Annotated[datetime, typer.Argument(formats=["%Y-%m-%d"], help="Date de fin (incluse)")],
) -> None:
    """Liste les films ayant des seances entre deux dates (incluses)."""
    catalog = container.catalog_service()
    with suppress_loguru():
        result = await catalog.films_with_sessions_in_date_range(start.date(), end.date())

    if not result:
        console.print("[yellow]Aucun film programme sur cette periode.[/yellow]")
        return
    console.print(
        _films_table(f"Films du {start.date()} au {end.date()} ({len(result)})", result)
    )
