"""
Service de requetes derivees sur le catalogue Veezi.

CatalogService ne fait que composer les operations de IVeeziAPIClient:
filtres, regroupements et resolution des entites parentes. Il ne
connait pas le cache; chaque lecture passe par le client, qui decide
seul entre cache et reseau.

Responsabilites:
- Filtrer films et attributs par egalite de champ
- Filtrer les seances par plage de dates et par ouverture a la vente
- Regrouper les seances par film ou par ecran
- Resoudre films et ecrans references par des seances (sans doublon)
- Recuperer des entites par lots d'identifiants (sequentiellement)
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Optional

from loguru import logger

from veezi.core.entities import (
    Attribute,
    AttributeId,
    Film,
    FilmId,
    FilmPackage,
    FilmPackageId,
    Screen,
    ScreenId,
    Session,
    SessionId,
    SessionList,
)
from veezi.core.ports.api_client import IVeeziAPIClient
from veezi.utils.helpers import filter_by_field, find_by_field, group_by, unique_keys


class CatalogService:
    """
    Requetes de haut niveau sur le catalogue d'un site Veezi.

    Example:
        catalog = CatalogService(client)
        films = await catalog.films_with_sessions_in_date_range(
            date(2024, 1, 1), date(2024, 1, 31)
        )
    """

    def __init__(self, client: IVeeziAPIClient) -> None:
        self._client = client

    async def _sessions(self, web: bool) -> SessionList:
        if web:
            return await self._client.list_web_sessions()
        return await self._client.list_sessions()

    # -- Filtres par champ -------------------------------------------------

    async def films_by_genre(self, genre: str) -> list[Film]:
        return filter_by_field(await self._client.list_films(), "genre", genre)

    async def films_by_distributor(self, distributor: str) -> list[Film]:
        return filter_by_field(await self._client.list_films(), "distributor", distributor)

    async def find_film_by_title(self, title: str) -> Optional[Film]:
        """Film dont le titre est exactement `title`, ou None."""
        return find_by_field(await self._client.list_films(), "title", title)

    async def find_film_by_short_name(self, short_name: str) -> Optional[Film]:
        return find_by_field(await self._client.list_films(), "short_name", short_name)

    async def find_film_package_by_title(self, title: str) -> Optional[FilmPackage]:
        return find_by_field(await self._client.list_film_packages(), "title", title)

    async def find_attribute_by_short_name(self, short_name: str) -> Optional[Attribute]:
        return find_by_field(await self._client.list_attributes(), "short_name", short_name)

    async def find_attribute_by_description(self, description: str) -> Optional[Attribute]:
        return find_by_field(await self._client.list_attributes(), "description", description)

    # -- Seances -----------------------------------------------------------

    async def sessions_in_date_range(
        self, start: date, end: date, web: bool = False
    ) -> SessionList:
        """Seances dont la date de debut (pre-show) est dans [start, end]."""
        return (await self._sessions(web)).filter_by_date_range(start, end)

    async def sessions_open_for_sales(self, now: Optional[datetime] = None) -> SessionList:
        """Seances web encore vendables (statut Open, avant cut-off, places libres)."""
        return (await self._client.list_web_sessions()).open_for_sales(now)

    async def sessions_by_film(self, web: bool = False) -> dict[FilmId, list[Session]]:
        return group_by(await self._sessions(web), lambda s: s.film_id)

    async def sessions_by_screen(self, web: bool = False) -> dict[ScreenId, list[Session]]:
        return group_by(await self._sessions(web), lambda s: s.screen_id)

    # -- Resolution des parents --------------------------------------------

    async def films_for_sessions(self, sessions: Iterable[Session]) -> list[Film]:
        """Films references par les seances, sans doublon, ordre de premiere apparition."""
        return await self.get_films(unique_keys(sessions, lambda s: s.film_id))

    async def screens_for_sessions(self, sessions: Iterable[Session]) -> list[Screen]:
        """Ecrans references par les seances, sans doublon, ordre de premiere apparition."""
        return await self.get_screens(unique_keys(sessions, lambda s: s.screen_id))

    async def films_with_sessions_in_date_range(self, start: date, end: date) -> list[Film]:
        sessions = await self.sessions_in_date_range(start, end)
        logger.debug(f"{len(sessions)} seance(s) entre {start} et {end}")
        return await self.films_for_sessions(sessions)

    # -- Lots d'identifiants -----------------------------------------------
    # Appels sequentiels, un par identifiant: le cache d'elements du client
    # evite les requetes pour les identifiants deja connus.

    async def get_sessions(self, ids: Iterable[SessionId]) -> list[Session]:
        return [await self._client.get_session(i) for i in ids]

    async def get_films(self, ids: Iterable[FilmId]) -> list[Film]:
        return [await self._client.get_film(i) for i in ids]

    async def get_film_packages(self, ids: Iterable[FilmPackageId]) -> list[FilmPackage]:
        return [await self._client.get_film_package(i) for i in ids]

    async def get_screens(self, ids: Iterable[ScreenId]) -> list[Screen]:
        return [await self._client.get_screen(i) for i in ids]

    async def get_attributes(self, ids: Iterable[AttributeId]) -> list[Attribute]:
        return [await self._client.get_attribute(i) for i in ids]
