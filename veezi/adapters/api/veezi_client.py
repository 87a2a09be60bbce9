"""
Client Veezi avec cache en lecture.

Pour chaque operation publique, le client decide entre cache et appel
reseau:

- Liste: cache de liste consulte d'abord; en cas d'absence, la liste
  recuperee est stockee puis chaque element est recopie dans le cache
  d'elements (ecrasement, jamais fusion). Un hit ne recopie rien.
- Element: cache d'elements consulte d'abord; en cas d'absence,
  l'element recupere y est stocke sous son identifiant.
- Echec: l'erreur remonte telle quelle, aucun cache n'est modifie.

La liste des seances web (filtree par l'API) a son propre cache de
liste mais alimente le cache d'elements partage des seances.

Usage:
    async with VeeziClient(base_url, token, cache_config=CacheConfig.default()) as client:
        sessions = await client.list_sessions()
        film = await client.get_film(sessions[0].film_id)
"""

import time
from typing import TYPE_CHECKING, Callable, Hashable, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import TypeAdapter

from veezi.adapters.api.cache import (
    ALL,
    LIST_KEY,
    WEB,
    CacheConfig,
    ClientCaches,
    EntityCache,
    Timer,
)
from veezi.adapters.api.transport import VeeziTransport
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
    Site,
)
from veezi.core.ports.api_client import IVeeziAPIClient
from veezi.logging_config import http_logger

if TYPE_CHECKING:
    from veezi.config import Settings

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_SESSION = TypeAdapter(Session)
_SESSIONS = TypeAdapter(tuple[Session, ...])
_FILM = TypeAdapter(Film)
_FILMS = TypeAdapter(tuple[Film, ...])
_FILM_PACKAGE = TypeAdapter(FilmPackage)
_FILM_PACKAGES = TypeAdapter(tuple[FilmPackage, ...])
_SCREEN = TypeAdapter(Screen)
_SCREENS = TypeAdapter(tuple[Screen, ...])
_SITE = TypeAdapter(Site)
_ATTRIBUTE = TypeAdapter(Attribute)
_ATTRIBUTES = TypeAdapter(tuple[Attribute, ...])


def _by_id(item) -> Hashable:
    return item.id


class VeeziClient(IVeeziAPIClient):
    """
    Client principal de l'API Veezi.

    Implemente IVeeziAPIClient en combinant VeeziTransport et ClientCaches.
    Les caches appartiennent a l'instance: deux clients ne partagent rien.

    Example:
        client = VeeziClient(
            "https://api.us.veezi.com/",
            token="xxx",
            cache_config=CacheConfig.default(),
        )
        screens = await client.list_screens()
        screen = await client.get_screen(screens[0].id)  # servi par le cache
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        cache_config: Optional[CacheConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = VeeziTransport.DEFAULT_TIMEOUT,
        max_attempts: int = 1,
        max_wait: float = VeeziTransport.DEFAULT_MAX_WAIT,
        timer: Timer = time.monotonic,
    ) -> None:
        """
        Args:
            base_url: URL de base de l'API
            token: Jeton d'acces Veezi
            cache_config: Configuration du cache (None = aucun cache)
            http_client: Client httpx a reutiliser (optionnel)
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives maximum sur 429
            max_wait: Attente maximum entre deux tentatives sur 429
            timer: Horloge monotone des caches (injectable pour les tests)

        Raises:
            VeeziConfigError: Si base_url est invalide
        """
        self._transport = VeeziTransport(
            base_url,
            token,
            http_client=http_client,
            timeout=timeout,
            max_attempts=max_attempts,
            max_wait=max_wait,
        )
        self._caches = ClientCaches(cache_config or CacheConfig(), timer=timer)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "VeeziClient":
        """Construit un client depuis la configuration applicative."""
        if settings.access_token is None:
            raise ValueError("VEEZI_ACCESS_TOKEN n'est pas configure")
        return cls(
            settings.base_url,
            settings.access_token.get_secret_value(),
            cache_config=settings.cache_config(),
            timeout=settings.timeout,
            max_attempts=settings.max_attempts,
        )

    @property
    def caches(self) -> ClientCaches:
        return self._caches

    async def __aenter__(self) -> "VeeziClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Libere les ressources reseau."""
        await self._transport.close()

    # -- Mecanique commune ------------------------------------------------

    async def _fetch_list(
        self,
        path: str,
        adapter: TypeAdapter[tuple[V, ...]],
        cache: EntityCache[K, V],
        kind: str = ALL,
        key_of: Callable[[V], K] = _by_id,
    ) -> tuple[V, ...]:
        list_cache = cache.list_cache(kind)
        if list_cache is None:
            return await self._transport.get_json(path, adapter)

        cached = list_cache.get(LIST_KEY)
        if cached is not None:
            http_logger.debug(f"Cache hit: {list_cache.name}")
            return cached

        http_logger.debug(f"Cache miss: {list_cache.name}")
        items = await self._transport.get_json(path, adapter)
        list_cache.insert(LIST_KEY, items)

        if cache.items is not None:
            for item in items:
                cache.items.insert(key_of(item), item)
            http_logger.debug(f"Cache {cache.name}: {len(items)} element(s) recopie(s) depuis la liste")

        return items

    async def _fetch_item(
        self,
        path: str,
        adapter: TypeAdapter[V],
        cache: EntityCache[K, V],
        key: K,
        key_of: Callable[[V], K] = _by_id,
    ) -> V:
        store = cache.items
        if store is None:
            return await self._transport.get_json(path, adapter)

        cached = store.get(key)
        if cached is not None:
            http_logger.debug(f"Cache hit: {store.name}[{key!r}]")
            return cached

        http_logger.debug(f"Cache miss: {store.name}[{key!r}]")
        item = await self._transport.get_json(path, adapter)
        # Sous la cle demandee, et sous l'identifiant renvoye s'il differe
        store.insert(key, item)
        canonical = key_of(item)
        if canonical != key:
            store.insert(canonical, item)
        return item

    # -- Seances ---------------------------------------------------------

    async def list_sessions(self) -> SessionList:
        """Toutes les seances a venir."""
        return SessionList(
            await self._fetch_list("v1/session", _SESSIONS, self._caches.sessions)
        )

    async def list_web_sessions(self) -> SessionList:
        """Seances a venir en vente sur le web (filtrees par l'API)."""
        return SessionList(
            await self._fetch_list("v1/websession", _SESSIONS, self._caches.sessions, kind=WEB)
        )

    async def get_session(self, session_id: SessionId) -> Session:
        return await self._fetch_item(
            f"v1/session/{session_id}", _SESSION, self._caches.sessions, session_id
        )

    # -- Films -----------------------------------------------------------

    async def list_films(self) -> list[Film]:
        return list(await self._fetch_list("v4/film", _FILMS, self._caches.films))

    async def get_film(self, film_id: FilmId) -> Film:
        return await self._fetch_item(f"v4/film/{film_id}", _FILM, self._caches.films, film_id)

    # -- Packages de films -------------------------------------------------

    async def list_film_packages(self) -> list[FilmPackage]:
        return list(
            await self._fetch_list("v1/filmpackage", _FILM_PACKAGES, self._caches.film_packages)
        )

    async def get_film_package(self, package_id: FilmPackageId) -> FilmPackage:
        return await self._fetch_item(
            f"v1/filmpackage/{package_id}", _FILM_PACKAGE, self._caches.film_packages, package_id
        )

    # -- Ecrans ----------------------------------------------------------

    async def list_screens(self) -> list[Screen]:
        return list(await self._fetch_list("v1/screen", _SCREENS, self._caches.screens))

    async def get_screen(self, screen_id: ScreenId) -> Screen:
        return await self._fetch_item(
            f"v1/screen/{screen_id}", _SCREEN, self._caches.screens, screen_id
        )

    # -- Site ------------------------------------------------------------

    async def get_site(self) -> Site:
        return await self._fetch_item(
            "v1/site", _SITE, self._caches.site, LIST_KEY, key_of=lambda _: LIST_KEY
        )

    # -- Attributs -------------------------------------------------------

    async def list_attributes(self) -> list[Attribute]:
        return list(await self._fetch_list("v1/attribute", _ATTRIBUTES, self._caches.attributes))

    async def get_attribute(self, attribute_id: AttributeId) -> Attribute:
        return await self._fetch_item(
            f"v1/attribute/{attribute_id}", _ATTRIBUTE, self._caches.attributes, attribute_id
        )

    # -- Invalidation ----------------------------------------------------

    def invalidate_session(self, session_id: SessionId) -> None:
        """Retire la seance et vide les listes de seances (web comprise)."""
        self._caches.sessions.invalidate(session_id)

    def invalidate_all_sessions(self) -> None:
        self._caches.sessions.invalidate_all()

    def invalidate_film(self, film_id: FilmId) -> None:
        self._caches.films.invalidate(film_id)

    def invalidate_all_films(self) -> None:
        self._caches.films.invalidate_all()

    def invalidate_film_package(self, package_id: FilmPackageId) -> None:
        self._caches.film_packages.invalidate(package_id)

    def invalidate_all_film_packages(self) -> None:
        self._caches.film_packages.invalidate_all()

    def invalidate_screen(self, screen_id: ScreenId) -> None:
        self._caches.screens.invalidate(screen_id)

    def invalidate_all_screens(self) -> None:
        self._caches.screens.invalidate_all()

    def invalidate_attribute(self, attribute_id: AttributeId) -> None:
        self._caches.attributes.invalidate(attribute_id)

    def invalidate_all_attributes(self) -> None:
        self._caches.attributes.invalidate_all()

    def invalidate_site(self) -> None:
        self._caches.site.invalidate_all()

    def invalidate_all(self) -> None:
        """Vide tous les caches du client en un seul appel."""
        self._caches.invalidate_all()
        logger.info("Tous les caches Veezi ont ete invalides")

    def cache_stats(self) -> dict[str, dict[str, int]]:
        return self._caches.stats()
