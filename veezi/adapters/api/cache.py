"""
Cache memoire des reponses de l'API Veezi.

Chaque type d'entite dispose d'un cache d'elements (cle = identifiant) et
d'un ou plusieurs caches de liste a emplacement unique (cle = LIST_KEY),
tous avec le meme TTL. Le cache est optionnel par type: un type non
configure n'a aucun CacheStore et chaque appel part directement au
transport.

Le TTL court a partir de l'insertion; une lecture ne le prolonge pas.
A capacite atteinte, les entrees expirees partent en premier, puis la
moins recemment utilisee (cachetools.TTLCache).

Preset par defaut (CacheConfig.default()):
- Seances: 30 s, 1000 elements
- Films, packages, attributs: 5 min, 500 elements
- Ecrans: 1 h, 100 elements
- Site: 5 min
"""

import threading
import time
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Callable, Final, Generic, Hashable, Optional, TypeVar

from cachetools import TTLCache

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
    Site,
)
from veezi.logging_config import http_logger as logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Cle unique des caches de liste et du cache du site
LIST_KEY: Final = "*"

# Noms des caches de liste
ALL: Final = "all"
WEB: Final = "web"

Timer = Callable[[], float]


class CacheStore(Generic[K, V]):
    """
    Stockage cle -> valeur avec expiration et capacite maximum.

    Les operations sont synchrones: le verrou ne protege qu'une courte
    section critique et n'est jamais tenu pendant un appel reseau.
    Les valeurs stockees sont des instantanes immutables; un
    rafraichissement est une nouvelle insertion.
    """

    def __init__(
        self,
        name: str,
        ttl: timedelta,
        max_capacity: int,
        timer: Timer = time.monotonic,
    ) -> None:
        self._name = name
        self._data: TTLCache = TTLCache(
            maxsize=max_capacity, ttl=ttl.total_seconds(), timer=timer
        )
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_capacity(self) -> int:
        return int(self._data.maxsize)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self._data.ttl)

    def get(self, key: K) -> Optional[V]:
        """Valeur presente et non expiree, sinon None."""
        with self._lock:
            return self._data.get(key)

    def insert(self, key: K, value: V) -> None:
        """Stocke la valeur et redemarre son TTL (evince si plein)."""
        with self._lock:
            self._data[key] = value

    def invalidate(self, key: K) -> None:
        with self._lock:
            self._data.pop(key, None)

    def invalidate_all(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            self._data.expire()
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


@dataclass(frozen=True)
class EntityCacheSettings:
    """
    Reglages du cache d'un type d'entite.

    Attributes:
        ttl: Duree de vie d'une entree apres insertion
        max_capacity: Nombre maximum d'elements du cache d'elements
    """

    ttl: timedelta
    max_capacity: int = 1

    def __post_init__(self) -> None:
        if self.ttl <= timedelta(0):
            raise ValueError(f"ttl doit etre positif (recu {self.ttl})")
        if self.max_capacity < 1:
            raise ValueError(f"max_capacity doit etre >= 1 (recu {self.max_capacity})")


@dataclass(frozen=True)
class CacheConfig:
    """
    Configuration du cache, construite par appels chaines.

    CacheConfig() ne met rien en cache. Chaque with_*() retourne une
    nouvelle configuration.

    Example:
        config = (
            CacheConfig()
            .with_sessions(timedelta(seconds=30), 1000)
            .with_site(timedelta(minutes=5))
        )
    """

    sessions: Optional[EntityCacheSettings] = None
    films: Optional[EntityCacheSettings] = None
    film_packages: Optional[EntityCacheSettings] = None
    screens: Optional[EntityCacheSettings] = None
    attributes: Optional[EntityCacheSettings] = None
    site: Optional[EntityCacheSettings] = None

    @classmethod
    def default(cls) -> "CacheConfig":
        """Preset de cache raisonnable pour une utilisation courante."""
        return (
            cls()
            .with_sessions(timedelta(seconds=30), 1000)
            .with_films(timedelta(minutes=5), 500)
            .with_film_packages(timedelta(minutes=5), 500)
            .with_screens(timedelta(hours=1), 100)
            .with_attributes(timedelta(minutes=5), 500)
            .with_site(timedelta(minutes=5))
        )

    def with_sessions(self, ttl: timedelta, max_capacity: int) -> "CacheConfig":
        return replace(self, sessions=EntityCacheSettings(ttl, max_capacity))

    def with_films(self, ttl: timedelta, max_capacity: int) -> "CacheConfig":
        return replace(self, films=EntityCacheSettings(ttl, max_capacity))

    def with_film_packages(self, ttl: timedelta, max_capacity: int) -> "CacheConfig":
        return replace(self, film_packages=EntityCacheSettings(ttl, max_capacity))

    def with_screens(self, ttl: timedelta, max_capacity: int) -> "CacheConfig":
        return replace(self, screens=EntityCacheSettings(ttl, max_capacity))

    def with_attributes(self, ttl: timedelta, max_capacity: int) -> "CacheConfig":
        return replace(self, attributes=EntityCacheSettings(ttl, max_capacity))

    def with_site(self, ttl: timedelta) -> "CacheConfig":
        return replace(self, site=EntityCacheSettings(ttl, 1))

    @property
    def is_enabled(self) -> bool:
        """Vrai si au moins un type d'entite est mis en cache."""
        return any(
            s is not None
            for s in (
                self.sessions,
                self.films,
                self.film_packages,
                self.screens,
                self.attributes,
                self.site,
            )
        )


class EntityCache(Generic[K, V]):
    """
    Caches d'un type d'entite: elements et listes.

    invalidate() est le seul chemin d'invalidation d'un element: il vide
    toujours aussi les caches de liste du type, une liste ne pouvant pas
    etre conservee si l'un de ses membres est perime.
    """

    def __init__(
        self,
        name: str,
        items: Optional[CacheStore[K, V]] = None,
        lists: Optional[dict[str, CacheStore[str, tuple[V, ...]]]] = None,
    ) -> None:
        self._name = name
        self._items = items
        self._lists = lists or {}

    @classmethod
    def build(
        cls,
        name: str,
        settings: Optional[EntityCacheSettings],
        list_kinds: tuple[str, ...] = (ALL,),
        timer: Timer = time.monotonic,
    ) -> "EntityCache[K, V]":
        """Construit les caches d'un type, ou aucun si settings est None."""
        if settings is None:
            return cls(name)
        items: CacheStore[K, V] = CacheStore(name, settings.ttl, settings.max_capacity, timer)
        lists: dict[str, CacheStore[str, tuple[V, ...]]] = {
            kind: CacheStore(f"{name}:{kind}", settings.ttl, 1, timer) for kind in list_kinds
        }
        return cls(name, items, lists)

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> Optional[CacheStore[K, V]]:
        return self._items

    def list_cache(self, kind: str = ALL) -> Optional[CacheStore[str, tuple[V, ...]]]:
        return self._lists.get(kind)

    def stores(self) -> list[CacheStore]:
        stores: list[CacheStore] = [] if self._items is None else [self._items]
        return stores + list(self._lists.values())

    def invalidate(self, key: K) -> None:
        """Retire un element et vide toutes les listes du type."""
        if self._items is not None:
            self._items.invalidate(key)
        for store in self._lists.values():
            store.invalidate_all()
        logger.debug(f"Cache {self._name}: invalidation de {key!r}")

    def invalidate_all(self) -> None:
        for store in self.stores():
            store.invalidate_all()
        logger.debug(f"Cache {self._name}: invalidation complete")


class ClientCaches:
    """
    Ensemble des caches d'un client Veezi.

    Chaque instance de client possede ses propres caches; rien n'est
    partage entre clients.
    """

    def __init__(self, config: CacheConfig, timer: Timer = time.monotonic) -> None:
        self.config = config
        self.sessions: EntityCache[SessionId, Session] = EntityCache.build(
            "sessions", config.sessions, (ALL, WEB), timer
        )
        self.films: EntityCache[FilmId, Film] = EntityCache.build(
            "films", config.films, timer=timer
        )
        self.film_packages: EntityCache[FilmPackageId, FilmPackage] = EntityCache.build(
            "film_packages", config.film_packages, timer=timer
        )
        self.screens: EntityCache[ScreenId, Screen] = EntityCache.build(
            "screens", config.screens, timer=timer
        )
        self.attributes: EntityCache[AttributeId, Attribute] = EntityCache.build(
            "attributes", config.attributes, timer=timer
        )
        # Le site est une ressource unique: un seul emplacement, cle LIST_KEY
        self.site: EntityCache[str, Site] = EntityCache.build(
            "site", config.site, list_kinds=(), timer=timer
        )

    def all(self) -> tuple[EntityCache, ...]:
        return (
            self.sessions,
            self.films,
            self.film_packages,
            self.screens,
            self.attributes,
            self.site,
        )

    def invalidate_all(self) -> None:
        """Vide tous les caches, listes web des seances comprises."""
        for cache in self.all():
            cache.invalidate_all()

    def stats(self) -> dict[str, dict[str, int]]:
        """Taille courante et capacite de chaque cache configure."""
        return {
            store.name: {"size": len(store), "max_capacity": store.max_capacity}
            for cache in self.all()
            for store in cache.stores()
        }
