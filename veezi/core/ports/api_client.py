"""
Interface port pour l'API Veezi en lecture.

Le port decrit les operations de lecture exposees par un client Veezi.
L'adaptateur concret (VeeziClient) combine transport HTTP et cache;
la couche de requetes derivees (CatalogService) ne depend que de ce port.
"""

from abc import ABC, abstractmethod

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


class IVeeziAPIClient(ABC):
    """
    Interface de lecture de l'API Veezi.

    Toutes les operations sont asynchrones et peuvent lever une VeeziError
    en cas d'echec du transport.
    """

    @abstractmethod
    async def list_sessions(self) -> SessionList:
        """Liste toutes les seances a venir."""
        ...

    @abstractmethod
    async def list_web_sessions(self) -> SessionList:
        """
        Liste les seances a venir ouvertes a la vente en ligne.

        Le filtrage est fait par l'API: date limite de vente future,
        statut Open, seance publique, vente WWW autorisee.
        """
        ...

    @abstractmethod
    async def get_session(self, session_id: SessionId) -> Session:
        ...

    @abstractmethod
    async def list_films(self) -> list[Film]:
        ...

    @abstractmethod
    async def get_film(self, film_id: FilmId) -> Film:
        ...

    @abstractmethod
    async def list_film_packages(self) -> list[FilmPackage]:
        ...

    @abstractmethod
    async def get_film_package(self, package_id: FilmPackageId) -> FilmPackage:
        ...

    @abstractmethod
    async def list_screens(self) -> list[Screen]:
        ...

    @abstractmethod
    async def get_screen(self, screen_id: ScreenId) -> Screen:
        ...

    @abstractmethod
    async def get_site(self) -> Site:
        ...

    @abstractmethod
    async def list_attributes(self) -> list[Attribute]:
        ...

    @abstractmethod
    async def get_attribute(self, attribute_id: AttributeId) -> Attribute:
        ...
