"""
Entites du domaine Veezi.

Les entites sont des enregistrements immutables construits a partir des
reponses de l'API. Une nouvelle lecture produit une nouvelle instance,
jamais une mutation de l'ancienne.

Exports:
- Identifiants: SessionId, FilmId, FilmPackageId, ScreenId, AttributeId, PersonId
- Session, SessionList, SessionStatus, Seating, ShowType, SalesVia
- Film, FilmFormat, FilmStatus, Person
- FilmPackage, PackageFilm
- Screen, Site, Attribute
"""

from veezi.core.entities.ids import (
    AttributeId,
    FilmId,
    FilmPackageId,
    PersonId,
    ScreenId,
    SessionId,
)
from veezi.core.entities.film import Film, FilmFormat, FilmStatus, Person
from veezi.core.entities.session import (
    SalesVia,
    Seating,
    Session,
    SessionList,
    SessionStatus,
    ShowType,
)
from veezi.core.entities.package import FilmPackage, PackageFilm
from veezi.core.entities.screen import Screen
from veezi.core.entities.site import Site
from veezi.core.entities.attribute import Attribute

__all__ = [
    "AttributeId",
    "FilmId",
    "FilmPackageId",
    "PersonId",
    "ScreenId",
    "SessionId",
    "Film",
    "FilmFormat",
    "FilmStatus",
    "Person",
    "SalesVia",
    "Seating",
    "Session",
    "SessionList",
    "SessionStatus",
    "ShowType",
    "FilmPackage",
    "PackageFilm",
    "Screen",
    "Site",
    "Attribute",
]
