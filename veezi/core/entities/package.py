"""
Film package entities.

A FilmPackage groups several films screened together (double feature),
each with its share of the box office.
"""

from typing import TYPE_CHECKING

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.film import Film, FilmStatus
from veezi.core.entities.ids import FilmId, FilmPackageId

if TYPE_CHECKING:
    from veezi.core.ports.api_client import IVeeziAPIClient


class PackageFilm(VeeziModel):
    """
    A film within a package.

    Attributes:
        film_id: ID of the film
        title: Title of the film
        split_percent: Share of the package box office for this film
        trailer_duration: Trailer duration in minutes
        clean_up_duration: Cleanup duration after the film in minutes
        order: Position of the film in the package
    """

    film_id: FilmId
    title: str
    split_percent: float
    trailer_duration: int
    clean_up_duration: int
    order: int

    async def film(self, client: "IVeeziAPIClient") -> Film:
        return await client.get_film(self.film_id)


class FilmPackage(VeeziModel):
    """A package of films ("double feature")."""

    id: FilmPackageId
    title: str
    status: FilmStatus
    films: tuple[PackageFilm, ...] = ()

    def ordered_films(self) -> list[PackageFilm]:
        """Films sorted by their position in the package."""
        return sorted(self.films, key=lambda f: f.order)
