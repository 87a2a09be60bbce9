"""
Film entities.

A Film is a screenable title known to the Veezi site, with its people
(cast and crew), format and scheduling status.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.ids import FilmId, PersonId

if TYPE_CHECKING:
    from veezi.core.entities.session import SessionList
    from veezi.core.ports.api_client import IVeeziAPIClient


class FilmStatus(Enum):
    """Scheduling status of a film (or film package)."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DELETED = "Deleted"


class FilmFormat(Enum):
    """Projection format of a film, as labelled by Veezi."""

    FILM_2D = "2D Film"
    DIGITAL_2D = "2D Digital"
    DIGITAL_3D = "3D Digital"
    DIGITAL_3D_HFR = "3D HFR"
    NOT_A_FILM = "Not a Film"


class Person(VeeziModel):
    """
    A person credited on a film.

    Attributes:
        id: Veezi person ID
        first_name: Given name
        last_name: Family name
        role: Credit role ("Actor", "Director", ...)
    """

    id: PersonId
    first_name: str
    last_name: str
    role: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Film(VeeziModel):
    """
    A film in the Veezi system.

    Attributes:
        id: Unique film ID
        title: Display title
        short_name: Short name (10 characters max)
        synopsis: Optional synopsis
        genre: Genre label
        signage_text: Name shown on signage
        distributor: Distributor name
        opening_date: Opening date
        rating: Classification ("PG-13"); None when not rated
        status: Scheduling status
        content: Classification content description
        duration: Running time in minutes
        display_sequence: Display ordering
        national_code: Optional national film code
        format: Projection format
        is_restricted: Whether the film is restricted to some audiences
        people: Cast and crew
        audio_language: Primary audio language
        government_film_title: Title used for box office reporting
        film_poster_url: Poster image URL
        film_poster_thumbnail_url: Poster thumbnail URL
        backdrop_image_url: Backdrop image URL
        film_trailer_url: Trailer URL
    """

    id: FilmId
    title: str
    short_name: str
    synopsis: Optional[str] = None
    genre: str
    signage_text: str
    distributor: str
    opening_date: datetime
    rating: Optional[str] = None
    status: FilmStatus
    content: Optional[str] = None
    duration: int
    display_sequence: int
    national_code: Optional[str] = None
    format: FilmFormat
    is_restricted: bool
    people: tuple[Person, ...] = ()
    audio_language: Optional[str] = None
    government_film_title: Optional[str] = None
    film_poster_url: Optional[str] = None
    film_poster_thumbnail_url: str = ""
    backdrop_image_url: Optional[str] = None
    film_trailer_url: Optional[str] = None

    def formatted_duration(self) -> str:
        """Running time as "2h" or "2h 5m"."""
        hours, minutes = divmod(self.duration, 60)
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h {minutes}m"

    @property
    def is_active(self) -> bool:
        return self.status is FilmStatus.ACTIVE

    @property
    def is_3d(self) -> bool:
        return self.format in (FilmFormat.DIGITAL_3D, FilmFormat.DIGITAL_3D_HFR)

    @property
    def is_2d(self) -> bool:
        return self.format in (FilmFormat.FILM_2D, FilmFormat.DIGITAL_2D)

    def actors(self) -> list[Person]:
        return [p for p in self.people if p.role == "Actor"]

    def directors(self) -> list[Person]:
        return [p for p in self.people if p.role == "Director"]

    def actors_formatted(self) -> str:
        return ", ".join(p.full_name for p in self.actors())

    def directors_formatted(self) -> str:
        return ", ".join(p.full_name for p in self.directors())

    def rating_display(self) -> str:
        """Classification, or "NR" for unrated films."""
        return self.rating or "NR"

    async def sessions(self, client: "IVeeziAPIClient") -> "SessionList":
        """All future sessions of this film."""
        return (await client.list_sessions()).filter_by_film(self.id)

    async def web_sessions(self, client: "IVeeziAPIClient") -> "SessionList":
        """Future sessions of this film that are on sale online."""
        return (await client.list_web_sessions()).filter_by_film(self.id)
