"""
Session entities.

A Session is one scheduled screening of a film (or film package) on a
screen, with its timings, seat counts and sales channels.
"""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date, datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, overload

from pydantic import model_validator

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.film import Film, FilmFormat
from veezi.core.entities.ids import AttributeId, FilmId, FilmPackageId, ScreenId, SessionId

if TYPE_CHECKING:
    from veezi.core.entities.attribute import Attribute
    from veezi.core.entities.package import FilmPackage
    from veezi.core.entities.screen import Screen
    from veezi.core.ports.api_client import IVeeziAPIClient


class Seating(Enum):
    """Seating type of a session."""

    ALLOCATED = "Allocated"
    SELECT = "Select"
    OPEN = "Open"


class ShowType(Enum):
    """Whether a session is open to the public."""

    PRIVATE = "Private"
    PUBLIC = "Public"


class SessionStatus(Enum):
    """Sales status of a session."""

    OPEN = "Open"
    CLOSED = "Closed"
    PLANNED = "Planned"


class SalesVia(VeeziModel):
    """
    Sales channels through which tickets for a session can be sold.

    The API sends a list of channel names (["POS", "WWW"]); each known
    name switches the matching flag on, unknown names are ignored.
    """

    kiosk: bool = False
    pos: bool = False
    www: bool = False
    mx: bool = False
    rsp: bool = False

    @model_validator(mode="before")
    @classmethod
    def _from_channel_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            channels = {str(name).lower() for name in data}
            return {field: field in channels for field in cls.model_fields}
        return data


class Session(VeeziModel):
    """
    A scheduled screening.

    Attributes:
        id: Unique session ID
        film_id: Film shown
        film_package_id: Film package shown, if any
        title: Title of the film shown
        screen_id: Screen hosting the session
        seating: Seating type
        are_complimentaries_allowed: Whether complimentary tickets are accepted
        show_type: Public or private show
        sales_via: Sales channels
        status: Sales status
        pre_show_start_time: Start of the session (trailers included)
        sales_cut_off_time: End of ticket sales
        feature_start_time: Start of the feature
        feature_end_time: End of the feature
        cleanup_end_time: End of the screen cleanup
        tickets_sold_out: Whether the session is sold out
        few_tickets_left: Whether few tickets remain
        seats_available: Seats still available
        seats_held: Seats held
        seats_house: House seats
        seats_sold: Seats sold
        film_format: Projection format
        price_card_name: Price card in use
        attributes: IDs of the attributes attached to the session
        audio_language: Audio language, if specified
    """

    id: SessionId
    film_id: FilmId
    film_package_id: Optional[FilmPackageId] = None
    title: str
    screen_id: ScreenId
    seating: Seating
    are_complimentaries_allowed: bool
    show_type: ShowType
    sales_via: SalesVia
    status: SessionStatus
    pre_show_start_time: datetime
    sales_cut_off_time: datetime
    feature_start_time: datetime
    feature_end_time: datetime
    cleanup_end_time: datetime
    tickets_sold_out: bool
    few_tickets_left: bool
    seats_available: int
    seats_held: int
    seats_house: int
    seats_sold: int
    film_format: FilmFormat
    price_card_name: str
    attributes: tuple[AttributeId, ...] = ()
    audio_language: Optional[str] = None

    def is_open_for_sales(self, now: Optional[datetime] = None) -> bool:
        """
        Whether tickets can still be sold for this session.

        True when the status is Open, the current time is strictly before
        the sales cut-off and at least one seat is available. Naive
        timestamps are compared against the current UTC time.
        """
        if now is None:
            now = datetime.now(timezone.utc)
            if self.sales_cut_off_time.tzinfo is None:
                now = now.replace(tzinfo=None)
        return (
            self.status is SessionStatus.OPEN
            and now < self.sales_cut_off_time
            and self.seats_available > 0
        )

    async def film(self, client: "IVeeziAPIClient") -> Film:
        return await client.get_film(self.film_id)

    async def film_package(self, client: "IVeeziAPIClient") -> Optional["FilmPackage"]:
        """The film package of this session, or None when it has none."""
        if self.film_package_id is None:
            return None
        return await client.get_film_package(self.film_package_id)

    async def screen(self, client: "IVeeziAPIClient") -> "Screen":
        return await client.get_screen(self.screen_id)

    async def get_attributes(self, client: "IVeeziAPIClient") -> list["Attribute"]:
        """Resolve the attribute IDs of this session, one request per ID."""
        return [await client.get_attribute(attr_id) for attr_id in self.attributes]


class SessionList(Sequence[Session]):
    """
    Immutable list of sessions with filtering helpers.

    Every filter returns a new SessionList; the original is never modified,
    so a SessionList can be safely shared through the cache.
    """

    __slots__ = ("_sessions",)

    def __init__(self, sessions: Iterable[Session] = ()) -> None:
        self._sessions: tuple[Session, ...] = tuple(sessions)

    @overload
    def __getitem__(self, index: int) -> Session: ...

    @overload
    def __getitem__(self, index: slice) -> "SessionList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return SessionList(self._sessions[index])
        return self._sessions[index]

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(self._sessions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SessionList):
            return self._sessions == other._sessions
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._sessions)

    def __repr__(self) -> str:
        return f"SessionList({list(self._sessions)!r})"

    def to_list(self) -> list[Session]:
        return list(self._sessions)

    def filter_by_screen(self, screen_id: ScreenId) -> "SessionList":
        return SessionList(s for s in self._sessions if s.screen_id == screen_id)

    def filter_by_film(self, film_id: FilmId) -> "SessionList":
        return SessionList(s for s in self._sessions if s.film_id == film_id)

    def filter_containing_attribute(self, attribute_id: AttributeId) -> "SessionList":
        return SessionList(s for s in self._sessions if attribute_id in s.attributes)

    def filter_by_date_range(self, start: date, end: date) -> "SessionList":
        """Sessions whose pre-show start date lies in [start, end] (inclusive)."""
        return SessionList(
            s for s in self._sessions
            if start <= s.pre_show_start_time.date() <= end
        )

    def open_for_sales(self, now: Optional[datetime] = None) -> "SessionList":
        return SessionList(s for s in self._sessions if s.is_open_for_sales(now))
