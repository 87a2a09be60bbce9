"""Screen (auditorium) entity."""

from typing import TYPE_CHECKING

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.ids import ScreenId

if TYPE_CHECKING:
    from veezi.core.entities.session import SessionList
    from veezi.core.ports.api_client import IVeeziAPIClient


class Screen(VeeziModel):
    """
    An auditorium of the site.

    Attributes:
        id: Unique screen ID
        name: Display name
        screen_number: Screen number, as labelled on site
        has_custom_layout: Whether the screen uses a custom seat layout
        total_seats: Total seat count
        house_seats: House seat count
    """

    id: ScreenId
    name: str
    screen_number: str
    has_custom_layout: bool
    total_seats: int
    house_seats: int

    async def sessions(self, client: "IVeeziAPIClient") -> "SessionList":
        """All future sessions on this screen."""
        return (await client.list_sessions()).filter_by_screen(self.id)
