"""Session attributes (3D, subtitles, senior screening...)."""

from typing import TYPE_CHECKING

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.ids import AttributeId

if TYPE_CHECKING:
    from veezi.core.entities.session import SessionList
    from veezi.core.ports.api_client import IVeeziAPIClient


class Attribute(VeeziModel):
    """
    An attribute that can be attached to sessions.

    Attributes:
        id: Unique attribute ID
        description: Display name
        short_name: Short label
        font_color: Font color (hex code)
        background_color: Background color (hex code)
        show_on_sessions_with_no_comps: Shown on sessions without complimentary tickets
    """

    id: AttributeId
    description: str
    short_name: str
    font_color: str
    background_color: str
    show_on_sessions_with_no_comps: bool

    async def sessions(self, client: "IVeeziAPIClient") -> "SessionList":
        """All future sessions carrying this attribute."""
        return (await client.list_sessions()).filter_containing_attribute(self.id)
