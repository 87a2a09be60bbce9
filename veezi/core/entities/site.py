"""Site entity: the cinema the access token belongs to."""

from typing import Any, Optional

from pydantic import field_validator

from veezi.core.entities.base import VeeziModel
from veezi.core.entities.ids import ScreenId


class Site(VeeziModel):
    """
    Information about the current Veezi site.

    There is exactly one site per access token, hence no identifier.
    The API sends screens as [{"Id": 1}, {"Id": 2}]; only the IDs are kept.
    """

    name: str
    short_name: str
    legal_name: str
    national_code: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    address_3: Optional[str] = None
    post_code: Optional[str] = None
    phone_1: Optional[str] = None
    phone_2: Optional[str] = None
    fax: Optional[str] = None
    sales_tax_registration: Optional[str] = None
    ticket_message_1: Optional[str] = None
    ticket_message_2: Optional[str] = None
    receipt_message_1: Optional[str] = None
    receipt_message_2: Optional[str] = None
    receipt_message_3: Optional[str] = None
    receipt_message_4: Optional[str] = None
    receipt_message_5: Optional[str] = None
    receipt_message_6: Optional[str] = None
    time_zone_identifier: str
    country: str
    screens: tuple[ScreenId, ...] = ()

    @field_validator("screens", mode="before")
    @classmethod
    def _screen_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item.get("Id") if isinstance(item, dict) else item for item in value]
        return value

    @property
    def address_lines(self) -> list[str]:
        """Non-empty address lines, post code last."""
        lines = [self.address_1, self.address_2, self.address_3, self.post_code]
        return [line for line in lines if line]
