"""
Base commune des entites deserialisees depuis l'API Veezi.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class VeeziModel(BaseModel):
    """
    Modele immutable lu depuis le JSON PascalCase de l'API.

    Les champs sont declares en snake_case; l'alias PascalCase
    (ex: pre_show_start_time -> PreShowStartTime) est genere automatiquement.
    Les champs inconnus renvoyes par l'API sont ignores.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
