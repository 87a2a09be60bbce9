"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le
prefixe VEEZI_, et peut optionnellement etre fournie via un fichier .env.

Le jeton d'acces est optionnel: les commandes qui appellent l'API sont
refusees s'il n'est pas fourni.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from veezi.adapters.api.cache import CacheConfig

# Fichier .env a la racine du projet (parent de veezi/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables
    d'environnement avec le prefixe VEEZI_.
    Exemple : VEEZI_ACCESS_TOKEN=xxx VEEZI_CACHE_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="VEEZI_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    base_url: str = Field(default="https://api.us.veezi.com/")
    access_token: Optional[SecretStr] = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=1, ge=1)

    # Cache memoire (preset CacheConfig.default() si actif)
    cache_enabled: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/veezi.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)
    # Trafic HTTP et cache (cible veezi-http) sur la console
    log_http: bool = Field(default=False)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home."""
        return Path(v).expanduser()

    @property
    def api_enabled(self) -> bool:
        """Verifie si le jeton d'acces est configure."""
        return self.access_token is not None

    def cache_config(self) -> CacheConfig:
        """Configuration de cache a utiliser pour le client."""
        return CacheConfig.default() if self.cache_enabled else CacheConfig()
