"""
Fixtures pytest partagees pour les tests Veezi.

Ce module contient les fixtures communes utilisees dans les tests:
- Entites construites depuis les reponses simulees de l'API
- Settings de test avec chemin de log temporaire
"""

from pathlib import Path

import pytest

from veezi.config import Settings
from veezi.core.entities import Film, Session, SessionList
from tests.fixtures.veezi_responses import FILMS_RESPONSE, SESSIONS_RESPONSE, payload


@pytest.fixture
def session_list() -> SessionList:
    """Les cinq seances de SESSIONS_RESPONSE, dans l'ordre de l'API."""
    return SessionList(Session.model_validate(s) for s in payload(SESSIONS_RESPONSE))


@pytest.fixture
def film_list() -> list[Film]:
    """Les trois films de FILMS_RESPONSE."""
    return [Film.model_validate(f) for f in payload(FILMS_RESPONSE)]


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test isoles de l'environnement.

    Le fichier .env est ignore et le log est ecrit dans tmp_path.
    """
    return Settings(
        _env_file=None,
        base_url="https://api.test.veezi.com/",
        access_token="test-token",
        log_file=tmp_path / "test.log",
    )
