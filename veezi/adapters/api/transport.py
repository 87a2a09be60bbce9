"""
Transport HTTP vers l'API Veezi.

Execute les GET authentifies (header VeeziAccessToken), decode le JSON
en entites via pydantic et traduit chaque echec en VeeziError.
Aucune logique de cache ici: voir veezi_client.py.

Usage:
    transport = VeeziTransport("https://api.us.veezi.com/", token="xxx")
    films = await transport.get_json("v4/film", TypeAdapter(list[Film]))
    await transport.close()
"""

from typing import Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from veezi.adapters.api.errors import (
    RateLimitError,
    VeeziConfigError,
    VeeziDecodeError,
    VeeziStatusError,
    VeeziTransportError,
)
from veezi.logging_config import http_logger as logger

T = TypeVar("T")

TOKEN_HEADER = "VeeziAccessToken"


def parse_base_url(base_url: str) -> httpx.URL:
    """
    Valide l'URL de base et garantit un slash final.

    Le slash final fait que les chemins relatifs ("v1/session") se
    joignent sous la base au lieu d'en remplacer le dernier segment.

    Raises:
        VeeziConfigError: Si l'URL n'est pas une URL http(s) absolue
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise VeeziConfigError(f"URL de base invalide: {base_url!r}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise VeeziConfigError(f"URL de base invalide: {base_url!r}")
    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return url


def _retry_after(response: httpx.Response) -> Optional[int]:
    """Delai du header Retry-After en secondes, si numerique."""
    value = response.headers.get("Retry-After", "").strip()
    return int(value) if value.isdigit() else None


class VeeziTransport:
    """
    Client HTTP bas niveau pour l'API Veezi.

    Le client httpx est cree a la demande et reutilise (pool de connexions).
    Un client httpx fourni par l'appelant est utilise tel quel et n'est pas
    ferme par close().

    Un 429 devient RateLimitError. Avec max_attempts > 1, la requete est
    relancee apres une attente exponentielle aleatoire bornee par max_wait;
    aucun autre echec n'est relance.

    Attributes:
        DEFAULT_TIMEOUT: Timeout par defaut des requetes en secondes
        DEFAULT_MAX_WAIT: Attente maximum entre deux tentatives en secondes
    """

    DEFAULT_TIMEOUT = 30.0
    DEFAULT_MAX_WAIT = 60.0

    def __init__(
        self,
        base_url: str,
        token: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = 1,
        max_wait: float = DEFAULT_MAX_WAIT,
    ) -> None:
        """
        Args:
            base_url: URL de base de l'API (ex: https://api.us.veezi.com/)
            token: Jeton d'acces Veezi
            http_client: Client httpx a utiliser (optionnel)
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives maximum sur 429 (1 = pas de relance)
            max_wait: Attente maximum entre deux tentatives en secondes

        Raises:
            VeeziConfigError: Si base_url est invalide
        """
        self._base_url = parse_base_url(base_url)
        self._token = token
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._max_wait = max_wait
        self._client = http_client
        self._owns_client = http_client is None
        logger.debug(f"Nouveau transport Veezi pour {self._base_url}")

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def url_for(self, path: str) -> httpx.URL:
        """URL absolue d'un chemin relatif a la base."""
        try:
            return self._base_url.join(path)
        except httpx.InvalidURL as e:
            raise VeeziConfigError(f"Chemin invalide: {path!r}") from e

    async def _send(self, url: httpx.URL) -> httpx.Response:
        """GET authentifie, relance sur 429 selon max_attempts."""
        headers = {TOKEN_HEADER: self._token, "Accept": "application/json"}
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RateLimitError),
            wait=wait_random_exponential(multiplier=1, max=self._max_wait),
            stop=stop_after_attempt(self._max_attempts),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self._get_client().get(url, headers=headers)
                if response.status_code == 429:
                    retry_after = _retry_after(response)
                    logger.warning(
                        f"GET {url} -> 429 (tentative {attempt.retry_state.attempt_number}"
                        f"/{self._max_attempts}, Retry-After: {retry_after})"
                    )
                    raise RateLimitError(str(url), retry_after)
                response.raise_for_status()
        return response

    async def get_json(self, path: str, adapter: TypeAdapter[T]) -> T:
        """
        GET authentifie sur un chemin relatif, decode en entite(s).

        Args:
            path: Chemin relatif (ex: "v1/session/42")
            adapter: TypeAdapter du type attendu

        Returns:
            La reponse decodee

        Raises:
            VeeziTransportError: Erreur reseau
            VeeziStatusError: Statut HTTP hors 2xx (RateLimitError pour 429)
            VeeziDecodeError: JSON invalide ou forme inattendue
        """
        url = self.url_for(path)
        logger.debug(f"GET {url}")

        try:
            response = await self._send(url)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"GET {url} -> HTTP {status}")
            raise VeeziStatusError(status, str(url)) from e
        except httpx.RequestError as e:
            logger.warning(f"GET {url} -> erreur reseau: {e!r}")
            raise VeeziTransportError(f"Echec de la requete GET {url}: {e}") from e

        try:
            value = adapter.validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"GET {url} -> reponse illisible ({e.error_count()} erreur(s))")
            raise VeeziDecodeError(str(url), str(e)) from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return value

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par ce transport."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
