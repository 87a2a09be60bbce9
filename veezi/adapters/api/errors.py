"""
Exceptions levees par le client Veezi.

Toutes derivent de VeeziError. Seule RateLimitError peut etre relancee,
par le transport et si max_attempts > 1; les autres remontent telles quelles.
"""

from typing import Optional


class VeeziError(Exception):
    """Erreur de base du client Veezi."""


class VeeziConfigError(VeeziError):
    """Configuration invalide (URL de base malformee, etc.)."""


class VeeziTransportError(VeeziError):
    """Echec reseau: connexion, DNS, timeout..."""


class VeeziStatusError(VeeziError):
    """
    L'API a repondu avec un statut HTTP hors 2xx.

    Attributes:
        status_code: Code HTTP recu
        url: URL appelee
    """

    def __init__(self, status_code: int, url: str, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"HTTP {status_code} for {url}")


class RateLimitError(VeeziStatusError):
    """
    L'API a retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, url: str = "", retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(429, url, f"Rate limited. Retry after: {retry_after}s")


class VeeziDecodeError(VeeziError):
    """Corps de reponse illisible: JSON invalide ou forme inattendue."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Unexpected response from {url}: {detail}")
