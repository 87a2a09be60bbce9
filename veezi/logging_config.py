"""
Journalisation du client Veezi via loguru.

Deux cibles de logs:
- "veezi" : messages applicatifs (commandes, services, invalidations globales)
- "veezi-http" : trafic bas niveau (GET, statuts, hits/miss du cache)

Le trafic "veezi-http" est toujours ecrit dans le fichier JSON; sur la
console il n'apparait que si show_http est actif (--verbose ou
VEEZI_LOG_HTTP=true), afin que les tableaux Rich restent lisibles.

Usage:
    from veezi.logging_config import http_logger
    http_logger.debug(f"GET {url}")
"""

import sys
from pathlib import Path
from typing import Any, Callable

from loguru import logger

APP_TARGET = "veezi"
HTTP_TARGET = "veezi-http"

# Logger des modules transport/cache; la cible est lue par les filtres
http_logger = logger.bind(target=HTTP_TARGET)

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<magenta>[{extra[target]}]</magenta> "
    "<level>{message}</level>"
)


def target_of(record: dict[str, Any]) -> str:
    """Cible d'un enregistrement loguru (APP_TARGET si non liee)."""
    return record["extra"].get("target", APP_TARGET)


def console_filter(show_http: bool) -> Callable[[dict[str, Any]], bool]:
    """Filtre console: masque la cible veezi-http sauf si show_http."""

    def _filter(record: dict[str, Any]) -> bool:
        return show_http or target_of(record) != HTTP_TARGET

    return _filter


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/veezi.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    show_http: bool = False,
) -> None:
    """Installe les handlers console et fichier.

    Args:
        log_level: Niveau minimum sur la console
        log_file: Fichier JSON (tous niveaux, toutes cibles)
        rotation_size: Taille declenchant la rotation (ex: "10 MB")
        retention_count: Nombre de fichiers conserves
        show_http: Affiche aussi la cible veezi-http sur la console
    """
    logger.remove()
    logger.configure(extra={"target": APP_TARGET})

    logger.add(
        sys.stderr,
        level=log_level,
        format=_CONSOLE_FORMAT,
        filter=console_filter(show_http),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logs dans {log_file} (trafic HTTP console: {show_http})")
