"""
Fonctions utilitaires de filtrage partagees dans le projet.

Ce module centralise les filtres purs utilises par la couche de requetes :
- filter_by_field : egalite sur un attribut scalaire
- find_by_field : premier element dont l'attribut vaut une valeur
- group_by : regroupement par cle, ordre d'apparition conserve
- unique_keys : cles distinctes, ordre de premiere apparition
"""

from collections.abc import Callable, Hashable, Iterable
from typing import Any, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def filter_by_field(items: Iterable[T], field: str, value: Any) -> list[T]:
    """Elements dont l'attribut `field` est egal a `value`."""
    return [item for item in items if getattr(item, field) == value]


def find_by_field(items: Iterable[T], field: str, value: Any) -> Optional[T]:
    """Premier element dont l'attribut `field` vaut `value`, sinon None."""
    return next((item for item in items if getattr(item, field) == value), None)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Regroupe les elements par cle (les cles suivent l'ordre d'apparition)."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def unique_keys(items: Iterable[T], key: Callable[[T], K]) -> list[K]:
    """Cles distinctes dans l'ordre de premiere apparition."""
    seen: dict[K, None] = {}
    for item in items:
        seen.setdefault(key(item), None)
    return list(seen)
