"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- async_command : decorateur transformant une fonction async en commande sync
"""

import asyncio
import inspect
from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from veezi.adapters.api.errors import VeeziError
from veezi.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("veezi")
    try:
        yield
    finally:
        loguru_logger.enable("veezi")


def with_container(requires_api: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Le client Veezi est ferme a la fin de la commande. Une VeeziError est
    affichee puis convertie en code de sortie 1.

    Args:
        requires_api: Si True (defaut), exige un jeton d'acces configure.

    Usage:
        @with_container()
        async def my_command(container, ...):
            client = container.veezi_client()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_api and not container.config().api_enabled:
                console.print("[red]VEEZI_ACCESS_TOKEN n'est pas configure.[/red]")
                raise typer.Exit(code=1)
            client = None
            try:
                if requires_api:
                    client = container.veezi_client()
                return await func(container, *args, **kwargs)
            except VeeziError as e:
                console.print(f"[red]Erreur API Veezi:[/red] {e}")
                raise typer.Exit(code=1) from e
            finally:
                if client is not None:
                    await client.close()
        return wrapper
    return decorator


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.

    Usage:
        @async_command
        @with_container()
        async def my_command(container, ...):
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        asyncio.run(func(*args, **kwargs))
    # Preserver les annotations Typer, sans le parametre container injecte
    signature = inspect.signature(func)
    params = [p for name, p in signature.parameters.items() if name != "container"]
    wrapper.__signature__ = signature.replace(parameters=params)
    return wrapper
