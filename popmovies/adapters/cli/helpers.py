"""
Utilitaires partages pour les commandes CLI de PopMovies.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from popmovies.container import Container
from popmovies.core.exceptions import DataAccessError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("popmovies")
    try:
        yield
    finally:
        loguru_logger.enable("popmovies")


def with_container(requires_configuration: bool = False):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Verifie la presence de la cle API, convertit les erreurs d'acces TMDB
    en message d'erreur + code de sortie 1, et ferme le client HTTP.

    Args:
        requires_configuration: Si True, initialise le cache de configuration
            TMDB avant la commande et attend son rafraichissement eventuel
            apres l'affichage (pour que le fichier de cache soit ecrit).

    Usage:
        @with_container(requires_configuration=True)
        async def my_command(container, ...):
            factory = container.asset_url_factory()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if not container.config().tmdb_enabled:
                console.print(
                    "[red]Cle API TMDB manquante.[/red] "
                    "Definir la variable POPMOVIES_TMDB_API_KEY."
                )
                raise typer.Exit(code=1)

            try:
                if requires_configuration:
                    await container.configuration_cache().init()
                result = await func(container, *args, **kwargs)
                if requires_configuration:
                    await container.configuration_cache().wait_for_refresh()
                return result
            except DataAccessError as e:
                console.print(f"[red]Erreur TMDB :[/red] {e}")
                raise typer.Exit(code=1) from e
            finally:
                await container.downloader().close()
        return wrapper
    return decorator
