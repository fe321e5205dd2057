"""
Point d'entrée CLI de PopMovies.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from .adapters.cli import (
    configuration,
    popular,
    poster,
    reviews,
    top_rated,
    videos,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

VERSION = "0.1.0"

app = typer.Typer(
    name="popmovies",
    help="Films populaires et mieux notes depuis TMDB",
)
container = Container()

# Monter les commandes depuis commands.py
app.command(name="top-rated")(top_rated)
app.command()(popular)
app.command()(reviews)
app.command()(videos)
app.command()(poster)
app.command()(configuration)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration PopMovies")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL de l'API : {config.tmdb_base_url}")
    typer.echo(f"Langue : {config.tmdb_language or 'défaut TMDB'}")
    typer.echo(f"Cache de configuration : {config.config_cache_file}")
    typer.echo(f"TTL du cache : {config.config_cache_ttl_days} jours")
    typer.echo(
        f"Timeouts HTTP : connexion {config.http_connect_timeout}s,"
        f" lecture {config.http_read_timeout}s"
    )
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"PopMovies v{VERSION}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de PopMovies", version=VERSION)

    app()


if __name__ == "__main__":
    main()
