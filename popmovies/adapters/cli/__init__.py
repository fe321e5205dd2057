"""
Interface ligne de commande (Typer + Rich).

Re-exporte les commandes publiques montees par popmovies.main.
"""

from popmovies.adapters.cli.commands import (
    configuration,
    popular,
    poster,
    reviews,
    top_rated,
    videos,
)

__all__ = [
    "top_rated",
    "popular",
    "reviews",
    "videos",
    "poster",
    "configuration",
]
