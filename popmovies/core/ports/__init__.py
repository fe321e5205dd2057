"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour le service TMDB
- IURLDownloader : Telechargement HTTP brut
- IConfigurationClient : Configuration distante TMDB
- IMovieClient : Listes de films, critiques et videos
"""

from popmovies.core.ports.api_clients import (
    IConfigurationClient,
    IMovieClient,
    IURLDownloader,
)

__all__ = [
    "IURLDownloader",
    "IConfigurationClient",
    "IMovieClient",
]
