"""
Clients API TMDB.

Ce module fournit les adaptateurs pour communiquer avec TMDB:
- HttpURLDownloader: Telechargement HTTP (httpx) avec timeouts
- TMDBURLBuilder: Construction des URLs de requete
- TMDBMovieClient: Films mieux notes/populaires, critiques, videos
- TMDBConfigurationClient: Configuration distante
- TMDBConfigurationCacheManager: Cache local de la configuration avec TTL
- TMDBAssetURLFactory: URLs des images (affiches, fonds)

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from popmovies.adapters.api.asset_url_factory import TMDBAssetURLFactory
from popmovies.adapters.api.configuration_cache import (
    ConfigurationSource,
    TMDBConfigurationCacheManager,
)
from popmovies.adapters.api.configuration_client import TMDBConfigurationClient
from popmovies.adapters.api.downloader import HttpURLDownloader
from popmovies.adapters.api.movie_client import TMDBMovieClient
from popmovies.adapters.api.url_builder import Endpoint, QueryParamKey, TMDBURLBuilder

__all__ = [
    "HttpURLDownloader",
    "Endpoint",
    "QueryParamKey",
    "TMDBURLBuilder",
    "TMDBMovieClient",
    "TMDBConfigurationClient",
    "ConfigurationSource",
    "TMDBConfigurationCacheManager",
    "TMDBAssetURLFactory",
]
