"""
Container d'injection de dependances via dependency-injector.

Assemble la couche d'acces TMDB a partir des Settings : telechargeur HTTP
partage, clients, cache de configuration et fabrique d'URLs d'images.
"""

from dependency_injector import containers, providers

from .adapters.api.asset_url_factory import TMDBAssetURLFactory
from .adapters.api.configuration_cache import TMDBConfigurationCacheManager
from .adapters.api.configuration_client import TMDBConfigurationClient
from .adapters.api.downloader import HttpURLDownloader
from .adapters.api.movie_client import TMDBMovieClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        await container.configuration_cache().init()  # Une seule fois
        movie_client = container.movie_client()
        asset_urls = container.asset_url_factory()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Telechargeur HTTP - Singleton pour partager le client httpx
    downloader = providers.Singleton(
        HttpURLDownloader,
        connect_timeout=config.provided.http_connect_timeout,
        read_timeout=config.provided.http_read_timeout,
    )

    # Clients API - Singleton avec api_key depuis config
    # Si api_key est None, les commandes CLI refusent de s'executer
    # (verification via config.tmdb_enabled)
    configuration_client = providers.Singleton(
        TMDBConfigurationClient,
        tmdb_base_url=config.provided.tmdb_base_url,
        api_key=config.provided.tmdb_api_key,
        downloader=downloader,
        language=config.provided.tmdb_language,
    )

    movie_client = providers.Singleton(
        TMDBMovieClient,
        tmdb_base_url=config.provided.tmdb_base_url,
        api_key=config.provided.tmdb_api_key,
        downloader=downloader,
        language=config.provided.tmdb_language,
    )

    # Cache de configuration - Singleton : source unique de la configuration
    configuration_cache = providers.Singleton(
        TMDBConfigurationCacheManager,
        configuration_client=configuration_client,
        cache_file=config.provided.config_cache_file,
        ttl_days=config.provided.config_cache_ttl_days,
    )

    asset_url_factory = providers.Singleton(
        TMDBAssetURLFactory,
        configuration_cache=configuration_cache,
    )
