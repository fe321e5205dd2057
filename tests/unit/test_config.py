"""
Tests pour Settings (pydantic-settings) et l'assemblage du Container.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from popmovies.adapters.api import (
    HttpURLDownloader,
    TMDBAssetURLFactory,
    TMDBConfigurationCacheManager,
    TMDBMovieClient,
)
from popmovies.config import Settings
from popmovies.container import Container


class TestSettings:
    """Tests pour Settings."""

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        """Les variables POPMOVIES_* surchargent les valeurs par defaut."""
        monkeypatch.setenv("POPMOVIES_TMDB_API_KEY", "env_key")
        monkeypatch.setenv("POPMOVIES_CONFIG_CACHE_TTL_DAYS", "7")

        settings = Settings()

        assert settings.tmdb_api_key == "env_key"
        assert settings.config_cache_ttl_days == 7
        assert settings.tmdb_enabled

    def test_tmdb_disabled_without_key(self):
        """Sans cle API, tmdb_enabled est faux."""
        assert not Settings(tmdb_api_key=None).tmdb_enabled
        assert not Settings(tmdb_api_key="").tmdb_enabled

    def test_paths_are_expanded(self):
        """~ est etendu vers le repertoire home."""
        settings = Settings(config_cache_file="~/popmovies/cache.json")
        assert settings.config_cache_file == Path.home() / "popmovies" / "cache.json"

    def test_zero_ttl_rejected(self):
        """Un TTL nul est refuse des le chargement."""
        with pytest.raises(ValidationError):
            Settings(config_cache_ttl_days=0)


class TestContainer:
    """Tests de l'assemblage des dependances."""

    def test_wiring_from_settings(self, test_settings: Settings):
        """Les singletons sont construits a partir des Settings."""
        container = Container()
        container.config.override(test_settings)

        cache = container.configuration_cache()
        factory = container.asset_url_factory()

        assert isinstance(container.downloader(), HttpURLDownloader)
        assert isinstance(container.movie_client(), TMDBMovieClient)
        assert isinstance(cache, TMDBConfigurationCacheManager)
        assert isinstance(factory, TMDBAssetURLFactory)
        assert cache.cache_file == test_settings.config_cache_file
        assert container.configuration_cache() is cache
