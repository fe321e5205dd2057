"""
Fixtures pytest partagees pour les tests PopMovies.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IURLDownloader, IConfigurationClient)
- Configuration TMDB et films types
- Settings de test avec chemins temporaires
"""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from popmovies.config import Settings
from popmovies.core.ports.api_clients import IConfigurationClient, IURLDownloader
from popmovies.core.value_objects import Configuration, ImageSize, Movie


@pytest.fixture
def mock_downloader() -> AsyncMock:
    """
    Mock de IURLDownloader pour les tests.

    La valeur de retour de download() doit etre configuree dans chaque test.
    """
    return AsyncMock(spec=IURLDownloader)


@pytest.fixture
def mock_configuration_client(tmdb_configuration: Configuration) -> AsyncMock:
    """Mock de IConfigurationClient retournant la configuration type."""
    mock = AsyncMock(spec=IConfigurationClient)
    mock.get_configuration.return_value = tmdb_configuration
    return mock


@pytest.fixture
def tmdb_configuration() -> Configuration:
    """Configuration TMDB type (equivalente a TMDB_CONFIGURATION_RESPONSE)."""
    return Configuration(
        asset_base_url="http://image.tmdb.org/t/p/",
        asset_secure_base_url="https://image.tmdb.org/t/p/",
        backdrop_sizes=(ImageSize.W_300, ImageSize.W_780, ImageSize.W_1280, ImageSize.ORIGINAL),
        logo_sizes=(
            ImageSize.W_45,
            ImageSize.W_92,
            ImageSize.W_154,
            ImageSize.W_185,
            ImageSize.W_300,
            ImageSize.W_500,
            ImageSize.ORIGINAL,
        ),
        poster_sizes=(
            ImageSize.W_92,
            ImageSize.W_154,
            ImageSize.W_185,
            ImageSize.W_342,
            ImageSize.W_500,
            ImageSize.W_780,
            ImageSize.ORIGINAL,
        ),
        profile_sizes=(ImageSize.W_45, ImageSize.W_185, ImageSize.H_632, ImageSize.ORIGINAL),
        still_sizes=(ImageSize.W_92, ImageSize.W_185, ImageSize.W_300, ImageSize.ORIGINAL),
    )


@pytest.fixture
def inception() -> Movie:
    """Movie type (equivalent a TMDB_MOVIE_INCEPTION)."""
    return Movie(
        poster_path="/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        adult=False,
        overview="Cobb, a skilled thief who commits corporate espionage...",
        release_date=date(2010, 7, 15),
        genre_ids=(28, 878, 12),
        id=27205,
        original_title="Inception",
        original_language="en",
        title="Inception",
        backdrop_path="/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
        popularity=83.952,
        vote_count=34000,
        video=False,
        vote_average=8.4,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le cache et les logs de chaque test.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        tmdb_base_url="https://api.themoviedb.org/3/",
        config_cache_file=tmp_path / "cache" / "tmdb_remote_config.json",
        config_cache_ttl_days=3,
        http_connect_timeout=5.0,
        http_read_timeout=5.0,
        log_file=tmp_path / "test.log",
    )
