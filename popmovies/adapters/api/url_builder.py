"""
Construction des URLs de requete TMDB.

Compose l'URL de base de l'API, le chemin de l'endpoint (avec un ID
d'enregistrement optionnel), la cle API et les parametres de requete.

Usage:
    url = (
        TMDBURLBuilder("https://api.themoviedb.org/3/", api_key, Endpoint.MOVIE_REVIEWS)
        .with_record_id(550)
        .with_query_param(QueryParamKey.PAGE, "2")
        .build()
    )
"""

from enum import Enum
from typing import Optional

import httpx

from popmovies.core.exceptions import MalformedURLError
from popmovies.utils.constants import API_KEY_QUERY_PARAM

RECORD_ID_PLACEHOLDER = "{id}"


class Endpoint(Enum):
    """Endpoints TMDB, relatifs a l'URL de base de l'API.

    Les endpoints contenant {id} exigent un ID d'enregistrement (ID de film).
    """

    CONFIGURATION = "configuration"
    MOVIES_POPULAR = "movie/popular"
    MOVIES_TOP_RATED = "movie/top_rated"
    MOVIE_REVIEWS = "movie/{id}/reviews"
    MOVIE_VIDEOS = "movie/{id}/videos"

    @property
    def requires_record_id(self) -> bool:
        """Indique si le chemin contient le marqueur d'ID."""
        return RECORD_ID_PLACEHOLDER in self.value


class QueryParamKey(Enum):
    """Parametres de requete TMDB acceptes par le builder.

    La cle API n'en fait pas partie : elle est imposee par le constructeur.
    """

    PAGE = "page"
    LANGUAGE = "language"


class TMDBURLBuilder:
    """
    Builder d'URL de requete TMDB.

    Les parametres de requete sont stockes par cle (la derniere valeur
    ecrite l'emporte). La cle API est toujours emise en premier.

    Example:
        builder = TMDBURLBuilder("http://api.example/3/", "abc", Endpoint.MOVIES_POPULAR)
        url = builder.with_query_param(QueryParamKey.PAGE, "1").build()
        # http://api.example/3/movie/popular?api_key=abc&page=1
    """

    def __init__(self, tmdb_base_url: str, api_key: str, endpoint: Endpoint) -> None:
        """
        Initialise le builder.

        Args:
            tmdb_base_url: URL de base de l'API (ex: "https://api.themoviedb.org/3/")
            api_key: Cle API TMDB v3
            endpoint: Endpoint cible
        """
        self._tmdb_base_url = tmdb_base_url
        self._api_key = api_key
        self._endpoint = endpoint
        self._record_id: Optional[int] = None
        self._query_params: dict[QueryParamKey, str] = {}

    def with_record_id(self, record_id: int) -> "TMDBURLBuilder":
        """
        Renseigne l'ID d'enregistrement substitue dans le chemin.

        Raises:
            RuntimeError: Si l'endpoint ne contient pas de marqueur d'ID
        """
        if not self._endpoint.requires_record_id:
            raise RuntimeError(
                f"Endpoint {self._endpoint.name} does not take a record id."
            )
        self._record_id = record_id
        return self

    def with_query_param(self, key: QueryParamKey, value: str) -> "TMDBURLBuilder":
        """Ajoute (ou remplace) un parametre de requete."""
        self._query_params[key] = value
        return self

    def build(self) -> httpx.URL:
        """
        Construit l'URL complete.

        Returns:
            URL avec chemin d'endpoint, cle API puis parametres de requete

        Raises:
            MalformedURLError: URL de base sans schema ou invalide
            RuntimeError: ID d'enregistrement requis mais non fourni
        """
        try:
            base_url = httpx.URL(self._tmdb_base_url)
        except httpx.InvalidURL as e:
            raise MalformedURLError(f"Invalid base URL: {self._tmdb_base_url}") from e
        if not base_url.scheme or not base_url.host:
            raise MalformedURLError(f"Base URL has no scheme: {self._tmdb_base_url}")

        endpoint_path = self._endpoint.value
        if self._endpoint.requires_record_id:
            if self._record_id is None:
                raise RuntimeError(
                    f"Endpoint {self._endpoint.name} requires a record id."
                )
            endpoint_path = endpoint_path.replace(
                RECORD_ID_PLACEHOLDER, str(self._record_id)
            )

        path = base_url.path.rstrip("/") + "/" + endpoint_path
        params = [(API_KEY_QUERY_PARAM, self._api_key)]
        params.extend((key.value, value) for key, value in self._query_params.items())
        return base_url.copy_with(path=path, params=params)


def redact_api_key(url: httpx.URL) -> str:
    """Retourne l'URL sans la cle API, pour les logs."""
    return str(url.copy_remove_param(API_KEY_QUERY_PARAM))
