"""
Base commune des clients TMDB.

Tous les appels passent par _query_tmdb (telechargement, decodage JSON,
transformation) pour que l'encapsulation des erreurs soit uniforme :
- erreurs d'URL et de transport -> DataAccessRequestError
- JSON invalide ou champ inexploitable -> DataAccessParsingError
"""

import json
from typing import Optional, TypeVar

import httpx
from loguru import logger

from popmovies.adapters.api.transformers import JSONTransformer
from popmovies.adapters.api.url_builder import (
    Endpoint,
    QueryParamKey,
    TMDBURLBuilder,
    redact_api_key,
)
from popmovies.core.exceptions import (
    DataAccessParsingError,
    DataAccessRequestError,
    MalformedURLError,
)
from popmovies.core.ports.api_clients import IURLDownloader

T = TypeVar("T")


class TMDBBaseClient:
    """
    Client TMDB de base : construction d'URL et requete typee.

    Attributes:
        _tmdb_base_url: URL de base de l'API
        _api_key: Cle API TMDB v3 (parametre api_key)
        _downloader: Telechargeur HTTP partage
        _language: Langue des reponses (parametre language), optionnelle
    """

    def __init__(
        self,
        tmdb_base_url: str,
        api_key: str,
        downloader: IURLDownloader,
        language: Optional[str] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            tmdb_base_url: URL de base de l'API (ex: "https://api.themoviedb.org/3/")
            api_key: Cle API TMDB v3
            downloader: Telechargeur HTTP
            language: Code de langue TMDB (ex: "fr-FR"), None pour la langue par defaut
        """
        self._tmdb_base_url = tmdb_base_url
        self._api_key = api_key
        self._downloader = downloader
        self._language = language

    def _url_builder(self, endpoint: Endpoint) -> TMDBURLBuilder:
        """Retourne un builder pre-rempli (URL de base, cle API, langue)."""
        builder = TMDBURLBuilder(self._tmdb_base_url, self._api_key, endpoint)
        if self._language:
            builder.with_query_param(QueryParamKey.LANGUAGE, self._language)
        return builder

    @staticmethod
    def _build(builder: TMDBURLBuilder) -> httpx.URL:
        """Construit l'URL, en convertissant les erreurs de format."""
        try:
            return builder.build()
        except MalformedURLError as e:
            raise DataAccessRequestError("Failed to build request URL.", cause=e) from e

    async def _query_tmdb(self, url: httpx.URL, transformer: JSONTransformer[T]) -> T:
        """
        Telecharge une URL et transforme la reponse JSON.

        Args:
            url: URL complete de la requete
            transformer: Transformateur dict -> T

        Returns:
            Objet transforme

        Raises:
            DataAccessRequestError: Echec du telechargement
            DataAccessParsingError: Reponse JSON invalide ou incomplete
        """
        logger.debug("Telechargement du contenu TMDB", url=redact_api_key(url))
        try:
            content = await self._downloader.download(str(url))
        except httpx.HTTPError as e:
            raise DataAccessRequestError("Failed to download URL content.", cause=e) from e

        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            # RecursionError : JSON trop profondement imbrique
            raise DataAccessParsingError("Failed to parse response content.", cause=e) from e
        if not isinstance(data, dict):
            raise DataAccessParsingError("Response content is not a JSON object.")

        logger.debug("Contenu TMDB telecharge", url=redact_api_key(url))
        return transformer(data)
