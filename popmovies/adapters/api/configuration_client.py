"""
Client de la configuration distante TMDB (endpoint /configuration).
"""

from popmovies.adapters.api.base_client import TMDBBaseClient
from popmovies.adapters.api.transformers import transform_configuration
from popmovies.adapters.api.url_builder import Endpoint
from popmovies.core.ports.api_clients import IConfigurationClient
from popmovies.core.value_objects import Configuration


class TMDBConfigurationClient(TMDBBaseClient, IConfigurationClient):
    """Recupere la configuration TMDB courante (URLs et tailles d'images)."""

    async def get_configuration(self) -> Configuration:
        """
        Telecharge et transforme la configuration TMDB.

        Raises:
            DataAccessRequestError: URL invalide ou echec du telechargement
            DataAccessParsingError: Reponse JSON invalide ou incomplete
        """
        url = self._build(self._url_builder(Endpoint.CONFIGURATION))
        return await self._query_tmdb(url, transform_configuration)
