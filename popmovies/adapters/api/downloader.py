"""
Telechargement HTTP pour les clients TMDB.

Effectue des requetes GET avec des timeouts de connexion et de lecture
configurables, et retourne le corps brut de la reponse.

Usage:
    downloader = HttpURLDownloader(connect_timeout=15.0, read_timeout=10.0)
    body = await downloader.download("https://api.themoviedb.org/3/configuration?api_key=xxx")
    await downloader.close()
"""

from typing import Optional

import httpx
from loguru import logger

from popmovies.core.ports.api_clients import IURLDownloader


class HttpURLDownloader(IURLDownloader):
    """
    Telechargeur HTTP base sur httpx.AsyncClient.

    Le client HTTP est cree paresseusement et partage entre les requetes.
    Seul le code 200 est accepte : tout autre code leve httpx.HTTPStatusError.

    Example:
        downloader = HttpURLDownloader(connect_timeout=5.0, read_timeout=5.0)
        content = await downloader.download(url)
    """

    def __init__(self, connect_timeout: float, read_timeout: float) -> None:
        """
        Initialise le telechargeur.

        Args:
            connect_timeout: Timeout de connexion en secondes (>= 0)
            read_timeout: Timeout de lecture en secondes (>= 0)
        """
        if connect_timeout < 0:
            raise ValueError("connect_timeout must be non-negative.")
        if read_timeout < 0:
            raise ValueError("read_timeout must be non-negative.")
        self._timeout = httpx.Timeout(
            read_timeout, connect=connect_timeout, read=read_timeout
        )
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure avec les timeouts
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def download(self, url: str) -> str:
        """
        Telecharge le contenu d'une URL.

        Args:
            url: URL complete (cle API incluse)

        Returns:
            Corps de la reponse decode en UTF-8

        Raises:
            httpx.HTTPStatusError: Code de reponse different de 200
            httpx.HTTPError: Erreur de transport (connexion, timeout...)
        """
        client = self._get_client()
        response = await client.get(url)
        if response.status_code != 200:
            raise httpx.HTTPStatusError(
                f"Response code of 200 expected. Got: {response.status_code}",
                request=response.request,
                response=response,
            )
        response.encoding = "utf-8"
        return response.text

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
        logger.debug("Client HTTP ferme")
