"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour l'API TMDB.
Les implémentations (adaptateurs) fournissent les clients HTTP concrets.
"""

from abc import ABC, abstractmethod

from popmovies.core.value_objects import Configuration, DataPage, Movie, Review, VideoLink


class IURLDownloader(ABC):
    """
    Interface de telechargement du contenu d'une URL.

    Les implementations levent une exception httpx.HTTPError en cas
    d'echec de transport ou de code de reponse different de 200.
    """

    @abstractmethod
    async def download(self, url: str) -> str:
        """
        Telecharge le corps de la reponse a une requete GET.

        Args :
            url : URL complete a telecharger

        Retourne :
            Corps de la reponse decode en UTF-8
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...


class IConfigurationClient(ABC):
    """Interface de recuperation de la configuration distante TMDB."""

    @abstractmethod
    async def get_configuration(self) -> Configuration:
        """
        Recupere la configuration courante depuis TMDB.

        Raises :
            DataAccessRequestError : TMDB injoignable
            DataAccessParsingError : Reponse inexploitable
        """
        ...


class IMovieClient(ABC):
    """
    Interface des requetes de films TMDB.

    Toutes les operations paginees exigent un numero de page dans
    [1, 1000] et levent ValueError sinon, avant toute requete.
    """

    @abstractmethod
    async def get_top_rated_movies(self, page_number: int) -> DataPage[Movie]:
        """Retourne une page des films les mieux notes."""
        ...

    @abstractmethod
    async def get_popular_movies(self, page_number: int) -> DataPage[Movie]:
        """Retourne une page des films populaires."""
        ...

    @abstractmethod
    async def get_movie_reviews(self, movie_id: int, page_number: int) -> DataPage[Review]:
        """Retourne une page des critiques d'un film."""
        ...

    @abstractmethod
    async def get_movie_video_links(self, movie_id: int) -> list[VideoLink]:
        """Retourne les liens video d'un film (non pagine)."""
        ...
