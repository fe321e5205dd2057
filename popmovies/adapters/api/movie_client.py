"""
Client TMDB pour les listes de films, critiques et videos.

Implemente l'interface IMovieClient pour TMDB (The Movie Database).
Les numeros de page sont valides avant toute requete : une page hors de
[1, 1000] est une erreur de l'appelant (ValueError), pas une erreur reseau.

Usage:
    downloader = HttpURLDownloader(connect_timeout=15.0, read_timeout=10.0)
    client = TMDBMovieClient("https://api.themoviedb.org/3/", "your_key", downloader)
    page = await client.get_popular_movies(1)
    videos = await client.get_movie_video_links(page.results[0].id)
    await downloader.close()
"""

from popmovies.adapters.api.base_client import TMDBBaseClient
from popmovies.adapters.api.transformers import (
    DataPageTransformer,
    ResultListTransformer,
    transform_movie,
    transform_review,
    transform_video_link,
)
from popmovies.adapters.api.url_builder import Endpoint, QueryParamKey
from popmovies.core.ports.api_clients import IMovieClient
from popmovies.core.value_objects import DataPage, Movie, Review, VideoLink
from popmovies.utils.constants import MAX_PAGE_NUMBER, MIN_PAGE_NUMBER


def _check_page_number(page_number: int) -> None:
    if not MIN_PAGE_NUMBER <= page_number <= MAX_PAGE_NUMBER:
        raise ValueError(
            f"page_number must be in range [{MIN_PAGE_NUMBER}, {MAX_PAGE_NUMBER}]."
        )


class TMDBMovieClient(TMDBBaseClient, IMovieClient):
    """
    Client API TMDB pour les films.

    Implemente IMovieClient avec:
    - Films les mieux notes et films populaires (pagines)
    - Critiques d'un film (paginees)
    - Liens video d'un film (liste complete)

    Le meme transformateur de film sert aux deux listes de films via
    le transformateur de page generique.

    Example:
        client = TMDBMovieClient(base_url, api_key, downloader)
        page = await client.get_top_rated_movies(1)
        for movie in page.results:
            print(f"{movie.title} ({movie.year}) - {movie.vote_average}")
    """

    async def get_top_rated_movies(self, page_number: int) -> DataPage[Movie]:
        """
        Recupere une page des films les mieux notes.

        Args:
            page_number: Numero de page dans [1, 1000]

        Returns:
            DataPage de Movie

        Raises:
            ValueError: Numero de page hors limites
            DataAccessRequestError: Echec de la requete
            DataAccessParsingError: Reponse inexploitable
        """
        return await self._get_movie_page(Endpoint.MOVIES_TOP_RATED, page_number)

    async def get_popular_movies(self, page_number: int) -> DataPage[Movie]:
        """
        Recupere une page des films populaires.

        Args:
            page_number: Numero de page dans [1, 1000]
        """
        return await self._get_movie_page(Endpoint.MOVIES_POPULAR, page_number)

    async def get_movie_reviews(self, movie_id: int, page_number: int) -> DataPage[Review]:
        """
        Recupere une page des critiques d'un film.

        Args:
            movie_id: ID TMDB du film
            page_number: Numero de page dans [1, 1000]
        """
        _check_page_number(page_number)
        builder = (
            self._url_builder(Endpoint.MOVIE_REVIEWS)
            .with_record_id(movie_id)
            .with_query_param(QueryParamKey.PAGE, str(page_number))
        )
        return await self._query_tmdb(
            self._build(builder), DataPageTransformer(transform_review)
        )

    async def get_movie_video_links(self, movie_id: int) -> list[VideoLink]:
        """
        Recupere les liens video d'un film.

        La reponse TMDB n'est pas paginee : la liste "results" est
        retournee directement.

        Args:
            movie_id: ID TMDB du film
        """
        builder = self._url_builder(Endpoint.MOVIE_VIDEOS).with_record_id(movie_id)
        return await self._query_tmdb(
            self._build(builder), ResultListTransformer(transform_video_link)
        )

    async def _get_movie_page(self, endpoint: Endpoint, page_number: int) -> DataPage[Movie]:
        _check_page_number(page_number)
        builder = self._url_builder(endpoint).with_query_param(
            QueryParamKey.PAGE, str(page_number)
        )
        return await self._query_tmdb(
            self._build(builder), DataPageTransformer(transform_movie)
        )
