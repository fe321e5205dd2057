"""
Tests pour les transformateurs JSON TMDB.

Verifie:
- La transformation des reponses fixtures en objets valeur
- Les erreurs de parsing nommant le champ fautif
- Le cas de la page vide (total_pages == 0)
- L'aller-retour configuration -> JSON -> configuration
"""

import copy
from datetime import date

import pytest

from popmovies.adapters.api.transformers import (
    DataPageTransformer,
    ResultListTransformer,
    configuration_to_json,
    transform_configuration,
    transform_movie,
    transform_review,
    transform_video_link,
)
from popmovies.core.exceptions import DataAccessParsingError
from popmovies.core.value_objects import Configuration, ImageSize, Movie, VideoType
from tests.fixtures.tmdb_responses import (
    TMDB_CONFIGURATION_RESPONSE,
    TMDB_CONFIGURATION_WITH_UNKNOWN_SIZE_RESPONSE,
    TMDB_EMPTY_PAGE_RESPONSE,
    TMDB_MOVIE_INCEPTION,
    TMDB_REVIEWS_RESPONSE,
    TMDB_TOP_RATED_RESPONSE,
    TMDB_VIDEOS_RESPONSE,
    TMDB_VIDEOS_UNKNOWN_TYPE_RESPONSE,
)


class TestTransformConfiguration:
    """Tests pour transform_configuration()."""

    def test_full_configuration(self, tmdb_configuration: Configuration):
        """La reponse /configuration doit donner la configuration type."""
        assert transform_configuration(TMDB_CONFIGURATION_RESPONSE) == tmdb_configuration

    def test_unknown_size_is_skipped(self):
        """Un jeton de taille inconnu doit etre ignore, l'ordre conserve."""
        configuration = transform_configuration(TMDB_CONFIGURATION_WITH_UNKNOWN_SIZE_RESPONSE)
        assert configuration.poster_sizes == (
            ImageSize.W_92,
            ImageSize.W_154,
            ImageSize.W_185,
            ImageSize.ORIGINAL,
        )

    def test_missing_images_raises(self):
        """Une reponse sans "images" doit lever une erreur de parsing."""
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_configuration({"change_keys": []})
        assert exc_info.value.field == "images"

    def test_missing_size_list_raises(self):
        """Une liste de tailles absente doit nommer le champ."""
        data = copy.deepcopy(TMDB_CONFIGURATION_RESPONSE)
        del data["images"]["still_sizes"]
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_configuration(data)
        assert exc_info.value.field == "still_sizes"

    def test_non_string_base_url_raises(self):
        """Une URL de base non textuelle doit lever une erreur de parsing."""
        data = copy.deepcopy(TMDB_CONFIGURATION_RESPONSE)
        data["images"]["base_url"] = 42
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_configuration(data)
        assert exc_info.value.field == "base_url"

    def test_round_trip_through_json(self, tmdb_configuration: Configuration):
        """Serialiser puis relire doit redonner une configuration egale."""
        data = configuration_to_json(tmdb_configuration)
        assert data["images"]["poster_sizes"][0] == "w92"
        assert transform_configuration(data) == tmdb_configuration


class TestTransformMovie:
    """Tests pour transform_movie()."""

    def test_movie_fields(self, inception: Movie):
        """Un film TMDB doit donner le Movie type."""
        assert transform_movie(TMDB_MOVIE_INCEPTION) == inception

    def test_integer_vote_average_is_float(self):
        """Une note entiere doit etre convertie en float."""
        data = dict(TMDB_MOVIE_INCEPTION, vote_average=8)
        movie = transform_movie(data)
        assert movie.vote_average == 8.0
        assert isinstance(movie.vote_average, float)

    def test_invalid_release_date_raises(self):
        """Une date hors format YYYY-MM-DD doit nommer release_date."""
        data = dict(TMDB_MOVIE_INCEPTION, release_date="15/07/2010")
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert exc_info.value.field == "release_date"

    def test_empty_release_date_raises(self):
        """Une date vide doit lever une erreur de parsing."""
        data = dict(TMDB_MOVIE_INCEPTION, release_date="")
        with pytest.raises(DataAccessParsingError):
            transform_movie(data)

    def test_null_poster_path_raises(self):
        """Un champ null doit etre refuse (tous les champs sont requis)."""
        data = dict(TMDB_MOVIE_INCEPTION, poster_path=None)
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert exc_info.value.field == "poster_path"

    def test_missing_id_raises(self):
        """Un champ manquant doit nommer le champ."""
        data = dict(TMDB_MOVIE_INCEPTION)
        del data["id"]
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert exc_info.value.field == "id"

    def test_popularity_out_of_float_range_raises(self):
        """Un entier trop grand pour un float doit nommer le champ."""
        data = dict(TMDB_MOVIE_INCEPTION, popularity=int("9" * 400))
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert exc_info.value.field == "popularity"
        assert isinstance(exc_info.value.cause, OverflowError)

    def test_boolean_id_raises(self):
        """Un booleen ne doit pas etre accepte comme entier."""
        data = dict(TMDB_MOVIE_INCEPTION, id=True)
        with pytest.raises(DataAccessParsingError):
            transform_movie(data)

    def test_non_integer_genre_id_raises(self):
        """Un genre non entier doit nommer genre_ids."""
        data = dict(TMDB_MOVIE_INCEPTION, genre_ids=[28, "878"])
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert exc_info.value.field == "genre_ids"

    def test_empty_genre_ids_wrapped_as_parsing_error(self):
        """Une violation d'invariant du modele doit devenir une erreur de parsing."""
        data = dict(TMDB_MOVIE_INCEPTION, genre_ids=[])
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_movie(data)
        assert isinstance(exc_info.value.cause, ValueError)


class TestTransformReviewAndVideo:
    """Tests pour transform_review() et transform_video_link()."""

    def test_review(self):
        """Une critique TMDB doit donner un Review."""
        review = transform_review(TMDB_REVIEWS_RESPONSE["results"][0])
        assert review.id == "5b1c13b9c3a36848f2026384"
        assert review.author == "Goddard"
        assert review.content.startswith("Pretty awesome movie.")

    def test_video_link(self):
        """Une video TMDB doit donner un VideoLink."""
        video_link = transform_video_link(TMDB_VIDEOS_RESPONSE["results"][0])
        assert video_link.key == "BdJKm16Co6M"
        assert video_link.size == 1080
        assert video_link.type is VideoType.TRAILER

    def test_unknown_video_type_raises(self):
        """Un type de video inconnu doit lever une erreur nommant "type"."""
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_video_link(TMDB_VIDEOS_UNKNOWN_TYPE_RESPONSE["results"][0])
        assert exc_info.value.field == "type"

    def test_zero_video_size_raises(self):
        """Une taille nulle doit devenir une erreur de parsing sur size."""
        data = dict(TMDB_VIDEOS_RESPONSE["results"][0], size=0)
        with pytest.raises(DataAccessParsingError) as exc_info:
            transform_video_link(data)
        assert exc_info.value.field == "size"


class TestDataPageTransformer:
    """Tests pour DataPageTransformer."""

    def test_movie_page(self):
        """Une page de films doit conserver l'ordre et les metadonnees."""
        page = DataPageTransformer(transform_movie)(TMDB_TOP_RATED_RESPONSE)
        assert page.page_number == 1
        assert page.total_page_count == 455
        assert page.total_result_count == 9092
        assert [movie.id for movie in page.results] == [278, 27205]
        assert page.results[0].release_date == date(1994, 9, 23)

    def test_zero_total_pages_forces_page_zero(self):
        """total_pages == 0 doit donner une page vide numerotee 0."""
        page = DataPageTransformer(transform_review)(TMDB_EMPTY_PAGE_RESPONSE)
        assert page.page_number == 0
        assert page.total_page_count == 0
        assert page.total_result_count == 0
        assert page.is_empty

    def test_missing_total_pages_raises(self):
        """Des metadonnees manquantes doivent nommer le champ."""
        data = dict(TMDB_REVIEWS_RESPONSE)
        del data["total_pages"]
        with pytest.raises(DataAccessParsingError) as exc_info:
            DataPageTransformer(transform_review)(data)
        assert exc_info.value.field == "total_pages"

    def test_inconsistent_metadata_raises(self):
        """Une page au-dela du total doit devenir une erreur de parsing."""
        data = dict(TMDB_REVIEWS_RESPONSE, page=3)
        with pytest.raises(DataAccessParsingError) as exc_info:
            DataPageTransformer(transform_review)(data)
        assert exc_info.value.field == "page"

    def test_non_object_result_raises(self):
        """Un element de results non objet doit lever une erreur de parsing."""
        data = dict(TMDB_REVIEWS_RESPONSE, results=["not an object"])
        with pytest.raises(DataAccessParsingError) as exc_info:
            DataPageTransformer(transform_review)(data)
        assert exc_info.value.field == "results"

    def test_element_error_propagates(self):
        """Une erreur sur un element doit faire echouer toute la page."""
        data = dict(TMDB_TOP_RATED_RESPONSE)
        data["results"] = [dict(TMDB_MOVIE_INCEPTION, release_date="soon")]
        with pytest.raises(DataAccessParsingError) as exc_info:
            DataPageTransformer(transform_movie)(data)
        assert exc_info.value.field == "release_date"


class TestResultListTransformer:
    """Tests pour ResultListTransformer."""

    def test_video_list(self):
        """La liste results doit etre transformee dans l'ordre."""
        video_links = ResultListTransformer(transform_video_link)(TMDB_VIDEOS_RESPONSE)
        assert [video_link.type for video_link in video_links] == [
            VideoType.TRAILER,
            VideoType.FEATURETTE,
        ]

    def test_empty_results(self):
        """Une liste vide doit donner une liste vide."""
        assert ResultListTransformer(transform_video_link)({"id": 1, "results": []}) == []

    def test_missing_results_raises(self):
        """Une reponse sans results doit lever une erreur de parsing."""
        with pytest.raises(DataAccessParsingError):
            ResultListTransformer(transform_video_link)({"id": 1})
