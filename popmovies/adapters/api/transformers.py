"""
Transformation des reponses JSON TMDB en objets valeur.

Chaque transformateur est une fonction pure dict -> objet valeur qui leve
DataAccessParsingError en nommant le champ fautif. Les transformateurs de
pages et de listes sont generiques : ils recoivent le transformateur
d'element et ne connaissent pas le type concret des resultats.

Usage:
    page_transformer = DataPageTransformer(transform_movie)
    page = page_transformer(json.loads(body))
"""

from datetime import date, datetime
from typing import Any, Callable, Generic, TypeVar

from loguru import logger

from popmovies.core.exceptions import DataAccessParsingError
from popmovies.core.value_objects import (
    Configuration,
    DataPage,
    ImageSize,
    Movie,
    Review,
    VideoLink,
    VideoType,
)
from popmovies.utils.constants import TMDB_DATE_FORMAT

T = TypeVar("T")

JSONObject = dict[str, Any]
JSONTransformer = Callable[[JSONObject], T]

# Cles de la configuration TMDB
IMAGES = "images"
BASE_URL = "base_url"
SECURE_BASE_URL = "secure_base_url"
BACKDROP_SIZES = "backdrop_sizes"
LOGO_SIZES = "logo_sizes"
POSTER_SIZES = "poster_sizes"
PROFILE_SIZES = "profile_sizes"
STILL_SIZES = "still_sizes"

# Cles des reponses paginees
PAGE = "page"
TOTAL_PAGES = "total_pages"
TOTAL_RESULTS = "total_results"
RESULTS = "results"


def _require(data: Any, key: str, expected: type | tuple[type, ...]) -> Any:
    """
    Lit un champ obligatoire et verifie son type.

    Les booleens sont refuses pour les champs numeriques (bool herite de int).

    Raises:
        DataAccessParsingError: Objet non dict, champ absent ou mal type
    """
    if not isinstance(data, dict):
        raise DataAccessParsingError(
            f"Expected a JSON object containing '{key}'", field=key
        )
    if key not in data:
        raise DataAccessParsingError(f"Missing required field '{key}'", field=key)
    value = data[key]
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in expected_types:
        raise DataAccessParsingError(
            f"Field '{key}' has unexpected type bool", field=key
        )
    if not isinstance(value, expected_types):
        raise DataAccessParsingError(
            f"Field '{key}' has unexpected type {type(value).__name__}", field=key
        )
    return value


def _require_list(data: Any, key: str) -> list[Any]:
    return _require(data, key, list)


def _require_float(data: Any, key: str) -> float:
    """
    Lit un champ numerique (entier ou decimal) et le convertit en float.

    Raises:
        DataAccessParsingError: Champ absent, mal type ou hors de la plage d'un float
    """
    value = _require(data, key, (int, float))
    try:
        return float(value)
    except OverflowError as e:
        raise DataAccessParsingError(
            f"Field '{key}' is out of float range", field=key, cause=e
        ) from e


def _parse_release_date(value: str) -> date:
    try:
        return datetime.strptime(value, TMDB_DATE_FORMAT).date()
    except ValueError as e:
        raise DataAccessParsingError(
            f"Field 'release_date' is not a {TMDB_DATE_FORMAT} date: {value!r}",
            field="release_date",
            cause=e,
        ) from e


def _parse_image_sizes(images: JSONObject, key: str) -> tuple[ImageSize, ...]:
    sizes = []
    for index, token in enumerate(_require_list(images, key)):
        if not isinstance(token, str):
            raise DataAccessParsingError(
                f"Field '{key}[{index}]' must be a string", field=key
            )
        image_size = ImageSize.from_tmdb_key(token)
        if image_size is None:
            # Nouvelles tailles TMDB ignorees plutot que fatales
            logger.warning("Taille d'image non reconnue ignoree", field=key, size=token)
            continue
        sizes.append(image_size)
    return tuple(sizes)


def transform_configuration(data: JSONObject) -> Configuration:
    """
    Transforme la reponse de /configuration en Configuration.

    Les jetons de taille inconnus sont ignores avec un avertissement.
    """
    images = _require(data, IMAGES, dict)
    return Configuration(
        asset_base_url=_require(images, BASE_URL, str),
        asset_secure_base_url=_require(images, SECURE_BASE_URL, str),
        backdrop_sizes=_parse_image_sizes(images, BACKDROP_SIZES),
        logo_sizes=_parse_image_sizes(images, LOGO_SIZES),
        poster_sizes=_parse_image_sizes(images, POSTER_SIZES),
        profile_sizes=_parse_image_sizes(images, PROFILE_SIZES),
        still_sizes=_parse_image_sizes(images, STILL_SIZES),
    )


def configuration_to_json(configuration: Configuration) -> JSONObject:
    """Serialise une Configuration au format de la reponse /configuration."""
    return {
        IMAGES: {
            BASE_URL: configuration.asset_base_url,
            SECURE_BASE_URL: configuration.asset_secure_base_url,
            BACKDROP_SIZES: [size.tmdb_key for size in configuration.backdrop_sizes],
            LOGO_SIZES: [size.tmdb_key for size in configuration.logo_sizes],
            POSTER_SIZES: [size.tmdb_key for size in configuration.poster_sizes],
            PROFILE_SIZES: [size.tmdb_key for size in configuration.profile_sizes],
            STILL_SIZES: [size.tmdb_key for size in configuration.still_sizes],
        }
    }


def transform_movie(data: JSONObject) -> Movie:
    """
    Transforme un element de liste de films en Movie.

    Tous les champs sont obligatoires ; release_date doit etre au format
    YYYY-MM-DD. Un poster_path ou backdrop_path null (film sans image) est
    refuse comme un champ manquant et fait echouer toute la page.
    """
    genre_ids = _require_list(data, "genre_ids")
    for index, genre_id in enumerate(genre_ids):
        if isinstance(genre_id, bool) or not isinstance(genre_id, int):
            raise DataAccessParsingError(
                f"Field 'genre_ids[{index}]' must be an integer", field="genre_ids"
            )

    try:
        return Movie(
            poster_path=_require(data, "poster_path", str),
            adult=_require(data, "adult", bool),
            overview=_require(data, "overview", str),
            release_date=_parse_release_date(_require(data, "release_date", str)),
            genre_ids=tuple(genre_ids),
            id=_require(data, "id", int),
            original_title=_require(data, "original_title", str),
            original_language=_require(data, "original_language", str),
            title=_require(data, "title", str),
            backdrop_path=_require(data, "backdrop_path", str),
            popularity=_require_float(data, "popularity"),
            vote_count=_require(data, "vote_count", int),
            video=_require(data, "video", bool),
            vote_average=_require_float(data, "vote_average"),
        )
    except ValueError as e:
        raise DataAccessParsingError(f"Invalid movie: {e}", cause=e) from e


def transform_review(data: JSONObject) -> Review:
    """Transforme un element de la liste des critiques en Review."""
    return Review(
        id=_require(data, "id", str),
        author=_require(data, "author", str),
        content=_require(data, "content", str),
    )


def transform_video_link(data: JSONObject) -> VideoLink:
    """
    Transforme un element de la liste des videos en VideoLink.

    Un type de video inconnu est une erreur : aucune valeur par defaut.
    """
    type_value = _require(data, "type", str)
    try:
        video_type = VideoType(type_value)
    except ValueError as e:
        raise DataAccessParsingError(
            f"Unknown video type: {type_value!r}", field="type", cause=e
        ) from e

    try:
        return VideoLink(
            id=_require(data, "id", str),
            key=_require(data, "key", str),
            name=_require(data, "name", str),
            site=_require(data, "site", str),
            size=_require(data, "size", int),
            type=video_type,
        )
    except ValueError as e:
        raise DataAccessParsingError(f"Invalid video link: {e}", field="size", cause=e) from e


def _transform_results(data: JSONObject, element_transformer: JSONTransformer[T]) -> list[T]:
    results = []
    for index, item in enumerate(_require_list(data, RESULTS)):
        if not isinstance(item, dict):
            raise DataAccessParsingError(
                f"Field '{RESULTS}[{index}]' must be a JSON object", field=RESULTS
            )
        results.append(element_transformer(item))
    return results


class DataPageTransformer(Generic[T]):
    """
    Transforme une reponse paginee TMDB en DataPage.

    Si TMDB annonce total_pages == 0, le numero de page est force a 0 :
    l'API renvoie le numero demande meme quand le resultat est vide.

    Example:
        transformer = DataPageTransformer(transform_review)
        page = transformer(payload)
    """

    def __init__(self, element_transformer: JSONTransformer[T]) -> None:
        """
        Args:
            element_transformer: Transformateur applique a chaque element de "results"
        """
        self._element_transformer = element_transformer

    def __call__(self, data: JSONObject) -> DataPage[T]:
        page_number = _require(data, PAGE, int)
        total_page_count = _require(data, TOTAL_PAGES, int)
        total_result_count = _require(data, TOTAL_RESULTS, int)
        results = _transform_results(data, self._element_transformer)

        if total_page_count == 0:
            page_number = 0

        try:
            return DataPage(
                page_number=page_number,
                total_page_count=total_page_count,
                total_result_count=total_result_count,
                results=tuple(results),
            )
        except ValueError as e:
            raise DataAccessParsingError(f"Invalid page metadata: {e}", field=PAGE, cause=e) from e


class ResultListTransformer(Generic[T]):
    """Extrait la liste "results" d'une reponse TMDB non paginee."""

    def __init__(self, element_transformer: JSONTransformer[T]) -> None:
        self._element_transformer = element_transformer

    def __call__(self, data: JSONObject) -> list[T]:
        return _transform_results(data, self._element_transformer)
