"""
Construction des URLs d'images hebergees par TMDB.

Les URLs sont derivees de la configuration TMDB courante :
URL de base + jeton de taille + chemin relatif (ex: poster_path d'un Movie).
"""

from loguru import logger

from popmovies.adapters.api.configuration_cache import TMDBConfigurationCacheManager
from popmovies.core.value_objects import ImageSize


class TMDBAssetURLFactory:
    """
    Fabrique d'URLs d'images TMDB (affiches, images de fond).

    Si la taille demandee n'est pas proposee par la configuration, la plus
    petite taille disponible (la premiere de la liste) est utilisee a la
    place : la fabrique ne leve jamais d'erreur pour une taille absente.

    Example:
        factory = TMDBAssetURLFactory(cache_manager)
        url = factory.get_poster_image_url(movie.poster_path, ImageSize.W_185)
    """

    def __init__(self, configuration_cache: TMDBConfigurationCacheManager) -> None:
        """
        Args:
            configuration_cache: Gestionnaire de la configuration TMDB (initialise)
        """
        self._configuration_cache = configuration_cache

    def get_poster_image_url(
        self, relative_path: str, image_size: ImageSize, secure: bool = False
    ) -> str:
        """
        Construit l'URL d'une affiche.

        Args:
            relative_path: Chemin relatif de l'image (ex: "/abc.jpg")
            image_size: Taille souhaitee
            secure: Utiliser l'URL de base HTTPS

        Returns:
            URL complete de l'affiche
        """
        configuration = self._configuration_cache.get_tmdb_configuration()
        return self._build_image_url(
            "poster",
            relative_path,
            image_size,
            configuration.poster_sizes,
            configuration.asset_secure_base_url if secure else configuration.asset_base_url,
        )

    def get_backdrop_image_url(
        self, relative_path: str, image_size: ImageSize, secure: bool = False
    ) -> str:
        """Construit l'URL d'une image de fond (meme repli que les affiches)."""
        configuration = self._configuration_cache.get_tmdb_configuration()
        return self._build_image_url(
            "backdrop",
            relative_path,
            image_size,
            configuration.backdrop_sizes,
            configuration.asset_secure_base_url if secure else configuration.asset_base_url,
        )

    @staticmethod
    def _build_image_url(
        kind: str,
        relative_path: str,
        image_size: ImageSize,
        available_sizes: tuple[ImageSize, ...],
        base_url: str,
    ) -> str:
        result_size = image_size
        if image_size not in available_sizes:
            result_size = available_sizes[0] if available_sizes else ImageSize.ORIGINAL
            logger.warning(
                "Taille d'image indisponible, repli sur la plus petite taille",
                kind=kind,
                requested=image_size.tmdb_key,
                used=result_size.tmdb_key,
            )

        result = f"{base_url}{result_size.tmdb_key}{relative_path}"
        logger.debug("URL d'image construite", kind=kind, url=result)
        return result
