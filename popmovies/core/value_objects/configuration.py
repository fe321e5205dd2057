"""
Objets valeur pour la configuration distante TMDB.

La configuration TMDB fournit les URLs de base des images et les tailles
disponibles pour chaque type d'image (affiche, fond, logo, profil, still).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ImageSize(Enum):
    """Taille d'image TMDB, avec le jeton exact utilise dans les URLs.

    Valeurs:
        W_45 .. W_1280: Largeur fixe en pixels
        H_632: Hauteur fixe en pixels
        ORIGINAL: Image originale non redimensionnee
    """

    W_45 = "w45"
    W_92 = "w92"
    W_154 = "w154"
    W_185 = "w185"
    W_300 = "w300"
    W_342 = "w342"
    W_500 = "w500"
    W_780 = "w780"
    W_1280 = "w1280"
    H_632 = "h632"
    ORIGINAL = "original"

    @property
    def tmdb_key(self) -> str:
        """Jeton TMDB de la taille (ex: "w185")."""
        return self.value

    @classmethod
    def from_tmdb_key(cls, tmdb_key: str) -> Optional["ImageSize"]:
        """
        Retrouve une taille a partir de son jeton TMDB.

        Args:
            tmdb_key: Jeton tel que present dans la configuration (ex: "w92")

        Returns:
            La taille correspondante, ou None si le jeton est inconnu
        """
        try:
            return cls(tmdb_key)
        except ValueError:
            return None


@dataclass(frozen=True)
class Configuration:
    """
    Configuration distante TMDB (section "images").

    Objet valeur immutable : une nouvelle instance remplace l'ancienne
    a chaque rafraichissement, elle n'est jamais modifiee sur place.

    Attributs :
        asset_base_url : URL de base HTTP des images
        asset_secure_base_url : URL de base HTTPS des images
        backdrop_sizes : Tailles disponibles pour les images de fond
        logo_sizes : Tailles disponibles pour les logos
        poster_sizes : Tailles disponibles pour les affiches (ordre TMDB)
        profile_sizes : Tailles disponibles pour les photos de profil
        still_sizes : Tailles disponibles pour les captures d'episodes
    """

    asset_base_url: str
    asset_secure_base_url: str
    backdrop_sizes: tuple[ImageSize, ...] = ()
    logo_sizes: tuple[ImageSize, ...] = ()
    poster_sizes: tuple[ImageSize, ...] = ()
    profile_sizes: tuple[ImageSize, ...] = ()
    still_sizes: tuple[ImageSize, ...] = ()

    def __post_init__(self) -> None:
        # Accepte des listes mais stocke des tuples (immutabilite)
        for name in (
            "backdrop_sizes",
            "logo_sizes",
            "poster_sizes",
            "profile_sizes",
            "still_sizes",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))
