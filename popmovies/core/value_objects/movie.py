"""
Objets valeur pour les films TMDB et leurs ressources associees.

Objets valeur immutables representant un film, une critique et un lien video.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilite.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class Movie:
    """
    Film tel que retourne par les listes TMDB (mieux notes, populaires).

    Attributs :
        poster_path : Chemin relatif de l'affiche (ex: "/abc.jpg")
        adult : Film reserve aux adultes
        overview : Resume
        release_date : Date de sortie
        genre_ids : IDs de genre TMDB (au moins un)
        id : ID TMDB du film
        original_title : Titre en langue originale
        original_language : Code ISO 639-1 de la langue originale
        title : Titre affiche
        backdrop_path : Chemin relatif de l'image de fond
        popularity : Score de popularite TMDB
        vote_count : Nombre de votes (>= 0)
        video : Le film possede des videos
        vote_average : Note moyenne
    """

    poster_path: str
    adult: bool
    overview: str
    release_date: date
    genre_ids: tuple[int, ...]
    id: int
    original_title: str
    original_language: str
    title: str
    backdrop_path: str
    popularity: float
    vote_count: int
    video: bool
    vote_average: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "genre_ids", tuple(self.genre_ids))
        if not self.genre_ids:
            raise ValueError("genre_ids must not be empty.")
        if self.vote_count < 0:
            raise ValueError("vote_count must be non-negative.")

    @property
    def year(self) -> int:
        """Annee de sortie."""
        return self.release_date.year


@dataclass(frozen=True)
class Review:
    """
    Critique d'un film.

    Attributs :
        id : ID TMDB de la critique
        author : Auteur
        content : Texte de la critique
    """

    id: str
    author: str
    content: str


class VideoType(Enum):
    """Type de video TMDB (ensemble ferme).

    Valeurs:
        TRAILER: Bande-annonce
        TEASER: Teaser
        CLIP: Extrait
        FEATURETTE: Making-of court
    """

    TRAILER = "Trailer"
    TEASER = "Teaser"
    CLIP = "Clip"
    FEATURETTE = "Featurette"


@dataclass(frozen=True)
class VideoLink:
    """
    Lien vers une video associee a un film (hebergee sur YouTube, Vimeo...).

    Attributs :
        id : ID TMDB de la video
        key : Cle de la video sur le site d'hebergement
        name : Titre de la video
        site : Site d'hebergement (ex: "YouTube")
        size : Resolution verticale (ex: 1080), strictement positive
        type : Type de video
    """

    id: str
    key: str
    name: str
    site: str
    size: int
    type: VideoType

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be a positive integer.")
