"""
Objets valeur immutables representant les donnees TMDB.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- ImageSize : Taille d'image TMDB (w45, w92, ..., original)
- Configuration : Configuration distante TMDB (URLs et tailles d'images)
- DataPage : Page de resultats pagines
- Movie : Film
- Review : Critique d'un film
- VideoType : Type de video (Trailer, Teaser, Clip, Featurette)
- VideoLink : Lien video d'un film
"""

from popmovies.core.value_objects.configuration import (
    Configuration,
    ImageSize,
)
from popmovies.core.value_objects.data_page import DataPage
from popmovies.core.value_objects.movie import (
    Movie,
    Review,
    VideoLink,
    VideoType,
)

__all__ = [
    "ImageSize",
    "Configuration",
    "DataPage",
    "Movie",
    "Review",
    "VideoType",
    "VideoLink",
]
