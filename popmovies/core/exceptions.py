"""
Exceptions d'acces aux donnees TMDB.

Deux familles d'erreurs remontent a l'appelant d'une operation client :
- DataAccessRequestError : TMDB n'a pas pu etre joint (URL invalide,
  connexion, timeout, code HTTP different de 200)
- DataAccessParsingError : TMDB a repondu avec un contenu inexploitable
  (JSON invalide, champ manquant ou mal type, valeur inconnue)

Les erreurs de programmation (numero de page hors limites, mauvaise
utilisation du builder, configuration lue avant init) ne sont PAS
encapsulees : ValueError et RuntimeError remontent telles quelles.
"""

from typing import Optional


class DataAccessError(Exception):
    """
    Erreur de base de la couche d'acces aux donnees.

    Attributes:
        cause: Exception d'origine (aussi chainee via __cause__), ou None
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """
        Initialise l'erreur avec sa cause optionnelle.

        Args:
            message: Description lisible de l'erreur
            cause: Exception d'origine
        """
        self.cause = cause
        super().__init__(message)


class DataAccessRequestError(DataAccessError):
    """Echec de la requete HTTP vers TMDB (URL, transport, statut)."""


class DataAccessParsingError(DataAccessError):
    """
    Contenu de reponse TMDB impossible a transformer en modele.

    Attributes:
        field: Nom du champ JSON fautif, ou None si non applicable
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.field = field
        super().__init__(message, cause)


class MalformedURLError(ValueError):
    """URL de requete invalide (schema absent ou syntaxe incorrecte)."""
