"""
Objet valeur pour une page de resultats pagines TMDB.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DataPage(Generic[T]):
    """
    Une page d'un ensemble de resultats pagine.

    Invariants verifies a la construction (ValueError sinon) :
    - 1 <= page_number <= total_page_count
    - total_result_count >= 0
    La seule exception est la page vide : page_number == total_page_count == 0.

    Attributs :
        page_number : Numero de la page (commence a 1, 0 pour la page vide)
        total_page_count : Nombre total de pages
        total_result_count : Nombre total de resultats toutes pages confondues
        results : Resultats de la page, dans l'ordre de l'API
    """

    page_number: int
    total_page_count: int
    total_result_count: int
    results: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if self.total_result_count < 0:
            raise ValueError("total_result_count must be non-negative.")
        if self.total_page_count == 0:
            if self.page_number != 0:
                raise ValueError("page_number must be 0 when total_page_count is 0.")
        else:
            if self.total_page_count < 0:
                raise ValueError("total_page_count must be positive.")
            if self.page_number < 1:
                raise ValueError("page_number must be positive.")
            if self.page_number > self.total_page_count:
                raise ValueError(
                    "page_number must be less than or equal to total_page_count."
                )
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def is_empty(self) -> bool:
        """Indique si la page ne contient aucun resultat."""
        return len(self.results) == 0

    @property
    def has_next_page(self) -> bool:
        """Indique si une page suivante existe."""
        return self.page_number < self.total_page_count
