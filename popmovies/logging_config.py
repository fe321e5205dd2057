"""
Configuration du logging de PopMovies via loguru.

Les modules de popmovies journalisent avec des champs structures
(url, path, error...) passes en arguments nommes. Deux sorties :
- Console (stderr) : message suivi des champs structures, au niveau choisi
- Fichier : une ligne JSON par enregistrement, DEBUG inclus (URLs des
  requetes TMDB, cle API retiree), avec rotation

Les traces d'exception n'affichent jamais les variables locales : elles
contiennent la cle API et les URLs completes des requetes.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/popmovies.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de PopMovies.

    Args :
        log_level : Niveau minimum affiche sur stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON des logs, son repertoire est cree si besoin
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservees
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
        diagnose=False,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # lectures/ecritures du cache depuis l'executor
        diagnose=False,
    )

    logger.debug("Logging configure", log_file=str(log_file), console_level=log_level)
