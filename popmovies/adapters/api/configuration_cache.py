"""
Cache local de la configuration distante TMDB.

La configuration TMDB (URLs et tailles d'images) change rarement : elle est
conservee dans un fichier JSON local dont la date de modification sert de
seul indicateur de fraicheur.

Au demarrage (init):
- Fichier present et plus recent que maintenant - TTL : il est adopte,
  aucun appel reseau
- Fichier absent, perime ou illisible : la configuration par defaut
  embarquee est adoptee immediatement, puis une tache de fond telecharge
  la configuration TMDB, reecrit le fichier et publie la nouvelle valeur

Un echec de la tache de fond est journalise puis ignore : la derniere
configuration adoptee reste en vigueur.

Usage:
    manager = TMDBConfigurationCacheManager(client, Path("cache.json"), ttl_days=3)
    await manager.init()
    configuration = manager.get_tmdb_configuration()
"""

import asyncio
import json
import time
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

from popmovies.adapters.api.transformers import (
    configuration_to_json,
    transform_configuration,
)
from popmovies.core.exceptions import DataAccessError, DataAccessParsingError
from popmovies.core.ports.api_clients import IConfigurationClient
from popmovies.core.value_objects import Configuration
from popmovies.utils.constants import SECONDS_PER_DAY

DEFAULT_CONFIGURATION_FILE = Path(__file__).parent / "resources" / "tmdb_default_config.json"


class ConfigurationSource(Enum):
    """Origine de la configuration actuellement adoptee.

    Valeurs:
        UNINITIALIZED: init() n'a pas encore ete appele
        CACHE: Fichier de cache local encore frais
        DEFAULT: Configuration embarquee, rafraichissement en cours ou echoue
        REMOTE: Configuration telechargee depuis TMDB par le rafraichissement
    """

    UNINITIALIZED = "uninitialized"
    CACHE = "cache"
    DEFAULT = "default"
    REMOTE = "remote"


class TMDBConfigurationCacheManager:
    """
    Source unique de la configuration TMDB pour l'application.

    La configuration est remplacee en bloc (jamais modifiee sur place) :
    la nouvelle instance est entierement construite avant d'etre publiee,
    les lecteurs voient donc l'ancienne ou la nouvelle, jamais un etat partiel.

    Attributes:
        cache_file: Chemin du fichier de cache JSON
    """

    def __init__(
        self,
        configuration_client: IConfigurationClient,
        cache_file: Path,
        ttl_days: int,
        default_configuration_file: Path = DEFAULT_CONFIGURATION_FILE,
    ) -> None:
        """
        Initialise le gestionnaire de cache.

        Le seuil de peremption (maintenant - TTL) est calcule une seule fois ici.

        Args:
            configuration_client: Client de la configuration distante
            cache_file: Chemin du fichier de cache JSON
            ttl_days: Duree de vie du cache en jours (> 0)
            default_configuration_file: Configuration JSON embarquee

        Raises:
            ValueError: Si ttl_days <= 0
        """
        if ttl_days <= 0:
            raise ValueError("ttl_days must be positive.")

        self.cache_file = cache_file
        self._configuration_client = configuration_client
        self._default_configuration_file = default_configuration_file
        self._stale_before = time.time() - ttl_days * SECONDS_PER_DAY

        self._configuration: Optional[Configuration] = None
        self._source = ConfigurationSource.UNINITIALIZED
        self._initialized = False
        self._init_lock = asyncio.Lock()
        self._refresh_task: Optional[asyncio.Task] = None

    @property
    def is_initialized(self) -> bool:
        """Indique si init() a adopte une configuration."""
        return self._initialized

    @property
    def source(self) -> ConfigurationSource:
        """Origine de la configuration actuellement adoptee."""
        return self._source

    @property
    def refresh_pending(self) -> bool:
        """Indique si un rafraichissement de fond est en cours."""
        return self._refresh_task is not None and not self._refresh_task.done()

    async def init(self) -> None:
        """
        Charge la configuration (cache ou defaut) et planifie le rafraichissement.

        Idempotent : les appels suivants ne font rien. Ne bloque jamais
        sur le reseau, seulement sur la lecture de fichiers locaux.

        Raises:
            DataAccessParsingError: Configuration embarquee invalide
            OSError: Configuration embarquee illisible
        """
        async with self._init_lock:
            if self._initialized:
                return

            loop = asyncio.get_running_loop()
            configuration = await loop.run_in_executor(None, self._read_cached_configuration)

            if configuration is not None:
                self._publish(configuration, ConfigurationSource.CACHE)
                logger.info("Configuration TMDB chargee depuis le cache", path=str(self.cache_file))
            else:
                default_configuration = await loop.run_in_executor(
                    None, self._read_default_configuration
                )
                self._publish(default_configuration, ConfigurationSource.DEFAULT)
                logger.info("Configuration TMDB par defaut adoptee, rafraichissement planifie")
                self._refresh_task = asyncio.create_task(self._refresh())

            self._initialized = True

    def get_tmdb_configuration(self) -> Configuration:
        """
        Retourne la derniere configuration adoptee (defaut ou rafraichie).

        Raises:
            RuntimeError: Si init() n'a pas ete appele
        """
        if not self._initialized or self._configuration is None:
            raise RuntimeError(
                "Configuration cache has not been initialized."
                " init() must be called first to initialize the configuration cache."
            )
        return self._configuration

    async def wait_for_refresh(self) -> None:
        """Attend la fin du rafraichissement de fond, s'il y en a un."""
        if self._refresh_task is not None:
            await self._refresh_task

    def _publish(self, configuration: Configuration, source: ConfigurationSource) -> None:
        self._configuration = configuration
        self._source = source

    def _read_cached_configuration(self) -> Optional[Configuration]:
        """
        Lit le fichier de cache s'il est present et frais.

        Un fichier illisible ou partiellement ecrit est traite comme absent.

        Returns:
            Configuration du cache, ou None si absent, perime ou invalide
        """
        try:
            modified_at = self.cache_file.stat().st_mtime
        except FileNotFoundError:
            logger.debug("Pas de cache de configuration", path=str(self.cache_file))
            return None
        except OSError as e:
            logger.warning("Cache de configuration inaccessible", path=str(self.cache_file), error=str(e))
            return None

        if modified_at <= self._stale_before:
            logger.info("Cache de configuration perime", path=str(self.cache_file))
            return None

        try:
            content = self.cache_file.read_text(encoding="utf-8")
            return transform_configuration(json.loads(content))
        except (OSError, ValueError, RecursionError, DataAccessParsingError) as e:
            logger.warning("Cache de configuration invalide, ignore", path=str(self.cache_file), error=str(e))
            return None

    def _read_default_configuration(self) -> Configuration:
        content = self._default_configuration_file.read_text(encoding="utf-8")
        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise DataAccessParsingError(
                "Failed to parse default configuration JSON.", cause=e
            ) from e
        return transform_configuration(data)

    def _write_cache_file(self, configuration: Configuration) -> None:
        self.cache_file.parent.mkdir(parents=True, exist_ok=True)
        self.cache_file.write_text(
            json.dumps(configuration_to_json(configuration), indent=2),
            encoding="utf-8",
        )

    async def _refresh(self) -> None:
        """
        Telecharge la configuration, reecrit le cache puis la publie.

        Les erreurs reseau, de parsing et d'ecriture sont journalisees et
        ignorees : la configuration courante reste en vigueur.
        """
        try:
            configuration = await self._configuration_client.get_configuration()
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._write_cache_file, configuration)
        except (DataAccessError, OSError) as e:
            logger.warning(
                "Echec du rafraichissement de la configuration TMDB, configuration conservee",
                source=self._source.value,
                error=str(e),
            )
            return

        self._publish(configuration, ConfigurationSource.REMOTE)
        logger.info("Configuration TMDB rafraichie", path=str(self.cache_file))
