"""
Constantes globales pour PopMovies.

Ce module contient les constantes utilisees par les clients TMDB:
- Bornes des numeros de page acceptees par l'API
- Nom du parametre de requete portant la cle API
- Format des dates de sortie TMDB
"""

# TMDB refuse les pages au-dela de 1000 sur les listes de films
MIN_PAGE_NUMBER = 1
MAX_PAGE_NUMBER = 1000

# Toujours emis en premier dans la query string
API_KEY_QUERY_PARAM = "api_key"

# Format des champs release_date (ex: "2010-07-15")
TMDB_DATE_FORMAT = "%Y-%m-%d"

# Secondes par jour, pour le TTL du cache de configuration
SECONDS_PER_DAY = 24 * 60 * 60
