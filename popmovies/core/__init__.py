"""
Couche domaine (core).

Contient les objets valeur, les ports (interfaces abstraites) et les
exceptions d'acces aux donnees.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, fichiers, CLI).

Sous-packages :
- value_objects/ : Objets valeur immutables (Configuration, Movie, DataPage)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
