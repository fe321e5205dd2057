"""
PopMovies - Couche d'acces aux donnees TMDB.

Ce package fournit un client asynchrone pour les listes de films TMDB
(mieux notes, populaires), les critiques et les videos d'un film, ainsi
qu'un cache local de la configuration distante TMDB.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, exceptions)
- adapters/ : Couche infrastructure (clients API TMDB, CLI)
"""
