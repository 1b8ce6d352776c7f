"""
Couche infrastructure de vidshare.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Tables en memoire de l'annuaire (utilisateurs, chaines, videos)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer de stockage sans modifier la logique metier.
"""
