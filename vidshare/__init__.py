"""
vidshare - Simulation en memoire d'une plateforme de partage de videos.

Comptes, chaines, videos, commentaires, abonnements et playlists, pilotes
commande par commande depuis un shell interactif.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, generateur d'ids)
- services/ : Couche application (annuaire, session, benchmark)
- infrastructure/ : Tables en memoire implementant les ports
- adapters/ : Couche interface (CLI Typer + Rich)
"""
